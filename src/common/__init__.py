"""Shared helpers used across the CLI and the lockfile package."""
