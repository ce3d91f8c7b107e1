"""Exceptions raised while reading or writing lock files."""

from __future__ import annotations

from typing import Optional


class LockFileError(Exception):
    """Base class for lock file failures."""


class LockFileParseError(LockFileError, ValueError):
    """Raised when a lock file line does not fit the current parser state."""

    def __init__(self, message: str, line_number: Optional[int] = None, line: Optional[str] = None):
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"{message} (line {line_number}: {line!r})"
        super().__init__(message)


class ResolutionConflictError(LockFileError):
    """Raised when the resolver reported conflicts and no lock file can be written."""

    def __init__(self, message: str, report: str):
        self.report = report
        super().__init__(message)


class ContractViolationError(LockFileError):
    """Raised when a caller hands the serializer or reporter data it must never see."""
