"""Data models for version constraints and pinned versions."""

import re
from dataclasses import dataclass
from typing import Union

import semantic_version

# Pinned versions are plain semantic_version.Version values.
SemVer = semantic_version.Version


_SHORT_VERSION = re.compile(r"^\d+(?:\.\d+){0,2}$")


def parse_semver(text: str) -> SemVer:
    """Parse a pinned package version.

    Strict SemVer, plus purely numeric short forms ("6", "6.0") which are
    padded to three parts. Four-part NuGet versions are rejected, since
    SemVer has nowhere to keep the fourth number.

    Raises:
        ValueError: If the text is not a version.
    """
    text = text.strip()
    try:
        return semantic_version.Version(text)
    except ValueError:
        if not _SHORT_VERSION.match(text):
            raise
        return semantic_version.Version.coerce(text)


VersionLike = Union[SemVer, str]


class VersionRange:
    """Base class for the version constraint variants."""


@dataclass(frozen=True)
class Minimum(VersionRange):
    """At least the given version."""
    version: VersionLike


@dataclass(frozen=True)
class Specific(VersionRange):
    """Exactly the given version."""
    version: VersionLike


@dataclass(frozen=True)
class Latest(VersionRange):
    """Any version; the newest wins."""


@dataclass(frozen=True)
class Range(VersionRange):
    """Between two versions. Inclusivity flags are carried but never rendered."""
    lower_inclusive: bool
    low: VersionLike
    high: VersionLike
    upper_inclusive: bool


LATEST = Latest()


def format_version_range(version_range: VersionRange) -> str:
    """Render a constraint the way it appears in the lock file and in conflict reports."""
    if isinstance(version_range, Minimum):
        return f">= {version_range.version}"
    if isinstance(version_range, Specific):
        return str(version_range.version)
    if isinstance(version_range, Latest):
        return ">= 0"
    if isinstance(version_range, Range):
        return f">= {version_range.low}, < {version_range.high}"
    raise TypeError(f"Unsupported version range: {version_range!r}")
