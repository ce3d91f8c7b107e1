"""Version constraint model shared by the lock file reader and writer."""

from .models import (  # noqa: F401
    LATEST,
    Latest,
    Minimum,
    Range,
    SemVer,
    Specific,
    VersionRange,
    format_version_range,
    parse_semver,
)

__all__ = [
    "LATEST",
    "Latest",
    "Minimum",
    "Range",
    "SemVer",
    "Specific",
    "VersionRange",
    "format_version_range",
    "parse_semver",
]
