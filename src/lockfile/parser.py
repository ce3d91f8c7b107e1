"""Lock file parser.

Each line is first classified on its own (section header, remote, specs,
dependency, package or source file) and then folded into an immutable
ParseState. Indentation decides between a package line (4 spaces) and a
dependency line (6 spaces); which kind of entry a 4-space line is depends on
the section header seen last.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from common.logging_utils import Timer, extra_context, is_debug_enabled
from constants import Constants, RepositoryType
from versioning.models import LATEST, parse_semver

from .errors import LockFileParseError
from .models import PackageSource, ResolvedPackage, SourceFile

logger = logging.getLogger(__name__)


class LineKind(Enum):
    """What a single lock file line means."""

    REPOSITORY_TYPE = "repository_type"
    BLANK = "blank"
    REMOTE = "remote"
    SPECS = "specs"
    NUGET_DEPENDENCY = "nuget_dependency"
    NUGET_PACKAGE = "nuget_package"
    SOURCE_FILE = "source_file"


@dataclass(frozen=True)
class ClassifiedLine:
    """Result of classifying one line.

    ``value`` holds the section name, the remote, the dependency name or the
    trimmed entry text depending on ``kind``; ``version`` is only set for
    dependency lines.
    """

    kind: LineKind
    value: str = ""
    version: Optional[str] = None


@dataclass(frozen=True)
class ParseState:
    """Parser state between lines. Most recent entries come first."""

    repository_type: Optional[RepositoryType] = None
    remote: Optional[str] = None
    packages: Tuple[ResolvedPackage, ...] = ()
    source_files: Tuple[SourceFile, ...] = ()


def _remove_brackets(text: str) -> str:
    return text.replace("(", "").replace(")", "")


def classify_line(
    repository_type: Optional[RepositoryType], line: str, line_number: Optional[int] = None
) -> ClassifiedLine:
    """Classify a line given the section it appears in.

    Raises:
        LockFileParseError: If an entry line appears before any section header.
    """
    trimmed = line.strip()
    if trimmed in (RepositoryType.NUGET.value, RepositoryType.GITHUB.value):
        return ClassifiedLine(LineKind.REPOSITORY_TYPE, trimmed)
    if not trimmed:
        return ClassifiedLine(LineKind.BLANK)
    if trimmed.startswith(Constants.REMOTE_PREFIX):
        _, sep, remote = trimmed.partition(": ")
        if not sep:
            remote = trimmed[len(Constants.REMOTE_PREFIX):]
        return ClassifiedLine(LineKind.REMOTE, remote.strip())
    if trimmed.startswith(Constants.SPECS_PREFIX):
        return ClassifiedLine(LineKind.SPECS)
    if line.startswith(Constants.DEPENDENCY_INDENT):
        name, sep, version = trimmed.partition("(")
        if not sep:
            raise LockFileParseError("Dependency line without a version", line_number, line)
        return ClassifiedLine(LineKind.NUGET_DEPENDENCY, name.strip(), _remove_brackets(version).strip())
    if repository_type is RepositoryType.NUGET:
        return ClassifiedLine(LineKind.NUGET_PACKAGE, trimmed)
    if repository_type is RepositoryType.GITHUB:
        return ClassifiedLine(LineKind.SOURCE_FILE, trimmed)
    raise LockFileParseError("Unknown lock file format", line_number, line)


def _add_package(state: ParseState, details: str, line_number: int, line: str) -> ParseState:
    if not state.remote:
        raise LockFileParseError("No source has been specified", line_number, line)
    parts = details.split(" ")
    if len(parts) != 2:
        raise LockFileParseError("Expected '<name> (<version>)'", line_number, line)
    name, version_text = parts
    try:
        version = parse_semver(_remove_brackets(version_text))
    except ValueError as e:
        raise LockFileParseError(f"Invalid package version: {e}", line_number, line) from e
    package = ResolvedPackage(
        source=PackageSource.parse(state.remote),
        name=name,
        version=version,
    )
    return replace(state, packages=(package,) + state.packages)


def _add_dependency(state: ParseState, name: str, line_number: int, line: str) -> ParseState:
    if not state.packages:
        raise LockFileParseError(
            "Cannot set a dependency - no package has been specified", line_number, line
        )
    current, *others = state.packages
    # Only the name survives a round trip; the written range is not read back.
    return replace(state, packages=(current.with_dependency(name, LATEST), *others))


def _add_source_file(state: ParseState, details: str, line_number: int, line: str) -> ParseState:
    remote_parts = state.remote.split("/") if state.remote is not None else []
    if len(remote_parts) != 2:
        raise LockFileParseError(
            f"Invalid remote details {state.remote!r}, expected '<owner>/<project>'",
            line_number,
            line,
        )
    owner, project = remote_parts
    parts = details.split(" ")
    if len(parts) == 1:
        path, commit = parts[0], None
    elif len(parts) == 2:
        path, commit = parts[0], _remove_brackets(parts[1])
    else:
        raise LockFileParseError("Invalid file source details", line_number, line)
    source_file = SourceFile(owner=owner, project=project, path=path, commit=commit)
    return replace(state, source_files=(source_file,) + state.source_files)


def apply_line(state: ParseState, line: str, line_number: int) -> ParseState:
    """Fold one line into the state, returning the new state."""
    classified = classify_line(state.repository_type, line, line_number)
    kind = classified.kind
    if kind is LineKind.REPOSITORY_TYPE:
        return replace(state, repository_type=RepositoryType(classified.value))
    if kind in (LineKind.BLANK, LineKind.SPECS):
        return state
    if kind is LineKind.REMOTE:
        return replace(state, remote=classified.value)
    if kind is LineKind.NUGET_DEPENDENCY:
        return _add_dependency(state, classified.value, line_number, line)
    if kind is LineKind.NUGET_PACKAGE:
        return _add_package(state, classified.value, line_number, line)
    return _add_source_file(state, classified.value, line_number, line)


def parse(lines: Iterable[str]) -> Tuple[List[ResolvedPackage], List[SourceFile]]:
    """Parse lock file lines into packages and source files, both in file order.

    Args:
        lines: Lock file lines without trailing line separators.

    Returns:
        Tuple of (packages, source files).

    Raises:
        LockFileParseError: On the first line that does not fit; nothing is
            returned for the lines before it.
    """
    state = ParseState()
    with Timer() as t:
        for line_number, line in enumerate(lines, start=1):
            state = apply_line(state, line, line_number)
    packages = list(reversed(state.packages))
    source_files = list(reversed(state.source_files))
    if is_debug_enabled(logger):
        logger.debug(
            "Parsed lock file",
            extra=extra_context(
                event="parse", component="lockfile", action="parse",
                package_count=len(packages), source_file_count=len(source_files),
                duration_ms=t.duration_ms(),
            ),
        )
    return packages, source_files
