"""Render resolution entities into canonical lock file text."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List

from common.logging_utils import extra_context, is_debug_enabled
from constants import Constants, RepositoryType
from versioning.models import format_version_range

from .errors import ContractViolationError
from .models import Conflict, PackageResolution, ResolvedPackage, SourceFile

logger = logging.getLogger(__name__)


def _group_by(items, key) -> Dict:
    """Group items by key; dict order follows the first occurrence of each key."""
    groups: Dict = {}
    for item in items:
        groups.setdefault(key(item), []).append(item)
    return groups


def _resolved_packages(resolution: PackageResolution) -> List[ResolvedPackage]:
    packages: List[ResolvedPackage] = []
    for name, entry in resolution.items():
        if isinstance(entry, Conflict):
            raise ContractViolationError(
                f"Cannot serialize package {name!r}: resolution contains a conflict "
                f"({entry.source1!r}, {entry.source2!r})"
            )
        packages.append(entry)
    return packages


def _package_lines(resolution: PackageResolution) -> Iterable[str]:
    yield RepositoryType.NUGET.value
    groups = _group_by(_resolved_packages(resolution), lambda p: p.source.identifier)
    for source, packages in groups.items():
        yield f"{Constants.SECTION_INDENT}{Constants.REMOTE_PREFIX} {source}"
        yield f"{Constants.SECTION_INDENT}{Constants.SPECS_PREFIX}"
        for package in packages:
            yield f"{Constants.ENTRY_INDENT}{package.name} ({package.version})"
            for dep_name, dep_range in package.direct_dependencies:
                yield f"{Constants.DEPENDENCY_INDENT}{dep_name} ({format_version_range(dep_range)})"


def serialize_packages(resolution: PackageResolution) -> str:
    """Render the NUGET section.

    Packages are grouped under one ``remote:`` block per source, in the order
    sources are first seen; within a group the resolution order is kept.

    Raises:
        ContractViolationError: If any entry is a Conflict. Callers must run
            the conflict reporter first.
    """
    text = Constants.LINE_SEPARATOR.join(_package_lines(resolution))
    if is_debug_enabled(logger):
        logger.debug(
            "Serialized packages",
            extra=extra_context(
                event="serialize", component="lockfile", action="serialize_packages",
                count=len(resolution),
            ),
        )
    return text


def _source_file_lines(files: Iterable[SourceFile]) -> Iterable[str]:
    yield RepositoryType.GITHUB.value
    groups = _group_by(files, lambda f: (f.owner, f.project))
    for (owner, project), grouped in groups.items():
        yield f"{Constants.SECTION_INDENT}{Constants.REMOTE_PREFIX} {owner}/{project}"
        yield f"{Constants.SECTION_INDENT}{Constants.SPECS_PREFIX}"
        for source_file in grouped:
            path = source_file.path.lstrip("/")
            if source_file.commit is not None:
                yield f"{Constants.ENTRY_INDENT}{path} ({source_file.commit})"
            else:
                yield f"{Constants.ENTRY_INDENT}{path}"


def serialize_source_files(files: Iterable[SourceFile]) -> str:
    """Render the GITHUB section, one ``remote:`` block per owner/project."""
    return Constants.LINE_SEPARATOR.join(_source_file_lines(files))


def serialize_lock_file(resolution: PackageResolution, files: Iterable[SourceFile]) -> str:
    """Render the complete lock file: NUGET section, then GITHUB section."""
    return Constants.LINE_SEPARATOR.join(
        [serialize_packages(resolution), serialize_source_files(files)]
    )
