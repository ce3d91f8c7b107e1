"""Resolution entities written to and read from the lock file."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Optional, Tuple, Union

from versioning.models import SemVer, VersionRange


class PackageSource:
    """Where a package comes from; its identifier is the lock file remote."""

    @property
    def identifier(self) -> str:
        raise NotImplementedError

    @staticmethod
    def parse(source: str) -> "PackageSource":
        """Build a source from a remote string: URLs are feeds, anything else a local path."""
        source = source.strip()
        if source.lower().startswith(("http://", "https://")):
            return Nuget(source)
        return LocalNuget(source)


@dataclass(frozen=True)
class Nuget(PackageSource):
    """A remote NuGet feed."""
    url: str

    @property
    def identifier(self) -> str:
        return self.url


@dataclass(frozen=True)
class LocalNuget(PackageSource):
    """A directory of .nupkg files."""
    path: str

    @property
    def identifier(self) -> str:
        return self.path


Dependency = Tuple[str, VersionRange]


@dataclass(frozen=True)
class ResolvedPackage:
    """A package pinned to a concrete version by resolution."""
    source: PackageSource
    name: str
    version: SemVer
    direct_dependencies: Tuple[Dependency, ...] = ()

    def with_dependency(self, name: str, version_range: VersionRange) -> "ResolvedPackage":
        """Return a copy with one more dependency appended, keeping declaration order."""
        return replace(
            self,
            direct_dependencies=self.direct_dependencies + ((name, version_range),),
        )


@dataclass(frozen=True)
class PackageRequirement:
    """A requested constraint on a package name."""
    name: str
    version_range: VersionRange


@dataclass(frozen=True)
class FromRoot:
    """The dependencies file itself asks for the package."""
    referenced: PackageRequirement


@dataclass(frozen=True)
class FromPackage:
    """A pinned package asks for the package.

    ``defining`` is the requirement that pinned the parent; its range is
    expected to be Specific.
    """
    defining: PackageRequirement
    referenced: PackageRequirement


DependencySource = Union[FromRoot, FromPackage]


@dataclass(frozen=True)
class Conflict:
    """Two requesters asked for incompatible constraints on one package name."""
    source1: DependencySource
    source2: DependencySource


# Insertion order is the order packages are written.
PackageResolution = Dict[str, Union[ResolvedPackage, Conflict]]


@dataclass(frozen=True)
class SourceFile:
    """A single file fetched from a source-controlled repository."""
    owner: str
    project: str
    path: str
    commit: Optional[str] = None

    @property
    def remote(self) -> str:
        return f"{self.owner}/{self.project}"
