"""Shared fixtures."""

import pytest
import semantic_version

from constants import Constants
from lockfile.models import Nuget, LocalNuget, ResolvedPackage, SourceFile
from versioning.models import Minimum, Range, Specific


@pytest.fixture(autouse=True)
def isolated_constants(monkeypatch, tmp_path):
    """Keep CLI/config overrides from leaking between tests."""
    for attr in ("DEPENDENCIES_FILE", "LOCK_FILE", "DEFAULT_RESOLVER"):
        monkeypatch.setattr(Constants, attr, getattr(Constants, attr))
    monkeypatch.setattr(Constants, "CONFIG_SEARCH_PATHS", [str(tmp_path / "paketlock.yml")])
    monkeypatch.delenv(Constants.CONFIG_ENV, raising=False)


@pytest.fixture
def sep():
    """Line separator used by the serializer."""
    return Constants.LINE_SEPARATOR


@pytest.fixture
def nuget_feed():
    return Nuget("https://nuget.org/api/v2")


@pytest.fixture
def sample_resolution(nuget_feed):
    """Two feeds, with dependencies on the first package."""
    local = LocalNuget("/var/nuget/packages")
    return {
        "Castle.Windsor": ResolvedPackage(
            source=nuget_feed,
            name="Castle.Windsor",
            version=semantic_version.Version("3.3.0"),
            direct_dependencies=(
                ("Castle.Core", Minimum(semantic_version.Version("3.3.0"))),
                ("log4net", Range(True, "1.2.10", "2.0.0", False)),
            ),
        ),
        "Internal.Tools": ResolvedPackage(
            source=local,
            name="Internal.Tools",
            version=semantic_version.Version("1.0.0"),
        ),
        "Castle.Core": ResolvedPackage(
            source=nuget_feed,
            name="Castle.Core",
            version=semantic_version.Version("3.3.1"),
            direct_dependencies=(("log4net", Specific("1.2.10")),),
        ),
    }


@pytest.fixture
def sample_source_files():
    return [
        SourceFile(owner="fsprojects", project="Paket", path="/src/Paket/LockFile.fs", commit="abc123"),
        SourceFile(owner="fsharp", project="FAKE", path="src/app/FAKE/Cli.fs"),
        SourceFile(owner="fsprojects", project="Paket", path="build.fsx", commit="def456"),
    ]
