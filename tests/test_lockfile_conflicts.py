"""Tests for the conflict reporter."""

import pytest
import semantic_version

from lockfile.conflicts import extract_errors
from lockfile.errors import ContractViolationError
from lockfile.models import Conflict, FromPackage, FromRoot, PackageRequirement
from versioning.models import Minimum, Range, Specific


def _root(name, version_range):
    return FromRoot(PackageRequirement(name, version_range))


def _from_package(parent, parent_range, name, version_range):
    return FromPackage(
        defining=PackageRequirement(parent, parent_range),
        referenced=PackageRequirement(name, version_range),
    )


class TestExtractErrors:
    """Test conflict rendering."""

    def test_no_conflicts_is_empty(self, sample_resolution):
        assert extract_errors(sample_resolution) == ""

    def test_empty_resolution(self):
        assert extract_errors({}) == ""

    def test_root_versus_package(self, sample_resolution, sep):
        resolution = dict(sample_resolution)
        resolution["log4net"] = Conflict(
            _root("log4net", Specific(semantic_version.Version("1.2.10"))),
            _from_package(
                "Castle.Core", Specific(semantic_version.Version("3.3.1")),
                "log4net", Minimum(semantic_version.Version("2.0.0")),
            ),
        )
        assert extract_errors(resolution).split(sep) == [
            "Dependencies file depends on",
            "  log4net (1.2.10)",
            "Castle.Core 3.3.1 depends on",
            "  log4net (>= 2.0.0)",
        ]

    def test_multiple_conflicts_joined(self, sep):
        resolution = {
            "A": Conflict(_root("A", Minimum("1.0.0")), _root("A", Specific("0.9.0"))),
            "B": Conflict(
                _from_package("X", Specific("1.0.0"), "B", Range(True, "1.0.0", "2.0.0", False)),
                _from_package("Y", Specific("2.0.0"), "B", Minimum("3.0.0")),
            ),
        }
        lines = extract_errors(resolution).split(sep)
        assert len(lines) == 8
        assert lines[:2] == ["Dependencies file depends on", "  A (>= 1.0.0)"]
        assert lines[4:] == [
            "X 1.0.0 depends on",
            "  B (>= 1.0.0, < 2.0.0)",
            "Y 2.0.0 depends on",
            "  B (>= 3.0.0)",
        ]

    def test_unpinned_defining_package_is_contract_violation(self):
        resolution = {
            "B": Conflict(
                _root("B", Minimum("1.0.0")),
                _from_package("X", Minimum("1.0.0"), "B", Minimum("2.0.0")),
            ),
        }
        with pytest.raises(ContractViolationError):
            extract_errors(resolution)
