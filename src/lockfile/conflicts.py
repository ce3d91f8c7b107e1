"""Human-readable rendering of resolution conflicts."""

from __future__ import annotations

import logging

from constants import Constants
from versioning.models import Specific, format_version_range

from .errors import ContractViolationError
from .models import Conflict, DependencySource, FromPackage, FromRoot, PackageResolution

logger = logging.getLogger(__name__)


def _definer(source: DependencySource) -> str:
    """Name whoever asked for the package: the dependencies file or 'Name Version'."""
    if isinstance(source, FromRoot):
        return Constants.ROOT_DEFINER
    if isinstance(source, FromPackage):
        defining = source.defining
        if not isinstance(defining.version_range, Specific):
            raise ContractViolationError(
                f"Defining package {defining.name!r} is not pinned to a specific version: "
                f"{defining.version_range!r}"
            )
        return f"{defining.name} {defining.version_range.version}"
    raise ContractViolationError(f"Unknown dependency source: {source!r}")


def _describe(source: DependencySource) -> str:
    referenced = source.referenced
    return Constants.LINE_SEPARATOR.join([
        f"{_definer(source)} depends on",
        f"  {referenced.name} ({format_version_range(referenced.version_range)})",
    ])


def extract_errors(resolution: PackageResolution) -> str:
    """Describe every conflict in the resolution.

    Each conflict becomes a block naming both requesters and their
    constraints. An empty string means the resolution has no conflicts.
    """
    blocks = []
    for name, entry in resolution.items():
        if not isinstance(entry, Conflict):
            continue
        logger.debug("Conflict detected for %s", name)
        blocks.append(Constants.LINE_SEPARATOR.join([_describe(entry.source1), _describe(entry.source2)]))
    return Constants.LINE_SEPARATOR.join(blocks)
