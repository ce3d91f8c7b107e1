"""Create, update and read lock files.

The resolver is an external collaborator: anything with a
``resolve(force, dependencies_file)`` method (or a plain callable with that
signature) returning the package resolution and the requested source files.
"""

from __future__ import annotations

import importlib
import logging
from typing import Any, Callable, List, Protocol, Tuple, Union

from constants import Constants

from .conflicts import extract_errors
from .errors import ResolutionConflictError
from .models import PackageResolution, ResolvedPackage, SourceFile
from .parser import parse
from .serializer import serialize_lock_file

logger = logging.getLogger(__name__)

ResolverResult = Tuple[PackageResolution, List[SourceFile]]


class DependencyResolver(Protocol):  # pylint: disable=too-few-public-methods
    """Produces a resolution for the requirements in a dependencies file."""

    def resolve(self, force: bool, dependencies_file: str) -> ResolverResult:
        ...


ResolverLike = Union[DependencyResolver, Callable[[bool, str], ResolverResult]]


def _call_resolver(resolver: ResolverLike, force: bool, dependencies_file: str) -> ResolverResult:
    resolve = getattr(resolver, "resolve", None)
    if callable(resolve):
        return resolve(force, dependencies_file)
    return resolver(force, dependencies_file)  # type: ignore[operator]


def load_resolver(spec: str) -> Any:
    """Import a resolver from a ``module:attribute`` string.

    Classes are instantiated without arguments; any other attribute is
    returned as is.

    Raises:
        ValueError: If the spec is malformed or the attribute is missing.
        ImportError: If the module cannot be imported.
    """
    module_name, sep, attr = spec.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"Resolver must be given as 'module:attribute', got {spec!r}")
    module = importlib.import_module(module_name)
    try:
        target = getattr(module, attr)
    except AttributeError as e:
        raise ValueError(f"Module {module_name!r} has no attribute {attr!r}") from e
    if isinstance(target, type):
        return target()
    return target


def create(force: bool, dependencies_file: str, resolver: ResolverLike) -> ResolverResult:
    """Resolve the dependencies file into a package resolution and source files."""
    logger.info("Parsing %s", dependencies_file)
    return _call_resolver(resolver, force, dependencies_file)


def update(force: bool, dependencies_file: str, lock_file: str, resolver: ResolverLike) -> None:
    """Resolve the dependencies file and overwrite the lock file with the result.

    Raises:
        ResolutionConflictError: If the resolution contains conflicts. The
            lock file is left untouched.
    """
    resolution, source_files = create(force, dependencies_file, resolver)
    errors = extract_errors(resolution)
    if errors:
        raise ResolutionConflictError(
            Constants.CONFLICT_MESSAGE + Constants.LINE_SEPARATOR + errors,
            report=errors,
        )
    output = serialize_lock_file(resolution, source_files)
    # newline="" keeps LINE_SEPARATOR exactly as serialized.
    with open(lock_file, "w", encoding="utf-8", newline="") as f:
        f.write(output)
    logger.info("Locked version resolutions written to %s", lock_file)


def read_lock_file(lock_file: str) -> Tuple[List[ResolvedPackage], List[SourceFile]]:
    """Read and parse an existing lock file."""
    with open(lock_file, "r", encoding="utf-8") as f:
        lines = f.read().splitlines()
    return parse(lines)
