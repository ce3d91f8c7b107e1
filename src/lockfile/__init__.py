"""Lock file package.

- models.py: resolution entities (packages, sources, conflicts, source files)
- serializer.py: canonical lock file text from a resolution
- conflicts.py: human-readable conflict report
- parser.py: line classifier and state machine reading lock files back
- controller.py: create/update/read orchestration around an external resolver
"""

from .conflicts import extract_errors  # noqa: F401
from .controller import (  # noqa: F401
    DependencyResolver,
    create,
    load_resolver,
    read_lock_file,
    update,
)
from .errors import (  # noqa: F401
    ContractViolationError,
    LockFileError,
    LockFileParseError,
    ResolutionConflictError,
)
from .models import (  # noqa: F401
    Conflict,
    FromPackage,
    FromRoot,
    LocalNuget,
    Nuget,
    PackageRequirement,
    PackageResolution,
    PackageSource,
    ResolvedPackage,
    SourceFile,
)
from .parser import parse  # noqa: F401
from .serializer import (  # noqa: F401
    serialize_lock_file,
    serialize_packages,
    serialize_source_files,
)

__all__ = [
    # Entities
    "Conflict",
    "FromPackage",
    "FromRoot",
    "LocalNuget",
    "Nuget",
    "PackageRequirement",
    "PackageResolution",
    "PackageSource",
    "ResolvedPackage",
    "SourceFile",
    # Errors
    "ContractViolationError",
    "LockFileError",
    "LockFileParseError",
    "ResolutionConflictError",
    # Operations
    "DependencyResolver",
    "create",
    "extract_errors",
    "load_resolver",
    "parse",
    "read_lock_file",
    "serialize_lock_file",
    "serialize_packages",
    "serialize_source_files",
    "update",
]
