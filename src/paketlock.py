"""paketlock - deterministic dependency lock files

    Returns:
        int: Exit code
"""
import logging
import sys

from constants import ExitCodes, Constants
from common.logging_utils import add_file_handler, configure_logging, extra_context, is_debug_enabled
from cli_config import ConfigError, apply_config_overrides
from args import parse_args
from lockfile import (
    LockFileParseError,
    ResolutionConflictError,
    load_resolver,
    read_lock_file,
    update,
)

logger = logging.getLogger(__name__)


def _read_or_exit(lock_file):
    """Parse the lock file, mapping failures onto exit codes."""
    try:
        return read_lock_file(lock_file)
    except FileNotFoundError as e:
        logger.error("Lock file not found: %s", e.filename)
        sys.exit(ExitCodes.FILE_ERROR.value)
    except (IOError, UnicodeDecodeError) as e:
        logger.error("Lock file couldn't be read: %s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)
    except LockFileParseError as e:
        logger.error("Invalid lock file %s: %s", lock_file, e)
        sys.exit(ExitCodes.PARSE_ERROR.value)


def run_update(args):
    """Resolve the dependencies file and write the lock file.

    Args:
        args (argparse.Namespace): Parsed CLI arguments.

    Returns:
        int: Exit code
    """
    resolver_spec = Constants.DEFAULT_RESOLVER
    if not resolver_spec:
        logger.error("No resolver configured. Pass --resolver module:attribute or set lockfile.resolver.")
        return ExitCodes.FILE_ERROR.value
    try:
        resolver = load_resolver(resolver_spec)
    except (ImportError, ValueError) as e:
        logger.error("Couldn't load resolver %s: %s", resolver_spec, e)
        return ExitCodes.FILE_ERROR.value

    try:
        update(bool(getattr(args, "FORCE", False)), Constants.DEPENDENCIES_FILE, Constants.LOCK_FILE, resolver)
    except ResolutionConflictError as e:
        logger.error("%s", e)
        return ExitCodes.RESOLUTION_ERROR.value
    except IOError as e:
        logger.error("Lock file couldn't be written to disk: %s", e)
        return ExitCodes.FILE_ERROR.value
    return ExitCodes.SUCCESS.value


def format_lock_summary(packages, source_files):
    """Render parsed lock file contents for the console."""
    lines = []
    if packages:
        lines.append("Packages:")
        for package in packages:
            lines.append(f"  {package.name} {package.version} ({package.source.identifier})")
            for dep_name, _ in package.direct_dependencies:
                lines.append(f"    - {dep_name}")
    if source_files:
        lines.append("Source files:")
        for source_file in source_files:
            suffix = f" @ {source_file.commit}" if source_file.commit else ""
            lines.append(f"  {source_file.remote}/{source_file.path.lstrip('/')}{suffix}")
    if not lines:
        lines.append("Lock file is empty.")
    return "\n".join(lines)


def run_show(args):  # pylint: disable=unused-argument
    """Print the lock file contents."""
    packages, source_files = _read_or_exit(Constants.LOCK_FILE)
    print(format_lock_summary(packages, source_files))
    return ExitCodes.SUCCESS.value


def run_check(args):  # pylint: disable=unused-argument
    """Verify the lock file parses."""
    packages, source_files = _read_or_exit(Constants.LOCK_FILE)
    logger.info(
        "%s is valid: %d package(s), %d source file(s)",
        Constants.LOCK_FILE, len(packages), len(source_files),
    )
    return ExitCodes.SUCCESS.value


_ACTIONS = {
    "update": run_update,
    "show": run_show,
    "check": run_check,
}


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    configure_logging(getattr(args, "LOG_LEVEL", None))
    if getattr(args, "LOG_FILE", None):
        add_file_handler(args.LOG_FILE)

    try:
        apply_config_overrides(args)
    except ConfigError as e:
        logger.error("Configuration couldn't be loaded: %s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(event="function_entry", component="cli", action=args.action),
        )

    sys.exit(_ACTIONS[args.action](args))


if __name__ == "__main__":
    main()
