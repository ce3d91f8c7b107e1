"""Argument parsing functionality for paketlock."""

import argparse


def _add_common_arguments(parser):
    """Options shared by every subcommand."""
    parser.add_argument("--lock-file",
                        dest="LOCK_FILE",
                        help="Path to the lock file (default: paket.lock or the configured value)",
                        action="store",
                        type=str)
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML, YML, or JSON)",
                        action="store",
                        type=str)
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default='INFO')
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="paketlock",
        description="paketlock - write and read deterministic dependency lock files",
        add_help=True,
    )
    subparsers = parser.add_subparsers(dest="action", required=True)

    update_parser = subparsers.add_parser(
        "update", help="Resolve the dependencies file and rewrite the lock file"
    )
    _add_common_arguments(update_parser)
    update_parser.add_argument("-f", "--force",
                               dest="FORCE",
                               help="Force a fresh resolution instead of reusing cached results",
                               action="store_true")
    update_parser.add_argument("-d", "--dependencies",
                               dest="DEPENDENCIES_FILE",
                               help="Path to the dependencies file (default: paket.dependencies)",
                               action="store",
                               type=str)
    update_parser.add_argument("-r", "--resolver",
                               dest="RESOLVER",
                               help="Resolver to use, as 'module:attribute'",
                               action="store",
                               type=str)

    show_parser = subparsers.add_parser(
        "show", help="Print the packages and source files recorded in the lock file"
    )
    _add_common_arguments(show_parser)

    check_parser = subparsers.add_parser(
        "check", help="Verify that the lock file can be parsed"
    )
    _add_common_arguments(check_parser)

    return parser.parse_args(argv)
