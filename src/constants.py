"""Constants used in the project."""

import json
import logging
import os
from enum import Enum

logger = logging.getLogger(__name__)


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    PARSE_ERROR = 2
    RESOLUTION_ERROR = 3


class RepositoryType(Enum):
    """Lock file sections, keyed by their header line.

    Args:
        Enum (string): Section header as written in the lock file.
    """

    NUGET = "NUGET"
    GITHUB = "GITHUB"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    DEPENDENCIES_FILE = "paket.dependencies"
    LOCK_FILE = "paket.lock"
    DEFAULT_RESOLVER = None  # "module:attr" of a DependencyResolver, set via config

    LINE_SEPARATOR = os.linesep
    REMOTE_PREFIX = "remote:"
    SPECS_PREFIX = "specs:"
    SECTION_INDENT = " " * 2
    ENTRY_INDENT = " " * 4
    DEPENDENCY_INDENT = " " * 6

    ROOT_DEFINER = "Dependencies file"
    CONFLICT_MESSAGE = "Could not resolve dependencies."

    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_LEVEL_ENV = "PAKETLOCK_LOG_LEVEL"
    CONFIG_ENV = "PAKETLOCK_CONFIG"
    CONFIG_SEARCH_PATHS = [
        "paketlock.yml",
        "paketlock.yaml",
        os.path.join(
            os.environ.get("XDG_CONFIG_HOME", os.path.join(os.path.expanduser("~"), ".config")),
            "paketlock",
            "paketlock.yml",
        ),
    ]


def _read_config_file(path):
    """Load a YAML (or JSON, by extension) config file into a dict."""
    with open(path, "r", encoding="utf-8") as fh:
        if path.lower().endswith(".json"):
            data = json.load(fh)
        else:
            import yaml  # pylint: disable=import-outside-toplevel

            data = yaml.safe_load(fh)
    return data if isinstance(data, dict) else {}


def _load_yaml_config(path=None):
    """Return the user configuration dict.

    An explicit path wins; otherwise $PAKETLOCK_CONFIG, then the default
    search locations are tried in order. Missing files yield an empty dict.

    Args:
        path (str, optional): Explicit configuration file path.

    Returns:
        dict: Parsed configuration, or {} when none was found.
    """
    candidates = [path] if path else []
    env_path = os.environ.get(Constants.CONFIG_ENV)
    if not path and env_path:
        candidates.append(env_path)
    if not candidates:
        candidates.extend(Constants.CONFIG_SEARCH_PATHS)

    for candidate in candidates:
        if not os.path.isfile(candidate):
            if path:
                logger.warning("Config file not found: %s", candidate)
            continue
        logger.debug("Loading configuration from %s", candidate)
        return _read_config_file(candidate)
    return {}
