"""Configuration overrides for runtime settings.

Kept out of paketlock.py to keep the entrypoint slim. Values are applied
onto Constants with this precedence: CLI arguments, then the config file
``lockfile:`` section, then built-in defaults.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from constants import Constants, _load_yaml_config

logger = logging.getLogger(__name__)

# config key -> (Constants attribute, CLI attribute)
_LOCKFILE_SETTINGS = {
    "dependencies_file": ("DEPENDENCIES_FILE", "DEPENDENCIES_FILE"),
    "lock_file": ("LOCK_FILE", "LOCK_FILE"),
    "resolver": ("DEFAULT_RESOLVER", "RESOLVER"),
}


class ConfigError(ValueError):
    """Raised when a configuration file exists but cannot be read or parsed."""


def load_lockfile_config(config_path=None) -> Dict[str, Any]:
    """Return the ``lockfile`` section of the user configuration, or {}.

    Raises:
        ConfigError: If the config file cannot be read or is not valid YAML/JSON.
    """
    import yaml  # pylint: disable=import-outside-toplevel

    try:
        cfg = _load_yaml_config(config_path)
    except (IOError, ValueError, yaml.YAMLError) as e:
        raise ConfigError(str(e)) from e
    section = cfg.get("lockfile")
    if section is None:
        return {}
    if not isinstance(section, dict):
        logger.warning("Ignoring 'lockfile' config section: expected a mapping, got %s", type(section).__name__)
        return {}
    unknown = set(section) - set(_LOCKFILE_SETTINGS)
    if unknown:
        logger.warning("Unknown lockfile settings ignored: %s", ", ".join(sorted(unknown)))
    return section


def apply_config_overrides(args) -> None:
    """Apply config file values, then CLI arguments, onto Constants."""
    section = load_lockfile_config(getattr(args, "CONFIG", None))
    for key, (const_attr, cli_attr) in _LOCKFILE_SETTINGS.items():
        value = getattr(args, cli_attr, None)
        origin = "cli"
        if value is None:
            value = section.get(key)
            origin = "config"
        if value is None:
            continue
        setattr(Constants, const_attr, str(value))
        logger.debug("Setting %s=%s from %s", const_attr, value, origin)
