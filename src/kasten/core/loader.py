"""Loading setup overrides from a YAML file.

The file holds the same mapping setup() accepts, e.g.:

    vaults:
      work:
        home: ~/work-notes
      personal:
        home: ~/notes
        template_new_daily: ~/notes/templates/custom_daily.md
    default_vault: personal
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from kasten.core.context import ConfigContext, setup
from kasten.core.host import Host
from kasten.core.search import SearchBackend
from kasten.core.settings import ConfigError

logger = logging.getLogger(__name__)


def load_overrides(path: Path | str) -> dict[str, Any]:
    """
    Load setup overrides from a YAML file.

    Args:
        path: Path to the YAML file (~ allowed)

    Returns:
        Mapping of overrides. Empty if the file is missing or empty.

    Raises:
        ConfigError: If the file cannot be read, is invalid YAML or is not
            a mapping.
    """
    config_file = Path(path).expanduser()
    if not config_file.exists():
        logger.debug(f"No config file at {config_file}")
        return {}

    logger.debug(f"Loading overrides from {config_file}")

    try:
        with open(config_file, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error(f"Invalid YAML in {config_file}: {e}")
        raise ConfigError(f"Invalid YAML in {config_file}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read {config_file}: {e}") from e

    if raw is None:
        logger.debug("Config file is empty or null")
        return {}

    if not isinstance(raw, dict):
        logger.error(f"Config must be a mapping, got {type(raw).__name__}")
        raise ConfigError(
            f"{config_file.name} must be a mapping, got {type(raw).__name__}"
        )

    return raw


def setup_from_file(
    path: Path | str,
    *,
    vault: str | None = None,
    debug: bool = False,
    search: SearchBackend | None = None,
    host: Host | None = None,
) -> ConfigContext:
    """
    Load overrides from path and run setup() with them.

    Args:
        path: YAML overrides file
        vault: Vault to activate instead of the file's default
        debug: Force debug output on

    Raises:
        ConfigError: As load_overrides() and setup().
    """
    raw = load_overrides(path)
    if vault is not None:
        if "vaults" not in raw and vault != "default":
            raise ConfigError(f"Cannot select vault '{vault}': {path} defines no vaults")
        raw["default_vault"] = vault
    if debug:
        raw["debug"] = True
    return setup(raw, search=search, host=host)
