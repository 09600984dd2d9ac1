"""Selection of the active vault among the configured ones.

Input shapes accepted by select_vault():

    {"home": "~/notes", ...}                                  single vault
    {"vaults": {"default": {...}, "work": {...}}}              "default" wins
    {"vaults": {"work": {...}, "home": {...}}, "default_vault": "work"}
"""

import copy
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from kasten.core.settings import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_VAULT_NAME = "default"
VAULTS_KEY = "vaults"
DEFAULT_VAULT_KEY = "default_vault"
DEBUG_KEY = "debug"

# Keys that select a vault but are not configuration settings
ROUTING_KEYS = (VAULTS_KEY, DEFAULT_VAULT_KEY)


@dataclass(frozen=True)
class VaultSelection:
    """Result of vault selection."""

    registry: dict[str, dict[str, Any]]
    """All configured vaults by name (raw overrides, routing keys removed)."""

    name: str
    """Name of the active vault."""

    overrides: dict[str, Any] = field(default_factory=dict)
    """Overrides of the active vault, without the debug flag."""

    debug: bool = False


def _vault_entry(name: str, entry: Any) -> dict[str, Any]:
    if not isinstance(entry, Mapping):
        raise ConfigError(
            f"Vault '{name}' must be a mapping, got {type(entry).__name__}"
        )
    return copy.deepcopy({k: v for k, v in entry.items() if k not in ROUTING_KEYS})


def _registry(vaults: Any) -> dict[str, dict[str, Any]]:
    if vaults is None:
        return {}
    if not isinstance(vaults, Mapping):
        raise ConfigError(f"vaults must be a mapping, got {type(vaults).__name__}")
    return {str(name): _vault_entry(str(name), entry) for name, entry in vaults.items()}


def select_vault(raw: Mapping[str, Any] | None) -> VaultSelection:
    """
    Pick the active vault from raw setup input.

    Decision order (first match wins):
    1. vaults and default_vault given: vaults[default_vault]
    2. vaults holds a "default" entry: that entry
    3. home given: the whole input is the single vault "default"

    Args:
        raw: Setup input (may be None)

    Returns:
        VaultSelection with the registry and the active vault's overrides.

    Raises:
        ConfigError: If no vault can be selected, default_vault names an
            unknown vault, or the selected vault has no home.
    """
    raw = raw or {}
    if not isinstance(raw, Mapping):
        raise ConfigError(f"Setup input must be a mapping, got {type(raw).__name__}")

    registry = _registry(raw.get(VAULTS_KEY))
    default_vault = raw.get(DEFAULT_VAULT_KEY)

    if registry and default_vault is not None:
        name = str(default_vault)
        if name not in registry:
            raise ConfigError(
                f"default_vault '{name}' is not a configured vault "
                f"(known: {', '.join(sorted(registry))})"
            )
    elif DEFAULT_VAULT_NAME in registry:
        name = DEFAULT_VAULT_NAME
    elif raw.get("home") is not None:
        name = DEFAULT_VAULT_NAME
        registry[name] = _vault_entry(name, raw)
    else:
        raise ConfigError(
            "No vault to set up: provide 'home', a 'default' entry in 'vaults', "
            "or 'vaults' together with 'default_vault'"
        )

    active = dict(registry[name])
    if active.get("home") is None:
        raise ConfigError(f"Vault '{name}' does not define 'home'")

    debug = bool(active.pop(DEBUG_KEY, False) or raw.get(DEBUG_KEY, False))
    logger.debug(f"Selected vault '{name}' out of {sorted(registry)}")

    return VaultSelection(registry=registry, name=name, overrides=active, debug=debug)
