"""Setup entry point and the active configuration context.

setup() resolves the configuration of the selected vault and returns a
ConfigContext. The same context is published as the process-wide default
(get_context()) in one assignment, after everything else succeeded; a
failing setup leaves the previous context active.

Example:
    context = setup({"home": "~/zettelkasten"})
    context.config.dailies  # '/home/me/zettelkasten/daily'
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pprint import pformat
from typing import Any

from kasten.core.defaults import build_default_config
from kasten.core.derive import derive_all
from kasten.core.host import Host, HostAction, apply_host_actions, plan_host_actions
from kasten.core.merge import merge_config
from kasten.core.search import SearchBackend
from kasten.core.settings import ConfigError, KastenConfig
from kasten.core.vaults import DEFAULT_VAULT_KEY, VAULTS_KEY, select_vault

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfigContext:
    """The active configuration together with the vault registry."""

    config: KastenConfig
    vaults: dict[str, dict[str, Any]]
    active_vault: str
    host_actions: list[HostAction] = field(default_factory=list)


def resolve_config(
    overrides: Mapping[str, Any],
    search: SearchBackend | None = None,
    debug: bool = False,
) -> KastenConfig:
    """
    Resolve one vault's overrides into a full configuration.

    Defaults seeded by the vault home, overrides merged on top, then
    derived fields computed.

    Raises:
        ConfigError: On invalid overrides.
    """
    defaults = build_default_config(overrides.get("home"))
    merged = merge_config(defaults, overrides, debug=debug)
    resolved = derive_all(
        merged, search=search, filter_extensions=overrides.get("filter_extensions")
    )

    if debug:
        logger.info(
            "Resulting config:\n-----------------\n"
            + pformat(resolved.model_dump(mode="json"), sort_dicts=False)
        )
    return resolved


def setup(
    raw: Mapping[str, Any] | None = None,
    *,
    search: SearchBackend | None = None,
    host: Host | None = None,
) -> ConfigContext:
    """
    Resolve and publish the active configuration.

    Args:
        raw: User overrides, optionally with vaults, default_vault and debug
        search: Search backend (detected from PATH when None)
        host: Editor integration receiving the host actions

    Returns:
        The new ConfigContext, also available through get_context().

    Raises:
        ConfigError: If no vault can be selected or the overrides are
            invalid. Nothing is published in that case.
    """
    selection = select_vault(raw)
    config = resolve_config(selection.overrides, search=search, debug=selection.debug)
    context = ConfigContext(
        config=config,
        vaults=selection.registry,
        active_vault=selection.name,
        host_actions=plan_host_actions(config),
    )

    if host is not None:
        apply_host_actions(host, context.host_actions)

    set_context(context)
    logger.info(f"Vault '{context.active_vault}' active at {config.home}")
    return context


def switch_vault(
    name: str,
    *,
    context: ConfigContext | None = None,
    search: SearchBackend | None = None,
    host: Host | None = None,
) -> ConfigContext:
    """
    Make another registered vault the active one.

    Args:
        name: Vault name in the registry
        context: Context holding the registry (defaults to the active one)

    Returns:
        The new ConfigContext.

    Raises:
        ConfigError: If no context is set up or name is not registered.
    """
    current = context or get_context()
    if name not in current.vaults:
        raise ConfigError(
            f"Unknown vault '{name}' (known: {', '.join(sorted(current.vaults))})"
        )
    return setup(
        {VAULTS_KEY: current.vaults, DEFAULT_VAULT_KEY: name},
        search=search,
        host=host,
    )


# Default instance
_context: ConfigContext | None = None


def get_context() -> ConfigContext:
    """Get the active configuration context."""
    if _context is None:
        raise ConfigError("kasten is not set up; call setup() first")
    return _context


def set_context(context: ConfigContext | None) -> None:
    """Set the active configuration context (None clears it, for testing)."""
    global _context
    _context = context
