"""kasten - configuration resolver for Zettelkasten note vaults."""

from kasten.core import (
    ConfigContext,
    ConfigError,
    KastenConfig,
    get_context,
    setup,
    setup_from_file,
    switch_vault,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigContext",
    "ConfigError",
    "KastenConfig",
    "get_context",
    "setup",
    "setup_from_file",
    "switch_vault",
]
