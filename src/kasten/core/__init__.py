"""kasten core library - configuration resolution."""

from kasten.core.context import (
    ConfigContext,
    get_context,
    resolve_config,
    set_context,
    setup,
    switch_vault,
)
from kasten.core.defaults import build_default_config
from kasten.core.derive import derive_all, template_path
from kasten.core.loader import load_overrides, setup_from_file
from kasten.core.merge import merge_calendar_opts, merge_config
from kasten.core.paths import expand_home, resolve_path
from kasten.core.settings import CalendarOpts, ConfigError, KastenConfig
from kasten.core.types import NoteType
from kasten.core.vaults import VaultSelection, select_vault

__all__ = [
    # Setup
    "ConfigContext",
    "get_context",
    "resolve_config",
    "set_context",
    "setup",
    "setup_from_file",
    "switch_vault",
    # Resolution steps
    "build_default_config",
    "derive_all",
    "expand_home",
    "load_overrides",
    "merge_calendar_opts",
    "merge_config",
    "resolve_path",
    "select_vault",
    "template_path",
    # Types
    "CalendarOpts",
    "ConfigError",
    "KastenConfig",
    "NoteType",
    "VaultSelection",
]
