"""Fields computed from other fields after merging.

Every step is idempotent: derive_all(derive_all(c)) == derive_all(c) as long
as the search backend and the filter_extensions argument stay the same.
"""

import logging
from pathlib import Path

from kasten.core.defaults import note_type_templates
from kasten.core.merge import TEMPLATE_FIELDS
from kasten.core.paths import resolve_path
from kasten.core.search import SearchBackend, detect_search_backend
from kasten.core.settings import KastenConfig
from kasten.core.types import NoteType

logger = logging.getLogger(__name__)

DIRECTORY_FIELDS = ("image_subdir", "dailies", "weeklies", "templates")


def derive_all(
    config: KastenConfig,
    search: SearchBackend | None = None,
    filter_extensions: list[str] | None = None,
) -> KastenConfig:
    """
    Recompute the dependent fields of a merged configuration.

    Steps:
    1. filter_extensions is the supplied list, else [extension]
    2. empty template settings become None (template disabled)
    3. note_type_templates is rebuilt from the template settings
    4. special directories are made absolute below home
    5. find_command is set from the search backend
    6. rg_pcre records whether the backend supports PCRE2

    Args:
        config: Merged configuration
        search: Search backend to query (detected from PATH when None)
        filter_extensions: User-supplied filter list, as given in the overrides.
            The stored value is always rebuilt from this and extension.

    Returns:
        New KastenConfig with derived fields filled in.
    """
    if search is None:
        search = detect_search_backend()

    updates: dict = {}

    if filter_extensions is None:
        filter_extensions = [config.extension]
    updates["filter_extensions"] = list(filter_extensions)

    for name in TEMPLATE_FIELDS:
        updates[name] = getattr(config, name) or None

    updates["note_type_templates"] = note_type_templates(
        updates["template_new_note"],
        updates["template_new_daily"],
        updates["template_new_weekly"],
    )

    for name in DIRECTORY_FIELDS:
        updates[name] = resolve_path(getattr(config, name), config.home)

    updates["find_command"] = search.find_command()
    updates["rg_pcre"] = bool(updates["find_command"]) and search.supports_pcre2()

    logger.debug(
        f"Derived fields: filter_extensions={updates['filter_extensions']}, "
        f"find_command={updates['find_command']}, rg_pcre={updates['rg_pcre']}"
    )
    return config.model_copy(update=updates)


def template_path(config: KastenConfig, note_type: NoteType | str) -> Path | None:
    """
    Get the template file for a note kind.

    Args:
        config: Resolved configuration
        note_type: normal, daily or weekly

    Returns:
        Path to an existing template file, or None when the template is
        disabled or the file does not exist.
    """
    template = config.template_for(note_type)
    if not template:
        return None
    path = Path(template).expanduser()
    if not path.is_file():
        logger.debug(f"Template for {note_type} not found: {path}")
        return None
    return path
