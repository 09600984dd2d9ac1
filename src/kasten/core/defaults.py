"""Default configuration for a vault.

Every resolution starts here: overrides are merged onto the output of
build_default_config(), never onto an empty configuration.
"""

import logging

from kasten.core.paths import expand_home, resolve_path
from kasten.core.settings import CalendarOpts, KastenConfig
from kasten.core.types import NoteType

logger = logging.getLogger(__name__)

# Subdirectory names of the special dirs below home
DAILIES_DIRNAME = "daily"
WEEKLIES_DIRNAME = "weekly"
TEMPLATES_DIRNAME = "templates"

# Template files below the templates dir
NEW_NOTE_TEMPLATE = "new_note.md"
NEW_DAILY_TEMPLATE = "daily_tk.md"
NEW_WEEKLY_TEMPLATE = "weekly_tk.md"

CALENDAR_DEFAULTS = CalendarOpts()


def note_type_templates(
    template_new_note: str | None,
    template_new_daily: str | None,
    template_new_weekly: str | None,
) -> dict[NoteType, str | None]:
    """Bind each note kind to its template path."""
    return {
        NoteType.NORMAL: template_new_note,
        NoteType.DAILY: template_new_daily,
        NoteType.WEEKLY: template_new_weekly,
    }


def build_default_config(home: str | None = None) -> KastenConfig:
    """
    Create the default configuration for a vault.

    Args:
        home: Vault home directory (~ and relative paths allowed). Falls back
            to ~/zettelkasten when None.

    Returns:
        KastenConfig with every setting at its default and special
        directories placed below home.
    """
    home = expand_home(home)
    templates = resolve_path(TEMPLATES_DIRNAME, home)
    template_new_note = resolve_path(NEW_NOTE_TEMPLATE, templates)
    template_new_daily = resolve_path(NEW_DAILY_TEMPLATE, templates)
    template_new_weekly = resolve_path(NEW_WEEKLY_TEMPLATE, templates)

    logger.debug(f"Building default config for home={home}")

    return KastenConfig(
        home=home,
        take_over_my_home=True,
        auto_set_filetype=True,
        dailies=resolve_path(DAILIES_DIRNAME, home),
        weeklies=resolve_path(WEEKLIES_DIRNAME, home),
        templates=templates,
        image_subdir=None,
        extension=".md",
        new_note_filename="title",
        uuid_type="%Y%m%d%H%M",
        uuid_sep="-",
        filename_space_subst=None,
        follow_creates_nonexisting=True,
        dailies_create_nonexisting=True,
        weeklies_create_nonexisting=True,
        journal_auto_open=False,
        template_new_note=template_new_note,
        template_new_daily=template_new_daily,
        template_new_weekly=template_new_weekly,
        image_link_style="markdown",
        sort="filename",
        subdirs_in_links=True,
        plug_into_calendar=True,
        calendar_opts=CALENDAR_DEFAULTS,
        close_after_yanking=False,
        insert_after_inserting=True,
        tag_notation="#tag",
        command_palette_theme="ivy",
        show_tags_theme="ivy",
        template_handling="smart",
        new_note_location="smart",
        rename_update_links=True,
        media_previewer="telescope-media-files",
        follow_url_fallback=None,
        note_type_templates=note_type_templates(
            template_new_note, template_new_daily, template_new_weekly
        ),
    )
