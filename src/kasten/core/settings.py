"""Typed configuration models for kasten.

KastenConfig is the resolved configuration every collaborator reads. It is
frozen: resolution steps produce new instances instead of mutating one.
Extra fields are forbidden to catch typos in user overrides.
"""

import os
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from kasten.core.types import (
    CalendarMark,
    ImageLinkStyle,
    MediaPreviewer,
    NewNoteFilename,
    NewNoteLocation,
    NoteType,
    PickerTheme,
    SortOrder,
    TagNotation,
    TemplateHandling,
)


class ConfigError(Exception):
    """Raised when a configuration cannot be resolved."""

    pass


class CalendarOpts(BaseModel):
    """Options forwarded to the calendar widget."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    # week display mode: 1 .. 'WK01', 2 .. 'WK 1', 3 .. 'KW01', 4 .. 'KW 1', 5 .. '1'
    weeknm: int = Field(default=4, ge=1, le=5)
    # use monday as first day of week: 1 .. true, 0 .. false
    calendar_monday: int = Field(default=1, ge=0, le=1)
    calendar_mark: CalendarMark = CalendarMark.LEFT_FIT


class KastenConfig(BaseModel):
    """Resolved configuration of one vault."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    home: str

    # enable the plugin when opening a note within home
    take_over_my_home: bool = True
    # if false, the telekasten filetype (and its syntax) is not used
    auto_set_filetype: bool = True

    # special dirs: absolute path, subdir name or None
    dailies: str | None = None
    weeklies: str | None = None
    templates: str | None = None
    # where pasted images go, None for home
    image_subdir: str | None = None

    extension: str = ".md"
    new_note_filename: NewNoteFilename = NewNoteFilename.TITLE
    # "rand" or a strftime pattern
    uuid_type: str = "%Y%m%d%H%M"
    uuid_sep: str = "-"
    # replaces spaces of the title in generated filenames
    filename_space_subst: str | None = None

    follow_creates_nonexisting: bool = True
    dailies_create_nonexisting: bool = True
    weeklies_create_nonexisting: bool = True
    # skip the picker for goto_today and goto_thisweek
    journal_auto_open: bool = False

    # None disables the template
    template_new_note: str | None = None
    template_new_daily: str | None = None
    template_new_weekly: str | None = None

    image_link_style: ImageLinkStyle = ImageLinkStyle.MARKDOWN
    sort: SortOrder = SortOrder.FILENAME
    # link to subdir/title instead of title only
    subdirs_in_links: bool = True

    plug_into_calendar: bool = True
    calendar_opts: CalendarOpts = Field(default_factory=CalendarOpts)

    close_after_yanking: bool = False
    insert_after_inserting: bool = True
    tag_notation: TagNotation = TagNotation.HASH
    command_palette_theme: PickerTheme = PickerTheme.IVY
    show_tags_theme: PickerTheme = PickerTheme.IVY
    template_handling: TemplateHandling = TemplateHandling.SMART
    new_note_location: NewNoteLocation = NewNoteLocation.SMART
    rename_update_links: bool = True
    media_previewer: MediaPreviewer = MediaPreviewer.TELESCOPE_MEDIA_FILES
    # name of a custom handler for urls
    follow_url_fallback: str | None = None

    # derived
    note_type_templates: dict[NoteType, str | None] = Field(default_factory=dict)
    filter_extensions: list[str] | None = None
    find_command: list[str] | None = None
    rg_pcre: bool = False

    @field_validator("home")
    @classmethod
    def _home_is_absolute(cls, value: str) -> str:
        if not os.path.isabs(value):
            raise ValueError(f"home must be an absolute path, got {value!r}")
        return value

    def template_for(self, note_type: NoteType | str) -> str | None:
        """Template bound to a note kind, None when disabled."""
        return self.note_type_templates.get(NoteType(note_type))


def validate_config(data: dict[str, Any]) -> KastenConfig:
    """Build a KastenConfig from a mapping.

    Raises:
        ConfigError: naming every field that failed validation.
    """
    try:
        return KastenConfig.model_validate(data)
    except ValidationError as e:
        fields = sorted(
            {".".join(str(part) for part in err["loc"]) or "<root>" for err in e.errors()}
        )
        raise ConfigError(
            f"Invalid configuration for {', '.join(fields)}: {e}"
        ) from e


def validate_calendar_opts(data: dict[str, Any]) -> CalendarOpts:
    """Build CalendarOpts from a mapping, raising ConfigError on bad values."""
    try:
        return CalendarOpts.model_validate(data)
    except ValidationError as e:
        fields = sorted(
            {
                "calendar_opts." + ".".join(str(part) for part in err["loc"])
                for err in e.errors()
            }
        )
        raise ConfigError(
            f"Invalid configuration for {', '.join(fields)}: {e}"
        ) from e
