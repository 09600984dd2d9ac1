"""Shared enumerations for kasten configuration values."""

from __future__ import annotations

from enum import StrEnum


class NoteType(StrEnum):
    """Kinds of notes that can be bound to a template."""

    NORMAL = "normal"
    DAILY = "daily"
    WEEKLY = "weekly"


class NewNoteFilename(StrEnum):
    """How filenames of new notes are generated."""

    TITLE = "title"
    UUID = "uuid"
    UUID_TITLE = "uuid-title"
    TITLE_UUID = "title-uuid"


class ImageLinkStyle(StrEnum):
    """Link style used when pasting images.

    wiki:     ![[image name]]
    markdown: ![](image_subdir/xxxxx.png)
    """

    MARKDOWN = "markdown"
    WIKI = "wiki"


class SortOrder(StrEnum):
    """Default sort option for note listings."""

    FILENAME = "filename"
    MODIFIED = "modified"


class TagNotation(StrEnum):
    """Tag notation used in notes."""

    HASH = "#tag"
    COLON = ":tag:"
    YAML_BARE = "yaml-bare"


class PickerTheme(StrEnum):
    """Picker layouts: dropdown (window) or ivy (bottom panel)."""

    IVY = "ivy"
    DROPDOWN = "dropdown"
    GET_CURSOR = "get_cursor"


class TemplateHandling(StrEnum):
    """Template choice when creating a new note.

    prefer_new_note: always use the new-note template
    smart: use daily / weekly templates when the title looks like a day or week
    always_ask: ask before creating a note
    """

    SMART = "smart"
    PREFER_NEW_NOTE = "prefer_new_note"
    ALWAYS_ASK = "always_ask"


class NewNoteLocation(StrEnum):
    """Directory choice for new notes (notes/with/subdirs/in/title excepted).

    smart: daily-looking notes in dailies, weekly-looking ones in weeklies,
           everything else in home
    prefer_home: everything in home
    same_as_current: the directory of the current note, else home
    """

    SMART = "smart"
    PREFER_HOME = "prefer_home"
    SAME_AS_CURRENT = "same_as_current"


class CalendarMark(StrEnum):
    """Where the calendar widget puts the mark for marked days."""

    LEFT = "left"
    RIGHT = "right"
    LEFT_FIT = "left-fit"


class MediaPreviewer(StrEnum):
    """Previewer used for media files."""

    TELESCOPE_MEDIA_FILES = "telescope-media-files"
    CATIMG = "catimg-previewer"
    VIU = "viu-previewer"
