"""Actions the host editor performs for a resolved configuration.

The host receives typed payloads instead of editor command strings:
registering the note filetype, binding files below home to it, and
configuring the calendar widget.
"""

import logging
from typing import Literal, Protocol

from pydantic import BaseModel, ConfigDict

from kasten.core.settings import KastenConfig
from kasten.core.types import CalendarMark

logger = logging.getLogger(__name__)

FILETYPE = "telekasten"


class FiletypeRegistration(BaseModel):
    """Register the note filetype so previewers pick up its syntax."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["filetype"] = "filetype"
    filetype: str = FILETYPE


class FiletypeAutocommand(BaseModel):
    """Set the note filetype on files matching pattern when entered."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["autocommand"] = "autocommand"
    event: str = "BufEnter"
    pattern: str
    filetype: str = FILETYPE


class CalendarSetup(BaseModel):
    """Calendar widget options and the callbacks it should call back into."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["calendar"] = "calendar"
    weeknm: int
    calendar_monday: bool
    calendar_mark: CalendarMark
    sign_callback: str = "CalendarSignDay"
    action_callback: str = "CalendarAction"


HostAction = FiletypeRegistration | FiletypeAutocommand | CalendarSetup


class Host(Protocol):
    """Editor integration receiving host actions."""

    def apply(self, action: HostAction) -> None:
        """Perform one action."""
        ...


def plan_host_actions(config: KastenConfig) -> list[HostAction]:
    """
    Compute the host actions for a configuration.

    Args:
        config: Resolved configuration

    Returns:
        Actions in the order they should be applied.
    """
    actions: list[HostAction] = []

    if config.auto_set_filetype:
        actions.append(FiletypeRegistration())
        if config.take_over_my_home:
            actions.append(
                FiletypeAutocommand(pattern=f"{config.home}/*{config.extension}")
            )

    if config.plug_into_calendar:
        opts = config.calendar_opts
        actions.append(
            CalendarSetup(
                weeknm=opts.weeknm,
                calendar_monday=opts.calendar_monday == 1,
                calendar_mark=opts.calendar_mark,
            )
        )

    return actions


def apply_host_actions(host: Host, actions: list[HostAction]) -> None:
    """Send every action to the host, in order."""
    for action in actions:
        logger.debug(f"Applying host action: {action.kind}")
        host.apply(action)
