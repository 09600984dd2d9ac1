"""Overlay user overrides onto a base configuration."""

import logging
from collections.abc import Mapping
from typing import Any

from kasten.core.defaults import CALENDAR_DEFAULTS, note_type_templates
from kasten.core.paths import expand_home
from kasten.core.settings import (
    CalendarOpts,
    ConfigError,
    KastenConfig,
    validate_calendar_opts,
    validate_config,
)

logger = logging.getLogger(__name__)

CALENDAR_KEY = "calendar_opts"
TEMPLATE_FIELDS = ("template_new_note", "template_new_daily", "template_new_weekly")

# settings where None is a real value (disabled or not yet derived)
NULLABLE_FIELDS = frozenset(
    name
    for name, field in KastenConfig.model_fields.items()
    if not field.is_required() and field.default is None
)
KEEP_ON_NONE = frozenset(KastenConfig.model_fields) - NULLABLE_FIELDS - {"home"}


def _first_set(*values: Any) -> Any:
    for value in values:
        if value is not None:
            return value
    return None


def merge_calendar_opts(
    base: CalendarOpts, overrides: Mapping[str, Any] | CalendarOpts | None
) -> CalendarOpts:
    """
    Merge calendar options field by field.

    Each field takes the override value, else the base value, else the
    calendar default. Fields missing from overrides are kept.

    Raises:
        ConfigError: If overrides is not a mapping or holds unknown keys.
    """
    if overrides is None:
        overrides = {}
    elif isinstance(overrides, CalendarOpts):
        overrides = overrides.model_dump()
    elif not isinstance(overrides, Mapping):
        raise ConfigError(
            f"calendar_opts must be a mapping, got {type(overrides).__name__}"
        )

    unknown = sorted(set(overrides) - set(CalendarOpts.model_fields))
    if unknown:
        raise ConfigError(f"Unknown calendar_opts keys: {', '.join(unknown)}")

    merged = {
        name: _first_set(
            overrides.get(name),
            getattr(base, name),
            getattr(CALENDAR_DEFAULTS, name),
        )
        for name in CalendarOpts.model_fields
    }
    return validate_calendar_opts(merged)


def merge_config(
    base: KastenConfig, overrides: Mapping[str, Any], debug: bool = False
) -> KastenConfig:
    """
    Overlay overrides onto base, key by key.

    Every key present in overrides replaces the base value, falsy values
    included. None only replaces settings that can be unset; for any other
    setting it means "not given" and the base value is kept. calendar_opts
    is merged per field instead of being replaced. A merged home is
    expanded the same way the default factory expands it, and changing a
    template setting rebuilds note_type_templates.

    Args:
        base: Configuration to merge onto (usually the defaults)
        overrides: Partial user configuration
        debug: Log every key with its old and new value

    Returns:
        New KastenConfig; base is left untouched.

    Raises:
        ConfigError: On unknown keys or invalid values.
    """
    data = base.model_dump()

    for key, value in overrides.items():
        if key == CALENDAR_KEY:
            continue
        # home is required, so a None home is left for validation to report
        if value is None and key in KEEP_ON_NONE:
            logger.debug(f"setup() ignoring `{key}` set to None (keeps `{data[key]}`)")
            continue
        if key == "home" and value is not None:
            value = expand_home(value)
        if debug:
            logger.info(f"setup() setting `{key}`   ->   `{value}` (was `{data.get(key)}`)")
        data[key] = value

    if any(name in overrides for name in TEMPLATE_FIELDS):
        data["note_type_templates"] = note_type_templates(
            *(data[name] or None for name in TEMPLATE_FIELDS)
        )

    calendar_opts = merge_calendar_opts(base.calendar_opts, overrides.get(CALENDAR_KEY))
    if debug and CALENDAR_KEY in overrides:
        logger.info(
            f"setup() setting `{CALENDAR_KEY}`   ->   `{calendar_opts.model_dump()}` "
            f"(was `{data[CALENDAR_KEY]}`)"
        )
    data[CALENDAR_KEY] = calendar_opts

    return validate_config(data)
