"""Tests for kasten.core.host."""

from kasten.core.defaults import build_default_config
from kasten.core.host import (
    FILETYPE,
    CalendarSetup,
    FiletypeAutocommand,
    FiletypeRegistration,
    apply_host_actions,
    plan_host_actions,
)
from kasten.core.merge import merge_config


def _config(**overrides):
    return merge_config(build_default_config("/notes"), overrides)


class TestPlanHostActions:
    """Tests for plan_host_actions()."""

    def test_defaults(self):
        """Defaults register the filetype, take over home and set up the calendar."""
        actions = plan_host_actions(_config())

        assert actions == [
            FiletypeRegistration(filetype=FILETYPE),
            FiletypeAutocommand(pattern="/notes/*.md", filetype=FILETYPE),
            CalendarSetup(weeknm=4, calendar_monday=True, calendar_mark="left-fit"),
        ]

    def test_autocommand_uses_extension(self):
        """Files are matched by the configured extension."""
        actions = plan_host_actions(_config(extension=".txt"))

        assert actions[1].pattern == "/notes/*.txt"

    def test_no_filetype(self):
        """auto_set_filetype=False drops filetype and autocommand."""
        actions = plan_host_actions(_config(auto_set_filetype=False))

        assert [a.kind for a in actions] == ["calendar"]

    def test_no_take_over(self):
        """take_over_my_home=False keeps the filetype but not the autocommand."""
        actions = plan_host_actions(_config(take_over_my_home=False))

        assert [a.kind for a in actions] == ["filetype", "calendar"]

    def test_no_calendar(self):
        """plug_into_calendar=False skips the calendar."""
        actions = plan_host_actions(_config(plug_into_calendar=False))

        assert all(not isinstance(a, CalendarSetup) for a in actions)

    def test_calendar_options_forwarded(self):
        """Merged calendar options reach the calendar payload."""
        actions = plan_host_actions(
            _config(calendar_opts={"weeknm": 1, "calendar_monday": 0, "calendar_mark": "right"})
        )

        calendar = actions[-1]
        assert calendar.weeknm == 1
        assert calendar.calendar_monday is False
        assert calendar.calendar_mark == "right"
        assert calendar.sign_callback == "CalendarSignDay"
        assert calendar.action_callback == "CalendarAction"


class TestApplyHostActions:
    """Tests for apply_host_actions()."""

    def test_applies_in_order(self, host):
        actions = plan_host_actions(_config())

        apply_host_actions(host, actions)

        assert host.actions == actions
