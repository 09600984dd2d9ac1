"""Shared test fixtures and configuration."""

from __future__ import annotations

import pytest

from kasten.core.context import set_context
from kasten.core.search import NoSearchBackend


class FakeSearchBackend:
    """Search backend answering from fixed values, counting capability checks."""

    def __init__(self, find_command: list[str] | None = None, pcre2: bool = False):
        self._find_command = find_command
        self._pcre2 = pcre2
        self.checks = 0

    def find_command(self) -> list[str] | None:
        return self._find_command

    def supports_pcre2(self) -> bool:
        self.checks += 1
        return self._pcre2


class RecordingHost:
    """Host collecting the actions it receives."""

    def __init__(self):
        self.actions = []

    def apply(self, action) -> None:
        self.actions.append(action)


@pytest.fixture(autouse=True)
def reset_context():
    """Clear the published context around every test."""
    set_context(None)
    yield
    set_context(None)


@pytest.fixture
def no_search():
    """Search backend for environments without ripgrep."""
    return NoSearchBackend()


@pytest.fixture
def rg_search():
    """Search backend for environments with a PCRE2-enabled ripgrep."""
    return FakeSearchBackend(["rg", "--files", "--sortr", "created"], pcre2=True)


@pytest.fixture
def host():
    """Recording host integration."""
    return RecordingHost()


@pytest.fixture
def notes_home(tmp_path):
    """A vault home with the default templates present."""
    home = tmp_path / "notes"
    templates = home / "templates"
    templates.mkdir(parents=True)
    (templates / "new_note.md").write_text("# {{title}}\n")
    (templates / "daily_tk.md").write_text("# {{date}}\n")
    return home


@pytest.fixture
def multi_vault_input():
    """Setup input with two vaults and an explicit default."""
    return {
        "vaults": {
            "work": {"home": "/w"},
            "personal": {"home": "/p", "extension": ".txt"},
        },
        "default_vault": "personal",
    }


@pytest.fixture
def fake_search():
    """Factory for search backends with fixed answers."""
    return FakeSearchBackend
