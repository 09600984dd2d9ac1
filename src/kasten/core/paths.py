"""Path helpers anchoring vault settings at the vault home."""

import os
from pathlib import Path

# Used when no home directory is configured at all
DEFAULT_HOME = "~/zettelkasten"


def resolve_path(path: str | None, base: str) -> str | None:
    """Resolve a relative path against a base directory.

    Handles ~ expansion and absolute path preservation. None stays None,
    so an unset directory is never turned into a path. Nothing is checked
    on disk.
    """
    if path is None:
        return None
    if Path(path).is_absolute():
        return path
    # ~ means the user's home directory, not a directory below base
    p = Path(path).expanduser()
    if p.is_absolute():
        return str(p)
    return str(Path(base) / p)


def expand_home(home: str | None) -> str:
    """Expand a home directory setting into an absolute path.

    Args:
        home: Configured home (may use ~, may be relative, may be None)

    Returns:
        Absolute home directory; relative values are anchored at the
        current working directory.
    """
    expanded = os.path.expanduser(home if home is not None else DEFAULT_HOME)
    return os.path.abspath(expanded)
