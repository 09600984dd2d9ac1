"""Detection of the optional ripgrep search accelerator.

Ripgrep is a soft dependency: when it is missing or broken, listings fall
back to the picker's own file finder. Nothing in here raises.
"""

import logging
import shutil
import subprocess
from typing import Protocol

from kasten.core.config import RG_CHECK_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)

RG_BINARY = "rg"
RG_FIND_ARGS = ["--files", "--sortr", "created"]


class SearchBackend(Protocol):
    """Capabilities of the file search tool."""

    def find_command(self) -> list[str] | None:
        """Argument list that lists note files, None if unavailable."""
        ...

    def supports_pcre2(self) -> bool:
        """Whether PCRE2 patterns can be used."""
        ...


class NoSearchBackend:
    """No accelerated search available."""

    def find_command(self) -> list[str] | None:
        return None

    def supports_pcre2(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NoSearchBackend()"


class RipgrepBackend:
    """Ripgrep found on PATH."""

    def __init__(self, binary: str = RG_BINARY, timeout: float = RG_CHECK_TIMEOUT_SECONDS):
        """
        Initialize backend.

        Args:
            binary: Path or name of the rg executable
            timeout: Seconds to wait for the capability check
        """
        self.binary = binary
        self.timeout = timeout
        self._pcre2: bool | None = None

    def find_command(self) -> list[str] | None:
        return [RG_BINARY, *RG_FIND_ARGS]

    def supports_pcre2(self) -> bool:
        """
        Check whether rg was compiled with PCRE2 support.

        Runs `rg --pcre2 hello` on the input "hello". The result is cached.

        Returns:
            True if the check exited with status 0
        """
        if self._pcre2 is not None:
            return self._pcre2

        try:
            result = subprocess.run(
                [self.binary, "--pcre2", "hello"],
                input="hello\n",
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
            self._pcre2 = result.returncode == 0
            logger.debug(f"PCRE2 check: returncode={result.returncode}")
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug(f"PCRE2 check failed: {e}")
            self._pcre2 = False
        return self._pcre2

    def __repr__(self) -> str:
        return f"RipgrepBackend({self.binary})"


def detect_search_backend() -> SearchBackend:
    """Return RipgrepBackend if rg is on PATH, else NoSearchBackend."""
    binary = shutil.which(RG_BINARY)
    if binary is None:
        logger.debug("ripgrep not found on PATH")
        return NoSearchBackend()
    return RipgrepBackend(binary)
