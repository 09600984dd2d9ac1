"""Environment settings for kasten."""

import logging
import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def get_env(key: str, default: str | None = None) -> str | None:
    """Get environment variable with optional default."""
    return os.getenv(key, default)


def get_env_bool(key: str, default: bool = False) -> bool:
    """Get environment variable as boolean."""
    value = os.getenv(key, "").lower()
    if value in ("true", "1", "yes"):
        return True
    if value in ("false", "0", "no"):
        return False
    return default


# Overrides file read by the CLI (XDG-style, defaults to ~/.config/kasten)
KASTEN_CONFIG_FILE = get_env(
    "KASTEN_CONFIG_FILE", os.path.expanduser("~/.config/kasten/config.yaml")
) or os.path.expanduser("~/.config/kasten/config.yaml")

# Vault to activate instead of the configured default
KASTEN_VAULT = get_env("KASTEN_VAULT")

# Echo merges and dump the resolved configuration
KASTEN_DEBUG = get_env_bool("KASTEN_DEBUG", False)

# Logging
LOG_LEVEL = get_env("LOG_LEVEL", "INFO")

# Ripgrep capability check
RG_CHECK_TIMEOUT_SECONDS = 5


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure and return logger."""
    level_name = (level or LOG_LEVEL or "INFO").upper()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, level_name, logging.INFO),
    )
    return logging.getLogger(__name__)
