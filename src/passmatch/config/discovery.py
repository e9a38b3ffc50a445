"""Config file and store location discovery.

The config file is looked up at ``$PASSMATCH_CONFIG`` first, then at
``$XDG_CONFIG_HOME/passmatch/config.toml``. The store location follows
``pass`` itself: ``$PASSWORD_STORE_DIR`` or ``~/.password-store``.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "config.toml"
CONFIG_ENV_VAR = "PASSMATCH_CONFIG"
STORE_ENV_VAR = "PASSWORD_STORE_DIR"
DEFAULT_STORE_DIRNAME = ".password-store"


def find_config() -> Path | None:
    """Locate the config file.

    Returns the path to the config file, or None if not found.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    candidate = base / "passmatch" / CONFIG_FILENAME
    if candidate.is_file():
        return candidate
    return None


def default_store_path() -> Path:
    """Return the store location from the environment.

    ``$PASSWORD_STORE_DIR`` when set and non-empty, otherwise
    ``<home>/.password-store``. Symlinks are not resolved here; the
    store does that when it is opened.
    """
    env_path = os.environ.get(STORE_ENV_VAR)
    if env_path:
        return Path(env_path)
    return Path.home() / DEFAULT_STORE_DIRNAME
