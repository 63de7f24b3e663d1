"""Config file discovery.

Walks up from the working directory looking for promptloop.toml, the
way git finds .git/.  ``PROMPTLOOP_CONFIG`` overrides the walk.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "promptloop.toml"
CONFIG_ENV_VAR = "PROMPTLOOP_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest promptloop.toml at or above *start* (default: cwd).

    When ``PROMPTLOOP_CONFIG`` is set, that path is used instead and None
    is returned if it does not exist.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if current.parent == current:
            return None
        current = current.parent
