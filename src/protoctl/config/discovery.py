"""Locate ``protoctl.toml`` for a repository.

The file is optional. When present, its directory doubles as the
default project root.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "protoctl.toml"
CONFIG_ENV_VAR = "PROTOCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest ``protoctl.toml`` at or above *start* (default: cwd).

    ``PROTOCTL_CONFIG`` short-circuits the search: it names the file to
    use, and a dangling value means "no config" rather than falling back
    to the walk.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
