"""Locate the ``formgrid.toml`` that applies to a working directory."""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "formgrid.toml"
CONFIG_ENV_VAR = "FORMGRID_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Nearest ``formgrid.toml`` at or above *start* (default: cwd).

    ``FORMGRID_CONFIG`` names the file directly and disables the search;
    it yields None when it points at nothing.
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
