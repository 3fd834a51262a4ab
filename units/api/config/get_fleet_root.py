"""Resolve the fleet root directory."""

import os
from pathlib import Path

from ...constants import UNITS_ROOT_ENV


def get_fleet_root(root: Path | str | None = None) -> Path:
    """Return the directory holding one subdirectory per application.

    Precedence: explicit ``root`` argument, then UNITS_ROOT, then the current
    working directory.
    """
    if root is None:
        root = os.environ.get(UNITS_ROOT_ENV) or Path.cwd()
    return Path(root).expanduser().resolve()
