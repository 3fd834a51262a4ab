"""Get units home directory path or path under it."""

import os
from pathlib import Path

from ...constants import UNITS_HOME_ENV, UNITS_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get units home directory path or path under it.

    Checks the UNITS_HOME environment variable first, defaults to ~/.units if not set.

    Args:
        *parts: Optional path components to join (e.g., "units.log")

    Returns:
        Absolute path to the units home directory or a subpath under it

    Examples:
        >>> get_home_dir()
        Path("/root/.units")
        >>> get_home_dir("units.log")
        Path("/root/.units/units.log")
    """
    units_home_env = os.environ.get(UNITS_HOME_ENV)
    if units_home_env:
        units_home = Path(units_home_env).expanduser().resolve()
    else:
        home_env = os.environ.get("HOME")
        if home_env:
            units_home = Path(home_env) / UNITS_HOME_EXT
        else:
            units_home = Path.home() / UNITS_HOME_EXT

    return units_home / Path(*parts) if parts else units_home
