"""Configuration error."""

from pathlib import Path

from ..UnitsError import UnitsError


class ConfigError(UnitsError):
    """Raised when an application configuration file is missing or invalid."""

    def __init__(self, message: str, path: Path | None = None):
        self.path = path
        if path is not None:
            message = f"{message} ({path})"
        super().__init__(message)
