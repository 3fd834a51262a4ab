"""Manifest discovery error."""

from pathlib import Path

from ..UnitsError import UnitsError


class ManifestError(UnitsError):
    """Raised when an application source tree cannot be walked."""

    def __init__(self, app_dir: Path, reason: str):
        self.app_dir = app_dir
        self.reason = reason
        super().__init__(f"Cannot read app files in {app_dir}: {reason}")
