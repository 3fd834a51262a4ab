"""Empty manifest error."""

from ..UnitsError import UnitsError


class EmptyManifestError(UnitsError):
    """Raised when an application has no files to install or uninstall."""

    def __init__(self, app_name: str):
        self.app_name = app_name
        super().__init__(f"No files found for app {app_name}")
