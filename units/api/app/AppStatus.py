"""Application status derived from files on disk and service manager state."""

from enum import Enum


class AppStatus(Enum):
    """Installation and run state of an application. Never stored, always computed."""

    NOT_INSTALLED = "not_installed"
    INSTALLED = "installed"
    STOPPED = "stopped"
    RUNNING = "running"

    @property
    def label(self) -> str:
        return _LABELS[self]

    def __str__(self) -> str:
        return self.label


_LABELS = {
    AppStatus.NOT_INSTALLED: "Not Installed",
    AppStatus.INSTALLED: "Installed",
    AppStatus.STOPPED: "Stopped",
    AppStatus.RUNNING: "Running",
}
