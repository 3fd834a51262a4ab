"""Abstract base class for service manager controllers."""

from abc import ABC, abstractmethod


class _AbstractController(ABC):
    """Narrow interface to an externally managed service manager.

    Queries answer False whenever the state cannot be determined. Mutations
    raise ServiceCommandError on failure; callers decide whether to ignore it.
    """

    def __init__(self, user: bool = False):
        self.user = user

    @abstractmethod
    def is_active(self, unit: str) -> bool:
        """Whether the unit is currently active."""
        pass

    @abstractmethod
    def is_enabled(self, unit: str) -> bool:
        """Whether the unit is enabled."""
        pass

    @abstractmethod
    def start(self, unit: str) -> None:
        """Start the unit.

        Raises:
            ServiceCommandError: If the service manager reports failure
        """
        pass

    @abstractmethod
    def stop(self, unit: str) -> None:
        """Stop the unit.

        Raises:
            ServiceCommandError: If the service manager reports failure
        """
        pass

    @abstractmethod
    def daemon_reload(self) -> None:
        """Reload the service manager's unit files.

        Raises:
            ServiceCommandError: If the service manager reports failure
        """
        pass

    @abstractmethod
    def follow_logs(self, unit: str) -> None:
        """Follow the unit's journal in the foreground until interrupted.

        Raises:
            ServiceCommandError: If the log viewer exits non-zero
        """
        pass
