"""Service manager command error."""

from ..UnitsError import UnitsError


class ServiceCommandError(UnitsError):
    """Raised when a mutating service manager command fails."""

    def __init__(self, command: list[str], returncode: int | None, stderr: str = ""):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr.strip()
        if returncode is None:
            message = f"Failed to run {' '.join(command)}"
        else:
            message = f"Command {' '.join(command)} failed with exit code {returncode}"
        if self.stderr:
            message = f"{message}: {self.stderr}"
        super().__init__(message)
