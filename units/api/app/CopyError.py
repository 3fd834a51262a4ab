"""File copy error."""

from pathlib import Path

from ..UnitsError import UnitsError


class CopyError(UnitsError):
    """Raised when a manifest file cannot be copied to its target."""

    def __init__(self, source: Path, target: Path, reason: str):
        self.source = source
        self.target = target
        super().__init__(f"Failed to copy {source} to {target}: {reason}")
