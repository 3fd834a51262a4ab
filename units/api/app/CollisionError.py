"""Install collision error."""

from pathlib import Path

from ..UnitsError import UnitsError


class CollisionError(UnitsError):
    """Raised when an install target already exists and force was not given."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"File {path} already exists. Use --force to overwrite.")
