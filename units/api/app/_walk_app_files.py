"""Collect the manifest of an application source tree."""

import os
from pathlib import Path

from ...constants import CONFIG_FILE_NAME
from .ManifestError import ManifestError


def _walk_app_files(app_dir: Path) -> list[Path]:
    """Return every regular file under ``app_dir`` except configuration files, sorted.

    Raises:
        ManifestError: If ``app_dir`` is missing, not a directory, or cannot be walked
    """
    if not app_dir.exists():
        raise ManifestError(app_dir, "directory does not exist")
    if not app_dir.is_dir():
        raise ManifestError(app_dir, "not a directory")

    def _onerror(error: OSError) -> None:
        raise ManifestError(app_dir, error.strerror or str(error)) from error

    files: list[Path] = []
    for dirpath, _dirnames, filenames in os.walk(app_dir, onerror=_onerror):
        for filename in filenames:
            if filename == CONFIG_FILE_NAME:
                continue
            path = Path(dirpath) / filename
            if not path.is_file():
                continue
            files.append(path)
    return sorted(files, key=lambda p: p.relative_to(app_dir).as_posix())
