"""App module - one application's manifest, status and lifecycle."""

from .App import App
from .AppStatus import AppStatus
from .CollisionError import CollisionError
from .CopyError import CopyError
from .EmptyManifestError import EmptyManifestError
from .ManifestError import ManifestError

__all__ = [
    "App",
    "AppStatus",
    "CollisionError",
    "CopyError",
    "EmptyManifestError",
    "ManifestError",
]
