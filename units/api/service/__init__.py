"""Service module - queries and drives the host service manager."""

from ._AbstractController import _AbstractController
from .ServiceCommandError import ServiceCommandError
from .SystemdController import SystemdController

__all__ = ["ServiceCommandError", "SystemdController", "_AbstractController"]
