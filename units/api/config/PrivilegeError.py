"""Privilege error."""

from ..UnitsError import UnitsError


class PrivilegeError(UnitsError):
    """Raised when units is not running with root privileges."""
