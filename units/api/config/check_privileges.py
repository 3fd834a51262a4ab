"""Root privilege precondition."""

import os

from .PrivilegeError import PrivilegeError


def check_privileges() -> None:
    """Raise PrivilegeError unless the effective user is root."""
    if os.geteuid() != 0:
        raise PrivilegeError("This command must be run as root (for systemd operations)")
