"""Config API module - application configuration and environment."""

from .AppConfig import AppConfig
from .ConfigError import ConfigError
from .PrivilegeError import PrivilegeError
from .SystemdConfig import SystemdConfig

__all__ = ["AppConfig", "ConfigError", "PrivilegeError", "SystemdConfig"]
