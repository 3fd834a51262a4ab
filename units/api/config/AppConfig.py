"""Per-application configuration loaded from config.toml."""

import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError

from .ConfigError import ConfigError
from .SystemdConfig import SystemdConfig


class AppConfig(BaseModel):
    """Configuration of a single application."""

    model_config = ConfigDict(extra="ignore")

    systemd: SystemdConfig

    @classmethod
    def load(cls, path: Path) -> "AppConfig":
        """Load and validate an application config file.

        Raises:
            ConfigError: If the file is missing, unreadable, not TOML, or fails validation
        """
        try:
            with path.open("rb") as fh:
                raw = tomllib.load(fh)
        except FileNotFoundError as e:
            raise ConfigError("Failed to find config file", path) from e
        except OSError as e:
            raise ConfigError(f"Failed to read config file: {e.strerror or e}", path) from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in config file: {e}", path) from e

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ConfigError(f"Configuration validation error: {detail}", path) from e
