"""Systemd section of an application configuration."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SystemdConfig(BaseModel):
    """Where an application's files are installed and which systemd instance manages them."""

    model_config = ConfigDict(extra="forbid")

    install_location: Path = Field(..., description="Directory the unit files are copied into")
    use_user: bool = Field(..., description="Manage units with the per-user systemd instance (--user)")

    @field_validator("install_location", mode="before")
    @classmethod
    def validate_install_location(cls, v):
        if isinstance(v, str) and not v.strip():
            raise ValueError("systemd.install_location must not be empty")
        return v

    @field_validator("install_location")
    @classmethod
    def expand_install_location(cls, v: Path) -> Path:
        return v.expanduser()
