"""Output schemas for fleet commands."""

from pydantic import BaseModel, Field


class _Output(BaseModel):
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class AppStatusEntry(BaseModel):
    name: str
    status: str = Field(..., description="Machine key: not_installed, installed, stopped or running")
    label: str = Field(..., description="Human readable status")


class AppActionsEntry(BaseModel):
    name: str
    actions: list[str] = Field(default_factory=list)
    cancelled: bool = False


class FleetStatusOutput(_Output):
    apps: list[AppStatusEntry] = Field(default_factory=list)


class FleetInstallOutput(_Output):
    dry_run: bool
    apps: list[AppActionsEntry] = Field(default_factory=list)


class FleetUninstallOutput(_Output):
    dry_run: bool
    apps: list[AppActionsEntry] = Field(default_factory=list)
