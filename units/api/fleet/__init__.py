"""Fleet module - application discovery and batch commands."""

from .Fleet import Fleet
from .FleetOutputs import FleetInstallOutput, FleetStatusOutput, FleetUninstallOutput

__all__ = ["Fleet", "FleetInstallOutput", "FleetStatusOutput", "FleetUninstallOutput"]
