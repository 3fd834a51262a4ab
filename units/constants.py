"""Shared constants for units file names and locations."""

UNITS_HOME_EXT = ".units"  # user-level state directory suffix

# Per-application configuration file, never part of the manifest
CONFIG_FILE_NAME = "config.toml"

# Suffix of the primary unit started for each application
SERVICE_SUFFIX = ".service"

# Environment variables
UNITS_ROOT_ENV = "UNITS_ROOT"
UNITS_HOME_ENV = "UNITS_HOME"
