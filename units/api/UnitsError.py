"""Base error for units operations."""


class UnitsError(Exception):
    """Base class for every error raised by the units API."""
