"""API module for units.

Functions and classes here are the single source of truth for the CLI.
"""

__all__ = []
