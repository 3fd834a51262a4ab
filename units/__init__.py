"""units - deploy directory trees of systemd unit files and manage their services."""

__all__ = []
