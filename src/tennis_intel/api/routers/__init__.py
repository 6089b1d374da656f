"""API routers module."""

from . import discovery, entrypoints

__all__ = ["discovery", "entrypoints"]
