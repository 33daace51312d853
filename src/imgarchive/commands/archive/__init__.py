# src/imgarchive/commands/archive/__init__.py
"""Archive management commands."""

from .app import app, load, ls, remove, save

__all__ = ["app", "save", "load", "remove", "ls"]
