# src/imgarchive/commands/__init__.py
"""Command topic modules for imgarchive CLI."""

from . import archive as archive
