# src/imgarchive/__init__.py
"""Manage archived container images on local disk."""

__version__ = "0.1.0"
