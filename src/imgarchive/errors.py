# src/imgarchive/errors.py
"""Errors raised while resolving archives and running the container runtime.

Every error is terminal for the current invocation. The command layer turns
them into ``SystemExit("[error] ...")``.
"""

from pathlib import Path


class ArchiveError(Exception):
    """Base class for archive command failures."""


class ConfigUnavailable(ArchiveError):
    """Configuration could not be loaded or is incomplete."""


class MissingName(ArchiveError):
    """An operation that needs a name was called without one."""


class InvalidName(ArchiveError):
    """Name would place the archive outside the archive directory."""


class SelectionAborted(ArchiveError):
    """The interactive picker was cancelled."""


class ArchiveNotFound(ArchiveError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"file does not exist: {path}")


class InvalidExtension(ArchiveError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"file is not a tar file: {path}")


class ExternalProcessFailure(ArchiveError):
    """The runtime (or the delete) reported failure."""

    def __init__(self, message: str, returncode: int | None = None):
        self.returncode = returncode
        super().__init__(message)


class ArchiveIOError(ArchiveError):
    """Reading, writing or spawning failed while moving archive bytes."""
