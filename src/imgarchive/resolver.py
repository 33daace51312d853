# src/imgarchive/resolver.py
"""Turn an optional archive name into a validated archive path.

Archives live directly inside the configured image folder as ``<name>.tar``.
When no name is given the user picks one of the existing archives
interactively.
"""

from __future__ import annotations

from pathlib import Path

from .errors import (
    ArchiveIOError,
    ArchiveNotFound,
    InvalidExtension,
    InvalidName,
    MissingName,
    SelectionAborted,
)
from .selector import Selector

ARCHIVE_SUFFIX = ".tar"


def archive_filename(name: str) -> str:
    """File name for the archive called *name*.

    Raises:
        InvalidName: If *name* would escape the image folder.
    """
    if not name or name in (".", "..") or "/" in name or "\\" in name:
        raise InvalidName(f"invalid archive name: {name!r}")
    return f"{name}{ARCHIVE_SUFFIX}"


def list_candidates(image_folder: Path) -> list[str]:
    """Names of the regular ``.tar`` files directly inside *image_folder*, sorted."""
    try:
        return sorted(
            entry.name
            for entry in image_folder.iterdir()
            if entry.name.endswith(ARCHIVE_SUFFIX) and entry.is_file()
        )
    except OSError as e:
        raise ArchiveIOError(f"could not list {image_folder}: {e}") from e


def save_destination(name: str | None, image_folder: Path) -> Path:
    """Write target for ``save``. It does not need to exist."""
    if not name:
        raise MissingName("please provide a name for the image")
    return image_folder / archive_filename(name)


def validate_archive(path: Path) -> Path:
    if not path.is_file():
        raise ArchiveNotFound(path)
    if not str(path).endswith(ARCHIVE_SUFFIX):
        raise InvalidExtension(path)
    return path


def resolve(name: str | None, image_folder: Path, selector: Selector) -> Path:
    """Resolve the archive an operation acts on.

    With a name, the archive is ``<image_folder>/<name>.tar``. Without one,
    *selector* is shown every archive in the folder and its choice is used
    as the file name as-is.

    Raises:
        SelectionAborted: If the picker was cancelled.
        ArchiveNotFound: If the archive does not exist.
        InvalidExtension: If the path does not end in ``.tar``.
    """
    if name:
        path = image_folder / archive_filename(name)
    else:
        selected = selector(list_candidates(image_folder))
        if selected is None:
            raise SelectionAborted("image selection aborted")
        path = image_folder / selected

    return validate_archive(path)
