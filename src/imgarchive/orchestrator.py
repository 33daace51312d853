# src/imgarchive/orchestrator.py
"""Run save, load and remove against the container runtime and filesystem.

Each operation performs exactly one external action after validation and
either returns an OperationOutcome or raises an ArchiveError. Nothing is
retried and nothing is cleaned up on failure.
"""

from __future__ import annotations

import contextlib
import enum
import subprocess
from dataclasses import dataclass
from pathlib import Path

from . import resolver
from .config import Config
from .errors import ArchiveIOError, ExternalProcessFailure
from .runtime import ContainerRuntime
from .selector import Selector, fzf


class Operation(enum.Enum):
    SAVE = "save"
    LOAD = "load"
    REMOVE = "remove"


@dataclass(frozen=True)
class ArchiveRequest:
    operation: Operation
    name: str | None = None


@dataclass(frozen=True)
class OperationOutcome:
    operation: Operation
    path: Path
    message: str


def save(
    name: str | None,
    cfg: Config,
    runtime: ContainerRuntime,
    quiet: bool = False,
) -> OperationOutcome:
    """Save the configured image to ``<image_folder>/<name>.tar``.

    Runs ``<runtime> save -o <path> <api_image_name>`` with the runtime's
    output going straight to the terminal.
    """
    path = resolver.save_destination(name, cfg.image_folder)

    if not quiet:
        print(f"Saving docker image to {path}")

    try:
        result = runtime.save("-o", str(path), cfg.api_image_name)
    except OSError as e:
        raise ArchiveIOError(f"could not run {runtime.executable}: {e}") from e

    if result.returncode != 0:
        raise ExternalProcessFailure(
            "could not save docker image", returncode=result.returncode
        )
    return OperationOutcome(Operation.SAVE, path, "Successfully saved docker image")


def _close_quietly(stream) -> None:
    # Flushing leftover bytes into a dead pipe fails again; the fd is still released.
    with contextlib.suppress(OSError):
        stream.close()


def pipe_archive(path: Path, runtime: ContainerRuntime) -> int:
    """Feed the archive at *path* to ``<runtime> load`` and return its exit code.

    The whole file is read into memory, written to the child's stdin and
    stdin is closed before waiting. The child's stdout and stderr are
    discarded.

    Raises:
        ArchiveIOError: If the archive cannot be read, the runtime cannot be
            started, or the runtime exits before taking every byte.
    """
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ArchiveIOError(f"could not read {path}: {e}") from e

    try:
        proc = runtime.load.spawn(
            stdin=subprocess.PIPE,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError as e:
        raise ArchiveIOError(f"could not run {runtime.executable}: {e}") from e

    try:
        proc.stdin.write(data)
        proc.stdin.close()
    except BrokenPipeError as e:
        _close_quietly(proc.stdin)
        proc.wait()
        raise ArchiveIOError(
            f"{runtime.executable} load exited before reading all of {path}"
        ) from e
    except OSError as e:
        _close_quietly(proc.stdin)
        proc.kill()
        proc.wait()
        raise ArchiveIOError(f"could not write {path} to {runtime.executable}: {e}") from e

    return proc.wait()


def load(
    name: str | None,
    cfg: Config,
    runtime: ContainerRuntime,
    selector: Selector = fzf,
    quiet: bool = False,
) -> OperationOutcome:
    """Load an archive into the local image store."""
    path = resolver.resolve(name, cfg.image_folder, selector)

    if not quiet:
        print(f"Loading docker image {path}")

    returncode = pipe_archive(path, runtime)
    if returncode != 0:
        raise ExternalProcessFailure("could not load docker image", returncode=returncode)
    return OperationOutcome(Operation.LOAD, path, f"Loaded docker image {path}")


def remove(
    name: str | None,
    cfg: Config,
    selector: Selector = fzf,
) -> OperationOutcome:
    """Delete an archive. There is no confirmation prompt."""
    path = resolver.resolve(name, cfg.image_folder, selector)

    try:
        path.unlink()
    except OSError as e:
        raise ExternalProcessFailure("could not remove docker image") from e
    return OperationOutcome(Operation.REMOVE, path, f"Removed image: {path}")


def handle(
    request: ArchiveRequest,
    cfg: Config,
    selector: Selector = fzf,
    runtime: ContainerRuntime | None = None,
    quiet: bool = False,
) -> OperationOutcome:
    """Dispatch a parsed request to its operation."""
    runtime = runtime or ContainerRuntime(cfg.runtime)

    if request.operation is Operation.SAVE:
        return save(request.name, cfg, runtime, quiet=quiet)
    if request.operation is Operation.LOAD:
        return load(request.name, cfg, runtime, selector=selector, quiet=quiet)
    return remove(request.name, cfg, selector=selector)
