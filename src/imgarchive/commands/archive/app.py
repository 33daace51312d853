# src/imgarchive/commands/archive/app.py
"""Archive management commands.

Archives are ``<name>.tar`` files directly inside the configured image
folder:
  - save:   write the configured image to <name>.tar
  - load:   load an archive into the local image store
  - remove: delete an archive
  - list:   show the archives in the image folder

Load and remove pick an archive interactively (fzf) when no name is given.
"""

from pathlib import Path
from typing import Annotated

import cyclopts

from imgarchive import orchestrator, resolver
from imgarchive.config import Config
from imgarchive.errors import ArchiveError
from imgarchive.orchestrator import ArchiveRequest, Operation, OperationOutcome

from ..common import ArchiveName, ConfigFile, Quiet

app = cyclopts.App(
    name=["archive", "archives"],
    help="Save, load and remove container image archives.",
)


def _run(request: ArchiveRequest, config: Path | None, quiet: bool) -> OperationOutcome:
    try:
        cfg = Config.load(config)
        outcome = orchestrator.handle(request, cfg, quiet=quiet)
    except ArchiveError as e:
        raise SystemExit(f"[error] {e}") from e

    if not quiet:
        print(f"[ok] {outcome.message}")
    return outcome


@app.command
def save(
    name: Annotated[
        str | None,
        cyclopts.Parameter(help="Archive name without the .tar suffix"),
    ] = None,
    config: ConfigFile = None,
    quiet: Quiet = False,
):
    """Save the configured image to <image_folder>/<name>.tar.

    Examples:
        imgarchive archive save nightly
    """
    _run(ArchiveRequest(Operation.SAVE, name), config, quiet)


@app.command
def load(
    name: ArchiveName = None,
    config: ConfigFile = None,
    quiet: Quiet = False,
):
    """Load an archive into the local image store.

    Examples:
        imgarchive archive load nightly
        imgarchive archive load          # pick with fzf
    """
    _run(ArchiveRequest(Operation.LOAD, name), config, quiet)


@app.command(name=["remove", "rm"])
def remove(
    name: ArchiveName = None,
    config: ConfigFile = None,
    quiet: Quiet = False,
):
    """Delete an archive. Does not ask for confirmation.

    Examples:
        imgarchive archive remove nightly
        imgarchive archive rm            # pick with fzf
    """
    _run(ArchiveRequest(Operation.REMOVE, name), config, quiet)


@app.command(name="list")
def ls(config: ConfigFile = None):
    """List the archives in the image folder."""
    try:
        cfg = Config.load(config)
        candidates = resolver.list_candidates(cfg.image_folder)
    except ArchiveError as e:
        raise SystemExit(f"[error] {e}") from e

    if not candidates:
        print(f"No archives in {cfg.image_folder}")
        return

    print(f"Archives in {cfg.image_folder}:")
    for filename in candidates:
        print(f"  {filename}")
