# src/imgarchive/cli.py

"""
Manage archived container images on local disk.

Usage:

    imgarchive archive save nightly
    imgarchive archive load nightly
    imgarchive archive load
    imgarchive archive remove
    imgarchive ls

    # Or run directly without installing:
    $ pip install -e .
    $ python -m imgarchive.cli archive list
"""

import cyclopts

from . import __version__
from .commands import archive
from .commands.common import ConfigFile

app = cyclopts.App(
    name="imgarchive",
    help="Save, load and remove container image archives",
    version=__version__,
)

app.command(archive.app)


@app.default
def _default():
    """Show help when no command is specified."""
    app.help_print([])


# Root-level command for quick access
@app.command
def ls(config: ConfigFile = None):
    """List archived images (same as 'archive list')."""
    archive.ls(config=config)


if __name__ == "__main__":
    app()
