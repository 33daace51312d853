# src/imgarchive/commands/common.py
"""Shared CLI annotations for consistency across commands.

All common flags use long+short forms:
  --quiet, -q
  --config, -c
"""

from pathlib import Path
from typing import Annotated

import cyclopts

Quiet = Annotated[
    bool,
    cyclopts.Parameter(
        name=["--quiet", "-q"],
        help="Suppress output",
    ),
]

ConfigFile = Annotated[
    Path | None,
    cyclopts.Parameter(
        name=["--config", "-c"],
        help="Config file (default: $IMGARCHIVE_CONFIG or ~/.config/imgarchive/config.yaml)",
    ),
]

# Optional archive name; without it the archive is picked interactively
ArchiveName = Annotated[
    str | None,
    cyclopts.Parameter(help="Archive name without the .tar suffix (omit to pick one)"),
]
