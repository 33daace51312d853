# src/imgarchive/selector.py
"""Interactive archive picker.

A selector is any callable that takes the candidate file names and returns
the chosen one, or None when the user aborts. The default drives ``fzf``,
feeding it the newline-joined candidates on stdin; the terminal is left
attached so it can draw its UI.
"""

from __future__ import annotations

import subprocess
from collections.abc import Callable

from .errors import ArchiveIOError

Selector = Callable[[list[str]], str | None]

# fzf: 1 = no match, 130 = interrupted with Esc or Ctrl-C
FZF_ABORT_CODES = (1, 130)


class FzfSelector:
    """Pick one archive with fzf.

    Usage:
        select = FzfSelector()
        choice = select(["web.tar", "worker.tar"])
    """

    def __init__(self, executable: str = "fzf", height: str = "100%"):
        self.executable = executable
        self.height = height

    def __call__(self, candidates: list[str]) -> str | None:
        try:
            result = subprocess.run(
                [self.executable, f"--height={self.height}"],
                input="\n".join(candidates),
                stdout=subprocess.PIPE,
                text=True,
            )
        except FileNotFoundError as e:
            raise ArchiveIOError(f"{self.executable} not found in PATH") from e

        if result.returncode in FZF_ABORT_CODES:
            return None
        if result.returncode != 0:
            raise ArchiveIOError(
                f"{self.executable} exited with status {result.returncode}"
            )

        lines = result.stdout.splitlines()
        return lines[0] if lines else None


fzf = FzfSelector()
