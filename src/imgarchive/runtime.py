# src/imgarchive/runtime.py

"""Pythonic wrapper for container runtime CLI commands."""

import subprocess


class ContainerRuntime:
    """Wrapper for docker/podman CLI commands.

    Usage:
        docker = ContainerRuntime()
        docker.save("-o", "/images/web.tar", "web:latest")
        docker.image.ls(capture_output=True, text=True)
        proc = docker.load.spawn(stdin=subprocess.PIPE)
    """

    def __init__(
        self, executable: str = "docker", _subcommand: list[str] | None = None
    ):
        self.executable = executable
        self._subcommand = _subcommand or []

    def command(self, *args: str) -> list[str]:
        """Build the argument list for this subcommand."""
        return [self.executable, *self._subcommand, *(str(a) for a in args)]

    def __call__(
        self,
        *args: str,
        capture_output: bool = False,
        text: bool = False,
        check: bool = False,
    ) -> subprocess.CompletedProcess:
        """Run a runtime command with the given arguments and wait for it."""
        return subprocess.run(
            self.command(*args),
            capture_output=capture_output,
            text=text,
            check=check,
        )

    def spawn(
        self,
        *args: str,
        stdin=None,
        stdout=None,
        stderr=None,
    ) -> subprocess.Popen:
        """Start a runtime command without waiting, for piping data through it."""
        return subprocess.Popen(
            self.command(*args),
            stdin=stdin,
            stdout=stdout,
            stderr=stderr,
        )

    def __getattr__(self, name: str):
        """Dynamically create methods for any runtime subcommand.

        Converts underscores to hyphens for subcommand names.
        Supports nested subcommands like docker.image.ls().
        """
        if name.startswith("__"):
            raise AttributeError(name)
        subcommand = name.replace("_", "-")
        return ContainerRuntime(
            executable=self.executable,
            _subcommand=[*self._subcommand, subcommand],
        )