"""Running commands through the user's shell."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Mapping

from jobrunner.errors import ExecutionError, ShellNotFoundError


class Shell:
    """A shell program that runs commands with ``-c``."""

    def __init__(self, path: str) -> None:
        self.path = path

    def __repr__(self) -> str:
        return f"Shell({self.path!r})"

    def execute(self, cmd: str) -> str:
        """Run ``cmd`` and return its standard output followed by its standard error."""
        try:
            result = subprocess.run([self.path, "-c", cmd], capture_output=True)
        except OSError as exc:
            raise ExecutionError() from exc
        stdout = result.stdout.decode("utf-8", errors="replace")
        stderr = result.stderr.decode("utf-8", errors="replace")
        return stdout + stderr


def shell_from_env(environ: Mapping[str, str] | None = None) -> Shell:
    """Build a Shell from the SHELL variable of ``environ`` (default: the process environment)."""
    if environ is None:
        environ = os.environ
    path = environ.get("SHELL")
    if path is None:
        raise ShellNotFoundError()
    return Shell(path)