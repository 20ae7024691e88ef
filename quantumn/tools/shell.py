"""Running external commands."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Sequence

from quantumn.tools.files import ToolError


def _run(
    cmd: str, args: Sequence[str], cwd: str | os.PathLike[str] | None = None
) -> subprocess.CompletedProcess[bytes]:
    try:
        return subprocess.run([cmd, *args], capture_output=True, cwd=cwd, check=False)
    except OSError as exc:
        raise ToolError(f"Failed to run command {cmd}: {exc}") from exc


def run_command(cmd: str, args: Sequence[str]) -> subprocess.CompletedProcess[bytes]:
    """Run a command and capture its output; a non-zero exit is not an error."""
    return _run(cmd, args)


def run_command_in_dir(
    cmd: str, args: Sequence[str], directory: str | os.PathLike[str]
) -> subprocess.CompletedProcess[bytes]:
    """Run a command in ``directory`` and capture its output."""
    return _run(cmd, args, cwd=directory)


def run_command_string(cmd: str, args: Sequence[str]) -> str:
    """Run a command and return its standard output as text."""
    return run_command(cmd, args).stdout.decode("utf-8", errors="replace")


def command_exists(cmd: str) -> bool:
    """Whether ``which`` can find the command."""
    try:
        result = subprocess.run(["which", cmd], capture_output=True, check=False)
    except OSError:
        return False
    return result.returncode == 0