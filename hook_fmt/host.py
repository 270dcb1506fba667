"""Host access: executable lookup and formatter process execution."""

from collections.abc import Sequence
import os
from pathlib import Path
import shutil
import subprocess


def command_exists(command: str) -> bool:
    """Check if a command exists in PATH."""
    return shutil.which(command) is not None


def run_process(
    argv: Sequence[str],
    *,
    cwd: str | os.PathLike[str] | None = None,
    timeout: float | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run a formatter process to completion and capture its stderr.

    Stdin and stdout are detached from the hook: stdin is already consumed and
    stdout is reserved for the hook response.

    :param Sequence[str] argv: Program and arguments.
    :param cwd: Working directory for the process, or ``None`` to inherit.
    :type cwd: str | os.PathLike[str] | None
    :param float|None timeout: Seconds to wait before giving up, or ``None``.
    :return: Completed process with ``stderr`` decoded as text.
    :rtype: subprocess.CompletedProcess[str]
    :raises OSError: If the process could not be started.
    :raises subprocess.TimeoutExpired: If ``timeout`` elapsed first.
    """
    return subprocess.run(
        list(argv),
        cwd=Path(cwd) if cwd is not None else None,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.PIPE,
        text=True,
        errors="replace",
        timeout=timeout,
        check=False,
    )
