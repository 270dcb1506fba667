"""Formatter candidates: what to run, where, and what to do when it fails."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class OnFailure(Enum):
    """What the dispatcher does when a started candidate exits non-zero."""

    REPORT = "report"
    """Stop and report the failure."""

    NEXT = "next"
    """Try the next candidate; the failure is reported only if nothing else works."""


@dataclass(frozen=True)
class Invocation:
    """One process to spawn.

    :param str program: Absolute path to a project-local binary, or a bare command
        name looked up on ``PATH``.
    :param tuple[str, ...] args: Arguments, including the target file if any.
    :param cwd: Working directory, or ``None`` to inherit the hook's.
    :type cwd: Path | None
    """

    program: str
    args: tuple[str, ...] = ()
    cwd: Path | None = None

    @property
    def argv(self) -> list[str]:
        return [self.program, *self.args]


@dataclass(frozen=True)
class FormatterCandidate:
    """An orderable option for formatting a file.

    Most candidates have a single invocation. A candidate with several runs them in
    order and only counts as successful if all of them succeed.

    :param str name: Display name used in results.
    :param tuple[Invocation, ...] invocations: Processes to run, in order.
    :param OnFailure on_failure: Continuation policy after a non-zero exit.
    """

    name: str
    invocations: tuple[Invocation, ...]
    on_failure: OnFailure = OnFailure.REPORT

    @classmethod
    def single(
        cls,
        name: str,
        program: str | Path,
        args: tuple[str, ...],
        file_path: Path | None,
        cwd: Path | None = None,
        on_failure: OnFailure = OnFailure.REPORT,
    ) -> "FormatterCandidate":
        """Build a one-process candidate, appending ``file_path`` when given."""
        if file_path is not None:
            args = (*args, str(file_path))
        return cls(name, (Invocation(str(program), args, cwd),), on_failure)
