"""Run-time options shared by the resolver and the dispatcher."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FormatOptions:
    """Options for a single hook run.

    :param bool project_only: Only use formatters installed in the project (local
        ``node_modules`` binaries, virtualenv binaries, build-tool plugins); never
        fall back to executables found on ``PATH``.
    :param float|None timeout: Seconds each formatter process may run, or ``None``
        to wait indefinitely.
    """

    project_only: bool = False
    timeout: float | None = None


DEFAULT_OPTIONS = FormatOptions()
