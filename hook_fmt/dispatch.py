"""Run formatter candidates in priority order and report a single result."""

from collections.abc import Iterable
import os
import subprocess

import structlog

from .candidate import FormatterCandidate
from .candidate import OnFailure
from .host import run_process
from .options import DEFAULT_OPTIONS
from .options import FormatOptions
from .resolver import resolve
from .result import FormatResult


logger = structlog.get_logger(__name__)


def format_file(
    file_path: str | os.PathLike[str], options: FormatOptions = DEFAULT_OPTIONS
) -> FormatResult:
    """Format ``file_path`` with the best available formatter.

    :param file_path: The edited file.
    :type file_path: str | os.PathLike[str]
    :param FormatOptions options: Run-time options.
    :return: Exactly one result, whatever happened along the way.
    :rtype: FormatResult
    """
    resolution = resolve(file_path, options)
    if resolution.result is not None:
        return resolution.result
    return run_candidates(resolution.label, resolution.candidates, options.timeout)


def run_candidates(
    label: str,
    candidates: Iterable[FormatterCandidate],
    timeout: float | None = None,
) -> FormatResult:
    """Try ``candidates`` in order until one of them settles the outcome.

    A candidate that cannot be started is skipped. A candidate that exits
    successfully wins. A candidate that fails either ends the run
    (:attr:`OnFailure.REPORT`) or is remembered while the next one is tried
    (:attr:`OnFailure.NEXT`).

    :param str label: Family label used in the "no formatter" message.
    :param Iterable[FormatterCandidate] candidates: Candidates, highest priority first.
    :param float|None timeout: Per-process timeout in seconds, or ``None``.
    :return: The success, the reported failure, the last remembered failure, or a
        "no formatter" result, in that order of precedence.
    :rtype: FormatResult
    """
    deferred: FormatResult | None = None
    for candidate in candidates:
        result = _run_candidate(candidate, timeout)
        if result is None:
            continue
        if result.formatted or candidate.on_failure is OnFailure.REPORT:
            return result
        logger.debug("formatter_failed_trying_next", formatter=candidate.name)
        deferred = result
    if deferred is not None:
        return deferred
    return FormatResult.no_formatter(label)


def _run_candidate(
    candidate: FormatterCandidate, timeout: float | None
) -> FormatResult | None:
    for step, invocation in enumerate(candidate.invocations):
        logger.debug("running_formatter", argv=invocation.argv, cwd=invocation.cwd)
        try:
            completed = run_process(
                invocation.argv, cwd=invocation.cwd, timeout=timeout
            )
        except OSError as e:
            logger.debug(
                "formatter_unavailable", formatter=candidate.name, error=str(e)
            )
            if step > 0:
                logger.debug(
                    "formatter_partially_applied",
                    formatter=candidate.name,
                    completed_steps=step,
                )
            return None
        except subprocess.TimeoutExpired:
            logger.warning(
                "formatter_timed_out", formatter=candidate.name, timeout=timeout
            )
            return FormatResult.error(candidate.name, f"timed out after {timeout}s")
        if completed.returncode != 0:
            return FormatResult.error(candidate.name, completed.stderr)
    return FormatResult.success(candidate.name)
