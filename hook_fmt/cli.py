"""Command-line entry point for the post-write formatting hook.

Reads the hook payload from stdin, formats the referenced file and prints the hook
response as one line of JSON on stdout. The hook never blocks the caller: the
response always carries ``"continue": true`` and the exit code is 0.
"""

import argparse
from argparse import ArgumentParser
from collections.abc import Sequence
import json
import math
import os.path
import sys

import structlog

from . import __version__
from .common import configure_logging
from .dispatch import format_file
from .extract import extract_file_path
from .options import FormatOptions


MESSAGE_PREFIX = "[hook-fmt]"

logger = structlog.get_logger(__name__)


def script_entry_point() -> None:
    """Console-script entry point that delegates to :func:`main`."""
    sys.exit(main(tuple(sys.argv[1:]), sys.argv[0], __name__))


def main(cmd_args: Sequence[str], prog_path: str, entry_name: str) -> int:
    """Execute the command-line interface.

    :param cmd_args: Command arguments for the program.
    :type cmd_args: Sequence[str]
    :param str prog_path: The program path (i.e., sys.argv[0] or equivalent).
    :param str entry_name: The ``__name__`` of the calling module.
    :return: Exit code (always 0, so the hook never fails the caller).
    :rtype: int
    """
    parser = _get_parser(os.path.basename(prog_path))
    parsed_args = parser.parse_args(cmd_args)
    configure_logging(parsed_args.debug)

    options = FormatOptions(
        project_only=parsed_args.project_only, timeout=parsed_args.timeout
    )
    try:
        raw_input = sys.stdin.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("stdin_read_failed", error=str(e))
        print(render_response("Failed to read input", parsed_args.debug))
        return 0

    message = handle_input(raw_input, options)
    print(render_response(message, parsed_args.debug))
    return 0


def handle_input(raw_input: str, options: FormatOptions) -> str:
    """Run the hook on a raw payload and return the message for the response.

    :param str raw_input: Text read from stdin.
    :param FormatOptions options: Run-time options.
    :return: A human-readable message describing the outcome.
    :rtype: str
    """
    file_path = extract_file_path(raw_input)
    if file_path is None:
        return "Could not extract file path from input"

    if not os.path.exists(file_path):
        return f"File does not exist: {file_path}"

    result = format_file(file_path, options)
    logger.debug(
        "format_finished",
        formatted=result.formatted,
        formatter=result.formatter,
        message=result.message,
    )
    return f"{MESSAGE_PREFIX} {result.message}"


def render_response(message: str, debug: bool) -> str:
    """Render the hook response.

    :param str message: Outcome message; only included when ``debug`` is set.
    :param bool debug: Whether to surface ``message`` as a system message.
    :return: Compact single-line JSON.
    :rtype: str
    """
    response: dict[str, bool | str] = {"continue": True}
    if debug:
        response["systemMessage"] = message
    return json.dumps(response, separators=(",", ":"))


def _positive_seconds(value: str) -> float:
    seconds = float(value)
    if not math.isfinite(seconds) or seconds <= 0:
        raise argparse.ArgumentTypeError(
            f"must be a finite number greater than 0: {value}"
        )
    return seconds


def _get_parser(prog_name: str) -> ArgumentParser:
    parser = ArgumentParser(
        prog=prog_name,
        description=(
            "Format the file named in a post-write hook payload (read from stdin) "
            "with the best formatter available in its project or on PATH."
        ),
        formatter_class=lambda prog: argparse.HelpFormatter(prog, width=80),
    )
    parser.add_argument("-V", "--version", action="version", version=__version__)
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Include the outcome in the response and log diagnostics to stderr.",
    )
    parser.add_argument(
        "--project-only",
        action="store_true",
        help=(
            "Only use formatters installed in the project; never fall back to "
            "formatters found on PATH."
        ),
    )
    parser.add_argument(
        "--timeout",
        type=_positive_seconds,
        default=None,
        metavar="SECONDS",
        help="Give up on a formatter after this many seconds (default: wait).",
    )
    return parser


if __name__ == "__main__":
    script_entry_point()
