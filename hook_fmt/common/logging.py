"""Logging configuration for hook runs.

Diagnostics go to stderr through structlog. Stdout belongs to the hook response,
so nothing in the package may log there.
"""

import logging
import sys

import structlog


HANDLER_NAME = "hook_fmt"


def configure_logging(debug: bool = False) -> None:
    """Configure structlog and the root logger for a single hook invocation.

    Only the stderr handler installed by a previous call is replaced; other root
    handlers are left in place.

    :param bool debug: When ``True``, emit DEBUG events; otherwise only warnings
        and errors are shown.
    """
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)
    root.setLevel(logging.DEBUG if debug else logging.WARNING)

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        )
    )
    root.addHandler(handler)
