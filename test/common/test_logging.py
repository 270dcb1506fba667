import logging

from assertpy import assert_that

from hook_fmt.common import configure_logging
from hook_fmt.common.logging import HANDLER_NAME


def _own_handlers() -> list[logging.Handler]:
    return [h for h in logging.getLogger().handlers if h.get_name() == HANDLER_NAME]


def test_reconfiguring_replaces_only_its_own_handler() -> None:
    root = logging.getLogger()
    foreign = logging.NullHandler()
    root.addHandler(foreign)
    try:
        configure_logging()
        configure_logging(debug=True)

        assert_that(_own_handlers()).is_length(1)
        assert_that(root.handlers).contains(foreign)
    finally:
        root.removeHandler(foreign)


def test_level_follows_debug_flag() -> None:
    configure_logging(debug=True)
    assert_that(logging.getLogger().level).is_equal_to(logging.DEBUG)

    configure_logging()
    assert_that(logging.getLogger().level).is_equal_to(logging.WARNING)
