import logging

import structlog

from bzlindex.logging import bind_context, clear_context, configure_logging


def test_configure_logging_sets_level_and_single_handler() -> None:
    configure_logging("debug", json_output=False)
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)


def test_unknown_level_falls_back_to_info() -> None:
    configure_logging("chatty", json_output=True)
    assert logging.getLogger().level == logging.INFO


def test_context_binding() -> None:
    bind_context(snapshot="snap.json")
    assert structlog.contextvars.get_contextvars() == {"snapshot": "snap.json"}
    clear_context()
    assert structlog.contextvars.get_contextvars() == {}
