from __future__ import annotations

import logging


def test_default_log_is_silent_by_default() -> None:
    from countable.utils.logging import default_log

    assert default_log.name == "countable-default-log"
    assert any(isinstance(h, logging.NullHandler) for h in default_log.handlers)


def test_get_logger_returns_children_of_the_default_log() -> None:
    from countable.utils.logging import default_log, get_logger

    assert get_logger() is default_log
    assert get_logger("") is default_log
    child = get_logger("matcher")
    assert child.name == "countable-default-log.matcher"
    assert child.parent is default_log


def test_child_records_propagate(caplog) -> None:
    from countable.utils.logging import get_logger

    with caplog.at_level(logging.INFO):
        get_logger("test").info("hello from %s", "countable")

    assert any(r.getMessage() == "hello from countable" for r in caplog.records)
