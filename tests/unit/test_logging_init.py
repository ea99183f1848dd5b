from __future__ import annotations

import logging
from io import StringIO

from contact_batcher.logging.init import (
    SUMMARY_LEVEL,
    LabeledFormatter,
    enable_debug,
    get_logger,
    log_summary,
    setup_logging,
)


def test_setup_logging_creates_logger_with_labeled_formatter():
    logger = setup_logging()

    assert logger.name == "contact_batcher"
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, LabeledFormatter)
    assert logger.propagate is False


def test_setup_logging_is_idempotent():
    first = setup_logging()
    second = setup_logging()
    assert first is second
    assert len(second.handlers) == 1


def test_get_logger_returns_configured_logger():
    assert get_logger() is setup_logging()


def test_logging_labeled_prefixes():
    captured_output = StringIO()
    logger = logging.getLogger("test_contact_batcher_labels")
    logger.setLevel(logging.INFO)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")
    handler = logging.StreamHandler(captured_output)
    handler.setFormatter(LabeledFormatter())
    logger.addHandler(handler)
    logger.propagate = False

    logger.info("Test info message")
    logger.warning("Test warning message")
    logger.error("Test error message")
    logger.log(SUMMARY_LEVEL, "Test summary message")

    lines = captured_output.getvalue().strip().split("\n")
    assert lines == [
        "INFO Test info message",
        "WARN Test warning message",
        "ERROR Test error message",
        "SUMMARY Test summary message",
    ]


def test_module_loggers_reach_the_package_handler(capsys):
    setup_logging()
    logging.getLogger("contact_batcher.services.range_selector").warning("clamped")
    assert "WARN clamped" in capsys.readouterr().out


def test_log_summary_and_debug(capsys):
    logger = setup_logging()
    logger.debug("hidden")
    enable_debug(logger)
    logger.debug("shown")
    log_summary("records=1")
    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "DEBUG shown" in out
    assert "SUMMARY records=1" in out
