import logging

from lendmath.logging import _handler, logger, set_log_level


def test_logger() -> None:
    assert logger.name == "lendmath"
    assert logger.propagate is False

    # Test runners may attach capture handlers of their own
    assert _handler in logger.handlers
    assert isinstance(_handler, logging.StreamHandler)
    assert logger.handlers.count(_handler) == 1


def test_set_log_level() -> None:
    original_level = logger.level
    try:
        set_log_level("WARNING")
        assert logger.level == logging.WARNING
        set_log_level(logging.DEBUG)
        assert logger.level == logging.DEBUG
    finally:
        logger.setLevel(original_level)
