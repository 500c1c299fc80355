import logging

from src.chatrelay.logging_util import get_logger, set_level

def test_set_level_covers_package_and_entrypoint_loggers():
    pkg = get_logger("src.chatrelay.handler")
    entry = get_logger("cli")
    other = logging.getLogger("somebody.else")
    other.setLevel(logging.WARNING)
    try:
        set_level("debug")
        assert pkg.level == logging.DEBUG
        assert entry.level == logging.DEBUG
        assert other.level == logging.WARNING
    finally:
        set_level("info")
