"""Logging utilities.

Key goal:
- Each step logs clearly so a failed invocation can be located in the function logs.
- Keep logging config minimal; Lambda's own root handler may already be attached.
"""
from __future__ import annotations

import logging
import os

_DEFAULT_LEVEL = os.environ.get("CHATRELAY_LOG_LEVEL", "INFO").upper()

# Entrypoint modules live outside the package namespace.
_ENTRYPOINT_LOGGERS = ("cli", "lambda_function", "__main__")

def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)

    # If already configured elsewhere, do not attach handlers again.
    if logger.handlers:
        return logger

    logger.setLevel(_DEFAULT_LEVEL)

    h = logging.StreamHandler()
    fmt = logging.Formatter("[%(levelname)s] %(name)s:%(lineno)d - %(message)s")
    h.setFormatter(fmt)
    logger.addHandler(h)

    return logger

def log_step(logger: logging.Logger, step: str, msg: str):
    logger.info("[STEP %s] %s", step, msg)

def set_level(level: str):
    """Re-level every chatrelay logger (CLI --verbose)."""
    lvl = level.upper()
    for name in list(logging.root.manager.loggerDict):
        if name.startswith("src.chatrelay") or name in _ENTRYPOINT_LOGGERS:
            logging.getLogger(name).setLevel(lvl)

