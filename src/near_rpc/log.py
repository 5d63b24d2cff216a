import logging
import os
import sys

from logging import Logger
from typing import Optional

_LOGGER_NAME = "near_rpc"
_CONSOLE_HANDLER_NAME = "near_rpc.console"

_logger = logging.getLogger(_LOGGER_NAME)
_logger.addHandler(logging.NullHandler())


def _console_handler() -> Optional[logging.Handler]:
    for handler in _logger.handlers:
        if handler.get_name() == _CONSOLE_HANDLER_NAME:
            return handler
    return None


def _ensure_console_logging() -> None:
    """Attach a stdout handler to the package logger when asked to.

    Console output is opt-in through `NEAR_RPC_LOG_LEVEL`; without it the
    logger only carries a NullHandler and records propagate to whatever the
    host application configured. With it, one handler is attached and
    propagation is disabled so lines appear exactly once in the console.
    """

    level_name = os.getenv("NEAR_RPC_LOG_LEVEL")
    handler = _console_handler()

    if not level_name:
        if handler is not None:
            _logger.removeHandler(handler)
            _logger.setLevel(logging.NOTSET)
            _logger.propagate = True
        return

    _logger.setLevel(getattr(logging, level_name.upper(), logging.WARNING))
    if handler is None:
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.set_name(_CONSOLE_HANDLER_NAME)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        _logger.addHandler(handler)
    # Avoid double-printing if root logger is configured elsewhere
    _logger.propagate = False


def get_logger(name: Optional[str] = None) -> Logger:
    """Return the package logger, or a child of it for `name`."""
    # Re-read the env so the console handler follows NEAR_RPC_LOG_LEVEL
    _ensure_console_logging()
    if not name or name == _LOGGER_NAME:
        return _logger
    if name.startswith(_LOGGER_NAME + "."):
        name = name[len(_LOGGER_NAME) + 1:]
    return _logger.getChild(name)
