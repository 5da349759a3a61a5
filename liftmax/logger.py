"""Application logging for liftmax.

The level and optional log file come from ``LOG_LEVEL`` and ``LOG_FILE``.
The estimation core does not log; the repository and the app do.
"""
import logging
import sys
from functools import wraps
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .config import log_file as _configured_log_file
from .config import log_level as _configured_log_level
from .errors import LiftMaxError

LOG_FORMAT = '%(asctime)s %(levelname)-8s %(name)s [%(filename)s:%(lineno)d] %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
MAX_LOG_BYTES = 5_000_000
LOG_BACKUPS = 3


def _rotating_handler(path: str) -> logging.Handler:
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(path, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding='utf-8')


def setup_logger(
    name: str = "liftmax",
    level: str = "INFO",
    log_file: Optional[str] = None,
    console: bool = True
) -> logging.Logger:
    """Build the named logger with a stdout and/or rotating file handler.

    Calling it again replaces the handlers, so tests can reconfigure freely.

    Example:
        >>> lg = setup_logger(level="DEBUG", log_file="logs/liftmax.log")
        >>> lg.info("Calculator ready")
    """
    lg = logging.getLogger(name)
    lg.setLevel(getattr(logging, level.upper(), logging.INFO))
    lg.handlers.clear()

    handlers: list[logging.Handler] = []
    if console:
        handlers.append(logging.StreamHandler(sys.stdout))
    if log_file:
        handlers.append(_rotating_handler(log_file))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        lg.addHandler(handler)
    return lg


logger = setup_logger(level=_configured_log_level(), log_file=_configured_log_file())


def log_function_call(func):
    """Trace calls at DEBUG and re-raise failures.

    Rejected input (``LiftMaxError``) is expected and stays at DEBUG;
    anything else is logged at ERROR.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        logger.debug(f"-> {func.__qualname__} args={args} kwargs={kwargs}")
        try:
            result = func(*args, **kwargs)
        except LiftMaxError as e:
            logger.debug(f"{func.__qualname__} rejected input: {e}")
            raise
        except Exception as e:
            logger.error(f"{func.__qualname__} failed with {type(e).__name__}: {e}")
            raise
        logger.debug(f"<- {func.__qualname__} returned {result!r}")
        return result

    return wrapper
