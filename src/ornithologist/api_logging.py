"""Call logging for weather provider requests."""

from __future__ import annotations

import functools
import inspect
import logging
import os
import threading
import time
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

_LOG_DIR = os.path.join(os.path.expanduser("~"), ".ornithologist", "logs")
_LOG_FILE = os.path.join(_LOG_DIR, "api_calls.log")

# Argument names whose values never reach the log file.
_REDACTED_ARGS = frozenset({"api_key"})

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def _get_logger() -> logging.Logger:
    """Return the API logger, creating log dir and handler on first use."""
    global _logger
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is not None:
            return _logger

        logger = logging.getLogger("ornithologist.api")
        logger.setLevel(logging.DEBUG)
        logger.propagate = False

        # Log capture handlers from elsewhere may already be attached.
        if not any(
            isinstance(h, (logging.FileHandler, logging.NullHandler))
            for h in logger.handlers
        ):
            logger.addHandler(_make_handler())

        _logger = logger

    return _logger


def _make_handler() -> logging.Handler:
    """Open the log file, or discard records when it cannot be created."""
    try:
        os.makedirs(_LOG_DIR, exist_ok=True)
        handler = logging.FileHandler(_LOG_FILE, encoding="utf-8")
    except OSError:
        # An unwritable log location must never stop a lookup.
        return logging.NullHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"),
    )
    return handler


def _describe_args(fn: Callable[..., Any], args: tuple, kwargs: dict) -> str:
    """Render call arguments (skipping 'self') with secrets masked."""
    try:
        bound = inspect.signature(fn).bind(*args, **kwargs)
    except TypeError:
        # Let the call itself raise the signature error.
        parts = [repr(a) for a in args[1:]]
        parts += [f"{k}={v!r}" for k, v in kwargs.items()]
        return ", ".join(parts)

    parts = []
    for name, value in list(bound.arguments.items())[1:]:
        shown = "'***'" if name in _REDACTED_ARGS else repr(value)
        parts.append(f"{name}={shown}")
    return ", ".join(parts)


def log_api_call(fn: F) -> F:
    """Decorator that logs provider calls to the API log file."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = _get_logger()
        arg_str = _describe_args(fn, args, kwargs)
        logger.info("CALL: %s(%s)", fn.__qualname__, arg_str)

        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
            elapsed = time.monotonic() - start
            logger.info(
                "OK: %s(%s) -> %s (%.3fs)",
                fn.__qualname__, arg_str, type(result).__name__, elapsed,
            )
            return result
        except Exception as exc:
            elapsed = time.monotonic() - start
            logger.error(
                "FAIL: %s(%s) -> %s: %s (%.3fs)",
                fn.__qualname__, arg_str, type(exc).__name__, exc, elapsed,
            )
            raise

    return wrapper  # type: ignore[return-value]
