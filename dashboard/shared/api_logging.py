"""Call logging for the ASI dashboard data and service layers."""

from __future__ import annotations

import functools
import logging
import os
import threading
import time
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

LOGGER_NAME = "asi_dashboard.api"

_LOG_DIR = os.path.join(os.path.dirname(__file__), "..", "logs")
_LOG_FILE = os.path.join(_LOG_DIR, "api_calls.log")

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def _get_logger() -> logging.Logger:
    """Return the file logger, creating the log dir and handler on first use."""
    global _logger
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is not None:
            return _logger

        os.makedirs(_LOG_DIR, exist_ok=True)

        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False

        if not logger.handlers:
            handler = logging.FileHandler(_LOG_FILE, encoding="utf-8")
            handler.setFormatter(
                logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"),
            )
            logger.addHandler(handler)
        _logger = logger

    return _logger


def _describe_args(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    """Readable argument summary, skipping ``self``."""
    parts = [repr(a) for a in args[1:]]
    parts += [f"{k}={v!r}" for k, v in kwargs.items()]
    return ", ".join(parts)


def _summarise_result(result: Any) -> str:
    if isinstance(result, (list, tuple)):
        return f"{len(result)} items"
    return type(result).__name__


def log_api_call(fn: F) -> F:
    """Log a data-layer call with its arguments, result size and duration."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = _get_logger()
        arg_str = _describe_args(args, kwargs)
        logger.info("CALL: %s(%s)", fn.__qualname__, arg_str)

        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            logger.error(
                "FAIL: %s(%s) -> %s: %s (%.3fs)",
                fn.__qualname__, arg_str, type(exc).__name__, exc, time.monotonic() - start,
            )
            raise
        logger.info(
            "OK: %s(%s) -> %s (%.3fs)",
            fn.__qualname__, arg_str, _summarise_result(result), time.monotonic() - start,
        )
        return result

    return wrapper  # type: ignore[return-value]


def log_service_call(fn: F) -> F:
    """Log a service-layer call and its duration. Arguments are logged only at DEBUG."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = _get_logger()
        logger.info("SERVICE CALL: %s", fn.__qualname__)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("SERVICE ARGS: %s(%s)", fn.__qualname__, _describe_args(args, kwargs))

        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            logger.error(
                "SERVICE FAIL: %s -> %s: %s (%.3fs)",
                fn.__qualname__, type(exc).__name__, exc, time.monotonic() - start,
            )
            raise
        logger.info("SERVICE OK: %s -> %.3fs", fn.__qualname__, time.monotonic() - start)
        return result

    return wrapper  # type: ignore[return-value]
