"""Call logging for the gateway, orchestrator and view layers."""

from __future__ import annotations

import functools
import inspect
import logging
import os
import threading
import time
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

LOGGER_NAME = "f1telemetry.api"

_LOG_DIR = os.environ.get("F1TELEMETRY_LOG_DIR") or os.path.join(os.getcwd(), "logs")
_LOG_FILE = os.path.join(_LOG_DIR, "api_calls.log")

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def configure_log_dir(log_dir: str) -> None:
    """Point the file logger at *log_dir*; takes effect on the next log call."""
    global _LOG_DIR, _LOG_FILE, _logger
    with _logger_lock:
        _LOG_DIR = log_dir
        _LOG_FILE = os.path.join(log_dir, "api_calls.log")
        if _logger is not None:
            for handler in _logger.handlers[:]:
                handler.close()
                _logger.removeHandler(handler)
            _logger = None


def get_logger() -> logging.Logger:
    """Return the file logger, creating log dir and handler on first use."""
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
    # skip 'self'
    arg_parts = [repr(a) for a in args[1:]]
    arg_parts += [f"{k}={v!r}" for k, v in kwargs.items()]
    return ", ".join(arg_parts)


def _count(result: Any) -> int:
    if result is None:
        return 0
    if isinstance(result, list):
        return len(result)
    return 1


def log_api_call(fn: F) -> F:
    """Decorator that logs gateway calls, result sizes and failures."""

    if inspect.iscoroutinefunction(fn):

        @functools.wraps(fn)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            logger = get_logger()
            arg_str = _describe_args(args, kwargs)
            logger.info("CALL: %s(%s)", fn.__qualname__, arg_str)
            start = time.monotonic()
            try:
                result = await fn(*args, **kwargs)
            except Exception as exc:
                logger.error(
                    "FAIL: %s(%s) -> %s: %s (%.3fs)",
                    fn.__qualname__, arg_str, type(exc).__name__, exc, time.monotonic() - start,
                )
                raise
            logger.info(
                "OK: %s(%s) -> %d items (%.3fs)",
                fn.__qualname__, arg_str, _count(result), time.monotonic() - start,
            )
            return result

        return async_wrapper  # type: ignore[return-value]

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = get_logger()
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
            "OK: %s(%s) -> %d items (%.3fs)",
            fn.__qualname__, arg_str, _count(result), time.monotonic() - start,
        )
        return result

    return wrapper  # type: ignore[return-value]


def log_service_call(fn: F) -> F:
    """Decorator that logs orchestrator and view calls with their duration."""

    if inspect.iscoroutinefunction(fn):

        @functools.wraps(fn)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            logger = get_logger()
            logger.info("SERVICE CALL: %s(%s)", fn.__qualname__, _describe_args(args, kwargs))
            start = time.monotonic()
            try:
                result = await fn(*args, **kwargs)
            except Exception as exc:
                logger.error(
                    "SERVICE FAIL: %s -> %s: %s (%.3fs)",
                    fn.__qualname__, type(exc).__name__, exc, time.monotonic() - start,
                )
                raise
            logger.info("SERVICE OK: %s -> %.3fs", fn.__qualname__, time.monotonic() - start)
            return result

        return async_wrapper  # type: ignore[return-value]

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = get_logger()
        logger.info("SERVICE CALL: %s(%s)", fn.__qualname__, _describe_args(args, kwargs))
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
