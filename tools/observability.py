"""Observability helpers for instrumenting engine operations."""

from __future__ import annotations

import inspect
import logging
import time
from functools import wraps
from typing import Any, Callable, Dict, ParamSpec, TypeVar

from closet_app.logging_config import correlation_scope, log_event

LOGGER = logging.getLogger(__name__)
P = ParamSpec("P")
R = TypeVar("R")


def _call_arguments(signature: inspect.Signature, args: tuple, kwargs: dict) -> Dict[str, Any]:
    """Named call arguments without ``self``, for the start event."""

    try:
        bound = signature.bind_partial(*args, **kwargs)
    except TypeError:
        return dict(kwargs)
    return {name: value for name, value in bound.arguments.items() if name != "self"}


def _result_count(result: Any) -> int | None:
    if isinstance(result, (list, tuple)):
        return len(result)
    return None


def instrument_operation(operation: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Wrap an engine operation with start, completion and failure events.

    Each call runs inside its own correlation scope unless the caller already
    bound one.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        signature = inspect.signature(func)

        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            with correlation_scope():
                start = time.perf_counter()
                log_event(
                    LOGGER,
                    logging.DEBUG,
                    "operation_started",
                    operation=operation,
                    arguments=_call_arguments(signature, args, kwargs),
                )
                try:
                    result = func(*args, **kwargs)
                except Exception:
                    log_event(
                        LOGGER,
                        logging.ERROR,
                        "operation_failed",
                        operation=operation,
                        duration_ms=round((time.perf_counter() - start) * 1000, 2),
                        exc_info=True,
                    )
                    raise
                log_event(
                    LOGGER,
                    logging.INFO,
                    "operation_completed",
                    operation=operation,
                    duration_ms=round((time.perf_counter() - start) * 1000, 2),
                    result_count=_result_count(result),
                )
                return result

        return wrapper

    return decorator


__all__ = ["instrument_operation"]
