#!/usr/bin/env python3

"""Logging helpers shared across the package."""

import logging
from collections.abc import Callable, Sized
from functools import wraps
from time import perf_counter
from typing import Any, TypeVar, cast

F = TypeVar("F", bound=Callable[..., Any])



def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def log_timing(func: F) -> F:
    """
    Decorator logging how long a load/dump step took.

    When the wrapped function returns a sized collection (for example a
    ``VtableContainer``) its length is included in the completion message.

    Args:
        func: Function to decorate

    Returns:
        Wrapped function
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = get_logger(func.__module__)
        func_name = func.__qualname__
        start = perf_counter()

        logger.debug(f"Starting {func_name}")
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            logger.error(f"Failed {func_name} after {perf_counter() - start:.3f}s: {e}")
            raise

        size = ""
        if isinstance(result, Sized) and not isinstance(result, str):
            size = f" ({len(result)} entries)"
        logger.debug(f"Completed {func_name} in {perf_counter() - start:.3f}s{size}")
        return result

    return cast("F", wrapper)
