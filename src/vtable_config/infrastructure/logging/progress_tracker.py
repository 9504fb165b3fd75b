#!/usr/bin/env python3

"""Progress statistics for loading and writing vtable documents."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from time import time

import psutil


class ProgressTracker:
    """
    Count processed vtables and items and report timing.

    Used by the document loader to summarise how much data a document
    held and how long decoding took.
    """

    def __init__(self, logger: logging.Logger):
        """
        Initialize progress tracker.

        Args:
            logger: Logger instance for progress reporting
        """
        self.logger = logger
        self.start_time = time()
        self.vtable_count = 0
        self.item_count = 0
        self.operation_stack: list[tuple[str, float]] = []

    @contextmanager
    def track_operation(self, operation_name: str) -> Iterator[None]:
        """
        Track a named operation with timing.

        Args:
            operation_name: Name of the operation being tracked

        Yields:
            None
        """
        start_time = time()
        self.operation_stack.append((operation_name, start_time))
        self.logger.debug(f"Starting operation: {operation_name}")

        try:
            yield
            elapsed = time() - start_time
            self.logger.debug(f"Completed operation: {operation_name} in {elapsed:.3f}s")
        except Exception as e:
            elapsed = time() - start_time
            self.logger.error(f"Failed operation: {operation_name} after {elapsed:.3f}s: {e}")
            raise
        finally:
            self.operation_stack.pop()

    def count_vtable(self, item_count: int = 0) -> None:
        """Record one processed vtable holding ``item_count`` items."""
        self.vtable_count += 1
        self.item_count += item_count

    def report_summary(self) -> None:
        """Report final processing statistics."""
        total_time = time() - self.start_time
        self.logger.info(
            f"Processed {self.vtable_count} vtables with {self.item_count} items "
            f"in {total_time:.3f}s"
        )

    def get_current_context(self) -> str:
        """
        Get current operation context for logging.

        Returns:
            String describing current operation stack
        """
        if not self.operation_stack:
            return "idle"
        return " -> ".join(op[0] for op in self.operation_stack)

    def log_memory_usage(self) -> None:
        """Log resident memory of the current process."""
        try:
            memory_mb = psutil.Process().memory_info().rss / 1024 / 1024
        except psutil.Error as e:
            self.logger.debug(f"Could not get memory usage: {e}")
            return
        self.logger.debug(f"Memory usage: {memory_mb:.1f} MB")

    def reset(self) -> None:
        """Reset all counters and timers."""
        self.start_time = time()
        self.vtable_count = 0
        self.item_count = 0
        self.operation_stack.clear()
