"""Cleanup handlers that run once, e.g. at exit or on interrupt."""

from __future__ import annotations

import sys
import threading
from typing import Callable, TextIO


class CleanupHandlers:
    """An ordered list of cleanup functions that runs at most once."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._handlers: list[Callable[[], object]] = []
        self.done = False

    def add(self, func: Callable[[], object]) -> None:
        """Append func to the handlers."""
        with self._lock:
            self._handlers.append(func)

    def run(self, stderr: TextIO) -> None:
        """Run every handler in order; errors are reported to stderr."""
        with self._lock:
            if self.done:
                return
            self.done = True
            for func in self._handlers:
                try:
                    func()
                except Exception as exc:  # noqa: BLE001 - report and continue
                    stderr.write(f"error in cleanup handler: {exc}\n")


_handlers = CleanupHandlers()


def add_cleanup_handler(func: Callable[[], object]) -> None:
    """Register func with the process-wide cleanup handlers."""
    _handlers.add(func)


def run_cleanup_handlers() -> None:
    """Run the process-wide cleanup handlers, reporting errors to stderr."""
    _handlers.run(sys.stderr)