"""Named hooks that code can run at interesting points, mainly for tests."""

from __future__ import annotations

from typing import Any, Callable

_hooks: dict[str, Callable[[Any], object]] = {}


def hook(name: str, func: Callable[[Any], object]) -> None:
    """Register func under name, replacing any earlier hook."""
    _hooks[name] = func


def run_hook(name: str, context: Any) -> None:
    """Call the hook registered under name with context, if there is one."""
    func = _hooks.get(name)
    if func is not None:
        func(context)


def remove_hook(name: str) -> None:
    """Remove the hook registered under name, if any."""
    _hooks.pop(name, None)