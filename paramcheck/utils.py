"""This module provides a set of helper functions being used across different components
of paramcheck package.
"""

from __future__ import annotations

import importlib
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

E = TypeVar("E", bound=BaseException)


def try_catch_exception(
    func: Callable[..., Any], args: Iterable[Any], exception: type[E]
) -> Any | E:
    """Call ``func`` and hand back the error it raises instead of propagating it.

    Only errors of type ``exception`` are returned. Anything else is re-raised.

    Args:
        func: The function to call.
        args: Positional arguments to call ``func`` with.
        exception: The exception type to capture.

    Returns:
        The return value of ``func``, or the captured exception instance.

    """
    try:
        return func(*args)
    except exception as exc:
        return exc


def load_module(module_path: str) -> Any:
    """Import a module by its dotted path.

    Importing a module runs its class bodies, which is what registers the
    validation schemas declared in it.
    """
    return importlib.import_module(module_path)


def _func_full_name(func: Callable) -> str:
    if not getattr(func, "__module__", None):
        return getattr(func, "__qualname__", repr(func))
    return f"{func.__module__}.{func.__qualname__}"


def _format_rich(value: str, markup: str) -> str:
    """Format string with rich markup"""
    return f"[{markup}]{value}[/{markup}]"
