"""Internal helpers for pledge.

Callback fan-out and executor inspection shared by the future and the
lift bridges. Not part of the public API."""

from __future__ import annotations

import inspect
import logging
import typing
from collections.abc import Callable, Iterable

logger = logging.getLogger(__name__)

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)

def invoke(callback: Callable[..., object], *args: typing.Any) -> None:
    """
    Call a single reaction callback.
    
    A raising callback is logged and swallowed so that the callbacks queued
    after it still run exactly once.
    """
    try:
        callback(*args)
    except Exception:
        logger.exception("Callback %r raised", callback)

def fire(callbacks: Iterable[Callable[..., object]], *args: typing.Any) -> None:
    """Invoke every callback in order with the same arguments."""
    for callback in callbacks:
        invoke(callback, *args)

def accepts_progress(executor: Callable[..., object]) -> bool:
    """
    Whether an executor takes a third positional parameter (the progress reporter).
    
    Callables without an introspectable signature get the two-argument form.
    """
    try:
        parameters = inspect.signature(executor).parameters.values()
    except (TypeError, ValueError):
        return False
    positional = 0
    for parameter in parameters:
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return True
        if parameter.kind in _POSITIONAL:
            positional += 1
    return positional >= 3

__all__ = (
    "invoke",
    "fire",
    "accepts_progress",
)
