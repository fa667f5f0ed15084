"""Always-on precondition checks.

Unlike the built-in assert, these run regardless of __debug__, so range and
probability contracts hold under `python -O` as well.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from klaw_sampling.types import Err, Ok, Result

__all__ = ['check', 'require']


class _RaisableStruct(Protocol):
    def to_exception(self) -> BaseException: ...


def require(condition: bool, error: Callable[[], _RaisableStruct]) -> None:
    """Raise the exception variant of `error()` unless `condition` holds.

    The error factory is only invoked on failure.

    Args:
        condition: The contract that must hold.
        error: Zero-argument callable producing an error struct.

    Raises:
        Exception: The struct's `to_exception()` result.

    Example:
        ```python
        require(lo <= hi, lambda: InvalidRange(lo, hi, 'lower exceeds upper'))
        ```
    """
    if not condition:
        raise error().to_exception()


def check[E](condition: bool, error: Callable[[], E]) -> Result[None, E]:
    """Return Ok(None) if `condition` holds, else Err(error())."""
    if condition:
        return Ok(None)
    return Err(error())
