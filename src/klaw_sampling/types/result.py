"""Result type: Ok[T] | Err[E] for the non-raising validation entry points."""

from __future__ import annotations

from collections.abc import Callable
from typing import NoReturn, TypeIs

import msgspec

__all__ = ['Err', 'Ok', 'Result']


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> Ok(0.25).unwrap()
        0.25
        >>> Ok(2).map(lambda x: x + 1)
        Ok(value=3)
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True since this is Ok."""
        return True

    def is_err(self) -> TypeIs[Err[object]]:
        """Return False since this is Ok."""
        return False

    def unwrap(self) -> T:
        """Return the contained Ok value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise since this is Ok.

        Raises:
            RuntimeError: Always.
        """
        raise RuntimeError(f'Called unwrap_err on Ok: {self.value!r}')

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value."""
        return Ok(f(self.value))


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Failure variant of Result carrying an error struct.

    Errors produced by this package are the struct variants from
    `klaw_sampling.errors`, each convertible to its exception with
    `to_exception()`.
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[object]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True since this is Err."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise the error.

        If the error struct knows its exception variant, that exception is
        raised; otherwise a RuntimeError wraps it.
        """
        to_exception = getattr(self.error, 'to_exception', None)
        if to_exception is not None:
            raise to_exception()
        raise RuntimeError(f'Called unwrap on Err: {self.error!r}')

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value."""
        return default

    def unwrap_err(self) -> E:
        """Return the contained error."""
        return self.error

    def map[T, U](self, _f: Callable[[T], U]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self


type Result[T, E] = Ok[T] | Err[E]
