"""Lazy random sequences over a closed range.

Both sequences are single-pass iterators bound to one bit source: every pull
draws a fresh value with `random_in`. `RandomSequence` never ends on its own;
`LimitedRandomSequence` yields exactly `limit` values and then stays
exhausted.

Each sequence keeps a reference to its source for its whole lifetime. Pulling
from two sequences (or a sequence and direct calls) sharing one source
interleaves their draws; the values stay valid but which consumer gets which
draw is unspecified.

Example:
    ```python
    rng = Xoroshiro128Plus(seed=1)
    rolls = randoms(ClosedRange(1, 6), rng, limit=3)
    list(rolls)          # three die rolls
    rolls.pull()         # Nothing
    ```
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, overload

from klaw_sampling._config import resolve_source
from klaw_sampling._logging import get_logger
from klaw_sampling.ranges import ClosedRange
from klaw_sampling.source import BitSource
from klaw_sampling.types import Nothing, Option, Some
from klaw_sampling.uniform import random_in

__all__ = ['LimitedRandomSequence', 'RandomSequence', 'randoms']

logger = get_logger(__name__)


class RandomSequence[T](Iterator[T]):
    """An unbounded stream of values uniformly distributed in a closed range.

    Termination is entirely up to the consumer, so iterate it with
    `itertools.islice`, `zip` or an explicit `break`.

    Args:
        range_: The range every value is drawn from.
        source: Bit source to draw from; the process default when None.
    """

    __slots__ = ('_range', '_source')

    def __init__(self, range_: ClosedRange, source: BitSource | None = None) -> None:
        if not isinstance(range_, ClosedRange):
            msg = f'Expected a ClosedRange, got {type(range_).__name__}'
            raise TypeError(msg)
        self._range = range_
        self._source = resolve_source(source)

    @property
    def range(self) -> ClosedRange:
        return self._range

    @property
    def source(self) -> BitSource:
        return self._source

    def pull(self) -> Option[T]:
        """Draw the next value; always `Some` for an unbounded sequence."""
        return Some(random_in(self._range, self._source))

    def __next__(self) -> T:
        return random_in(self._range, self._source)

    def __iter__(self) -> RandomSequence[T]:
        return self

    def __repr__(self) -> str:
        return f'RandomSequence({self._range!r}, {self._source!r})'


class LimitedRandomSequence[T](Iterator[T]):
    """A stream of at most `limit` values uniformly distributed in a closed range.

    Once `consumed` reaches `limit` the sequence is exhausted for good:
    `pull()` returns `Nothing` and iteration stops, even if `limit` is
    raised afterwards. A zero limit is exhausted from the start.

    Args:
        range_: The range every value is drawn from.
        limit: Number of values to produce (non-negative).
        source: Bit source to draw from; the process default when None.

    Raises:
        ValueError: If `limit` is negative, or is later set below `consumed`.
    """

    __slots__ = ('_consumed', '_exhausted', '_limit', '_range', '_source')

    def __init__(self, range_: ClosedRange, limit: int, source: BitSource | None = None) -> None:
        if not isinstance(range_, ClosedRange):
            msg = f'Expected a ClosedRange, got {type(range_).__name__}'
            raise TypeError(msg)
        self._range = range_
        self._source = resolve_source(source)
        self._limit = _check_limit(limit)
        self._consumed = 0
        self._exhausted = False
        if self._limit == 0:
            self._mark_exhausted()

    @property
    def range(self) -> ClosedRange:
        return self._range

    @property
    def source(self) -> BitSource:
        return self._source

    @property
    def limit(self) -> int:
        return self._limit

    @limit.setter
    def limit(self, value: int) -> None:
        value = _check_limit(value)
        if value < self._consumed:
            msg = f'limit must not be below consumed ({self._consumed}), got {value}'
            raise ValueError(msg)
        self._limit = value
        if self._consumed >= self._limit:
            self._mark_exhausted()

    @property
    def consumed(self) -> int:
        """Number of values successfully produced so far."""
        return self._consumed

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    @property
    def underestimated_count(self) -> int:
        """Values still to come, computed without sampling."""
        if self._exhausted:
            return 0
        return self._limit - self._consumed

    def pull(self) -> Option[T]:
        """Draw the next value, or return `Nothing` once the limit is reached."""
        if self._exhausted:
            return Nothing
        value = random_in(self._range, self._source)
        self._consumed += 1
        if self._consumed >= self._limit:
            self._mark_exhausted()
        return Some(value)

    def _mark_exhausted(self) -> None:
        if not self._exhausted:
            self._exhausted = True
            logger.debug('random sequence exhausted', limit=self._limit, consumed=self._consumed)

    def __next__(self) -> T:
        match self.pull():
            case Some(value):
                return value
            case _:
                raise StopIteration

    def __iter__(self) -> LimitedRandomSequence[T]:
        return self

    def __length_hint__(self) -> int:
        return self.underestimated_count

    def __repr__(self) -> str:
        return (
            f'LimitedRandomSequence({self._range!r}, limit={self._limit}, '
            f'consumed={self._consumed}, {self._source!r})'
        )


def _check_limit(limit: int) -> int:
    if isinstance(limit, bool) or not isinstance(limit, int):
        msg = f'limit must be an int, got {type(limit).__name__}'
        raise TypeError(msg)
    if limit < 0:
        msg = f'limit must be non-negative, got {limit}'
        raise ValueError(msg)
    return limit


@overload
def randoms(range_: ClosedRange, source: BitSource | None = ..., *, limit: None = ...) -> RandomSequence[Any]: ...


@overload
def randoms(range_: ClosedRange, source: BitSource | None = ..., *, limit: int) -> LimitedRandomSequence[Any]: ...


def randoms(
    range_: ClosedRange,
    source: BitSource | None = None,
    *,
    limit: int | None = None,
) -> RandomSequence[Any] | LimitedRandomSequence[Any]:
    """Return a lazy sequence of random values in `range_`.

    Args:
        range_: The range every value is drawn from.
        source: Bit source to draw from; the process default when None.
        limit: Number of values to produce; unbounded when None.
    """
    if limit is None:
        return RandomSequence(range_, source)
    return LimitedRandomSequence(range_, limit, source)
