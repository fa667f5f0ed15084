"""Shuffling sequences, whole or within an index range.

`shuffled` is the primary, non-mutating operation: it returns a new
collection of the same type. `shuffle` mutates a mutable sequence by
assigning the result of `shuffled` back into it.

Both run a Fisher-Yates pass over the selected indices, drawing each swap
partner with the uniform integer sampler, so every permutation of the
selected elements is equally likely. Elements outside `within` never move.

Example:
    ```python
    rng = Xoroshiro128Plus(seed=3)
    shuffled('ABCDE', rng, within=range(1, 3))   # 'ACBDE' or 'ABCDE'
    deck = list(range(52))
    shuffle(deck, rng)
    ```
"""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import Any

from klaw_sampling._config import resolve_source
from klaw_sampling._preconditions import require
from klaw_sampling.errors import InvalidRange
from klaw_sampling.numeric import usize
from klaw_sampling.ranges import ClosedRange
from klaw_sampling.source import BitSource
from klaw_sampling.typeclass import typeclass
from klaw_sampling.uniform import random_in

__all__ = ['shuffle', 'shuffled']

type IndexRange = range | tuple[int, int]


def _resolve_within(within: IndexRange | None, length: int) -> tuple[int, int]:
    if within is None:
        return 0, length
    if isinstance(within, range):
        require(within.step == 1, lambda: InvalidRange(within.start, within.stop, 'only step-1 ranges are supported'))
        start, stop = within.start, within.stop
    else:
        start, stop = within
    require(
        0 <= start <= stop <= length,
        lambda: InvalidRange(start, stop, f'index range must lie within [0, {length}]'),
    )
    return start, stop


def _permute(items: list[Any], start: int, stop: int, source: BitSource) -> list[Any]:
    for i in range(stop - 1, start, -1):
        j = random_in(ClosedRange(start, i, usize), source)
        items[i], items[j] = items[j], items[i]
    return items


def _shuffled_items(
    collection: Sequence[Any],
    source: BitSource | None,
    within: IndexRange | None,
) -> list[Any]:
    items = list(collection)
    start, stop = _resolve_within(within, len(items))
    return _permute(items, start, stop, resolve_source(source))


@typeclass(fallback=True)
def shuffled(
    collection: Any,
    source: BitSource | None = None,
    *,
    within: IndexRange | None = None,
) -> Any:
    """Return a copy of `collection` with its elements shuffled.

    Any `Sequence` whose type can be rebuilt from an iterable is supported;
    `list`, `tuple`, `str`, `bytes` and `bytearray` have dedicated instances.

    Args:
        collection: The sequence to shuffle. It is not modified.
        source: Bit source to draw from; the process default when None.
        within: Half-open index range to restrict the shuffle to, as a
            step-1 `range` or a `(start, stop)` pair. Whole collection when None.

    Returns:
        A new collection of the same type.

    Raises:
        InvalidRangeError: If `within` does not fit `0 <= start <= stop <= len`.
        TypeError: If `collection` is not a sequence.
    """
    if not isinstance(collection, Sequence):
        msg = f'Cannot shuffle {type(collection).__name__}: not a sequence'
        raise TypeError(msg)
    return type(collection)(_shuffled_items(collection, source, within))


@shuffled.instance(list)
def _shuffled_list(collection: list[Any], source=None, *, within=None) -> list[Any]:
    return _shuffled_items(collection, source, within)


@shuffled.instance(tuple)
def _shuffled_tuple(collection: tuple[Any, ...], source=None, *, within=None) -> tuple[Any, ...]:
    return tuple(_shuffled_items(collection, source, within))


@shuffled.instance(str)
def _shuffled_str(collection: str, source=None, *, within=None) -> str:
    return ''.join(_shuffled_items(collection, source, within))


@shuffled.instance(bytes, bytearray)
def _shuffled_bytes(collection: bytes | bytearray, source=None, *, within=None) -> bytes | bytearray:
    return type(collection)(_shuffled_items(collection, source, within))


def shuffle(
    collection: MutableSequence[Any],
    source: BitSource | None = None,
    *,
    within: IndexRange | None = None,
) -> None:
    """Shuffle `collection` in place.

    Assigns the elements of `shuffled(collection, source, within=within)`
    back by index, so types without slice assignment (e.g. `deque`) work too.

    Raises:
        TypeError: If `collection` is not a mutable sequence.
        InvalidRangeError: If `within` does not fit the collection.
    """
    if not isinstance(collection, MutableSequence):
        msg = f'Cannot shuffle {type(collection).__name__} in place: not a mutable sequence'
        raise TypeError(msg)
    for index, item in enumerate(shuffled(collection, source, within=within)):
        collection[index] = item
