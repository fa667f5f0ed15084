"""Uniform sampling in closed ranges.

Integer kinds use exact rejection sampling: a draw of the kind's width is
accepted only if it falls below the largest multiple of `span + 1` that fits
the draw domain, and the remainder modulo `span + 1` is added to the lower
bound with wraparound arithmetic. Power-of-two span sizes never reject, and a
full-domain range returns the raw draw as is.

Float kinds draw a full 64-bit word, divide by `2**64 - 1` to get `t` in
`[0, 1]` and interpolate `lower + (upper - lower) * t`. `t == 1` can return
exactly `upper`; results are clamped so rounding never leaves the range.

Degenerate ranges return their single value without drawing.
"""

from __future__ import annotations

import math
from typing import Any

from klaw_sampling._config import resolve_source
from klaw_sampling.numeric import FloatKind, IntKind, f64, kind_of
from klaw_sampling.ranges import ClosedRange
from klaw_sampling.source import BitSource
from klaw_sampling.typeclass import typeclass

__all__ = [
    'FLOAT_DRAW_BITS',
    'random_in',
    'random_through',
    'random_unit',
    'random_value',
    'sample_kind',
]

FLOAT_DRAW_BITS = 64
_FLOAT_DRAW_MAX = (1 << FLOAT_DRAW_BITS) - 1


@typeclass
def sample_kind(kind: Any, range_: ClosedRange, source: BitSource) -> Any:
    """Draw one value of `kind` uniformly from `range_`."""


@sample_kind.instance(IntKind)
def _sample_int(kind: IntKind, range_: ClosedRange, source: BitSource) -> int:
    span = range_.span
    if span == 0:
        return range_.lower
    if span == kind.mask:
        return kind.from_unsigned(source.draw_unsigned(kind.bits))

    size = span + 1
    domain = 1 << kind.bits
    limit = domain - domain % size
    raw = source.draw_unsigned(kind.bits)
    while raw >= limit:
        raw = source.draw_unsigned(kind.bits)
    return kind.from_unsigned(kind.to_unsigned(range_.lower) + raw % size)


@sample_kind.instance(FloatKind)
def _sample_float(kind: FloatKind, range_: ClosedRange, source: BitSource) -> float:
    lower, upper = range_.lower, range_.upper
    if lower == upper:
        return lower

    t = source.draw_unsigned(FLOAT_DRAW_BITS) / _FLOAT_DRAW_MAX
    span = upper - lower
    if math.isinf(span):
        # lower and upper straddle zero near the float limits
        value = lower * (1.0 - t) + upper * t
    else:
        value = lower + span * t
    return min(max(kind.coerce(value), lower), upper)


def random_in(range_: ClosedRange, source: BitSource | None = None) -> Any:
    """Return a value uniformly distributed in `range_`.

    Args:
        range_: The closed range to sample; its kind selects the algorithm.
        source: Bit source to draw from; the process default when None.

    Returns:
        A value `v` with `range_.lower <= v <= range_.upper`.

    Example:
        ```python
        rng = Xoroshiro128Plus(seed=7)
        random_in(ClosedRange(1, 6), rng)            # a die roll
        random_in(ClosedRange(-1.0, 1.0, f32), rng)
        ```
    """
    return sample_kind(range_.kind, range_, resolve_source(source))


def random_through(
    value: int | float,
    source: BitSource | None = None,
    *,
    base: int | float | None = None,
    kind: IntKind | FloatKind | None = None,
) -> Any:
    """Return a value uniformly distributed between `base` and `value`.

    The endpoints are ordered automatically: `random_through(-5)` samples
    `[-5, 0]` and `random_through(5)` samples `[0, 5]`.

    Args:
        value: The endpoint to sample through.
        source: Bit source to draw from; the process default when None.
        base: The other endpoint, zero of the kind when None.
        kind: Numeric kind; inferred from `value` (and `base`) when None.
    """
    if kind is None:
        kind = kind_of(value) if base is None else kind_of(value, base)
    if base is None:
        base = 0 if isinstance(kind, IntKind) else 0.0
    range_ = ClosedRange(value, base, kind) if value < base else ClosedRange(base, value, kind)
    return random_in(range_, source)


def random_value(kind: IntKind | FloatKind, source: BitSource | None = None) -> Any:
    """Return a random value of `kind`.

    Integer kinds sample their whole domain; float kinds sample `[0, 1]`.
    """
    if isinstance(kind, IntKind):
        return random_in(ClosedRange(kind.min, kind.max, kind), source)
    return random_unit(source, kind=kind)


def random_unit(source: BitSource | None = None, *, kind: FloatKind = f64) -> float:
    """Return a float uniformly distributed in `[0, 1]`."""
    return random_in(ClosedRange(0.0, 1.0, kind), source)
