"""Numeric kinds: fixed-width integer and IEEE-754 element types.

Python's `int` is unbounded and its `float` is always binary64, so the
element type a sampler targets is carried as a value. An `IntKind` knows its
width and signedness and can move values between the signed domain and the
unsigned two's-complement view used by the samplers; a `FloatKind` knows how
to round a binary64 value to its own precision.

Example:
    ```python
    from klaw_sampling.numeric import i8, u8

    i8.to_unsigned(-1)      # 255
    i8.from_unsigned(255)   # -1
    u8.max                  # 255
    ```
"""

from __future__ import annotations

import math
import struct

import msgspec

__all__ = [
    'FloatKind',
    'IntKind',
    'NumericKind',
    'f32',
    'f64',
    'i8',
    'i16',
    'i32',
    'i64',
    'isize',
    'kind_of',
    'u8',
    'u16',
    'u32',
    'u64',
    'usize',
]


class IntKind(msgspec.Struct, frozen=True, gc=False, tag='int'):
    """A fixed-width integer type.

    Attributes:
        name: Short type name, e.g. "i32".
        bits: Width in bits.
        signed: Whether the domain is two's-complement signed.
    """

    name: str
    bits: int
    signed: bool

    @property
    def mask(self) -> int:
        return (1 << self.bits) - 1

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else self.mask

    def contains(self, value: int) -> bool:
        """Return True if `value` is representable in this kind."""
        return self.min <= value <= self.max

    def to_unsigned(self, value: int) -> int:
        """Return the unsigned two's-complement bit pattern of `value`."""
        return value & self.mask

    def from_unsigned(self, bits: int) -> int:
        """Interpret an unsigned bit pattern as a value of this kind, wrapping."""
        bits &= self.mask
        if self.signed and bits > self.max:
            return bits - (1 << self.bits)
        return bits

    def coerce(self, value: object) -> int:
        """Return `value` as an int of this kind.

        Raises:
            TypeError: If `value` is not an int (bools are rejected too).
        """
        if isinstance(value, bool) or not isinstance(value, int):
            msg = f'{self.name} expects an int, got {type(value).__name__}'
            raise TypeError(msg)
        return value

    def __repr__(self) -> str:
        return self.name


class FloatKind(msgspec.Struct, frozen=True, gc=False, tag='float'):
    """An IEEE-754 binary floating-point type (binary32 or binary64)."""

    name: str
    bits: int

    def __post_init__(self) -> None:
        if self.bits not in (32, 64):
            msg = f'Unsupported float width: {self.bits}'
            raise ValueError(msg)

    @property
    def max(self) -> float:
        return struct.unpack('<f', b'\xff\xff\x7f\x7f')[0] if self.bits == 32 else 1.7976931348623157e308

    def coerce(self, value: object, *, saturate: bool = False) -> float:
        """Round `value` to this kind's precision.

        Args:
            value: The number to round.
            saturate: Round values too large for the kind to signed infinity,
                as IEEE-754 arithmetic does, instead of raising.

        Raises:
            TypeError: If `value` is not a real number.
            OverflowError: If `value` is too large for the kind and
                `saturate` is False.
        """
        if isinstance(value, bool) or not isinstance(value, int | float):
            msg = f'{self.name} expects a real number, got {type(value).__name__}'
            raise TypeError(msg)
        try:
            as_float = float(value)
            if self.bits == 64 or not math.isfinite(as_float):
                return as_float
            return struct.unpack('<f', struct.pack('<f', as_float))[0]
        except OverflowError:
            if not saturate:
                raise
            return math.inf if value > 0 else -math.inf

    def __repr__(self) -> str:
        return self.name


type NumericKind = IntKind | FloatKind


i8 = IntKind('i8', 8, True)
i16 = IntKind('i16', 16, True)
i32 = IntKind('i32', 32, True)
i64 = IntKind('i64', 64, True)
u8 = IntKind('u8', 8, False)
u16 = IntKind('u16', 16, False)
u32 = IntKind('u32', 32, False)
u64 = IntKind('u64', 64, False)
isize = i64
usize = u64

f32 = FloatKind('f32', 32)
f64 = FloatKind('f64', 64)


def kind_of(*values: object) -> IntKind | FloatKind:
    """Infer the kind for plain Python numbers.

    All-int values map to `isize`; any float promotes the whole group to `f64`.

    Raises:
        TypeError: For bools, non-numbers, or when no values are given.
    """
    if not values:
        raise TypeError('kind_of() requires at least one value')
    saw_float = False
    for value in values:
        if isinstance(value, bool) or not isinstance(value, int | float):
            msg = f'Cannot infer a numeric kind for {type(value).__name__}'
            raise TypeError(msg)
        saw_float = saw_float or isinstance(value, float)
    return f64 if saw_float else isize
