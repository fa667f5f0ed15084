"""ClosedRange: an inclusive `[lower, upper]` pair tagged with its numeric kind."""

from __future__ import annotations

import math
from typing import Any, NoReturn

import msgspec

from klaw_sampling._logging import get_logger
from klaw_sampling.errors import InvalidRange, InvalidRangeError
from klaw_sampling.numeric import FloatKind, IntKind, kind_of
from klaw_sampling.types import Err, Ok, Result

__all__ = ['ClosedRange']

logger = get_logger(__name__)


class ClosedRange(msgspec.Struct, frozen=True, gc=False):
    """An inclusive range of values of one numeric kind.

    The kind is inferred from the bounds when omitted (`isize` for ints,
    `f64` as soon as a float is involved). Bounds are coerced to the kind's
    representation, so `ClosedRange(0.1, 0.2, f32)` holds binary32 values.

    A degenerate range (`lower == upper`) is valid and always samples to
    its single value.

    Raises:
        InvalidRangeError: If `lower > upper`, a float bound is NaN or
            infinite, or a bound falls outside an integer kind's domain.
        TypeError: If a bound is not a number of the kind's family.

    Example:
        ```python
        ClosedRange(1, 6)             # ClosedRange(lower=1, upper=6, kind=i64)
        ClosedRange(-1.0, 1.0, f32)
        ClosedRange(5, 2)             # raises InvalidRangeError
        ```
    """

    lower: Any
    upper: Any
    kind: IntKind | FloatKind | None = None

    def __post_init__(self) -> None:
        kind = self.kind if self.kind is not None else kind_of(self.lower, self.upper)
        lower, upper = self.lower, self.upper
        if isinstance(kind, IntKind):
            lower, upper = kind.coerce(lower), kind.coerce(upper)
            if not (kind.contains(lower) and kind.contains(upper)):
                _reject(lower, upper, f'bounds outside {kind.name} domain [{kind.min}, {kind.max}]')
        else:
            try:
                lower, upper = kind.coerce(lower), kind.coerce(upper)
            except OverflowError:
                _reject(lower, upper, f'bounds outside {kind.name} domain')
            if not (math.isfinite(lower) and math.isfinite(upper)):
                _reject(lower, upper, 'bounds must be finite')
        if lower > upper:
            _reject(lower, upper, 'lower bound exceeds upper bound')
        msgspec.structs.force_setattr(self, 'lower', lower)
        msgspec.structs.force_setattr(self, 'upper', upper)
        msgspec.structs.force_setattr(self, 'kind', kind)

    @classmethod
    def try_new(
        cls,
        lower: Any,
        upper: Any,
        kind: IntKind | FloatKind | None = None,
    ) -> Result[ClosedRange, InvalidRange]:
        """Build a range, returning `Err(InvalidRange)` instead of raising.

        Example:
            ```python
            match ClosedRange.try_new(lo, hi):
                case Ok(range_): ...
                case Err(InvalidRange(reason=reason)): ...
            ```
        """
        try:
            return Ok(cls(lower, upper, kind))
        except InvalidRangeError as exc:
            return Err(exc.to_struct())

    @classmethod
    def from_range(cls, values: range, kind: IntKind | None = None) -> ClosedRange:
        """Convert a half-open, step-1 `range` to the equivalent closed range.

        Raises:
            InvalidRangeError: If `values` is empty or its step is not 1.
        """
        if values.step != 1:
            _reject(values.start, values.stop, 'only step-1 ranges are supported')
        if not values:
            _reject(values.start, values.stop - 1, 'empty range')
        return cls(values.start, values.stop - 1, kind)

    @property
    def is_degenerate(self) -> bool:
        return self.lower == self.upper

    @property
    def span(self) -> int | float:
        """Distance from lower to upper.

        For integer kinds this is computed in the unsigned two's-complement
        view, so a full-domain range reports `2**bits - 1` without overflow.
        """
        if isinstance(self.kind, IntKind):
            return (self.kind.to_unsigned(self.upper) - self.kind.to_unsigned(self.lower)) & self.kind.mask
        return self.upper - self.lower

    def __contains__(self, value: object) -> bool:
        return self.lower <= value <= self.upper  # type: ignore[operator]


def _reject(lower: Any, upper: Any, reason: str) -> NoReturn:
    logger.debug('invalid range rejected', lower=lower, upper=upper, reason=reason)
    raise InvalidRangeError(lower, upper, reason)
