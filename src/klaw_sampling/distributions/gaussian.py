"""Standard normal sampling with a two-for-one cache.

The Marsaglia polar method turns one accepted pair of uniform draws into two
independent standard normal values. `GaussianSampler` returns one of them and
keeps the other pending, so every second request is served without touching
the bit source. The pending value is kept per float kind on the sampler
instance; there is no process-wide cache, and a sampler should be used by one
thread at a time (give each thread its own).
"""

from __future__ import annotations

import math

from klaw_sampling._config import resolve_source
from klaw_sampling._logging import get_logger
from klaw_sampling.numeric import FloatKind, f64
from klaw_sampling.ranges import ClosedRange
from klaw_sampling.source import BitSource
from klaw_sampling.types import Nothing, Option, Some
from klaw_sampling.uniform import random_in

__all__ = ['GaussianSampler']

logger = get_logger(__name__)

_SYMMETRIC_UNIT = ClosedRange(-1.0, 1.0, f64)


class GaussianSampler:
    """Produces standard normal values, caching the second of each pair.

    Example:
        ```python
        gauss = GaussianSampler()
        z1 = gauss.next_gaussian(rng)   # draws, caches the partner value
        z2 = gauss.next_gaussian(rng)   # served from the cache, no draw
        ```
    """

    def __init__(self) -> None:
        self._pending: dict[FloatKind, float] = {}

    def next_gaussian(self, source: BitSource | None = None, *, kind: FloatKind = f64) -> float:
        """Return a standard normal value of `kind`.

        Args:
            source: Bit source to draw from; the process default when None.
            kind: Float kind of the result; each kind has its own pending slot.
        """
        cached = self._pending.pop(kind, None)
        if cached is not None:
            return cached

        first, second = _polar_pair(resolve_source(source))
        self._pending[kind] = kind.coerce(second)
        return kind.coerce(first)

    def pending(self, kind: FloatKind = f64) -> Option[float]:
        """Return the value the next request for `kind` will get without drawing."""
        if kind in self._pending:
            return Some(self._pending[kind])
        return Nothing

    def clear(self, kind: FloatKind | None = None) -> None:
        """Drop the pending value for `kind`, or for every kind when None."""
        if kind is None:
            self._pending.clear()
        else:
            self._pending.pop(kind, None)

    def __repr__(self) -> str:
        return f'GaussianSampler(pending={sorted(k.name for k in self._pending)})'


def _polar_pair(source: BitSource) -> tuple[float, float]:
    while True:
        u = random_in(_SYMMETRIC_UNIT, source)
        v = random_in(_SYMMETRIC_UNIT, source)
        s = u * u + v * v
        if 0.0 < s < 1.0:
            break
    scale = math.sqrt(-2.0 * math.log(s) / s)
    logger.debug('gaussian pair generated')
    return u * scale, v * scale
