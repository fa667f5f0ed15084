"""Bit sources: the only thing the samplers need from a random generator.

A bit source produces uniformly distributed unsigned integers of a requested
width. The samplers never look past that capability, so any generator can be
plugged in by implementing `draw_unsigned`.
"""

from __future__ import annotations

import os
import random
from typing import Protocol, runtime_checkable

from klaw_sampling.errors import SourceFailureError

__all__ = [
    'BitSource',
    'StdlibSource',
    'SystemSource',
    'Xoroshiro128Plus',
]

_MASK64 = (1 << 64) - 1


@runtime_checkable
class BitSource(Protocol):
    """Anything that can emit uniformly random unsigned integers.

    Implementations must return a value in `[0, 2**bits)` for every
    `bits >= 1`, independent of earlier calls. A source that can fail must
    raise `SourceFailureError` rather than return a degraded value.
    """

    def draw_unsigned(self, bits: int) -> int:
        """Return a uniformly random integer in `[0, 2**bits)`."""
        ...


def _check_bits(bits: int) -> None:
    if bits < 1:
        msg = f'bits must be >= 1, got {bits}'
        raise ValueError(msg)


class SystemSource:
    """Operating system entropy (`os.urandom`)."""

    def draw_unsigned(self, bits: int) -> int:
        _check_bits(bits)
        try:
            raw = os.urandom((bits + 7) // 8)
        except (OSError, NotImplementedError) as exc:
            raise SourceFailureError('system', str(exc)) from exc
        return int.from_bytes(raw, 'little') & ((1 << bits) - 1)

    def __repr__(self) -> str:
        return 'SystemSource()'


class StdlibSource:
    """Adapter over a `random.Random` instance.

    Args:
        rng: Generator to draw from. A new one seeded with `seed` is created
            when omitted.
        seed: Seed for the generator created when `rng` is None.
    """

    def __init__(self, rng: random.Random | None = None, *, seed: int | None = None) -> None:
        self._rng = rng if rng is not None else random.Random(seed)  # noqa: S311

    def draw_unsigned(self, bits: int) -> int:
        _check_bits(bits)
        return self._rng.getrandbits(bits)

    def __repr__(self) -> str:
        return f'StdlibSource({self._rng!r})'


def _splitmix64(state: int) -> tuple[int, int]:
    state = (state + 0x9E3779B97F4A7C15) & _MASK64
    z = state
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & _MASK64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & _MASK64
    return state, z ^ (z >> 31)


def _rotl(x: int, k: int) -> int:
    return ((x << k) | (x >> (64 - k))) & _MASK64


class Xoroshiro128Plus:
    """Seeded xoroshiro128+ generator.

    Deterministic for a given seed, which makes it the source of choice for
    reproducible simulations and tests. Not suitable for cryptographic use.

    The 128-bit state is expanded from the seed with SplitMix64 so that small
    or similar seeds still give well-mixed, non-zero states. Draws narrower
    than 64 bits take the high bits of one output word (the low bits of
    xoroshiro128+ are the weakest); wider draws concatenate words.

    Args:
        seed: Any integer; drawn from the OS when None.
    """

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = int.from_bytes(os.urandom(8), 'little')
        self.seed = seed
        state, s0 = _splitmix64(seed & _MASK64)
        _, s1 = _splitmix64(state)
        self._s0 = s0
        self._s1 = s1 if (s0 | s1) else 1

    def next_u64(self) -> int:
        """Advance the generator and return the next 64-bit output."""
        s0, s1 = self._s0, self._s1
        result = (s0 + s1) & _MASK64
        s1 ^= s0
        self._s0 = _rotl(s0, 24) ^ s1 ^ ((s1 << 16) & _MASK64)
        self._s1 = _rotl(s1, 37)
        return result

    def draw_unsigned(self, bits: int) -> int:
        _check_bits(bits)
        if bits <= 64:
            return self.next_u64() >> (64 - bits)
        value = 0
        remaining = bits
        while remaining > 0:
            take = min(64, remaining)
            value = (value << take) | (self.next_u64() >> (64 - take))
            remaining -= take
        return value

    def __repr__(self) -> str:
        return f'Xoroshiro128Plus(seed={self.seed!r})'
