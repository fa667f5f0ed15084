"""Distribution descriptors and the `sample` typeclass.

Each descriptor is a frozen, tagged msgspec struct that validates its
parameters on construction, so a descriptor that exists can always be
sampled. `sample` dispatches on the descriptor type. Results too large
for the requested float kind saturate to infinity, as IEEE-754 arithmetic
would.

Example:
    ```python
    gauss = GaussianSampler()
    sample(Normal(mean=10.0, std=2.0), rng, gaussian=gauss)
    sample(Exponential(rate=0.5), rng)
    sample(Bernoulli(0.25), rng)
    ```
"""

from __future__ import annotations

import math
from typing import Any

import msgspec

from klaw_sampling._config import resolve_source
from klaw_sampling._preconditions import require
from klaw_sampling.distributions.bernoulli import random_bool, require_probability
from klaw_sampling.distributions.gaussian import GaussianSampler
from klaw_sampling.errors import InvalidParameter
from klaw_sampling.numeric import FloatKind, f64
from klaw_sampling.ranges import ClosedRange
from klaw_sampling.source import BitSource
from klaw_sampling.typeclass import typeclass
from klaw_sampling.uniform import random_in

__all__ = [
    'Bernoulli',
    'Distribution',
    'Exponential',
    'LogNormal',
    'Normal',
    'Uniform',
    'sample',
]

_OPEN_UNIT_BITS = 64


def _require_finite(name: str, value: float) -> None:
    require(math.isfinite(value), lambda: InvalidParameter(name, value, 'must be finite'))


def _exp(x: float) -> float:
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


class Uniform(msgspec.Struct, frozen=True, gc=False, tag='uniform'):
    """Uniform over `[lower, upper]`."""

    lower: float = 0.0
    upper: float = 1.0

    def __post_init__(self) -> None:
        ClosedRange(self.lower, self.upper, f64)


class Normal(msgspec.Struct, frozen=True, gc=False, tag='normal'):
    """Gaussian with the given mean and standard deviation."""

    mean: float = 0.0
    std: float = 1.0

    def __post_init__(self) -> None:
        _require_finite('mean', self.mean)
        _require_finite('std', self.std)
        require(self.std >= 0, lambda: InvalidParameter('std', self.std, 'must be non-negative'))


class LogNormal(msgspec.Struct, frozen=True, gc=False, tag='log_normal'):
    """exp(X) where X is Normal(mean, std)."""

    mean: float = 0.0
    std: float = 1.0

    def __post_init__(self) -> None:
        _require_finite('mean', self.mean)
        _require_finite('std', self.std)
        require(self.std >= 0, lambda: InvalidParameter('std', self.std, 'must be non-negative'))


class Exponential(msgspec.Struct, frozen=True, gc=False, tag='exponential'):
    """Exponential with the given rate (mean `1 / rate`)."""

    rate: float = 1.0

    def __post_init__(self) -> None:
        _require_finite('rate', self.rate)
        require(self.rate > 0, lambda: InvalidParameter('rate', self.rate, 'must be positive'))


class Bernoulli(msgspec.Struct, frozen=True, gc=False, tag='bernoulli'):
    """True with probability `p`."""

    p: float = 0.5

    def __post_init__(self) -> None:
        require_probability(self.p)


type Distribution = Uniform | Normal | LogNormal | Exponential | Bernoulli


@typeclass
def sample(
    distribution: Any,
    source: BitSource | None = None,
    *,
    kind: FloatKind = f64,
    gaussian: GaussianSampler | None = None,
) -> Any:
    """Draw one value from `distribution`.

    Args:
        distribution: A distribution descriptor.
        source: Bit source to draw from; the process default when None.
        kind: Float kind of the result (ignored by Bernoulli).
        gaussian: Sampler whose pending value Normal and LogNormal reuse; a
            throwaway sampler is used when None.
    """


@sample.instance(Uniform)
def _sample_uniform(distribution: Uniform, source=None, *, kind=f64, gaussian=None) -> float:
    return random_in(ClosedRange(distribution.lower, distribution.upper, kind), source)


@sample.instance(Normal)
def _sample_normal(distribution: Normal, source=None, *, kind=f64, gaussian=None) -> float:
    z = (gaussian or GaussianSampler()).next_gaussian(source, kind=kind)
    return kind.coerce(distribution.mean + distribution.std * z, saturate=True)


@sample.instance(LogNormal)
def _sample_log_normal(distribution: LogNormal, source=None, *, kind=f64, gaussian=None) -> float:
    z = (gaussian or GaussianSampler()).next_gaussian(source, kind=kind)
    return kind.coerce(_exp(distribution.mean + distribution.std * z), saturate=True)


@sample.instance(Exponential)
def _sample_exponential(distribution: Exponential, source=None, *, kind=f64, gaussian=None) -> float:
    # u in (0, 1) keeps log() finite
    u = (resolve_source(source).draw_unsigned(_OPEN_UNIT_BITS) + 0.5) / (1 << _OPEN_UNIT_BITS)
    return kind.coerce(-math.log(u) / distribution.rate, saturate=True)


@sample.instance(Bernoulli)
def _sample_bernoulli(distribution: Bernoulli, source=None, *, kind=f64, gaussian=None) -> bool:
    return random_bool(distribution.p, source)
