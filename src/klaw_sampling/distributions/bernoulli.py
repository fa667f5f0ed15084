"""Bernoulli trials and their probability contract."""

from __future__ import annotations

from klaw_sampling._config import resolve_source
from klaw_sampling._preconditions import check, require
from klaw_sampling.errors import InvalidProbability
from klaw_sampling.numeric import f64
from klaw_sampling.ranges import ClosedRange
from klaw_sampling.source import BitSource
from klaw_sampling.types import Result

__all__ = [
    'BERNOULLI_RANGE',
    'check_probability',
    'random_bool',
    'require_probability',
]

BERNOULLI_RANGE = ClosedRange(0.0, 1.0, f64)
"""Valid probabilities for a Bernoulli trial."""

_TRIAL_BITS = 64


def _is_probability(p: float) -> bool:
    return isinstance(p, int | float) and not isinstance(p, bool) and p in BERNOULLI_RANGE


def check_probability(p: float) -> Result[float, InvalidProbability]:
    """Return `Ok(p)` if `p` lies in `BERNOULLI_RANGE`, else `Err(InvalidProbability)`."""
    return check(_is_probability(p), lambda: InvalidProbability(p)).map(lambda _: float(p))


def require_probability(p: float) -> float:
    """Return `p` as a float, raising `InvalidProbabilityError` if it is out of range."""
    require(_is_probability(p), lambda: InvalidProbability(p))
    return float(p)


def random_bool(p: float = 0.5, source: BitSource | None = None) -> bool:
    """Return True with probability `p`.

    The probability is validated before anything is drawn. `p == 0` is
    never True and `p == 1` is always True.

    Raises:
        InvalidProbabilityError: If `p` is outside [0, 1] or NaN.
    """
    p = require_probability(p)
    threshold = int(p * (1 << _TRIAL_BITS))
    return resolve_source(source).draw_unsigned(_TRIAL_BITS) < threshold
