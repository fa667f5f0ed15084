"""Distribution helpers: Gaussian, Bernoulli, and distribution descriptors."""

from klaw_sampling.distributions.bernoulli import (
    BERNOULLI_RANGE,
    check_probability,
    random_bool,
    require_probability,
)
from klaw_sampling.distributions.descriptors import (
    Bernoulli,
    Distribution,
    Exponential,
    LogNormal,
    Normal,
    Uniform,
    sample,
)
from klaw_sampling.distributions.gaussian import GaussianSampler

__all__ = [
    'BERNOULLI_RANGE',
    'Bernoulli',
    'Distribution',
    'Exponential',
    'GaussianSampler',
    'LogNormal',
    'Normal',
    'Uniform',
    'check_probability',
    'random_bool',
    'require_probability',
    'sample',
]
