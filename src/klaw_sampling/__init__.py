"""klaw-sampling: Uniform and distribution sampling over pluggable bit sources.

Values of fixed-width integer and floating-point kinds are drawn uniformly
from closed ranges, lazily as (optionally limited) sequences, or from
Gaussian, Bernoulli and other distributions. Any object with a
`draw_unsigned(bits)` method can serve as the bit source.

Flat imports (preferred):
    from klaw_sampling import ClosedRange, random_in, randoms, shuffled
    from klaw_sampling import GaussianSampler, random_bool, Xoroshiro128Plus

Submodule imports (for organization):
    from klaw_sampling.numeric import i32, u8, f32
    from klaw_sampling.distributions import Normal, sample
    from klaw_sampling.errors import InvalidRangeError
"""

# Configuration
from klaw_sampling._config import SamplingConfig, SourceKind, default_source, get_config, init

# Logging
from klaw_sampling._logging import add_log_hook, clear_log_hooks, configure_logging, remove_log_hook

# Distributions
from klaw_sampling.distributions import (
    BERNOULLI_RANGE,
    Bernoulli,
    Distribution,
    Exponential,
    GaussianSampler,
    LogNormal,
    Normal,
    Uniform,
    check_probability,
    random_bool,
    require_probability,
    sample,
)

# Errors
from klaw_sampling.errors import (
    InvalidParameter,
    InvalidParameterError,
    InvalidProbability,
    InvalidProbabilityError,
    InvalidRange,
    InvalidRangeError,
    SourceFailure,
    SourceFailureError,
)

# Numeric kinds
from klaw_sampling.numeric import (
    FloatKind,
    IntKind,
    f32,
    f64,
    i8,
    i16,
    i32,
    i64,
    isize,
    u8,
    u16,
    u32,
    u64,
    usize,
)
from klaw_sampling.ranges import ClosedRange
from klaw_sampling.sequences import LimitedRandomSequence, RandomSequence, randoms
from klaw_sampling.shuffle import shuffle, shuffled

# Sources
from klaw_sampling.source import BitSource, StdlibSource, SystemSource, Xoroshiro128Plus

# Types
from klaw_sampling.types import Err, Nothing, NothingType, Ok, Option, Result, Some
from klaw_sampling.uniform import random_in, random_through, random_unit, random_value

__all__ = [
    'BERNOULLI_RANGE',
    'Bernoulli',
    'BitSource',
    'ClosedRange',
    'Distribution',
    'Err',
    'Exponential',
    'FloatKind',
    'GaussianSampler',
    'IntKind',
    'InvalidParameter',
    'InvalidParameterError',
    'InvalidProbability',
    'InvalidProbabilityError',
    'InvalidRange',
    'InvalidRangeError',
    'LimitedRandomSequence',
    'LogNormal',
    'Normal',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'RandomSequence',
    'Result',
    'SamplingConfig',
    'Some',
    'SourceFailure',
    'SourceFailureError',
    'SourceKind',
    'StdlibSource',
    'SystemSource',
    'Uniform',
    'Xoroshiro128Plus',
    'add_log_hook',
    'check_probability',
    'clear_log_hooks',
    'configure_logging',
    'default_source',
    'f32',
    'f64',
    'get_config',
    'i8',
    'i16',
    'i32',
    'i64',
    'init',
    'isize',
    'random_bool',
    'random_in',
    'random_through',
    'random_unit',
    'random_value',
    'randoms',
    'remove_log_hook',
    'require_probability',
    'sample',
    'shuffle',
    'shuffled',
    'u8',
    'u16',
    'u32',
    'u64',
    'usize',
]
