"""Sampling error types: dual struct+exception for Result and raise-based code.

Invalid ranges, probabilities and distribution parameters are caller
contract violations. The raising entry points fail fast with the exception
variant; the `try_*`/`check_*` entry points return `Err(struct)` instead.
"""

from __future__ import annotations

import msgspec

__all__ = [
    'InvalidParameter',
    'InvalidParameterError',
    'InvalidProbability',
    'InvalidProbabilityError',
    'InvalidRange',
    'InvalidRangeError',
    'SourceFailure',
    'SourceFailureError',
]


# --- Range Errors ---


class InvalidRange(msgspec.Struct, frozen=True, gc=False):
    """Range bounds are unusable - struct variant for Result[T, InvalidRange]."""

    lower: object
    upper: object
    reason: str | None = None

    def to_exception(self) -> InvalidRangeError:
        """Convert to exception for raise-based code."""
        return InvalidRangeError(self.lower, self.upper, self.reason)


class InvalidRangeError(ValueError):
    """Range bounds are unusable - exception variant."""

    def __init__(self, lower: object, upper: object, reason: str | None = None) -> None:
        self.lower = lower
        self.upper = upper
        self.reason = reason
        msg = f'Invalid range [{lower!r}, {upper!r}]'
        if reason:
            msg = f'{msg}: {reason}'
        super().__init__(msg)

    def to_struct(self) -> InvalidRange:
        """Convert to struct for Result-based code."""
        return InvalidRange(self.lower, self.upper, self.reason)


# --- Distribution Errors ---


class InvalidProbability(msgspec.Struct, frozen=True, gc=False):
    """Probability outside the Bernoulli range - struct variant."""

    probability: float

    def to_exception(self) -> InvalidProbabilityError:
        """Convert to exception for raise-based code."""
        return InvalidProbabilityError(self.probability)


class InvalidProbabilityError(ValueError):
    """Probability outside the Bernoulli range - exception variant."""

    def __init__(self, probability: float) -> None:
        self.probability = probability
        super().__init__(f'Probability must lie in [0, 1], got {probability!r}')

    def to_struct(self) -> InvalidProbability:
        """Convert to struct for Result-based code."""
        return InvalidProbability(self.probability)


class InvalidParameter(msgspec.Struct, frozen=True, gc=False):
    """Distribution parameter out of its domain - struct variant."""

    name: str
    value: float
    reason: str

    def to_exception(self) -> InvalidParameterError:
        """Convert to exception for raise-based code."""
        return InvalidParameterError(self.name, self.value, self.reason)


class InvalidParameterError(ValueError):
    """Distribution parameter out of its domain - exception variant."""

    def __init__(self, name: str, value: float, reason: str) -> None:
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f'Invalid {name}={value!r}: {reason}')

    def to_struct(self) -> InvalidParameter:
        """Convert to struct for Result-based code."""
        return InvalidParameter(self.name, self.value, self.reason)


# --- Source Errors ---


class SourceFailure(msgspec.Struct, frozen=True, gc=False):
    """A bit source could not produce bits - struct variant."""

    source: str
    reason: str | None = None

    def to_exception(self) -> SourceFailureError:
        """Convert to exception for raise-based code."""
        return SourceFailureError(self.source, self.reason)


class SourceFailureError(Exception):
    """A bit source could not produce bits - exception variant."""

    def __init__(self, source: str, reason: str | None = None) -> None:
        self.source = source
        self.reason = reason
        msg = f'[{source}] bit source failed'
        if reason:
            msg = f'{msg}: {reason}'
        super().__init__(msg)

    def to_struct(self) -> SourceFailure:
        """Convert to struct for Result-based code."""
        return SourceFailure(self.source, self.reason)
