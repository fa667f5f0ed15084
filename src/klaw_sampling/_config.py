"""Sampling configuration: SourceKind, SamplingConfig, and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum

from klaw_sampling._logging import configure_logging, get_logger
from klaw_sampling.source import BitSource, SystemSource, Xoroshiro128Plus

__all__ = [
    'SamplingConfig',
    'SourceKind',
    'default_source',
    'get_config',
    'init',
    'resolve_source',
]

logger = get_logger(__name__)


class SourceKind(Enum):
    """Which bit source backs the process default."""

    SYSTEM = 'system'
    SEEDED = 'seeded'


@dataclass(frozen=True)
class SamplingConfig:
    """Configuration for klaw-sampling.

    Attributes:
        source: Kind of the process default bit source.
        seed: Seed for the SEEDED source (random when None).
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
    """

    source: SourceKind = SourceKind.SYSTEM
    seed: int | None = None
    log_level: str | None = None


# Global configuration and default source (set by init())
_config: SamplingConfig | None = None
_default_source: BitSource | None = None


def _detect_source_kind() -> SourceKind:
    """Detect the source kind from KLAW_SAMPLING_SOURCE, defaulting to SYSTEM."""
    env_source = os.environ.get('KLAW_SAMPLING_SOURCE', '').lower()
    if env_source == 'seeded':
        return SourceKind.SEEDED
    if env_source and env_source != 'system':
        logging.warning("Unknown KLAW_SAMPLING_SOURCE value '%s', defaulting to system", env_source)
    return SourceKind.SYSTEM


def _detect_seed() -> int | None:
    """Read KLAW_SAMPLING_SEED (decimal or 0x-prefixed hex)."""
    env_seed = os.environ.get('KLAW_SAMPLING_SEED', '').strip()
    if not env_seed:
        return None
    try:
        return int(env_seed, 0)
    except ValueError:
        logging.warning("Invalid KLAW_SAMPLING_SEED value '%s', ignoring", env_seed)
        return None


def _build_source(config: SamplingConfig) -> BitSource:
    if config.source is SourceKind.SEEDED:
        return Xoroshiro128Plus(config.seed)
    return SystemSource()


def init(
    source: SourceKind | str | None = None,
    seed: int | None = None,
    log_level: str | None = None,
) -> SamplingConfig:
    """Initialize klaw-sampling and rebuild the process default source.

    Omitted arguments fall back to the KLAW_SAMPLING_SOURCE,
    KLAW_SAMPLING_SEED and KLAW_SAMPLING_LOG_LEVEL environment variables.
    Passing a seed without a source selects the SEEDED source.

    Args:
        source: Default source kind, as enum or string ("system", "seeded").
        seed: Seed for the SEEDED source.
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.

    Returns:
        The SamplingConfig that was set.

    Example:
        ```python
        from klaw_sampling import init, random_in, ClosedRange

        init(seed=42)                       # reproducible default source
        random_in(ClosedRange(1, 6))
        ```
    """
    global _config, _default_source  # noqa: PLW0603

    if seed is None:
        seed = _detect_seed()

    if source is None:
        resolved_source = SourceKind.SEEDED if seed is not None else _detect_source_kind()
    elif isinstance(source, str):
        resolved_source = SourceKind(source.lower())
    else:
        resolved_source = source

    if log_level is None:
        log_level = os.environ.get('KLAW_SAMPLING_LOG_LEVEL') or None

    _config = SamplingConfig(source=resolved_source, seed=seed, log_level=log_level)
    _default_source = _build_source(_config)

    if log_level is not None:
        configure_logging(log_level)

    logger.info('sampling initialized', source=resolved_source.value, seeded=seed is not None)
    return _config


def get_config() -> SamplingConfig:
    """Get the current sampling configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'klaw-sampling not initialized. Call klaw_sampling.init() first.'
        raise RuntimeError(msg)
    return _config


def default_source() -> BitSource:
    """Return the process default source, initializing from the environment if needed."""
    if _default_source is None:
        init()
    return _default_source  # type: ignore[return-value]


def resolve_source(source: BitSource | None) -> BitSource:
    """Return `source`, or the process default source when it is None."""
    return source if source is not None else default_source()
