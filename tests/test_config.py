"""Tests for sampling configuration and initialization."""

from __future__ import annotations

import logging
import os
from unittest.mock import patch

import pytest
from klaw_sampling import (
    ClosedRange,
    SamplingConfig,
    SourceKind,
    SystemSource,
    Xoroshiro128Plus,
    default_source,
    get_config,
    init,
    random_in,
)
from klaw_sampling._config import _detect_seed, _detect_source_kind, resolve_source


@pytest.fixture
def restore_root_logger():
    """Undo the root handler and level changes made by configure_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSourceKindEnum:
    """Tests for the SourceKind enum."""

    def test_values(self) -> None:
        assert SourceKind.SYSTEM.value == 'system'
        assert SourceKind.SEEDED.value == 'seeded'

    def test_invalid_raises(self) -> None:
        with pytest.raises(ValueError):
            SourceKind('quantum')


class TestSamplingConfig:
    """Tests for the SamplingConfig dataclass."""

    def test_default_values(self) -> None:
        config = SamplingConfig()
        assert config.source == SourceKind.SYSTEM
        assert config.seed is None
        assert config.log_level is None

    def test_config_is_frozen(self) -> None:
        config = SamplingConfig()
        with pytest.raises(AttributeError):
            config.seed = 1  # type: ignore[misc]


class TestDetectSourceKind:
    """Tests for _detect_source_kind()."""

    def test_env_seeded(self) -> None:
        with patch.dict(os.environ, {'KLAW_SAMPLING_SOURCE': 'seeded'}):
            assert _detect_source_kind() == SourceKind.SEEDED

    def test_env_case_insensitive(self) -> None:
        with patch.dict(os.environ, {'KLAW_SAMPLING_SOURCE': 'SYSTEM'}):
            assert _detect_source_kind() == SourceKind.SYSTEM

    def test_env_invalid_defaults_to_system(self, caplog: pytest.LogCaptureFixture) -> None:
        with patch.dict(os.environ, {'KLAW_SAMPLING_SOURCE': 'quantum'}):
            assert _detect_source_kind() == SourceKind.SYSTEM
        assert 'quantum' in caplog.text

    def test_no_env_defaults_to_system(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert _detect_source_kind() == SourceKind.SYSTEM


class TestDetectSeed:
    """Tests for _detect_seed()."""

    def test_decimal(self) -> None:
        with patch.dict(os.environ, {'KLAW_SAMPLING_SEED': '42'}):
            assert _detect_seed() == 42

    def test_hex(self) -> None:
        with patch.dict(os.environ, {'KLAW_SAMPLING_SEED': '0xC0FFEE'}):
            assert _detect_seed() == 0xC0FFEE

    def test_invalid_is_ignored(self, caplog: pytest.LogCaptureFixture) -> None:
        with patch.dict(os.environ, {'KLAW_SAMPLING_SEED': 'forty-two'}):
            assert _detect_seed() is None
        assert 'forty-two' in caplog.text

    def test_unset(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert _detect_seed() is None


class TestInit:
    """Tests for init()."""

    def test_init_with_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            config = init()
        assert config == SamplingConfig()
        assert isinstance(default_source(), SystemSource)

    def test_seed_selects_seeded_source(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            config = init(seed=7)
        assert config.source == SourceKind.SEEDED
        assert isinstance(default_source(), Xoroshiro128Plus)
        assert default_source().seed == 7

    def test_source_string(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            config = init(source='seeded')
        assert config.source == SourceKind.SEEDED
        assert config.seed is None

    def test_source_string_invalid(self) -> None:
        with pytest.raises(ValueError):
            init(source='quantum')

    def test_env_seed(self) -> None:
        with patch.dict(os.environ, {'KLAW_SAMPLING_SEED': '99'}, clear=True):
            config = init()
        assert config == SamplingConfig(source=SourceKind.SEEDED, seed=99)

    def test_explicit_system_ignores_env_source(self) -> None:
        with patch.dict(os.environ, {'KLAW_SAMPLING_SOURCE': 'seeded'}, clear=True):
            config = init(source=SourceKind.SYSTEM)
        assert config.source == SourceKind.SYSTEM

    def test_log_level_from_env(self, restore_root_logger) -> None:
        with patch.dict(os.environ, {'KLAW_SAMPLING_LOG_LEVEL': 'DEBUG'}, clear=True):
            config = init()
        assert config.log_level == 'DEBUG'
        assert logging.getLogger().level == logging.DEBUG

    def test_reinit_rebuilds_default_source(self) -> None:
        init(seed=1)
        first = default_source()
        init(seed=1)
        assert default_source() is not first

    def test_seeded_init_is_reproducible(self) -> None:
        range_ = ClosedRange(0, 10**9)
        init(seed=123)
        first = [random_in(range_) for _ in range(5)]
        init(seed=123)
        assert [random_in(range_) for _ in range(5)] == first


class TestGetConfig:
    """Tests for get_config()."""

    def test_before_init_raises(self) -> None:
        with pytest.raises(RuntimeError, match='not initialized'):
            get_config()

    def test_after_init(self) -> None:
        config = init(seed=5)
        assert get_config() is config


class TestDefaultSource:
    """Tests for lazy default source resolution."""

    def test_lazily_initializes(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            source = default_source()
        assert isinstance(source, SystemSource)
        assert get_config() == SamplingConfig()

    def test_env_seeded_default(self) -> None:
        with patch.dict(os.environ, {'KLAW_SAMPLING_SOURCE': 'seeded'}, clear=True):
            assert isinstance(default_source(), Xoroshiro128Plus)

    def test_resolve_source_prefers_explicit(self, rng) -> None:
        assert resolve_source(rng) is rng
        init(seed=3)
        assert resolve_source(None) is default_source()
