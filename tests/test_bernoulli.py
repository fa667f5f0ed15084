"""Tests for Bernoulli trials."""

import math

import pytest
from doubles import ScriptedSource
from hypothesis import given
from hypothesis import strategies as st
from klaw_sampling import (
    BERNOULLI_RANGE,
    Err,
    InvalidProbability,
    InvalidProbabilityError,
    Ok,
    check_probability,
    random_bool,
    require_probability,
)


class TestProbabilityContract:
    """Tests for probability validation."""

    @pytest.mark.parametrize('p', [-0.1, 1.0000001, math.nan, math.inf, -math.inf])
    def test_invalid_probability_raises_before_drawing(self, p):
        source = ScriptedSource()
        with pytest.raises(InvalidProbabilityError):
            random_bool(p, source)
        assert source.calls == []

    def test_bool_is_not_a_probability(self):
        with pytest.raises(InvalidProbabilityError):
            require_probability(True)

    def test_check_probability_ok(self):
        assert check_probability(0.25) == Ok(0.25)
        assert check_probability(1) == Ok(1.0)

    def test_check_probability_err(self):
        assert check_probability(2.0) == Err(InvalidProbability(2.0))

    def test_huge_int_is_rejected(self):
        with pytest.raises(InvalidProbabilityError):
            require_probability(10**400)
        assert check_probability(10**400).is_err()
        source = ScriptedSource()
        with pytest.raises(InvalidProbabilityError):
            random_bool(10**400, source)
        assert source.calls == []

    def test_error_message(self):
        with pytest.raises(InvalidProbabilityError, match=r'\[0, 1\], got 1.5'):
            require_probability(1.5)

    def test_range_constant(self):
        assert (BERNOULLI_RANGE.lower, BERNOULLI_RANGE.upper) == (0.0, 1.0)


class TestRandomBool:
    """Tests for the 64-bit threshold trial."""

    def test_zero_is_never_true(self):
        assert random_bool(0.0, ScriptedSource([0])) is False

    def test_one_is_always_true(self):
        assert random_bool(1.0, ScriptedSource([2**64 - 1])) is True

    def test_half_threshold(self):
        assert random_bool(0.5, ScriptedSource([2**63 - 1])) is True
        assert random_bool(0.5, ScriptedSource([2**63])) is False

    def test_draws_one_word(self):
        source = ScriptedSource([0])
        random_bool(0.3, source)
        assert source.calls == [64]

    def test_default_is_fair(self, rng):
        trues = sum(random_bool(source=rng) for _ in range(10_000))
        assert 4_700 < trues < 5_300

    def test_frequency_tracks_probability(self, rng):
        trues = sum(random_bool(0.1, rng) for _ in range(10_000))
        assert 850 < trues < 1_150

    @given(st.integers(min_value=0, max_value=2**64 - 1))
    def test_extremes_hold_for_any_draw(self, raw):
        assert random_bool(0.0, ScriptedSource([raw])) is False
        assert random_bool(1.0, ScriptedSource([raw])) is True
