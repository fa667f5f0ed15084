"""Tests for shuffling."""

from collections import Counter, UserList, deque
from itertools import permutations

import pytest
from doubles import ScriptedSource
from hypothesis import given
from hypothesis import strategies as st
from klaw_sampling import InvalidRangeError, Xoroshiro128Plus, shuffle, shuffled
from strategies import seeds


class TestShuffled:
    """Tests for the non-mutating shuffle."""

    def test_within_only_moves_selected_elements(self, rng):
        seen = {shuffled('ABCDE', rng, within=range(1, 3)) for _ in range(200)}
        assert seen == {'ABCDE', 'ACBDE'}

    def test_within_as_pair(self, rng):
        for _ in range(50):
            result = shuffled([1, 2, 3, 4, 5], rng, within=(2, 5))
            assert result[:2] == [1, 2]
            assert sorted(result[2:]) == [3, 4, 5]

    def test_does_not_modify_input(self, rng):
        items = list(range(20))
        shuffled(items, rng)
        assert items == list(range(20))

    @pytest.mark.parametrize(
        'collection',
        [[1, 2, 3], (1, 2, 3), 'abc', b'abc', bytearray(b'abc'), UserList([1, 2, 3])],
    )
    def test_preserves_type(self, collection, rng):
        result = shuffled(collection, rng)
        assert type(result) is type(collection)
        assert sorted(result) == sorted(collection)

    def test_empty_and_single(self):
        source = ScriptedSource()
        assert shuffled([], source) == []
        assert shuffled('x', source) == 'x'
        assert source.calls == []

    def test_single_index_window_does_not_draw(self):
        assert shuffled('ABCDE', ScriptedSource(), within=range(2, 3)) == 'ABCDE'

    def test_draw_picks_swap_partner(self):
        # one step: the partner of index 1 is drawn from [0, 1]
        assert shuffled('AB', ScriptedSource([0])) == 'BA'
        assert shuffled('AB', ScriptedSource([1])) == 'AB'

    def test_not_a_sequence(self, rng):
        with pytest.raises(TypeError):
            shuffled({1, 2, 3}, rng)

    @pytest.mark.parametrize('within', [range(0, 6), range(3, 1), range(0, 4, 2), (-1, 2), (4, 2)])
    def test_invalid_within(self, within, rng):
        with pytest.raises(InvalidRangeError):
            shuffled('ABCDE', rng, within=within)

    def test_invalid_within_does_not_draw(self):
        source = ScriptedSource()
        with pytest.raises(InvalidRangeError):
            shuffled([1, 2, 3], source, within=(0, 9))
        assert source.calls == []

    @given(st.lists(st.integers()), seeds)
    def test_preserves_multiset(self, items, seed):
        result = shuffled(items, Xoroshiro128Plus(seed))
        assert Counter(result) == Counter(items)

    def test_permutations_are_uniform(self, rng):
        perms = [''.join(p) for p in permutations('abc')]
        counts = Counter(shuffled('abc', rng) for _ in range(6_000))
        assert set(counts) == set(perms)
        chi_square = sum((counts[p] - 1_000) ** 2 / 1_000 for p in perms)
        # 5 degrees of freedom; p < 1e-6 above 35
        assert chi_square < 35


class TestShuffle:
    """Tests for the in-place shuffle."""

    def test_list_in_place(self, rng):
        items = list(range(10))
        assert shuffle(items, rng) is None
        assert sorted(items) == list(range(10))

    def test_same_seed_matches_shuffled(self):
        items = list(range(10))
        expected = shuffled(items, Xoroshiro128Plus(4))
        shuffle(items, Xoroshiro128Plus(4))
        assert items == expected

    def test_deque(self, rng):
        items = deque(range(10))
        shuffle(items, rng)
        assert isinstance(items, deque)
        assert sorted(items) == list(range(10))

    def test_bytearray_within(self, rng):
        data = bytearray(b'abcdef')
        shuffle(data, rng, within=range(0, 3))
        assert data[3:] == b'def'
        assert sorted(data[:3]) == sorted(b'abc')

    @pytest.mark.parametrize('collection', [(1, 2, 3), 'abc', b'abc'])
    def test_immutable_rejected(self, collection, rng):
        with pytest.raises(TypeError):
            shuffle(collection, rng)

    def test_invalid_within_leaves_input(self, rng):
        items = [1, 2, 3]
        with pytest.raises(InvalidRangeError):
            shuffle(items, rng, within=(1, 7))
        assert items == [1, 2, 3]
