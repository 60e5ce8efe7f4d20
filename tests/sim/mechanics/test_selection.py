"""Tests for weighted random selection without replacement."""

from collections import Counter

import pytest

from rarity_duel.errors import InvalidArgument
from rarity_duel.sim.core.rng import GameRNG
from rarity_duel.sim.mechanics.selection import weighted_random_select


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

class TestValidation:
    def test_length_mismatch(self):
        with pytest.raises(InvalidArgument):
            weighted_random_select(["a", "b"], [1], 1, GameRNG(0))

    def test_k_larger_than_items(self):
        with pytest.raises(InvalidArgument):
            weighted_random_select(["a", "b"], [1, 1], 3, GameRNG(0))

    def test_negative_k(self):
        with pytest.raises(InvalidArgument):
            weighted_random_select(["a"], [1], -1, GameRNG(0))

    def test_negative_weight(self):
        with pytest.raises(InvalidArgument):
            weighted_random_select(["a", "b"], [1, -1], 1, GameRNG(0))

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            weighted_random_select([], [1], 0, GameRNG(0))


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

class TestSelection:
    def test_k_zero_returns_empty(self):
        assert weighted_random_select(["a", "b"], [1, 1], 0, GameRNG(0)) == []

    def test_returns_k_distinct_items(self):
        items = list("abcdefgh")
        rng = GameRNG(1)
        for _ in range(50):
            picked = weighted_random_select(items, [5, 4, 3, 2, 1, 1, 1, 1], 5, rng)
            assert len(picked) == 5
            assert len(set(picked)) == 5

    def test_select_all_returns_a_permutation(self):
        items = ["a", "b", "c"]
        picked = weighted_random_select(items, [3, 2, 1], 3, GameRNG(2))
        assert sorted(picked) == items

    def test_zero_weight_never_picked_while_nonzero_remain(self):
        rng = GameRNG(3)
        for _ in range(200):
            picked = weighted_random_select(["a", "b", "c"], [1, 0, 1], 2, rng)
            assert "b" not in picked

    def test_zero_weight_items_fill_in_last(self):
        rng = GameRNG(4)
        for _ in range(50):
            picked = weighted_random_select(["a", "b", "c"], [1, 0, 1], 3, rng)
            assert picked[2] == "b"

    def test_all_zero_weights_fall_back_to_uniform(self):
        picked = weighted_random_select(["a", "b", "c"], [0, 0, 0], 2, GameRNG(5))
        assert len(set(picked)) == 2

    def test_equal_weights_roughly_uniform(self):
        rng = GameRNG(6)
        counts = Counter(
            weighted_random_select(["a", "b", "c"], [1, 1, 1], 1, rng)[0]
            for _ in range(3000)
        )
        for item in "abc":
            assert 850 <= counts[item] <= 1150

    def test_heavier_item_picked_more_often(self):
        rng = GameRNG(7)
        counts = Counter(
            weighted_random_select(["common", "divine"], [1000, 1], 1, rng)[0]
            for _ in range(2000)
        )
        assert counts["common"] > 1950

    def test_same_seed_same_result(self):
        items = list("abcdef")
        weights = [6, 5, 4, 3, 2, 1]
        first = weighted_random_select(items, weights, 3, GameRNG(99))
        second = weighted_random_select(items, weights, 3, GameRNG(99))
        assert first == second
