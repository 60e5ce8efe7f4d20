"""Tests for the seeded, forkable RNG."""

import pytest

from rarity_duel.sim.core.rng import GameRNG


class TestGameRNG:
    def test_same_seed_same_stream(self):
        a, b = GameRNG(5), GameRNG(5)
        assert [a.random_int(1, 100) for _ in range(20)] == [b.random_int(1, 100) for _ in range(20)]

    def test_random_int_inclusive_bounds(self):
        rng = GameRNG(0)
        rolls = {rng.random_int(1, 6) for _ in range(500)}
        assert rolls == {1, 2, 3, 4, 5, 6}

    def test_random_index_range(self):
        rng = GameRNG(1)
        assert all(0 <= rng.random_index(4) < 4 for _ in range(200))

    def test_random_index_rejects_empty(self):
        with pytest.raises(ValueError):
            GameRNG(0).random_index(0)

    def test_chance_extremes(self):
        rng = GameRNG(2)
        assert not any(rng.chance(0.0) for _ in range(100))
        assert all(rng.chance(1.0) for _ in range(100))

    def test_shuffle_is_a_permutation(self):
        items = list(range(30))
        GameRNG(3).shuffle(items)
        assert sorted(items) == list(range(30))
        assert items != list(range(30))

    def test_fork_is_deterministic(self):
        assert GameRNG(9).fork("deck:player").seed == GameRNG(9).fork("deck:player").seed

    def test_forks_are_independent(self):
        rng = GameRNG(9)
        assert rng.fork("deck:player").seed != rng.fork("deck:enemy").seed

    def test_fork_does_not_advance_parent(self):
        a, b = GameRNG(4), GameRNG(4)
        a.fork("x")
        assert a.random_float() == b.random_float()

    def test_unseeded_rng_has_a_seed(self):
        assert isinstance(GameRNG().seed, int)
