"""Shared fixtures for simulation tests."""

from __future__ import annotations

import pytest

from rarity_duel.config import GameConfig
from rarity_duel.sim.achievements import AchievementTracker
from rarity_duel.sim.core.rng import GameRNG
from rarity_duel.sim.resolver import RoundResolver


@pytest.fixture
def rng() -> GameRNG:
    return GameRNG(42)


@pytest.fixture
def config() -> GameConfig:
    return GameConfig()


@pytest.fixture
def tracker() -> AchievementTracker:
    return AchievementTracker()


@pytest.fixture
def resolver(tracker: AchievementTracker, config: GameConfig) -> RoundResolver:
    return RoundResolver(tracker, config, GameRNG(7))
