"""Seeded random number generator shared by every random decision in a duel.

Deck generation, weighted character draws, the opponent's card pick and the
dice/spell effects all pull from a ``GameRNG`` so that a whole battle can be
replayed from one seed.  Sub-systems that must not perturb one another (the
player's deck vs. the opponent's deck, the simulator's agent) use a
*forked* stream.
"""

from __future__ import annotations

import hashlib
import random
from typing import Sequence, TypeVar

T = TypeVar("T")


class GameRNG:
    """Deterministic RNG that can be forked into independent sub-streams.

    Parameters
    ----------
    seed:
        Integer seed for the underlying Mersenne Twister.  ``None`` seeds
        from system entropy (interactive play).
    """

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = random.SystemRandom().randrange(2**63)
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def seed(self) -> int:
        return self._seed

    # -- draws ---------------------------------------------------------------

    def random_int(self, low: int, high: int) -> int:
        """Return a random integer *N* such that ``low <= N <= high``."""
        return self._rng.randint(low, high)

    def random_index(self, length: int) -> int:
        """Return a uniform index into a sequence of *length* items."""
        if length <= 0:
            raise ValueError(f"random_index needs a positive length, got {length}")
        return self._rng.randrange(length)

    def random_float(self) -> float:
        """Return a random float in ``[0.0, 1.0)``."""
        return self._rng.random()

    def random_choice(self, seq: Sequence[T]) -> T:
        """Return a random element from a non-empty sequence."""
        return self._rng.choice(seq)

    def chance(self, probability: float) -> bool:
        """Return True with the given *probability*."""
        return self._rng.random() < probability

    def shuffle(self, lst: list[T]) -> None:
        """Shuffle *lst* in place (Fisher-Yates, unbiased)."""
        for i in range(len(lst) - 1, 0, -1):
            j = self._rng.randint(0, i)
            lst[i], lst[j] = lst[j], lst[i]

    # -- forking -------------------------------------------------------------

    def fork(self, name: str) -> GameRNG:
        """Create a child RNG seeded from this RNG's seed and *name*.

        Forking with the same *name* always yields the same child seed, so
        e.g. ``rng.fork("deck:player")`` reproduces the player's deck.
        """
        digest = hashlib.sha256(f"{self._seed}:{name}".encode()).digest()
        return GameRNG(int.from_bytes(digest[:8], "big"))

    def __repr__(self) -> str:
        return f"GameRNG(seed={self._seed})"
