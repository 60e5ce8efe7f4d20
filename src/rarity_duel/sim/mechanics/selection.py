"""Weighted random selection without replacement.

Used to offer characters on the selection screen and to pick the opponent,
with each character weighted by its rarity.
"""

from __future__ import annotations

from typing import Sequence, TypeVar

from rarity_duel.errors import InvalidArgument
from rarity_duel.sim.core.rng import GameRNG

T = TypeVar("T")


def weighted_random_select(
    items: Sequence[T],
    weights: Sequence[float],
    k: int,
    rng: GameRNG,
) -> list[T]:
    """Draw *k* distinct items, each with probability proportional to its
    remaining weight.

    After every draw the chosen item's weight is zeroed and the total is
    renormalised, so the highest remaining weight always has the best odds.
    Zero-weight items are only returned once every nonzero item has been
    drawn; from then on the rest are picked uniformly.

    Raises
    ------
    InvalidArgument
        If ``len(items) != len(weights)``, ``k`` is negative or larger than
        ``len(items)``, or any weight is negative.
    """
    if len(items) != len(weights):
        raise InvalidArgument(
            f"Items and weights must have the same length "
            f"({len(items)} != {len(weights)})"
        )
    if k < 0:
        raise InvalidArgument(f"Cannot select a negative number of items ({k})")
    if k > len(items):
        raise InvalidArgument(
            f"Cannot select more items than available ({k} > {len(items)})"
        )
    if any(w < 0 for w in weights):
        raise InvalidArgument("Weights must be non-negative")

    temp_weights = [float(w) for w in weights]
    total = sum(temp_weights)
    taken = [False] * len(items)
    selected: list[T] = []

    while len(selected) < k:
        idx = _walk(temp_weights, rng.random_float() * total) if total > 0 else -1
        if idx < 0:
            idx = _uniform_untaken(taken, rng)
        else:
            total -= temp_weights[idx]
            temp_weights[idx] = 0.0
        taken[idx] = True
        selected.append(items[idx])

    return selected


def _walk(weights: list[float], sample: float) -> int:
    """Return the index at which the running weight sum first exceeds *sample*."""
    cumulative = 0.0
    last_nonzero = -1
    for i, w in enumerate(weights):
        if w == 0:
            continue
        last_nonzero = i
        cumulative += w
        if sample < cumulative:
            return i
    # Float rounding can leave sample == cumulative at the very end.
    return last_nonzero


def _uniform_untaken(taken: list[bool], rng: GameRNG) -> int:
    remaining = [i for i, t in enumerate(taken) if not t]
    return remaining[rng.random_index(len(remaining))]
