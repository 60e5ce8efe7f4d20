"""Exception types raised by the duel engine.

Construction-time errors (weighted selection, character creation, playing a
card that is not in the hand) propagate to the caller.  ``EffectFailure`` is
only ever built inside round resolution; it never escapes a
round.
"""

from __future__ import annotations


class DuelError(Exception):
    """Base class for every error the engine raises on purpose."""


class InvalidArgument(DuelError, ValueError):
    """A malformed weighted-selection request or mode identifier."""


class InvalidCharacter(DuelError, ValueError):
    """A character template is missing required fields or holds bad values."""


class InvalidCardIndex(DuelError, IndexError):
    """A card index outside the current hand was played."""

    def __init__(self, index: int, hand_size: int) -> None:
        super().__init__(
            f"Invalid card index {index} for a hand of {hand_size} card(s)"
        )
        self.index = index
        self.hand_size = hand_size


class EffectFailure(DuelError):
    """An ability effect raised while being applied.

    Wraps the original exception so the round resolver can log it and
    carry on with damage computation.
    """

    def __init__(self, card_name: str, effect_id: str, cause: BaseException) -> None:
        super().__init__(f"{effect_id} on {card_name}: {cause}")
        self.card_name = card_name
        self.effect_id = effect_id
        self.cause = cause


class ResourceMissing(DuelError, FileNotFoundError):
    """A resource the engine was pointed at (e.g. a config file) is absent."""
