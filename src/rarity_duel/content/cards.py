"""Card catalog -- the static pool every deck is built from."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class EffectKind(str, Enum):
    """Every ability effect a card can carry.

    The set is closed: :mod:`rarity_duel.sim.effects` maps each member to
    exactly one handler.
    """

    BURN = "Burn"
    FREEZE = "Freeze"
    STEAL = "Steal"
    SHIELD = "Shield"
    REVEAL_HAND = "RevealHand"
    DICE_ROLL = "DiceRoll"
    SHOCK = "Shock"
    STURDY = "Sturdy"
    GUST = "Gust"
    HEAL = "Heal"
    POISON = "Poison"
    PROTECT = "Protect"
    SPELLCAST = "Spellcast"
    SUMMON = "Summon"
    FORESIGHT = "Foresight"
    CHAOS = "Chaos"


# Display name shown on a card carrying each effect.
ABILITY_NAMES: dict[EffectKind, str] = {
    EffectKind.BURN: "Burn",
    EffectKind.FREEZE: "Freeze",
    EffectKind.STEAL: "Steal",
    EffectKind.SHIELD: "Shield",
    EffectKind.REVEAL_HAND: "Reveal Hand",
    EffectKind.DICE_ROLL: "Dice Roll",
    EffectKind.SHOCK: "Shock",
    EffectKind.STURDY: "Sturdy",
    EffectKind.GUST: "Gust",
    EffectKind.HEAL: "Heal",
    EffectKind.POISON: "Poison",
    EffectKind.PROTECT: "Protect",
    EffectKind.SPELLCAST: "Spellcast",
    EffectKind.SUMMON: "Summon",
    EffectKind.FORESIGHT: "Foresight",
    EffectKind.CHAOS: "Chaos",
}


class CardTemplate(BaseModel):
    """Immutable catalog entry for a card."""

    model_config = {"frozen": True}

    name: str
    emoji: str
    power: int
    ability: str
    """Human-readable ability label (e.g. ``"Reveal Hand"``)."""

    effect: EffectKind | None = None
    """Effect applied when the card is played.  ``None`` for pure-power cards."""


CARD_CATALOG: tuple[CardTemplate, ...] = (
    CardTemplate(name="Flame Warrior", emoji="🔥", power=5, ability="Burn", effect=EffectKind.BURN),
    CardTemplate(name="Ice Mage", emoji="❄️", power=4, ability="Freeze", effect=EffectKind.FREEZE),
    CardTemplate(name="Shadow Thief", emoji="🕵️", power=3, ability="Steal", effect=EffectKind.STEAL),
    CardTemplate(name="Guardian Knight", emoji="🛡️", power=6, ability="Shield", effect=EffectKind.SHIELD),
    CardTemplate(name="Mind Seer", emoji="👁️", power=2, ability="Reveal Hand", effect=EffectKind.REVEAL_HAND),
    CardTemplate(name="Dice Goblin", emoji="🎲", power=1, ability="Dice Roll", effect=EffectKind.DICE_ROLL),
    CardTemplate(name="Thunder Archer", emoji="🏹", power=4, ability="Shock", effect=EffectKind.SHOCK),
    CardTemplate(name="Earth Golem", emoji="🗿", power=7, ability="Sturdy", effect=EffectKind.STURDY),
    CardTemplate(name="Wind Sprite", emoji="🌪️", power=3, ability="Gust", effect=EffectKind.GUST),
    CardTemplate(name="Water Healer", emoji="💧", power=2, ability="Heal", effect=EffectKind.HEAL),
    CardTemplate(name="Dark Assassin", emoji="🗡️", power=5, ability="Poison", effect=EffectKind.POISON),
    CardTemplate(name="Light Paladin", emoji="⚔️", power=6, ability="Protect", effect=EffectKind.PROTECT),
    CardTemplate(name="Arcane Wizard", emoji="🧙", power=4, ability="Spellcast", effect=EffectKind.SPELLCAST),
    CardTemplate(name="Beast Tamer", emoji="🐾", power=3, ability="Summon", effect=EffectKind.SUMMON),
    CardTemplate(name="Mystic Oracle", emoji="🔮", power=2, ability="Foresight", effect=EffectKind.FORESIGHT),
    CardTemplate(name="Chaos Sorcerer", emoji="🌀", power=5, ability="Chaos", effect=EffectKind.CHAOS),
    # Pure-power cards
    CardTemplate(name="Stone Brute", emoji="🪨", power=6, ability="None"),
    CardTemplate(name="Militia Spear", emoji="🔱", power=4, ability="None"),
    CardTemplate(name="Iron Boar", emoji="🐗", power=5, ability="None"),
    CardTemplate(name="Scout Hawk", emoji="🦅", power=3, ability="None"),
)


def get_card_template(name: str) -> CardTemplate | None:
    """Return the catalog entry called *name*, or ``None``."""
    for template in CARD_CATALOG:
        if template.name == name:
            return template
    return None
