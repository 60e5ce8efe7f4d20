"""Character catalog -- the archetypes offered at character selection."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .cards import EffectKind
from .rarity import Rarity


class CharacterTemplate(BaseModel):
    """Immutable catalog entry for a character."""

    model_config = {"frozen": True}

    name: str = Field(min_length=1)
    base_hp: int = Field(gt=0)
    rarity: Rarity
    signature: EffectKind | None = None
    """Effect periodically substituted into this character's generated deck."""


CHARACTER_CATALOG: tuple[CharacterTemplate, ...] = (
    CharacterTemplate(name="Squire", base_hp=30, rarity=Rarity.COMMON, signature=EffectKind.PROTECT),
    CharacterTemplate(name="Rogue", base_hp=28, rarity=Rarity.UNCOMMON, signature=EffectKind.STEAL),
    CharacterTemplate(name="Mage", base_hp=25, rarity=Rarity.RARE, signature=EffectKind.SPELLCAST),
    CharacterTemplate(name="Knight", base_hp=35, rarity=Rarity.EPIC, signature=EffectKind.SHIELD),
    CharacterTemplate(name="Dragon Lord", base_hp=40, rarity=Rarity.LEGENDARY, signature=EffectKind.BURN),
    CharacterTemplate(name="Phoenix Rider", base_hp=38, rarity=Rarity.MYTHIC, signature=EffectKind.HEAL),
    CharacterTemplate(name="Celestial Guardian", base_hp=45, rarity=Rarity.DIVINE, signature=EffectKind.PROTECT),
    CharacterTemplate(name="Forest Druid", base_hp=32, rarity=Rarity.COMMON, signature=EffectKind.HEAL),
    CharacterTemplate(name="Berserker", base_hp=33, rarity=Rarity.UNCOMMON, signature=EffectKind.DICE_ROLL),
    CharacterTemplate(name="Necromancer", base_hp=27, rarity=Rarity.RARE, signature=EffectKind.SUMMON),
    CharacterTemplate(name="Paladin", base_hp=36, rarity=Rarity.EPIC, signature=EffectKind.PROTECT),
    CharacterTemplate(name="Warlock", base_hp=29, rarity=Rarity.LEGENDARY, signature=EffectKind.CHAOS),
    CharacterTemplate(name="Valkyrie", base_hp=37, rarity=Rarity.MYTHIC, signature=EffectKind.SHOCK),
    CharacterTemplate(name="Titan", base_hp=42, rarity=Rarity.DIVINE, signature=EffectKind.STURDY),
    CharacterTemplate(name="Monk", base_hp=31, rarity=Rarity.COMMON, signature=EffectKind.FORESIGHT),
    CharacterTemplate(name="Assassin", base_hp=26, rarity=Rarity.UNCOMMON, signature=EffectKind.POISON),
)

# Fixed opponents for the guided tutorial battle.
TUTORIAL_PLAYER = CharacterTemplate(name="Apprentice", base_hp=30, rarity=Rarity.COMMON)
TUTORIAL_ENEMY = CharacterTemplate(name="Training Dummy", base_hp=20, rarity=Rarity.COMMON)


def get_character_template(name: str) -> CharacterTemplate | None:
    """Return the catalog entry called *name*, or ``None``."""
    for template in CHARACTER_CATALOG:
        if template.name == name:
            return template
    return None
