"""Tests for the ability effect registry and each effect handler."""

import pytest

from rarity_duel.content.cards import EffectKind
from rarity_duel.content.rarity import Rarity
from rarity_duel.sim import effects
from rarity_duel.sim.core.entities import Card, Combatant
from rarity_duel.sim.core.rng import GameRNG
from rarity_duel.sim.effects import apply_effect, lookup_effect, registered_effects


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _make_combatant(name: str = "Squire", hp: int = 30) -> Combatant:
    return Combatant(name=name, rarity=Rarity.COMMON, defense=0, base_hp=30, hp=hp)


def _setup(acting_power: int = 4, opposing_power: int = 5):
    acting = Card(name="Acting", power=acting_power)
    opposing = Card(name="Opposing", power=opposing_power)
    return acting, opposing, _make_combatant("Actor"), _make_combatant("Opponent")


def _apply(kind: EffectKind, acting_power: int = 4, opposing_power: int = 5, seed: int = 0):
    acting, opposing, actor, opponent = _setup(acting_power, opposing_power)
    reveals: list[int] = []
    message = apply_effect(
        kind, acting, opposing, actor, opponent, lambda: reveals.append(1), GameRNG(seed),
    )
    return message, acting, opposing, actor, opponent, reveals


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

class TestRegistry:
    def test_every_kind_registered(self):
        assert set(registered_effects()) == set(EffectKind)

    def test_lookup_by_value_and_member_name(self):
        assert lookup_effect("RevealHand") is lookup_effect(EffectKind.REVEAL_HAND)
        assert lookup_effect("REVEAL_HAND") is lookup_effect(EffectKind.REVEAL_HAND)

    def test_lookup_unknown(self):
        assert lookup_effect("Teleport") is None
        assert lookup_effect(None) is None

    def test_lookup_has_no_side_effects(self):
        acting, opposing, actor, opponent = _setup()
        handler = lookup_effect(EffectKind.BURN)
        assert handler is not None
        assert opponent.hp == 30
        assert actor.hp == 30

    def test_unknown_effect_is_noop(self):
        acting, opposing, actor, opponent = _setup()
        assert apply_effect("Teleport", acting, opposing, actor, opponent) is None
        assert (actor.hp, opponent.hp, acting.power, opposing.power) == (30, 30, 4, 5)

    def test_none_effect_is_noop(self):
        acting, opposing, actor, opponent = _setup()
        assert apply_effect(None, acting, opposing, actor, opponent) is None

    def test_handler_exceptions_propagate(self, monkeypatch):
        def boom(*args):
            raise RuntimeError("kaboom")

        monkeypatch.setitem(effects._DISPATCH, EffectKind.HEAL, boom)
        acting, opposing, actor, opponent = _setup()
        with pytest.raises(RuntimeError):
            apply_effect(EffectKind.HEAL, acting, opposing, actor, opponent)


# ---------------------------------------------------------------------------
# Damage effects
# ---------------------------------------------------------------------------

class TestDamageEffects:
    def test_burn(self):
        message, *_, actor, opponent, _ = _apply(EffectKind.BURN)
        assert opponent.hp == 28
        assert actor.hp == 30
        assert message == "🔥 Burn effect deals 2 damage!"

    def test_poison(self):
        message, *_, opponent, _ = _apply(EffectKind.POISON)
        assert opponent.hp == 27
        assert "Poison" in message

    @pytest.mark.parametrize("seed", range(20))
    def test_dice_roll_table(self, seed):
        message, *_, opponent, _ = _apply(EffectKind.DICE_ROLL, seed=seed)
        roll = int(message.split("landed on ")[1].split()[0])
        expected = {1: 3, 2: 3, 3: 1, 4: 1, 5: 5, 6: 5}[roll]
        assert opponent.hp == 30 - expected

    @pytest.mark.parametrize("seed", range(20))
    def test_summon_range(self, seed):
        _, *_, opponent, _ = _apply(EffectKind.SUMMON, seed=seed)
        assert 26 <= opponent.hp <= 29


# ---------------------------------------------------------------------------
# Power effects
# ---------------------------------------------------------------------------

class TestPowerEffects:
    def test_freeze(self):
        _, acting, opposing, *_ = _apply(EffectKind.FREEZE, opposing_power=5)
        assert opposing.power == 3
        assert acting.power == 4

    def test_freeze_floors_at_zero(self):
        _, _, opposing, *_ = _apply(EffectKind.FREEZE, opposing_power=1)
        assert opposing.power == 0

    def test_sturdy(self):
        _, _, opposing, *_ = _apply(EffectKind.STURDY, opposing_power=1)
        assert opposing.power == 0

    def test_gust(self):
        _, _, opposing, *_ = _apply(EffectKind.GUST, opposing_power=5)
        assert opposing.power == 4

    def test_shock(self):
        _, _, opposing, *_ = _apply(EffectKind.SHOCK, opposing_power=9)
        assert opposing.power == 0

    def test_steal(self):
        _, acting, opposing, *_ = _apply(EffectKind.STEAL, acting_power=3, opposing_power=7)
        assert acting.power == 7
        assert opposing.power == 7

    def test_chaos_swaps(self):
        _, acting, opposing, *_ = _apply(EffectKind.CHAOS, acting_power=2, opposing_power=6)
        assert (acting.power, opposing.power) == (6, 2)


# ---------------------------------------------------------------------------
# Self effects
# ---------------------------------------------------------------------------

class TestSelfEffects:
    @pytest.mark.parametrize("kind", [EffectKind.SHIELD, EffectKind.PROTECT])
    def test_shields_actor(self, kind):
        _, _, _, actor, opponent, _ = _apply(kind)
        assert actor.shield
        assert not opponent.shield

    def test_heal(self):
        acting, opposing, actor, opponent = _setup()
        actor.hp = 10
        apply_effect(EffectKind.HEAL, acting, opposing, actor, opponent)
        assert actor.hp == 13

    @pytest.mark.parametrize("kind", [EffectKind.REVEAL_HAND, EffectKind.FORESIGHT])
    def test_reveal_calls_callback(self, kind):
        _, acting, opposing, actor, opponent, reveals = _apply(kind)
        assert reveals == [1]
        assert (actor.hp, opponent.hp, acting.power, opposing.power) == (30, 30, 4, 5)


# ---------------------------------------------------------------------------
# Spellcast
# ---------------------------------------------------------------------------

class TestSpellcast:
    @pytest.mark.parametrize("seed", range(30))
    def test_one_of_three_spells(self, seed):
        message, _, opposing, _, opponent, _ = _apply(EffectKind.SPELLCAST, opposing_power=5, seed=seed)
        if "Fireball" in message:
            assert (opponent.hp, opposing.power) == (27, 5)
        elif "Frost" in message:
            assert (opponent.hp, opposing.power) == (30, 3)
        else:
            assert "Lightning" in message
            assert (opponent.hp, opposing.power) == (28, 0)

    def test_all_spells_reachable(self):
        seen = set()
        for seed in range(60):
            message = _apply(EffectKind.SPELLCAST, seed=seed)[0]
            seen.add(message.split(":")[1].split()[0])
        assert seen == {"Fireball", "Frost", "Lightning"}
