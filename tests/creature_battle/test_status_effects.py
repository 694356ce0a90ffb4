import pytest

from creature_battle.enums import Ailment, Type
from creature_battle.schema import StatusAilment
from creature_battle.status_effects import STATUS_IMMUNITIES, is_immune_to, roll_status
from creature_battle.utils.creature_factory import create_combatant


@pytest.mark.parametrize(
    "move_type, ailment, chance",
    [
        (Type.FIRE, Ailment.BURN, 0.30),
        (Type.POISON, Ailment.POISON, 0.40),
        (Type.ELECTRIC, Ailment.PARALYZE, 0.30),
        (Type.PSYCHIC, Ailment.SLEEP, 0.25),
        (Type.ICE, Ailment.FREEZE, 0.20),
    ],
)
def test_inflicts_below_chance_only(move_type, ailment, chance, creature, scripted):
    defender = create_combatant(creature(types=["normal"]))

    hit = roll_status(move_type, defender, scripted(draws=[chance - 0.01]))
    assert hit is not None
    assert hit.kind == ailment
    assert hit.duration == 3

    assert roll_status(move_type, defender, scripted(draws=[chance])) is None


def test_fixed_per_turn_behaviour():
    assert StatusAilment.create(Ailment.BURN).damagePerTurn == 10
    assert StatusAilment.create(Ailment.POISON).damagePerTurn == 8
    assert StatusAilment.create(Ailment.PARALYZE).skipTurnChance == 0.25
    assert StatusAilment.create(Ailment.SLEEP).damagePerTurn == 0


def test_non_status_types_never_roll(creature, scripted):
    defender = create_combatant(creature())
    rng = scripted(draws=[0.0])
    for move_type in (Type.NORMAL, Type.WATER, Type.GRASS, Type.DRAGON):
        assert roll_status(move_type, defender, rng) is None
    assert rng.calls == 0


def test_ground_is_immune_to_paralysis_regardless_of_draw(creature, scripted):
    defender = create_combatant(creature(types=["ground"]))
    rng = scripted(draws=[0.0, 0.0, 0.0])
    for _ in range(3):
        assert roll_status(Type.ELECTRIC, defender, rng) is None
    # Immune defenders skip the roll entirely
    assert rng.calls == 0


@pytest.mark.parametrize("ailment, immune_types", list(STATUS_IMMUNITIES.items()))
def test_type_immunities(ailment, immune_types):
    for t in immune_types:
        assert is_immune_to(ailment, [Type.NORMAL, t])
    assert not is_immune_to(ailment, [Type.NORMAL])


def test_already_afflicted_defender_gets_nothing(creature, scripted):
    defender = create_combatant(creature())
    defender.ailment = StatusAilment.create(Ailment.POISON)
    rng = scripted(draws=[0.0])

    assert roll_status(Type.FIRE, defender, rng) is None
    assert rng.calls == 0
    assert defender.ailment.kind == Ailment.POISON


def test_fainted_defender_gets_nothing(creature, scripted):
    defender = create_combatant(creature())
    defender.hp = 0
    assert roll_status(Type.FIRE, defender, scripted(draws=[0.0])) is None


def test_ailment_tick_counts_down_to_zero():
    ailment = StatusAilment.create(Ailment.SLEEP)
    assert ailment.tick() is False
    assert ailment.tick() is False
    assert ailment.tick() is True
    assert ailment.duration == 0
