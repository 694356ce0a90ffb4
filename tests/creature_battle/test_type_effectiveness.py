import itertools

import pytest

from creature_battle.enums import Type
from creature_battle.type_effectiveness import DEFENSIVE_CHART, TypeEffectiveness

ALLOWED_MULTIPLIERS = {0, 0.25, 0.5, 1, 2, 4}


def test_chart_covers_all_18_types():
    assert set(DEFENSIVE_CHART) == set(Type)
    assert len(DEFENSIVE_CHART) == 18


def test_multiplier_always_in_allowed_set():
    for attack, t1, t2 in itertools.product(Type, Type, Type):
        assert TypeEffectiveness.effectiveness(attack, [t1]) in ALLOWED_MULTIPLIERS
        assert TypeEffectiveness.effectiveness(attack, [t1, t2]) in ALLOWED_MULTIPLIERS


def test_immunity_dominates_other_type():
    for defending_type, matchup in DEFENSIVE_CHART.items():
        for attack in matchup.immune:
            for other in Type:
                assert TypeEffectiveness.effectiveness(attack, [defending_type, other]) == 0
                assert TypeEffectiveness.effectiveness(attack, [other, defending_type]) == 0


@pytest.mark.parametrize(
    "attack, defenders, expected",
    [
        (Type.FIRE, [Type.GRASS], 2),
        (Type.WATER, [Type.FIRE], 2),
        (Type.FIRE, [Type.WATER], 0.5),
        (Type.NORMAL, [Type.GHOST], 0),
        (Type.FIGHTING, [Type.GHOST], 0),
        (Type.ELECTRIC, [Type.GROUND], 0),
        (Type.GROUND, [Type.FLYING], 0),
        (Type.PSYCHIC, [Type.DARK], 0),
        (Type.POISON, [Type.STEEL], 0),
        (Type.DRAGON, [Type.FAIRY], 0),
        (Type.GRASS, [Type.WATER, Type.GROUND], 4),
        (Type.FIRE, [Type.WATER, Type.ROCK], 0.25),
        (Type.ICE, [Type.FIRE, Type.GRASS], 1),
        (Type.ELECTRIC, [Type.GROUND, Type.FLYING], 0),
        (Type.NORMAL, [Type.NORMAL], 1),
    ],
)
def test_known_matchups(attack, defenders, expected):
    assert TypeEffectiveness.effectiveness(attack, defenders) == expected


def test_chart_is_asymmetric():
    # Normal resists ghost, ghost is immune to normal
    assert TypeEffectiveness.effectiveness(Type.GHOST, [Type.NORMAL]) == 0.5
    assert TypeEffectiveness.effectiveness(Type.NORMAL, [Type.GHOST]) == 0


def test_predicates_and_descriptions():
    assert TypeEffectiveness.is_immune(Type.ELECTRIC, [Type.GROUND])
    assert TypeEffectiveness.is_super_effective(Type.FIRE, [Type.GRASS])
    assert TypeEffectiveness.is_not_very_effective(Type.FIRE, [Type.WATER])
    assert not TypeEffectiveness.is_not_very_effective(Type.NORMAL, [Type.GHOST])

    assert TypeEffectiveness.describe(0) == "It had no effect..."
    assert TypeEffectiveness.describe(0.25) == "It's not very effective..."
    assert TypeEffectiveness.describe(4) == "It's super effective!"
    assert TypeEffectiveness.describe(1) == ""


def test_type_parse_is_case_insensitive():
    assert Type.parse("Fire") is Type.FIRE
    assert Type.parse(" WATER ") is Type.WATER
    with pytest.raises(ValueError):
        Type.parse("light")
