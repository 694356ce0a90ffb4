"""
Type effectiveness chart

Defensive chart for the 18-type set: for each defending type, the attacking types it is
weak to, resists, and is immune to. Dual-type defenders compound both entries, so a
multiplier is always one of 0, 0.25, 0.5, 1, 2 or 4.
"""

from typing import Dict, FrozenSet, Iterable, NamedTuple

from creature_battle.constants import (
    MSG_NO_EFFECT,
    MSG_NOT_VERY_EFFECTIVE,
    MSG_SUPER_EFFECTIVE,
    TYPE_MUL_NO_EFFECT,
    TYPE_MUL_NORMAL,
    TYPE_MUL_NOT_EFFECTIVE,
    TYPE_MUL_SUPER_EFFECTIVE,
)
from creature_battle.enums.type import Type


class TypeMatchup(NamedTuple):
    """Attacking types a defending type is weak to, resists, or ignores entirely"""

    weak: FrozenSet[Type]
    resistant: FrozenSet[Type]
    immune: FrozenSet[Type]


def _matchup(weak: Iterable[Type], resistant: Iterable[Type], immune: Iterable[Type] = ()) -> TypeMatchup:
    return TypeMatchup(frozenset(weak), frozenset(resistant), frozenset(immune))


T = Type

DEFENSIVE_CHART: Dict[Type, TypeMatchup] = {
    T.NORMAL: _matchup(weak=[T.FIGHTING], resistant=[T.GHOST]),
    T.FIRE: _matchup(
        weak=[T.WATER, T.GROUND, T.ROCK],
        resistant=[T.FIRE, T.GRASS, T.ICE, T.BUG, T.STEEL, T.FAIRY],
    ),
    T.WATER: _matchup(weak=[T.ELECTRIC, T.GRASS], resistant=[T.FIRE, T.WATER, T.ICE, T.STEEL]),
    T.ELECTRIC: _matchup(weak=[T.GROUND], resistant=[T.ELECTRIC, T.FLYING, T.STEEL]),
    T.GRASS: _matchup(
        weak=[T.FIRE, T.ICE, T.POISON, T.FLYING, T.BUG],
        resistant=[T.WATER, T.ELECTRIC, T.GRASS, T.GROUND],
    ),
    T.ICE: _matchup(weak=[T.FIRE, T.FIGHTING, T.ROCK, T.STEEL], resistant=[T.ICE]),
    T.FIGHTING: _matchup(weak=[T.FLYING, T.PSYCHIC, T.FAIRY], resistant=[T.BUG, T.ROCK, T.DARK]),
    T.POISON: _matchup(weak=[T.GROUND, T.PSYCHIC], resistant=[T.GRASS, T.FIGHTING, T.POISON, T.BUG, T.FAIRY]),
    T.GROUND: _matchup(weak=[T.WATER, T.GRASS, T.ICE], resistant=[T.POISON, T.ROCK], immune=[T.ELECTRIC]),
    T.FLYING: _matchup(weak=[T.ELECTRIC, T.ICE, T.ROCK], resistant=[T.GRASS, T.FIGHTING, T.BUG], immune=[T.GROUND]),
    T.PSYCHIC: _matchup(weak=[T.BUG, T.GHOST, T.DARK], resistant=[T.FIGHTING, T.PSYCHIC]),
    T.BUG: _matchup(weak=[T.FIRE, T.FLYING, T.ROCK], resistant=[T.GRASS, T.FIGHTING, T.GROUND]),
    T.ROCK: _matchup(
        weak=[T.WATER, T.GRASS, T.FIGHTING, T.GROUND, T.STEEL],
        resistant=[T.NORMAL, T.FIRE, T.POISON, T.FLYING],
    ),
    T.GHOST: _matchup(weak=[T.GHOST, T.DARK], resistant=[T.POISON, T.BUG], immune=[T.NORMAL, T.FIGHTING]),
    T.DRAGON: _matchup(weak=[T.ICE, T.DRAGON, T.FAIRY], resistant=[T.FIRE, T.WATER, T.ELECTRIC, T.GRASS]),
    T.DARK: _matchup(weak=[T.FIGHTING, T.BUG, T.FAIRY], resistant=[T.GHOST, T.DARK], immune=[T.PSYCHIC]),
    T.STEEL: _matchup(
        weak=[T.FIRE, T.FIGHTING, T.GROUND],
        resistant=[T.NORMAL, T.GRASS, T.ICE, T.FLYING, T.PSYCHIC, T.BUG, T.ROCK, T.DRAGON, T.STEEL, T.FAIRY],
        immune=[T.POISON],
    ),
    T.FAIRY: _matchup(weak=[T.POISON, T.STEEL], resistant=[T.FIGHTING, T.BUG, T.DARK], immune=[T.DRAGON]),
}

del T


class TypeEffectiveness:
    """Type effectiveness lookups over DEFENSIVE_CHART"""

    @staticmethod
    def get_effectiveness(attacking_type: Type, defending_type: Type) -> float:
        """Single-type multiplier: 0, 0.5, 1 or 2"""
        matchup = DEFENSIVE_CHART[defending_type]
        if attacking_type in matchup.immune:
            return TYPE_MUL_NO_EFFECT
        if attacking_type in matchup.weak:
            return TYPE_MUL_SUPER_EFFECTIVE
        if attacking_type in matchup.resistant:
            return TYPE_MUL_NOT_EFFECTIVE
        return TYPE_MUL_NORMAL

    @staticmethod
    def effectiveness(attacking_type: Type, defending_types: Iterable[Type]) -> float:
        """
        Combined multiplier against a 1-2 type defender.

        Immunity on any defending type short-circuits to 0 regardless of the other
        type's entry; otherwise the per-type multipliers compound.
        """
        multiplier = TYPE_MUL_NORMAL
        for defending_type in defending_types:
            single = TypeEffectiveness.get_effectiveness(attacking_type, defending_type)
            if single == TYPE_MUL_NO_EFFECT:
                return TYPE_MUL_NO_EFFECT
            multiplier *= single
        return multiplier

    @staticmethod
    def is_immune(attacking_type: Type, defending_types: Iterable[Type]) -> bool:
        return TypeEffectiveness.effectiveness(attacking_type, defending_types) == TYPE_MUL_NO_EFFECT

    @staticmethod
    def is_super_effective(attacking_type: Type, defending_types: Iterable[Type]) -> bool:
        return TypeEffectiveness.effectiveness(attacking_type, defending_types) > TYPE_MUL_NORMAL

    @staticmethod
    def is_not_very_effective(attacking_type: Type, defending_types: Iterable[Type]) -> bool:
        multiplier = TypeEffectiveness.effectiveness(attacking_type, defending_types)
        return TYPE_MUL_NO_EFFECT < multiplier < TYPE_MUL_NORMAL

    @staticmethod
    def describe(multiplier: float) -> str:
        """Battle-log qualifier for a multiplier ("" for neutral hits)"""
        if multiplier == TYPE_MUL_NO_EFFECT:
            return MSG_NO_EFFECT
        elif multiplier < TYPE_MUL_NORMAL:
            return MSG_NOT_VERY_EFFECTIVE
        elif multiplier > TYPE_MUL_NORMAL:
            return MSG_SUPER_EFFECTIVE
        else:
            return ""
