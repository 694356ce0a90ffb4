from typing import Optional, Sequence

import pytest

from creature_battle.schema import BaseStats, CreatureDefinition


class ScriptedRandom:
    """Random source with forced outcomes.

    random() returns the scripted draws in order, then `default` (0.99: no crit, no status,
    no paralysis skip). uniform() always returns `variance`; choice() picks `choice_index`.
    """

    def __init__(self, draws: Sequence[float] = (), default: float = 0.99, variance: float = 1.0, choice_index: int = 0):
        self.draws = list(draws)
        self.default = default
        self.variance = variance
        self.choice_index = choice_index
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.draws.pop(0) if self.draws else self.default

    def uniform(self, a: float, b: float) -> float:
        return self.variance

    def choice(self, seq):
        return seq[self.choice_index]


def make_creature(
    name: str = "Testmon",
    types: Sequence[str] = ("normal",),
    hp: int = 50,
    attack: int = 50,
    defense: int = 50,
    special_attack: int = 50,
    special_defense: int = 50,
    speed: int = 50,
    level: int = 30,
    moves: Optional[Sequence[str]] = None,
) -> CreatureDefinition:
    return CreatureDefinition(
        name=name,
        types=list(types),
        level=level,
        baseStats=BaseStats(
            hp=hp,
            attack=attack,
            defense=defense,
            specialAttack=special_attack,
            specialDefense=special_defense,
            speed=speed,
        ),
        abilities=["Sturdy"],
        moves=list(moves or ["Tackle", "Slam", "Bash", "Rush"]),
        colorScheme=["#ffffff"],
        height="1m",
        weight="10kg",
    )


@pytest.fixture
def rng():
    return ScriptedRandom()


@pytest.fixture
def creature():
    """Factory fixture: creature(name=..., types=(...), attack=..., ...)"""
    return make_creature


@pytest.fixture
def scripted():
    """Factory fixture: scripted(draws=[...], variance=..., choice_index=...)"""
    return ScriptedRandom
