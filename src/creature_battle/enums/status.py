from enum import Enum


class Ailment(str, Enum):
    """Non-volatile status ailments - at most one may be active on a combatant"""

    BURN = "burn"
    POISON = "poison"
    PARALYZE = "paralyze"
    SLEEP = "sleep"
    FREEZE = "freeze"

    # =========================================================================
    # BEHAVIOUR CHECKS
    # =========================================================================

    def deals_damage(self) -> bool:
        """Burn and poison chip a fixed amount of HP at the start of each turn"""
        return self in (Ailment.BURN, Ailment.POISON)

    def always_skips(self) -> bool:
        """Sleep and freeze immobilize the combatant every turn"""
        return self in (Ailment.SLEEP, Ailment.FREEZE)

    def may_skip(self) -> bool:
        """Paralysis skips the turn only on a successful roll"""
        return self == Ailment.PARALYZE

    # =========================================================================
    # MESSAGES
    # =========================================================================

    @property
    def condition(self) -> str:
        """Adjective used by the start-of-turn tick: "<name> is asleep!" """
        return _CONDITIONS[self]

    @property
    def noun(self) -> str:
        return _NOUNS[self]

    @property
    def inflicted_verb(self) -> str:
        """Past-tense phrase used when the ailment lands: "<name> was burned!" """
        return _INFLICTED_VERBS[self]

    @property
    def immobilized_verb(self) -> str:
        """Progressive form used when the ailment costs a turn: "<name> is sleeping!" """
        return _IMMOBILIZED_VERBS[self]


_INFLICTED_VERBS = {
    Ailment.BURN: "burned",
    Ailment.POISON: "poisoned",
    Ailment.PARALYZE: "paralyzed",
    Ailment.SLEEP: "put to sleep",
    Ailment.FREEZE: "frozen",
}

_IMMOBILIZED_VERBS = {
    Ailment.BURN: "burning",
    Ailment.POISON: "poisoned",
    Ailment.PARALYZE: "paralyzed and can't move",
    Ailment.SLEEP: "sleeping",
    Ailment.FREEZE: "freezing",
}

_CONDITIONS = {
    Ailment.BURN: "burned",
    Ailment.POISON: "poisoned",
    Ailment.PARALYZE: "paralyzed",
    Ailment.SLEEP: "asleep",
    Ailment.FREEZE: "frozen",
}

_NOUNS = {
    Ailment.BURN: "its burn",
    Ailment.POISON: "poisoning",
    Ailment.PARALYZE: "paralysis",
    Ailment.SLEEP: "sleep",
    Ailment.FREEZE: "the freeze",
}
