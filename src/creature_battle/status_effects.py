"""
Status ailment rules

Five attacking types can inflict an ailment on the defender:

    fire -> burn (30%), poison -> poison (40%), electric -> paralyze (30%),
    psychic -> sleep (25%), ice -> freeze (20%)

No roll is made at all - not even a "resisted" message - when the defender already carries
an ailment or one of its types is immune to the ailment.
"""

import logging
from typing import Dict, FrozenSet, Iterable, NamedTuple, Optional

from creature_battle.enums import Ailment, Type
from creature_battle.schema.combatant import Combatant
from creature_battle.schema.status_ailment import StatusAilment
from creature_battle.utils.rng import RandomSource

logger = logging.getLogger(__name__)


class StatusInfliction(NamedTuple):
    ailment: Ailment
    chance: float


MOVE_STATUS_EFFECTS: Dict[Type, StatusInfliction] = {
    Type.FIRE: StatusInfliction(Ailment.BURN, 0.30),
    Type.POISON: StatusInfliction(Ailment.POISON, 0.40),
    Type.ELECTRIC: StatusInfliction(Ailment.PARALYZE, 0.30),
    Type.PSYCHIC: StatusInfliction(Ailment.SLEEP, 0.25),
    Type.ICE: StatusInfliction(Ailment.FREEZE, 0.20),
}

STATUS_IMMUNITIES: Dict[Ailment, FrozenSet[Type]] = {
    Ailment.BURN: frozenset({Type.FIRE, Type.WATER}),
    Ailment.POISON: frozenset({Type.POISON, Type.STEEL}),
    Ailment.PARALYZE: frozenset({Type.ELECTRIC, Type.GROUND}),
    Ailment.FREEZE: frozenset({Type.ICE, Type.FIRE}),
    Ailment.SLEEP: frozenset({Type.PSYCHIC, Type.DARK}),
}


def is_immune_to(ailment: Ailment, defender_types: Iterable[Type]) -> bool:
    """True if any of the defender's types is on the ailment's immunity list"""
    return not STATUS_IMMUNITIES[ailment].isdisjoint(defender_types)


def can_apply_status(defender: Combatant, ailment: Ailment) -> bool:
    """A defender accepts a new ailment only when it has none and is not type-immune.

    Fainted combatants never receive one.
    """
    if defender.fainted:
        return False
    if defender.ailment is not None:
        return False
    return not is_immune_to(ailment, defender.definition.types)


def roll_status(move_type: Type, defender: Combatant, rng: RandomSource) -> Optional[StatusAilment]:
    """
    Roll for a status ailment from a move of `move_type` against `defender`.

    Consumes exactly one draw, and only when an ailment is actually possible.
    """
    infliction = MOVE_STATUS_EFFECTS.get(move_type)
    if infliction is None:
        return None
    if not can_apply_status(defender, infliction.ailment):
        return None

    if rng.random() < infliction.chance:
        logger.debug("%s inflicted %s on %s", move_type.value, infliction.ailment.value, defender.name)
        return StatusAilment.create(infliction.ailment)
    return None
