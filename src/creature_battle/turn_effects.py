"""
Start-of-turn status tick

Runs once for the side about to act, before it may submit an action. This is the only
place immobility is rolled: the decision is stored on the state and consumed by that
side's next move or swap, so a paralyzed combatant is never rolled twice in one turn.
"""

import logging
from typing import Optional

from pydantic import BaseModel, Field

from creature_battle.enums import Ailment, Side
from creature_battle.schema.battle_state import BattleState
from creature_battle.utils.rng import RandomSource

logger = logging.getLogger(__name__)


class TickResult(BaseModel):
    """What the status tick did to the about-to-act combatant"""

    messages: list[str] = Field(default_factory=list)
    damage: int = 0
    skip: Optional[Ailment] = None
    recovered: bool = False
    fainted: bool = False


class StatusTickProcessor:
    """
    Applies the active combatant's ailment at the start of its side's turn:

    - burn / poison: fixed damage, may faint the combatant
    - paralyze: one skip roll at the ailment's skip chance
    - sleep / freeze: the turn is always skipped

    The duration is decremented afterwards; at 0 the ailment clears with a recovery message.
    """

    def __init__(self, battle_state: BattleState, rng: RandomSource):
        self.battle_state = battle_state
        self.rng = rng

    def process(self, side: Side) -> TickResult:
        combatant = self.battle_state.active(side)
        ailment = combatant.ailment
        result = TickResult()
        if ailment is None or combatant.fainted:
            return result

        message = f"{combatant.name} is {ailment.kind.condition}!"

        if ailment.kind.deals_damage():
            result.damage = combatant.take_damage(ailment.damagePerTurn)
            message += f" It took {result.damage} damage!"
        elif ailment.kind.always_skips():
            result.skip = ailment.kind
            message += " It's immobilized!"
        elif ailment.kind.may_skip():
            if self.rng.random() < ailment.skipTurnChance:
                result.skip = ailment.kind
                message += " It couldn't move!"

        if ailment.tick():
            combatant.ailment = None
            result.recovered = True
            message += f" {combatant.name} recovered from {ailment.kind.noun}!"

        if combatant.fainted:
            combatant.ailment = None
            result.fainted = True
            result.skip = None

        result.messages.append(message)
        logger.debug("Status tick on %s (%s): %s", combatant.name, side.label, message)
        return result
