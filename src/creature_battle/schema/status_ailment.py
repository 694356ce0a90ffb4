from pydantic import BaseModel, Field

from creature_battle.constants import AILMENT_DURATION, BURN_DAMAGE_PER_TURN, PARALYSIS_SKIP_CHANCE, POISON_DAMAGE_PER_TURN
from creature_battle.enums import Ailment


class StatusAilment(BaseModel):
    """An active ailment with its remaining duration and per-turn behaviour"""

    kind: Ailment
    duration: int = Field(default=AILMENT_DURATION, ge=0, le=AILMENT_DURATION)
    damagePerTurn: int = Field(default=0, ge=0)
    skipTurnChance: float = Field(default=0.0, ge=0.0, le=1.0)

    @classmethod
    def create(cls, kind: Ailment) -> "StatusAilment":
        """Fresh ailment with the fixed duration and the kind's per-turn effect"""
        if kind == Ailment.BURN:
            return cls(kind=kind, damagePerTurn=BURN_DAMAGE_PER_TURN)
        if kind == Ailment.POISON:
            return cls(kind=kind, damagePerTurn=POISON_DAMAGE_PER_TURN)
        if kind == Ailment.PARALYZE:
            return cls(kind=kind, skipTurnChance=PARALYSIS_SKIP_CHANCE)
        return cls(kind=kind, skipTurnChance=1.0)  # sleep / freeze

    def tick(self) -> bool:
        """Decrement the remaining duration; True once the ailment has worn off"""
        if self.duration > 0:
            self.duration -= 1
        return self.duration == 0
