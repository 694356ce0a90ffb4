from typing import Optional

from pydantic import BaseModel, Field, model_validator

from creature_battle.constants import MIN_ROSTER_SIZE, ROSTER_SIZE
from creature_battle.schema.combatant import Combatant


class Roster(BaseModel):
    """One side's ordered combatants with a single active member"""

    trainer: str
    combatants: list[Combatant] = Field(min_length=MIN_ROSTER_SIZE, max_length=ROSTER_SIZE)
    active_index: int = Field(default=0, ge=0, lt=ROSTER_SIZE)

    @model_validator(mode="after")
    def _check_active_index(self) -> "Roster":
        if self.active_index >= len(self.combatants):
            raise ValueError(f"active_index {self.active_index} out of range for {len(self.combatants)} combatants")
        return self

    @property
    def active(self) -> Combatant:
        return self.combatants[self.active_index]

    def is_wiped(self) -> bool:
        """True once every member has fainted - the owning side has lost"""
        return all(c.fainted for c in self.combatants)

    def first_available_index(self) -> Optional[int]:
        """Index of the first non-fainted member, or None if the roster is wiped"""
        return next((i for i, c in enumerate(self.combatants) if not c.fainted), None)

    def can_switch_to(self, index: int) -> bool:
        return 0 <= index < len(self.combatants) and index != self.active_index and not self.combatants[index].fainted
