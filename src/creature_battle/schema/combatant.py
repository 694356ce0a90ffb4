from typing import Optional

from pydantic import BaseModel, Field, computed_field, model_validator

from creature_battle.schema.creature_definition import CreatureDefinition
from creature_battle.schema.status_ailment import StatusAilment


class Combatant(BaseModel):
    """Live battle state of one creature - owned and mutated by the engine"""

    definition: CreatureDefinition
    maxHP: int = Field(ge=1)
    hp: int = Field(ge=0)
    ailment: Optional[StatusAilment] = None

    @model_validator(mode="after")
    def _check_hp(self) -> "Combatant":
        if self.hp > self.maxHP:
            raise ValueError(f"hp {self.hp} exceeds maxHP {self.maxHP}")
        return self

    @computed_field
    @property
    def fainted(self) -> bool:
        return self.hp == 0

    @property
    def name(self) -> str:
        return self.definition.name

    def take_damage(self, amount: int) -> int:
        """Subtract HP (floored at 0) and return the amount actually lost"""
        lost = min(self.hp, max(amount, 0))
        self.hp -= lost
        return lost

    def has_move(self, move_name: str) -> bool:
        return move_name in self.definition.moves
