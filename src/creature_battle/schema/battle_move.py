from pydantic import BaseModel, Field

from creature_battle.constants import DEFAULT_MOVE_ACCURACY, DEFAULT_MOVE_POWER
from creature_battle.enums import MoveCategory, Type


class BattleMove(BaseModel):
    """A resolved move - base moves derive their type from the user's primary type"""

    name: str
    power: int = Field(default=DEFAULT_MOVE_POWER, ge=0, le=255)
    accuracy: int = Field(default=DEFAULT_MOVE_ACCURACY, ge=0, le=100)  # percentage
    type: Type
    category: MoveCategory = MoveCategory.PHYSICAL
