from enum import Enum, IntEnum


class MoveCategory(str, Enum):
    """Selects which attack/defense stat pair a move uses"""

    PHYSICAL = "physical"
    SPECIAL = "special"


class Side(IntEnum):
    """The two battle sides - side 1 is the initiating player and always acts first"""

    SIDE_1 = 0
    SIDE_2 = 1

    @property
    def opponent(self) -> "Side":
        return Side.SIDE_2 if self == Side.SIDE_1 else Side.SIDE_1

    @property
    def label(self) -> str:
        return f"side {self.value + 1}"


class BattleStatus(str, Enum):
    """Match status - everything except ONGOING is terminal and absorbing"""

    ONGOING = "ongoing"
    SIDE1_WON = "side1Won"
    SIDE2_WON = "side2Won"
    DRAW = "draw"

    def is_terminal(self) -> bool:
        return self != BattleStatus.ONGOING

    @classmethod
    def won_by(cls, side: Side) -> "BattleStatus":
        return cls.SIDE1_WON if side == Side.SIDE_1 else cls.SIDE2_WON


class BattleOutcome(str, Enum):
    """A finished match as seen from one side"""

    WON = "won"
    LOST = "lost"
    FLED = "fled"
    DRAW = "draw"
