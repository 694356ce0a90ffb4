from typing import Optional

from pydantic import BaseModel, Field

from creature_battle.enums import Ailment, BattleStatus, Side
from creature_battle.schema.combatant import Combatant
from creature_battle.schema.roster import Roster


class BattleState(BaseModel):
    """
    Complete state of one match - pure data, no presentation flags.

    Created by BattleEngine.start_battle and mutated only by the engine. `events` holds the
    lines produced by the latest transition; `log` is those lines joined for display.
    """

    sides: list[Roster] = Field(min_length=2, max_length=2)
    turn: Side = Side.SIDE_1
    status: BattleStatus = BattleStatus.ONGOING

    # Event log
    log: str = ""
    events: list[str] = Field(default_factory=list)
    battle_log: list[str] = Field(default_factory=list)

    turn_count: int = Field(default=0, ge=0)

    # Single per-turn immobility decision made by the start-of-turn status tick
    skip_pending: Optional[Ailment] = None

    forfeited_by: Optional[Side] = None

    def roster(self, side: Side) -> Roster:
        return self.sides[side]

    def active(self, side: Side) -> Combatant:
        return self.sides[side].active

    def is_over(self) -> bool:
        return self.status.is_terminal()

    def winner(self) -> Optional[Side]:
        """Winning side, or None while ongoing or on a draw"""
        if self.status == BattleStatus.SIDE1_WON:
            return Side.SIDE_1
        if self.status == BattleStatus.SIDE2_WON:
            return Side.SIDE_2
        return None
