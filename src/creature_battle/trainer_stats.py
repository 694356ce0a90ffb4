"""
Battle results and aggregate trainer statistics

The engine performs no I/O. When a match ends its listeners receive the final BattleState;
a persistence collaborator turns that into a BattleResult for the side it represents and
recomputes the trainer's aggregate statistics from everything it has stored.
"""

from collections import Counter
from typing import Iterable, Protocol, Sequence

from pydantic import BaseModel, Field

from creature_battle.enums import BattleOutcome, BattleStatus, Side
from creature_battle.schema.battle_state import BattleState
from creature_battle.schema.creature_definition import CreatureDefinition


class BattleResult(BaseModel):
    """A finished match from one side's point of view"""

    side: Side
    outcome: BattleOutcome
    turns: int = Field(ge=0)
    team: list[str] = Field(default_factory=list)
    defeated: list[CreatureDefinition] = Field(default_factory=list)

    @classmethod
    def from_state(cls, battle_state: BattleState, side: Side = Side.SIDE_1) -> "BattleResult":
        """Summarize a terminal battle state; raises ValueError while the match is ongoing"""
        if not battle_state.is_over():
            raise ValueError("battle is still ongoing")

        if battle_state.forfeited_by is not None:
            outcome = BattleOutcome.FLED if battle_state.forfeited_by == side else BattleOutcome.DRAW
        elif battle_state.status == BattleStatus.DRAW:
            outcome = BattleOutcome.DRAW
        elif battle_state.winner() == side:
            outcome = BattleOutcome.WON
        else:
            outcome = BattleOutcome.LOST

        own = battle_state.roster(side)
        foe = battle_state.roster(side.opponent)
        return cls(
            side=side,
            outcome=outcome,
            turns=battle_state.turn_count,
            team=[c.name for c in own.combatants],
            defeated=[c.definition for c in foe.combatants if c.fainted],
        )


class BattleOutcomeStore(Protocol):
    """Persistence collaborator notified once per finished match"""

    def record(self, result: BattleResult) -> None: ...


class TrainerStats(BaseModel):
    totalCreaturesCaught: int = 0
    uniqueCreatureTypes: int = 0
    highestLevelCreature: int = 0
    favoriteCreatureType: str = ""
    winRate: float = Field(default=0.0, ge=0.0, le=1.0)


def calculate_trainer_stats(creatures: Sequence[CreatureDefinition], results: Iterable[BattleResult] = ()) -> TrainerStats:
    """
    Aggregate statistics over a trainer's captured creatures and battle history.

    The favorite type is the most common type tag, ties going to the type seen first.
    Win rate is wins over recorded battles (0 with no battles).
    """
    results = list(results)
    wins = sum(1 for r in results if r.outcome == BattleOutcome.WON)
    win_rate = wins / len(results) if results else 0.0

    if not creatures:
        return TrainerStats(winRate=win_rate)

    all_types = [t.value for c in creatures for t in c.types]
    # Counter preserves first-seen order, so most_common breaks ties by first appearance
    type_counts = Counter(all_types)

    return TrainerStats(
        totalCreaturesCaught=len(creatures),
        uniqueCreatureTypes=len(type_counts),
        highestLevelCreature=max(c.level for c in creatures),
        favoriteCreatureType=type_counts.most_common(1)[0][0],
        winRate=win_rate,
    )
