from typing import Protocol

from creature_battle.enums import Side
from creature_battle.schema.battle_state import BattleState
from creature_battle.utils.rng import RandomSource


class OpponentPolicy(Protocol):
    """Chooses the move name for a side the engine drives automatically"""

    def choose_move(self, battle_state: BattleState, side: Side, rng: RandomSource) -> str: ...


class RandomMovePolicy:
    """Wild-opponent behaviour: a uniformly random move from the active creature's four"""

    def choose_move(self, battle_state: BattleState, side: Side, rng: RandomSource) -> str:
        return rng.choice(battle_state.active(side).definition.moves)
