import logging
from enum import IntEnum
from typing import Callable, Iterable, Optional

from pydantic import BaseModel, Field

from creature_battle.ai import OpponentPolicy
from creature_battle.config import BattleRules
from creature_battle.constants import MSG_CRITICAL_HIT, MSG_FLED, MSG_MISSED, TYPE_MUL_NO_EFFECT
from creature_battle.damage_calculator import DamageCalculator
from creature_battle.enums import BattleStatus, Side
from creature_battle.errors import InvalidActionError
from creature_battle.schema.battle_state import BattleState
from creature_battle.status_effects import roll_status
from creature_battle.turn_effects import StatusTickProcessor
from creature_battle.type_effectiveness import TypeEffectiveness
from creature_battle.utils.creature_factory import CreatureInput, build_move, build_roster
from creature_battle.utils.rng import LcgRandom, RandomSource

logger = logging.getLogger(__name__)

BattleListener = Callable[[BattleState], None]


class UserBattleAction(BaseModel):
    """User input for battle actions"""

    class ActionType(IntEnum):
        USE_MOVE = 0
        SWITCH_CREATURE = 1

    action_type: ActionType
    side: Side = Field(description="Which side is taking this action")

    # For USE_MOVE
    move_name: Optional[str] = Field(None, description="One of the active creature's four moves")

    # For SWITCH_CREATURE
    bench_index: Optional[int] = Field(None, ge=0, le=5, description="Roster index to switch to")


class BattleEngine:
    """
    Turn resolution state machine for one match

    Coordinates between:
    - User input (submit_move / submit_swap / forfeit, or UserBattleAction)
    - Battle state (BattleState, mutated only here)
    - Damage and status rules (DamageCalculator, roll_status)
    - The start-of-turn status tick (StatusTickProcessor)

    Every action call resolves synchronously:
    1. Validate - an InvalidActionError leaves the state untouched
    2. Apply the move or swap, or convert it to a pass if the tick immobilized the actor
    3. Handle faints: auto-replace with the first standing roster member, or end the match
    4. Hand the turn over and run the next side's status tick
    5. In single-opponent mode, play the opponent's turn automatically and hand back

    Once the status leaves ONGOING the match is closed and every listener is called once
    with the final state.
    """

    def __init__(
        self,
        rules: Optional[BattleRules] = None,
        rng: Optional[RandomSource] = None,
        opponent_policy: Optional[OpponentPolicy] = None,
    ):
        self.rules = rules or BattleRules()
        self.rng: RandomSource = rng if rng is not None else LcgRandom()
        self.opponent_policy = opponent_policy
        self.damage_calculator = DamageCalculator(self.rng, self.rules)

        self.battle_state: Optional[BattleState] = None
        self._listeners: list[BattleListener] = []
        self._notified = False

    @property
    def single_opponent(self) -> bool:
        """True when side 2 is driven by the built-in policy rather than a second caller"""
        return self.opponent_policy is not None

    def add_listener(self, listener: BattleListener) -> None:
        """Register a callable to receive the terminal BattleState (e.g. a persistence hook)"""
        self._listeners.append(listener)

    # =================================================================
    # ACTIONS
    # =================================================================

    def start_battle(self, roster1: Iterable[CreatureInput], roster2: Iterable[CreatureInput]) -> BattleState:
        """
        Start a match between two rosters of 1-6 creatures.

        Raises MalformedCreatureError before any state is created if a creature definition
        breaks an invariant. Side 1 acts first; both actives are roster index 0.
        """
        name1, name2 = self.rules.side_names
        sides = [build_roster(name1, roster1), build_roster(name2, roster2)]

        self.battle_state = BattleState(sides=sides)
        self._notified = False

        self._begin_transition()
        opener = self.battle_state.active(Side.SIDE_2)
        if self.single_opponent:
            self._emit(f"A wild {opener.name} appeared!")
        else:
            self._emit(f"{name2} sends out {opener.name}!")
        self._emit(f"{name1} sends out {self.battle_state.active(Side.SIDE_1).name}!")
        self._complete_transition()

        logger.info("Battle started: %s (%d) vs %s (%d)", name1, len(sides[0].combatants), name2, len(sides[1].combatants))
        return self.battle_state

    def submit_move(self, side: Side | int, move_name: str) -> BattleState:
        """Use one of the active creature's four moves against the opposing active creature"""
        side = self._require_turn("move", side)
        actor = self.battle_state.active(side)
        if actor.fainted:
            raise InvalidActionError("move", f"{actor.name} has fainted")
        if not actor.has_move(move_name):
            raise InvalidActionError("move", f"{actor.name} does not know '{move_name}' (knows {', '.join(actor.definition.moves)})")

        self._begin_transition()
        self._resolve_move(side, move_name)
        self._end_action(side)
        self._complete_transition()
        return self.battle_state

    def submit_swap(self, side: Side | int, bench_index: int) -> BattleState:
        """Bring roster member `bench_index` in as the side's active creature"""
        side = self._require_turn("swap", side)
        roster = self.battle_state.roster(side)
        if not roster.can_switch_to(bench_index):
            if not 0 <= bench_index < len(roster.combatants):
                detail = f"index {bench_index} out of range for a roster of {len(roster.combatants)}"
            elif bench_index == roster.active_index:
                detail = f"{roster.active.name} is already active"
            else:
                detail = f"{roster.combatants[bench_index].name} has fainted"
            raise InvalidActionError("swap", detail)

        self._begin_transition()
        if self._consume_skip(side):
            self._end_action(side)
        else:
            roster.active_index = bench_index
            self._emit(f"{roster.trainer} sends out {roster.active.name}!")
            if self.rules.swap_ends_turn or self.single_opponent:
                self._end_action(side)
        self._complete_transition()
        return self.battle_state

    def forfeit(self, side: Side | int = Side.SIDE_1) -> BattleState:
        """Flee a single-opponent match - allowed at any time while ongoing, regardless of turn owner"""
        if self.battle_state is None:
            raise InvalidActionError("forfeit", "no battle in progress")
        if not self.single_opponent:
            raise InvalidActionError("forfeit", "only a single-opponent battle can be fled")
        if self.battle_state.is_over():
            raise InvalidActionError("forfeit", f"battle already ended ({self.battle_state.status.value})")
        side = self._coerce_side("forfeit", side)
        if side == Side.SIDE_2:
            raise InvalidActionError("forfeit", "side 2 is controlled by the opponent policy")

        self._begin_transition()
        self.battle_state.status = BattleStatus.DRAW
        self.battle_state.forfeited_by = side
        self.battle_state.skip_pending = None
        self._emit(MSG_FLED)
        self._complete_transition()
        return self.battle_state

    def process_action(self, action: UserBattleAction) -> BattleState:
        """Dispatch a UserBattleAction to submit_move / submit_swap"""
        if action.action_type == UserBattleAction.ActionType.USE_MOVE:
            if action.move_name is None:
                raise InvalidActionError("move", "no move name given")
            return self.submit_move(action.side, action.move_name)
        if action.bench_index is None:
            raise InvalidActionError("swap", "no bench index given")
        return self.submit_swap(action.side, action.bench_index)

    def is_battle_over(self) -> bool:
        return self.battle_state is not None and self.battle_state.is_over()

    def get_winner(self) -> Optional[Side]:
        """Winning side once the battle is over; None while ongoing or on a draw"""
        if self.battle_state is None:
            return None
        return self.battle_state.winner()

    # =================================================================
    # RESOLUTION
    # =================================================================

    def _resolve_move(self, side: Side, move_name: str) -> None:
        if self._consume_skip(side):
            return

        attacker_roster = self.battle_state.roster(side)
        attacker = attacker_roster.active
        defender = self.battle_state.active(side.opponent)
        move = build_move(attacker.definition, move_name)

        message = f"{attacker_roster.trainer}'s {attacker.name} used {move_name}!"

        if self.rules.check_accuracy and not self.damage_calculator.check_accuracy(move):
            self._emit(f"{message} {MSG_MISSED}")
            return

        result = self.damage_calculator.resolve(move, attacker.definition, defender.definition, attacker.ailment, defender.ailment)

        if result.effectiveness == TYPE_MUL_NO_EFFECT:
            # Immune: the hit is suppressed entirely
            self._emit(f"{message} {TypeEffectiveness.describe(result.effectiveness)}")
            return

        if result.isCritical:
            message += f" {MSG_CRITICAL_HIT}"
        qualifier = TypeEffectiveness.describe(result.effectiveness)
        if qualifier:
            message += f" {qualifier}"

        defender.take_damage(result.damage)

        new_status = roll_status(move.type, defender, self.rng)
        if new_status is not None:
            defender.ailment = new_status
            message += f" {defender.name} was {new_status.kind.inflicted_verb}!"

        self._emit(message)
        self._handle_faints()

    def _consume_skip(self, side: Side) -> bool:
        """Turn the pending action into a pass if this turn's tick immobilized the actor"""
        skip = self.battle_state.skip_pending
        if skip is None:
            return False
        self.battle_state.skip_pending = None
        self._emit(f"{self.battle_state.active(side).name} is {skip.immobilized_verb}!")
        return True

    def _handle_faints(self) -> None:
        """Replace fainted actives with the first standing member; end the match on a wipe"""
        wiped: list[Side] = []
        for side in Side:
            roster = self.battle_state.roster(side)
            fallen = roster.active
            if not fallen.fainted:
                continue
            fallen.ailment = None
            replacement = roster.first_available_index()
            if replacement is None:
                wiped.append(side)
                self._emit(f"{roster.trainer}'s {fallen.name} fainted!")
            else:
                roster.active_index = replacement
                self._emit(f"{roster.trainer}'s {fallen.name} fainted! {roster.trainer} sends out {roster.active.name}!")
                if side == self.battle_state.turn:
                    # The replacement has not been ticked and acts freely
                    self.battle_state.skip_pending = None

        if len(wiped) == 2:
            self.battle_state.status = BattleStatus.DRAW
            self._emit("Both teams were defeated! It's a draw!")
        elif wiped:
            loser = wiped[0]
            winner = loser.opponent
            self.battle_state.status = BattleStatus.won_by(winner)
            self._emit(f"{self.battle_state.roster(loser).trainer}'s team was defeated! {self.battle_state.roster(winner).trainer} wins!")

        if self.battle_state.is_over():
            self.battle_state.skip_pending = None

    def _end_action(self, side: Side) -> None:
        if self.battle_state.is_over():
            return
        self._pass_turn(side.opponent)

    def _pass_turn(self, next_side: Side) -> None:
        """Give `next_side` the turn and run its status tick; auto-play a policy-driven side"""
        state = self.battle_state
        state.turn = next_side
        state.turn_count += 1

        tick = StatusTickProcessor(state, self.rng).process(next_side)
        for message in tick.messages:
            self._emit(message)
        state.skip_pending = tick.skip
        if tick.fainted:
            self._handle_faints()
            if state.is_over():
                return

        if self.single_opponent and next_side == Side.SIDE_2:
            move_name = self.opponent_policy.choose_move(state, next_side, self.rng)
            self._resolve_move(next_side, move_name)
            if state.is_over():
                return
            self._pass_turn(Side.SIDE_1)

    # =================================================================
    # HELPER METHODS
    # =================================================================

    def _require_turn(self, action: str, side: Side | int) -> Side:
        """Validate that `side` may act now; raises without touching the state"""
        if self.battle_state is None:
            raise InvalidActionError(action, "no battle in progress")
        if self.battle_state.is_over():
            raise InvalidActionError(action, f"battle already ended ({self.battle_state.status.value})")
        side = self._coerce_side(action, side)
        if self.single_opponent and side == Side.SIDE_2:
            raise InvalidActionError(action, "side 2 is controlled by the opponent policy")
        if side != self.battle_state.turn:
            raise InvalidActionError(action, f"it is {self.battle_state.turn.label}'s turn, not {side.label}'s")
        return side

    @staticmethod
    def _coerce_side(action: str, side: Side | int) -> Side:
        try:
            return Side(side)
        except ValueError:
            raise InvalidActionError(action, f"unknown side {side!r}") from None

    def _begin_transition(self) -> None:
        self.battle_state.events = []

    def _emit(self, message: str) -> None:
        self.battle_state.events.append(message)
        self.battle_state.battle_log.append(message)

    def _complete_transition(self) -> None:
        state = self.battle_state
        state.log = " ".join(state.events)
        logger.debug("Turn %d (%s to act): %s", state.turn_count, state.turn.label, state.log)

        if state.is_over() and not self._notified:
            self._notified = True
            logger.info("Battle ended: %s after %d turns", state.status.value, state.turn_count)
            for listener in self._listeners:
                listener(state)
