from creature_battle.battle_engine import BattleEngine, UserBattleAction
from creature_battle.config import BattleRules
from creature_battle.damage_calculator import DamageCalculator, DamageResult, calculate_max_hp
from creature_battle.enums import Ailment, BattleOutcome, BattleStatus, MoveCategory, Side, Type
from creature_battle.errors import BattleError, InvalidActionError, MalformedCreatureError
from creature_battle.schema import BaseStats, BattleMove, BattleState, Combatant, CreatureDefinition, Roster, StatusAilment
from creature_battle.status_effects import roll_status
from creature_battle.type_effectiveness import TypeEffectiveness
