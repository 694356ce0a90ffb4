from creature_battle.schema.creature_definition import BaseStats, CreatureDefinition
from creature_battle.schema.battle_move import BattleMove
from creature_battle.schema.status_ailment import StatusAilment
from creature_battle.schema.combatant import Combatant
from creature_battle.schema.roster import Roster
from creature_battle.schema.battle_state import BattleState
