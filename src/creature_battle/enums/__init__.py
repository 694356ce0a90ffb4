from creature_battle.enums.type import Type
from creature_battle.enums.status import Ailment
from creature_battle.enums.other import MoveCategory, Side, BattleStatus, BattleOutcome
