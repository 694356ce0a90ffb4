"""
Damage calculation

Single-move damage at the fixed battle level. Order of operations:

1. Pick attack/defense stats by move category
2. Burn halves a physical attacker's attack stat
3. Base damage formula
4. Type effectiveness
5. Critical hit
6. Random variance
7. Clamp to at least 1

Every floor is applied at the step it belongs to, so results are integers throughout.
"""

import logging
import math
from typing import Optional

from pydantic import BaseModel, Field

from creature_battle.config import BattleRules
from creature_battle.constants import BATTLE_LEVEL, BURN_ATTACK_DIVISOR, MIN_DAMAGE
from creature_battle.enums import Ailment, MoveCategory
from creature_battle.schema.battle_move import BattleMove
from creature_battle.schema.creature_definition import CreatureDefinition
from creature_battle.schema.status_ailment import StatusAilment
from creature_battle.type_effectiveness import TypeEffectiveness
from creature_battle.utils.rng import RandomSource

logger = logging.getLogger(__name__)


class DamageResult(BaseModel):
    """Outcome of a single damage roll"""

    damage: int = Field(ge=MIN_DAMAGE)
    effectiveness: float = Field(ge=0.0)
    isCritical: bool = False


def calculate_max_hp(base_hp: int) -> int:
    """
    Max HP from the base HP stat, always evaluated at the battle level.

    The creature's own level does not enter the formula: maxHP(0) == 60.
    """
    return math.floor((2 * base_hp * BATTLE_LEVEL) / 100 + BATTLE_LEVEL + 10)


def calculate_base_damage(power: int, attack: int, defense: int) -> int:
    """floor((2*L/5 + 2) * power * attack / defense / 50 + 2) with L = BATTLE_LEVEL"""
    defense = max(defense, 1)
    return math.floor((2 * BATTLE_LEVEL / 5 + 2) * power * attack / defense / 50 + 2)


class DamageCalculator:
    """
    Pure damage resolver - the only side effect is drawing from the random source.

    Two draws are consumed per call, in order: the critical-hit roll, then the variance
    factor. Inject a scripted source to force either branch.
    """

    def __init__(self, rng: RandomSource, rules: BattleRules | None = None):
        self.rng = rng
        self.rules = rules or BattleRules()

    def select_stats(self, move: BattleMove, attacker: CreatureDefinition, defender: CreatureDefinition) -> tuple[int, int]:
        """Attack and defense stat pair for the move's category"""
        if move.category == MoveCategory.PHYSICAL:
            return attacker.baseStats.attack, defender.baseStats.defense
        return attacker.baseStats.specialAttack, defender.baseStats.specialDefense

    def resolve(
        self,
        move: BattleMove,
        attacker: CreatureDefinition,
        defender: CreatureDefinition,
        attacker_ailment: Optional[StatusAilment] = None,
        defender_ailment: Optional[StatusAilment] = None,
    ) -> DamageResult:
        """
        Resolve one move's damage.

        Args:
            move: Move being used
            attacker: Attacking creature
            defender: Defending creature
            attacker_ailment: Attacker's active ailment (burn weakens physical moves)
            defender_ailment: Defender's active ailment (no current rule reads it)

        Returns:
            DamageResult with damage >= 1. An immune matchup still reports damage 1 with
            effectiveness 0; callers must check effectiveness and suppress the hit.
        """
        attack, defense = self.select_stats(move, attacker, defender)

        if attacker_ailment is not None and attacker_ailment.kind == Ailment.BURN and move.category == MoveCategory.PHYSICAL:
            attack = attack // BURN_ATTACK_DIVISOR

        damage = calculate_base_damage(move.power, attack, defense)

        effectiveness = TypeEffectiveness.effectiveness(move.type, defender.types)
        damage = math.floor(damage * effectiveness)

        is_critical = self.rng.random() < self.rules.critical_hit_chance
        if is_critical:
            damage = math.floor(damage * self.rules.critical_multiplier)

        variance = self.rng.uniform(self.rules.variance_min, self.rules.variance_max)
        damage = math.floor(damage * variance)

        result = DamageResult(damage=max(MIN_DAMAGE, damage), effectiveness=effectiveness, isCritical=is_critical)
        logger.debug(
            "%s used %s on %s: attack=%d defense=%d effectiveness=%s critical=%s damage=%d",
            attacker.name, move.name, defender.name, attack, defense, effectiveness, is_critical, result.damage,
        )
        return result

    def check_accuracy(self, move: BattleMove) -> bool:
        """Accuracy roll - only consulted when BattleRules.check_accuracy is enabled"""
        return self.rng.random() * 100 < move.accuracy
