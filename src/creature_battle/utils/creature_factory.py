from typing import Any, Iterable, Union

from pydantic import ValidationError

from creature_battle.constants import MIN_ROSTER_SIZE, ROSTER_SIZE
from creature_battle.damage_calculator import calculate_max_hp
from creature_battle.enums import MoveCategory
from creature_battle.errors import MalformedCreatureError
from creature_battle.schema.battle_move import BattleMove
from creature_battle.schema.combatant import Combatant
from creature_battle.schema.creature_definition import CreatureDefinition
from creature_battle.schema.roster import Roster

CreatureInput = Union[CreatureDefinition, dict]


def load_creature(data: CreatureInput) -> CreatureDefinition:
    """Validate a classifier payload (or pass through a definition); never coerces bad data"""
    if isinstance(data, CreatureDefinition):
        return data
    name = _payload_name(data)
    try:
        return CreatureDefinition.from_classifier(data)
    except ValidationError as e:
        raise MalformedCreatureError(name, "; ".join(f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in e.errors())) from e
    except (AttributeError, TypeError, ValueError) as e:
        raise MalformedCreatureError(name, str(e)) from e


def build_move(definition: CreatureDefinition, move_name: str) -> BattleMove:
    """Base move: primary type, power 50, accuracy 95, physical"""
    return BattleMove(name=move_name, type=definition.primary_type, category=MoveCategory.PHYSICAL)


def create_combatant(definition: CreatureDefinition) -> Combatant:
    max_hp = calculate_max_hp(definition.baseStats.hp)
    return Combatant(definition=definition, maxHP=max_hp, hp=max_hp)


def build_roster(trainer: str, creatures: Iterable[CreatureInput]) -> Roster:
    """Validate every creature and lay them out with index 0 active"""
    definitions = [load_creature(c) for c in creatures]
    if not MIN_ROSTER_SIZE <= len(definitions) <= ROSTER_SIZE:
        raise MalformedCreatureError(trainer, f"roster must hold {MIN_ROSTER_SIZE}-{ROSTER_SIZE} creatures, got {len(definitions)}")
    return Roster(trainer=trainer, combatants=[create_combatant(d) for d in definitions], active_index=0)


def _payload_name(data: Any) -> str:
    if isinstance(data, dict):
        form = data.get("currentForm", data)
        if isinstance(form, dict) and form.get("name"):
            return str(form["name"])
    return "<unknown>"
