from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from creature_battle.constants import MAX_BASE_STAT, MAX_CREATURE_TYPES, MAX_LEVEL, MAX_MON_MOVES, MIN_BASE_STAT, MIN_LEVEL
from creature_battle.enums import Type


class BaseStats(BaseModel):
    """Six base stats - field names follow the classifier payload (currentForm.baseStats)"""

    model_config = ConfigDict(frozen=True)

    hp: int = Field(ge=MIN_BASE_STAT, le=MAX_BASE_STAT)
    attack: int = Field(ge=MIN_BASE_STAT, le=MAX_BASE_STAT)
    defense: int = Field(ge=MIN_BASE_STAT, le=MAX_BASE_STAT)
    specialAttack: int = Field(ge=MIN_BASE_STAT, le=MAX_BASE_STAT)
    specialDefense: int = Field(ge=MIN_BASE_STAT, le=MAX_BASE_STAT)
    speed: int = Field(ge=MIN_BASE_STAT, le=MAX_BASE_STAT)


class CreatureDefinition(BaseModel):
    """Immutable creature definition as handed over by the classification service"""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    types: tuple[Type, ...] = Field(min_length=1, max_length=MAX_CREATURE_TYPES)
    level: int = Field(ge=MIN_LEVEL, le=MAX_LEVEL)
    baseStats: BaseStats
    abilities: tuple[str, ...] = ()
    moves: tuple[str, ...] = Field(min_length=MAX_MON_MOVES, max_length=MAX_MON_MOVES)
    colorScheme: tuple[str, ...] = ()
    description: str = ""
    height: str = ""
    weight: str = ""

    @field_validator("types", mode="before")
    @classmethod
    def _parse_types(cls, value: Any) -> Any:
        # The classifier capitalizes type tags ("Fire"); the chart is keyed lowercase
        if isinstance(value, (list, tuple)):
            return [Type.parse(v) if isinstance(v, str) else v for v in value]
        return value

    @model_validator(mode="after")
    def _check_unique_entries(self) -> "CreatureDefinition":
        if len(set(self.types)) != len(self.types):
            raise ValueError(f"types must be distinct, got {[t.value for t in self.types]}")
        if len(set(self.moves)) != len(self.moves):
            raise ValueError(f"moves must be {MAX_MON_MOVES} unique names, got {list(self.moves)}")
        return self

    @property
    def primary_type(self) -> Type:
        return self.types[0]

    @classmethod
    def from_classifier(cls, payload: dict) -> "CreatureDefinition":
        """
        Build a definition from the classifier's JSON document.

        Accepts either the full document ({"currentForm": {...}, "height": ..., "weight": ...})
        or a bare currentForm object. The evolution chain is ignored.
        """
        form = dict(payload.get("currentForm", payload))
        for key in ("height", "weight"):
            if key in payload and key not in form:
                form[key] = payload[key]
        return cls.model_validate(form)
