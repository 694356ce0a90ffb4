from pydantic import BaseModel, Field, model_validator

from creature_battle.constants import (
    CRITICAL_HIT_CHANCE,
    CRITICAL_HIT_MULTIPLIER,
    DAMAGE_VARIANCE_MAX,
    DAMAGE_VARIANCE_MIN,
)


class BattleRules(BaseModel):
    """Tunable battle rules - defaults reproduce the standard two-trainer match"""

    # Whether a swap consumes the swapping side's turn. A policy-driven opponent always
    # answers a swap with its automatic action regardless of this flag.
    swap_ends_turn: bool = True

    critical_hit_chance: float = Field(default=CRITICAL_HIT_CHANCE, ge=0.0, le=1.0)
    critical_multiplier: float = Field(default=CRITICAL_HIT_MULTIPLIER, ge=1.0)
    variance_min: float = Field(default=DAMAGE_VARIANCE_MIN, gt=0.0, le=1.0)
    variance_max: float = Field(default=DAMAGE_VARIANCE_MAX, gt=0.0, le=1.0)

    # Base moves carry an accuracy but the standard rules never roll it
    check_accuracy: bool = False

    side_names: tuple[str, str] = ("Player 1", "Player 2")

    @model_validator(mode="after")
    def _check_variance(self) -> "BattleRules":
        if self.variance_min > self.variance_max:
            raise ValueError("variance_min must not exceed variance_max")
        return self
