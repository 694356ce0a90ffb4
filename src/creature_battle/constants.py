# =============================================================================
# BATTLE LEVEL - every stat formula is evaluated at a fixed level
# =============================================================================
BATTLE_LEVEL = 50

# =============================================================================
# CREATURE LIMITS
# =============================================================================
MIN_LEVEL = 1
MAX_LEVEL = 65
MIN_BASE_STAT = 0
MAX_BASE_STAT = 255
MAX_CREATURE_TYPES = 2
MAX_MON_MOVES = 4
MIN_ROSTER_SIZE = 1
ROSTER_SIZE = 6

# =============================================================================
# BASE MOVES - every move takes the user's primary type
# =============================================================================
DEFAULT_MOVE_POWER = 50
DEFAULT_MOVE_ACCURACY = 95

# =============================================================================
# TYPE EFFECTIVENESS MULTIPLIERS
# =============================================================================
TYPE_MUL_NO_EFFECT = 0.0  # immune
TYPE_MUL_NOT_EFFECTIVE = 0.5
TYPE_MUL_NORMAL = 1.0
TYPE_MUL_SUPER_EFFECTIVE = 2.0

# =============================================================================
# DAMAGE
# =============================================================================
CRITICAL_HIT_CHANCE = 0.0625  # 1/16
CRITICAL_HIT_MULTIPLIER = 1.5
DAMAGE_VARIANCE_MIN = 0.85
DAMAGE_VARIANCE_MAX = 1.0
BURN_ATTACK_DIVISOR = 2
MIN_DAMAGE = 1

# =============================================================================
# STATUS AILMENTS
# =============================================================================
AILMENT_DURATION = 3
BURN_DAMAGE_PER_TURN = 10
POISON_DAMAGE_PER_TURN = 8
PARALYSIS_SKIP_CHANCE = 0.25

# =============================================================================
# BATTLE MESSAGES
# =============================================================================
MSG_CRITICAL_HIT = "A critical hit!"
MSG_SUPER_EFFECTIVE = "It's super effective!"
MSG_NOT_VERY_EFFECTIVE = "It's not very effective..."
MSG_NO_EFFECT = "It had no effect..."
MSG_MISSED = "The attack missed!"
MSG_FLED = "Got away safely!"
