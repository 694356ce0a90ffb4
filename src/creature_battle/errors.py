class BattleError(Exception):
    """Base for all engine errors."""


class InvalidActionError(BattleError):
    """An action was rejected - the battle state is left untouched.

    Raised for the wrong side acting, an unknown move, an out-of-range or fainted
    swap target, or any action on a finished match.
    """

    def __init__(self, action: str, detail: str):
        super().__init__(f"Invalid {action}: {detail}")
        self.action = action
        self.detail = detail


class MalformedCreatureError(BattleError):
    """A creature definition or roster breaks an invariant and cannot start a match."""

    def __init__(self, creature: str, detail: str):
        super().__init__(f"Malformed creature '{creature}': {detail}")
        self.creature = creature
        self.detail = detail
