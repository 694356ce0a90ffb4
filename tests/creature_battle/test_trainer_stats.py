import pytest

from creature_battle.ai import RandomMovePolicy
from creature_battle.battle_engine import BattleEngine
from creature_battle.enums import BattleOutcome, Side
from creature_battle.trainer_stats import BattleResult, calculate_trainer_stats


def fled_engine(creature, scripted):
    engine = BattleEngine(rng=scripted(), opponent_policy=RandomMovePolicy())
    engine.start_battle([creature(name="Alpha")], [creature(name="Omega")])
    engine.forfeit()
    return engine


def finished_engine(creature, scripted):
    engine = BattleEngine(rng=scripted())
    engine.start_battle([creature(name="Alpha")], [creature(name="Omega"), creature(name="Omicron")])
    for c in engine.battle_state.roster(Side.SIDE_2).combatants:
        c.hp = 1
    engine.submit_move(Side.SIDE_1, "Tackle")
    engine.submit_move(Side.SIDE_2, "Tackle")
    engine.submit_move(Side.SIDE_1, "Tackle")
    return engine


def test_result_from_winning_side(creature, scripted):
    engine = finished_engine(creature, scripted)
    result = BattleResult.from_state(engine.battle_state, Side.SIDE_1)

    assert result.outcome == BattleOutcome.WON
    assert result.team == ["Alpha"]
    assert [d.name for d in result.defeated] == ["Omega", "Omicron"]
    assert result.turns == engine.battle_state.turn_count


def test_result_from_losing_side(creature, scripted):
    engine = finished_engine(creature, scripted)
    result = BattleResult.from_state(engine.battle_state, Side.SIDE_2)

    assert result.outcome == BattleOutcome.LOST
    assert result.defeated == []


def test_forfeit_outcomes(creature, scripted):
    engine = fled_engine(creature, scripted)

    assert BattleResult.from_state(engine.battle_state, Side.SIDE_1).outcome == BattleOutcome.FLED
    assert BattleResult.from_state(engine.battle_state, Side.SIDE_2).outcome == BattleOutcome.DRAW


def test_result_requires_finished_battle(creature, scripted):
    engine = BattleEngine(rng=scripted())
    engine.start_battle([creature()], [creature()])
    with pytest.raises(ValueError):
        BattleResult.from_state(engine.battle_state)


def test_listener_can_persist_results(creature, scripted):
    stored = []

    class MemoryStore:
        def record(self, result):
            stored.append(result)

    store = MemoryStore()
    engine = BattleEngine(rng=scripted(), opponent_policy=RandomMovePolicy())
    engine.add_listener(lambda state: store.record(BattleResult.from_state(state)))
    engine.start_battle([creature()], [creature()])
    engine.forfeit()

    assert [r.outcome for r in stored] == [BattleOutcome.FLED]


def test_trainer_stats(creature):
    creatures = [
        creature(name="A", types=["fire", "flying"], level=12),
        creature(name="B", types=["water"], level=40),
        creature(name="C", types=["water", "fire"], level=7),
    ]
    results = [
        BattleResult(side=Side.SIDE_1, outcome=BattleOutcome.WON, turns=4),
        BattleResult(side=Side.SIDE_1, outcome=BattleOutcome.LOST, turns=9),
        BattleResult(side=Side.SIDE_1, outcome=BattleOutcome.FLED, turns=1),
        BattleResult(side=Side.SIDE_1, outcome=BattleOutcome.WON, turns=6),
    ]
    stats = calculate_trainer_stats(creatures, results)

    assert stats.totalCreaturesCaught == 3
    assert stats.uniqueCreatureTypes == 3
    assert stats.highestLevelCreature == 40
    # fire and water tie at two; fire was seen first
    assert stats.favoriteCreatureType == "fire"
    assert stats.winRate == 0.5


def test_trainer_stats_empty():
    stats = calculate_trainer_stats([])
    assert stats.totalCreaturesCaught == 0
    assert stats.favoriteCreatureType == ""
    assert stats.winRate == 0.0
