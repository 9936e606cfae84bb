"""Unit tests for the stacker game engine."""

import random

import pytest
from stacker_config import EngineConfig, ConfigError
from stacker_engine import GameEngine, GameState, MovingBlock, Row


@pytest.fixture
def engine():
    """Engine with the default 7x15 configuration."""
    return GameEngine()


def moving(engine):
    return engine.snapshot().moving_block


def test_new_game_layout(engine):
    snap = engine.snapshot()
    assert snap.columns == 7 and snap.rows == 15
    assert snap.stack_rows == (Row(0, (2, 3, 4)),)
    assert snap.moving_block == MovingBlock(1, (2, 3, 4), 1)
    assert snap.speed == 400
    assert snap.state is GameState.PLAYING


def test_tick_moves_right_then_bounces_same_tick(engine):
    seen = []
    for _ in range(7):
        engine.tick()
        b = moving(engine)
        seen.append((b.columns, b.direction))
    assert seen == [
        ((3, 4, 5), 1),
        ((4, 5, 6), 1),
        ((3, 4, 5), -1),
        ((2, 3, 4), -1),
        ((1, 2, 3), -1),
        ((0, 1, 2), -1),
        ((1, 2, 3), 1),
    ]


def test_bounce_single_cell_narrow_grid():
    e = GameEngine(EngineConfig(columns=3, starting_width=1))
    seq = []
    for _ in range(4):
        e.tick()
        b = moving(e)
        seq.append((b.columns, b.direction))
    assert seq == [((2,), 1), ((1,), -1), ((0,), -1), ((1,), 1)]


def test_full_width_block_stays_inside_grid():
    e = GameEngine(EngineConfig(columns=3, starting_width=3))
    for _ in range(5):
        e.tick()
        cols = moving(e).columns
        assert min(cols) >= 0 and max(cols) <= 2


def test_drop_trims_to_overlap_and_speeds_up(engine):
    engine.tick(); engine.tick()
    assert moving(engine).columns == (4, 5, 6)
    engine.drop()
    snap = engine.snapshot()
    assert snap.stack_rows[-1] == Row(1, (4,))
    assert snap.moving_block == MovingBlock(2, (4,), 1)
    assert snap.speed == 385
    assert snap.state is GameState.PLAYING


def test_drop_resets_direction_to_right(engine):
    for _ in range(3):
        engine.tick()
    assert moving(engine).direction == -1
    engine.drop()
    assert moving(engine).direction == 1


def test_full_overlap_keeps_width(engine):
    engine.drop()
    snap = engine.snapshot()
    assert snap.stack_rows == (Row(0, (2, 3, 4)), Row(1, (2, 3, 4)))
    assert snap.state is GameState.PLAYING


def test_zero_overlap_loses_without_append(engine):
    engine._stack = [Row(0, (5, 6))]
    engine._moving = MovingBlock(1, (0, 1), 1)
    engine.drop()
    snap = engine.snapshot()
    assert snap.state is GameState.LOST
    assert len(snap.stack_rows) == 1
    assert snap.moving_block is None


def test_miss_after_trim_loses(engine):
    engine.tick(); engine.tick(); engine.drop()
    engine.tick()
    assert moving(engine).columns == (5,)
    engine.drop()
    snap = engine.snapshot()
    assert snap.state is GameState.LOST
    assert len(snap.stack_rows) == 2
    assert snap.speed == 385


def test_reaching_top_row_wins(engine):
    for _ in range(14):
        engine.drop()
    snap = engine.snapshot()
    assert snap.state is GameState.WON
    assert snap.stack_rows[-1] == Row(14, (2, 3, 4))
    assert len(snap.stack_rows) == 15
    assert snap.moving_block is None
    # the winning drop does not speed things up
    assert snap.speed == 400 - 13 * 15


def test_two_row_grid_wins_on_first_drop():
    e = GameEngine(EngineConfig(rows=2))
    e.tick()
    e.drop()
    snap = e.snapshot()
    assert snap.state is GameState.WON
    assert snap.stack_rows[-1] == Row(1, (3, 4))


def test_ticking_never_ends_game(engine):
    for _ in range(200):
        engine.tick()
    assert engine.state is GameState.PLAYING


def test_speed_floors_at_minimum():
    e = GameEngine(EngineConfig(initial_speed_ms=130, min_speed_ms=100, speed_decrement_ms=15))
    speeds = []
    for _ in range(3):
        e.drop()
        speeds.append(e.speed)
    assert speeds == [115, 100, 100]


@pytest.mark.parametrize("finish", ["lose", "win"])
def test_terminal_calls_are_noops(engine, finish):
    if finish == "lose":
        engine.tick(); engine.tick(); engine.drop(); engine.tick(); engine.drop()
    else:
        for _ in range(14):
            engine.drop()
    before = engine.snapshot()
    assert before.state is not GameState.PLAYING
    for _ in range(5):
        engine.tick()
        engine.drop()
    assert engine.snapshot() == before


def test_restart_resets_everything(engine):
    engine.tick(); engine.tick(); engine.drop(); engine.tick(); engine.drop()
    assert engine.state is GameState.LOST
    engine.restart()
    assert engine.snapshot() == GameEngine().snapshot()
    assert moving(engine) == MovingBlock(1, (2, 3, 4), 1)


def test_restart_with_new_config():
    e = GameEngine()
    e.restart(EngineConfig(columns=9, rows=5, starting_width=5))
    snap = e.snapshot()
    assert (snap.columns, snap.rows) == (9, 5)
    assert snap.stack_rows == (Row(0, (2, 3, 4, 5, 6)),)


def test_bad_restart_keeps_current_game(engine):
    engine.tick(); engine.drop()
    before = engine.snapshot()
    with pytest.raises(ConfigError):
        engine.restart(EngineConfig(starting_width=8))
    assert engine.snapshot() == before
    assert engine.config == EngineConfig()


def test_bad_construction_raises():
    with pytest.raises(ConfigError):
        GameEngine(EngineConfig(columns=0))
    with pytest.raises(ConfigError):
        GameEngine({"columns": 7})


def test_snapshot_occupancy(engine):
    snap = engine.snapshot()
    assert set(snap.filled_cells()) == {(0, 2), (0, 3), (0, 4), (1, 2), (1, 3), (1, 4)}
    assert snap.is_filled(1, 3)
    assert not snap.is_filled(1, 5)
    assert snap.height == 0


def test_snapshot_is_detached(engine):
    snap = engine.snapshot()
    engine.tick(); engine.drop()
    assert len(snap.stack_rows) == 1
    assert snap.moving_block.columns == (2, 3, 4)


def test_random_play_keeps_stack_invariants():
    rng = random.Random(1234)
    e = GameEngine()
    for _ in range(3000):
        if e.state is not GameState.PLAYING:
            e.restart()
        if rng.random() < 0.2:
            e.drop()
        else:
            e.tick()
        snap = e.snapshot()
        rows = snap.stack_rows
        for i, row in enumerate(rows):
            assert row.row_index == i
            assert row.columns
            assert all(0 <= c < snap.columns for c in row.columns)
            assert list(row.columns) == sorted(row.columns)
            if i:
                assert row.width <= rows[i - 1].width
        b = snap.moving_block
        if b is not None:
            assert b.row_index == rows[-1].row_index + 1
            assert b.columns == tuple(range(b.columns[0], b.columns[0] + rows[-1].width))
            assert 0 <= min(b.columns) and max(b.columns) <= snap.columns - 1
