
"""Game-state engine: oscillating block, drop/trim, win/loss, speed ramp"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple

from stacker_config import EngineConfig, ConfigError

logger = logging.getLogger(__name__)

Columns = Tuple[int, ...]


class GameState(Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class Row:
    row_index: int
    columns: Columns

    @property
    def width(self) -> int:
        return len(self.columns)


@dataclass(frozen=True)
class MovingBlock:
    row_index: int
    columns: Columns
    direction: int

    def step(self, grid_cols: int) -> "MovingBlock":
        """Advance one column, bouncing off an edge in the same step."""
        d = self.direction
        if d == 1 and max(self.columns) >= grid_cols - 1: d = -1
        if d == -1 and min(self.columns) <= 0: d = 1
        # a block spanning the whole grid has nowhere to go
        if len(self.columns) >= grid_cols:
            return MovingBlock(self.row_index, self.columns, d)
        return MovingBlock(self.row_index, tuple(c + d for c in self.columns), d)


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of the engine, enough to render a frame."""
    columns: int
    rows: int
    stack_rows: Tuple[Row, ...]
    moving_block: Optional[MovingBlock]
    speed: int
    state: GameState

    @property
    def height(self) -> int:
        return self.stack_rows[-1].row_index

    def filled_cells(self) -> Iterator[Tuple[int, int]]:
        """Yield (row, col) for every occupied cell, stack first."""
        for r in self.stack_rows:
            for c in r.columns:
                yield r.row_index, c
        if self.moving_block is not None:
            for c in self.moving_block.columns:
                yield self.moving_block.row_index, c

    def is_filled(self, row: int, col: int) -> bool:
        return (row, col) in set(self.filled_cells())


class GameEngine:
    """Owns one game: the settled stack, the moving block, speed and state.

    The engine has no timer of its own. Something outside calls tick() every
    `speed` ms and drop()/restart() on player input, then reads snapshot().
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = EngineConfig() if config is None else config
        self.restart()

    def restart(self, config: Optional[EngineConfig] = None):
        cfg = self.config if config is None else config
        if not isinstance(cfg, EngineConfig):
            raise ConfigError(f"expected EngineConfig, got {type(cfg).__name__}")
        # a rejected config leaves the current game untouched
        self.config = cfg.validate()
        seed = cfg.seed_columns()
        self._stack = [Row(0, seed)]
        self._moving = MovingBlock(1, seed, 1)
        self._speed = cfg.initial_speed_ms
        self._state = GameState.PLAYING
        logger.info("New game: %dx%d grid, width %d, speed %dms",
                    cfg.columns, cfg.rows, cfg.starting_width, self._speed)

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def speed(self) -> int:
        return self._speed

    def tick(self):
        if self._state is not GameState.PLAYING: return
        self._moving = self._moving.step(self.config.columns)

    def drop(self):
        if self._state is not GameState.PLAYING: return
        top = self._stack[-1]
        overlap = tuple(c for c in self._moving.columns if c in top.columns)
        if not overlap:
            self._state = GameState.LOST
            logger.info("Game lost at row %d: %s missed %s",
                        self._moving.row_index, list(self._moving.columns), list(top.columns))
            return
        row = Row(self._moving.row_index, overlap)
        self._stack.append(row)
        logger.debug("Dropped row %d: %s", row.row_index, list(overlap))
        if row.row_index >= self.config.rows - 1:
            self._state = GameState.WON
            logger.info("Game won with %d cells on the top row", row.width)
            return
        self._moving = MovingBlock(row.row_index + 1, overlap, 1)
        self._speed = max(self.config.min_speed_ms, self._speed - self.config.speed_decrement_ms)

    def snapshot(self) -> Snapshot:
        playing = self._state is GameState.PLAYING
        return Snapshot(
            columns=self.config.columns,
            rows=self.config.rows,
            stack_rows=tuple(self._stack),
            moving_block=self._moving if playing else None,
            speed=self._speed,
            state=self._state,
        )
