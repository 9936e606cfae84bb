
"""Tunables and validated engine configuration"""
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

CONFIG = {
    "COLS": 7,
    "ROWS": 15,
    "START_WIDTH": 3,
    "INITIAL_SPEED_MS": 400,
    "MIN_SPEED_MS": 100,
    "SPEED_DECREMENT_MS": 15,
    "CELL_SIZE": 28,
    "FPS": 60,
    "LOG_LEVEL": "INFO",
}


class StackerError(Exception):
    """Base exception for the stacker game."""
    pass


class ConfigError(StackerError, ValueError):
    """Raised when an engine configuration cannot produce a playable game."""
    pass


@dataclass(frozen=True)
class EngineConfig:
    """Static parameters of one game.

    Attributes:
        columns: Grid width in cells
        rows: Grid height in cells; the top row index is rows - 1
        starting_width: Width of the seed row, centered on the grid
        initial_speed_ms: Tick interval at the start of a game
        min_speed_ms: Floor for the tick interval
        speed_decrement_ms: Interval reduction after each successful drop
    """

    columns: int = 7
    rows: int = 15
    starting_width: int = 3
    initial_speed_ms: int = 400
    min_speed_ms: int = 100
    speed_decrement_ms: int = 15

    def validate(self) -> "EngineConfig":
        for f in fields(self):
            v = getattr(self, f.name)
            if isinstance(v, bool) or not isinstance(v, int):
                raise ConfigError(f"{f.name} must be an int, got {v!r}")
        if self.columns <= 0:
            raise ConfigError(f"columns must be positive, got {self.columns}")
        # seed row plus at least one row to drop onto
        if self.rows < 2:
            raise ConfigError(f"rows must be at least 2, got {self.rows}")
        if not 1 <= self.starting_width <= self.columns:
            raise ConfigError(
                f"starting_width must be in [1, {self.columns}], got {self.starting_width}")
        if self.min_speed_ms <= 0:
            raise ConfigError(f"min_speed_ms must be positive, got {self.min_speed_ms}")
        if self.initial_speed_ms < self.min_speed_ms:
            raise ConfigError(
                f"initial_speed_ms ({self.initial_speed_ms}) is below "
                f"min_speed_ms ({self.min_speed_ms})")
        if self.speed_decrement_ms < 0:
            raise ConfigError(
                f"speed_decrement_ms must not be negative, got {self.speed_decrement_ms}")
        return self

    def seed_columns(self):
        first = (self.columns - self.starting_width) // 2
        return tuple(range(first, first + self.starting_width))


def engine_config(overrides: Optional[Dict[str, Any]] = None) -> EngineConfig:
    """Build an EngineConfig from CONFIG, optionally overriding keys."""
    src = dict(CONFIG)
    if overrides:
        unknown = set(overrides) - set(CONFIG)
        if unknown:
            raise ConfigError(f"unknown config keys: {sorted(unknown)}")
        src.update(overrides)
    return EngineConfig(
        columns=src["COLS"],
        rows=src["ROWS"],
        starting_width=src["START_WIDTH"],
        initial_speed_ms=src["INITIAL_SPEED_MS"],
        min_speed_ms=src["MIN_SPEED_MS"],
        speed_decrement_ms=src["SPEED_DECREMENT_MS"],
    ).validate()
