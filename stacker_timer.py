
"""Drives GameEngine.tick() from frame time"""
from stacker_engine import GameEngine, GameState


class TickScheduler:
    """Fixed-interval ticker fed by the frame clock.

    The interval is the engine's current speed. Whenever that changes the
    accumulated time is discarded, the same as re-arming an interval timer.
    """
    def __init__(self, engine: GameEngine):
        self.engine = engine
        self.interval = engine.speed
        self.acc = 0

    def reset(self):
        self.interval = self.engine.speed; self.acc = 0

    def update(self, dt: int) -> int:
        """Add dt ms and fire any due ticks. Returns the number of ticks."""
        if self.engine.state is not GameState.PLAYING:
            self.acc = 0
            return 0
        if self.engine.speed != self.interval:
            self.reset()
        self.acc += dt
        n = 0
        while self.acc >= self.interval:
            self.acc -= self.interval
            self.engine.tick(); n += 1
        return n
