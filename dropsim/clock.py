"""Fixed-timestep pacing driven by a variable-rate external tick.

Each tick reports the wall-clock time since the previous one. The clock
turns that into ``max(1, floor(elapsed / dt))`` fixed steps, so every tick
advances the physics at least once and a slow frame is caught up with a
burst of steps. Bursts are capped at ``max_steps_per_tick`` when set; with
``None`` the burst is unbounded.

Run status transitions:
    STOPPED -> RUNNING (start)
    RUNNING <-> PAUSED (pause / resume)
    RUNNING -> FINISHED (body came to rest)
    any -> STOPPED (reset)
"""
import logging
import math
from typing import Callable, Optional

from .config import PhysicsConstants
from .types import RunStatus

logger = logging.getLogger(__name__)


class SimulationClock:

    def __init__(self, dt: float = PhysicsConstants.DEFAULT_TIMESTEP,
                 max_steps_per_tick: Optional[int] = PhysicsConstants.DEFAULT_MAX_STEPS_PER_TICK):
        self.dt = dt
        self.max_steps_per_tick = max_steps_per_tick
        self.status = RunStatus.STOPPED

    @property
    def running(self) -> bool:
        return self.status is RunStatus.RUNNING

    @property
    def paused(self) -> bool:
        return self.status is RunStatus.PAUSED

    def start(self) -> None:
        self.status = RunStatus.RUNNING

    def pause(self) -> bool:
        if self.status is not RunStatus.RUNNING:
            logger.debug("Ignoring pause while %s", self.status.name)
            return False
        self.status = RunStatus.PAUSED
        return True

    def resume(self) -> bool:
        if self.status is not RunStatus.PAUSED:
            logger.debug("Ignoring resume while %s", self.status.name)
            return False
        self.status = RunStatus.RUNNING
        return True

    def finish(self) -> None:
        self.status = RunStatus.FINISHED

    def reset(self) -> None:
        self.status = RunStatus.STOPPED

    def steps_for(self, elapsed: float) -> int:
        """Number of fixed steps owed for ``elapsed`` seconds of wall time."""
        if elapsed is None or not math.isfinite(elapsed) or elapsed < 0.0:
            elapsed = 0.0
        steps = max(1, math.floor(elapsed / self.dt))
        if self.max_steps_per_tick is not None and steps > self.max_steps_per_tick:
            logger.warning("Catch-up of %d steps capped at %d", steps, self.max_steps_per_tick)
            steps = self.max_steps_per_tick
        return steps

    def advance(self, elapsed: float, step_fn: Callable[[], bool]) -> int:
        """Run ``step_fn`` once per owed step while the clock is running.

        ``step_fn`` returns True when the step finished the run, which stops
        the burst early. Returns the number of steps executed.
        """
        if self.status is not RunStatus.RUNNING:
            return 0
        executed = 0
        for _ in range(self.steps_for(elapsed)):
            executed += 1
            if step_fn():
                self.finish()
                break
        return executed
