"""Terminal velocity detection from the per-step velocity stream.

Two heuristics are available and selected by TerminalVelocityHeuristic:

- Stability window: count consecutive steps whose velocity change stays
  below a small delta, the first step being compared with the run's initial
  velocity; latch |v| once the count exceeds the window length.
- Asymptote proximity: latch |v| on the first step that comes within
  max(abs_tol, rel_tol * vt) of the theoretical terminal velocity vt.

They latch at different moments for identical inputs. Both latch at most
once per run and are permanently inactive when the scenario has no drag.
"""
import abc
import logging

from .config import PhysicsConstants
from .drag import theoretical_terminal_velocity
from .types import ScenarioParams, TerminalVelocityHeuristic

logger = logging.getLogger(__name__)


class TerminalVelocityDetector(abc.ABC):
    """Observes velocities and latches a terminal velocity estimate once."""

    def __init__(self, params: ScenarioParams):
        self.params = params
        self.estimate: float | None = None

    @property
    def active(self) -> bool:
        return self.params.has_drag and self.estimate is None

    @property
    def latched(self) -> bool:
        return self.estimate is not None

    def observe(self, v: float) -> float | None:
        """Feed one step's velocity; returns the estimate (None until latched)."""
        if not self.active:
            return self.estimate
        if self._update(v):
            self.estimate = abs(v)
            logger.info("Terminal velocity latched at %.4f m/s", self.estimate)
        return self.estimate

    def reset(self, initial_velocity: float = 0.0) -> None:
        """Forget any estimate before a run starting at ``initial_velocity``."""
        self.estimate = None

    @abc.abstractmethod
    def _update(self, v: float) -> bool:
        """Return True when ``v`` should be latched as the estimate."""


class StabilityWindowDetector(TerminalVelocityDetector):

    def __init__(self, params: ScenarioParams,
                 delta: float = PhysicsConstants.STABILITY_DELTA,
                 window: int = PhysicsConstants.STABILITY_WINDOW,
                 initial_velocity: float = 0.0):
        super().__init__(params)
        self.delta = delta
        self.window = window
        self.stable_steps = 0
        self._previous = initial_velocity

    def _update(self, v: float) -> bool:
        previous, self._previous = self._previous, v
        if abs(v - previous) < self.delta:
            self.stable_steps += 1
        else:
            self.stable_steps = 0
        return self.stable_steps > self.window

    def reset(self, initial_velocity: float = 0.0) -> None:
        super().reset(initial_velocity)
        self.stable_steps = 0
        self._previous = initial_velocity


class AsymptoteProximityDetector(TerminalVelocityDetector):

    def __init__(self, params: ScenarioParams,
                 abs_tolerance: float = PhysicsConstants.ASYMPTOTE_ABS_TOLERANCE,
                 rel_tolerance: float = PhysicsConstants.ASYMPTOTE_REL_TOLERANCE):
        super().__init__(params)
        self.theoretical = theoretical_terminal_velocity(
            params.gravity, params.drag_coefficient, params.mass, params.drag_model)
        self.tolerance = None
        if self.theoretical is not None:
            self.tolerance = max(abs_tolerance, rel_tolerance * self.theoretical)

    def _update(self, v: float) -> bool:
        return abs(self.theoretical - abs(v)) < self.tolerance


def create_detector(heuristic: TerminalVelocityHeuristic, params: ScenarioParams,
                    **tuning) -> TerminalVelocityDetector:
    """Build the detector for ``heuristic``.

    ``tuning`` is forwarded to the detector constructor (``delta``/``window``
    for the stability window, ``abs_tolerance``/``rel_tolerance`` for the
    asymptote heuristic).
    """
    if heuristic is TerminalVelocityHeuristic.STABILITY_WINDOW:
        return StabilityWindowDetector(params, **tuning)
    if heuristic is TerminalVelocityHeuristic.ASYMPTOTE_PROXIMITY:
        return AsymptoteProximityDetector(params, **tuning)
    raise ValueError(f"Unsupported terminal velocity heuristic: {heuristic}")
