import logging
import math
from typing import NamedTuple, Optional

from .analysis import AnalysisReport, build_report
from .clock import SimulationClock
from .config import EngineConfig
from .errors import ConfigurationError
from .history import HistoryBuffer
from .integration import step
from .scenarios import DEFAULT_SCENARIO, get_scenario
from .terminal_velocity import TerminalVelocityDetector, create_detector
from .types import (DragModel, HistorySample, RunStatus, ScenarioParams, SimulationState,
                    TerminalVelocityHeuristic)

logger = logging.getLogger(__name__)


class TickResult(NamedTuple):
  state: SimulationState
  finished: bool


class SimulationEngine:
  """Single-body drop simulation driven by an external tick.

  Per tick: clock -> integrator (one or more fixed steps) -> terminal
  velocity detector -> history buffer -> one-shot report when the body
  comes to rest. The engine owns the state; callers get immutable
  snapshots back from start/pause/resume/reset/tick.
  """

  def __init__(self, params: Optional[ScenarioParams] = None,
               config: Optional[EngineConfig] = None):
    self.config = config or EngineConfig()
    self.params = params or get_scenario(DEFAULT_SCENARIO)
    self.heuristic = self.config.heuristic
    self.clock = SimulationClock(self.config.dt, self.config.max_steps_per_tick)
    self.history = HistoryBuffer(self.config.history_capacity)
    self.detector = self._create_detector()
    self._state = SimulationState(y=self.config.default_height)
    self._report: Optional[AnalysisReport] = None
    self.last_tick_steps = 0

  def _create_detector(self) -> TerminalVelocityDetector:
    if self.heuristic is TerminalVelocityHeuristic.STABILITY_WINDOW:
      tuning = {'delta': self.config.stability_delta, 'window': self.config.stability_window}
    else:
      tuning = {'abs_tolerance': self.config.asymptote_abs_tolerance,
                'rel_tolerance': self.config.asymptote_rel_tolerance}
    return create_detector(self.heuristic, self.params, **tuning)

  @property
  def state(self) -> SimulationState:
    return self._state

  @property
  def status(self) -> RunStatus:
    return self.clock.status

  @property
  def terminal_velocity(self) -> Optional[float]:
    return self.detector.estimate

  # Configuration (every change forces a full reset)

  def configure(self, params: ScenarioParams) -> SimulationState:
    self.params = params
    logger.info("Configured scenario: g=%.3f k=%.3f m=%.3f e=%.2f model=%s",
                params.gravity, params.drag_coefficient, params.mass,
                params.restitution, params.drag_model.value)
    return self.reset()

  def configure_scenario(self, name: str, drag_model: Optional[DragModel] = None,
                         restitution: Optional[float] = None) -> SimulationState:
    """Switch to a named preset, keeping the current model/restitution unless overridden.

    An unknown name or invalid override is logged and re-raised; the
    current scenario and run are left untouched.
    """
    try:
      params = get_scenario(
        name,
        drag_model=drag_model if drag_model is not None else self.params.drag_model,
        restitution=restitution if restitution is not None else self.params.restitution,
        mass=self.params.mass,
      )
    except ConfigurationError as e:
      logger.error("Scenario change rejected: %s", e)
      raise
    return self.configure(params)

  def set_drag_model(self, model: DragModel) -> SimulationState:
    return self.configure(ScenarioParams(
      gravity=self.params.gravity,
      drag_coefficient=self.params.drag_coefficient,
      mass=self.params.mass,
      restitution=self.params.restitution,
      drag_model=DragModel(model),
    ))

  def set_heuristic(self, heuristic: TerminalVelocityHeuristic) -> SimulationState:
    self.heuristic = TerminalVelocityHeuristic(heuristic)
    return self.reset()

  # Lifecycle

  def start(self, initial_height: Optional[float] = None,
            initial_velocity: float = 0.0) -> SimulationState:
    """Begin a new run from ``initial_height`` with ``initial_velocity`` (positive = down)."""
    if initial_height is None:
      initial_height = self.config.default_height
    if not math.isfinite(initial_height) or initial_height < 0:
      raise ConfigurationError(f"initial_height must be non-negative, got {initial_height}")
    if not math.isfinite(initial_velocity):
      raise ConfigurationError(f"initial_velocity must be finite, got {initial_velocity}")

    self._clear_run()
    self.detector.reset(initial_velocity)
    self.clock.start()
    self._state = SimulationState(y=float(initial_height), v=float(initial_velocity),
                                  running=True)
    logger.info("Run started: y0=%.3f v0=%.3f", initial_height, initial_velocity)
    return self._state

  def pause(self) -> SimulationState:
    if self.clock.pause():
      self._state = self._state._replace(paused=True)
      logger.info("Run paused at t=%.3f", self._state.t)
    return self._state

  def resume(self) -> SimulationState:
    if self.clock.resume():
      self._state = self._state._replace(paused=False)
      logger.info("Run resumed at t=%.3f", self._state.t)
    return self._state

  def reset(self) -> SimulationState:
    self.clock.reset()
    self._clear_run()
    self._state = SimulationState(y=self.config.default_height)
    return self._state

  def _clear_run(self) -> None:
    self.history.clear()
    self.detector = self._create_detector()
    self._report = None
    self.last_tick_steps = 0

  # Stepping

  def tick(self, elapsed: float) -> TickResult:
    """Advance by the fixed steps owed for ``elapsed`` wall-clock seconds."""
    self.last_tick_steps = self.clock.advance(elapsed, self._step_once)
    finished = self.last_tick_steps > 0 and self._state.finished
    return TickResult(self._state, finished)

  def _step_once(self) -> bool:
    self._state = step(self._state, self.params, self.config.dt,
                       self.config.rest_velocity_threshold)
    self.detector.observe(self._state.v)
    self.history.record(self._state.t, self._state.y, self._state.v)
    if not self._state.finished:
      return False
    self._report = build_report(self._state, self.history, self.params,
                                self.detector.estimate, self.heuristic)
    logger.info("Run finished at t=%.3f after %d bounces", self._state.t, self._state.bounces)
    return True

  # Observation

  def get_history(self) -> tuple[HistorySample, ...]:
    return self.history.samples()

  def get_report(self) -> Optional[AnalysisReport]:
    return self._report
