"""Configuration classes for the drop simulation engine.

- PhysicsConstants: tunable thresholds and defaults shared across modules
- EngineConfig: per-engine settings (timestep, history size, detector tuning)
- RunnerConfig: settings for the headless command-line runner
"""
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigurationError, validate_non_negative_number, validate_positive_number
from .types import DragModel, TerminalVelocityHeuristic


@dataclass(frozen=True)
class PhysicsConstants:
    """Physics engine constants."""
    DEFAULT_TIMESTEP: float = 1.0 / 120.0  # 120 Hz
    HISTORY_CAPACITY: int = 1200
    REST_VELOCITY_THRESHOLD: float = 0.05  # m/s, tunable, not a physical law
    STABILITY_DELTA: float = 0.01
    STABILITY_WINDOW: int = 50
    ASYMPTOTE_ABS_TOLERANCE: float = 0.5
    ASYMPTOTE_REL_TOLERANCE: float = 0.1
    DEFAULT_MAX_STEPS_PER_TICK: int = 120  # one simulated second at 120 Hz
    DEFAULT_DROP_HEIGHT: float = 5.0
    DEFAULT_RESTITUTION: float = 0.8
    DEFAULT_MASS: float = 1.0
    DEFAULT_FRAME_RATE: float = 60.0
    DEFAULT_MAX_FRAMES: int = 36000


@dataclass
class EngineConfig:
    """Configuration for a SimulationEngine instance."""
    dt: float = PhysicsConstants.DEFAULT_TIMESTEP
    history_capacity: int = PhysicsConstants.HISTORY_CAPACITY
    rest_velocity_threshold: float = PhysicsConstants.REST_VELOCITY_THRESHOLD
    max_steps_per_tick: Optional[int] = PhysicsConstants.DEFAULT_MAX_STEPS_PER_TICK
    heuristic: TerminalVelocityHeuristic = TerminalVelocityHeuristic.STABILITY_WINDOW
    default_height: float = PhysicsConstants.DEFAULT_DROP_HEIGHT
    stability_delta: float = PhysicsConstants.STABILITY_DELTA
    stability_window: int = PhysicsConstants.STABILITY_WINDOW
    asymptote_abs_tolerance: float = PhysicsConstants.ASYMPTOTE_ABS_TOLERANCE
    asymptote_rel_tolerance: float = PhysicsConstants.ASYMPTOTE_REL_TOLERANCE

    def __post_init__(self):
        validate_positive_number(self.dt, "dt")
        validate_positive_number(self.history_capacity, "history_capacity")
        validate_non_negative_number(self.rest_velocity_threshold, "rest_velocity_threshold")
        validate_non_negative_number(self.default_height, "default_height")
        validate_non_negative_number(self.stability_delta, "stability_delta")
        validate_non_negative_number(self.stability_window, "stability_window")
        validate_non_negative_number(self.asymptote_abs_tolerance, "asymptote_abs_tolerance")
        validate_non_negative_number(self.asymptote_rel_tolerance, "asymptote_rel_tolerance")
        if self.max_steps_per_tick is not None and self.max_steps_per_tick < 1:
            raise ConfigurationError(
                f"max_steps_per_tick must be at least 1 or None, got {self.max_steps_per_tick}"
            )
        if not isinstance(self.heuristic, TerminalVelocityHeuristic):
            self.heuristic = TerminalVelocityHeuristic(self.heuristic)

    @classmethod
    def from_args(cls, args) -> 'EngineConfig':
        """Create config from command-line arguments."""
        return cls(
            dt=args.dt,
            max_steps_per_tick=args.max_steps_per_tick or None,
            heuristic=TerminalVelocityHeuristic(args.heuristic),
            default_height=args.height,
        )


@dataclass
class RunnerConfig:
    """Configuration for the headless runner."""
    scenario: str
    drag_model: DragModel
    restitution: float
    mass: float
    height: float
    velocity: float
    frame_rate: float = PhysicsConstants.DEFAULT_FRAME_RATE
    max_frames: int = PhysicsConstants.DEFAULT_MAX_FRAMES
    verbose: bool = False

    @classmethod
    def from_args(cls, args) -> 'RunnerConfig':
        """Create config from command-line arguments."""
        validate_positive_number(args.frame_rate, "frame_rate")
        validate_positive_number(args.max_frames, "max_frames")
        return cls(
            scenario=args.scenario,
            drag_model=DragModel(args.drag_model),
            restitution=args.restitution,
            mass=args.mass,
            height=args.height,
            velocity=args.velocity,
            frame_rate=args.frame_rate,
            max_frames=args.max_frames,
            verbose=args.verbose,
        )
