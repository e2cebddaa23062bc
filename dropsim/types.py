from dataclasses import dataclass
from enum import Enum, IntEnum
import math
from typing import NamedTuple

from .errors import validate_positive_number, validate_unit_interval


class DragModel(Enum):
  LINEAR = "linear"
  QUADRATIC = "quadratic"


class TerminalVelocityHeuristic(Enum):
  STABILITY_WINDOW = "stability"
  ASYMPTOTE_PROXIMITY = "asymptote"


class RunStatus(IntEnum):
  STOPPED = 0
  RUNNING = 1
  PAUSED = 2
  FINISHED = 3


def normalize_drag_coefficient(k: float | None) -> float:
  """Map a missing, NaN or non-positive drag coefficient to 0.0 (free fall)."""
  if k is None:
    return 0.0
  k = float(k)
  if math.isnan(k) or k <= 0.0:
    return 0.0
  return k


@dataclass(frozen=True)
class ScenarioParams:
  """Physical parameters of one run. Immutable; changing them means a reset."""
  gravity: float
  drag_coefficient: float = 0.0
  mass: float = 1.0
  restitution: float = 0.8
  drag_model: DragModel = DragModel.QUADRATIC

  def __post_init__(self):
    validate_positive_number(self.gravity, "gravity")
    validate_positive_number(self.mass, "mass")
    validate_unit_interval(self.restitution, "restitution")
    if not isinstance(self.drag_model, DragModel):
      object.__setattr__(self, "drag_model", DragModel(self.drag_model))
    object.__setattr__(self, "drag_coefficient", normalize_drag_coefficient(self.drag_coefficient))

  @property
  def has_drag(self) -> bool:
    return self.drag_coefficient > 0.0


class SimulationState(NamedTuple):
  """Snapshot of the body. `v` is positive toward the ground."""
  t: float = 0.0
  y: float = 0.0
  v: float = 0.0
  running: bool = False
  paused: bool = False
  finished: bool = False
  bounces: int = 0
  impact_speed: float = 0.0


class HistorySample(NamedTuple):
  t: float
  y: float
  v: float
