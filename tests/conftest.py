"""Test fixtures for drop simulation tests.

Provides reusable scenarios and engines for unit and integration tests.
"""
import pytest
from dropsim.config import EngineConfig
from dropsim.engine import SimulationEngine
from dropsim.scenarios import get_scenario
from dropsim.types import DragModel, ScenarioParams, TerminalVelocityHeuristic


@pytest.fixture
def earth_quadratic():
  """Earth, quadratic drag: g=9.81, k=0.5, m=1, e=0.8 (vt = sqrt(19.62) ~ 4.43 m/s)."""
  return get_scenario('Earth', drag_model=DragModel.QUADRATIC)


@pytest.fixture
def earth_linear():
  """Earth, linear drag: vt = m*g/k = 19.62 m/s."""
  return get_scenario('Earth', drag_model=DragModel.LINEAR)


@pytest.fixture
def free_fall():
  """No drag at all; the detector must stay inactive."""
  return ScenarioParams(gravity=9.81, drag_coefficient=0.0, mass=1.0, restitution=0.8)


@pytest.fixture
def engine(earth_quadratic):
  """Engine on Earth with the stability-window heuristic and the default step cap."""
  return SimulationEngine(earth_quadratic, EngineConfig())


@pytest.fixture
def asymptote_engine(earth_quadratic):
  """Engine on Earth detecting terminal velocity by asymptote proximity."""
  config = EngineConfig(heuristic=TerminalVelocityHeuristic.ASYMPTOTE_PROXIMITY)
  return SimulationEngine(earth_quadratic, config)


def _run_to_rest(engine, height, velocity=0.0, frame_time=1.0 / 60.0, max_frames=100_000):
  """Tick ``engine`` until its run finishes; returns the number of ticks."""
  engine.start(height, velocity)
  for frame in range(1, max_frames + 1):
    _, finished = engine.tick(frame_time)
    if finished:
      return frame
  raise AssertionError(f"run did not finish within {max_frames} frames")


@pytest.fixture
def run_to_rest():
  return _run_to_rest
