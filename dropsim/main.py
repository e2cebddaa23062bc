#!/usr/bin/env python3
"""Headless runner: drive the engine with a fixed frame rate and print the analysis."""
from typing import Optional

from .cli_parser import create_argument_parser
from .config import EngineConfig, RunnerConfig
from .engine import SimulationEngine
from .error_handler import ErrorHandler
from .errors import SimulationError
from .output_handler import SimulationOutputHandler
from .scenarios import get_scenario


def run_headless(engine: SimulationEngine, height: float, velocity: float = 0.0,
                 frame_rate: float = 60.0, max_frames: int = 36000) -> int:
  """Start a run and tick it at ``frame_rate`` until it finishes.

  Returns the number of frames ticked. The run may still be going if
  ``max_frames`` ran out first.
  """
  engine.start(height, velocity)
  frame_time = 1.0 / frame_rate
  for frame in range(1, max_frames + 1):
    _, finished = engine.tick(frame_time)
    if finished:
      return frame
  return max_frames


def main(argv: Optional[list[str]] = None) -> int:
  args = create_argument_parser().parse_args(argv)
  error_handler = ErrorHandler(verbose=args.verbose)
  output = SimulationOutputHandler(verbose=args.verbose)

  try:
    runner_config = RunnerConfig.from_args(args)
    engine_config = EngineConfig.from_args(args)
    params = get_scenario(runner_config.scenario, drag_model=runner_config.drag_model,
                          restitution=runner_config.restitution, mass=runner_config.mass)
  except SimulationError as e:
    return error_handler.handle_error(e, critical=False)

  engine = SimulationEngine(params, engine_config)
  output.print_simulation_start(runner_config.scenario, params,
                                runner_config.height, runner_config.velocity)

  try:
    frames = run_headless(engine, runner_config.height, runner_config.velocity,
                          runner_config.frame_rate, runner_config.max_frames)
  except SimulationError as e:
    return error_handler.handle_error(e, critical=False)

  report = engine.get_report()
  if report is None:
    output.print_incomplete(engine.state, frames)
    return 2
  output.print_report(report)
  return 0


if __name__ == "__main__":
  raise SystemExit(main())
