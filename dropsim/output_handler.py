"""Output handling for the headless runner."""
from typing import Optional
import sys

from .analysis import AnalysisReport
from .types import ScenarioParams, SimulationState


def _format_optional(value: Optional[float], unit: str, precision: int = 3) -> str:
    if value is None:
        return "undefined"
    return f"{value:.{precision}f} {unit}".rstrip()


class SimulationOutputHandler:
    """Handles all output operations for simulation results."""

    def __init__(self, verbose: bool = True, stream=None):
        """Initialize the output handler.

        Args:
            verbose: Whether to print detailed output
            stream: Where results are written (default: stdout)
        """
        self.verbose = verbose
        self.stream = stream or sys.stdout

    def _print(self, text: str = "") -> None:
        print(text, file=self.stream)

    def print_simulation_start(self, scenario: str, params: ScenarioParams,
                               height: float, velocity: float) -> None:
        if not self.verbose:
            return

        self._print(f"Dropping on {scenario}: g={params.gravity} m/s^2, "
                    f"k={params.drag_coefficient}, m={params.mass} kg, "
                    f"e={params.restitution}, model={params.drag_model.value}")
        self._print(f"Initial height {height} m, initial velocity {velocity} m/s")

    def print_report(self, report: AnalysisReport) -> None:
        """Print the analysis summary of a finished run."""
        self._print("\nSimulation Complete!")
        self._print(f"Drag model:                    {report.drag_model_name}")
        self._print(f"Terminal velocity heuristic:   {report.heuristic}")
        self._print(f"Total time:                    {report.total_time:.3f} s")
        self._print(f"Bounces:                       {report.bounce_count}")
        self._print(f"Impact velocity:               {report.impact_velocity:.3f} m/s")
        self._print("Theoretical terminal velocity: "
                    f"{_format_optional(report.theoretical_terminal_velocity, 'm/s')}")
        self._print("Simulated terminal velocity:   "
                    f"{_format_optional(report.simulated_terminal_velocity, 'm/s')}")
        self._print("Estimated drag coefficient:    "
                    f"{_format_optional(report.estimated_drag_coefficient, '', precision=4)}")
        if report.relative_error is not None:
            self._print(f"Terminal velocity error:       {report.relative_error * 100:.1f} %")

    def print_incomplete(self, state: SimulationState, frames: int) -> None:
        """Print a warning for a run that never came to rest."""
        print(f"Warning: body still moving after {frames} frames "
              f"(t={state.t:.3f} s, y={state.y:.3f} m, v={state.v:.3f} m/s)",
              file=sys.stderr)
