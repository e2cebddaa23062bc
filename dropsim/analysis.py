"""Post-run analysis of a finished drop."""
from dataclasses import asdict, dataclass
from typing import Any, Optional

from .drag import estimate_drag_coefficient, theoretical_terminal_velocity
from .history import HistoryBuffer
from .types import ScenarioParams, SimulationState, TerminalVelocityHeuristic


@dataclass(frozen=True)
class AnalysisReport:
    """Summary of one run; None marks a quantity that is undefined."""
    total_time: float
    impact_velocity: float
    theoretical_terminal_velocity: Optional[float]
    simulated_terminal_velocity: Optional[float]
    estimated_drag_coefficient: Optional[float]
    drag_model_name: str
    bounce_count: int
    heuristic: str

    @property
    def relative_error(self) -> Optional[float]:
        """|simulated - theoretical| / theoretical terminal velocity."""
        if self.theoretical_terminal_velocity is None or self.simulated_terminal_velocity is None:
            return None
        return (abs(self.simulated_terminal_velocity - self.theoretical_terminal_velocity)
                / self.theoretical_terminal_velocity)

    def to_dict(self) -> dict[str, Any]:
        result = asdict(self)
        result['relative_error'] = self.relative_error
        return result


def build_report(state: SimulationState, history: HistoryBuffer, params: ScenarioParams,
                 terminal_velocity: Optional[float],
                 heuristic: TerminalVelocityHeuristic) -> AnalysisReport:
    """Summarise a run from its final state, history and terminal velocity estimate.

    Pure function of its inputs, so rebuilding from the same run gives an
    equal report.
    """
    latest = history.latest
    total_time = latest.t if latest is not None else state.t

    # v is clamped to zero on the resting step; the contact speed survives in impact_speed
    impact_velocity = state.impact_speed if state.bounces else abs(state.v)

    return AnalysisReport(
        total_time=total_time,
        impact_velocity=impact_velocity,
        theoretical_terminal_velocity=theoretical_terminal_velocity(
            params.gravity, params.drag_coefficient, params.mass, params.drag_model),
        simulated_terminal_velocity=terminal_velocity,
        estimated_drag_coefficient=estimate_drag_coefficient(
            terminal_velocity, params.gravity, params.mass, params.drag_model),
        drag_model_name=params.drag_model.value,
        bounce_count=state.bounces,
        heuristic=heuristic.value,
    )
