from .types import (DragModel, HistorySample, RunStatus, ScenarioParams, SimulationState,
                    TerminalVelocityHeuristic)
from .engine import SimulationEngine, TickResult
from .analysis import AnalysisReport
from .config import EngineConfig, PhysicsConstants
from .errors import ConfigurationError, SimulationError, UnknownScenarioError
from .scenarios import get_scenario, list_scenarios

__all__ = ['DragModel', 'HistorySample', 'RunStatus', 'ScenarioParams', 'SimulationState',
           'TerminalVelocityHeuristic', 'SimulationEngine', 'TickResult', 'AnalysisReport',
           'EngineConfig', 'PhysicsConstants', 'ConfigurationError', 'SimulationError',
           'UnknownScenarioError', 'get_scenario', 'list_scenarios']
