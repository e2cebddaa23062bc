"""Named scenario presets.

Gravity in m/s^2, drag coefficient in the units of the selected drag model
(kg/s for linear, kg/m for quadratic).
"""
from typing import NamedTuple

from .config import PhysicsConstants
from .errors import UnknownScenarioError
from .types import DragModel, ScenarioParams


class ScenarioPreset(NamedTuple):
    name: str
    gravity: float
    drag_coefficient: float


SCENARIOS: dict[str, ScenarioPreset] = {
    preset.name: preset for preset in (
        ScenarioPreset("Earth", 9.81, 0.5),
        ScenarioPreset("Moon", 1.62, 0.0),     # no atmosphere
        ScenarioPreset("Mars", 3.71, 0.1),
        ScenarioPreset("Saturn", 10.44, 1.2),  # gas giant
        ScenarioPreset("Water", 9.81, 5.0),    # dense fluid
    )
}

DEFAULT_SCENARIO = "Earth"


def list_scenarios() -> list[str]:
    return list(SCENARIOS)


def find_preset(name: str) -> ScenarioPreset:
    """Case-insensitive lookup of a preset by name."""
    if name in SCENARIOS:
        return SCENARIOS[name]
    for key, preset in SCENARIOS.items():
        if key.lower() == str(name).strip().lower():
            return preset
    raise UnknownScenarioError(name, list_scenarios())


def get_scenario(name: str, drag_model: DragModel = DragModel.QUADRATIC,
                 restitution: float = PhysicsConstants.DEFAULT_RESTITUTION,
                 mass: float = PhysicsConstants.DEFAULT_MASS) -> ScenarioParams:
    """Build ScenarioParams for a named preset.

    Raises:
        UnknownScenarioError: If ``name`` is not a known preset
        ConfigurationError: If the overrides are out of range
    """
    preset = find_preset(name)
    return ScenarioParams(
        gravity=preset.gravity,
        drag_coefficient=preset.drag_coefficient,
        mass=mass,
        restitution=restitution,
        drag_model=drag_model,
    )
