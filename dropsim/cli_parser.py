import argparse

from .config import PhysicsConstants
from .scenarios import DEFAULT_SCENARIO, list_scenarios
from .types import DragModel, TerminalVelocityHeuristic


def create_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Drop simulation - falling body with drag and ground bounces",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=_get_usage_examples()
    )

    _add_scenario_arguments(parser)
    _add_simulation_arguments(parser)
    _add_output_arguments(parser)

    return parser


def _get_usage_examples() -> str:
    return """
Usage Examples:
    # Drop on Earth from 5 m with quadratic drag (defaults)
    python3 run.py

    # Linear drag on Mars, detect terminal velocity by asymptote proximity
    python3 run.py --scenario Mars --drag-model linear --heuristic asymptote

    # Tall drop into the dense fluid with a soft bounce
    python3 run.py --scenario Water --height 50 --restitution 0.3
"""


def _add_scenario_arguments(parser: argparse.ArgumentParser) -> None:
    scenario_group = parser.add_argument_group('Scenario Options')

    scenario_group.add_argument(
        "--scenario",
        type=str,
        default=DEFAULT_SCENARIO,
        help=f"Scenario preset: {', '.join(list_scenarios())} (default: {DEFAULT_SCENARIO})"
    )

    scenario_group.add_argument(
        "--drag-model",
        type=str,
        default=DragModel.QUADRATIC.value,
        choices=[m.value for m in DragModel],
        help="Drag law (default: quadratic)"
    )

    scenario_group.add_argument(
        "--restitution",
        type=float,
        default=PhysicsConstants.DEFAULT_RESTITUTION,
        help=f"Fraction of impact speed kept after a bounce (default: {PhysicsConstants.DEFAULT_RESTITUTION})"
    )

    scenario_group.add_argument(
        "--mass",
        type=float,
        default=PhysicsConstants.DEFAULT_MASS,
        help=f"Body mass in kg (default: {PhysicsConstants.DEFAULT_MASS})"
    )


def _add_simulation_arguments(parser: argparse.ArgumentParser) -> None:
    simulation_group = parser.add_argument_group('Simulation Options')

    simulation_group.add_argument(
        "--height",
        type=float,
        default=PhysicsConstants.DEFAULT_DROP_HEIGHT,
        help=f"Initial height in metres (default: {PhysicsConstants.DEFAULT_DROP_HEIGHT})"
    )

    simulation_group.add_argument(
        "--velocity",
        type=float,
        default=0.0,
        help="Initial velocity in m/s, positive toward the ground (default: 0)"
    )

    simulation_group.add_argument(
        "--dt",
        type=float,
        default=PhysicsConstants.DEFAULT_TIMESTEP,
        help="Fixed timestep in seconds (default: 1/120)"
    )

    simulation_group.add_argument(
        "--heuristic",
        type=str,
        default=TerminalVelocityHeuristic.STABILITY_WINDOW.value,
        choices=[h.value for h in TerminalVelocityHeuristic],
        help="Terminal velocity detection heuristic (default: stability)"
    )

    simulation_group.add_argument(
        "--frame-rate",
        type=float,
        default=PhysicsConstants.DEFAULT_FRAME_RATE,
        help=f"Simulated display refresh rate driving the ticks (default: {PhysicsConstants.DEFAULT_FRAME_RATE:g})"
    )

    simulation_group.add_argument(
        "--max-frames",
        type=int,
        default=PhysicsConstants.DEFAULT_MAX_FRAMES,
        help=f"Give up after this many ticks (default: {PhysicsConstants.DEFAULT_MAX_FRAMES})"
    )

    simulation_group.add_argument(
        "--max-steps-per-tick",
        type=int,
        default=PhysicsConstants.DEFAULT_MAX_STEPS_PER_TICK,
        help="Cap on catch-up steps per tick, 0 for no cap "
             f"(default: {PhysicsConstants.DEFAULT_MAX_STEPS_PER_TICK})"
    )


def _add_output_arguments(parser: argparse.ArgumentParser) -> None:
    output_group = parser.add_argument_group('Output Options')

    output_group.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
