"""Exceptions and parameter validation for the drop simulation engine.

The numeric core never raises for physical edge cases (zero drag, zero
velocity, an unset terminal velocity); those are expressed as ``None``
results. Errors here are configuration mistakes made by the caller.
"""
import math


class SimulationError(Exception):
    """Base exception for simulation-related errors."""
    pass


class ConfigurationError(SimulationError):
    """Raised when configuration is invalid."""
    pass


class UnknownScenarioError(ConfigurationError):
    """Raised when a scenario name is not in the scenario table."""

    def __init__(self, name: str, known: list[str]):
        self.name = name
        self.known = known
        super().__init__(
            f"Unknown scenario '{name}'. Valid scenarios: {', '.join(known)}"
        )


def validate_positive_number(value: float, parameter_name: str) -> None:
    """Validate that a number is positive and finite.

    Args:
        value: The value to validate
        parameter_name: Name of the parameter for error messages

    Raises:
        ConfigurationError: If value is not positive
    """
    if value is None or not math.isfinite(value) or value <= 0:
        raise ConfigurationError(f"{parameter_name} must be positive, got {value}")


def validate_non_negative_number(value: float, parameter_name: str) -> None:
    """Validate that a number is finite and not below zero.

    Raises:
        ConfigurationError: If value is negative or not finite
    """
    if value is None or not math.isfinite(value) or value < 0:
        raise ConfigurationError(f"{parameter_name} must be non-negative, got {value}")


def validate_unit_interval(value: float, parameter_name: str) -> None:
    """Validate that a number lies in the closed interval [0, 1].

    Raises:
        ConfigurationError: If value is outside [0, 1]
    """
    if value is None or not math.isfinite(value) or not 0.0 <= value <= 1.0:
        raise ConfigurationError(f"{parameter_name} must be within [0, 1], got {value}")
