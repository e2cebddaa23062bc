"""Drag models for a body falling under uniform gravity.

Velocity is measured positive toward the ground, so gravity contributes
``+g`` and drag always subtracts a term with the sign of ``v``:

- linear:    dv/dt = g - (k/m) * v
- quadratic: dv/dt = g - (k/m) * v * |v|

Setting ``k = 0`` reduces both to free fall. The same formulas give the
theoretical terminal velocity (where dv/dt = 0) and, inverted, the drag
coefficient implied by an observed terminal velocity.

All functions are pure and accept plain floats or numpy arrays for ``v``.
"""
import math

from .types import DragModel, normalize_drag_coefficient


def acceleration(v, g: float, k: float, m: float, model: DragModel):
  """Acceleration of the body at velocity ``v``.

  Args:
    v: Velocity (positive toward the ground), float or numpy array
    g: Gravitational acceleration magnitude (m/s^2)
    k: Drag coefficient; non-positive or undefined means no drag
    m: Mass of the body (kg), guaranteed positive by configuration
    model: Which drag law to apply

  Returns:
    dv/dt with the same shape as ``v``
  """
  k = normalize_drag_coefficient(k)
  if k == 0.0:
    return g + 0.0 * v
  if model is DragModel.LINEAR:
    return g - (k / m) * v
  if model is DragModel.QUADRATIC:
    return g - (k / m) * v * abs(v)
  raise ValueError(f"Unsupported drag model: {model}")


def theoretical_terminal_velocity(g: float, k: float, m: float, model: DragModel) -> float | None:
  """Steady-state fall speed, or None when there is no drag to balance gravity."""
  k = normalize_drag_coefficient(k)
  if k == 0.0:
    return None
  if model is DragModel.LINEAR:
    return m * g / k
  if model is DragModel.QUADRATIC:
    return math.sqrt(m * g / k)
  raise ValueError(f"Unsupported drag model: {model}")


def estimate_drag_coefficient(terminal_velocity: float | None, g: float, m: float,
                              model: DragModel) -> float | None:
  """Back-solve k from a measured terminal velocity.

  Returns None when the terminal velocity is unset or zero.
  """
  if terminal_velocity is None:
    return None
  vt = abs(terminal_velocity)
  if vt == 0.0 or not math.isfinite(vt):
    return None
  if model is DragModel.LINEAR:
    return m * g / vt
  if model is DragModel.QUADRATIC:
    return m * g / (vt * vt)
  raise ValueError(f"Unsupported drag model: {model}")
