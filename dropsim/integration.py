"""Semi-implicit Euler integration for a single body above a ground plane.

This module advances the falling body by one fixed timestep. We use
semi-implicit Euler (also known as symplectic Euler), which updates the
velocity first and then uses the new velocity to update the position.
The bounce behaviour depends on that ordering, so it must not be swapped
for explicit Euler.

Key concepts:
- Height (y): metres above the ground plane, which sits at y = 0
- Velocity (v): positive toward the ground, so a falling body has v > 0
- Ground contact: any step ending at y <= 0 is clamped to the ground and
  the body is sent back up with speed |v| * restitution
- Rest: a bounce that leaves less than the rest threshold of speed ends
  the run; the velocity is clamped to zero and the state marked finished

The bounce deliberately reflects the magnitude of the velocity rather than
its sign: a body that reaches the ground while already moving up still
leaves the ground upward.
"""
from .config import PhysicsConstants
from .drag import acceleration
from .types import ScenarioParams, SimulationState


def step(state: SimulationState, params: ScenarioParams, dt: float,
         rest_threshold: float = PhysicsConstants.REST_VELOCITY_THRESHOLD) -> SimulationState:
  """Advance the body by one fixed timestep.

  Args:
    state: Current body state
    params: Scenario parameters for this run
    dt: Time step in seconds
    rest_threshold: Post-bounce speed below which the body is at rest

  Returns:
    New state; the input state is not modified

  Integration steps:
    1. dv = a(v) * dt using the scenario's drag model
    2. v' = v + dv
    3. y' = y - v' * dt (semi-implicit: uses the updated velocity)
    4. If y' <= 0: y' = 0, v' = -|v'| * restitution
    5. If that bounce left |v'| < rest_threshold: v' = 0, run finished
  """
  dv = acceleration(state.v, params.gravity, params.drag_coefficient,
                    params.mass, params.drag_model) * dt
  v_new = state.v + dv
  y_new = state.y - v_new * dt
  t_new = state.t + dt

  if y_new > 0.0:
    return state._replace(t=t_new, y=y_new, v=v_new)

  impact_speed = abs(v_new)
  y_new = 0.0
  v_new = -impact_speed * params.restitution
  bounces = state.bounces + 1

  if abs(v_new) < rest_threshold:
    return state._replace(t=t_new, y=y_new, v=0.0, running=False, paused=False,
                          finished=True, bounces=bounces, impact_speed=impact_speed)

  return state._replace(t=t_new, y=y_new, v=v_new, bounces=bounces,
                        impact_speed=impact_speed)
