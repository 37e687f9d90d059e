"""Explicit Euler integrator (baseline, O(h) accuracy)."""

from protodisk.physics.central_gravity import central_acceleration
from protodisk.physics.integrators.base import Integrator
from protodisk.physics.state import ParticleState


class ExplicitEulerIntegrator(Integrator):
    """Explicit Euler method - position advanced with the old velocity.

    Energy drifts steadily on orbits. Kept for baseline comparisons.
    """

    @property
    def name(self) -> str:
        return "euler"

    @property
    def order(self) -> int:
        return 1

    def step(self, state: ParticleState, G: float, M: float, dt: float) -> None:
        """Euler step: v_new = v + a*dt, x_new = x + v*dt."""
        self._check_timestep(dt)

        positions = state.disk_positions
        velocities = state.disk_velocities

        accelerations, mask = central_acceleration(positions, G, M)
        old_velocities = velocities[mask]

        velocities[mask] += accelerations[mask] * dt
        positions[mask] += old_velocities * dt

        state.needs_update = True
