"""Leapfrog integrator (kick-drift-kick, O(h^2) accuracy)."""

from protodisk.physics.central_gravity import central_acceleration
from protodisk.physics.integrators.base import Integrator
from protodisk.physics.state import ParticleState


class LeapfrogIntegrator(Integrator):
    """Kick-drift-kick leapfrog, equivalent to velocity Verlet.

    1. v_half = v + 0.5*a(x)*dt
    2. x_new = x + v_half*dt
    3. v_new = v_half + 0.5*a(x_new)*dt

    Second order and symplectic. Costs two acceleration evaluations per step.
    """

    @property
    def name(self) -> str:
        return "leapfrog"

    @property
    def order(self) -> int:
        return 2

    def step(self, state: ParticleState, G: float, M: float, dt: float) -> None:
        self._check_timestep(dt)

        positions = state.disk_positions
        velocities = state.disk_velocities

        accelerations, mask = central_acceleration(positions, G, M)
        velocities[mask] += accelerations[mask] * (0.5 * dt)
        positions[mask] += velocities[mask] * dt

        # A drift could in principle land on the origin; skip the second kick there
        accelerations_new, mask_new = central_acceleration(positions, G, M)
        mask_new &= mask
        velocities[mask_new] += accelerations_new[mask_new] * (0.5 * dt)

        state.needs_update = True
