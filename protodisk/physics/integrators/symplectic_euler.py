"""Semi-implicit (symplectic) Euler integrator."""

from protodisk.physics.central_gravity import central_acceleration
from protodisk.physics.integrators.base import Integrator
from protodisk.physics.state import ParticleState


class SemiImplicitEulerIntegrator(Integrator):
    """Symplectic Euler - velocity first, then position with the new velocity.

    v_new = v + a(x)*dt
    x_new = x + v_new*dt

    First order, but its energy error stays bounded on Keplerian orbits
    instead of growing like explicit Euler. Default integrator.
    """

    @property
    def name(self) -> str:
        return "symplectic_euler"

    @property
    def order(self) -> int:
        return 1

    def step(self, state: ParticleState, G: float, M: float, dt: float) -> None:
        self._check_timestep(dt)

        positions = state.disk_positions
        velocities = state.disk_velocities

        # Particles at the origin (mask False) are skipped entirely
        accelerations, mask = central_acceleration(positions, G, M)

        velocities[mask] += accelerations[mask] * dt
        positions[mask] += velocities[mask] * dt

        state.needs_update = True
