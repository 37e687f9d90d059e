"""Abstract base class for numerical integrators."""

from abc import ABC, abstractmethod
from protodisk.physics.state import ParticleState


class Integrator(ABC):
    """Abstract interface for central-gravity integrators.

    Integrators advance only the disk group of a ``ParticleState`` and do so
    in place. Protostar particles are never touched.
    """

    @abstractmethod
    def step(self, state: ParticleState, G: float, M: float, dt: float) -> None:
        """Advance the disk group by one time step.

        Args:
            state: Particle state, mutated in place
            G: Gravitational constant
            M: Central mass
            dt: Time step (0 is a no-op)
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this integrator."""
        pass

    @property
    @abstractmethod
    def order(self) -> int:
        """Return the order of accuracy (1 for Euler variants, 2 for leapfrog)."""
        pass

    @staticmethod
    def _check_timestep(dt: float):
        if dt < 0:
            raise ValueError(f"Time step dt must be non-negative, got {dt}")
