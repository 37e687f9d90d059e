"""Base class for initial-condition presets."""

from abc import ABC, abstractmethod
from typing import Optional
from protodisk.physics.state import ParticleState
from protodisk.utils.reproducibility import make_rng


class Preset(ABC):
    """Abstract base class for initial-condition presets."""

    def __init__(self, n_particles: int = 1000, seed: Optional[int] = None, rng=None):
        """Initialize preset.

        Args:
            n_particles: Number of particles
            seed: Random seed for reproducibility (ignored when ``rng`` is given)
            rng: Random source exposing ``random(size)``; defaults to a
                ``numpy.random.Generator`` seeded with ``seed``
        """
        self.n_particles = n_particles
        self.seed = seed
        self.rng = rng if rng is not None else make_rng(seed)

    @abstractmethod
    def generate(self) -> ParticleState:
        """Generate initial conditions.

        Returns:
            Freshly created ParticleState
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this preset."""
        pass
