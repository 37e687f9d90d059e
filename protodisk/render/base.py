"""Base renderer interface."""

from abc import ABC, abstractmethod
from typing import Optional
import numpy as np


class Renderer(ABC):
    """Abstract base class for render collaborators.

    Renderers receive read-only views of the particle buffers once per tick,
    after the integrator has finished. They must not mutate them.
    """

    @abstractmethod
    def render(self, positions: np.ndarray, velocities: Optional[np.ndarray] = None):
        """Render current frame.

        Args:
            positions: Particle positions (n, 3)
            velocities: Optional velocities (n, 3)
        """
        pass

    @abstractmethod
    def close(self):
        """Close the renderer."""
        pass
