"""Acceleration from the fixed central point mass."""

import numpy as np
from typing import Tuple


def central_acceleration(positions: np.ndarray, G: float, M: float) -> Tuple[np.ndarray, np.ndarray]:
    """Compute inverse-square attraction toward the origin.

    a = -(G * M / d^3) * r, with d = |r| the full 3-D distance.

    Particles sitting exactly at the origin have no defined force direction;
    their acceleration is zero and they are excluded from ``mask``.

    Args:
        positions: Array of shape (n, 3)
        G: Gravitational constant
        M: Central mass

    Returns:
        Tuple of (accelerations (n, 3), mask (n,) of particles with d > 0)
    """
    distances = np.sqrt(np.sum(np.square(positions), axis=1))
    mask = distances > 0

    factor = np.zeros_like(distances)
    d = distances[mask]
    factor[mask] = -(G * M) / (d * d * d)

    accelerations = factor[:, np.newaxis] * positions
    return accelerations.astype(positions.dtype, copy=False), mask
