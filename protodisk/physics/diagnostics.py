"""Diagnostics for test particles in a central potential."""

import numpy as np
from typing import Dict, Tuple
from protodisk.physics.state import ParticleState


class Diagnostics:
    """Per-unit-mass energy and angular momentum of the disk group.

    Particles are massless tracers, so every quantity is summed over specific
    (per unit mass) values. Protostar particles and disk particles sitting at
    the origin are excluded, matching the integrator which never moves them.
    """

    def __init__(self, G: float, M: float):
        """Initialize diagnostics.

        Args:
            G: Gravitational constant (must match the integrator)
            M: Central mass
        """
        self.G = G
        self.M = M

    @staticmethod
    def _active(state: ParticleState) -> Tuple[np.ndarray, np.ndarray]:
        positions = np.asarray(state.disk_positions, dtype=np.float64)
        velocities = np.asarray(state.disk_velocities, dtype=np.float64)
        distances = np.linalg.norm(positions, axis=1)
        mask = distances > 0
        return positions[mask], velocities[mask]

    def compute_energies(self, state: ParticleState) -> Tuple[float, float, float]:
        """Compute kinetic, potential, and total specific energy.

        K = 0.5 * sum |v_i|^2
        U = -G * M * sum 1 / |r_i|

        Returns:
            Tuple of (kinetic_energy, potential_energy, total_energy)
        """
        positions, velocities = self._active(state)
        if positions.shape[0] == 0:
            return 0.0, 0.0, 0.0

        K = 0.5 * np.sum(velocities ** 2)
        U = -self.G * self.M * np.sum(1.0 / np.linalg.norm(positions, axis=1))
        return float(K), float(U), float(K + U)

    def compute_angular_momentum_z(self, state: ParticleState) -> float:
        """Total specific angular momentum about the spin axis: sum(x*vy - y*vx)."""
        positions, velocities = self._active(state)
        Lz = np.sum(positions[:, 0] * velocities[:, 1] - positions[:, 1] * velocities[:, 0])
        return float(Lz)

    def compute_bound_fraction(self, state: ParticleState) -> float:
        """Fraction of active disk particles with negative specific energy."""
        positions, velocities = self._active(state)
        if positions.shape[0] == 0:
            return 0.0
        e_spec = 0.5 * np.sum(velocities ** 2, axis=1) - self.G * self.M / np.linalg.norm(positions, axis=1)
        return float(np.mean(e_spec < 0.0))

    def compute_radius_stats(self, state: ParticleState) -> Dict[str, float]:
        """Minimum, median and maximum 3-D radius of the disk group."""
        positions = np.asarray(state.disk_positions, dtype=np.float64)
        if positions.shape[0] == 0:
            return {"r_min": 0.0, "r_med": 0.0, "r_max": 0.0}
        radii = np.linalg.norm(positions, axis=1)
        return {
            "r_min": float(np.min(radii)),
            "r_med": float(np.median(radii)),
            "r_max": float(np.max(radii)),
        }


def relative_drift(initial: float, current: float) -> float:
    """Relative change |current - initial| / |initial| (0 when initial is 0)."""
    if initial == 0:
        return 0.0
    return abs(current - initial) / abs(initial)
