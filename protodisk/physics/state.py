"""Particle buffers owned by the simulation core."""

import numpy as np


class ParticleState:
    """Positions and velocities of all particles, stored column-wise.

    Indices ``[0, protostar_count)`` are the protostar group and stay at the
    origin with zero velocity. Indices ``[protostar_count, particle_count)``
    are the disk group. The partition is fixed for the lifetime of the state.
    """

    def __init__(self, positions, velocities, protostar_count: int):
        """Initialize particle state.

        Args:
            positions: Array of shape (n, 3)
            velocities: Array of shape (n, 3)
            protostar_count: Number of leading particles in the protostar group
        """
        positions = np.ascontiguousarray(positions)
        velocities = np.ascontiguousarray(velocities)

        if positions.ndim != 2 or positions.shape[1] != 3:
            raise ValueError(f"positions must have shape (n, 3), got {positions.shape}")
        if velocities.shape != positions.shape:
            raise ValueError(
                f"velocities shape {velocities.shape} does not match positions {positions.shape}"
            )
        if not 0 <= protostar_count <= positions.shape[0]:
            raise ValueError(
                f"protostar_count must be in [0, {positions.shape[0]}], got {protostar_count}"
            )

        self.positions = positions
        self.velocities = velocities
        self.protostar_count = int(protostar_count)
        # Set by integrators, cleared once the render collaborator has been told
        self.needs_update = False

    @property
    def particle_count(self) -> int:
        return self.positions.shape[0]

    @property
    def disk_count(self) -> int:
        return self.particle_count - self.protostar_count

    @property
    def dtype(self):
        return self.positions.dtype

    @property
    def disk_positions(self) -> np.ndarray:
        """Writable view of the disk-group positions."""
        return self.positions[self.protostar_count:]

    @property
    def disk_velocities(self) -> np.ndarray:
        """Writable view of the disk-group velocities."""
        return self.velocities[self.protostar_count:]

    @property
    def protostar_positions(self) -> np.ndarray:
        return self.positions[:self.protostar_count]

    @property
    def protostar_velocities(self) -> np.ndarray:
        return self.velocities[:self.protostar_count]

    def positions_view(self) -> np.ndarray:
        """Read-only view of the live position buffer for renderers."""
        view = self.positions.view()
        view.flags.writeable = False
        return view

    def velocities_view(self) -> np.ndarray:
        """Read-only view of the live velocity buffer for renderers."""
        view = self.velocities.view()
        view.flags.writeable = False
        return view

    def copy(self) -> "ParticleState":
        return ParticleState(self.positions.copy(), self.velocities.copy(), self.protostar_count)

    def __repr__(self) -> str:
        return (
            f"ParticleState(particle_count={self.particle_count}, "
            f"protostar_count={self.protostar_count}, dtype={self.dtype})"
        )
