"""Protoplanetary disk preset: collapsed protostar plus a Keplerian disk."""

import math
from typing import Optional
import numpy as np
from protodisk.physics.parameters import (
    PhysicalParameters,
    DEFAULT_G,
    DEFAULT_CENTRAL_MASS,
    DEFAULT_MAX_RADIUS,
    DEFAULT_PROTOSTAR_FRACTION,
    DEFAULT_THICKNESS,
)
from protodisk.physics.sampling import random_points_in_sphere
from protodisk.physics.state import ParticleState
from protodisk.presets.base import Preset
from protodisk.utils.reproducibility import make_rng


def protostar_count_for(particle_count: int, protostar_fraction: float) -> int:
    """Number of particles collapsed into the protostar: floor(N * f)."""
    return int(math.floor(particle_count * protostar_fraction))


def keplerian_velocities(
    positions: np.ndarray,
    G: float,
    M: float,
    rng,
    thickness: float = DEFAULT_THICKNESS,
) -> np.ndarray:
    """Circular-orbit velocities about the z-axis for disk particles.

    Speed is sqrt(G*M/rho) where rho = sqrt(x^2 + y^2) is the planar radius,
    direction is (-y, x, 0)/rho (counter-clockwise). A vertical component
    (u - 0.5) * speed * thickness, with u uniform in [0, 1), gives the disk
    its thickness. Particles on the spin axis (rho == 0) get zero velocity.

    Args:
        positions: Disk positions (n, 3)
        G: Gravitational constant
        M: Central mass
        rng: Random source exposing ``random(size)``
        thickness: Vertical spread as a fraction of orbital speed

    Returns:
        Velocities (n, 3) in float64
    """
    n = positions.shape[0]
    x = positions[:, 0]
    y = positions[:, 1]
    rho = np.sqrt(x * x + y * y)

    # One draw per particle keeps the random stream independent of geometry
    u = np.asarray(rng.random(n), dtype=np.float64)

    velocities = np.zeros((n, 3), dtype=np.float64)
    on_axis = rho == 0
    off_axis = ~on_axis
    if not np.any(off_axis):
        return velocities

    rho_safe = rho[off_axis]
    speed = np.sqrt(G * M / rho_safe)

    velocities[off_axis, 0] = -y[off_axis] * speed / rho_safe
    velocities[off_axis, 1] = x[off_axis] * speed / rho_safe
    velocities[off_axis, 2] = (u[off_axis] - 0.5) * speed * thickness
    return velocities


def generate_initial_conditions(
    particle_count: int,
    protostar_fraction: float = DEFAULT_PROTOSTAR_FRACTION,
    max_radius: float = DEFAULT_MAX_RADIUS,
    G: float = DEFAULT_G,
    M: float = DEFAULT_CENTRAL_MASS,
    rng=None,
    thickness: float = DEFAULT_THICKNESS,
    dtype=np.float64,
) -> ParticleState:
    """Place particles for a protoplanetary disk.

    The first floor(particle_count * protostar_fraction) particles sit at the
    origin with zero velocity. The rest are sampled uniformly from the sphere
    of radius ``max_radius`` and given Keplerian tangential velocities.

    Args:
        particle_count: Total number of particles (non-negative)
        protostar_fraction: Fraction collapsed into the protostar, in [0, 1]
        max_radius: Sampling radius
        G: Gravitational constant
        M: Central mass
        rng: Random source; a fresh unseeded ``numpy.random.Generator`` if None
        thickness: Vertical velocity spread as a fraction of orbital speed
        dtype: Floating dtype of the returned buffers

    Returns:
        ParticleState satisfying the protostar/disk partition invariants

    Raises:
        ValueError: On invalid configuration
    """
    if isinstance(particle_count, bool) or not isinstance(particle_count, (int, np.integer)):
        raise ValueError(f"particle_count must be an integer, got {particle_count!r}")
    if particle_count < 0:
        raise ValueError(f"particle_count must be non-negative, got {particle_count}")
    if not 0.0 <= protostar_fraction <= 1.0:
        raise ValueError(f"protostar_fraction must be in [0, 1], got {protostar_fraction}")
    if not max_radius > 0:
        raise ValueError(f"max_radius must be positive, got {max_radius}")
    if not G > 0:
        raise ValueError(f"G must be positive, got {G}")
    if not M > 0:
        raise ValueError(f"Central mass M must be positive, got {M}")
    if not thickness >= 0:
        raise ValueError(f"thickness must be non-negative, got {thickness}")

    if rng is None:
        rng = make_rng()

    protostar_count = protostar_count_for(int(particle_count), protostar_fraction)
    disk_count = int(particle_count) - protostar_count

    positions = np.zeros((particle_count, 3), dtype=dtype)
    velocities = np.zeros((particle_count, 3), dtype=dtype)

    if disk_count > 0:
        disk_positions = random_points_in_sphere(disk_count, max_radius, rng)
        disk_velocities = keplerian_velocities(disk_positions, G, M, rng, thickness=thickness)
        positions[protostar_count:] = disk_positions
        velocities[protostar_count:] = disk_velocities

    return ParticleState(positions, velocities, protostar_count)


class ProtoplanetaryDisk(Preset):
    """Collapsed protostar at the origin surrounded by a rotating gas cloud.

    Defaults follow the classic demo setup: 30000 particles, G=10, M=20,
    cloud radius 200 and 5% of the mass already in the protostar.
    """

    def __init__(
        self,
        n_particles: int = 30000,
        seed: Optional[int] = None,
        rng=None,
        params: Optional[PhysicalParameters] = None,
        dtype=np.float64,
    ):
        """Initialize protoplanetary disk preset.

        Args:
            n_particles: Total number of particles
            seed: Random seed
            rng: Injected random source (overrides seed)
            params: Physical parameters (defaults if None)
            dtype: Floating dtype of the generated buffers
        """
        super().__init__(n_particles, seed, rng)
        self.params = params or PhysicalParameters()
        self.dtype = dtype

    @property
    def name(self) -> str:
        return "protoplanetary_disk"

    def generate(self) -> ParticleState:
        """Generate protostar and disk particles."""
        p = self.params
        return generate_initial_conditions(
            self.n_particles,
            protostar_fraction=p.protostar_fraction,
            max_radius=p.max_radius,
            G=p.G,
            M=p.M,
            rng=self.rng,
            thickness=p.thickness,
            dtype=self.dtype,
        )
