"""Physical parameters for a simulation run."""

from dataclasses import dataclass


DEFAULT_G = 10.0
DEFAULT_CENTRAL_MASS = 20.0
DEFAULT_DT = 0.1
DEFAULT_MAX_RADIUS = 200.0
DEFAULT_PROTOSTAR_FRACTION = 0.05
DEFAULT_THICKNESS = 0.05


@dataclass(frozen=True)
class PhysicalParameters:
    """Constants shared by the generator and the integrator.

    Set once at configuration time and never mutated afterwards.

    Attributes:
        G: Gravitational constant
        M: Mass of the central protostar
        dt: Integration timestep
        max_radius: Radius of the sphere initial positions are drawn from
        protostar_fraction: Fraction of particles collapsed into the protostar
        thickness: Out-of-plane velocity spread as a fraction of orbital speed
    """
    G: float = DEFAULT_G
    M: float = DEFAULT_CENTRAL_MASS
    dt: float = DEFAULT_DT
    max_radius: float = DEFAULT_MAX_RADIUS
    protostar_fraction: float = DEFAULT_PROTOSTAR_FRACTION
    thickness: float = DEFAULT_THICKNESS

    def __post_init__(self):
        if not self.G > 0:
            raise ValueError(f"G must be positive, got {self.G}")
        if not self.M > 0:
            raise ValueError(f"Central mass M must be positive, got {self.M}")
        if not self.dt > 0:
            raise ValueError(f"Time step dt must be positive, got {self.dt}")
        if not self.max_radius > 0:
            raise ValueError(f"max_radius must be positive, got {self.max_radius}")
        if not 0.0 <= self.protostar_fraction <= 1.0:
            raise ValueError(
                f"protostar_fraction must be in [0, 1], got {self.protostar_fraction}"
            )
        if not self.thickness >= 0:
            raise ValueError(f"thickness must be non-negative, got {self.thickness}")
