"""Physics engine for central-gravity test particles."""

from protodisk.physics.parameters import PhysicalParameters
from protodisk.physics.state import ParticleState
from protodisk.physics.sampling import random_point_in_sphere, random_points_in_sphere
from protodisk.physics.diagnostics import Diagnostics
from protodisk.physics.simulator import SimulationStepper

__all__ = [
    "PhysicalParameters",
    "ParticleState",
    "random_point_in_sphere",
    "random_points_in_sphere",
    "Diagnostics",
    "SimulationStepper",
]
