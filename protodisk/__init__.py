"""
Protodisk - test-particle simulation of a protoplanetary disk.

Features:
- Uniform-in-volume initial sampling with Keplerian disk velocities
- Semi-implicit Euler, explicit Euler and leapfrog integrators
- Energy and angular momentum diagnostics
- Optional matplotlib 3D rendering
- CLI with JSON/YAML configuration
"""

__version__ = "0.1.0"

from protodisk.physics.parameters import PhysicalParameters
from protodisk.physics.state import ParticleState
from protodisk.physics.simulator import SimulationStepper
from protodisk.presets.protoplanetary_disk import ProtoplanetaryDisk, generate_initial_conditions

__all__ = [
    "PhysicalParameters",
    "ParticleState",
    "SimulationStepper",
    "ProtoplanetaryDisk",
    "generate_initial_conditions",
]
