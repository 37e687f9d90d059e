"""Initial-condition presets."""

from protodisk.presets.base import Preset
from protodisk.presets.protoplanetary_disk import (
    ProtoplanetaryDisk,
    generate_initial_conditions,
    keplerian_velocities,
    protostar_count_for,
)

__all__ = [
    "Preset",
    "ProtoplanetaryDisk",
    "generate_initial_conditions",
    "keplerian_velocities",
    "protostar_count_for",
]
