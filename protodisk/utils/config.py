"""Configuration management."""

import json
import yaml
from typing import Optional
from pathlib import Path
from dataclasses import dataclass, asdict, fields
from protodisk.physics.parameters import (
    PhysicalParameters,
    DEFAULT_G,
    DEFAULT_CENTRAL_MASS,
    DEFAULT_DT,
    DEFAULT_MAX_RADIUS,
    DEFAULT_PROTOSTAR_FRACTION,
    DEFAULT_THICKNESS,
)


@dataclass
class Config:
    """Simulation configuration."""
    # Particles
    particle_count: int = 30000
    protostar_fraction: float = DEFAULT_PROTOSTAR_FRACTION

    # Physics
    G: float = DEFAULT_G
    M: float = DEFAULT_CENTRAL_MASS
    dt: float = DEFAULT_DT
    max_radius: float = DEFAULT_MAX_RADIUS
    thickness: float = DEFAULT_THICKNESS

    # Run
    steps: int = 1000
    integrator: str = "symplectic_euler"
    dtype: str = "float64"

    # Rendering parameters
    render: bool = False
    render_every: int = 1
    elevation: float = 90.0
    azimuth: float = -90.0

    # Output
    debug_every: int = 100

    # Reproducibility
    seed: Optional[int] = None

    def __post_init__(self):
        if self.particle_count < 0:
            raise ValueError(f"particle_count must be non-negative, got {self.particle_count}")
        if self.dtype not in ("float32", "float64"):
            raise ValueError(f"dtype must be 'float32' or 'float64', got {self.dtype!r}")
        if self.steps < 0:
            raise ValueError(f"steps must be non-negative, got {self.steps}")
        if self.render_every < 1 or self.debug_every < 1:
            raise ValueError("render_every and debug_every must be at least 1")

    def physical_parameters(self) -> PhysicalParameters:
        """Build the validated, immutable physical parameter set."""
        return PhysicalParameters(
            G=self.G,
            M=self.M,
            dt=self.dt,
            max_radius=self.max_radius,
            protostar_fraction=self.protostar_fraction,
            thickness=self.thickness,
        )


def _is_yaml(path: Path) -> bool:
    return path.suffix in ('.yaml', '.yml')


def load_config(config_path: str) -> Config:
    """Load configuration from file.

    Args:
        config_path: Path to config file (.json or .yaml)

    Returns:
        Config object

    Raises:
        ValueError: On unsupported file format or unknown keys
    """
    config_path = Path(config_path)

    if not (_is_yaml(config_path) or config_path.suffix == '.json'):
        raise ValueError(f"Unsupported config format: {config_path.suffix}. Use .json or .yaml")

    with open(config_path, 'r') as f:
        if _is_yaml(config_path):
            data = yaml.safe_load(f)
        else:
            data = json.load(f)

    data = data or {}
    known = {field.name for field in fields(Config)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {unknown}")

    return Config(**data)


def save_config(config: Config, output_path: str):
    """Save configuration to file.

    Args:
        config: Config object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    data = asdict(config)

    if _is_yaml(output_path):
        with open(output_path, 'w') as f:
            yaml.safe_dump(data, f, default_flow_style=False)
    elif output_path.suffix == '.json':
        with open(output_path, 'w') as f:
            json.dump(data, f, indent=2)
    else:
        raise ValueError(f"Unsupported config format: {output_path.suffix}. Use .json or .yaml")
