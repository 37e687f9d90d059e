"""Numerical integrators for central-gravity test particles."""

from protodisk.physics.integrators.base import Integrator
from protodisk.physics.integrators.euler import ExplicitEulerIntegrator
from protodisk.physics.integrators.symplectic_euler import SemiImplicitEulerIntegrator
from protodisk.physics.integrators.verlet import LeapfrogIntegrator

INTEGRATORS = {
    "symplectic_euler": SemiImplicitEulerIntegrator,
    "euler": ExplicitEulerIntegrator,
    "leapfrog": LeapfrogIntegrator,
}


def get_integrator(name: str) -> Integrator:
    """Get an integrator instance by name.

    Raises:
        ValueError: If the name is unknown
    """
    integrator_class = INTEGRATORS.get(name.lower())
    if integrator_class is None:
        raise ValueError(f"Unknown integrator '{name}'. Available: {list(INTEGRATORS.keys())}")
    return integrator_class()


__all__ = [
    "Integrator",
    "ExplicitEulerIntegrator",
    "SemiImplicitEulerIntegrator",
    "LeapfrogIntegrator",
    "INTEGRATORS",
    "get_integrator",
]
