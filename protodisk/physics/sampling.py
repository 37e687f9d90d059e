"""Uniform-in-volume sampling inside a sphere."""

import numpy as np


def random_points_in_sphere(n: int, max_radius: float, rng) -> np.ndarray:
    """Draw points uniformly distributed over the volume of a solid ball.

    theta = 2*pi*u is the azimuth, phi = acos(2v - 1) the polar angle and
    r = max_radius * cbrt(w) the radius. The cube root makes the radial
    density proportional to r^2; a linear draw would crowd the center.

    Args:
        n: Number of points
        max_radius: Radius of the ball
        rng: Random source exposing ``random(size)`` (e.g. ``numpy.random.Generator``)

    Returns:
        Array of shape (n, 3)
    """
    u = np.asarray(rng.random(n), dtype=np.float64)
    v = np.asarray(rng.random(n), dtype=np.float64)
    w = np.asarray(rng.random(n), dtype=np.float64)

    theta = 2 * np.pi * u
    phi = np.arccos(2 * v - 1)
    r = max_radius * np.cbrt(w)

    sin_phi = np.sin(phi)
    x = r * sin_phi * np.cos(theta)
    y = r * sin_phi * np.sin(theta)
    z = r * np.cos(phi)

    return np.column_stack([x, y, z])


def random_point_in_sphere(max_radius: float, rng) -> np.ndarray:
    """Draw a single point uniformly from the ball of radius ``max_radius``."""
    return random_points_in_sphere(1, max_radius, rng)[0]
