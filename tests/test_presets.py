"""Tests for protoplanetary disk initial conditions."""

import math
import numpy as np
import pytest
from protodisk.physics.parameters import PhysicalParameters
from protodisk.presets import (
    ProtoplanetaryDisk,
    generate_initial_conditions,
    keplerian_velocities,
    protostar_count_for,
)


G = 10.0
M = 20.0


@pytest.mark.parametrize("n, fraction, expected", [
    (100, 0.05, 5),
    (30000, 0.05, 1500),
    (7, 0.5, 3),
    (10, 0.0, 0),
    (1, 1.0, 1),
    (0, 0.05, 0),
])
def test_protostar_count(n, fraction, expected):
    """protostar_count = floor(N * f)."""
    state = generate_initial_conditions(n, fraction, 200.0, G, M, rng=np.random.default_rng(0))

    assert state.protostar_count == expected == math.floor(n * fraction)
    assert protostar_count_for(n, fraction) == expected
    assert state.particle_count == n
    assert state.disk_count == n - expected


def test_protostar_group_at_origin_with_zero_velocity():
    """Leading protostar particles sit at the origin at rest."""
    state = generate_initial_conditions(1000, 0.1, 200.0, G, M, rng=np.random.default_rng(3))

    assert np.array_equal(state.protostar_positions, np.zeros((100, 3)))
    assert np.array_equal(state.protostar_velocities, np.zeros((100, 3)))
    # Disk particles are sampled, not collapsed
    assert np.all(np.linalg.norm(state.disk_positions, axis=1) > 0)
    assert np.all(np.linalg.norm(state.disk_positions, axis=1) <= 200.0 + 1e-9)


def test_disk_velocities_are_keplerian_and_tangential():
    """|v_xy| = sqrt(G*M/rho) and v_xy is perpendicular to r_xy."""
    state = generate_initial_conditions(2000, 0.05, 200.0, G, M, rng=np.random.default_rng(1))

    pos = state.disk_positions
    vel = state.disk_velocities
    rho = np.hypot(pos[:, 0], pos[:, 1])
    assert np.all(rho > 0)

    speed_xy = np.hypot(vel[:, 0], vel[:, 1])
    assert np.allclose(speed_xy, np.sqrt(G * M / rho), rtol=1e-10)

    radial_dot = pos[:, 0] * vel[:, 0] + pos[:, 1] * vel[:, 1]
    assert np.allclose(radial_dot, 0.0, atol=1e-9)

    # Counter-clockwise about +z
    lz = pos[:, 0] * vel[:, 1] - pos[:, 1] * vel[:, 0]
    assert np.all(lz > 0)


def test_vertical_velocity_spread_follows_thickness():
    """Vertical velocity is bounded by 0.5 * v * thickness and actually spreads."""
    thickness = 0.1
    state = generate_initial_conditions(
        2000, 0.05, 200.0, G, M, rng=np.random.default_rng(5), thickness=thickness
    )

    pos = state.disk_positions
    vel = state.disk_velocities
    speed = np.sqrt(G * M / np.hypot(pos[:, 0], pos[:, 1]))

    assert np.all(np.abs(vel[:, 2]) <= 0.5 * speed * thickness + 1e-12)
    assert np.std(vel[:, 2] / speed) > 0.01


def test_zero_thickness_gives_flat_velocity_field():
    """thickness = 0 removes the vertical velocity component."""
    state = generate_initial_conditions(
        500, 0.05, 200.0, G, M, rng=np.random.default_rng(5), thickness=0.0
    )

    assert np.array_equal(state.disk_velocities[:, 2], np.zeros(state.disk_count))


def test_on_axis_particle_gets_zero_velocity(scripted_source):
    """A disk particle with planar radius 0 is left at rest."""
    # Second particle gets w = 0 and therefore lands on the origin
    rng = scripted_source([0.1, 0.2, 0.3], [0.4, 0.5, 0.6], [0.5, 0.0, 0.9])
    state = generate_initial_conditions(3, 0.0, 100.0, G, M, rng=rng)

    assert state.protostar_count == 0
    assert np.array_equal(state.positions[1], np.zeros(3))
    assert np.array_equal(state.velocities[1], np.zeros(3))
    assert np.linalg.norm(state.velocities[0]) > 0
    assert np.linalg.norm(state.velocities[2]) > 0


def test_keplerian_velocities_on_spin_axis():
    """Points on the z-axis get zero velocity; others get circular speed."""
    positions = np.array([[0.0, 0.0, 5.0], [3.0, 4.0, 0.0]])
    velocities = keplerian_velocities(positions, G, M, np.random.default_rng(0), thickness=0.0)

    assert np.array_equal(velocities[0], np.zeros(3))
    assert np.allclose(velocities[1], np.array([-4.0, 3.0, 0.0]) * np.sqrt(G * M / 5.0) / 5.0)


def test_single_particle_all_protostar():
    """N = 1, f = 1.0 produces a lone protostar at rest."""
    state = generate_initial_conditions(1, 1.0, 200.0, G, M, rng=np.random.default_rng(0))

    assert state.protostar_count == 1
    assert state.disk_count == 0
    assert np.array_equal(state.positions, np.zeros((1, 3)))
    assert np.array_equal(state.velocities, np.zeros((1, 3)))


@pytest.mark.parametrize("kwargs", [
    dict(particle_count=-1),
    dict(particle_count=2.5),
    dict(particle_count=True),
    dict(protostar_fraction=1.5),
    dict(protostar_fraction=-0.1),
    dict(max_radius=0.0),
    dict(G=0.0),
    dict(M=-1.0),
    dict(thickness=-0.5),
])
def test_invalid_configuration_rejected(kwargs):
    """Invalid configuration raises ValueError before sampling."""
    args = dict(particle_count=10, protostar_fraction=0.05, max_radius=200.0, G=G, M=M)
    args.update(kwargs)

    with pytest.raises(ValueError):
        generate_initial_conditions(**args)


def test_float32_buffers():
    """dtype float32 mirrors single-precision vertex buffers."""
    state = generate_initial_conditions(
        100, 0.05, 200.0, G, M, rng=np.random.default_rng(0), dtype=np.float32
    )

    assert state.positions.dtype == np.float32
    assert state.velocities.dtype == np.float32


def test_protoplanetary_disk_preset():
    """Preset wraps the generator with physical parameters."""
    params = PhysicalParameters(G=1.0, M=100.0, max_radius=50.0, protostar_fraction=0.2)
    preset = ProtoplanetaryDisk(n_particles=100, seed=42, params=params)

    state = preset.generate()

    assert preset.name == "protoplanetary_disk"
    assert state.particle_count == 100
    assert state.protostar_count == 20
    assert np.all(np.linalg.norm(state.disk_positions, axis=1) <= 50.0 + 1e-9)


def test_preset_reproducibility():
    """Presets are reproducible with the same seed."""
    state1 = ProtoplanetaryDisk(n_particles=300, seed=42).generate()
    state2 = ProtoplanetaryDisk(n_particles=300, seed=42).generate()
    state3 = ProtoplanetaryDisk(n_particles=300, seed=43).generate()

    assert np.array_equal(state1.positions, state2.positions)
    assert np.array_equal(state1.velocities, state2.velocities)
    assert not np.array_equal(state1.positions, state3.positions)


def test_injected_rng_overrides_seed():
    """An injected random source takes precedence over the seed."""
    a = ProtoplanetaryDisk(n_particles=50, seed=1, rng=np.random.default_rng(9)).generate()
    b = ProtoplanetaryDisk(n_particles=50, rng=np.random.default_rng(9)).generate()

    assert np.array_equal(a.positions, b.positions)
