"""Tests for configuration and reproducibility utilities."""

import json
import numpy as np
import pytest
from protodisk.physics.parameters import PhysicalParameters
from protodisk.utils.config import Config, load_config, save_config
from protodisk.utils.reproducibility import make_rng, set_all_seeds, get_seed_info


def test_default_parameters_match_reference_setup():
    """Defaults reproduce the classic 30000-particle demo."""
    config = Config()
    params = config.physical_parameters()

    assert config.particle_count == 30000
    assert params == PhysicalParameters(G=10.0, M=20.0, dt=0.1, max_radius=200.0,
                                        protostar_fraction=0.05, thickness=0.05)


@pytest.mark.parametrize("kwargs", [
    dict(G=0.0),
    dict(M=-5.0),
    dict(dt=0.0),
    dict(max_radius=-1.0),
    dict(protostar_fraction=1.2),
    dict(thickness=-0.1),
])
def test_physical_parameters_validation(kwargs):
    """Non-physical parameters fail fast."""
    with pytest.raises(ValueError):
        PhysicalParameters(**kwargs)


def test_physical_parameters_are_immutable():
    """Parameters cannot change after construction."""
    params = PhysicalParameters()
    with pytest.raises(AttributeError):
        params.G = 1.0


def test_config_validation():
    """Obviously bad run settings are rejected."""
    with pytest.raises(ValueError):
        Config(particle_count=-1)
    with pytest.raises(ValueError):
        Config(dtype="float16")
    with pytest.raises(ValueError):
        Config(debug_every=0)


def test_save_load_json(tmp_path):
    """Config survives a JSON save/load."""
    config = Config(particle_count=500, G=1.0, seed=7, integrator="leapfrog")
    path = tmp_path / "config.json"

    save_config(config, str(path))
    loaded = load_config(str(path))

    assert loaded == config
    assert json.loads(path.read_text())["particle_count"] == 500


def test_save_load_yaml(tmp_path):
    """Config survives a YAML save/load."""
    config = Config(particle_count=250, thickness=0.2, dtype="float32")
    path = tmp_path / "config.yaml"

    save_config(config, str(path))
    loaded = load_config(str(path))

    assert loaded == config


def test_partial_yaml_uses_defaults(tmp_path):
    """Keys missing from the file keep their defaults."""
    path = tmp_path / "partial.yml"
    path.write_text("particle_count: 42\nM: 5.0\n")

    config = load_config(str(path))

    assert config.particle_count == 42
    assert config.M == 5.0
    assert config.G == 10.0


def test_unknown_keys_rejected(tmp_path):
    """Typos in config files are reported."""
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"particle_cnt": 10}))

    with pytest.raises(ValueError, match="particle_cnt"):
        load_config(str(path))


def test_unsupported_format(tmp_path):
    """Only .json and .yaml/.yml are accepted."""
    with pytest.raises(ValueError):
        save_config(Config(), str(tmp_path / "config.toml"))
    with pytest.raises(ValueError):
        load_config(str(tmp_path / "config.toml"))


def test_make_rng_reproducible():
    """Seeded generators replay the same stream."""
    assert np.array_equal(make_rng(3).random(10), make_rng(3).random(10))
    assert not np.array_equal(make_rng(3).random(10), make_rng(4).random(10))


def test_set_all_seeds():
    """Global seeding is reflected in the seed info."""
    set_all_seeds(123)
    a = np.random.random(3)
    set_all_seeds(123)
    b = np.random.random(3)

    assert np.array_equal(a, b)
    assert get_seed_info(123)["seed"] == 123
