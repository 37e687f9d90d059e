"""Utility functions for reproducibility and configuration."""

from protodisk.utils.reproducibility import make_rng, set_all_seeds, get_seed_info
from protodisk.utils.config import load_config, save_config, Config

__all__ = ["make_rng", "set_all_seeds", "get_seed_info", "load_config", "save_config", "Config"]
