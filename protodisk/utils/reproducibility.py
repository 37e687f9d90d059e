"""Reproducibility utilities for deterministic simulations."""

import random
import numpy as np
from typing import Optional, Dict


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create the random source used for initial conditions.

    Args:
        seed: Optional seed; None gives a non-reproducible generator

    Returns:
        numpy Generator
    """
    return np.random.default_rng(seed)


def set_all_seeds(seed: int):
    """Seed the global Python and NumPy random states.

    Generators created with ``make_rng`` are independent of these; this is for
    third-party code (e.g. matplotlib jitter) that reads the global state.

    Args:
        seed: Random seed
    """
    random.seed(seed)
    np.random.seed(seed)


def get_seed_info(seed: Optional[int] = None) -> Dict[str, object]:
    """Get information about current seed state.

    Args:
        seed: Optional seed to include in info

    Returns:
        Dictionary with seed information
    """
    info = {}

    if seed is not None:
        info['seed'] = seed

    info['numpy_state'] = int(np.random.get_state()[1][0])
    info['python_random_state'] = random.getstate()[1][0]

    return info
