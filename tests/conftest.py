"""Shared fixtures and helpers for the test suite."""

import numpy as np
import pytest


class ScriptedSource:
    """Random source returning pre-scripted draws, then a constant 0.5."""

    def __init__(self, *draws):
        self._draws = [np.asarray(d, dtype=np.float64) for d in draws]

    def random(self, size):
        if self._draws:
            return self._draws.pop(0)
        return np.full(size, 0.5)


@pytest.fixture
def scripted_source():
    return ScriptedSource
