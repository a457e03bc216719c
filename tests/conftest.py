"""
Pytest fixtures shared by the casino test suite.
"""

import numpy as np
import pytest

from casino.slot_machine.ArmSet import ArmSet

# Arm 1 is the best one
SKEWED_PROBS = [0.1, 0.9] + [0.1] * 8


@pytest.fixture
def rng() -> np.random.Generator:
    """A seeded random source."""
    return np.random.default_rng(1234)


@pytest.fixture
def skewed_arms() -> ArmSet:
    return ArmSet(SKEWED_PROBS)


@pytest.fixture
def sure_arms() -> ArmSet:
    """Two arms, one never pays and one always pays."""
    return ArmSet([0.0, 1.0])


