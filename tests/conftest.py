"""
Pytest configuration and shared fixtures for PLUME tests.

1. Adds the project root to sys.path so ``plume`` imports without install
2. Provides parameters, a seeded rng and a key pair
"""

import random
import sys
from pathlib import Path

import pytest

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from plume import Parameters, keygen  # noqa: E402


@pytest.fixture
def pp():
    return Parameters()


@pytest.fixture
def rng():
    """Seeded randomness so failures reproduce."""
    return random.Random(0x504C554D45)


@pytest.fixture
def keypair(pp, rng):
    return keygen(pp, rng)
