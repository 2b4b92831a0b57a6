"""
Shared pytest fixtures for digestkit tests.

Every test starts from a fresh service container, so the default
algorithm registry and the bootstrapped logger never leak between tests.
"""

import os

import pytest

from digestkit.core.bootstrap import reset
from digestkit.hashing import AlgorithmRegistry


@pytest.fixture(autouse=True)
def clean_state(monkeypatch: pytest.MonkeyPatch):
    """Reset global state and strip DIGESTKIT_* environment variables."""
    for key in list(os.environ):
        if key.startswith("DIGESTKIT_"):
            monkeypatch.delenv(key)
    reset()
    yield
    reset()


@pytest.fixture
def registry() -> AlgorithmRegistry:
    """A private registry with the built-in algorithms."""
    return AlgorithmRegistry()


@pytest.fixture
def empty_registry() -> AlgorithmRegistry:
    """A private registry with nothing registered."""
    return AlgorithmRegistry(register_defaults=False)
