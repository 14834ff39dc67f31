"""Pytest configuration and fixtures."""

import pytest

from chainhash import seed_everything


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Set up test environment with fixed seed."""
    seed_everything(42)
    yield
