"""Pytest configuration and fixtures"""

import pytest


@pytest.fixture(autouse=True)
def mock_infrastructure():
    """Fresh in-memory storage, email and payment adapters for every test."""
    from infrastructure.container import container

    container.configure_for_testing()
    yield container
