"""
Pytest configuration and fixtures for Gemini Dice tests.

This file provides test isolation and shared fixtures.
"""
import pytest


@pytest.fixture(autouse=True)
def reset_singleton_state():
    """Reset the config singleton and logging context between tests."""
    yield

    import config as cfg
    cfg._config = None

    from utils.logging import clear_context
    clear_context()
