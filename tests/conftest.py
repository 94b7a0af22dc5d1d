"""
Pytest configuration and fixtures for matchroom tests.
"""
import os
import sys
import random
import pytest

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from matchroom.app import create_app


@pytest.fixture(scope='session')
def app():
    """Create application for testing."""
    return create_app('testing')


@pytest.fixture(scope='function')
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def rng():
    """Seeded random source for reproducible pairings."""
    return random.Random(42)


@pytest.fixture
def participants():
    """Five sample participant ids."""
    return ['a', 'b', 'c', 'd', 'e']
