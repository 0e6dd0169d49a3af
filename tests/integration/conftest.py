"""Fixtures for whole-application tests.

These tests drive the assembled FastAPI app, so cart requests get their
domain context from the app's middleware rather than from a fixture.
"""

import pytest


@pytest.fixture(scope="session")
def application():
    """Import the app once per session; importing it initializes the ordering domain."""
    from app import app

    return app


@pytest.fixture(autouse=True)
def run_around_tests(application):
    """Fixture to automatically cleanup infrastructure after every test"""
    yield

    from ordering.domain import ordering

    with ordering.domain_context():
        from protean import current_domain

        # Clear all databases
        for _, provider in current_domain.providers.items():
            provider._data_reset()

        # Drain event stores
        current_domain.event_store.store._data_reset()
