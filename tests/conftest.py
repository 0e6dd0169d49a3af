import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Pytest hook to run before collecting tests.

    Pin the environment so a developer's `.env` never points the suite at a real shop.
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env
    os.environ["COMMERCE_GATEWAY"] = "fake"


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        # Get the test file path relative to the tests directory
        test_path = Path(item.fspath)

        # Mark tests based on their directory
        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(autouse=True)
def reset_commerce_gateway():
    """Fixture to drop any gateway a test installed"""
    yield

    from commerce.gateway import reset_gateway

    reset_gateway()


@pytest.fixture()
def gateway():
    """An empty fake commerce gateway installed as the active gateway."""
    from commerce.gateway import set_gateway
    from commerce.gateway.fake_adapter import FakeCommerceGateway

    fake = FakeCommerceGateway()
    set_gateway(fake)
    return fake
