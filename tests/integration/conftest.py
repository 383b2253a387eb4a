"""Shared fixtures for integration tests."""

import os

import pytest
import pytest_asyncio

from typematrux import DrukarniaClient

# Skip all integration tests unless RUN_TYPEMATRUX_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_TYPEMATRUX_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_TYPEMATRUX_NETWORK_TESTS=1 to run",
)


@pytest_asyncio.fixture
async def live_client():
    async with DrukarniaClient() as client:
        yield client
