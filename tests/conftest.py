import pytest


@pytest.fixture
def anyio_backend():
    # The image cache and its tests are built on asyncio primitives.
    return "asyncio"
