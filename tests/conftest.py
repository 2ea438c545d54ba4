"""
Shared test fixtures
"""

import pytest


class _Awaitable:
    """Awaitable attribute value (AsyncWeb3 exposes gas_price and chain_id as awaitable properties)"""

    def __init__(self, value):
        self.value = value

    def __await__(self):
        if False:
            yield
        return self.value


@pytest.fixture
def awaitable():
    """Wrap a value so it can be awaited like an AsyncWeb3 property"""
    return _Awaitable
