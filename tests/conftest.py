"""Pytest configuration and fixtures."""

import os

import httpx
import pytest

# Set test environment
os.environ["ONEINCH_API_KEY"] = "test-key"
os.environ["ONEINCH_API_URL"] = "https://api.1inch.dev/swap/v5.2/"
os.environ["DEBUG"] = "false"

from swapcalldata.config import get_settings
from swapcalldata.routing.base import SwapRequest
from swapcalldata.routing.oneinch import OneInchSwapClient

USDC = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"
WETH = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"
SENDER = "0x1111111111111111111111111111111111111111"
RECEIVER = "0x2222222222222222222222222222222222222222"


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reload settings for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def swap_request() -> SwapRequest:
    """Mainnet USDC -> WETH swap request."""
    return SwapRequest(
        chain_id="1",
        from_token_address=USDC,
        to_token_address=WETH,
        amount="1000000000000000000",
        from_address=SENDER,
        dest_receiver=RECEIVER,
    )


@pytest.fixture
def captured_requests() -> list[httpx.Request]:
    """Requests seen by the mock transport."""
    return []


@pytest.fixture
def make_client(captured_requests):
    """Build a client whose transport answers with a fixed response."""

    def _make(status_code: int = 200, json=None, content=None, exc=None) -> OneInchSwapClient:
        def handler(request: httpx.Request) -> httpx.Response:
            captured_requests.append(request)
            if exc is not None:
                raise exc
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=json)

        return OneInchSwapClient(
            api_key="test-key",
            transport=httpx.MockTransport(handler),
        )

    return _make
