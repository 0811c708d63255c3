"""1inch DEX aggregator integration.

Fetches swap transaction calldata from the 1inch swap API (v5.2).
The calldata is returned unsigned; signing and broadcasting happen elsewhere.
API docs: https://portal.1inch.dev/documentation/apis/swap/introduction
"""

import logging
from typing import Any, Optional, Union
from urllib.parse import quote

import httpx

from swapcalldata.config import Settings, normalize_api_key
from swapcalldata.routing.base import (
    ConfigurationError,
    MissingCalldataError,
    SwapRequest,
    SwapResponseError,
    SwapTransportError,
)

logger = logging.getLogger(__name__)

# 1inch API endpoints
ONEINCH_API_V52 = "https://api.1inch.dev/swap/v5.2/"
SWAP_METHOD = "/swap"

ARBITRUM_CHAIN_ID = "42161"

# Liquidity sources the router may use, keyed by chain id
PROTOCOL_ALLOWLISTS = {
    ARBITRUM_CHAIN_ID: [
        "ARBITRUM_UNISWAP_V3",
    ],
}

DEFAULT_PROTOCOLS = [
    "SUSHI",
    "UNISWAP_V2",
    "UNISWAP_V3",
    "CURVE",
    "COMPOUND",
]

# Max characters of an error body kept on exceptions
ERROR_BODY_LIMIT = 500


def select_protocols(chain_id: Union[str, int]) -> list[str]:
    """Get the allowed liquidity sources for a chain.

    Chain ids are compared as strings; unknown chains get DEFAULT_PROTOCOLS.
    """
    return list(PROTOCOL_ALLOWLISTS.get(str(chain_id), DEFAULT_PROTOCOLS))


def _encode_value(value: Any) -> Any:
    # Arrays go out as a single comma-joined value
    if isinstance(value, (list, tuple)):
        return ",".join(str(item) for item in value)
    return value


def api_request_url(
    method: str,
    chain_id: Union[str, int],
    query_params: dict,
    base_url: str = ONEINCH_API_V52,
) -> str:
    """Build a full 1inch API URL.

    Args:
        method: Endpoint path with leading slash (e.g. "/swap")
        chain_id: Chain id appended to the base URL as one escaped path segment
        query_params: Query parameters, in order; list values are comma-joined
        base_url: API base URL ending with a slash

    Returns:
        base_url + chain_id + method + "?" + urlencoded query
    """
    params = httpx.QueryParams(
        {key: _encode_value(value) for key, value in query_params.items()}
    )
    segment = quote(str(chain_id), safe="")
    return f"{base_url}{segment}{method}?{params}"


def extract_calldata(payload: Any) -> str:
    """Get tx.data from a /swap response body."""
    tx = payload.get("tx") if isinstance(payload, dict) else None
    if not isinstance(tx, dict):
        raise MissingCalldataError("1inch response has no tx.data (missing 'tx' object)")

    data = tx.get("data")
    if not isinstance(data, str):
        raise MissingCalldataError("1inch response has no tx.data calldata")

    return data


class OneInchSwapClient:
    """Client for the 1inch /swap endpoint.

    Performs exactly one GET per call, with no retries.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = ONEINCH_API_V52,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize 1inch client.

        Args:
            api_key: 1inch API key sent as a bearer token (surrounding whitespace is dropped)
            base_url: API base URL ending with a slash
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used to stub the network)
        """
        self.api_key = normalize_api_key(api_key)
        self.base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self.timeout = timeout
        self._transport = transport

    def _get_headers(self) -> dict:
        """Get API headers with authorization."""
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
            "Accept": "application/json",
        }

    def build_swap_url(self, request: SwapRequest) -> str:
        """Build the /swap URL for a request."""
        protocols = (
            request.protocols
            if request.protocols is not None
            else select_protocols(request.chain_id)
        )
        return api_request_url(
            SWAP_METHOD,
            request.chain_id,
            request.to_query_params(protocols),
            base_url=self.base_url,
        )

    async def get_swap(self, request: SwapRequest) -> dict:
        """Request swap data from 1inch.

        Returns:
            Decoded JSON body of the /swap response

        Raises:
            ConfigurationError: No API key configured, or key is not ASCII
            SwapTransportError: Network failure, timeout or unparseable URL
            SwapResponseError: Non-2xx status or non-JSON body
        """
        if not self.api_key:
            raise ConfigurationError("ONEINCH_API_KEY is not set")
        if not self.api_key.isascii():
            raise ConfigurationError("ONEINCH_API_KEY must contain only ASCII characters")

        url = self.build_swap_url(request)
        logger.debug(f"GET {url}")

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.get(url, headers=self._get_headers())
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise SwapTransportError(f"1inch request failed: {e!r}") from e

        body = response.text[:ERROR_BODY_LIMIT]

        if not response.is_success:
            raise SwapResponseError(
                f"1inch API error: {response.status_code} - {body}",
                status_code=response.status_code,
                body=body,
            )

        try:
            return response.json()
        except ValueError as e:
            raise SwapResponseError(
                f"1inch returned invalid JSON: {body!r}",
                status_code=response.status_code,
                body=body,
            ) from e

    async def get_swap_calldata(self, request: SwapRequest) -> str:
        """Get the transaction calldata for a swap."""
        payload = await self.get_swap(request)
        calldata = extract_calldata(payload)
        logger.debug(f"Received {len(calldata)} chars of calldata on chain {request.chain_id}")
        return calldata


def create_oneinch_client(
    settings: Settings,
    timeout: Optional[float] = None,
) -> OneInchSwapClient:
    """Create a 1inch client from settings."""
    return OneInchSwapClient(
        api_key=settings.oneinch_api_key,
        base_url=settings.oneinch_api_url,
        timeout=timeout if timeout is not None else settings.request_timeout,
    )
