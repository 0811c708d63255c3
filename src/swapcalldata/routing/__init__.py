"""Routing module for swap aggregator clients.

Providers:
- 1inch: EVM DEX aggregator, swap calldata via the v5.2 API
"""

from swapcalldata.routing.base import (
    ConfigurationError,
    MissingCalldataError,
    SwapApiError,
    SwapRequest,
    SwapResponseError,
    SwapTransportError,
)
from swapcalldata.routing.oneinch import (
    DEFAULT_PROTOCOLS,
    PROTOCOL_ALLOWLISTS,
    OneInchSwapClient,
    api_request_url,
    create_oneinch_client,
    extract_calldata,
    select_protocols,
)

__all__ = [
    # Models and errors
    "SwapRequest",
    "SwapApiError",
    "ConfigurationError",
    "SwapTransportError",
    "SwapResponseError",
    "MissingCalldataError",
    # 1inch
    "OneInchSwapClient",
    "DEFAULT_PROTOCOLS",
    "PROTOCOL_ALLOWLISTS",
    "api_request_url",
    "create_oneinch_client",
    "extract_calldata",
    "select_protocols",
]
