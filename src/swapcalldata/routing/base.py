"""Swap request model and errors shared by aggregator clients."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional, Union


def format_slippage(value: Union[int, Decimal]) -> str:
    """Render slippage as plain positional notation (never 1E+1)."""
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


@dataclass
class SwapRequest:
    """Parameters for a single swap calldata request.

    Values are passed through to the aggregator as given; amounts are
    already in the token's smallest unit.
    """

    chain_id: str
    from_token_address: str
    to_token_address: str
    amount: str
    from_address: str
    dest_receiver: str
    slippage: Union[int, Decimal] = 2  # percent
    disable_estimate: bool = True
    protocols: Optional[list[str]] = field(default=None)

    def to_query_params(self, protocols: list[str]) -> dict:
        """Build the ordered query mapping for the /swap endpoint."""
        return {
            "fromTokenAddress": self.from_token_address,
            "toTokenAddress": self.to_token_address,
            "amount": self.amount,
            "fromAddress": self.from_address,
            "slippage": format_slippage(self.slippage),
            "destReceiver": self.dest_receiver,
            "disableEstimate": self.disable_estimate,
            "protocols": protocols,
        }


class SwapApiError(Exception):
    """Base exception for swap aggregator failures."""
    pass


class ConfigurationError(SwapApiError):
    """Raised when required configuration (e.g. API key) is missing."""
    pass


class SwapTransportError(SwapApiError):
    """Raised when the request never produced an HTTP response."""
    pass


class SwapResponseError(SwapApiError):
    """Raised on a non-2xx status or a body that is not JSON."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class MissingCalldataError(SwapResponseError):
    """Raised when the response has no tx.data field."""
    pass
