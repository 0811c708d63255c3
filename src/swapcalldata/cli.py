"""Command-line entry point.

Prints 1inch swap calldata for one token pair to stdout.

Usage:
    swapcalldata CHAIN_ID FROM_TOKEN TO_TOKEN AMOUNT FROM_ADDRESS DEST_RECEIVER

Example:
    ONEINCH_API_KEY=... swapcalldata 1 \\
        0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48 \\
        0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2 \\
        1000000000000000000 0xSender 0xReceiver
"""

import argparse
import asyncio
import logging
import sys
from typing import Optional

from swapcalldata.config import Settings, get_settings
from swapcalldata.routing.base import SwapApiError, SwapRequest
from swapcalldata.routing.oneinch import create_oneinch_client

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(debug: bool = False) -> None:
    """Send package logs to stderr; stdout is reserved for calldata."""
    package_logger = logging.getLogger("swapcalldata")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if debug else logging.INFO)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="swapcalldata",
        description="Fetch swap transaction calldata from the 1inch API",
    )
    parser.add_argument("chain_id", help="Chain id (e.g. 1 for Ethereum, 42161 for Arbitrum)")
    parser.add_argument("from_token_address", help="Source token address")
    parser.add_argument("to_token_address", help="Destination token address")
    parser.add_argument("amount", help="Amount in the source token's smallest unit")
    parser.add_argument("from_address", help="Address sending the swap")
    parser.add_argument("dest_receiver", help="Address receiving the output tokens")
    parser.add_argument(
        "--protocols",
        default=None,
        help="Comma-separated liquidity sources (default: per-chain allowlist)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Request timeout in seconds (default: REQUEST_TIMEOUT or 30)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def request_from_args(args: argparse.Namespace, settings: Settings) -> SwapRequest:
    """Turn parsed arguments into a SwapRequest."""
    protocols = None
    if args.protocols:
        protocols = [p.strip() for p in args.protocols.split(",") if p.strip()]

    return SwapRequest(
        chain_id=args.chain_id,
        from_token_address=args.from_token_address,
        to_token_address=args.to_token_address,
        amount=args.amount,
        from_address=args.from_address,
        dest_receiver=args.dest_receiver,
        slippage=settings.default_slippage,
        disable_estimate=True,
        protocols=protocols,
    )


async def run(args: argparse.Namespace, settings: Settings) -> str:
    """Fetch calldata for the parsed arguments."""
    request = request_from_args(args, settings)
    client = create_oneinch_client(settings, timeout=args.timeout)
    return await client.get_swap_calldata(request)


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    settings = get_settings()

    setup_logging(debug=args.verbose or settings.debug)
    logger.debug(f"Settings: {settings.get_safe_dict()}")

    try:
        calldata = asyncio.run(run(args, settings))
    except SwapApiError as e:
        logger.error(f"Swap calldata request failed: {e}")
        sys.exit(1)

    print(calldata)


if __name__ == "__main__":
    main()
