"""Command-line entry point for Solana Wrapped."""

import argparse
import asyncio
import json
import sys

import httpx

from solana_wrapped.config import get_helius_config, get_server_config, get_wrapped_config
from solana_wrapped.logging_config import configure_logging
from solana_wrapped.main import run_server
from solana_wrapped.services.wrapped_service import WrappedService
from solana_wrapped.utils.errors import SolanaWrappedError


async def _summarize(address: str) -> dict:
    helius_config = get_helius_config()
    async with httpx.AsyncClient(timeout=helius_config.timeout) as client:
        service = WrappedService.from_config(helius_config, get_wrapped_config(), client)
        response = await service.build_wrapped(address)
    return response.summary.model_dump(by_alias=True)


def main(argv=None):
    """Run the Solana Wrapped CLI."""
    parser = argparse.ArgumentParser(prog="solana-wrapped", description="Solana Wrapped")
    subparsers = parser.add_subparsers(dest="command")

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP server")
    serve_parser.add_argument("--port", type=int, help="Server port")

    summary_parser = subparsers.add_parser("summary", help="Print a wallet's summary as JSON")
    summary_parser.add_argument("address", help="Wallet address")

    args = parser.parse_args(argv)

    if args.command == "summary":
        configure_logging(get_server_config().log_level)
        try:
            summary = asyncio.run(_summarize(args.address))
        except SolanaWrappedError as e:
            print(f"Error: {e.message}", file=sys.stderr)
            return 1
        print(json.dumps(summary, indent=2))
        return 0

    run_server(port=getattr(args, "port", None))
    return 0


if __name__ == "__main__":
    sys.exit(main())
