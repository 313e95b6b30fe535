"""Transaction-related API routes.

This module defines the route returning a wallet's filtered transactions for
the year together with its wrapped summary.
"""

from typing import AsyncIterator, Optional

import httpx
from fastapi import APIRouter, Depends, Query

from solana_wrapped.api.error_handling import with_error_handling
from solana_wrapped.config import HeliusConfig, WrappedConfig, get_helius_config, get_wrapped_config
from solana_wrapped.logging_config import get_logger
from solana_wrapped.models.summary import ErrorResponse, TransactionsResponse
from solana_wrapped.services.wrapped_service import WrappedService

logger = get_logger(__name__)

# Create router
router = APIRouter(tags=["transactions"])


async def get_http_client(
    helius_config: HeliusConfig = Depends(get_helius_config)
) -> AsyncIterator[httpx.AsyncClient]:
    """Dependency providing one HTTP client per request."""
    async with httpx.AsyncClient(
        timeout=helius_config.timeout,
        limits=httpx.Limits(max_keepalive_connections=10, max_connections=20)
    ) as client:
        yield client


@router.get(
    "/transactions",
    response_model=TransactionsResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Get a wallet's year in review",
    description="Fetches the wallet's transactions for the year, filters them and returns a wrapped summary."
)
@with_error_handling
async def get_transactions(
    address: Optional[str] = Query(None, description="Wallet address"),
    limit: Optional[int] = Query(None, ge=1, description="Accepted for client compatibility"),
    helius_config: HeliusConfig = Depends(get_helius_config),
    wrapped_config: WrappedConfig = Depends(get_wrapped_config),
    http_client: httpx.AsyncClient = Depends(get_http_client)
) -> TransactionsResponse:
    """Get the filtered transactions and wrapped summary for a wallet.

    Args:
        address: The wallet address
        limit: Client page size hint; the whole year is always fetched
        helius_config: Helius configuration
        wrapped_config: Pipeline configuration
        http_client: HTTP client for upstream calls

    Returns:
        Filtered transactions and summary
    """
    logger.info(f"Building wrapped summary for {address} (limit hint: {limit})")

    service = WrappedService.from_config(helius_config, wrapped_config, http_client)
    return await service.build_wrapped(address)
