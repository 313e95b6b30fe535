"""Transaction client module for Solana Wrapped.

This module provides a client for the Helius ``getTransactionsForAddress``
method, which returns full transaction details one page at a time.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from solana_wrapped.clients.base_client import BaseHeliusClient
from solana_wrapped.constants import MAX_PAGE_SIZE
from solana_wrapped.logging_config import get_logger

# Get logger
logger = get_logger(__name__)


@dataclass
class TransactionPage:
    """One page of raw transaction records."""
    transactions: List[Dict[str, Any]] = field(default_factory=list)
    pagination_token: Optional[str] = None


class TransactionClient(BaseHeliusClient):
    """Client for transaction history requests."""

    async def get_transactions_page(
        self,
        address: str,
        since: int,
        limit: int = MAX_PAGE_SIZE,
        pagination_token: Optional[str] = None
    ) -> TransactionPage:
        """Fetch a single page of transactions for an address.

        Args:
            address: The wallet address
            since: Lower bound block timestamp (inclusive)
            limit: Page size, capped by the provider at 100
            pagination_token: Continuation token from the previous page

        Returns:
            The page records, newest first, and the next continuation token

        Raises:
            HeliusRpcError: If the provider rejects the request
            httpx.RequestError: If there's a network error
        """
        options: Dict[str, Any] = {
            "transactionDetails": "full",
            "limit": min(limit, MAX_PAGE_SIZE),
            "sortOrder": "desc",
            "filters": {
                "status": "succeeded",
                "blockTime": {
                    "gte": since
                }
            }
        }
        if pagination_token:
            options["paginationToken"] = pagination_token

        result = await self._make_request("getTransactionsForAddress", [address, options])

        data = result.get("data") if isinstance(result, dict) else None
        transactions = [tx for tx in data if isinstance(tx, dict)] if isinstance(data, list) else []
        next_token = result.get("paginationToken") if isinstance(result, dict) else None

        return TransactionPage(
            transactions=transactions,
            pagination_token=next_token if isinstance(next_token, str) and next_token else None
        )
