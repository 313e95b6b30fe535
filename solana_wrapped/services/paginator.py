"""Paginated retrieval of a wallet's transactions for one calendar year."""

import asyncio
from dataclasses import dataclass, field
from typing import Any, Dict, List

import httpx

from solana_wrapped.clients.transaction_client import TransactionClient
from solana_wrapped.config import WrappedConfig
from solana_wrapped.logging_config import get_logger
from solana_wrapped.utils.errors import HeliusRpcError

logger = get_logger(__name__)


@dataclass
class PaginationResult:
    """Records collected across all fetched pages."""
    transactions: List[Dict[str, Any]] = field(default_factory=list)
    pages_fetched: int = 0


class TransactionPaginator:
    """Follows Helius continuation tokens until the year's history is exhausted."""

    def __init__(self, client: TransactionClient, config: WrappedConfig):
        """Initialize the paginator.

        Args:
            client: Transaction client used for each page request
            config: Pipeline configuration (year, page size, page limit, delay)
        """
        self.client = client
        self.config = config

    async def fetch_all(self, address: str) -> PaginationResult:
        """Fetch every transaction page for an address since the start of the year.

        Pagination stops when a page comes back short, when the page limit is
        reached, when the provider returns no continuation token, or when a
        request after the first page fails. In the last case the records
        gathered so far are returned.

        Args:
            address: The wallet address

        Returns:
            PaginationResult with records in provider order

        Raises:
            HeliusRpcError: If the first page request fails
            httpx.HTTPError: If the first page request hits a network error
        """
        result = PaginationResult()
        since = self.config.year_start_timestamp
        page_size = self.config.page_size
        max_pages = self.config.max_pages
        pagination_token = None

        logger.info(f"Starting pagination for {address} since {since} (max {max_pages} pages)")

        for page_number in range(1, max_pages + 1):
            try:
                page = await self.client.get_transactions_page(
                    address,
                    since,
                    limit=page_size,
                    pagination_token=pagination_token
                )
            except (HeliusRpcError, httpx.HTTPError) as e:
                if page_number == 1:
                    raise
                logger.warning(f"Page {page_number} failed for {address}, stopping pagination: {e}")
                break

            result.pages_fetched += 1
            result.transactions.extend(page.transactions)
            logger.info(f"Page {page_number}: received {len(page.transactions)} transactions")

            if len(page.transactions) < page_size:
                logger.info("Reached end of transactions (short page)")
                break

            if page_number >= max_pages:
                logger.info(f"Reached max pages limit ({max_pages}), stopping pagination")
                break

            pagination_token = page.pagination_token
            if not pagination_token:
                break

            await asyncio.sleep(self.config.page_delay_seconds)

        logger.info(
            f"Pagination complete for {address}: {len(result.transactions)} transactions "
            f"across {result.pages_fetched} pages"
        )
        return result
