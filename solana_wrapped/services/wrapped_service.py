"""Wrapped service for Solana Wrapped.

This module runs the full year-in-review pipeline for one wallet: paginate,
filter, attribute protocols, resolve the first token interaction, enrich it
and assemble the summary.
"""

from typing import Optional

import httpx

from solana_wrapped.clients.token_client import TokenClient
from solana_wrapped.clients.transaction_client import TransactionClient
from solana_wrapped.config import HeliusConfig, WrappedConfig
from solana_wrapped.logging_config import get_logger, log_with_context
from solana_wrapped.models.summary import TransactionsResponse
from solana_wrapped.services.first_interaction import resolve_first_interaction
from solana_wrapped.services.paginator import TransactionPaginator
from solana_wrapped.services.protocol_attribution import attribute_protocols
from solana_wrapped.services.summary_builder import build_summary
from solana_wrapped.services.token_metadata import TokenMetadataEnricher
from solana_wrapped.services.transaction_filter import filter_transactions
from solana_wrapped.utils.validation import validate_wallet_address

logger = get_logger(__name__)


class WrappedService:
    """Service building a wallet's year-in-review summary."""

    def __init__(
        self,
        transaction_client: TransactionClient,
        token_client: TokenClient,
        config: WrappedConfig
    ):
        """Initialize the wrapped service.

        Args:
            transaction_client: Client for transaction pages
            token_client: Client for token metadata
            config: Pipeline configuration
        """
        self.config = config
        self.paginator = TransactionPaginator(transaction_client, config)
        self.enricher = TokenMetadataEnricher(token_client)

    @classmethod
    def from_config(
        cls,
        helius_config: HeliusConfig,
        wrapped_config: WrappedConfig,
        http_client: Optional[httpx.AsyncClient] = None
    ) -> "WrappedService":
        """Build the service and its clients around one HTTP client.

        Args:
            helius_config: Helius configuration
            wrapped_config: Pipeline configuration
            http_client: HTTP client shared by both upstream clients

        Returns:
            A WrappedService instance
        """
        return cls(
            TransactionClient(helius_config, http_client),
            TokenClient(helius_config, http_client, token_list_url=wrapped_config.token_list_url),
            wrapped_config
        )

    async def build_wrapped(self, address: str) -> TransactionsResponse:
        """Compute the year-in-review for a wallet.

        Args:
            address: The wallet address

        Returns:
            The filtered transactions and the summary

        Raises:
            ValidationError: If the address is missing or invalid
            ConfigurationError: If no Helius API key is configured
            HeliusRpcError: If the first transaction page cannot be fetched
        """
        validate_wallet_address(address)
        self.paginator.client.config.require_api_key()

        pages = await self.paginator.fetch_all(address)
        filtered = filter_transactions(pages.transactions, address)

        protocols = attribute_protocols(filtered.transactions)
        first_interaction = resolve_first_interaction(filtered.transactions)

        token_metadata = None
        if first_interaction is not None and first_interaction.token_mint:
            token_metadata = await self.enricher.enrich(first_interaction.token_mint)

        summary = build_summary(
            filtered,
            pages.pages_fetched,
            protocols,
            self.config.year,
            first_interaction,
            token_metadata
        )

        log_with_context(
            logger,
            "info",
            "Wrapped summary built",
            address=address,
            total_transactions=summary.total_transactions,
            original_count=summary.original_count,
            pages_fetched=summary.pages_fetched,
            top_protocol=summary.top_protocol
        )

        return TransactionsResponse(data=filtered.transactions, summary=summary)
