"""Token name and symbol enrichment.

Lookups run in a fixed order: the Jupiter token list first, then the Helius
token-metadata API when the list knows neither name nor symbol. Failures of
either source are logged and treated as a miss.
"""

from typing import Any, Dict, Optional, Sequence, Tuple

from solana_wrapped.clients.token_client import TokenClient
from solana_wrapped.logging_config import get_logger
from solana_wrapped.models.token import TokenMetadata

logger = get_logger(__name__)

# Where Helius puts name and symbol, in priority order
HELIUS_METADATA_PATHS: Tuple[Tuple[str, ...], ...] = (
    ("onChainMetadata", "metadata", "data"),
    ("offChainMetadata", "metadata"),
    ("content", "metadata"),
)


def _first_field(record: Dict[str, Any], paths: Sequence[Sequence[str]], field_name: str) -> Optional[str]:
    for path in paths:
        node: Any = record
        for key in path:
            node = node.get(key) if isinstance(node, dict) else None
        value = node.get(field_name) if isinstance(node, dict) else None
        if isinstance(value, str) and value:
            return value
    return None


def parse_helius_metadata(record: Dict[str, Any]) -> TokenMetadata:
    """Read name and symbol from a Helius token-metadata record."""
    return TokenMetadata(
        name=_first_field(record, HELIUS_METADATA_PATHS, "name"),
        symbol=_first_field(record, HELIUS_METADATA_PATHS, "symbol"),
        source="helius"
    )


def parse_token_list_entry(entry: Dict[str, Any]) -> TokenMetadata:
    """Read name and symbol from a Jupiter token list entry."""
    name = entry.get("name")
    symbol = entry.get("symbol")
    return TokenMetadata(
        name=name if isinstance(name, str) and name else None,
        symbol=symbol if isinstance(symbol, str) and symbol else None,
        source="jupiter"
    )


class TokenMetadataEnricher:
    """Resolves token metadata without ever failing the request."""

    def __init__(self, token_client: TokenClient):
        """Initialize the enricher.

        Args:
            token_client: Client for the token list and metadata APIs
        """
        self.token_client = token_client

    async def _from_token_list(self, mint: str) -> Optional[TokenMetadata]:
        try:
            entry = await self.token_client.find_token_in_list(mint)
        except Exception as e:
            logger.warning(f"Jupiter token list lookup failed for {mint}: {str(e)}")
            return None
        if entry is None:
            return None
        return parse_token_list_entry(entry)

    async def _from_helius(self, mint: str) -> Optional[TokenMetadata]:
        if not self.token_client.config.has_api_key:
            return None
        try:
            record = await self.token_client.get_helius_token_metadata(mint)
        except Exception as e:
            logger.warning(f"Helius token metadata lookup failed for {mint}: {str(e)}")
            return None
        if record is None:
            return None
        return parse_helius_metadata(record)

    async def enrich(self, mint: str) -> TokenMetadata:
        """Resolve name and symbol for a mint.

        Args:
            mint: The token mint address

        Returns:
            TokenMetadata; both fields are None when every source missed
        """
        logger.info(f"Fetching token metadata for: {mint[:20]}...")

        metadata = await self._from_token_list(mint)
        if metadata is not None and not metadata.is_empty:
            logger.info(f"Token metadata found via Jupiter: {metadata.name} ({metadata.symbol})")
            return metadata

        metadata = await self._from_helius(mint)
        if metadata is not None and not metadata.is_empty:
            logger.info(f"Token metadata found via Helius: {metadata.name} ({metadata.symbol})")
            return metadata

        logger.warning(f"No token metadata found for {mint}")
        return TokenMetadata()
