"""Token metadata client for Solana Wrapped.

Two sources are supported: the Jupiter token list (one GET returning every
listed token) and the Helius ``token-metadata`` endpoint (POST with a batch
of mint accounts). Both methods raise on failure; callers decide how to
degrade.
"""

from typing import Any, Dict, List, Optional

import httpx

from solana_wrapped.clients.base_client import BaseHeliusClient
from solana_wrapped.config import HeliusConfig
from solana_wrapped.constants import DEFAULT_TOKEN_LIST_URL
from solana_wrapped.logging_config import get_logger
from solana_wrapped.utils.errors import TokenMetadataError

# Get logger
logger = get_logger(__name__)


class TokenClient(BaseHeliusClient):
    """Client for token metadata lookups."""

    def __init__(
        self,
        config: Optional[HeliusConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        token_list_url: str = DEFAULT_TOKEN_LIST_URL
    ):
        """Initialize the token client.

        Args:
            config: Helius configuration
            http_client: Shared HTTP client
            token_list_url: URL of the Jupiter token list
        """
        super().__init__(config, http_client)
        self.token_list_url = token_list_url

    @staticmethod
    def _decode(response: httpx.Response, source: str) -> Any:
        if not response.is_success:
            raise TokenMetadataError(
                f"{source} returned HTTP {response.status_code}",
                details={"status_code": response.status_code}
            )
        try:
            return response.json()
        except ValueError as e:
            raise TokenMetadataError(f"{source} returned invalid JSON: {str(e)}")

    async def get_token_list(self) -> List[Dict[str, Any]]:
        """Fetch the Jupiter token list.

        Returns:
            List of ``{address, name, symbol, ...}`` records

        Raises:
            TokenMetadataError: On a non-2xx status or a body that is not a list
            httpx.RequestError: If there's a network error
        """
        response = await self.http_client.get(self.token_list_url, headers=self.headers)
        tokens = self._decode(response, "Jupiter token list")
        if not isinstance(tokens, list):
            raise TokenMetadataError("Jupiter token list is not an array")
        return [token for token in tokens if isinstance(token, dict)]

    async def find_token_in_list(self, mint: str) -> Optional[Dict[str, Any]]:
        """Find a token in the Jupiter list by exact mint address.

        Args:
            mint: The token mint address

        Returns:
            The matching list entry, or None
        """
        for token in await self.get_token_list():
            if token.get("address") == mint:
                return token
        return None

    async def get_helius_token_metadata(self, mint: str) -> Optional[Dict[str, Any]]:
        """Fetch token metadata for a mint from the Helius token-metadata API.

        Args:
            mint: The token mint address

        Returns:
            The first metadata record, or None when the API returned none

        Raises:
            TokenMetadataError: On a non-2xx status or an unexpected body
            ConfigurationError: If no API key is configured
            httpx.RequestError: If there's a network error
        """
        url = f"{self.config.api_url}/token-metadata?api-key={self.config.require_api_key()}"
        response = await self.http_client.post(
            url,
            headers=self.headers,
            json={"mintAccounts": [mint]}
        )
        records = self._decode(response, "Helius token metadata")
        if not isinstance(records, list):
            raise TokenMetadataError("Helius token metadata response is not an array")
        if records and isinstance(records[0], dict):
            return records[0]
        return None
