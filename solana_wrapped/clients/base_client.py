"""Base Helius HTTP client for Solana Wrapped.

This module provides the shared HTTP plumbing used by the transaction and
token clients: one ``httpx.AsyncClient`` per client instance (or one handed
in by the caller), JSON-RPC request building and error mapping.
"""

# Standard library imports
from typing import Any, Dict, List, Optional

# Third-party library imports
import httpx

# Internal imports
from solana_wrapped.config import HeliusConfig, get_helius_config
from solana_wrapped.logging_config import get_logger
from solana_wrapped.utils.errors import ErrorCode, HeliusRpcError

# Get logger
logger = get_logger(__name__)


class BaseHeliusClient:
    """Base client for interacting with the Helius APIs."""

    def __init__(
        self,
        config: Optional[HeliusConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        """Initialize the client.

        Args:
            config: Helius configuration. Defaults to environment-based config.
            http_client: Shared HTTP client. When omitted the client creates
                its own and closes it in ``close()``.
        """
        self.config = config or get_helius_config()
        self.headers = {"Content-Type": "application/json"}
        self._http_client = http_client
        self._owns_http_client = http_client is None

    @property
    def http_client(self) -> httpx.AsyncClient:
        """Get the HTTP client, creating it on first use."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=self.config.timeout,
                limits=httpx.Limits(max_keepalive_connections=10, max_connections=20)
            )
        return self._http_client

    @property
    def rpc_endpoint(self) -> str:
        """RPC endpoint URL including the API key."""
        return f"{self.config.rpc_url}/?api-key={self.config.require_api_key()}"

    async def _make_request(self, method: str, params: Optional[List[Any]] = None) -> Dict[str, Any]:
        """Make a JSON-RPC request to the Helius RPC endpoint.

        No retries are attempted; a failed call raises immediately.

        Args:
            method: The RPC method to call
            params: The parameters to pass to the method

        Returns:
            The ``result`` member of the JSON-RPC response

        Raises:
            HeliusRpcError: If the server answers with a non-2xx status, an
                RPC error object or a body that is not JSON
            httpx.RequestError: If there's a network or request error
        """
        payload = {
            "jsonrpc": "2.0",
            "id": "1",
            "method": method,
            "params": params or []
        }

        response = await self.http_client.post(
            self.rpc_endpoint,
            headers=self.headers,
            json=payload
        )

        if not response.is_success:
            raise HeliusRpcError(
                f"Helius API error: {response.status_code} - {response.text}",
                {"status_code": response.status_code},
                ErrorCode.HTTP_STATUS_ERROR
            )

        try:
            result = response.json()
        except ValueError as e:
            raise HeliusRpcError(f"Invalid JSON from Helius: {str(e)}", error_code=ErrorCode.PARSING_ERROR)

        if not isinstance(result, dict):
            raise HeliusRpcError("Unexpected response shape from Helius", error_code=ErrorCode.PARSING_ERROR)

        error = result.get("error")
        if error:
            message = error.get("message") if isinstance(error, dict) else None
            logger.debug(f"RPC error from {method}: {error}")
            raise HeliusRpcError(
                message or "Failed to fetch transactions",
                error if isinstance(error, dict) else {"error": error}
            )

        return result.get("result") or {}

    async def __aenter__(self):
        """Async context manager entry.

        Returns:
            Self
        """
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def close(self):
        """Close the HTTP client if this instance created it."""
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
