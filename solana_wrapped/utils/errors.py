"""
Error types for Solana Wrapped.

This module provides the exception hierarchy used across the pipeline and the
mapping from each error to the HTTP status code the API reports for it.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """Error codes for Solana Wrapped."""
    # General errors
    UNKNOWN_ERROR = 1000
    CONFIGURATION_ERROR = 1001
    VALIDATION_ERROR = 1002

    # Upstream errors
    RPC_ERROR = 3000
    HTTP_STATUS_ERROR = 3001

    # Data errors
    DATA_ERROR = 4000
    PARSING_ERROR = 4001


class SolanaWrappedError(Exception):
    """Base exception class for all Solana Wrapped errors."""

    status_code = 500

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        """Initialize a new SolanaWrappedError.

        Args:
            message: Error message
            error_code: Error code from ErrorCode enum
            details: Additional error details
        """
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)


class ConfigurationError(SolanaWrappedError):
    """Raised when required configuration is missing or invalid."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.CONFIGURATION_ERROR, details)


class ValidationError(SolanaWrappedError):
    """Raised when request input fails validation."""

    status_code = 400

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.VALIDATION_ERROR, details)


class InvalidPublicKeyError(ValidationError):
    """Exception raised when an invalid public key is provided."""

    def __init__(self, pubkey: Optional[str]):
        super().__init__("Invalid Solana wallet address", details={"pubkey": pubkey})
        self.pubkey = pubkey


class HeliusRpcError(SolanaWrappedError):
    """Exception raised when a Helius request fails."""

    def __init__(
        self,
        message: str,
        error_data: Optional[Dict[str, Any]] = None,
        error_code: ErrorCode = ErrorCode.RPC_ERROR
    ):
        """Initialize the exception.

        Args:
            message: Error message
            error_data: Optional error data from the RPC response
            error_code: Error code from ErrorCode enum
        """
        super().__init__(message, error_code, details=error_data)
        self.error_data = error_data or {}


class TokenMetadataError(SolanaWrappedError):
    """Raised when a token metadata source returns an unusable response."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.PARSING_ERROR, details)
