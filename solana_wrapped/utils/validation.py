"""Validation utilities for Solana Wrapped.

This module provides utilities for validating Solana-specific data.
"""

import re
from typing import Optional

from solana_wrapped.constants import PUBKEY_REGEX
from solana_wrapped.utils.errors import InvalidPublicKeyError, ValidationError

# Solana public key validation pattern (base58 format)
PUBKEY_PATTERN = re.compile(PUBKEY_REGEX)


def validate_public_key(pubkey: Optional[str]) -> bool:
    """Validate a Solana public key.

    Args:
        pubkey: The public key to validate

    Returns:
        True if the public key is valid, False otherwise
    """
    if not pubkey or not isinstance(pubkey, str):
        return False
    return bool(PUBKEY_PATTERN.fullmatch(pubkey))


def validate_wallet_address(address: Optional[str]) -> str:
    """Validate a wallet address and raise an exception if missing or invalid.

    Args:
        address: The address to validate

    Returns:
        The validated address

    Raises:
        ValidationError: If the address is missing
        InvalidPublicKeyError: If the address is not a base58 public key
    """
    if not address:
        raise ValidationError("Address is required")
    if not validate_public_key(address):
        raise InvalidPublicKeyError(address)
    return address
