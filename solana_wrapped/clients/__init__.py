"""Helius and token list clients for Solana Wrapped.

This package provides the HTTP clients the pipeline uses to reach upstream
providers.
"""

from solana_wrapped.clients.base_client import BaseHeliusClient
from solana_wrapped.clients.token_client import TokenClient
from solana_wrapped.clients.transaction_client import TransactionClient, TransactionPage

__all__ = [
    'BaseHeliusClient',
    'TokenClient',
    'TransactionClient',
    'TransactionPage',
]
