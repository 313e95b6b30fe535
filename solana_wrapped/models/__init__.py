"""Data models for Solana Wrapped."""

from solana_wrapped.models.summary import (
    ErrorResponse,
    FirstCoinTraded,
    ProtocolCount,
    Summary,
    TransactionsResponse,
)
from solana_wrapped.models.token import TokenMetadata

__all__ = [
    'ErrorResponse',
    'FirstCoinTraded',
    'ProtocolCount',
    'Summary',
    'TokenMetadata',
    'TransactionsResponse',
]
