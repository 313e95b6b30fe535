"""Pipeline services for Solana Wrapped."""

from solana_wrapped.services.first_interaction import (
    InteractionKind,
    TokenInteraction,
    resolve_first_interaction,
)
from solana_wrapped.services.paginator import PaginationResult, TransactionPaginator
from solana_wrapped.services.protocol_attribution import attribute_protocols
from solana_wrapped.services.summary_builder import build_summary
from solana_wrapped.services.token_metadata import TokenMetadataEnricher
from solana_wrapped.services.transaction_filter import FilterResult, filter_transactions
from solana_wrapped.services.wrapped_service import WrappedService

__all__ = [
    'FilterResult',
    'InteractionKind',
    'PaginationResult',
    'TokenInteraction',
    'TokenMetadataEnricher',
    'TransactionPaginator',
    'WrappedService',
    'attribute_protocols',
    'build_summary',
    'filter_transactions',
    'resolve_first_interaction',
]
