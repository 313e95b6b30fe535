"""Solana Wrapped Package.

This package builds a "year in review" summary of a Solana wallet's on-chain
activity: paginated transaction retrieval from Helius, filtering, protocol
attribution, first-token discovery and token metadata enrichment.
"""

__version__ = "0.1.0"
__author__ = "Solana Wrapped Contributors"
__email__ = "dev@solana-wrapped.app"
