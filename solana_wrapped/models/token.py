"""
Token data models for Solana Wrapped.
"""

from typing import Optional

from pydantic import BaseModel


class TokenMetadata(BaseModel):
    """
    Name and symbol resolved for a token mint.

    ``source`` records which lookup produced the values: ``jupiter``,
    ``helius`` or ``none`` when every source missed or failed.
    """
    name: Optional[str] = None
    symbol: Optional[str] = None
    source: str = "none"

    @property
    def is_empty(self) -> bool:
        """True when neither name nor symbol is known."""
        return not self.name and not self.symbol
