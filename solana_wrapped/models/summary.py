"""Response models for the API.

This module defines Pydantic models for the wrapped summary payload. Fields
are snake_case in Python and serialize as camelCase.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serializing field names as camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProtocolCount(CamelModel):
    """Interaction count for one protocol."""

    name: str = Field(..., description="Protocol display name")
    count: int = Field(..., ge=0, description="Number of attributed interactions")


class FirstCoinTraded(CamelModel):
    """The first token the wallet interacted with during the year."""

    token_mint: str = Field(..., description="Token mint address")
    token_name: Optional[str] = Field(None, description="Token name")
    token_symbol: Optional[str] = Field(None, description="Token symbol")
    dex: Optional[str] = Field(None, description="DEX used for the swap, if any")
    date: Optional[str] = Field(None, description="ISO-8601 UTC timestamp of the transaction")
    signature: Optional[str] = Field(None, description="Transaction signature")
    type: str = Field(..., description="Interaction kind")


class Summary(CamelModel):
    """Year-in-review summary for one wallet."""

    total_transactions: int = Field(..., description="Transactions left after filtering")
    original_count: int = Field(..., description="Transactions fetched before filtering")
    removed_spam: int = Field(0, description="Reserved, always 0")
    removed_unsigned: int = Field(..., description="Transactions not signed by the wallet")
    removed_failed: int = Field(..., description="Signed transactions that failed")
    pages_fetched: int = Field(..., description="Pages retrieved from the provider")
    protocols: List[ProtocolCount] = Field(default_factory=list, description="Protocols ranked by count")
    top_protocol: str = Field(..., description="Most used protocol or a sentinel")
    top_protocol_count: int = Field(0, description="Interactions with the top protocol")
    active_days: int = Field(..., description="Distinct UTC days with activity")
    activity_level: int = Field(..., ge=1, le=10, description="Activity tier from 1 to 10")
    activity_label: str = Field(..., description="Display label for the activity tier")
    profile_badge: str = Field(..., description="Badge derived from the top protocol")
    first_action: str = Field(..., description="Short description of the wallet's activity")
    year: int = Field(..., description="Calendar year covered")
    first_coin_traded: Optional[FirstCoinTraded] = Field(None, description="First token interaction")


class TransactionsResponse(CamelModel):
    """Response of the transactions endpoint."""

    data: List[Dict[str, Any]] = Field(default_factory=list, description="Filtered raw transactions")
    summary: Summary


class ErrorResponse(BaseModel):
    """Error payload returned with 4xx/5xx responses."""

    message: str
