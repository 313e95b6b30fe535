"""Assembly of the year-in-review summary."""

from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from solana_wrapped.constants import MULTIPLE_INTERACTIONS
from solana_wrapped.models.summary import FirstCoinTraded, ProtocolCount, Summary
from solana_wrapped.models.token import TokenMetadata
from solana_wrapped.services.first_interaction import TokenInteraction
from solana_wrapped.services.transaction_filter import FilterResult
from solana_wrapped.utils.transaction_parser import get_block_time

# Upper activity level bound for each label, checked in order
ACTIVITY_LABELS = (
    (1, "Newbie"),
    (3, "Beginner"),
    (6, "Active"),
    (8, "Power User"),
)
TOP_ACTIVITY_LABEL = "Solana Maximalist"

PROFILE_BADGES = {
    "Jupiter": "Aggregator Pro",
    "Raydium": "Yield Farmer Pro",
    "Orca": "Liquidity Provider Pro",
    "Phoenix": "Liquidity Provider Pro",
    "Meteora": "Liquidity Provider Pro",
    "Magic Eden": "NFT Collector Pro",
    "Pump.fun": "Degen Pro",
    "KLend": "Lender Pro",
    "Kamino": "Lender Pro",
}
DEFAULT_PROFILE_BADGE = "On-Chain Explorer"

FIRST_ACTIONS = {
    "Jupiter": "DeFi Trading",
    "Raydium": "DeFi Trading",
    "Magic Eden": "NFT Activity",
}


def activity_level(tx_count: int) -> int:
    """Map a transaction count to an activity tier from 1 to 10.

    Tier boundaries sit at 10, 30, 60 and 100 transactions.
    """
    if tx_count >= 100:
        return min(10, 9 + (tx_count - 100) // 50)
    if tx_count >= 60:
        return 7 + (tx_count - 60) // 20
    if tx_count >= 30:
        return 4 + (tx_count - 30) // 10
    if tx_count >= 10:
        return 2 + (tx_count - 10) // 10
    return 1


def activity_label(level: int) -> str:
    """Display label for an activity tier."""
    for upper_bound, label in ACTIVITY_LABELS:
        if level <= upper_bound:
            return label
    return TOP_ACTIVITY_LABEL


def profile_badge(top_protocol: str) -> str:
    return PROFILE_BADGES.get(top_protocol, DEFAULT_PROFILE_BADGE)


def _utc(block_time: int) -> datetime:
    return datetime.fromtimestamp(block_time, tz=timezone.utc)


def count_active_days(transactions: Iterable[Dict[str, Any]]) -> int:
    """Count distinct UTC calendar days among the transactions' block times."""
    days = set()
    for tx in transactions:
        block_time = get_block_time(tx)
        if block_time:
            days.add(_utc(block_time).date())
    return len(days)


def describe_first_action(top_protocol: str, transactions: List[Dict[str, Any]]) -> str:
    """Short description of what the wallet mostly did."""
    if top_protocol in FIRST_ACTIONS:
        return FIRST_ACTIONS[top_protocol]
    block_times = [get_block_time(tx) for tx in transactions if get_block_time(tx)]
    if not block_times:
        return "Unknown Activity"
    oldest = _utc(min(block_times))
    return f"Activity on {oldest.day} {oldest.strftime('%b')} {oldest.year}"


def build_first_coin_traded(
    interaction: Optional[TokenInteraction],
    metadata: Optional[TokenMetadata]
) -> Optional[FirstCoinTraded]:
    """Combine the resolved interaction with its token metadata."""
    if interaction is None or not interaction.token_mint:
        return None
    metadata = metadata or TokenMetadata()
    return FirstCoinTraded(
        token_mint=interaction.token_mint,
        token_name=metadata.name,
        token_symbol=metadata.symbol,
        dex=interaction.dex,
        date=interaction.date,
        signature=interaction.signature,
        type=interaction.kind.value
    )


def build_summary(
    filter_result: FilterResult,
    pages_fetched: int,
    protocols: List[ProtocolCount],
    year: int,
    first_interaction: Optional[TokenInteraction] = None,
    token_metadata: Optional[TokenMetadata] = None
) -> Summary:
    """Assemble the summary from the pipeline outputs.

    Args:
        filter_result: Filtered transactions and the pre-filter counts
        pages_fetched: Number of pages retrieved
        protocols: Ranked protocol counts
        year: Calendar year covered
        first_interaction: The resolved first token interaction, if any
        token_metadata: Metadata for the first interaction's mint

    Returns:
        The Summary model
    """
    transactions = filter_result.transactions
    total = len(transactions)

    if protocols:
        top_protocol = protocols[0].name
        top_protocol_count = protocols[0].count
    else:
        top_protocol = MULTIPLE_INTERACTIONS
        top_protocol_count = 0

    level = activity_level(total)

    return Summary(
        total_transactions=total,
        original_count=filter_result.original_count,
        removed_spam=0,
        removed_unsigned=filter_result.removed_unsigned,
        removed_failed=filter_result.removed_failed,
        pages_fetched=pages_fetched,
        protocols=protocols,
        top_protocol=top_protocol,
        top_protocol_count=top_protocol_count,
        active_days=count_active_days(transactions),
        activity_level=level,
        activity_label=activity_label(level),
        profile_badge=profile_badge(top_protocol),
        first_action=describe_first_action(top_protocol, transactions),
        year=year,
        first_coin_traded=build_first_coin_traded(first_interaction, token_metadata)
    )
