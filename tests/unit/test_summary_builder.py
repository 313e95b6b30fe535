"""Unit tests for summary assembly."""

import pytest

from solana_wrapped.models.summary import ProtocolCount
from solana_wrapped.models.token import TokenMetadata
from solana_wrapped.services.first_interaction import InteractionKind, TokenInteraction
from solana_wrapped.services.summary_builder import (
    activity_label,
    activity_level,
    build_summary,
    count_active_days,
    describe_first_action,
    profile_badge,
)
from solana_wrapped.services.transaction_filter import FilterResult
from tests.fixtures.common import BONK_MINT, JAN_2_2025, make_transaction


@pytest.mark.parametrize("tx_count,expected", [
    (0, 1),
    (9, 1),
    (10, 2),
    (29, 3),
    (30, 4),
    (59, 6),
    (60, 7),
    (99, 8),
    (100, 9),
    (149, 9),
    (150, 10),
    (200, 10),
    (5000, 10),
])
def test_activity_level(tx_count, expected):
    assert activity_level(tx_count) == expected


@pytest.mark.parametrize("level,expected", [
    (1, "Newbie"),
    (2, "Beginner"),
    (3, "Beginner"),
    (4, "Active"),
    (6, "Active"),
    (7, "Power User"),
    (8, "Power User"),
    (9, "Solana Maximalist"),
    (10, "Solana Maximalist"),
])
def test_activity_label(level, expected):
    assert activity_label(level) == expected


def test_profile_badge():
    assert profile_badge("Jupiter") == "Aggregator Pro"
    assert profile_badge("Pump.fun") == "Degen Pro"
    assert profile_badge("Multiple Interactions") == "On-Chain Explorer"


def test_count_active_days_uses_utc_dates():
    txs = [
        make_transaction("a", block_time=JAN_2_2025),
        make_transaction("b", block_time=JAN_2_2025 + 86399),
        make_transaction("c", block_time=JAN_2_2025 + 86400),
        make_transaction("d", block_time=None),
    ]
    assert count_active_days(txs) == 2


def test_describe_first_action():
    txs = [make_transaction("a", block_time=JAN_2_2025 + 86400), make_transaction("b", block_time=JAN_2_2025)]

    assert describe_first_action("Jupiter", txs) == "DeFi Trading"
    assert describe_first_action("Magic Eden", txs) == "NFT Activity"
    assert describe_first_action("Orca", txs) == "Activity on 2 Jan 2025"
    assert describe_first_action("Orca", []) == "Unknown Activity"


def test_empty_summary_uses_sentinel():
    summary = build_summary(FilterResult(), pages_fetched=1, protocols=[], year=2025)

    assert summary.total_transactions == 0
    assert summary.top_protocol == "Multiple Interactions"
    assert summary.top_protocol_count == 0
    assert summary.active_days == 0
    assert summary.activity_level == 1
    assert summary.activity_label == "Newbie"
    assert summary.first_action == "Unknown Activity"
    assert summary.first_coin_traded is None


def test_summary_counts_and_first_coin():
    kept = [make_transaction(f"sig{i}", block_time=JAN_2_2025 + i) for i in range(3)]
    filter_result = FilterResult(transactions=kept, original_count=7, signed_count=5)
    protocols = [ProtocolCount(name="Jupiter", count=4), ProtocolCount(name="Orca", count=1)]
    interaction = TokenInteraction(
        token_mint=BONK_MINT,
        kind=InteractionKind.SWAP,
        dex="Jupiter",
        signature="sig0",
        block_time=JAN_2_2025
    )

    summary = build_summary(
        filter_result,
        pages_fetched=1,
        protocols=protocols,
        year=2025,
        first_interaction=interaction,
        token_metadata=TokenMetadata(name="Bonk", symbol="BONK", source="jupiter")
    )
    payload = summary.model_dump(by_alias=True)

    assert payload["totalTransactions"] == 3
    assert payload["originalCount"] == 7
    assert payload["removedSpam"] == 0
    assert payload["removedUnsigned"] == 2
    assert payload["removedFailed"] == 2
    assert payload["topProtocol"] == "Jupiter"
    assert payload["topProtocolCount"] == 4
    assert payload["profileBadge"] == "Aggregator Pro"
    assert payload["year"] == 2025
    assert payload["firstCoinTraded"] == {
        "tokenMint": BONK_MINT,
        "tokenName": "Bonk",
        "tokenSymbol": "BONK",
        "dex": "Jupiter",
        "date": "2025-01-02T00:00:00.000Z",
        "signature": "sig0",
        "type": "swap",
    }


def test_first_coin_without_metadata_has_null_names():
    interaction = TokenInteraction(token_mint=BONK_MINT, kind=InteractionKind.TRANSFER, block_time=JAN_2_2025)
    summary = build_summary(
        FilterResult(), pages_fetched=1, protocols=[], year=2025, first_interaction=interaction
    )

    assert summary.first_coin_traded.token_name is None
    assert summary.first_coin_traded.token_symbol is None
    assert summary.first_coin_traded.dex is None
    assert summary.first_coin_traded.type == "transfer"
