"""Unit tests for protocol attribution."""

from solana_wrapped.constants import (
    JUPITER_PROGRAM_ID,
    ORCA_WHIRLPOOL_PROGRAM_ID,
    RAYDIUM_AMM_PROGRAM_ID,
    RAYDIUM_CLMM_PROGRAM_ID,
    TOKEN_PROGRAM_ID,
)
from solana_wrapped.models.summary import ProtocolCount
from solana_wrapped.services.protocol_attribution import attribute_protocols, rank_protocols, tally_protocols
from tests.fixtures.common import make_transaction


def test_instruction_and_account_key_both_count():
    tx = make_transaction(
        "sig",
        account_keys=[JUPITER_PROGRAM_ID],
        instructions=[{"programId": JUPITER_PROGRAM_ID}]
    )
    assert tally_protocols([tx]) == {"Jupiter": 2}


def test_account_key_only_counts_once():
    tx = make_transaction("sig", account_keys=[{"pubkey": JUPITER_PROGRAM_ID}])
    assert attribute_protocols([tx]) == [ProtocolCount(name="Jupiter", count=1)]


def test_raydium_programs_share_a_name():
    txs = [
        make_transaction("amm", account_keys=[RAYDIUM_AMM_PROGRAM_ID]),
        make_transaction("clmm", account_keys=[RAYDIUM_CLMM_PROGRAM_ID]),
    ]
    assert tally_protocols(txs) == {"Raydium": 2}


def test_unknown_programs_are_ignored():
    tx = make_transaction(
        "sig",
        account_keys=[TOKEN_PROGRAM_ID],
        instructions=[{"programId": TOKEN_PROGRAM_ID}]
    )
    assert attribute_protocols([tx]) == []


def test_ties_keep_first_seen_order():
    txs = [
        make_transaction("orca", account_keys=[ORCA_WHIRLPOOL_PROGRAM_ID]),
        make_transaction("raydium", account_keys=[RAYDIUM_AMM_PROGRAM_ID]),
        make_transaction("jupiter", account_keys=[JUPITER_PROGRAM_ID, JUPITER_PROGRAM_ID]),
    ]
    ranked = attribute_protocols(txs)

    assert [(p.name, p.count) for p in ranked] == [("Jupiter", 2), ("Orca", 1), ("Raydium", 1)]


def test_rank_protocols_sorts_descending():
    ranked = rank_protocols({"Orca": 1, "Jupiter": 5, "Kamino": 3})
    assert [p.name for p in ranked] == ["Jupiter", "Kamino", "Orca"]
