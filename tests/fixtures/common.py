"""Common test fixtures for Solana Wrapped tests.

This module provides fixtures and transaction builders that can be reused
across different test modules.
"""

from typing import Any, Dict, List, Optional

import pytest

from solana_wrapped.config import HeliusConfig, WrappedConfig

WALLET = "9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM"
OTHER_WALLET = "7xKXtg2CW87d97TXJSDpbD5jBkheTqA83TZRuJosgAsU"

BONK_MINT = "DezXAZ8z7PnrnRJjz3wXBoRgixCa6xjnB7YaB1pPB263"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"

# 2025-01-02T00:00:00Z
JAN_2_2025 = 1735776000


def token_balance(mint: str, amount: str, account_index: int = 1) -> Dict[str, Any]:
    """Build a pre/post token balance entry."""
    return {
        "accountIndex": account_index,
        "mint": mint,
        "uiTokenAmount": {"uiAmountString": amount}
    }


def make_transaction(
    signature: str,
    block_time: Optional[int] = JAN_2_2025,
    signer: str = WALLET,
    account_keys: Optional[List[Any]] = None,
    instructions: Optional[List[Dict[str, Any]]] = None,
    err: Any = None,
    pre_token_balances: Optional[List[Dict[str, Any]]] = None,
    post_token_balances: Optional[List[Dict[str, Any]]] = None,
    num_required_signatures: int = 1
) -> Dict[str, Any]:
    """Build a raw transaction record shaped like a Helius full-details entry."""
    return {
        "signature": signature,
        "blockTime": block_time,
        "slot": 300000000,
        "transaction": {
            "signatures": [signature],
            "message": {
                "header": {"numRequiredSignatures": num_required_signatures},
                "accountKeys": [signer] + list(account_keys or []),
                "instructions": list(instructions or [])
            }
        },
        "meta": {
            "err": err,
            "fee": 5000,
            "preTokenBalances": list(pre_token_balances or []),
            "postTokenBalances": list(post_token_balances or [])
        }
    }


def rpc_result(transactions: List[Dict[str, Any]], pagination_token: Optional[str] = None) -> Dict[str, Any]:
    """Wrap transactions in a getTransactionsForAddress JSON-RPC response."""
    return {
        "jsonrpc": "2.0",
        "id": "1",
        "result": {
            "data": transactions,
            "paginationToken": pagination_token
        }
    }


@pytest.fixture
def helius_config():
    """Helius configuration pointing at test hosts."""
    return HeliusConfig(
        api_key="test-key",
        rpc_url="https://rpc.test",
        api_url="https://api.test/v0",
        timeout=5
    )


@pytest.fixture
def wrapped_config():
    """Pipeline configuration without inter-page delay."""
    return WrappedConfig(
        year=2025,
        page_size=100,
        max_pages=5,
        page_delay_seconds=0,
        token_list_url="https://tokens.test/strict"
    )
