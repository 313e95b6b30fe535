"""Filters that keep only transactions the wallet signed and that succeeded."""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

from solana_wrapped.utils.transaction_parser import get_signers, has_error


@dataclass
class FilterResult:
    """Outcome of filtering the fetched records."""
    transactions: List[Dict[str, Any]] = field(default_factory=list)
    original_count: int = 0
    signed_count: int = 0

    @property
    def removed_unsigned(self) -> int:
        return self.original_count - self.signed_count

    @property
    def removed_failed(self) -> int:
        return self.signed_count - len(self.transactions)


def is_signed_by(tx: Dict[str, Any], address: str) -> bool:
    """Check whether the address is one of the transaction's required signers."""
    return address in get_signers(tx)


def is_successful(tx: Dict[str, Any]) -> bool:
    """Check that no top-level or nested error indicator is set."""
    meta = tx.get("meta")
    transaction = tx.get("transaction")
    nested_meta = transaction.get("meta") if isinstance(transaction, dict) else None
    return not (
        has_error(tx.get("err"))
        or (isinstance(meta, dict) and has_error(meta.get("err")))
        or (isinstance(nested_meta, dict) and has_error(nested_meta.get("err")))
    )


def filter_transactions(transactions: Iterable[Dict[str, Any]], address: str) -> FilterResult:
    """Drop unsigned and failed transactions.

    Args:
        transactions: Raw records from the provider
        address: The wallet address under test

    Returns:
        FilterResult with the surviving records in their original order
    """
    records = list(transactions)
    signed = [tx for tx in records if is_signed_by(tx, address)]
    successful = [tx for tx in signed if is_successful(tx)]
    return FilterResult(
        transactions=successful,
        original_count=len(records),
        signed_count=len(signed)
    )
