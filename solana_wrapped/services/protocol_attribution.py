"""Attribution of wallet activity to known on-chain protocols.

Attribution is presence based: a transaction adds one count for every
instruction invoking a known program and one more for every known program
found in its account keys.
"""

from typing import Any, Dict, Iterable, List, Mapping

from solana_wrapped.constants import PROTOCOLS
from solana_wrapped.models.summary import ProtocolCount
from solana_wrapped.utils.transaction_parser import (
    account_key_to_str,
    get_account_keys,
    get_instructions,
    resolve_program_id,
)


def tally_protocols(
    transactions: Iterable[Dict[str, Any]],
    programs: Mapping[str, str] = PROTOCOLS
) -> Dict[str, int]:
    """Count protocol interactions across transactions.

    Args:
        transactions: Filtered transactions
        programs: Mapping of program ID to protocol name

    Returns:
        Protocol name to count, in first-seen order
    """
    counts: Dict[str, int] = {}

    for tx in transactions:
        account_keys = get_account_keys(tx)

        for instruction in get_instructions(tx):
            program_id = resolve_program_id(instruction, account_keys)
            if program_id and program_id in programs:
                protocol = programs[program_id]
                counts[protocol] = counts.get(protocol, 0) + 1

        for account_key in account_keys:
            key = account_key_to_str(account_key)
            if key and key in programs:
                protocol = programs[key]
                counts[protocol] = counts.get(protocol, 0) + 1

    return counts


def rank_protocols(counts: Dict[str, int]) -> List[ProtocolCount]:
    """Sort protocols by count, highest first.

    The sort is stable, so equal counts keep first-seen order.
    """
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [ProtocolCount(name=name, count=count) for name, count in ranked]


def attribute_protocols(transactions: Iterable[Dict[str, Any]]) -> List[ProtocolCount]:
    """Tally and rank protocol interactions for a set of transactions."""
    return rank_protocols(tally_protocols(transactions))
