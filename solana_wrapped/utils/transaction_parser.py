"""Helpers for reading raw Helius transaction records.

Records are kept as the plain dictionaries returned by the provider. The
helpers here tolerate the layout variations seen in practice (fields at the
top level or nested under ``transaction``, account keys as strings or as
``{"pubkey": ...}`` objects) and never raise on malformed input.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

Transaction = Dict[str, Any]


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def get_message(tx: Transaction) -> Dict[str, Any]:
    """Get the transaction message, or an empty dict."""
    return _as_dict(_as_dict(tx.get("transaction")).get("message"))


def get_account_keys(tx: Transaction) -> List[Any]:
    """Get the raw account key list of a transaction."""
    return _as_list(get_message(tx).get("accountKeys"))


def get_instructions(tx: Transaction) -> List[Dict[str, Any]]:
    """Get the top-level instructions of a transaction."""
    return [inst for inst in _as_list(get_message(tx).get("instructions")) if isinstance(inst, dict)]


def get_meta(tx: Transaction) -> Dict[str, Any]:
    """Get the transaction meta, which may live at the top level or under ``transaction``."""
    meta = tx.get("meta")
    if isinstance(meta, dict) and meta:
        return meta
    return _as_dict(_as_dict(tx.get("transaction")).get("meta"))


def get_block_time(tx: Transaction) -> int:
    """Get the block timestamp, or 0 when it is missing."""
    block_time = tx.get("blockTime") or _as_dict(tx.get("transaction")).get("blockTime")
    if isinstance(block_time, bool) or not isinstance(block_time, (int, float)):
        return 0
    return int(block_time)


def get_signature(tx: Transaction) -> Optional[str]:
    """Get the transaction signature."""
    signature = tx.get("signature")
    if isinstance(signature, str) and signature:
        return signature
    signatures = _as_list(_as_dict(tx.get("transaction")).get("signatures"))
    if signatures and isinstance(signatures[0], str):
        return signatures[0]
    return None


def account_key_to_str(account_key: Any) -> Optional[str]:
    """Convert an account key entry to its base58 string.

    Entries are either plain strings or parsed objects carrying ``pubkey``.
    """
    if isinstance(account_key, str):
        return account_key or None
    if isinstance(account_key, dict):
        pubkey = account_key.get("pubkey")
        if isinstance(pubkey, str) and pubkey:
            return pubkey
    return None


def _lookup_account_key(account_keys: List[Any], index: Any) -> Optional[str]:
    if isinstance(index, bool) or not isinstance(index, int):
        return None
    if 0 <= index < len(account_keys):
        return account_key_to_str(account_keys[index])
    return None


def resolve_program_id(instruction: Dict[str, Any], account_keys: List[Any]) -> Optional[str]:
    """Resolve the program an instruction invokes.

    Resolution order: a direct ``programId`` string, then an index into the
    account keys (``programId`` as an integer, or ``programIdIndex``), then a
    nested ``{"programId": ...}`` object.

    Args:
        instruction: Instruction from the transaction message
        account_keys: The transaction's account key list

    Returns:
        The program ID, or None if it cannot be resolved
    """
    program_id = instruction.get("programId")

    if isinstance(program_id, str):
        return program_id or None

    if program_id is None:
        return _lookup_account_key(account_keys, instruction.get("programIdIndex"))

    if isinstance(program_id, int):
        return _lookup_account_key(account_keys, program_id)

    if isinstance(program_id, dict):
        nested = program_id.get("programId")
        if isinstance(nested, str) and nested:
            return nested

    return None


def get_signers(tx: Transaction) -> List[str]:
    """Get the accounts whose signatures the transaction requires.

    These are the first ``numRequiredSignatures`` account keys.
    """
    header = _as_dict(get_message(tx).get("header"))
    required = header.get("numRequiredSignatures") or 0
    if isinstance(required, bool) or not isinstance(required, int) or required < 0:
        required = 0
    signers = []
    for account_key in get_account_keys(tx)[:required]:
        key = account_key_to_str(account_key)
        if key:
            signers.append(key)
    return signers


def has_error(value: Any) -> bool:
    """Return True if a field carries a truthy execution error value."""
    return bool(value)


def format_block_time(block_time: int) -> Optional[str]:
    """Format a Unix timestamp as an ISO-8601 UTC string with milliseconds.

    Returns:
        A string such as ``2025-03-01T12:00:00.000Z``, or None for a zero timestamp
    """
    if not block_time:
        return None
    moment = datetime.fromtimestamp(block_time, tz=timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")
