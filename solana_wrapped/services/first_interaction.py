"""Discovery of the first token a wallet interacted with during the year.

Each transaction is run through an ordered tuple of extractors. The first
extractor that recognises something wins for that transaction:

1. a swap on a known DEX program,
2. an SPL Token transfer or mint instruction,
3. a token balance that changed between the pre and post snapshots,
4. any token mint present in the snapshots.

Across transactions (oldest first) the first swap wins outright. Without a
swap, the earliest interaction of any kind is used.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, Dict, Iterable, Optional, Sequence, Tuple

from solana_wrapped.constants import (
    BALANCE_CHANGE_EPSILON,
    DEX_PROGRAM_IDS,
    PROTOCOLS,
    TOKEN_PROGRAM_ID,
    UNKNOWN_DEX,
)
from solana_wrapped.logging_config import get_logger
from solana_wrapped.utils.transaction_parser import (
    format_block_time,
    get_account_keys,
    get_block_time,
    get_instructions,
    get_meta,
    get_signature,
    resolve_program_id,
)

logger = get_logger(__name__)

Transaction = Dict[str, Any]


class InteractionKind(str, Enum):
    """How a token interaction was detected."""
    SWAP = "swap"
    TRANSFER = "transfer"
    MINT = "mint"
    BALANCE_CHANGE = "balance_change"
    TOKEN_PRESENCE = "token_presence"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class TokenInteraction:
    """A token interaction found in one transaction."""
    token_mint: Optional[str]
    kind: InteractionKind
    dex: Optional[str] = None
    signature: Optional[str] = None
    block_time: int = 0

    @property
    def date(self) -> Optional[str]:
        """ISO-8601 UTC timestamp of the transaction."""
        return format_block_time(self.block_time)


Extractor = Callable[[Transaction], Optional[TokenInteraction]]

# Jupiter instruction layouts
JUPITER_SWAP_TYPES = frozenset({"swap", "route", "routeV2"})
JUPITER_MINT_FIELDS: Tuple[Tuple[str, ...], ...] = (
    ("sourceMint",),
    ("destinationMint",),
    ("inAmount", "mint"),
    ("outAmount", "mint"),
    ("inputMint",),
    ("outputMint",),
    ("routePlan", "route", "inputMint"),
    ("routePlan", "route", "outputMint"),
)

# Raydium instruction layouts
RAYDIUM_SWAP_TYPES = frozenset({"swap", "swapBaseIn", "swapBaseOut"})
RAYDIUM_MINT_FIELDS: Tuple[Tuple[str, ...], ...] = (
    ("sourceMint",),
    ("destinationMint",),
    ("mintA",),
    ("mintB",),
    ("tokenAMint",),
    ("tokenBMint",),
)

SWAP_LAYOUTS = (
    (JUPITER_SWAP_TYPES, JUPITER_MINT_FIELDS),
    (RAYDIUM_SWAP_TYPES, RAYDIUM_MINT_FIELDS),
)

TRANSFER_TYPES = frozenset({"transfer", "transferChecked"})


def _dig(data: Any, path: Sequence[str]) -> Optional[str]:
    """Follow a key path through nested dicts and return a non-empty string."""
    for key in path:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data if isinstance(data, str) and data else None


def _parsed(instruction: Dict[str, Any]) -> Dict[str, Any]:
    parsed = instruction.get("parsed")
    return parsed if isinstance(parsed, dict) else {}


def _swap_mint(parsed: Dict[str, Any]) -> Optional[str]:
    parsed_type = parsed.get("type")
    info = parsed.get("info")
    for swap_types, mint_fields in SWAP_LAYOUTS:
        if parsed_type not in swap_types:
            continue
        for path in mint_fields:
            mint = _dig(info, path)
            if mint:
                return mint
    return None


def extract_swap(tx: Transaction) -> Optional[TokenInteraction]:
    """Detect a swap instruction on a known DEX.

    The interaction is reported even when no mint can be read from the
    instruction, so the DEX is still known.
    """
    account_keys = get_account_keys(tx)
    for instruction in get_instructions(tx):
        program_id = resolve_program_id(instruction, account_keys)
        if program_id not in DEX_PROGRAM_IDS:
            continue
        return TokenInteraction(
            token_mint=_swap_mint(_parsed(instruction)),
            kind=InteractionKind.SWAP,
            dex=PROTOCOLS.get(program_id, UNKNOWN_DEX)
        )
    return None


def extract_token_instruction(tx: Transaction) -> Optional[TokenInteraction]:
    """Detect an SPL Token transfer or mint instruction."""
    account_keys = get_account_keys(tx)
    for instruction in get_instructions(tx):
        if resolve_program_id(instruction, account_keys) != TOKEN_PROGRAM_ID:
            continue
        parsed = _parsed(instruction)
        parsed_type = parsed.get("type")
        info = parsed.get("info")
        if parsed_type in TRANSFER_TYPES:
            mint = _dig(info, ("mint",)) or _dig(info, ("authority",))
            if mint:
                return TokenInteraction(token_mint=mint, kind=InteractionKind.TRANSFER)
        elif parsed_type == "mintTo":
            mint = _dig(info, ("mint",))
            if mint:
                return TokenInteraction(token_mint=mint, kind=InteractionKind.MINT)
    return None


def _token_balances(tx: Transaction, key: str) -> Sequence[Dict[str, Any]]:
    balances = get_meta(tx).get(key)
    if not isinstance(balances, list):
        return []
    return [balance for balance in balances if isinstance(balance, dict)]


def _ui_amount(balance: Optional[Dict[str, Any]]) -> float:
    """Read ``uiTokenAmount.uiAmountString`` as a float; unparsable values give NaN."""
    if balance is None:
        return 0.0
    token_amount = balance.get("uiTokenAmount")
    amount = token_amount.get("uiAmountString") if isinstance(token_amount, dict) else None
    try:
        return float(amount or "0")
    except (TypeError, ValueError):
        return float("nan")


def extract_balance_change(tx: Transaction) -> Optional[TokenInteraction]:
    """Detect the first token whose balance changed in the transaction."""
    pre_balances = _token_balances(tx, "preTokenBalances")
    for post in _token_balances(tx, "postTokenBalances"):
        mint = post.get("mint")
        if not isinstance(mint, str) or not mint:
            continue
        pre = next(
            (
                balance for balance in pre_balances
                if balance.get("accountIndex") == post.get("accountIndex") and balance.get("mint") == mint
            ),
            None
        )
        if abs(_ui_amount(post) - _ui_amount(pre)) > BALANCE_CHANGE_EPSILON:
            return TokenInteraction(token_mint=mint, kind=InteractionKind.BALANCE_CHANGE)
    return None


def extract_token_presence(tx: Transaction) -> Optional[TokenInteraction]:
    """Report the first mint present in the token balance snapshots."""
    for key in ("preTokenBalances", "postTokenBalances"):
        for balance in _token_balances(tx, key):
            mint = balance.get("mint")
            if isinstance(mint, str) and mint:
                return TokenInteraction(token_mint=mint, kind=InteractionKind.TOKEN_PRESENCE)
    return None


EXTRACTORS: Tuple[Extractor, ...] = (
    extract_swap,
    extract_token_instruction,
    extract_balance_change,
    extract_token_presence,
)


def extract_token_interaction(
    tx: Transaction,
    extractors: Sequence[Extractor] = EXTRACTORS
) -> Optional[TokenInteraction]:
    """Run the extractors in order and return the first match.

    Args:
        tx: A filtered transaction
        extractors: Extractors to try, highest priority first

    Returns:
        The interaction stamped with the transaction's signature and block
        time, or None when nothing was recognised
    """
    for extractor in extractors:
        interaction = extractor(tx)
        if interaction is not None:
            return replace(
                interaction,
                signature=get_signature(tx),
                block_time=get_block_time(tx)
            )
    return None


def resolve_first_interaction(
    transactions: Iterable[Transaction],
    extractors: Sequence[Extractor] = EXTRACTORS
) -> Optional[TokenInteraction]:
    """Find the wallet's first token interaction of the year.

    Transactions are scanned oldest first. The first swap ends the scan and is
    returned. Without a swap the earliest interaction of any kind is used. A
    result without a mint is never returned: a swap whose mint could not be
    read falls back to the earliest interaction, and that one must carry a
    mint too.

    Args:
        transactions: Filtered transactions in any order
        extractors: Extractors to try for each transaction

    Returns:
        The selected interaction, or None
    """
    first_swap: Optional[TokenInteraction] = None
    first_interaction: Optional[TokenInteraction] = None

    for tx in sorted(transactions, key=get_block_time):
        interaction = extract_token_interaction(tx, extractors)
        if interaction is None:
            continue
        if first_interaction is None:
            first_interaction = interaction
        if interaction.kind is InteractionKind.SWAP:
            first_swap = interaction
            break

    if first_swap is not None and first_swap.token_mint:
        return first_swap
    if first_interaction is not None and first_interaction.token_mint:
        if first_swap is not None:
            logger.debug(f"Swap on {first_swap.dex} carried no mint, using earliest interaction")
        return first_interaction
    return None
