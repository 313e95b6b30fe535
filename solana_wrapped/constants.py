"""Constants used throughout the Solana Wrapped application.

The known-program table lives here so that protocol attribution, swap
detection and the summary builder all read the same mapping.
"""

from types import MappingProxyType

# Solana system program IDs
TOKEN_PROGRAM_ID = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"

# DEX program IDs
JUPITER_PROGRAM_ID = "JUP6LkbZbjS1jKKwapdHNy74zcZ3tLUZoi5QNyVTaV4"
RAYDIUM_AMM_PROGRAM_ID = "675kPX9MHTjS2zt1qfr1NYHuzeLXfQM9H24wFSUt1Mp8"
RAYDIUM_CLMM_PROGRAM_ID = "CAMMCzo5YL8w4VFF8KVHrK22GGUsp5VTaW7grrKgrWqK"
ORCA_WHIRLPOOL_PROGRAM_ID = "whirLbMiicVdio4qvUfM5KAg6Ct8VwpYzGff3uctyCc"
PHOENIX_PROGRAM_ID = "PhoeNiXZ8ByJGLkxNfZRnkUfjvmuYqLRk202ZR1jUd5"

# Other protocol program IDs
MAGIC_EDEN_PROGRAM_ID = "M2mx93ekt1fmXSVkTrUL9xVFHkmME8HTUi5Cyc5aF7K"
PUMP_FUN_PROGRAM_ID = "6EF8rrecthR5Dkzon8Nwu78hRvfCKubJ14M5uBEwF6P"
KLEND_PROGRAM_ID = "KLend2g3cP87fffoy8q1mQqGKjrxjC8boSyAYavgmjD"
METEORA_PROGRAM_ID = "LBUZKhRxPF3XUpBCjp4YzTKgLccjZhTSDM9YuVaPwxo"
KAMINO_PROGRAM_ID = "KLp2CqwdSjPhJ5wyYoxbfynUmXj99dTthf4p1C1BqVLF"

# Mapping of program IDs to protocol display names
PROTOCOLS = MappingProxyType({
    JUPITER_PROGRAM_ID: "Jupiter",
    RAYDIUM_AMM_PROGRAM_ID: "Raydium",
    RAYDIUM_CLMM_PROGRAM_ID: "Raydium",
    ORCA_WHIRLPOOL_PROGRAM_ID: "Orca",
    PHOENIX_PROGRAM_ID: "Phoenix",
    MAGIC_EDEN_PROGRAM_ID: "Magic Eden",
    PUMP_FUN_PROGRAM_ID: "Pump.fun",
    KLEND_PROGRAM_ID: "KLend",
    METEORA_PROGRAM_ID: "Meteora",
    KAMINO_PROGRAM_ID: "Kamino",
})

# Programs whose instructions are treated as swaps
DEX_PROGRAM_IDS = frozenset({
    JUPITER_PROGRAM_ID,
    RAYDIUM_AMM_PROGRAM_ID,
    RAYDIUM_CLMM_PROGRAM_ID,
    ORCA_WHIRLPOOL_PROGRAM_ID,
    PHOENIX_PROGRAM_ID,
})

UNKNOWN_DEX = "Unknown DEX"

# Reported as top protocol when nothing was attributed
MULTIPLE_INTERACTIONS = "Multiple Interactions"

# Solana public key pattern (base58 format)
PUBKEY_REGEX = r"^[1-9A-HJ-NP-Za-km-z]{32,44}$"

# Smallest UI amount change treated as a real balance change
BALANCE_CHANGE_EPSILON = 0.000001

# Upper bound the transaction provider accepts for full transaction details
MAX_PAGE_SIZE = 100

# Jupiter strict token list
DEFAULT_TOKEN_LIST_URL = "https://token.jup.ag/strict"
