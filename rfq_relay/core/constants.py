"""Common constants shared across the relay."""

from __future__ import annotations

# Zero address stands in for the chain's native asset in token lists.
NATIVE_TOKEN_ADDRESS = "0x0000000000000000000000000000000000000000"
FEE_RECIPIENT_ADDRESS = "0xb9E29984Fe50602E7A619662EBED4F90D93824C7"

# 0x v2 ERC20 asset proxy id, prefixed to every encoded asset address.
ERC20_ASSET_PROXY_ID = "0xf47261b0"

DEFAULT_FEE_FACTOR = 10
DEFAULT_ORDER_EXPIRATION_SECONDS = 600

# Smallest decimals across USDT/USDC (6), BTC (8) and ETH (18).
TRUNCATE_PRECISION = 6
MAX_TRUNCATE_PRECISION = 8

UINT256_MAX = 2**256 - 1
