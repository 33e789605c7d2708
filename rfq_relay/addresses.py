"""Address normalization and 0x asset data helpers."""

from __future__ import annotations

from eth_abi import encode
from eth_utils import is_hex_address, to_normalized_address

from rfq_relay.core.constants import ERC20_ASSET_PROXY_ID, NATIVE_TOKEN_ADDRESS


def normalize_address(value: str) -> str:
    """Return a lower-cased 0x address, raising ValueError when malformed."""
    if not isinstance(value, str) or not is_hex_address(value):
        raise ValueError(f"Invalid address: {value!r}")
    return to_normalized_address(value)


def is_valid_address(value: object) -> bool:
    return isinstance(value, str) and is_hex_address(value)


def is_native_asset(address: str) -> bool:
    """Check whether an address is the native-asset sentinel."""
    return address.lower() == NATIVE_TOKEN_ADDRESS


def weth_address_if_native(address: str, weth_address: str) -> str:
    """Swap the native sentinel for the wrapped-native contract.

    Args:
        address: Token contract address from the registry
        weth_address: Wrapped-native contract address from config

    Returns:
        Lower-cased address to reference in the order
    """
    if is_native_asset(address):
        return weth_address.lower()
    return address.lower()


def encode_erc20_asset_data(address: str) -> str:
    """Encode a token address as 0x v2 ERC20 asset data."""
    return ERC20_ASSET_PROXY_ID + encode(["address"], [normalize_address(address)]).hex()
