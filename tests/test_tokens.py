"""Tests for token lookups and address helpers."""

import pytest
from conftest import TOKEN_A_ADDRESS, WETH_ADDRESS

from rfq_relay.addresses import (
    encode_erc20_asset_data,
    is_native_asset,
    normalize_address,
    weth_address_if_native,
)
from rfq_relay.core.config import TokenConfig
from rfq_relay.core.constants import NATIVE_TOKEN_ADDRESS
from rfq_relay.errors import TokenNotFoundError
from rfq_relay.models import TokenDescriptor
from rfq_relay.tokens import MarketSnapshot


def test_snapshot_lookup(snapshot: MarketSnapshot, token_a: TokenDescriptor) -> None:
    assert snapshot.token(TOKEN_A_ADDRESS) == token_a
    with pytest.raises(TokenNotFoundError):
        snapshot.token("0x" + "cd" * 20)


def test_snapshot_index_is_per_instance(snapshot: MarketSnapshot, token_a: TokenDescriptor) -> None:
    """A refreshed snapshot never serves tokens from the previous cycle."""
    refreshed = MarketSnapshot(config=snapshot.config, tokens=[token_a])

    assert refreshed.token(TOKEN_A_ADDRESS) == token_a
    with pytest.raises(TokenNotFoundError):
        refreshed.token(NATIVE_TOKEN_ADDRESS)
    assert snapshot.token(NATIVE_TOKEN_ADDRESS).symbol == "ETH"


def test_token_config_for(snapshot: MarketSnapshot) -> None:
    assert snapshot.token_config_for("tkb") == TokenConfig(symbol="TKB", fee_factor=25)
    assert snapshot.token_config_for("TKA") is None


def test_weth_substitution() -> None:
    assert is_native_asset(NATIVE_TOKEN_ADDRESS)
    assert weth_address_if_native(NATIVE_TOKEN_ADDRESS, WETH_ADDRESS.upper()) == WETH_ADDRESS
    assert weth_address_if_native(TOKEN_A_ADDRESS, WETH_ADDRESS) == TOKEN_A_ADDRESS


def test_encode_erc20_asset_data() -> None:
    expected = "0xf47261b0" + "0" * 24 + WETH_ADDRESS[2:]
    assert encode_erc20_asset_data(WETH_ADDRESS) == expected


def test_normalize_address_rejects_garbage() -> None:
    with pytest.raises(ValueError, match="Invalid address"):
        normalize_address("0x1234")
    assert normalize_address("0x" + "AB" * 20) == "0x" + "ab" * 20
