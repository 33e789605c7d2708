"""Pytest configuration for shared fixtures."""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest
from loguru import logger

from rfq_relay.core.config import MarketMakerConfig, RelaySettings, TokenConfig
from rfq_relay.core.constants import NATIVE_TOKEN_ADDRESS
from rfq_relay.models import Order, TokenDescriptor
from rfq_relay.signers import SignerSet
from rfq_relay.tokens import MarketSnapshot

WETH_ADDRESS = "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"
TOKEN_A_ADDRESS = "0x1111111111111111111111111111111111111111"
TOKEN_B_ADDRESS = "0x2222222222222222222222222222222222222222"
USER_ADDRESS = "0x3333333333333333333333333333333333333333"
MM_PROXY_ADDRESS = "0x4444444444444444444444444444444444444444"
USER_PROXY_ADDRESS = "0x5555555555555555555555555555555555555555"
TOKENLON_EXCHANGE_ADDRESS = "0x6666666666666666666666666666666666666666"
EXCHANGE_ADDRESS = "0x7777777777777777777777777777777777777777"
PMM_ADDRESS = "0x8888888888888888888888888888888888888888"
RFQ_ADDRESS = "0x9999999999999999999999999999999999999999"
RFQV2_ADDRESS = "0xaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa"


@pytest.fixture(scope="session", autouse=True)
def silence_loguru_handlers() -> None:
    """Route Loguru output to a no-op sink during tests to avoid closed stream errors."""
    logger.remove()
    logger.add(lambda _: None, catch=True)
    yield


@pytest.fixture
def token_a() -> TokenDescriptor:
    return TokenDescriptor(
        symbol="TKA",
        contract_address=TOKEN_A_ADDRESS,
        decimal=18,
        precision=4,
        min_trade_amount=Decimal("0.1"),
        max_trade_amount=Decimal("100"),
    )


@pytest.fixture
def token_b() -> TokenDescriptor:
    return TokenDescriptor(
        symbol="TKB",
        contract_address=TOKEN_B_ADDRESS,
        decimal=6,
        precision=2,
        min_trade_amount=Decimal("10"),
        max_trade_amount=Decimal("50000"),
    )


@pytest.fixture
def eth_token() -> TokenDescriptor:
    return TokenDescriptor(
        symbol="ETH",
        contract_address=NATIVE_TOKEN_ADDRESS,
        decimal=18,
        precision=4,
        min_trade_amount=Decimal("0.01"),
        max_trade_amount=Decimal("20"),
    )


@pytest.fixture
def mm_config() -> MarketMakerConfig:
    return MarketMakerConfig.model_validate(
        {
            "feeFactor": 10,
            "wethContractAddress": WETH_ADDRESS,
            "mmProxyContractAddress": MM_PROXY_ADDRESS,
            "userProxyContractAddress": USER_PROXY_ADDRESS,
            "tokenlonExchangeContractAddress": TOKENLON_EXCHANGE_ADDRESS,
            "exchangeContractAddress": EXCHANGE_ADDRESS,
            "orderExpirationSeconds": 600,
            "addressBookV5": {"PMM": PMM_ADDRESS, "RFQ": RFQ_ADDRESS, "RFQV2": RFQV2_ADDRESS},
        }
    )


@pytest.fixture
def snapshot(
    mm_config: MarketMakerConfig,
    token_a: TokenDescriptor,
    token_b: TokenDescriptor,
    eth_token: TokenDescriptor,
) -> MarketSnapshot:
    return MarketSnapshot(
        config=mm_config,
        tokens=[token_a, token_b, eth_token],
        token_configs=[TokenConfig(symbol="TKB", fee_factor=25)],
    )


@pytest.fixture
def settings() -> RelaySettings:
    return RelaySettings(
        chain_id=5,
        signing_url="https://signer.example/sign",
        wallet_type="MMP_VERSION_4",
        permit_type="APPROVE_RFQV2",
    )


def _built(order: Order, *_args: object) -> Order:
    # Builders may set quote_id/protocol themselves; the dispatcher overwrites both.
    return order.model_copy(
        update={"maker_wallet_signature": "0xsig", "quote_id": "builder-set", "salt": "42"}
    )


def _signed(_signer: object, order: Order, *_args: object) -> Order:
    return _built(order)


@pytest.fixture
def signers() -> SignerSet:
    return SignerSet(
        signer=MagicMock(name="wallet"),
        ammv1=MagicMock(side_effect=_built),
        ammv2=MagicMock(side_effect=_built),
        pmmv5=AsyncMock(side_effect=_signed),
        rfqv1=AsyncMock(side_effect=_signed),
        rfqv2=AsyncMock(side_effect=_signed),
    )


@pytest.fixture
def quoter() -> MagicMock:
    quoter = MagicMock()
    quoter.get_price = AsyncMock(
        return_value={
            "rate": "200",
            "minAmount": "1",
            "maxAmount": "1000",
            "quoteId": "mm-quote-1",
            "makerAddress": MM_PROXY_ADDRESS,
            "payload": "0xpayload",
            "salt": "123456",
        }
    )
    return quoter


@pytest.fixture
def sell_request() -> dict[str, str]:
    return {
        "side": "SELL",
        "baseAddress": TOKEN_A_ADDRESS,
        "quoteAddress": TOKEN_B_ADDRESS,
        "amount": "10",
        "protocol": "PMMV5",
        "userAddr": USER_ADDRESS,
        "uniqId": "req-1",
    }
