"""Protocol-agnostic order assembly."""

from __future__ import annotations

import time
from decimal import Decimal

from loguru import logger

from rfq_relay.addresses import encode_erc20_asset_data, weth_address_if_native
from rfq_relay.amounts import compute_asset_amounts
from rfq_relay.core.constants import FEE_RECIPIENT_ADDRESS
from rfq_relay.fees import resolve_fee_factor
from rfq_relay.models import Order, OrderProtocol, QuoteRequest, TokenDescriptor
from rfq_relay.tokens import MarketSnapshot


def resolve_maker_taker(
    query: QuoteRequest, snapshot: MarketSnapshot
) -> tuple[TokenDescriptor, TokenDescriptor]:
    """Return (maker_token, taker_token) for a request.

    A user buying base pays in quote, so the market maker gives base.
    """
    base_token = snapshot.token(query.base_address)
    quote_token = snapshot.token(query.quote_address)
    if query.base_is_maker:
        return base_token, quote_token
    return quote_token, base_token


def assemble_order(
    query: QuoteRequest,
    rate: Decimal,
    snapshot: MarketSnapshot,
    fee_recipient_address: str = FEE_RECIPIENT_ADDRESS,
    now: int | None = None,
) -> Order:
    """Build the unsigned order shared by every protocol.

    Args:
        query: Validated request
        rate: Rate quoted by the market maker
        snapshot: Config and token lists for this request
        fee_recipient_address: Fee recipient stamped on the order
        now: Current unix time, defaults to the wall clock

    Returns:
        Order with exact base-unit amounts and lower-cased addresses

    Raises:
        TokenNotFoundError: If either token is missing from the token list
    """
    config = snapshot.config
    maker_token, taker_token = resolve_maker_taker(query, snapshot)

    maker_asset_amount, taker_asset_amount = compute_asset_amounts(
        maker_token, taker_token, query.side, rate, query.amount
    )

    token_config = snapshot.token_config_for(maker_token.symbol)
    fee_factor = resolve_fee_factor(
        config.fee_factor,
        token_config.fee_factor if token_config else None,
        query.fee_factor,
    )

    maker_asset_address = weth_address_if_native(
        maker_token.contract_address, config.weth_contract_address
    )
    if query.protocol == OrderProtocol.RFQV2:
        # RFQV2 settles the native asset directly on the taker side.
        taker_asset_address = taker_token.contract_address.lower()
    else:
        taker_asset_address = weth_address_if_native(
            taker_token.contract_address, config.weth_contract_address
        )

    if now is None:
        now = int(time.time())

    order = Order(
        protocol=query.protocol,
        quote_id=query.uniq_id,
        maker_address=config.mm_proxy_contract_address.lower(),
        maker_asset_amount=maker_asset_amount,
        maker_asset_address=maker_asset_address,
        maker_asset_data=encode_erc20_asset_data(maker_asset_address),
        maker_fee=0,
        taker_address=config.user_proxy_contract_address.lower(),
        taker_asset_amount=taker_asset_amount,
        taker_asset_address=taker_asset_address,
        taker_asset_data=encode_erc20_asset_data(taker_asset_address),
        taker_fee=0,
        sender_address=config.tokenlon_exchange_contract_address.lower(),
        fee_recipient_address=fee_recipient_address.lower(),
        exchange_address=config.exchange_contract_address.lower(),
        expiration_time_seconds=now + config.order_expiration_seconds,
        fee_factor=fee_factor,
    )
    logger.debug(
        f"Assembled {query.protocol.value} order for {query.uniq_id}: "
        f"{maker_token.symbol} -> {taker_token.symbol}, fee factor {fee_factor}"
    )
    return order
