"""Per-protocol order finalization and signing.

Each protocol maps to one route coroutine. A route applies the protocol's
special cases, calls its builder or signer, and returns the finished order
together with the bounds to report. The dispatcher then stamps ``quote_id``
and ``protocol`` itself; builders never own those two fields.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from decimal import Decimal

from loguru import logger

from rfq_relay.core.config import RelaySettings
from rfq_relay.errors import OrderConstructionError, UnrecognizedProtocolError, UpstreamError
from rfq_relay.models import Order, OrderProtocol, PriceQuote, QuoteRequest
from rfq_relay.signers import SignerSet, SigningContext
from rfq_relay.tokens import MarketSnapshot


@dataclass(frozen=True, slots=True)
class DispatchContext:
    """Everything a route needs besides the assembled order."""

    query: QuoteRequest
    quote: PriceQuote
    snapshot: MarketSnapshot
    signers: SignerSet
    settings: RelaySettings

    @property
    def signing_context(self) -> SigningContext:
        return SigningContext(signing_url=self.settings.signing_url, salt=self.quote.salt)


@dataclass(slots=True)
class DispatchResult:
    order: Order
    min_amount: Decimal
    max_amount: Decimal


Route = Callable[[Order, DispatchContext], Awaitable[DispatchResult]]


def _base_token_bounds(ctx: DispatchContext) -> tuple[Decimal, Decimal]:
    """AMM orders report the base token's configured bounds, not the quote's."""
    base_token = ctx.snapshot.token(ctx.query.base_address)
    return base_token.min_trade_amount, base_token.max_trade_amount


async def _route_ammv1(order: Order, ctx: DispatchContext) -> DispatchResult:
    min_amount, max_amount = _base_token_bounds(ctx)
    built = ctx.signers.ammv1(
        order, ctx.quote.maker_address, ctx.snapshot.config.weth_contract_address
    )
    return DispatchResult(built, min_amount, max_amount)


async def _route_ammv2(order: Order, ctx: DispatchContext) -> DispatchResult:
    min_amount, max_amount = _base_token_bounds(ctx)
    built = ctx.signers.ammv2(
        order,
        ctx.quote.payload,
        ctx.quote.maker_address,
        ctx.snapshot.config.weth_contract_address,
    )
    return DispatchResult(built, min_amount, max_amount)


async def _route_pmmv5(order: Order, ctx: DispatchContext) -> DispatchResult:
    signed = await ctx.signers.pmmv5(
        ctx.signers.signer,
        order,
        ctx.query.user_addr.lower(),
        ctx.settings.chain_id,
        ctx.snapshot.config.address_book_v5.PMM,
        ctx.signing_context,
    )
    return DispatchResult(signed, ctx.quote.min_amount, ctx.quote.max_amount)


async def _route_rfqv1(order: Order, ctx: DispatchContext) -> DispatchResult:
    signed = await ctx.signers.rfqv1(
        ctx.signers.signer,
        order,
        ctx.query.user_addr.lower(),
        ctx.settings.chain_id,
        ctx.snapshot.config.address_book_v5.RFQ,
        ctx.settings.wallet_type,
        ctx.signing_context,
    )
    return DispatchResult(signed, ctx.quote.min_amount, ctx.quote.max_amount)


async def _route_rfqv2(order: Order, ctx: DispatchContext) -> DispatchResult:
    signed = await ctx.signers.rfqv2(
        ctx.signers.signer,
        order,
        ctx.query.user_addr.lower(),
        ctx.settings.chain_id,
        ctx.snapshot.config.address_book_v5.RFQV2,
        ctx.settings.wallet_type,
        ctx.settings.permit_type,
        ctx.signing_context,
    )
    return DispatchResult(signed, ctx.quote.min_amount, ctx.quote.max_amount)


ROUTES: dict[OrderProtocol, Route] = {
    OrderProtocol.AMMV1: _route_ammv1,
    OrderProtocol.AMMV2: _route_ammv2,
    OrderProtocol.PMMV5: _route_pmmv5,
    OrderProtocol.RFQV1: _route_rfqv1,
    OrderProtocol.RFQV2: _route_rfqv2,
}


async def dispatch_order(order: Order, ctx: DispatchContext) -> DispatchResult:
    """Finalize ``order`` through the route for the request's protocol.

    Raises:
        UnrecognizedProtocolError: If no route exists for the protocol
        UpstreamError: If the builder or signer fails
        TokenNotFoundError: If an AMM base token is missing from the token list
    """
    protocol = ctx.query.protocol
    route = ROUTES.get(protocol)
    if route is None:
        logger.warning(f"Unknown protocol {protocol}")
        raise UnrecognizedProtocolError(protocol)

    try:
        result = await route(order, ctx)
        if not isinstance(result.order, Order):
            # Signers may hand back the camelCase wire shape.
            result.order = Order.model_validate(result.order)
    except OrderConstructionError:
        raise
    except Exception as exc:
        raise UpstreamError(f"{protocol.value} signer failed: {exc}") from exc

    result.order = result.order.model_copy(
        update={"quote_id": ctx.quote.quote_id, "protocol": protocol}
    )
    return result
