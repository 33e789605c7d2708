"""Quote-to-order pipeline entry point."""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from loguru import logger

from rfq_relay.assembly import assemble_order
from rfq_relay.core.config import RelaySettings, load_settings
from rfq_relay.dispatch import DispatchContext, dispatch_order
from rfq_relay.errors import OrderConstructionError
from rfq_relay.models import QuoteResponse
from rfq_relay.quoting import Quoter, request_market_maker
from rfq_relay.response import failure_response, success_response
from rfq_relay.signers import SignerSet
from rfq_relay.tokens import MarketSnapshot
from rfq_relay.validation import validate_request


@lru_cache(maxsize=1)
def default_settings() -> RelaySettings:
    """Process-wide settings, loaded from the environment on first use."""
    return load_settings(configure_logging=True)


async def new_order(
    request: Mapping[str, Any],
    *,
    quoter: Quoter,
    snapshot: MarketSnapshot,
    signers: SignerSet,
    settings: RelaySettings | None = None,
) -> QuoteResponse:
    """Turn a swap request into a priced, signed order.

    Steps run strictly in sequence: validate, price, assemble, dispatch. Every
    failure along the way is converted into a failure response; no exception
    escapes to the caller.

    Args:
        request: Raw request fields (camelCase keys)
        quoter: Market maker pricing backend
        snapshot: Config and token lists current at request entry
        signers: Protocol builders and signers
        settings: Relay settings; defaults to the process-wide environment settings

    Returns:
        Success response with the order, or a failure response with a message
    """
    try:
        if settings is None:
            settings = default_settings()
        query = validate_request(request, settings.default_protocol)
        logger.info(
            f"New order request {query.uniq_id}: {query.side.value} {query.amount} "
            f"base={query.base_address} quote={query.quote_address} "
            f"protocol={query.protocol.value}"
        )

        quote = await request_market_maker(quoter, query)
        order = assemble_order(
            query, quote.rate, snapshot, fee_recipient_address=settings.fee_recipient_address
        )
        result = await dispatch_order(
            order,
            DispatchContext(
                query=query,
                quote=quote,
                snapshot=snapshot,
                signers=signers,
                settings=settings,
            ),
        )
    except OrderConstructionError as exc:
        logger.error(f"Order request failed: {exc}")
        return failure_response(str(exc))
    except Exception as exc:
        logger.exception("Unexpected error while building order")
        return failure_response(str(exc) or exc.__class__.__name__)

    return success_response(result.order, quote.rate, result.min_amount, result.max_amount)
