"""Price requests against the market maker backend."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from loguru import logger
from pydantic import ValidationError as PydanticValidationError

from rfq_relay.errors import UpstreamError
from rfq_relay.models import PriceQuote, QuoteRequest


class Quoter(Protocol):
    """Market maker pricing interface."""

    async def get_price(self, query: QuoteRequest) -> PriceQuote | Mapping[str, Any]:
        """Return rate, bounds and quote id for a request."""


async def request_market_maker(quoter: Quoter, query: QuoteRequest) -> PriceQuote:
    """Fetch a price for ``query``. Not retried on failure.

    Raises:
        UpstreamError: If the quoter fails or returns an unusable price
    """
    try:
        result = await quoter.get_price(query)
    except Exception as exc:
        raise UpstreamError(f"market maker getPrice failed: {exc}") from exc

    if isinstance(result, PriceQuote):
        quote = result
    else:
        try:
            quote = PriceQuote.model_validate(result)
        except PydanticValidationError as exc:
            raise UpstreamError(f"market maker returned an invalid price: {exc}") from exc

    logger.info(
        f"Got price from market maker for {query.uniq_id}: rate={quote.rate} "
        f"min={quote.min_amount} max={quote.max_amount} quoteId={quote.quote_id}"
    )
    return quote
