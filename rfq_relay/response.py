"""Uniform response shapes returned to callers."""

from __future__ import annotations

from decimal import Decimal

from rfq_relay.models import Order, QuoteResponse


def success_response(
    order: Order, rate: Decimal, min_amount: Decimal, max_amount: Decimal
) -> QuoteResponse:
    return QuoteResponse(
        result=True,
        exchangeable=True,
        rate=rate,
        min_amount=min_amount,
        max_amount=max_amount,
        order=order,
    )


def failure_response(message: str) -> QuoteResponse:
    """Failures never carry rate, bounds or a partial order."""
    return QuoteResponse(result=False, exchangeable=False, message=message)
