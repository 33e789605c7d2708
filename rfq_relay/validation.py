"""Request normalization and validation.

Runs before any call to the market maker. Performs no I/O.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from typing import Any

from rfq_relay.addresses import is_valid_address
from rfq_relay.errors import UnrecognizedProtocolError, ValidationError
from rfq_relay.models import OrderProtocol, OrderSide, QuoteRequest

_SIDE_AMOUNT_KEYS = {OrderSide.BUY: "buyAmount", OrderSide.SELL: "sellAmount"}


def _parse_protocol(raw: Any, default: OrderProtocol) -> OrderProtocol:
    if raw is None or raw == "":
        return default
    try:
        return OrderProtocol(raw)
    except ValueError:
        raise UnrecognizedProtocolError(raw) from None


def _parse_side(raw: Any) -> OrderSide:
    try:
        return OrderSide(str(raw).strip().upper())
    except ValueError:
        raise ValidationError(f"side must be BUY or SELL, got {raw!r}") from None


def _parse_amount(raw: Any) -> Decimal:
    if raw is None or isinstance(raw, bool) or str(raw).strip() == "":
        raise ValidationError("amount is required")
    try:
        amount = Decimal(str(raw).strip())
    except InvalidOperation:
        raise ValidationError(f"amount must be numeric, got {raw!r}") from None
    if not amount.is_finite() or amount <= 0:
        raise ValidationError(f"amount must be a positive number, got {raw!r}")
    return amount


def _require_address(raw: Any, field: str) -> str:
    if raw is None or raw == "":
        raise ValidationError(f"{field} is required")
    if not is_valid_address(raw):
        raise ValidationError(f"{field} is not a valid address: {raw!r}")
    return raw.lower()


def validate_request(
    raw: Mapping[str, Any],
    default_protocol: OrderProtocol = OrderProtocol.PMMV5,
) -> QuoteRequest:
    """Normalize a raw order request and validate it.

    Args:
        raw: Request fields as received (camelCase keys)
        default_protocol: Protocol to use when the request omits one

    Returns:
        Normalized request

    Raises:
        UnrecognizedProtocolError: If the protocol tag is unknown
        ValidationError: If any other field is missing or malformed
    """
    protocol = _parse_protocol(raw.get("protocol"), default_protocol)
    side = _parse_side(raw.get("side"))

    base_address = _require_address(raw.get("baseAddress"), "baseAddress")
    quote_address = _require_address(raw.get("quoteAddress"), "quoteAddress")
    if base_address == quote_address:
        raise ValidationError("baseAddress and quoteAddress must differ")

    amount_raw = raw.get("amount")
    if amount_raw is None or amount_raw == "":
        amount_raw = raw.get(_SIDE_AMOUNT_KEYS[side])
    amount = _parse_amount(amount_raw)

    uniq_id = raw.get("uniqId")
    if uniq_id is None or isinstance(uniq_id, bool) or str(uniq_id).strip() == "":
        raise ValidationError("uniqId is required")
    user_addr = _require_address(raw.get("userAddr"), "userAddr")

    fee_factor = raw.get("feefactor", raw.get("feeFactor"))

    return QuoteRequest(
        side=side,
        base_address=base_address,
        quote_address=quote_address,
        amount=amount,
        protocol=protocol,
        fee_factor=None if fee_factor is None else str(fee_factor),
        user_addr=user_addr,
        uniq_id=str(uniq_id).strip(),
    )
