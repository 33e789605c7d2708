"""Conversion of trade amounts and rates into exact base-unit asset amounts.

All arithmetic is done with ``Decimal`` and truncates toward zero, so the
maker side never receives more than the quoted rate implies.
"""

from __future__ import annotations

from decimal import ROUND_DOWN, Decimal, InvalidOperation, localcontext

from loguru import logger

from rfq_relay.core.constants import MAX_TRUNCATE_PRECISION, TRUNCATE_PRECISION, UINT256_MAX
from rfq_relay.errors import ValidationError
from rfq_relay.models import OrderSide, TokenDescriptor

# Enough digits for uint256 amounts with 18 decimals.
_PRECISION_DIGITS = 96


def find_suitable_precision(decimals: int) -> int:
    """Fractional digits kept for a rate-derived amount of a token."""
    return TRUNCATE_PRECISION if decimals < MAX_TRUNCATE_PRECISION else MAX_TRUNCATE_PRECISION


def truncate(value: Decimal, places: int) -> Decimal:
    """Truncate ``value`` to ``places`` fractional digits, rounding toward zero."""
    with localcontext() as ctx:
        ctx.prec = _PRECISION_DIGITS
        ctx.rounding = ROUND_DOWN
        return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_DOWN)


def to_base_units(value: Decimal, decimals: int) -> int:
    """Scale a token amount by ``10**decimals``, dropping any remaining fraction."""
    with localcontext() as ctx:
        ctx.prec = _PRECISION_DIGITS
        ctx.rounding = ROUND_DOWN
        return int(value.scaleb(decimals))


def compute_asset_amounts(
    maker_token: TokenDescriptor,
    taker_token: TokenDescriptor,
    side: OrderSide,
    rate: Decimal,
    amount: Decimal,
) -> tuple[int, int]:
    """Compute maker and taker asset amounts in base units.

    Args:
        maker_token: Token the market maker gives
        taker_token: Token the market maker receives
        side: Side of the user's request
        rate: Quoted rate
        amount: Requested trade amount

    Returns:
        Tuple of (maker_asset_amount, taker_asset_amount)

    Raises:
        ValidationError: If either amount does not fit in a uint256
    """
    if rate <= 0:
        raise ValueError(f"rate must be positive, got {rate}")

    try:
        with localcontext() as ctx:
            ctx.prec = _PRECISION_DIGITS
            ctx.rounding = ROUND_DOWN
            if side == OrderSide.BUY:
                maker_amount = truncate(amount, maker_token.precision)
                taker_amount = truncate(
                    amount / rate, find_suitable_precision(taker_token.decimal)
                )
            else:
                maker_amount = truncate(
                    amount * rate, find_suitable_precision(maker_token.decimal)
                )
                taker_amount = truncate(amount, taker_token.precision)
    except InvalidOperation:
        raise ValidationError(f"amount {amount} exceeds uint256 range") from None

    maker_asset_amount = to_base_units(maker_amount, maker_token.decimal)
    taker_asset_amount = to_base_units(taker_amount, taker_token.decimal)
    if maker_asset_amount > UINT256_MAX or taker_asset_amount > UINT256_MAX:
        raise ValidationError(f"amount {amount} exceeds uint256 range")

    logger.debug(
        f"Asset amounts {side.value} {amount} @ {rate}: "
        f"maker {maker_asset_amount} {maker_token.symbol}, "
        f"taker {taker_asset_amount} {taker_token.symbol}"
    )
    return maker_asset_amount, taker_asset_amount
