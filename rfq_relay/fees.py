"""Fee factor resolution."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from loguru import logger

from rfq_relay.core.constants import DEFAULT_FEE_FACTOR


def parse_fee_factor_override(value: str | int | None) -> int | None:
    """Parse a caller-supplied fee factor, returning None when unusable.

    Only finite, non-negative numbers are accepted. Fractions are truncated.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        parsed = Decimal(str(value).strip())
    except InvalidOperation:
        return None
    if not parsed.is_finite() or parsed < 0:
        return None
    return int(parsed)


def resolve_fee_factor(
    config_default: int | None,
    per_token_override: int | None,
    caller_override: str | int | None,
) -> int:
    """Resolve the fee factor for an order.

    Priority, highest first: a valid caller override, the maker token's
    configured override, the global config default, then the hardcoded
    fallback. Zero config values count as unset.

    Args:
        config_default: Global fee factor from the market maker config
        per_token_override: Fee factor configured for the maker token
        caller_override: Raw fee factor supplied with the request

    Returns:
        Fee factor to stamp on the order
    """
    caller = parse_fee_factor_override(caller_override)
    if caller is not None:
        logger.debug(f"Fee factor {caller} from request")
        return caller
    if per_token_override:
        logger.debug(f"Fee factor {per_token_override} from token config")
        return per_token_override
    if config_default:
        return config_default
    return DEFAULT_FEE_FACTOR
