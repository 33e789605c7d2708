"""Error taxonomy for quote-to-order construction."""

from __future__ import annotations


class OrderConstructionError(Exception):
    """Base error for failures while building an order."""


class ValidationError(OrderConstructionError):
    """Raised when a request is malformed or unsafe."""


class UnrecognizedProtocolError(ValidationError):
    """Raised when a protocol tag has no order-building route."""

    def __init__(self, protocol: object) -> None:
        super().__init__(f"Unrecognized protocol: {getattr(protocol, 'value', protocol)}")
        self.protocol = protocol


class TokenNotFoundError(OrderConstructionError, LookupError):
    """Raised when a token address is absent from the supported token list."""

    def __init__(self, address: str) -> None:
        super().__init__(f"Token not found: {address}")
        self.address = address


class UpstreamError(OrderConstructionError):
    """Raised when the market maker quoter or a protocol signer fails."""
