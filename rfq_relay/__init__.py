"""RFQ relay - quote-to-order construction for a DEX relay."""

__version__ = "0.1.0"

from rfq_relay.core.config import (
    AddressBook,
    MarketMakerConfig,
    RelaySettings,
    TokenConfig,
    load_settings,
)
from rfq_relay.errors import (
    OrderConstructionError,
    TokenNotFoundError,
    UnrecognizedProtocolError,
    UpstreamError,
    ValidationError,
)
from rfq_relay.handler import new_order
from rfq_relay.models import (
    Order,
    OrderProtocol,
    OrderSide,
    PriceQuote,
    QuoteRequest,
    QuoteResponse,
    TokenDescriptor,
)
from rfq_relay.signers import SignerSet, SigningContext
from rfq_relay.tokens import MarketSnapshot

__all__ = [
    "AddressBook",
    "MarketMakerConfig",
    "RelaySettings",
    "TokenConfig",
    "load_settings",
    "OrderConstructionError",
    "TokenNotFoundError",
    "UnrecognizedProtocolError",
    "UpstreamError",
    "ValidationError",
    "new_order",
    "Order",
    "OrderProtocol",
    "OrderSide",
    "PriceQuote",
    "QuoteRequest",
    "QuoteResponse",
    "TokenDescriptor",
    "SignerSet",
    "SigningContext",
    "MarketSnapshot",
]
