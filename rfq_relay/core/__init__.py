"""Core infrastructure modules for the RFQ relay."""

from .config import AddressBook, MarketMakerConfig, RelaySettings, TokenConfig, load_settings
from .constants import (
    DEFAULT_FEE_FACTOR,
    DEFAULT_ORDER_EXPIRATION_SECONDS,
    FEE_RECIPIENT_ADDRESS,
    NATIVE_TOKEN_ADDRESS,
)
from .logging import setup_logging

__all__ = [
    "AddressBook",
    "MarketMakerConfig",
    "RelaySettings",
    "TokenConfig",
    "load_settings",
    "DEFAULT_FEE_FACTOR",
    "DEFAULT_ORDER_EXPIRATION_SECONDS",
    "FEE_RECIPIENT_ADDRESS",
    "NATIVE_TOKEN_ADDRESS",
    "setup_logging",
]
