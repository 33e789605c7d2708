"""Configuration management for the RFQ relay.

Two layers live here. ``RelaySettings`` is process-level configuration read
from the environment. ``MarketMakerConfig`` and ``TokenConfig`` describe the
snapshot that background refreshers pull from the market maker; the core only
ever reads them.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings, SettingsConfigDict

from rfq_relay.addresses import normalize_address
from rfq_relay.core.constants import DEFAULT_ORDER_EXPIRATION_SECONDS, FEE_RECIPIENT_ADDRESS
from rfq_relay.core.logging import setup_logging
from rfq_relay.models import OrderProtocol


class RelaySettings(BaseSettings):
    """Process configuration for the relay.

    Uses Pydantic v2 settings with environment variable support.
    """

    model_config = SettingsConfigDict(
        env_prefix="RELAY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    chain_id: int = Field(default=1, description="Chain id passed to protocol signers")
    signing_url: str | None = Field(
        default=None, description="Remote signing endpoint forwarded to PMM/RFQ signers"
    )
    wallet_type: str = Field(
        default="MMP_VERSION_4", description="Market maker wallet type for RFQ signers"
    )
    permit_type: str = Field(
        default="APPROVE_RFQV2", description="Token permit type for RFQV2 signing"
    )
    default_protocol: OrderProtocol = Field(
        default=OrderProtocol.PMMV5, description="Protocol used when the request omits one"
    )
    fee_recipient_address: str = Field(
        default=FEE_RECIPIENT_ADDRESS, description="Fee recipient stamped on every order"
    )
    log_level: str = Field(default="INFO", description="Console log level")
    log_dir: Path | None = Field(default=None, description="Directory for rotating debug logs")

    @field_validator("fee_recipient_address")
    @classmethod
    def validate_fee_recipient(cls, value: str) -> str:
        """Ensure the fee recipient is a well-formed address."""
        return normalize_address(value)


class AddressBook(BaseModel):
    """Per-protocol contract addresses used while signing."""

    model_config = ConfigDict(frozen=True, extra="allow")

    PMM: str
    RFQ: str
    RFQV2: str

    @field_validator("PMM", "RFQ", "RFQV2")
    @classmethod
    def validate_entry(cls, value: str) -> str:
        return normalize_address(value)


class MarketMakerConfig(BaseModel):
    """Read-only configuration snapshot fetched from the market maker."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    fee_factor: int | None = Field(default=None, description="Global fee factor default")
    weth_contract_address: str
    mm_proxy_contract_address: str
    user_proxy_contract_address: str
    tokenlon_exchange_contract_address: str
    exchange_contract_address: str
    order_expiration_seconds: int = Field(
        default=DEFAULT_ORDER_EXPIRATION_SECONDS,
        ge=0,
        description="Seconds added to the current time for order expiry",
    )
    address_book_v5: AddressBook = Field(alias="addressBookV5")

    @field_validator(
        "weth_contract_address",
        "mm_proxy_contract_address",
        "user_proxy_contract_address",
        "tokenlon_exchange_contract_address",
        "exchange_contract_address",
    )
    @classmethod
    def validate_contract_address(cls, value: str) -> str:
        """Contract addresses are kept lower-cased for signature canonicalization."""
        return normalize_address(value)


class TokenConfig(BaseModel):
    """Per-token overrides published by the market maker."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    symbol: str
    fee_factor: int | None = Field(default=None, ge=0)

    @field_validator("symbol")
    @classmethod
    def validate_symbol(cls, v: str) -> str:
        """Ensure symbol is uppercase and non-empty."""
        if not v:
            raise ValueError("Symbol cannot be empty")
        return v.upper().strip()


def load_settings(configure_logging: bool = False) -> RelaySettings:
    """Load settings from environment and .env file.

    Args:
        configure_logging: Also install loguru sinks at the configured level
    """
    settings = RelaySettings()
    if configure_logging:
        setup_logging(settings.log_level, settings.log_dir)
    return settings
