"""Quote and order models using Pydantic v2."""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel


class OrderSide(str, Enum):
    """Order side enumeration."""

    BUY = "BUY"
    SELL = "SELL"


class OrderProtocol(str, Enum):
    """Order protocol variants supported by the relay."""

    AMMV1 = "AMMV1"
    AMMV2 = "AMMV2"
    PMMV5 = "PMMV5"
    RFQV1 = "RFQV1"
    RFQV2 = "RFQV2"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class QuoteRequest(_CamelModel):
    """Normalized swap request accepted by the order pipeline."""

    model_config = ConfigDict(frozen=True)

    side: OrderSide
    base_address: str
    quote_address: str
    amount: Decimal = Field(..., gt=0, description="Trade amount in token units")
    protocol: OrderProtocol
    fee_factor: str | None = Field(default=None, description="Caller fee factor override")
    user_addr: str
    uniq_id: str

    @property
    def base_is_maker(self) -> bool:
        """Users buying base means the market maker sells base."""
        return self.side == OrderSide.BUY


class TokenDescriptor(_CamelModel):
    """Token entry from the supported token list."""

    model_config = ConfigDict(frozen=True)

    symbol: str
    contract_address: str
    decimal: int = Field(..., ge=0, description="On-chain decimal count")
    precision: int = Field(..., ge=0, description="Display precision for trade amounts")
    min_trade_amount: Decimal = Field(default=Decimal("0"))
    max_trade_amount: Decimal = Field(default=Decimal("0"))

    @field_validator("symbol")
    @classmethod
    def validate_symbol(cls, v: str) -> str:
        """Ensure symbol is uppercase and non-empty."""
        if not v:
            raise ValueError("Symbol cannot be empty")
        return v.upper().strip()


class PriceQuote(_CamelModel):
    """Price returned by the market maker for a single request."""

    model_config = ConfigDict(frozen=True)

    rate: Decimal = Field(..., gt=0)
    min_amount: Decimal = Field(default=Decimal("0"))
    max_amount: Decimal = Field(default=Decimal("0"))
    quote_id: str
    maker_address: str | None = None
    payload: str | None = None
    salt: str | None = None

    @field_validator("quote_id", "salt", mode="before")
    @classmethod
    def coerce_identifier(cls, value: Any) -> Any:
        """Market makers may return numeric ids; keep them as strings."""
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class Order(_CamelModel):
    """Order ready for, or returned from, a protocol signer.

    Amounts are integer base units. Every address is lower-cased.
    """

    protocol: OrderProtocol
    quote_id: str

    maker_address: str
    maker_asset_amount: int
    maker_asset_address: str
    maker_asset_data: str
    maker_fee: int = 0

    taker_address: str
    taker_asset_amount: int
    taker_asset_address: str
    taker_asset_data: str
    taker_fee: int = 0

    sender_address: str
    fee_recipient_address: str
    exchange_address: str
    expiration_time_seconds: int
    # Works like BPS, should be <= 10000.
    fee_factor: int

    salt: str | None = None
    maker_wallet_signature: str | None = None
    payload: str | None = None

    @field_serializer(
        "maker_asset_amount",
        "taker_asset_amount",
        "maker_fee",
        "taker_fee",
        "expiration_time_seconds",
        when_used="json",
    )
    def serialize_uint(self, value: int) -> str:
        return str(value)

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the camelCase wire shape consumed by signers."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class QuoteResponse(_CamelModel):
    """Uniform response returned for every order request."""

    result: bool
    exchangeable: bool
    rate: Decimal | None = None
    min_amount: Decimal | None = None
    max_amount: Decimal | None = None
    order: Order | None = None
    message: str | None = None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
