"""Interfaces for the per-protocol order builders and signers.

The implementations live outside the relay core. AMM builders finish the
order synchronously; PMM and RFQ signers call out to the market maker's
signing service and are awaited.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from rfq_relay.models import Order


@dataclass(frozen=True, slots=True)
class SigningContext:
    """Signing endpoint and salt forwarded to PMM/RFQ signers."""

    signing_url: str | None = None
    salt: str | None = None


class AMMV1Builder(Protocol):
    def __call__(self, order: Order, maker_address: str | None, weth_address: str) -> Order:
        """Finish an AMMV1 order."""


class AMMV2Builder(Protocol):
    def __call__(
        self,
        order: Order,
        payload: str | None,
        maker_address: str | None,
        weth_address: str,
    ) -> Order:
        """Finish an AMMV2 order using the quote's opaque payload."""


class PMMV5Signer(Protocol):
    async def __call__(
        self,
        signer: Any,
        order: Order,
        user_addr: str,
        chain_id: int,
        address_book_entry: str,
        context: SigningContext,
    ) -> Order:
        """Sign a PMMV5 order."""


class RFQV1Signer(Protocol):
    async def __call__(
        self,
        signer: Any,
        order: Order,
        user_addr: str,
        chain_id: int,
        address_book_entry: str,
        wallet_type: str,
        context: SigningContext,
    ) -> Order:
        """Sign an RFQV1 order."""


class RFQV2Signer(Protocol):
    async def __call__(
        self,
        signer: Any,
        order: Order,
        user_addr: str,
        chain_id: int,
        address_book_entry: str,
        wallet_type: str,
        permit_type: str,
        context: SigningContext,
    ) -> Order:
        """Sign an RFQV2 order."""


@dataclass(frozen=True, slots=True)
class SignerSet:
    """One builder per protocol plus the opaque signing handle they share."""

    signer: Any
    ammv1: AMMV1Builder
    ammv2: AMMV2Builder
    pmmv5: PMMV5Signer
    rfqv1: RFQV1Signer
    rfqv2: RFQV2Signer
