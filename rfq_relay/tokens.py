"""Token registry lookups over a per-refresh snapshot."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field

from rfq_relay.core.config import MarketMakerConfig, TokenConfig
from rfq_relay.errors import TokenNotFoundError
from rfq_relay.models import TokenDescriptor


def build_token_index(tokens: Iterable[TokenDescriptor]) -> dict[str, TokenDescriptor]:
    """Map lower-cased contract addresses to tokens."""
    return {token.contract_address.lower(): token for token in tokens}


@dataclass(frozen=True, slots=True)
class MarketSnapshot:
    """Read-only view of config and token lists for one refresh cycle.

    Refreshers build a new snapshot whenever the market maker config or the
    token list changes; requests in flight keep the snapshot they started with.
    """

    config: MarketMakerConfig
    tokens: Sequence[TokenDescriptor]
    token_configs: Sequence[TokenConfig] = ()
    _index: Mapping[str, TokenDescriptor] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tokens", tuple(self.tokens))
        object.__setattr__(self, "token_configs", tuple(self.token_configs))
        object.__setattr__(self, "_index", build_token_index(self.tokens))

    def token(self, address: str) -> TokenDescriptor:
        """Look up a supported token by address.

        Raises:
            TokenNotFoundError: If the address is not in the token list
        """
        try:
            return self._index[address.lower()]
        except KeyError:
            raise TokenNotFoundError(address) from None

    def token_config_for(self, symbol: str) -> TokenConfig | None:
        """Return per-token overrides for a symbol, if any are configured."""
        wanted = symbol.upper()
        for token_config in self.token_configs:
            if token_config.symbol == wanted:
                return token_config
        return None
