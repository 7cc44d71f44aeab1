"""
Value objects for the symbols bounded context.

Nothing here has a lifecycle beyond a single resolution call.
No framework imports and no IO operations.
"""

from dataclasses import dataclass
from enum import Enum


class AssetClass(Enum):
    """Asset classification derived from a canonical symbol."""

    EQUITY = "equity"
    CRYPTO = "crypto"


@dataclass(frozen=True)
class SymbolMatch:
    """A canonical symbol together with the strategy that produced it.

    Attributes:
        symbol: Uppercase canonical symbol.
        strategy: Name of the extraction strategy that matched.
    """

    symbol: str
    strategy: str


@dataclass(frozen=True)
class ResolvedAsset:
    """Full metadata for a canonical symbol."""

    symbol: str
    asset_class: AssetClass
    provider_id: str

    @property
    def is_crypto(self) -> bool:
        return self.asset_class is AssetClass.CRYPTO
