"""
Pydantic schemas for CLI output.

These schemas define the machine-readable output contract.
No business logic belongs here.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field

from tickerlens.application.symbols.dtos import ResolveAssetResult
from tickerlens.domain.symbols.entities import ResolvedAsset

SYMBOL_DESCRIPTION = "Canonical uppercase ticker or crypto symbol"


class ResolvedAssetSchema(BaseModel):
    """A symbol with its derived metadata.

    Attributes:
        symbol: Canonical symbol.
        asset_class: "equity" or "crypto".
        provider_id: Price-feed id; only meaningful for crypto assets.
    """

    symbol: str = Field(..., min_length=1, description=SYMBOL_DESCRIPTION)
    asset_class: Literal["equity", "crypto"]
    provider_id: str

    @classmethod
    def from_asset(cls, asset: ResolvedAsset) -> "ResolvedAssetSchema":
        return cls(
            symbol=asset.symbol,
            asset_class=asset.asset_class.value,
            provider_id=asset.provider_id,
        )


class ResolveResponse(BaseModel):
    """Output of the ``resolve`` command."""

    text: str
    resolved: bool
    strategy: Optional[str] = None
    asset: Optional[ResolvedAssetSchema] = None

    @classmethod
    def from_result(cls, result: ResolveAssetResult) -> "ResolveResponse":
        return cls(
            text=result.text,
            resolved=result.resolved,
            strategy=result.strategy,
            asset=ResolvedAssetSchema.from_asset(result.asset) if result.asset else None,
        )
