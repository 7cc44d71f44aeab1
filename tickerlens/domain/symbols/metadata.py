"""
Domain service: canonical symbol → asset metadata.
"""

from tickerlens.domain.symbols.crypto import classify_asset
from tickerlens.domain.symbols.entities import ResolvedAsset
from tickerlens.domain.symbols.provider_ids import get_provider_id


def describe_symbol(symbol: str) -> ResolvedAsset:
    """Attach asset class and provider id to a canonical symbol."""
    return ResolvedAsset(
        symbol=symbol,
        asset_class=classify_asset(symbol),
        provider_id=get_provider_id(symbol),
    )
