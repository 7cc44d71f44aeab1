"""
Use case: Describe a symbol the caller already holds.

Input:  DescribeAssetQuery (symbol)
Output: ResolvedAsset
Side effects: None.
"""

import logging

from tickerlens.application.symbols.dtos import DescribeAssetQuery
from tickerlens.domain.symbols.corrector import correct_symbol
from tickerlens.domain.symbols.entities import ResolvedAsset
from tickerlens.domain.symbols.errors import InvalidSymbolError
from tickerlens.domain.symbols.metadata import describe_symbol

logger = logging.getLogger(__name__)


class DescribeAssetUseCase:
    """Normalizes a symbol and derives its asset metadata."""

    def execute(self, query: DescribeAssetQuery) -> ResolvedAsset:
        """Correct, upper-case and classify the queried symbol.

        Raises:
            InvalidSymbolError: If the symbol is blank.
        """
        token = (query.symbol or "").strip()
        if not token:
            raise InvalidSymbolError(query.symbol)

        symbol = correct_symbol(token).upper()
        asset = describe_symbol(symbol)
        logger.info("Described symbol=%s class=%s", asset.symbol, asset.asset_class.value)
        return asset
