"""
Symbols bounded context — domain layer.

Resolves free text to a canonical financial symbol and derives the
symbol's metadata:
- Alias lookup (company / project names → ticker)
- Multi-strategy symbol extraction
- Company-name corrections
- Crypto classification and price-feed ids
"""

from tickerlens.domain.symbols.aliases import ASSET_ALIASES, AliasTable, alias_table
from tickerlens.domain.symbols.corrector import SYMBOL_CORRECTIONS, correct_symbol
from tickerlens.domain.symbols.crypto import CRYPTO_SYMBOLS, classify_asset, is_crypto_symbol
from tickerlens.domain.symbols.entities import AssetClass, ResolvedAsset, SymbolMatch
from tickerlens.domain.symbols.extraction import SymbolExtractionEngine, extract_symbol
from tickerlens.domain.symbols.metadata import describe_symbol
from tickerlens.domain.symbols.provider_ids import PROVIDER_IDS, get_provider_id

__all__ = [
    "ASSET_ALIASES",
    "AliasTable",
    "alias_table",
    "SYMBOL_CORRECTIONS",
    "correct_symbol",
    "CRYPTO_SYMBOLS",
    "classify_asset",
    "is_crypto_symbol",
    "AssetClass",
    "ResolvedAsset",
    "SymbolMatch",
    "SymbolExtractionEngine",
    "extract_symbol",
    "describe_symbol",
    "PROVIDER_IDS",
    "get_provider_id",
]
