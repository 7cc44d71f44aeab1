"""
Domain service: decide whether a canonical symbol denotes a crypto asset.

A fixed symbol set is complemented by a substring heuristic ("usd",
"coin") that catches stablecoins and tokens missing from the set.
The heuristic also fires on any equity ticker that happens to contain
those substrings; that is a known limitation.
"""

from tickerlens.domain.symbols.entities import AssetClass

CRYPTO_SYMBOLS: frozenset[str] = frozenset(
    {
        "BTC", "ETH", "ADA", "SOL", "DOT", "LINK", "MATIC", "AVAX",
        "UNI", "ATOM", "XRP", "LTC", "BCH", "ETC", "XLM", "DOGE",
        "SHIB", "TRX", "FTT", "NEAR", "ALGO", "ICP", "MANA", "SAND",
        "APE", "CRV", "COMP", "SUSHI", "YFI", "AAVE", "MKR", "SNX",
        "BNB", "USDT", "USDC", "BUSD", "DAI", "TUSD",
    }
)

CRYPTO_NAME_HINTS: tuple[str, ...] = ("usd", "coin")


def is_crypto_symbol(symbol: str) -> bool:
    """Return True if the symbol is a known or heuristically detected crypto asset."""
    if symbol.upper() in CRYPTO_SYMBOLS:
        return True
    lowered = symbol.lower()
    return any(hint in lowered for hint in CRYPTO_NAME_HINTS)


def classify_asset(symbol: str) -> AssetClass:
    return AssetClass.CRYPTO if is_crypto_symbol(symbol) else AssetClass.EQUITY
