"""
Domain service: correct full company names typed where a ticker was expected.
"""

# Keys are upper-cased; values are canonical tickers.
SYMBOL_CORRECTIONS: dict[str, str] = {
    "TESLA": "TSLA",
    "APPLE": "AAPL",
    "GOOGLE": "GOOGL",
    "MICROSOFT": "MSFT",
    "AMAZON": "AMZN",
    "FACEBOOK": "META",
    "NETFLIX": "NFLX",
    "NVIDIA": "NVDA",
}


def correct_symbol(symbol: str) -> str:
    """Map a registered company-name mistake to its ticker.

    Comparison is case-insensitive. Tokens without a registered
    correction are returned unchanged, original casing included.
    """
    return SYMBOL_CORRECTIONS.get(symbol.upper(), symbol)
