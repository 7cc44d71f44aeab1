"""
Domain service: canonical crypto symbol → CoinGecko coin id.

Only meaningful for crypto symbols. For anything unmapped the lowercased
symbol is returned; for equities that value is a placeholder and must
not be sent to a crypto price feed.
"""

PROVIDER_IDS: dict[str, str] = {
    "BTC": "bitcoin",
    "ETH": "ethereum",
    "ADA": "cardano",
    "SOL": "solana",
    "DOT": "polkadot",
    "LINK": "chainlink",
    "MATIC": "matic-network",
    "AVAX": "avalanche-2",
    "UNI": "uniswap",
    "ATOM": "cosmos",
    "XRP": "ripple",
    "LTC": "litecoin",
    "BCH": "bitcoin-cash",
    "ETC": "ethereum-classic",
    "XLM": "stellar",
    "DOGE": "dogecoin",
    "SHIB": "shiba-inu",
    "TRX": "tron",
    "FTT": "ftx-token",
    "NEAR": "near",
    "ALGO": "algorand",
    "ICP": "internet-computer",
    "MANA": "decentraland",
    "SAND": "the-sandbox",
    "APE": "apecoin",
    "CRV": "curve-dao-token",
    "COMP": "compound",
    "SUSHI": "sushi",
    "YFI": "yearn-finance",
    "AAVE": "aave",
    "MKR": "maker",
    "SNX": "synthetix-network-token",
    "BNB": "binancecoin",
    "USDT": "tether",
    "USDC": "usd-coin",
    "BUSD": "binance-usd",
    "DAI": "dai",
    "TUSD": "true-usd",
}


def get_provider_id(symbol: str) -> str:
    """Return the price-feed id for a symbol, falling back to the lowercased symbol."""
    return PROVIDER_IDS.get(symbol.upper(), symbol.lower())
