"""
Domain service: human name ↔ canonical symbol lookup.

Maps lowercase company / project names and common synonyms to the
canonical ticker used across the system, for both equities and crypto
assets.  Pure lookup over static data: no IO, no frameworks.
"""

from __future__ import annotations

import re
from typing import Mapping, Optional


# ---------------------------------------------------------------------------
# Name → Symbol dictionary
# ---------------------------------------------------------------------------
# Keys are lowercase aliases as users type them in chat messages.
# Several aliases may point at the same symbol ("facebook", "fb" → META).

ASSET_ALIASES: dict[str, str] = {
    # Equities
    "apple": "AAPL",
    "apple inc": "AAPL",
    "google": "GOOGL",
    "alphabet": "GOOGL",
    "microsoft": "MSFT",
    "msft": "MSFT",
    "tesla": "TSLA",
    "tesla motors": "TSLA",
    "nvidia": "NVDA",
    "amazon": "AMZN",
    "meta": "META",
    "meta platforms": "META",
    "netflix": "NFLX",
    "fb": "META",
    "facebook": "META",
    "paypal": "PYPL",
    "adobe": "ADBE",
    "salesforce": "CRM",
    "oracle": "ORCL",
    "intel": "INTC",
    "amd": "AMD",
    "advanced micro devices": "AMD",
    "walmart": "WMT",
    "johnson & johnson": "JNJ",
    "jpmorgan": "JPM",
    "visa": "V",
    "mastercard": "MA",
    "coca cola": "KO",
    "pepsi": "PEP",
    "disney": "DIS",
    "mcdonalds": "MCD",
    "nike": "NKE",
    "starbucks": "SBUX",
    # Crypto
    "bitcoin": "BTC",
    "btc": "BTC",
    "ethereum": "ETH",
    "eth": "ETH",
    "ether": "ETH",
    "cardano": "ADA",
    "ada": "ADA",
    "solana": "SOL",
    "sol": "SOL",
    "polkadot": "DOT",
    "dot": "DOT",
    "chainlink": "LINK",
    "link": "LINK",
    "polygon": "MATIC",
    "matic": "MATIC",
    "avalanche": "AVAX",
    "avax": "AVAX",
    "uniswap": "UNI",
    "uni": "UNI",
    "cosmos": "ATOM",
    "atom": "ATOM",
    "ripple": "XRP",
    "xrp": "XRP",
    "litecoin": "LTC",
    "ltc": "LTC",
    "dogecoin": "DOGE",
    "doge": "DOGE",
    "shibainu": "SHIB",
    "shiba inu": "SHIB",
    "shib": "SHIB",
    "binance coin": "BNB",
    "bnb": "BNB",
    "terra": "LUNA",
    "luna": "LUNA",
}

# Shortest string allowed on the contained side of the containment pass.
MIN_CONTAINMENT_LENGTH = 3


class AliasTable:
    """Read-only alias table with longest-name-first matching.

    Each alias is compiled once into a word-boundary regex, so "mania"
    never matches "man" and "shiba inu" is tried before "shib".
    """

    def __init__(
        self,
        aliases: Optional[Mapping[str, str]] = None,
        extra_aliases: Optional[Mapping[str, str]] = None,
    ) -> None:
        """Initialize the table.

        Args:
            aliases: Name → symbol mapping. Defaults to ``ASSET_ALIASES``.
            extra_aliases: Optional additional name → symbol pairs to merge.
                They win over the base table on identical names.
        """
        merged: dict[str, str] = {}
        for name, symbol in (ASSET_ALIASES if aliases is None else aliases).items():
            merged[name.strip().lower()] = symbol.strip().upper()
        for name, symbol in (extra_aliases or {}).items():
            merged[name.strip().lower()] = symbol.strip().upper()

        # sorted() is stable: equal lengths keep table order
        self._entries: tuple[tuple[str, str], ...] = tuple(
            sorted(merged.items(), key=lambda item: len(item[0]), reverse=True)
        )
        self._patterns: tuple[tuple[re.Pattern[str], str], ...] = tuple(
            (re.compile(rf"\b{re.escape(name)}\b", re.IGNORECASE), symbol)
            for name, symbol in self._entries
        )

    @property
    def entries(self) -> tuple[tuple[str, str], ...]:
        """(name, symbol) pairs, longest name first."""
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and any(
            alias == name.strip().lower() for alias, _ in self._entries
        )

    def lookup(self, text: str) -> Optional[str]:
        """Return the symbol of the longest alias found as whole words in text.

        Args:
            text: Free text, any casing.

        Returns:
            The canonical symbol, or None when no alias occurs in the text.
        """
        if not text:
            return None

        for pattern, symbol in self._patterns:
            if pattern.search(text):
                return symbol
        return None

    def match_span(self, span: str) -> Optional[str]:
        """Resolve a short free-text span captured from a conversational phrase.

        Tries an exact alias match first. Failing that, accepts an alias
        contained in the span, or a span that begins a word of an alias
        ("bitcoi" in "bitcoin", but not "the" in "ethereum"), as long as
        the contained side has at least ``MIN_CONTAINMENT_LENGTH``
        characters.
        """
        candidate = (span or "").strip().lower()
        if not candidate:
            return None

        for name, symbol in self._entries:
            if candidate == name:
                return symbol

        for name, symbol in self._entries:
            if len(name) >= MIN_CONTAINMENT_LENGTH and name in candidate:
                return symbol
            if len(candidate) >= MIN_CONTAINMENT_LENGTH and _starts_word(name, candidate):
                return symbol
        return None


def _starts_word(name: str, fragment: str) -> bool:
    return name.startswith(fragment) or f" {fragment}" in name


alias_table = AliasTable()
