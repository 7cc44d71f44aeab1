"""
Domain service: free text → canonical symbol.

Turns an arbitrary chat message ("How is Solana performing today?",
"$TSLA price", "should I buy apple") into at most one canonical symbol.

Extraction is a priority chain of independent strategies, tried in
order of decreasing confidence.  The first strategy that returns a
symbol wins; later strategies are never consulted.  Both the chain
order and the pattern order inside each strategy are part of the
observable behaviour.

Pure business logic.  No IO, no frameworks.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Optional

from tickerlens.domain.symbols.aliases import AliasTable, alias_table
from tickerlens.domain.symbols.entities import SymbolMatch

logger = logging.getLogger(__name__)

# Messages longer than this are truncated before matching.
DEFAULT_MAX_TEXT_LENGTH = 2000


# ---------------------------------------------------------------------------
# Strategy 1: tickers common enough to scan for as raw substrings
# ---------------------------------------------------------------------------

DIRECT_SCAN_SYMBOLS: tuple[str, ...] = (
    "AAPL", "TSLA", "GOOGL", "MSFT", "AMZN", "META", "NVDA", "NFLX",
    "BTC", "ETH", "ADA", "SOL", "DOT", "LINK",
)


# ---------------------------------------------------------------------------
# Strategy 2: keyword-adjacent uppercase tokens
# ---------------------------------------------------------------------------
# Keywords are case-insensitive; the captured token must be typed in
# uppercase so that ordinary words ("about Apple") fall through to the
# alias strategies.  The "$" prefix is unambiguous and accepts any case.

STRUCTURAL_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(p)
    for p in (
        r"\$([A-Za-z]{1,5})\b",
        r"\b([A-Z]{2,5})\s+(?i:stock|share|price|chart|analysis|quote)\b",
        r"\b(?i:about)\s+([A-Z]{2,5})\b",
        r"\b([A-Z]{2,5})\s+(?i:crypto|coin|token|cryptocurrency)\b",
        r"\b(?i:how).*?(?i:is|are)\s+([A-Z]{2,5})\b",
        r"\b(?i:should).*?(?i:buy|sell|invest).*?([A-Z]{2,5})\b",
        r"\b([A-Z]{2,5})\s+(?i:recommendation|advice|forecast|prediction)\b",
        r"\b(?i:analyze|analysis)\s+([A-Z]{2,5})\b",
        r"\b(?i:what|how).*?([A-Z]{2,5})\s+(?i:doing|performing)\b",
        r"\b([A-Z]{2,5})\s+(?i:real-time|realtime|signals|patterns|candlestick|trends|live)\b",
        r"\b(?i:show|display)\s+([A-Z]{2,5})\b",
        r"\b([A-Z]{2,5})\s+(?i:intraday|daily|chart|charts)\b",
    )
)

_UPPERCASE_PAIR: re.Pattern[str] = re.compile(r"[A-Z]{2}")


# ---------------------------------------------------------------------------
# Strategy 3: any standalone uppercase token
# ---------------------------------------------------------------------------
# Accepts false positives such as "OK" or "ASAP".

UPPERCASE_TOKEN_PATTERN: re.Pattern[str] = re.compile(r"\b([A-Z]{2,5})\b")


# ---------------------------------------------------------------------------
# Strategy 5: conversational phrasing around a free-text span
# ---------------------------------------------------------------------------
# Applied to the lower-cased message.

_SPAN_END = r"(?:\s+(?:stock|crypto|coin)|$|\?)"

NATURAL_LANGUAGE_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(p)
    for p in (
        r"(?:how\s+is|how's)\s+([a-z]+)\s+(?:doing|performing)",
        r"(?:tell\s+me\s+about|about)\s+([a-z\s]+?)(?:\s+(?:stock|crypto|coin|price)|$|\?)",
        rf"(?:should\s+i|can\s+i)\s+(?:buy|invest\s+in|sell)\s+([a-z\s]+?){_SPAN_END}",
        rf"(?:what's|whats)\s+(?:the\s+deal\s+with|happening\s+with|up\s+with)\s+([a-z\s]+?){_SPAN_END}",
        rf"(?:analyze|analysis\s+of)\s+([a-z\s]+?){_SPAN_END}",
        r"(?:give\s+me|show\s+me)\s+(?:a|an|the)\s+([a-z\s]+?)\s+(?:analysis|report|update)",
    )
)


def scan_direct_symbols(text: str) -> Optional[str]:
    """Return the first common ticker that occurs anywhere in the text."""
    upper = text.upper()
    for symbol in DIRECT_SCAN_SYMBOLS:
        if symbol in upper:
            return symbol
    return None


def match_structural_patterns(text: str) -> Optional[str]:
    """Return the token captured by the first structural pattern that matches.

    Every pattern but "$" needs two adjacent capitals in the text, so
    those patterns are skipped when there are none.
    """
    patterns = STRUCTURAL_PATTERNS
    if not _UPPERCASE_PAIR.search(text):
        patterns = patterns[:1]
    for pattern in patterns:
        match = pattern.search(text)
        if match:
            return match.group(1).upper()
    return None


def match_uppercase_token(text: str) -> Optional[str]:
    match = UPPERCASE_TOKEN_PATTERN.search(text)
    return match.group(1) if match else None


@dataclass(frozen=True)
class ExtractionStrategy:
    """A named step in the extraction chain."""

    name: str
    attempt: Callable[[str], Optional[str]]


class SymbolExtractionEngine:
    """Ordered multi-strategy parser from raw text to a canonical symbol.

    Strategies, highest confidence first:

    1. ``direct``: common tickers as raw substrings.
    2. ``structural``: uppercase token next to a keyword ("$AAPL", "BTC price").
    3. ``token``: any standalone 2-5 letter uppercase token.
    4. ``alias``: company / project names, longest name first.
    5. ``natural_language``: conversational phrasing resolved via aliases.

    Stateless apart from its read-only alias table; safe to share.
    """

    def __init__(
        self,
        aliases: Optional[AliasTable] = None,
        max_text_length: Optional[int] = DEFAULT_MAX_TEXT_LENGTH,
    ) -> None:
        """Initialize the engine.

        Args:
            aliases: Alias table to consult. Defaults to the shared table.
            max_text_length: Truncate input to this many characters before
                matching. None disables truncation.
        """
        self._aliases = aliases if aliases is not None else alias_table
        self._max_text_length = max_text_length
        self._strategies: tuple[ExtractionStrategy, ...] = (
            ExtractionStrategy("direct", scan_direct_symbols),
            ExtractionStrategy("structural", match_structural_patterns),
            ExtractionStrategy("token", match_uppercase_token),
            ExtractionStrategy("alias", self._match_alias),
            ExtractionStrategy("natural_language", self._match_natural_language),
        )

    @property
    def strategies(self) -> tuple[ExtractionStrategy, ...]:
        return self._strategies

    def extract(self, raw_text: Optional[str]) -> Optional[str]:
        """Return the canonical symbol mentioned in raw_text, or None.

        None means the caller should ask the user to clarify; it is never
        a reason to default to some symbol.
        """
        match = self.extract_match(raw_text)
        return match.symbol if match else None

    def extract_match(self, raw_text: Optional[str]) -> Optional[SymbolMatch]:
        """Like ``extract`` but also reports which strategy matched."""
        if not raw_text or not raw_text.strip():
            return None

        text = raw_text
        if self._max_text_length is not None and len(text) > self._max_text_length:
            logger.debug(
                "Truncating message from %d to %d chars",
                len(text),
                self._max_text_length,
            )
            text = text[: self._max_text_length]

        for strategy in self._strategies:
            symbol = strategy.attempt(text)
            if symbol:
                logger.debug("Strategy %s matched %s", strategy.name, symbol)
                return SymbolMatch(symbol=symbol, strategy=strategy.name)

        logger.debug("No symbol found in message (%d chars)", len(text))
        return None

    def _match_alias(self, text: str) -> Optional[str]:
        return self._aliases.lookup(text.lower())

    def _match_natural_language(self, text: str) -> Optional[str]:
        lowered = text.lower()
        for pattern in NATURAL_LANGUAGE_PATTERNS:
            match = pattern.search(lowered)
            if not match:
                continue
            symbol = self._aliases.match_span(match.group(1))
            if symbol:
                return symbol
        return None


default_engine = SymbolExtractionEngine(max_text_length=DEFAULT_MAX_TEXT_LENGTH)


def extract_symbol(text: Optional[str]) -> Optional[str]:
    """Extract at most one canonical symbol from free text using the default engine."""
    return default_engine.extract(text)
