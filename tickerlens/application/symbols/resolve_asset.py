"""
Use case: Resolve a chat message to a tradable asset.

Runs the SymbolExtractionEngine on the raw message, optionally
corrects company-name tokens, then derives the asset class and the
price-feed id.

Input:  ResolveAssetCommand (text, apply_correction)
Output: ResolveAssetResult  (asset or None, winning strategy)
Side effects: None.
"""

import logging
from typing import Optional

from tickerlens.application.symbols.dtos import ResolveAssetCommand, ResolveAssetResult
from tickerlens.core.config import Settings
from tickerlens.domain.symbols.aliases import AliasTable
from tickerlens.domain.symbols.corrector import correct_symbol
from tickerlens.domain.symbols.extraction import SymbolExtractionEngine, default_engine
from tickerlens.domain.symbols.metadata import describe_symbol

logger = logging.getLogger(__name__)


def build_engine(settings: Settings) -> SymbolExtractionEngine:
    """Build an extraction engine from application settings."""
    aliases = AliasTable(extra_aliases=settings.extra_aliases) if settings.extra_aliases else None
    return SymbolExtractionEngine(
        aliases=aliases,
        max_text_length=settings.max_message_length,
    )


class ResolveAssetUseCase:
    """Orchestrates extraction → correction → classification."""

    def __init__(self, engine: Optional[SymbolExtractionEngine] = None) -> None:
        self._engine = engine or default_engine

    def execute(self, command: ResolveAssetCommand) -> ResolveAssetResult:
        """Resolve the message in the command.

        Args:
            command: Raw text plus correction flag.

        Returns:
            Result carrying the resolved asset, or no asset when nothing
            in the message looks like a symbol.
        """
        match = self._engine.extract_match(command.text)

        if match is None:
            logger.info("No symbol resolved; clarification needed.")
            return ResolveAssetResult(text=command.text)

        symbol = match.symbol
        if command.apply_correction:
            corrected = correct_symbol(symbol)
            if corrected != symbol:
                logger.info("Corrected symbol %s -> %s", symbol, corrected)
            symbol = corrected

        asset = describe_symbol(symbol)
        logger.info(
            "Resolved symbol=%s class=%s strategy=%s",
            asset.symbol,
            asset.asset_class.value,
            match.strategy,
        )
        return ResolveAssetResult(text=command.text, asset=asset, strategy=match.strategy)
