"""
Tests for the symbols application layer (use cases).

Use cases are exercised with the real domain services and, where the
orchestration itself is under test, with a mocked engine.
"""

from unittest.mock import MagicMock

import pytest

from tickerlens.application.symbols.describe_asset import DescribeAssetUseCase
from tickerlens.application.symbols.dtos import (
    DescribeAssetQuery,
    ResolveAssetCommand,
    ResolveAssetResult,
)
from tickerlens.application.symbols.resolve_asset import ResolveAssetUseCase, build_engine
from tickerlens.core.config import Settings
from tickerlens.domain.symbols.entities import AssetClass, ResolvedAsset, SymbolMatch
from tickerlens.domain.symbols.errors import InvalidSymbolError, SymbolResolutionError


class TestResolveAssetUseCase:
    """Tests for ResolveAssetUseCase."""

    def test_resolves_crypto(self):
        """A crypto mention resolves with its CoinGecko id."""
        result = ResolveAssetUseCase().execute(
            ResolveAssetCommand(text="How is Solana performing today?")
        )
        assert result.resolved
        assert result.asset == ResolvedAsset("SOL", AssetClass.CRYPTO, "solana")
        assert result.strategy == "direct"

    def test_resolves_equity(self):
        result = ResolveAssetUseCase().execute(ResolveAssetCommand(text="should I buy apple"))
        assert result.asset.symbol == "AAPL"
        assert result.asset.asset_class is AssetClass.EQUITY
        assert not result.asset.is_crypto

    def test_applies_correction(self):
        """'TESLA' extracted from the text is corrected to TSLA."""
        result = ResolveAssetUseCase().execute(ResolveAssetCommand(text="should I buy TESLA"))
        assert result.asset.symbol == "TSLA"

    def test_correction_can_be_disabled(self):
        result = ResolveAssetUseCase().execute(
            ResolveAssetCommand(text="should I buy TESLA", apply_correction=False)
        )
        assert result.asset.symbol == "TESLA"

    def test_unresolved_is_not_an_error(self):
        """No symbol yields an empty result the caller can act on."""
        result = ResolveAssetUseCase().execute(ResolveAssetCommand(text="the quick brown fox"))
        assert result == ResolveAssetResult(text="the quick brown fox")
        assert not result.resolved

    def test_uses_injected_engine(self):
        engine = MagicMock()
        engine.extract_match.return_value = SymbolMatch(symbol="SOMEUSD", strategy="token")

        result = ResolveAssetUseCase(engine=engine).execute(ResolveAssetCommand(text="x"))

        engine.extract_match.assert_called_once_with("x")
        assert result.asset.asset_class is AssetClass.CRYPTO
        assert result.asset.provider_id == "someusd"
        assert result.strategy == "token"


class TestDescribeAssetUseCase:
    """Tests for DescribeAssetUseCase."""

    def test_describes_crypto(self):
        asset = DescribeAssetUseCase().execute(DescribeAssetQuery(symbol="eth"))
        assert asset == ResolvedAsset("ETH", AssetClass.CRYPTO, "ethereum")

    def test_corrects_company_name(self):
        asset = DescribeAssetUseCase().execute(DescribeAssetQuery(symbol="Nvidia"))
        assert asset.symbol == "NVDA"
        assert asset.provider_id == "nvda"

    @pytest.mark.parametrize("symbol", ["", "   "])
    def test_blank_symbol_raises(self, symbol):
        with pytest.raises(InvalidSymbolError) as exc_info:
            DescribeAssetUseCase().execute(DescribeAssetQuery(symbol=symbol))
        assert isinstance(exc_info.value, SymbolResolutionError)
        assert exc_info.value.symbol == symbol


class TestBuildEngine:
    """Tests for wiring the engine from Settings."""

    def test_extra_aliases_from_settings(self):
        engine = build_engine(Settings(extra_aliases={"Palantir": "pltr"}))
        assert engine.extract("is palantir overvalued") == "PLTR"

    def test_max_message_length_from_settings(self):
        engine = build_engine(Settings(max_message_length=5))
        assert engine.extract("hello, how is PLTR") is None
