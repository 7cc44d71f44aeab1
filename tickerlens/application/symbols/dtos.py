"""
Data Transfer Objects for the symbols application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from typing import Optional

from tickerlens.domain.symbols.entities import ResolvedAsset


@dataclass(frozen=True)
class ResolveAssetCommand:
    """Input DTO for resolving a chat message to an asset.

    Attributes:
        text: Raw user message.
        apply_correction: Pass the extracted token through the
            company-name corrector ("TESLA" → "TSLA").
    """

    text: str
    apply_correction: bool = True


@dataclass(frozen=True)
class ResolveAssetResult:
    """Output DTO for a resolution attempt.

    Attributes:
        text: The message that was resolved.
        asset: Resolved asset, or None when the user should be asked
            to clarify.
        strategy: Name of the extraction strategy that matched, if any.
    """

    text: str
    asset: Optional[ResolvedAsset] = None
    strategy: Optional[str] = None

    @property
    def resolved(self) -> bool:
        return self.asset is not None


@dataclass(frozen=True)
class DescribeAssetQuery:
    """Input DTO for describing a symbol the caller already holds."""

    symbol: str
