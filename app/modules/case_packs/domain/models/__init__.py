"""
Domain models for the case-pack module.
"""

from .autosplit import AutoSplitResult, SplitSuggestion
from .case_pack import (
    DEFAULT_CONFIDENCE,
    DEFAULT_UOM,
    CasePack,
    CasePackDetails,
    CaseWeight,
    CommodityPack,
    PackSource,
    WeightSource,
)
from .label import ParsedLabel

__all__ = [
    "AutoSplitResult",
    "SplitSuggestion",
    "DEFAULT_CONFIDENCE",
    "DEFAULT_UOM",
    "CasePack",
    "CasePackDetails",
    "CaseWeight",
    "CommodityPack",
    "PackSource",
    "WeightSource",
    "ParsedLabel",
]
