"""
Request/response schemas for the case-pack API.
"""

from .autosplit_schemas import AutoSplitRequest, AutoSplitResponse, SplitSuggestionResponse
from .case_pack_schemas import (
    CasePackItemResponse,
    CasePackListResponse,
    CasePackResponse,
    CaseWeightResponse,
    CommodityPackResponse,
    ErrorMessage,
    UpsertCasePackRequest,
    UpsertCasePackResponse,
    UpsertCommodityPackRequest,
    UpsertCommodityPackResponse,
)
from .label_schemas import ParseLabelRequest, ParseLabelResponse

__all__ = [
    "AutoSplitRequest",
    "AutoSplitResponse",
    "SplitSuggestionResponse",
    "CasePackItemResponse",
    "CasePackListResponse",
    "CasePackResponse",
    "CaseWeightResponse",
    "CommodityPackResponse",
    "ErrorMessage",
    "UpsertCasePackRequest",
    "UpsertCasePackResponse",
    "UpsertCommodityPackRequest",
    "UpsertCommodityPackResponse",
    "ParseLabelRequest",
    "ParseLabelResponse",
]
