"""
Case-pack queries (read operations).
"""

from .get_case_packs import GetCasePacksQuery
from .resolve_case_weight import ResolveCaseWeightQuery

__all__ = [
    "GetCasePacksQuery",
    "ResolveCaseWeightQuery",
]
