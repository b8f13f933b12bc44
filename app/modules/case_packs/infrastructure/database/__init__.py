"""
SQLAlchemy models and repository implementation for case packs.
"""

from .case_pack_repository_impl import CasePackRepositoryImpl
from .models import CasePackModel, CommodityPackModel, TradeItemModel

__all__ = [
    "CasePackRepositoryImpl",
    "CasePackModel",
    "CommodityPackModel",
    "TradeItemModel",
]
