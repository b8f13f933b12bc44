"""
Case-pack commands (write operations).
"""

from .upsert_case_pack import UpsertCasePackCommand
from .upsert_commodity_pack import UpsertCommodityPackCommand

__all__ = [
    "UpsertCasePackCommand",
    "UpsertCommodityPackCommand",
]
