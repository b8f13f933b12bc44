"""
Case-pack command and query handlers.
"""

from .command_handlers import UpsertCasePackCommandHandler, UpsertCommodityPackCommandHandler
from .query_handlers import GetCasePacksQueryHandler, ResolveCaseWeightQueryHandler

__all__ = [
    "UpsertCasePackCommandHandler",
    "UpsertCommodityPackCommandHandler",
    "GetCasePacksQueryHandler",
    "ResolveCaseWeightQueryHandler",
]
