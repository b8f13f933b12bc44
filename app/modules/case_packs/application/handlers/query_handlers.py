# 📄 File: app/modules/case_packs/application/handlers/query_handlers.py
# 🧭 Purpose (Layman Explanation):
# Answers the read-only questions: "what case packs do we know for this barcode?" and
# "how heavy is one case of this product?"
# 🧪 Purpose (Technical Summary):
# CQRS query handlers delegating to the CasePackRepository and the CaseWeightResolver.
# 🔗 Dependencies:
# Application queries, domain services, CasePackRepository interface
# 🔄 Connected Modules / Calls From:
# presentation.api.v1.case_packs

__all__ = [
    "GetCasePacksQueryHandler",
    "ResolveCaseWeightQueryHandler",
]

from typing import List

from app.shared.utils.logging import get_logger

from ..queries.get_case_packs import GetCasePacksQuery
from ..queries.resolve_case_weight import ResolveCaseWeightQuery
from ...domain.models.case_pack import CasePackDetails, CaseWeight
from ...domain.repositories.case_pack_repository import CasePackRepository
from ...domain.services.case_weight_resolver import CaseWeightResolver

logger = get_logger(__name__)


class GetCasePacksQueryHandler:
    def __init__(self, repository: CasePackRepository):
        self._repository = repository

    async def handle(self, query: GetCasePacksQuery) -> List[CasePackDetails]:
        items = await self._repository.list_case_packs(query.gtin_case)
        logger.debug("Case packs listed", gtin_case=query.gtin_case, count=len(items))
        return items


class ResolveCaseWeightQueryHandler:
    """
    Resolves a case weight through the case pack, commodity and heuristic tiers.
    """

    def __init__(self, resolver: CaseWeightResolver):
        self._resolver = resolver

    async def handle(self, query: ResolveCaseWeightQuery) -> CaseWeight:
        result = await self._resolver.resolve(
            gtin_case=query.gtin_case,
            category=query.category,
            unit_net=query.unit_net,
            unit_uom=query.unit_uom,
            region=query.region,
        )
        logger.info(
            "Case weight resolved",
            gtin_case=query.gtin_case,
            category=query.category,
            source=result.source,
        )
        return result
