# 📄 File: app/modules/case_packs/domain/services/case_weight_resolver.py
# 🧭 Purpose (Layman Explanation):
# Answers "how heavy is one case of this product?" by checking, in order: a recorded case pack
# for the barcode, the default for the product's commodity category, and finally a rough guess.
# 🧪 Purpose (Technical Summary):
# Three-tier case-weight resolution over the CasePackRepository with a unit-count heuristic
# fallback. Always returns a CaseWeight.
# 🔗 Dependencies:
# Domain models, CasePackRepository interface, shared logging
# 🔄 Connected Modules / Calls From:
# application.handlers.query_handlers (ResolveCaseWeightQueryHandler)

import math
from typing import Optional

from app.shared.utils.logging import get_logger

from ..models.case_pack import DEFAULT_UOM, CaseWeight, WeightSource
from ..repositories.case_pack_repository import CasePackRepository

logger = get_logger(__name__)

DEFAULT_HEURISTIC_UNITS_PER_CASE = 12


def round_half_up(value: float, places: int = 2) -> float:
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


class CaseWeightResolver:
    """
    Resolve the weight of one case.

    Tiers, first match wins:
    1. Best case pack for the GTIN that has both a weight and a unit
    2. Commodity pack for the category (region-specific preferred)
    3. Heuristic: unit_net (or 1) times a fixed units-per-case count
    """

    def __init__(
        self,
        repository: CasePackRepository,
        heuristic_units_per_case: int = DEFAULT_HEURISTIC_UNITS_PER_CASE,
        default_uom: str = DEFAULT_UOM,
    ):
        self._repository = repository
        self._heuristic_units_per_case = heuristic_units_per_case
        self._default_uom = default_uom

    async def resolve(
        self,
        gtin_case: Optional[str] = None,
        category: Optional[str] = None,
        unit_net: Optional[float] = None,
        unit_uom: Optional[str] = None,
        region: Optional[str] = None,
    ) -> CaseWeight:
        if gtin_case:
            pack = await self._repository.get_best_case_pack(gtin_case)
            if pack and pack.case_net_weight and pack.case_uom:
                logger.debug("Case weight from case pack", gtin_case=gtin_case, source=pack.source)
                return CaseWeight(
                    case_weight=pack.case_net_weight,
                    uom=pack.case_uom,
                    source=pack.source,
                )

        if category:
            commodity = await self._repository.get_commodity_pack(category, region)
            if commodity and commodity.default_case_weight:
                logger.debug("Case weight from commodity pack", category=category, region=region)
                return CaseWeight(
                    case_weight=commodity.default_case_weight,
                    uom=commodity.uom or self._default_uom,
                    source=WeightSource.COMMODITYPACK,
                )

        guess = round_half_up((unit_net or 1) * self._heuristic_units_per_case, 2)
        return CaseWeight(
            case_weight=guess,
            uom=unit_uom or self._default_uom,
            source=WeightSource.HEURISTIC,
        )
