# 📄 File: app/modules/case_packs/presentation/api/v1/case_packs.py
# 🧭 Purpose (Layman Explanation):
# The web addresses for recording and listing case packs, setting commodity default weights,
# and asking how heavy one case of a product is.
#
# 🧪 Purpose (Technical Summary):
# Case-pack catalog endpoints (GET/POST /case-pack, POST /commodity-pack) and
# GET /resolve/case-weight. Catalog failures keep the flat {"error": ...} body.
#
# 🔗 Dependencies:
# FastAPI, slowapi limiter, application handlers, presentation dependencies and schemas
#
# 🔄 Connected Modules / Calls From:
# app.api.v1.router

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse

from app.shared.core.exceptions import RepositoryError
from app.shared.core.rate_limiter import api_rate_limit, limiter
from app.shared.utils.logging import get_logger

from ....application.handlers.command_handlers import (
    UpsertCasePackCommandHandler,
    UpsertCommodityPackCommandHandler,
)
from ....application.handlers.query_handlers import (
    GetCasePacksQueryHandler,
    ResolveCaseWeightQueryHandler,
)
from ....application.queries.get_case_packs import GetCasePacksQuery
from ....application.queries.resolve_case_weight import ResolveCaseWeightQuery
from ...dependencies import (
    get_case_packs_handler,
    get_resolve_case_weight_handler,
    get_upsert_case_pack_handler,
    get_upsert_commodity_pack_handler,
)
from ..schemas.case_pack_schemas import (
    CasePackListResponse,
    CaseWeightResponse,
    ErrorMessage,
    UpsertCasePackRequest,
    UpsertCasePackResponse,
    UpsertCommodityPackRequest,
    UpsertCommodityPackResponse,
)

logger = get_logger(__name__)

case_packs_router = APIRouter()


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


# =============================================================================
# CASE PACK CATALOG
# =============================================================================

@case_packs_router.get(
    "/case-pack",
    response_model=CasePackListResponse,
    summary="List case packs for a case GTIN",
    responses={400: {"model": ErrorMessage, "description": "gtin_case missing"}},
)
@limiter.limit(api_rate_limit)
async def list_case_packs(
    request: Request,
    gtin_case: Optional[str] = Query(default=None, description="Case-level GTIN"),
    handler: GetCasePacksQueryHandler = Depends(get_case_packs_handler),
):
    """Case packs joined with their trade item fields, newest first."""
    if not gtin_case:
        return _error("gtin_case required", status.HTTP_400_BAD_REQUEST)

    packs = await handler.handle(GetCasePacksQuery(gtin_case=gtin_case))
    return CasePackListResponse.from_domain(packs)


@case_packs_router.post(
    "/case-pack",
    response_model=UpsertCasePackResponse,
    summary="Upsert a trade item and record a case pack",
    responses={
        422: {"description": "Validation error"},
        500: {"model": ErrorMessage, "description": "Storage failure"},
    },
)
@limiter.limit(api_rate_limit)
async def upsert_case_pack(
    request: Request,
    body: UpsertCasePackRequest,
    handler: UpsertCasePackCommandHandler = Depends(get_upsert_case_pack_handler),
):
    """
    Upsert the trade item keyed by gtin_case, then append a case pack.

    Omitted trade item fields keep their stored values.
    """
    try:
        pack = await handler.handle(body.to_command())
    except RepositoryError as e:
        return _error(e.message, status.HTTP_500_INTERNAL_SERVER_ERROR)

    return UpsertCasePackResponse.from_domain(pack)


@case_packs_router.post(
    "/commodity-pack",
    response_model=UpsertCommodityPackResponse,
    summary="Create or replace a commodity default case weight",
    responses={500: {"model": ErrorMessage, "description": "Storage failure"}},
)
@limiter.limit(api_rate_limit)
async def upsert_commodity_pack(
    request: Request,
    body: UpsertCommodityPackRequest,
    handler: UpsertCommodityPackCommandHandler = Depends(get_upsert_commodity_pack_handler),
):
    try:
        commodity = await handler.handle(body.to_command())
    except RepositoryError as e:
        return _error(e.message, status.HTTP_500_INTERNAL_SERVER_ERROR)

    return UpsertCommodityPackResponse.from_domain(commodity)


# =============================================================================
# CASE WEIGHT RESOLUTION
# =============================================================================

@case_packs_router.get(
    "/resolve/case-weight",
    response_model=CaseWeightResponse,
    summary="Resolve the weight of one case",
)
@limiter.limit(api_rate_limit)
async def resolve_case_weight(
    request: Request,
    gtin_case: Optional[str] = Query(default=None),
    category: Optional[str] = Query(default=None),
    unit_net: Optional[float] = Query(default=None, gt=0),
    unit_uom: Optional[str] = Query(default=None),
    region: Optional[str] = Query(default=None, description="Region code for commodity defaults"),
    handler: ResolveCaseWeightQueryHandler = Depends(get_resolve_case_weight_handler),
) -> CaseWeightResponse:
    """
    Case pack for the GTIN first, then the commodity default for the
    category, then a unit-count heuristic.
    """
    query = ResolveCaseWeightQuery(
        gtin_case=gtin_case or None,
        category=category or None,
        unit_net=unit_net,
        unit_uom=unit_uom or None,
        region=region or None,
    )
    weight = await handler.handle(query)
    return CaseWeightResponse.from_domain(weight)
