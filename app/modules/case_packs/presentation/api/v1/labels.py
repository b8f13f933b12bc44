# 📄 File: app/modules/case_packs/presentation/api/v1/labels.py
# 🧭 Purpose (Layman Explanation):
# The web address that reads the text under a case barcode and says what it found.
# 🧪 Purpose (Technical Summary):
# POST /parse-label endpoint delegating to the GS1-128 parser.
# 🔗 Dependencies:
# FastAPI, slowapi limiter, label parser service, label schemas
# 🔄 Connected Modules / Calls From:
# app.api.v1.router

from fastapi import APIRouter, Request

from app.shared.core.rate_limiter import api_rate_limit, limiter
from app.shared.utils.logging import get_logger

from ....domain.services.label_parser import parse_gs1_128
from ..schemas.label_schemas import ParseLabelRequest, ParseLabelResponse

logger = get_logger(__name__)

labels_router = APIRouter()


@labels_router.post(
    "/parse-label",
    response_model=ParseLabelResponse,
    summary="Parse GS1-128 case label text",
    responses={422: {"description": "Label text missing, shorter than 3 or longer than 512 characters"}},
)
@limiter.limit(api_rate_limit)
async def parse_label(request: Request, body: ParseLabelRequest) -> ParseLabelResponse:
    """
    Extract the case GTIN (01), unit count (37) and net weight in kg (310n)
    from human-readable label text.
    """
    parsed = parse_gs1_128(body.text)
    logger.debug("Label parsed", gtin_case=parsed.gtin_case, gtin_valid=parsed.gtin_valid)
    return ParseLabelResponse.from_domain(parsed)
