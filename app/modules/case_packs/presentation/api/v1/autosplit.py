# 📄 File: app/modules/case_packs/presentation/api/v1/autosplit.py
# 🧭 Purpose (Layman Explanation):
# The web address that says how many shares make a case and what pledge sizes would finish it.
# 🧪 Purpose (Technical Summary):
# POST /autosplit endpoint delegating to the auto-split service.
# 🔗 Dependencies:
# FastAPI, slowapi limiter, autosplit service, autosplit schemas
# 🔄 Connected Modules / Calls From:
# app.api.v1.router

from fastapi import APIRouter, Request

from app.shared.core.rate_limiter import api_rate_limit, limiter

from ....domain.services.autosplit_service import compute_suggestions
from ..schemas.autosplit_schemas import AutoSplitRequest, AutoSplitResponse

autosplit_router = APIRouter()


@autosplit_router.post(
    "/autosplit",
    response_model=AutoSplitResponse,
    summary="Compute auto-split suggestions for a case",
)
@limiter.limit(api_rate_limit)
async def autosplit(request: Request, body: AutoSplitRequest) -> AutoSplitResponse:
    result = compute_suggestions(body.case_size, body.share_size, body.current_pledged)
    return AutoSplitResponse.from_domain(result)
