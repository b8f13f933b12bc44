# 📄 File: app/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# The traffic director for version 1 requests: sends label, case-pack and auto-split requests to
# the code that handles them.
# 🧪 Purpose (Technical Summary):
# Aggregates the case-pack module routers into the v1 router mounted at /api/v1, plus an
# API info endpoint.
# 🔗 Dependencies:
# FastAPI, app.modules.case_packs.presentation.api.v1
# 🔄 Connected Modules / Calls From:
# app.main

from fastapi import APIRouter

from app.modules.case_packs import get_module_info
from app.modules.case_packs.presentation.api.v1 import (
    autosplit_router,
    case_packs_router,
    labels_router,
)

from . import API_TAGS, get_api_info

api_v1_router = APIRouter()

api_v1_router.include_router(labels_router, tags=[API_TAGS["labels"]])
api_v1_router.include_router(case_packs_router, tags=[API_TAGS["case_packs"]])
api_v1_router.include_router(autosplit_router, tags=[API_TAGS["autosplit"]])


@api_v1_router.get("/",
                   summary="API v1 Information",
                   tags=["API Info"])
async def api_v1_info() -> dict:
    return {
        **get_api_info(),
        "modules": [get_module_info()],
        "documentation": {
            "openapi_schema": "/openapi.json",
            "swagger_ui": "/docs",
            "redoc": "/redoc",
        },
    }
