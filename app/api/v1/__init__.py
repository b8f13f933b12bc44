# 📄 File: app/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes version 1 of the pack service's web addresses.
# 🧪 Purpose (Technical Summary):
# API v1 package metadata and route table used by the info endpoints.
# 🔗 Dependencies:
# typing
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, app.main

"""
FreshShare Pack Service API Version 1

Structure:
    v1/
    ├── __init__.py   # This file
    ├── router.py     # Aggregates module routers under /api/v1
    └── health.py     # Root-level health endpoints
"""

from typing import Any, Dict

__version__ = "1.0.0"
__api_version__ = "v1"
__status__ = "stable"

ROUTES = {
    "parse_label": "POST /api/v1/parse-label",
    "list_case_packs": "GET /api/v1/case-pack?gtin_case=",
    "upsert_case_pack": "POST /api/v1/case-pack",
    "upsert_commodity_pack": "POST /api/v1/commodity-pack",
    "resolve_case_weight": "GET /api/v1/resolve/case-weight",
    "autosplit": "POST /api/v1/autosplit",
}

HEALTH_ROUTES = {
    "health": "/health",
    "liveness": "/health/live",
    "readiness": "/health/ready",
    "detailed": "/health/detailed",
}

API_TAGS = {
    "labels": "Labels",
    "case_packs": "Case Packs",
    "autosplit": "Auto-split",
    "health": "Health Check",
}


def get_api_info() -> Dict[str, Any]:
    """API v1 version information and route table."""
    return {
        "version": __version__,
        "api_version": __api_version__,
        "status": __status__,
        "routes": dict(ROUTES),
        "health": dict(HEALTH_ROUTES),
    }


__all__ = [
    "API_TAGS",
    "HEALTH_ROUTES",
    "ROUTES",
    "get_api_info",
]
