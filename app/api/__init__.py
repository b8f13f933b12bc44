# 📄 File: app/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# The front door of the pack service: the web addresses other apps call.
# 🧪 Purpose (Technical Summary):
# API package initialization with versioning constants shared by the routers and app factory.
# 🔗 Dependencies:
# None
# 🔄 Connected Modules / Calls From:
# app.main, app.api.v1.router

"""
FreshShare Pack Service API

Health endpoints live at the root; domain endpoints live under /api/v1.
"""

__version__ = "1.0.0"

API_PREFIX = "/api"
CURRENT_VERSION = "v1"
API_V1_PREFIX = f"{API_PREFIX}/{CURRENT_VERSION}"

__all__ = [
    "API_PREFIX",
    "CURRENT_VERSION",
    "API_V1_PREFIX",
]
