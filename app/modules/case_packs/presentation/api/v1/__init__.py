"""
Case-pack API version 1 routers.
"""

from .autosplit import autosplit_router
from .case_packs import case_packs_router
from .labels import labels_router

__all__ = [
    "autosplit_router",
    "case_packs_router",
    "labels_router",
]
