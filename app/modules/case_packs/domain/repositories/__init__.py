"""
Repository interfaces for the case-pack module.
"""

from .case_pack_repository import CasePackRepository

__all__ = ["CasePackRepository"]
