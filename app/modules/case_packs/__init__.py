# 📄 File: app/modules/case_packs/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes everything about cases of food: reading the barcode label on a case, remembering how
# much a case holds, guessing a case's weight, and working out how to split a case into shares.
# 🧪 Purpose (Technical Summary):
# Package initialization for the case-pack module, laid out in domain / application /
# infrastructure / presentation layers.
# 🔗 Dependencies:
# FastAPI, SQLAlchemy, pydantic, app.shared
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, migrations/env.py

"""
Case Pack Module

- Domain: label parsing, auto-split arithmetic, case-weight resolution
- Application: commands, queries and their handlers
- Infrastructure: Postgres persistence (trade_item, case_pack, commodity_pack)
- Presentation: API endpoints and request/response schemas
"""

from typing import Dict

__version__ = "1.0.0"
__module_name__ = "case_packs"
__description__ = "Case label parsing, case-pack catalog and auto-split"


def get_module_info() -> Dict[str, str]:
    """
    Get basic module information.
    """
    return {
        "name": __module_name__,
        "version": __version__,
        "description": __description__
    }


__all__ = [
    "__version__",
    "__module_name__",
    "__description__",
    "get_module_info",
]
