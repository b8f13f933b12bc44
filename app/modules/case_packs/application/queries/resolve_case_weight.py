# 📄 File: app/modules/case_packs/application/queries/resolve_case_weight.py
# 🧭 Purpose (Layman Explanation):
# The "how heavy is one case?" request, with whatever we know about the product.
# 🧪 Purpose (Technical Summary):
# CQRS query carrying the optional inputs for three-tier case-weight resolution.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# presentation.api.v1.case_packs, handlers.query_handlers.ResolveCaseWeightQueryHandler

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ResolveCaseWeightQuery(BaseModel):
    """All inputs are optional; with none of them the heuristic tier answers."""
    model_config = ConfigDict(frozen=True)

    gtin_case: Optional[str] = None
    category: Optional[str] = None
    unit_net: Optional[float] = Field(default=None, gt=0)
    unit_uom: Optional[str] = None
    region: Optional[str] = None
