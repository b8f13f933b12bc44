# 📄 File: app/modules/case_packs/application/commands/upsert_case_pack.py
# 🧭 Purpose (Layman Explanation):
# The "record a case pack" request: which product case it is, how many units it holds, how heavy
# it is, and where that information came from.
# 🧪 Purpose (Technical Summary):
# CQRS command for upserting a trade item by case GTIN and appending a case-pack observation.
# 🔗 Dependencies:
# pydantic, domain models (PackSource)
# 🔄 Connected Modules / Calls From:
# presentation.api.v1.case_packs, handlers.command_handlers.UpsertCasePackCommandHandler

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ...domain.models.case_pack import DEFAULT_CONFIDENCE, DEFAULT_UOM, PackSource


class UpsertCasePackCommand(BaseModel):
    """
    Record a case pack for a case GTIN.

    Trade item fields left as None do not overwrite stored values.
    """
    model_config = ConfigDict(frozen=True)

    gtin_case: str = Field(..., min_length=8)
    source: PackSource
    units_per_case: Optional[int] = Field(default=None, gt=0)
    case_net_weight: Optional[float] = Field(default=None, gt=0)
    case_uom: str = DEFAULT_UOM
    confidence: float = Field(default=DEFAULT_CONFIDENCE, ge=0, le=1)
    evidence_url: Optional[str] = None

    gtin_each: Optional[str] = None
    category: Optional[str] = None
    unit_net: Optional[float] = Field(default=None, gt=0)
    unit_uom: Optional[str] = None
