# 📄 File: app/modules/case_packs/application/commands/upsert_commodity_pack.py
# 🧭 Purpose (Layman Explanation):
# The "set the usual case weight for a commodity" request, e.g. a case of apples weighs 40 lb,
# optionally just for one region.
# 🧪 Purpose (Technical Summary):
# CQRS command for creating or replacing a commodity pack keyed by (commodity_code, region_code).
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# presentation.api.v1.case_packs, handlers.command_handlers.UpsertCommodityPackCommandHandler

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ...domain.models.case_pack import DEFAULT_UOM


class UpsertCommodityPackCommand(BaseModel):
    """Set the default case weight for a commodity code, optionally per region."""
    model_config = ConfigDict(frozen=True)

    commodity_code: str = Field(..., min_length=1)
    default_case_weight: float = Field(..., gt=0)
    uom: str = DEFAULT_UOM
    region_code: Optional[str] = None
    notes: Optional[str] = None
