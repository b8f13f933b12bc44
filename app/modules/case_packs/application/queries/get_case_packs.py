# 📄 File: app/modules/case_packs/application/queries/get_case_packs.py
# 🧭 Purpose (Layman Explanation):
# The "show me every recorded case pack for this case barcode" request.
# 🧪 Purpose (Technical Summary):
# CQRS query listing case packs joined with trade item fields for a case GTIN.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# presentation.api.v1.case_packs, handlers.query_handlers.GetCasePacksQueryHandler

from pydantic import BaseModel, ConfigDict, Field


class GetCasePacksQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    gtin_case: str = Field(..., min_length=1)
