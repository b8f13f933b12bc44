# 📄 File: app/modules/case_packs/presentation/api/schemas/autosplit_schemas.py
# 🧭 Purpose (Layman Explanation):
# Describes what an auto-split request (case size, share size, pledges so far) and its answer
# look like over HTTP.
# 🧪 Purpose (Technical Summary):
# Pydantic schemas for POST /autosplit. The response keeps the wire names K, KDisplay,
# neededToFill and divisorOptions.
# 🔗 Dependencies:
# pydantic, domain AutoSplitResult
# 🔄 Connected Modules / Calls From:
# presentation.api.v1.autosplit

from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field

from ....domain.models.autosplit import AutoSplitResult


class AutoSplitRequest(BaseModel):
    case_size: float = Field(..., gt=0, description="Size of one case, e.g. 40 (lb)")
    share_size: float = Field(..., gt=0, description="Size of one share, e.g. 2 (lb)")
    current_pledged: int = Field(..., ge=0, description="Shares pledged so far")

    model_config = ConfigDict(
        json_schema_extra={"example": {"case_size": 40, "share_size": 2, "current_pledged": 13}}
    )


class SplitSuggestionResponse(BaseModel):
    buy: int
    completes: int


class AutoSplitResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    warn: str = ""
    k: Union[int, float] = Field(default=0, alias="K")
    k_display: str = Field(..., alias="KDisplay")
    needed_to_fill: Union[int, str] = Field(..., alias="neededToFill")
    divisor_options: List[int] = Field(default_factory=list, alias="divisorOptions")
    suggestions: List[SplitSuggestionResponse] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, result: AutoSplitResult) -> "AutoSplitResponse":
        return cls(**result.model_dump())
