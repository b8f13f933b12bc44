# 📄 File: app/modules/case_packs/presentation/api/schemas/label_schemas.py
# 🧭 Purpose (Layman Explanation):
# Describes what a "read this label" request and its answer look like over HTTP.
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for POST /parse-label with camelCase response keys.
# 🔗 Dependencies:
# pydantic, domain ParsedLabel
# 🔄 Connected Modules / Calls From:
# presentation.api.v1.labels

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ....domain.models.label import ParsedLabel

MAX_LABEL_TEXT_LENGTH = 512


class ParseLabelRequest(BaseModel):
    """Human-readable GS1-128 text to parse."""
    text: str = Field(
        ...,
        min_length=3,
        max_length=MAX_LABEL_TEXT_LENGTH,
        description="Label text, e.g. (01)10812345678908(37)12",
    )

    model_config = ConfigDict(
        json_schema_extra={"example": {"text": "(01)10812345678908(37)12(3102)018144"}}
    )


class ParseLabelResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    gtin_case: Optional[str] = Field(default=None, alias="gtinCase")
    units_per_case: Optional[int] = Field(default=None, alias="unitsPerCase")
    case_kg: Optional[float] = Field(default=None, alias="caseKg")
    gtin_valid: Optional[bool] = Field(default=None, alias="gtinValid")

    @classmethod
    def from_domain(cls, parsed: ParsedLabel) -> "ParseLabelResponse":
        return cls(**parsed.model_dump())
