# 📄 File: app/modules/case_packs/presentation/api/schemas/case_pack_schemas.py
# 🧭 Purpose (Layman Explanation):
# Describes the shape of requests and answers for recording case packs, setting commodity
# defaults, listing what we know about a case barcode and looking up a case's weight.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for the case-pack catalog and case-weight resolution
# endpoints, with conversion helpers to application commands and from domain models.
#
# 🔗 Dependencies:
# pydantic (AnyUrl for evidence links), application commands, domain models
#
# 🔄 Connected Modules / Calls From:
# presentation.api.v1.case_packs

from datetime import datetime
from typing import List, Optional

from pydantic import AnyUrl, BaseModel, ConfigDict, Field

from ....application.commands.upsert_case_pack import UpsertCasePackCommand
from ....application.commands.upsert_commodity_pack import UpsertCommodityPackCommand
from ....domain.models.case_pack import (
    DEFAULT_CONFIDENCE,
    DEFAULT_UOM,
    CasePack,
    CasePackDetails,
    CaseWeight,
    CommodityPack,
    PackSource,
)


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class UpsertCasePackRequest(BaseModel):
    """
    Record a case pack for a case GTIN.

    Trade item fields (gtin_each, category, unit_net, unit_uom) that are
    omitted keep whatever is already stored for the GTIN.
    """
    gtin_case: str = Field(..., min_length=8, description="Case-level GTIN")
    gtin_each: Optional[str] = Field(default=None, description="Each-level GTIN")
    category: Optional[str] = None
    units_per_case: Optional[int] = Field(default=None, gt=0)
    case_net_weight: Optional[float] = Field(default=None, gt=0)
    case_uom: Optional[str] = DEFAULT_UOM
    source: PackSource
    confidence: Optional[float] = Field(default=DEFAULT_CONFIDENCE, ge=0, le=1)
    evidence_url: Optional[AnyUrl] = None
    unit_net: Optional[float] = Field(default=None, gt=0)
    unit_uom: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "gtin_case": "10812345678908",
                "category": "APPLES",
                "units_per_case": 12,
                "case_net_weight": 40,
                "case_uom": "lb",
                "source": "DISTRIBUTOR",
                "confidence": 0.95,
            }
        }
    )

    def to_command(self) -> UpsertCasePackCommand:
        return UpsertCasePackCommand(
            gtin_case=self.gtin_case,
            gtin_each=self.gtin_each,
            category=self.category,
            units_per_case=self.units_per_case,
            case_net_weight=self.case_net_weight,
            case_uom=self.case_uom or DEFAULT_UOM,
            source=self.source,
            confidence=DEFAULT_CONFIDENCE if self.confidence is None else self.confidence,
            evidence_url=str(self.evidence_url) if self.evidence_url else None,
            unit_net=self.unit_net,
            unit_uom=self.unit_uom,
        )


class UpsertCommodityPackRequest(BaseModel):
    """Default case weight for a commodity code, optionally scoped to a region."""
    commodity_code: str = Field(..., min_length=1)
    default_case_weight: float = Field(..., gt=0)
    uom: Optional[str] = DEFAULT_UOM
    region_code: Optional[str] = None
    notes: Optional[str] = None

    def to_command(self) -> UpsertCommodityPackCommand:
        return UpsertCommodityPackCommand(
            commodity_code=self.commodity_code,
            default_case_weight=self.default_case_weight,
            uom=self.uom or DEFAULT_UOM,
            region_code=self.region_code or None,
            notes=self.notes,
        )


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class CasePackResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    trade_item_id: int
    units_per_case: Optional[int] = None
    case_net_weight: Optional[float] = None
    case_uom: Optional[str] = None
    source: PackSource
    confidence: Optional[float] = None
    evidence_url: Optional[str] = None
    created_at: Optional[datetime] = None


class CasePackItemResponse(CasePackResponse):
    """A case pack joined with its trade item fields."""
    gtin_each: Optional[str] = None
    gtin_case: Optional[str] = None
    category: Optional[str] = None
    unit_net: Optional[float] = None
    unit_uom: Optional[str] = None


class CasePackListResponse(BaseModel):
    items: List[CasePackItemResponse]

    @classmethod
    def from_domain(cls, packs: List[CasePackDetails]) -> "CasePackListResponse":
        return cls(items=[CasePackItemResponse.model_validate(p) for p in packs])


class UpsertCasePackResponse(BaseModel):
    ok: bool = True
    case_pack: CasePackResponse

    @classmethod
    def from_domain(cls, pack: CasePack) -> "UpsertCasePackResponse":
        return cls(case_pack=CasePackResponse.model_validate(pack))


class CommodityPackResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    commodity_code: str
    default_case_weight: Optional[float] = None
    uom: Optional[str] = None
    region_code: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None


class UpsertCommodityPackResponse(BaseModel):
    ok: bool = True
    commodity_pack: CommodityPackResponse

    @classmethod
    def from_domain(cls, commodity: CommodityPack) -> "UpsertCommodityPackResponse":
        return cls(commodity_pack=CommodityPackResponse.model_validate(commodity))


class CaseWeightResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    case_weight: float = Field(..., alias="caseWeight")
    uom: str
    source: str

    @classmethod
    def from_domain(cls, weight: CaseWeight) -> "CaseWeightResponse":
        return cls(case_weight=weight.case_weight, uom=weight.uom, source=str(weight.source))


class ErrorMessage(BaseModel):
    """Flat error body used by the catalog endpoints."""
    error: str
