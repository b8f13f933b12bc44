# 📄 File: app/modules/case_packs/domain/models/case_pack.py
# 🧭 Purpose (Layman Explanation):
# Describes what we know about a product and its shipping case: the barcodes, how many units
# fit in a case, how heavy a full case is, and where that information came from.
# 🧪 Purpose (Technical Summary):
# Domain models for case packs (with their trade item fields), commodity default packs and resolved case weights,
# plus the enumerations of pack evidence sources and weight-resolution sources.
# 🔗 Dependencies:
# pydantic, datetime, typing, enum
# 🔄 Connected Modules / Calls From:
# case_pack_repository (interface), repository implementation, case weight resolver, handlers

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PackSource(str, Enum):
    """Where a case-pack record's figures came from."""
    GDSN = "GDSN"
    DISTRIBUTOR = "DISTRIBUTOR"
    ORG_PHOTO = "ORG_PHOTO"
    HEURISTIC = "HEURISTIC"


class WeightSource(str, Enum):
    """Which resolution tier produced a case weight."""
    GDSN = "GDSN"
    DISTRIBUTOR = "DISTRIBUTOR"
    ORG_PHOTO = "ORG_PHOTO"
    COMMODITYPACK = "COMMODITYPACK"
    HEURISTIC = "HEURISTIC"


DEFAULT_UOM = "lb"
DEFAULT_CONFIDENCE = 0.9


class CasePack(BaseModel):
    """
    One observation of a trade item's case configuration.

    Several packs may exist per trade item; the highest-confidence,
    newest one wins during weight resolution.
    """
    model_config = ConfigDict(from_attributes=True, use_enum_values=True)

    id: int
    trade_item_id: int
    units_per_case: Optional[int] = Field(default=None, gt=0)
    case_net_weight: Optional[float] = None
    case_uom: Optional[str] = DEFAULT_UOM
    source: PackSource
    confidence: Optional[float] = Field(default=DEFAULT_CONFIDENCE, ge=0, le=1)
    evidence_url: Optional[str] = None
    created_at: Optional[datetime] = None


class CasePackDetails(CasePack):
    """A case pack joined with the identifying fields of its trade item."""
    gtin_each: Optional[str] = None
    gtin_case: Optional[str] = None
    category: Optional[str] = None
    unit_net: Optional[float] = None
    unit_uom: Optional[str] = None


class CommodityPack(BaseModel):
    """Default case weight for a commodity, optionally scoped to a region."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    commodity_code: str
    default_case_weight: Optional[float] = None
    uom: Optional[str] = DEFAULT_UOM
    region_code: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None


class CaseWeight(BaseModel):
    """Outcome of case-weight resolution."""
    model_config = ConfigDict(use_enum_values=True)

    case_weight: float
    uom: str
    source: WeightSource
