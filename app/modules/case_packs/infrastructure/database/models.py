# 📄 File: app/modules/case_packs/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# Defines how products, their shipping cases and commodity default weights are stored in the
# database tables.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for trade_item, case_pack and commodity_pack, including the pack_source
# Postgres enum, the trade-item index on case_pack and the region-aware unique index on
# commodity_pack.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM (Column style) and PostgreSQL dialect
# - app.shared.config.database (DatabaseBase with naming conventions)
#
# 🔄 Connected Modules / Calls From:
# - case_pack_repository_impl.py (CRUD operations)
# - migrations/env.py (target metadata)

"""
SQLAlchemy Models for Case Packs

Models:
- TradeItemModel: A product identified by each-level and case-level GTINs
- CasePackModel: One observation of a trade item's case configuration
- CommodityPackModel: Default case weight per commodity, optionally per region
"""

from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    Column,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    Text,
    func,
)
from sqlalchemy.orm import relationship

from app.shared.config.database import DatabaseBase

from ...domain.models.case_pack import PackSource


PACK_SOURCE_ENUM = Enum(
    PackSource,
    name="pack_source",
    values_callable=lambda enum_cls: [member.value for member in enum_cls],
)

# Stands in for a NULL region in the commodity unique index
ANY_REGION = "__ANY__"


# =============================================================================
# TRADE ITEM
# =============================================================================

class TradeItemModel(DatabaseBase):
    """Trade item keyed by its case GTIN."""
    __tablename__ = "trade_item"

    id = Column(BigInteger, primary_key=True, autoincrement=True)
    gtin_each = Column(Text, unique=True, nullable=True)
    gtin_case = Column(Text, unique=True, nullable=True)
    category = Column(Text, nullable=True)
    unit_net = Column(Numeric(12, 4), nullable=True)
    unit_uom = Column(Text, server_default="lb")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now())

    case_packs = relationship(
        "CasePackModel",
        back_populates="trade_item",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<TradeItemModel(id={self.id}, gtin_case={self.gtin_case})>"


# =============================================================================
# CASE PACK
# =============================================================================

class CasePackModel(DatabaseBase):
    """Case configuration observed for a trade item."""
    __tablename__ = "case_pack"
    __table_args__ = (
        CheckConstraint("units_per_case > 0", name="units_per_case_positive"),
        Index("idx_case_pack_trade_item", "trade_item_id"),
    )

    id = Column(BigInteger, primary_key=True, autoincrement=True)
    trade_item_id = Column(
        BigInteger,
        ForeignKey("trade_item.id", ondelete="CASCADE"),
        nullable=True,
    )
    units_per_case = Column(Integer, nullable=True)
    case_net_weight = Column(Numeric(12, 4), nullable=True)
    case_uom = Column(Text, server_default="lb")
    source = Column(PACK_SOURCE_ENUM, nullable=False)
    confidence = Column(Numeric(3, 2), server_default="0.90")
    evidence_url = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    trade_item = relationship("TradeItemModel", back_populates="case_packs")

    def __repr__(self):
        return f"<CasePackModel(id={self.id}, trade_item_id={self.trade_item_id}, source={self.source})>"


# =============================================================================
# COMMODITY PACK
# =============================================================================

class CommodityPackModel(DatabaseBase):
    """Commodity default case weight, unique per (commodity_code, region_code)."""
    __tablename__ = "commodity_pack"

    id = Column(BigInteger, primary_key=True, autoincrement=True)
    commodity_code = Column(Text, nullable=True)
    default_case_weight = Column(Numeric(12, 4), nullable=True)
    uom = Column(Text, server_default="lb")
    region_code = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<CommodityPackModel(commodity_code={self.commodity_code}, region_code={self.region_code})>"


Index(
    "idx_commodity_region",
    CommodityPackModel.commodity_code,
    func.coalesce(CommodityPackModel.region_code, ANY_REGION),
    unique=True,
)
