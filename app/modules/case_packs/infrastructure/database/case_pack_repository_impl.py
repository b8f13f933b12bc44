# 📄 File: app/modules/case_packs/infrastructure/database/case_pack_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Does the actual reading and writing of products, case packs and commodity defaults in the
# Postgres database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy async implementation of CasePackRepository. Uses a Postgres
# INSERT ... ON CONFLICT for the trade item upsert, maps ORM rows to domain models and
# translates SQLAlchemy failures into the shared exception hierarchy.
#
# 🔗 Dependencies:
# - SQLAlchemy async session, PostgreSQL dialect insert
# - Domain models and repository interface
# - app.shared.core.exceptions, app.shared.infrastructure.database.session
#
# 🔄 Connected Modules / Calls From:
# - app.modules.case_packs.presentation.dependencies (repository wiring)

from decimal import Decimal
from typing import List, NoReturn, Optional

from sqlalchemy import case, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import func

from app.shared.core.exceptions import DatabaseError, DatabaseUnavailableError
from app.shared.infrastructure.database.session import is_connectivity_error
from app.shared.utils.logging import get_logger

from ...domain.models.case_pack import (
    DEFAULT_CONFIDENCE,
    DEFAULT_UOM,
    CasePack,
    CasePackDetails,
    CommodityPack,
    PackSource,
)
from ...domain.repositories.case_pack_repository import CasePackRepository
from .models import CasePackModel, CommodityPackModel, TradeItemModel

logger = get_logger(__name__)


def _to_float(value) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, Decimal):
        return float(value)
    return value


class CasePackRepositoryImpl(CasePackRepository):
    """
    SQLAlchemy implementation of the case-pack repository.

    Writes are flushed, not committed: the session owner commits once
    the request finishes, so save_case_pack's two statements share a
    transaction. A failed write rolls the session back before raising.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    # =========================================================================
    # MAPPING
    # =========================================================================

    @staticmethod
    def _case_pack_fields(model: CasePackModel) -> dict:
        return {
            "id": model.id,
            "trade_item_id": model.trade_item_id,
            "units_per_case": model.units_per_case,
            "case_net_weight": _to_float(model.case_net_weight),
            "case_uom": model.case_uom,
            "source": model.source,
            "confidence": _to_float(model.confidence),
            "evidence_url": model.evidence_url,
            "created_at": model.created_at,
        }

    def _to_case_pack(self, model: CasePackModel) -> CasePack:
        return CasePack(**self._case_pack_fields(model))

    def _to_details(self, model: CasePackModel, item: TradeItemModel) -> CasePackDetails:
        return CasePackDetails(
            **self._case_pack_fields(model),
            gtin_each=item.gtin_each,
            gtin_case=item.gtin_case,
            category=item.category,
            unit_net=_to_float(item.unit_net),
            unit_uom=item.unit_uom,
        )

    @staticmethod
    def _to_commodity(model: CommodityPackModel) -> CommodityPack:
        return CommodityPack(
            id=model.id,
            commodity_code=model.commodity_code,
            default_case_weight=_to_float(model.default_case_weight),
            uom=model.uom,
            region_code=model.region_code,
            notes=model.notes,
            created_at=model.created_at,
        )

    @staticmethod
    def _raise(e: SQLAlchemyError, operation: str, table: str) -> NoReturn:
        if is_connectivity_error(e):
            raise DatabaseUnavailableError(details={"operation": operation, "error": str(e)}) from e
        logger.error("Case pack repository failure", operation=operation, table=table, error=str(e))
        raise DatabaseError(f"Failed to {operation}: {e}", operation=operation, table=table) from e

    # =========================================================================
    # CASE PACKS
    # =========================================================================

    async def list_case_packs(self, gtin_case: str) -> List[CasePackDetails]:
        stmt = (
            select(CasePackModel, TradeItemModel)
            .join(TradeItemModel, CasePackModel.trade_item_id == TradeItemModel.id)
            .where(TradeItemModel.gtin_case == gtin_case)
            .order_by(CasePackModel.created_at.desc(), CasePackModel.id.desc())
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            self._raise(e, "list case packs", "case_pack")

        return [self._to_details(pack, item) for pack, item in result.all()]

    async def get_best_case_pack(self, gtin_case: str) -> Optional[CasePack]:
        stmt = (
            select(CasePackModel)
            .join(TradeItemModel, CasePackModel.trade_item_id == TradeItemModel.id)
            .where(TradeItemModel.gtin_case == gtin_case)
            .order_by(
                CasePackModel.confidence.desc().nulls_last(),
                CasePackModel.created_at.desc(),
            )
            .limit(1)
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            self._raise(e, "get best case pack", "case_pack")

        model = result.scalars().first()
        return self._to_case_pack(model) if model else None

    async def save_case_pack(
        self,
        *,
        gtin_case: str,
        source: PackSource,
        units_per_case: Optional[int] = None,
        case_net_weight: Optional[float] = None,
        gtin_each: Optional[str] = None,
        category: Optional[str] = None,
        unit_net: Optional[float] = None,
        unit_uom: Optional[str] = None,
        case_uom: Optional[str] = None,
        confidence: Optional[float] = None,
        evidence_url: Optional[str] = None,
    ) -> CasePack:
        insert_stmt = pg_insert(TradeItemModel).values(
            gtin_each=gtin_each or None,
            gtin_case=gtin_case,
            category=category or None,
            unit_net=unit_net,
            unit_uom=unit_uom or None,
        )
        # Omitted fields keep the stored value
        upsert_stmt = insert_stmt.on_conflict_do_update(
            index_elements=[TradeItemModel.gtin_case],
            set_={
                "gtin_each": func.coalesce(insert_stmt.excluded.gtin_each, TradeItemModel.gtin_each),
                "category": func.coalesce(insert_stmt.excluded.category, TradeItemModel.category),
                "unit_net": func.coalesce(insert_stmt.excluded.unit_net, TradeItemModel.unit_net),
                "unit_uom": func.coalesce(insert_stmt.excluded.unit_uom, TradeItemModel.unit_uom),
                "updated_at": func.now(),
            },
        ).returning(TradeItemModel.id)

        try:
            trade_item_id = (await self._session.execute(upsert_stmt)).scalar_one()

            pack = CasePackModel(
                trade_item_id=trade_item_id,
                units_per_case=units_per_case,
                case_net_weight=case_net_weight,
                case_uom=case_uom or DEFAULT_UOM,
                source=PackSource(source),
                confidence=DEFAULT_CONFIDENCE if confidence is None else confidence,
                evidence_url=evidence_url or None,
            )
            self._session.add(pack)
            await self._session.flush()
            await self._session.refresh(pack)
        except SQLAlchemyError as e:
            await self._session.rollback()
            self._raise(e, "upsert case pack", "case_pack")

        logger.debug("Case pack saved", gtin_case=gtin_case, trade_item_id=trade_item_id, case_pack_id=pack.id)
        return self._to_case_pack(pack)

    # =========================================================================
    # COMMODITY PACKS
    # =========================================================================

    async def save_commodity_pack(
        self,
        *,
        commodity_code: str,
        default_case_weight: float,
        uom: Optional[str] = None,
        region_code: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> CommodityPack:
        region_filter = (
            CommodityPackModel.region_code.is_(None)
            if region_code is None
            else CommodityPackModel.region_code == region_code
        )
        stmt = select(CommodityPackModel).where(
            CommodityPackModel.commodity_code == commodity_code,
            region_filter,
        )

        try:
            model = (await self._session.execute(stmt)).scalars().first()
            if model is None:
                model = CommodityPackModel(commodity_code=commodity_code, region_code=region_code)
                self._session.add(model)

            model.default_case_weight = default_case_weight
            model.uom = uom or DEFAULT_UOM
            model.notes = notes
            await self._session.flush()
            await self._session.refresh(model)
        except SQLAlchemyError as e:
            await self._session.rollback()
            self._raise(e, "upsert commodity pack", "commodity_pack")

        return self._to_commodity(model)

    async def get_commodity_pack(
        self, commodity_code: str, region_code: Optional[str] = None
    ) -> Optional[CommodityPack]:
        stmt = select(CommodityPackModel).where(CommodityPackModel.commodity_code == commodity_code)

        if region_code:
            region_rank = case(
                (CommodityPackModel.region_code == region_code, 0),
                (CommodityPackModel.region_code.is_(None), 1),
                else_=2,
            )
            stmt = stmt.order_by(region_rank, CommodityPackModel.created_at.desc())
        else:
            stmt = stmt.order_by(CommodityPackModel.created_at.desc())

        try:
            result = await self._session.execute(stmt.limit(1))
        except SQLAlchemyError as e:
            self._raise(e, "get commodity pack", "commodity_pack")

        model = result.scalars().first()
        return self._to_commodity(model) if model else None
