"""
Tests for the SQLAlchemy case-pack repository.

The repository runs against a recording session; every statement it issues
is compiled with the PostgreSQL dialect so the upsert, ranking and ordering
clauses can be checked without a database.
"""

from datetime import datetime, timezone
from decimal import Decimal
from itertools import count

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import IntegrityError, OperationalError

from app.modules.case_packs.domain.models.case_pack import PackSource
from app.modules.case_packs.infrastructure.database.case_pack_repository_impl import (
    CasePackRepositoryImpl,
)
from app.modules.case_packs.infrastructure.database.models import (
    CasePackModel,
    CommodityPackModel,
    TradeItemModel,
)
from app.shared.core.exceptions import DatabaseError, DatabaseUnavailableError

GTIN = "10812345678908"
CREATED = datetime(2025, 1, 1, tzinfo=timezone.utc)


class StubResult:
    def __init__(self, rows=(), scalar=None):
        self._rows = list(rows)
        self._scalar = scalar

    def all(self):
        return list(self._rows)

    def scalars(self):
        return self

    def first(self):
        return self._rows[0] if self._rows else None

    def scalar_one(self):
        return self._scalar


class RecordingSession:
    """Stands in for AsyncSession: records statements and answers from a queue."""

    def __init__(self, *results, error=None):
        self.statements = []
        self.added = []
        self.rolled_back = False
        self._results = list(results)
        self._error = error
        self._ids = count(1)

    async def execute(self, statement):
        self.statements.append(statement)
        if self._error is not None:
            raise self._error
        return self._results.pop(0) if self._results else StubResult()

    def add(self, obj):
        self.added.append(obj)

    async def flush(self):
        pass

    async def refresh(self, obj):
        if obj.id is None:
            obj.id = next(self._ids)
        if obj.created_at is None:
            obj.created_at = CREATED

    async def rollback(self):
        self.rolled_back = True


def _sql(statement, literal=False) -> str:
    compile_kwargs = {"literal_binds": True} if literal else {}
    compiled = statement.compile(dialect=postgresql.dialect(), compile_kwargs=compile_kwargs)
    return " ".join(str(compiled).split())


def _unparenthesised(sql: str) -> str:
    return sql.replace("(", "").replace(")", "")


# =============================================================================
# CASE PACK UPSERT
# =============================================================================

class TestSaveCasePack:

    @pytest.mark.asyncio
    async def test_trade_item_upsert_keeps_omitted_fields(self):
        session = RecordingSession(StubResult(scalar=7))
        repository = CasePackRepositoryImpl(session)

        await repository.save_case_pack(gtin_case=GTIN, source=PackSource.GDSN, units_per_case=12)

        sql = _sql(session.statements[0])
        assert sql.startswith("INSERT INTO trade_item")
        assert "ON CONFLICT (gtin_case) DO UPDATE SET" in sql
        for column in ("gtin_each", "category", "unit_net", "unit_uom"):
            assert f"{column} = coalesce(excluded.{column}, trade_item.{column})" in sql
        assert "updated_at = now()" in sql
        assert sql.endswith("RETURNING trade_item.id")

    @pytest.mark.asyncio
    async def test_empty_strings_are_sent_as_null(self):
        session = RecordingSession(StubResult(scalar=7))
        repository = CasePackRepositoryImpl(session)

        await repository.save_case_pack(
            gtin_case=GTIN, source=PackSource.GDSN, gtin_each="", category="", unit_uom="",
        )

        params = session.statements[0].compile(dialect=postgresql.dialect()).params
        assert params["gtin_case"] == GTIN
        assert params["gtin_each"] is None
        assert params["category"] is None
        assert params["unit_uom"] is None

    @pytest.mark.asyncio
    async def test_case_pack_row_uses_trade_item_id_and_defaults(self):
        session = RecordingSession(StubResult(scalar=7))
        repository = CasePackRepositoryImpl(session)

        pack = await repository.save_case_pack(
            gtin_case=GTIN, source="DISTRIBUTOR", case_net_weight=40.0,
        )

        added = session.added[0]
        assert isinstance(added, CasePackModel)
        assert added.trade_item_id == 7
        assert added.source is PackSource.DISTRIBUTOR
        assert added.case_uom == "lb"
        assert added.confidence == 0.9
        assert pack.trade_item_id == 7
        assert pack.case_net_weight == 40.0

    @pytest.mark.asyncio
    async def test_statement_failure_rolls_back(self):
        error = IntegrityError("INSERT INTO trade_item", {}, Exception("duplicate key"))
        session = RecordingSession(error=error)
        repository = CasePackRepositoryImpl(session)

        with pytest.raises(DatabaseError) as exc_info:
            await repository.save_case_pack(gtin_case=GTIN, source=PackSource.GDSN)

        assert session.rolled_back
        assert exc_info.value.details["table"] == "case_pack"

    @pytest.mark.asyncio
    async def test_connection_failure_is_unavailable(self):
        error = OperationalError("INSERT INTO trade_item", {}, ConnectionRefusedError("refused"))
        session = RecordingSession(error=error)
        repository = CasePackRepositoryImpl(session)

        with pytest.raises(DatabaseUnavailableError):
            await repository.save_case_pack(gtin_case=GTIN, source=PackSource.GDSN)

        assert session.rolled_back


# =============================================================================
# CASE PACK READS
# =============================================================================

class TestCasePackReads:

    @pytest.mark.asyncio
    async def test_best_pack_order(self):
        session = RecordingSession()
        repository = CasePackRepositoryImpl(session)

        assert await repository.get_best_case_pack(GTIN) is None

        sql = _sql(session.statements[0])
        assert "JOIN trade_item ON case_pack.trade_item_id = trade_item.id" in sql
        assert "ORDER BY case_pack.confidence DESC NULLS LAST, case_pack.created_at DESC" in sql
        assert "LIMIT" in sql

    @pytest.mark.asyncio
    async def test_list_is_newest_first_and_maps_numbers(self):
        item = TradeItemModel(
            id=7, gtin_case=GTIN, gtin_each=None, category="APPLES",
            unit_net=Decimal("2.5000"), unit_uom="lb",
        )
        pack = CasePackModel(
            id=3, trade_item_id=7, units_per_case=12, case_net_weight=Decimal("40.0000"),
            case_uom="lb", source=PackSource.GDSN, confidence=Decimal("0.95"),
            evidence_url=None, created_at=CREATED,
        )
        session = RecordingSession(StubResult(rows=[(pack, item)]))
        repository = CasePackRepositoryImpl(session)

        packs = await repository.list_case_packs(GTIN)

        sql = _sql(session.statements[0])
        assert "ORDER BY case_pack.created_at DESC, case_pack.id DESC" in sql
        assert packs[0].case_net_weight == 40.0
        assert packs[0].confidence == 0.95
        assert packs[0].unit_net == 2.5
        assert packs[0].category == "APPLES"
        assert packs[0].source == "GDSN"


# =============================================================================
# COMMODITY PACKS
# =============================================================================

class TestCommodityPacks:

    @pytest.mark.asyncio
    async def test_region_lookup_ranks_match_then_default(self):
        session = RecordingSession()
        repository = CasePackRepositoryImpl(session)

        await repository.get_commodity_pack("ONIONS", "EU")

        sql = _unparenthesised(_sql(session.statements[0], literal=True))
        assert "commodity_pack.commodity_code = 'ONIONS'" in sql
        assert (
            "ORDER BY CASE WHEN commodity_pack.region_code = 'EU' THEN 0 "
            "WHEN commodity_pack.region_code IS NULL THEN 1 ELSE 2 END, "
            "commodity_pack.created_at DESC"
        ) in sql

    @pytest.mark.asyncio
    async def test_lookup_without_region_is_newest_first(self):
        session = RecordingSession()
        repository = CasePackRepositoryImpl(session)

        await repository.get_commodity_pack("ONIONS")

        sql = _sql(session.statements[0], literal=True)
        assert "CASE" not in sql
        assert "ORDER BY commodity_pack.created_at DESC" in sql

    @pytest.mark.asyncio
    async def test_upsert_inserts_when_missing(self):
        session = RecordingSession(StubResult())
        repository = CasePackRepositoryImpl(session)

        commodity = await repository.save_commodity_pack(commodity_code="PEARS", default_case_weight=44.0)

        sql = _sql(session.statements[0], literal=True)
        assert "commodity_pack.region_code IS NULL" in sql
        assert len(session.added) == 1
        assert commodity.uom == "lb"
        assert commodity.default_case_weight == 44.0

    @pytest.mark.asyncio
    async def test_upsert_updates_existing_row(self):
        existing = CommodityPackModel(
            id=5, commodity_code="PEARS", default_case_weight=Decimal("40"), uom="lb",
            region_code="EU", created_at=CREATED,
        )
        session = RecordingSession(StubResult(rows=[existing]))
        repository = CasePackRepositoryImpl(session)

        commodity = await repository.save_commodity_pack(
            commodity_code="PEARS", default_case_weight=20.0, uom="kg", region_code="EU",
        )

        sql = _sql(session.statements[0], literal=True)
        assert "commodity_pack.region_code = 'EU'" in sql
        assert session.added == []
        assert commodity.id == 5
        assert (commodity.default_case_weight, commodity.uom) == (20.0, "kg")
