# 📄 File: app/modules/case_packs/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Hands each API request the database helper and request processors it needs.
# 🧪 Purpose (Technical Summary):
# FastAPI dependency providers wiring the SQLAlchemy repository (per-request session) into the
# command/query handlers and the case-weight resolver. Tests override get_case_pack_repository.
# 🔗 Dependencies:
# FastAPI Depends, SQLAlchemy AsyncSession, shared session dependency and settings
# 🔄 Connected Modules / Calls From:
# presentation.api.v1.case_packs, tests (dependency_overrides)

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.config.settings import Settings, get_settings
from app.shared.infrastructure.database.session import get_db_session

from ..application.handlers.command_handlers import (
    UpsertCasePackCommandHandler,
    UpsertCommodityPackCommandHandler,
)
from ..application.handlers.query_handlers import (
    GetCasePacksQueryHandler,
    ResolveCaseWeightQueryHandler,
)
from ..domain.repositories.case_pack_repository import CasePackRepository
from ..domain.services.case_weight_resolver import CaseWeightResolver
from ..infrastructure.database.case_pack_repository_impl import CasePackRepositoryImpl


def get_case_pack_repository(
    session: AsyncSession = Depends(get_db_session),
) -> CasePackRepository:
    return CasePackRepositoryImpl(session)


def get_case_weight_resolver(
    repository: CasePackRepository = Depends(get_case_pack_repository),
    settings: Settings = Depends(get_settings),
) -> CaseWeightResolver:
    return CaseWeightResolver(
        repository,
        heuristic_units_per_case=settings.HEURISTIC_UNITS_PER_CASE,
        default_uom=settings.DEFAULT_UOM,
    )


def get_case_packs_handler(
    repository: CasePackRepository = Depends(get_case_pack_repository),
) -> GetCasePacksQueryHandler:
    return GetCasePacksQueryHandler(repository)


def get_resolve_case_weight_handler(
    resolver: CaseWeightResolver = Depends(get_case_weight_resolver),
) -> ResolveCaseWeightQueryHandler:
    return ResolveCaseWeightQueryHandler(resolver)


def get_upsert_case_pack_handler(
    repository: CasePackRepository = Depends(get_case_pack_repository),
) -> UpsertCasePackCommandHandler:
    return UpsertCasePackCommandHandler(repository)


def get_upsert_commodity_pack_handler(
    repository: CasePackRepository = Depends(get_case_pack_repository),
) -> UpsertCommodityPackCommandHandler:
    return UpsertCommodityPackCommandHandler(repository)
