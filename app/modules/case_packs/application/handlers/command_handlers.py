# 📄 File: app/modules/case_packs/application/handlers/command_handlers.py
# 🧭 Purpose (Layman Explanation):
# Carries out the "record a case pack" and "set a commodity default" requests by handing them to
# the database layer and reporting clearly when saving fails.
# 🧪 Purpose (Technical Summary):
# CQRS command handlers for case-pack catalog writes. Storage failures are logged and
# re-raised as RepositoryError so the API can answer with its fixed failure shape.
# 🔗 Dependencies:
# Application commands, CasePackRepository interface, shared exceptions and logging
# 🔄 Connected Modules / Calls From:
# presentation.api.v1.case_packs

__all__ = [
    "UpsertCasePackCommandHandler",
    "UpsertCommodityPackCommandHandler",
]

from app.shared.core.exceptions import DatabaseError, RepositoryError
from app.shared.utils.logging import get_logger

from ..commands.upsert_case_pack import UpsertCasePackCommand
from ..commands.upsert_commodity_pack import UpsertCommodityPackCommand
from ...domain.models.case_pack import CasePack, CommodityPack
from ...domain.repositories.case_pack_repository import CasePackRepository

logger = get_logger(__name__)

UPSERT_FAILED = "upsert failed"


class UpsertCasePackCommandHandler:
    """
    Upserts the trade item and appends a case pack in one transaction.
    """

    def __init__(self, repository: CasePackRepository):
        self._repository = repository

    async def handle(self, command: UpsertCasePackCommand) -> CasePack:
        try:
            pack = await self._repository.save_case_pack(**command.model_dump())
        except (DatabaseError, RepositoryError) as e:
            logger.error(
                "Case pack upsert failed",
                gtin_case=command.gtin_case,
                error=e.message,
                details=e.details,
            )
            raise RepositoryError(
                message=UPSERT_FAILED,
                repository="case_pack",
                operation="upsert",
            ) from e

        logger.info(
            "Case pack recorded",
            gtin_case=command.gtin_case,
            case_pack_id=pack.id,
            source=pack.source,
        )
        return pack


class UpsertCommodityPackCommandHandler:
    """Creates or replaces the commodity pack for (commodity_code, region_code)."""

    def __init__(self, repository: CasePackRepository):
        self._repository = repository

    async def handle(self, command: UpsertCommodityPackCommand) -> CommodityPack:
        try:
            commodity = await self._repository.save_commodity_pack(**command.model_dump())
        except (DatabaseError, RepositoryError) as e:
            logger.error(
                "Commodity pack upsert failed",
                commodity_code=command.commodity_code,
                region_code=command.region_code,
                error=e.message,
            )
            raise RepositoryError(
                message=UPSERT_FAILED,
                repository="commodity_pack",
                operation="upsert",
            ) from e

        logger.info(
            "Commodity pack recorded",
            commodity_code=commodity.commodity_code,
            region_code=commodity.region_code,
        )
        return commodity
