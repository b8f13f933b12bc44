# 📄 File: app/modules/case_packs/domain/repositories/case_pack_repository.py
# 🧭 Purpose (Layman Explanation):
# Lists everything the service needs to ask of its database about products, cases and commodity
# defaults, without saying which database is actually used.
# 🧪 Purpose (Technical Summary):
# Repository interface for trade items, case packs and commodity packs, following the
# Repository pattern so the domain and handlers depend on an abstraction.
# 🔗 Dependencies:
# Domain models (CasePack, CasePackDetails, CommodityPack, PackSource), typing, abc
# 🔄 Connected Modules / Calls From:
# Case weight resolver, application handlers, SQLAlchemy implementation, test fakes

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.case_pack import CasePack, CasePackDetails, CommodityPack, PackSource


class CasePackRepository(ABC):
    """
    Repository interface for case-pack data access.

    Implementation Notes:
    - Methods return domain models, not database rows
    - Each write method is atomic: it either fully applies or leaves no trace
    - Failures surface as FreshShareException subclasses (DatabaseError, RepositoryError)
    """

    @abstractmethod
    async def list_case_packs(self, gtin_case: str) -> List[CasePackDetails]:
        """
        List every case pack recorded for a case GTIN.

        Args:
            gtin_case: Case-level GTIN

        Returns:
            Packs joined with their trade item fields, newest first
        """
        pass

    @abstractmethod
    async def get_best_case_pack(self, gtin_case: str) -> Optional[CasePack]:
        """
        Get the most trustworthy case pack for a case GTIN.

        Ordering is confidence descending, then creation time descending.

        Args:
            gtin_case: Case-level GTIN

        Returns:
            CasePack if any exists, None otherwise
        """
        pass

    @abstractmethod
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
        """
        Upsert the trade item for gtin_case and append a new case pack to it.

        Trade item fields given as None keep their stored value. Both writes
        happen in one transaction.

        Returns:
            The newly inserted CasePack

        Raises:
            DatabaseError: If either write fails
        """
        pass

    @abstractmethod
    async def save_commodity_pack(
        self,
        *,
        commodity_code: str,
        default_case_weight: float,
        uom: Optional[str] = None,
        region_code: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> CommodityPack:
        """
        Create or replace the commodity pack for (commodity_code, region_code).

        Returns:
            The stored CommodityPack
        """
        pass

    @abstractmethod
    async def get_commodity_pack(
        self, commodity_code: str, region_code: Optional[str] = None
    ) -> Optional[CommodityPack]:
        """
        Find the commodity pack for a commodity code.

        With a region, a pack for that region is preferred over the
        region-less default. Ties go to the newest record.
        """
        pass
