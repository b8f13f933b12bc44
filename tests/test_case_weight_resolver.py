"""
Tests for the three-tier case-weight resolver.
"""

import pytest

from app.modules.case_packs.domain.models.case_pack import PackSource, WeightSource
from app.modules.case_packs.domain.services.case_weight_resolver import (
    CaseWeightResolver,
    round_half_up,
)

GTIN = "10812345678908"


@pytest.fixture
def resolver(fake_repository):
    return CaseWeightResolver(fake_repository)


@pytest.mark.asyncio
async def test_case_pack_tier(resolver, fake_repository):
    await fake_repository.save_case_pack(
        gtin_case=GTIN, source=PackSource.GDSN, units_per_case=12,
        case_net_weight=40.0, case_uom="lb", category="APPLES",
    )
    await fake_repository.save_commodity_pack(commodity_code="APPLES", default_case_weight=38.0)

    weight = await resolver.resolve(gtin_case=GTIN, category="APPLES")

    assert weight.case_weight == 40.0
    assert weight.uom == "lb"
    assert weight.source == WeightSource.GDSN.value


@pytest.mark.asyncio
async def test_highest_confidence_pack_wins(resolver, fake_repository):
    await fake_repository.save_case_pack(
        gtin_case=GTIN, source=PackSource.DISTRIBUTOR, case_net_weight=42.0, confidence=0.99,
    )
    await fake_repository.save_case_pack(
        gtin_case=GTIN, source=PackSource.ORG_PHOTO, case_net_weight=39.0, confidence=0.5,
    )

    weight = await resolver.resolve(gtin_case=GTIN)

    assert weight.case_weight == 42.0
    assert weight.source == "DISTRIBUTOR"


@pytest.mark.asyncio
async def test_pack_without_weight_falls_through(resolver, fake_repository):
    await fake_repository.save_case_pack(gtin_case=GTIN, source=PackSource.ORG_PHOTO, units_per_case=6)
    await fake_repository.save_commodity_pack(commodity_code="PEARS", default_case_weight=44.0, uom="lb")

    weight = await resolver.resolve(gtin_case=GTIN, category="PEARS")

    assert weight.case_weight == 44.0
    assert weight.source == WeightSource.COMMODITYPACK.value


@pytest.mark.asyncio
async def test_commodity_region_preferred(resolver, fake_repository):
    await fake_repository.save_commodity_pack(commodity_code="ONIONS", default_case_weight=50.0)
    await fake_repository.save_commodity_pack(
        commodity_code="ONIONS", default_case_weight=25.0, uom="kg", region_code="EU",
    )

    regional = await resolver.resolve(category="ONIONS", region="EU")
    fallback = await resolver.resolve(category="ONIONS", region="US")

    assert (regional.case_weight, regional.uom) == (25.0, "kg")
    assert (fallback.case_weight, fallback.uom) == (50.0, "lb")


@pytest.mark.asyncio
async def test_heuristic_defaults(resolver):
    weight = await resolver.resolve()

    assert weight.case_weight == 12.0
    assert weight.uom == "lb"
    assert weight.source == WeightSource.HEURISTIC.value


@pytest.mark.asyncio
async def test_heuristic_uses_unit_net_and_uom(resolver):
    weight = await resolver.resolve(gtin_case="00000000000000", category="UNKNOWN", unit_net=0.455, unit_uom="kg")

    assert weight.case_weight == 5.46
    assert weight.uom == "kg"
    assert weight.source == "HEURISTIC"


@pytest.mark.asyncio
async def test_heuristic_units_per_case_is_configurable(fake_repository):
    resolver = CaseWeightResolver(fake_repository, heuristic_units_per_case=24, default_uom="kg")

    weight = await resolver.resolve(unit_net=1.5)

    assert weight.case_weight == 36.0
    assert weight.uom == "kg"


def test_round_half_up():
    assert round_half_up(0.125) == 0.13
    assert round_half_up(2.5, 0) == 3.0
    assert round_half_up(30.0) == 30.0
