"""검색 단계 테이블 테스트."""

from unittest.mock import AsyncMock, Mock

import pytest

from barsearch.orchestrator.models import SourceFilters
from barsearch.orchestrator.steps import OMNI_STEP_TABLE, build_drink_steps, build_omni_steps


@pytest.fixture
def omni_worker():
    worker = Mock()
    for _, _, method_name in OMNI_STEP_TABLE:
        setattr(worker, method_name, AsyncMock(return_value=[]))
    return worker


@pytest.fixture
def drink_worker():
    worker = Mock()
    worker.run_name_step = AsyncMock(return_value=[])
    worker.run_category_step = AsyncMock(return_value=[])
    worker.run_tags_step = AsyncMock(return_value=[])
    worker.run_ingredient_step = AsyncMock(return_value=[])
    worker.search_cocktaildb_by_name = AsyncMock(return_value=[])
    worker.search_cocktaildb_by_ingredient = AsyncMock(return_value=[])
    return worker


class TestOmniSteps:
    """omni 단계 구성 테스트"""

    def test_all_enabled_in_priority_order(self, omni_worker):
        steps = build_omni_steps(omni_worker, "gin", SourceFilters())

        assert [s.key for s in steps] == [key for key, _, _ in OMNI_STEP_TABLE]

    def test_disabled_filters_skipped(self, omni_worker):
        steps = build_omni_steps(omni_worker, "gin", SourceFilters(beers=False, wines=False))

        assert "beers" not in [s.key for s in steps]
        assert "wines" not in [s.key for s in steps]
        assert len(steps) == 6

    def test_enabled_keys_camel_case(self):
        filters = SourceFilters(local_drinks=False)

        assert filters.enabled_keys()[:2] == ["commonDrinks", "localBottles"]

    @pytest.mark.asyncio
    async def test_each_step_calls_its_method(self, omni_worker):
        steps = build_omni_steps(omni_worker, "gin", SourceFilters())

        for step in steps:
            await step.run()

        for _, _, method_name in OMNI_STEP_TABLE:
            getattr(omni_worker, method_name).assert_awaited_once_with("gin")


class TestDrinkSteps:
    """drinks 단계 구성 테스트"""

    def test_with_common(self, drink_worker):
        steps = build_drink_steps(drink_worker, "gin", include_common=True)

        assert [s.key for s in steps] == [
            "local-name",
            "common-name",
            "category",
            "tags",
            "local-ingredient",
            "common-ingredient",
            "cocktaildb-name",
            "cocktaildb-ingredient",
        ]

    def test_without_common(self, drink_worker):
        steps = build_drink_steps(drink_worker, "gin", include_common=False)

        assert [s.key for s in steps] == [
            "local-name",
            "category",
            "tags",
            "local-ingredient",
            "cocktaildb-name",
            "cocktaildb-ingredient",
        ]

    def test_only_external_ingredient_appends(self, drink_worker):
        steps = build_drink_steps(drink_worker, "gin", include_common=True)

        appending = [s.key for s in steps if s.append_ingredient_matches]
        assert appending == ["cocktaildb-ingredient"]

    @pytest.mark.asyncio
    async def test_common_steps_use_common_list(self, drink_worker):
        steps = {s.key: s for s in build_drink_steps(drink_worker, "gin", include_common=True)}

        await steps["common-name"].run()
        await steps["local-ingredient"].run()

        drink_worker.run_name_step.assert_awaited_once_with("gin", common=True)
        drink_worker.run_ingredient_step.assert_awaited_once_with("gin", common=False)
