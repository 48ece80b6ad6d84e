"""음료 검색 Worker

음료만 대상으로 이름, 카테고리, 태그, 재료, CocktailDB 순서로 검색합니다.
같은 음료가 여러 단계에서 발견되면 점수가 누적됩니다 (AccumulationReconciler).
"""

from .base import BaseSearchWorker
from .tools.cocktaildb_tools import (
    filter_drinks_by_ingredient,
    lookup_drinks_batched,
    search_drinks_by_name,
    to_drink,
)
from ..ranking.matcher import field_contains, is_exact_match, matching_tags
from ..ranking.models import MatchDetails, MatchInfo, MatchType, SearchResult
from ..ranking.scorer import (
    EXACT_FILTER_SCORE,
    external_name_match_score,
    ingredient_match_score,
    name_match_score,
)
from ..sources.models import Drink
from ..utils.logger import get_logger

logger = get_logger(__name__)


class DrinkSearchWorker(BaseSearchWorker):
    """음료 검색 Worker

    이름/카테고리/태그/재료 검색 함수는 주어진 음료 목록(로컬 또는 공용)을 검사하고,
    run_* 메서드는 데이터 소스에서 목록을 가져와 검색 함수를 실행합니다.

    모든 결과는 match_type, match_details, 가용률을 포함합니다.

    Examples:
        >>> worker = DrinkSearchWorker("sample", tenant_config, data_source, inventory)
        >>> results = await worker.run_name_step("gin", common=False)
        >>> results[0].match_details.name_match
        True
    """

    def _result(
        self,
        drink: Drink,
        *,
        score: int,
        fields: list[str],
        match_type: MatchType,
        details: MatchDetails,
    ) -> SearchResult:
        if details.source == "external":
            result_type = "cocktaildb-drink"
        elif details.source == "common":
            result_type = "common-drink"
        else:
            result_type = "local-drink"

        availability = self.availability(drink)
        display_details = [drink.category or "Cocktail", f"{availability}% available"]
        if details.source == "common":
            display_details.append("Common Recipe")
        elif details.source == "external":
            display_details.append("External")
        display_details.extend(drink.tags)

        return SearchResult(
            type=result_type,
            data=drink,
            match_info=MatchInfo(fields=fields, score=score),
            display_name=drink.name,
            display_details=display_details,
            link=self.drink_link(drink),
            match_type=match_type,
            match_details=details,
            availability=availability,
            total_availability=self.total_availability(drink),
        )

    def search_by_name(self, term: str, drinks: list[Drink], is_common: bool = False) -> list[SearchResult]:
        """이름 부분 일치 검색.

        점수: 3 + 단어 일치(+1) + 정확 일치(+1) + 자체 음료 보너스(+1)
        """
        source = "common" if is_common else "cockpit"
        results = []

        for drink in drinks:
            if not field_contains(term, drink.name):
                continue

            score = name_match_score(
                term, drink.name, include_common=self.include_common, is_common=is_common
            )
            results.append(
                self._result(
                    drink,
                    score=score,
                    fields=["name"],
                    match_type="name",
                    details=MatchDetails(name_match=True, source=source),
                )
            )

        return results

    def search_by_category(
        self, term: str, drinks: list[Drink], is_common: bool = False
    ) -> list[SearchResult]:
        """카테고리 정확 일치 검색 (고정 점수 1, 표시상 이름 매칭으로 취급)."""
        source = "common" if is_common else "cockpit"
        return [
            self._result(
                drink,
                score=EXACT_FILTER_SCORE,
                fields=["category"],
                match_type="name",
                details=MatchDetails(name_match=True, source=source),
            )
            for drink in drinks
            if drink.category and is_exact_match(term, drink.category)
        ]

    def search_by_tags(self, term: str, drinks: list[Drink], is_common: bool = False) -> list[SearchResult]:
        """태그 정확 일치 검색 (고정 점수 1).

        무알코올 계열 검색어는 표기가 다른 무알코올 태그와도 일치합니다.
        """
        source = "common" if is_common else "cockpit"
        results = []

        for drink in drinks:
            tags = matching_tags(term, drink.tags)
            if not tags:
                continue

            results.append(
                self._result(
                    drink,
                    score=EXACT_FILTER_SCORE,
                    fields=["tags"],
                    match_type="name",
                    details=MatchDetails(name_match=False, tag_matches=tags, source=source),
                )
            )

        return results

    def search_by_ingredient(
        self, term: str, drinks: list[Drink], is_common: bool = False
    ) -> list[SearchResult]:
        """재료 이름 부분 일치 검색.

        점수: 2 + 단어 일치 재료 존재(+1) + 자체 음료 보너스(+1)
        """
        source = "common" if is_common else "cockpit"
        results = []

        for drink in drinks:
            matched = [i.name for i in drink.ingredients if field_contains(term, i.name)]
            if not matched:
                continue

            score = ingredient_match_score(
                term, matched, include_common=self.include_common, is_common=is_common
            )
            results.append(
                self._result(
                    drink,
                    score=score,
                    fields=["ingredients"],
                    match_type="ingredient",
                    details=MatchDetails(ingredient_matches=matched, source=source),
                )
            )

        return results

    async def search_cocktaildb_by_name(self, term: str) -> list[SearchResult]:
        """CocktailDB 이름 검색 (2 + 단어 일치 + 정확 일치)."""
        api_drinks = await search_drinks_by_name(term, self.client)
        if not api_drinks:
            return []

        await self.ensure_inventory()
        results = []
        for api_drink in api_drinks:
            drink = to_drink(api_drink)
            results.append(
                self._result(
                    drink,
                    score=external_name_match_score(term, drink.name),
                    fields=["name"],
                    match_type="name",
                    details=MatchDetails(name_match=True, source="external"),
                )
            )
        return results

    async def search_cocktaildb_by_ingredient(self, term: str) -> list[SearchResult]:
        """CocktailDB 재료 필터 검색 (고정 점수 1).

        필터 결과에는 재료 정보가 없으므로 음료별 상세 정보를 배치 단위로 조회합니다.
        """
        items = await filter_drinks_by_ingredient(term, self.client)
        if not items:
            return []

        api_drinks = await lookup_drinks_batched(
            [item.idDrink for item in items], self.lookup_batch_size, self.client
        )

        await self.ensure_inventory()
        return [
            self._result(
                to_drink(api_drink),
                score=EXACT_FILTER_SCORE,
                fields=["ingredients"],
                match_type="ingredient",
                details=MatchDetails(ingredient_matches=[term], source="external"),
            )
            for api_drink in api_drinks
        ]

    async def _drinks_for(self, common: bool) -> list[Drink]:
        drinks = await (self.common_drinks() if common else self.local_drinks())
        if drinks:
            await self.ensure_inventory()
        return drinks

    async def run_name_step(self, term: str, common: bool) -> list[SearchResult]:
        return self.search_by_name(term, await self._drinks_for(common), is_common=common)

    async def run_ingredient_step(self, term: str, common: bool) -> list[SearchResult]:
        return self.search_by_ingredient(term, await self._drinks_for(common), is_common=common)

    async def run_category_step(self, term: str) -> list[SearchResult]:
        """로컬 음료(+ 공용 음료 포함 시 공용 음료) 카테고리 검색."""
        results = self.search_by_category(term, await self._drinks_for(False))
        if self.include_common:
            results += self.search_by_category(term, await self._drinks_for(True), is_common=True)
        return results

    async def run_tags_step(self, term: str) -> list[SearchResult]:
        """로컬 음료(+ 공용 음료 포함 시 공용 음료) 태그 검색."""
        results = self.search_by_tags(term, await self._drinks_for(False))
        if self.include_common:
            results += self.search_by_tags(term, await self._drinks_for(True), is_common=True)
        return results
