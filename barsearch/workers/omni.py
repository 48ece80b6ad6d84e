"""통합(omni) 검색 Worker

음료, 보틀, 맥주/와인, CocktailDB 음료/재료/음료 목록을 유형별로 검색합니다.
점수는 필드 개수 정책으로 계산하며 유형 간 결과를 병합하지 않습니다.
"""

from urllib.parse import quote

from .base import BaseSearchWorker
from .tools.cocktaildb_tools import (
    filter_drinks_by_ingredient,
    search_drinks_by_name,
    search_ingredients,
    to_drink,
    to_drink_list,
    to_external_ingredient,
)
from ..ranking.matcher import array_contains, field_contains
from ..ranking.models import MatchInfo, SearchResult
from ..ranking.scorer import (
    BASE_EXTERNAL,
    BASE_FIRST_PARTY,
    BASE_SHARED,
    field_count_score,
)
from ..sources.models import BeerWineItem, Bottle, Drink
from ..utils.logger import get_logger

logger = get_logger(__name__)

BOTTLE_STATE_LABELS = {"unopened": "Unopened", "opened": "Opened", "empty": "Empty"}
# encodeURIComponent와 같은 비예약 문자 집합
URI_COMPONENT_SAFE = "!*'()"


def _format_number(value: float) -> str:
    # 40.0 -> "40", 41.2 -> "41.2"
    return f"{value:g}"


def drink_matched_fields(term: str, drink: Drink) -> list[str]:
    """음료 필드 매칭 (name → category → tags → ingredients)."""
    fields = []
    if field_contains(term, drink.name):
        fields.append("name")
    if field_contains(term, drink.category):
        fields.append("category")
    if array_contains(term, drink.tags):
        fields.append("tags")
    if array_contains(term, [i.name for i in drink.ingredients]):
        fields.append("ingredients")
    return fields


def bottle_matched_fields(term: str, bottle: Bottle) -> list[str]:
    """보틀 필드 매칭 (name → category → baseSpirit → origin → company → tags)."""
    fields = []
    if field_contains(term, bottle.name):
        fields.append("name")
    if field_contains(term, bottle.category):
        fields.append("category")
    if field_contains(term, bottle.base_spirit):
        fields.append("baseSpirit")
    if field_contains(term, bottle.origin):
        fields.append("origin")
    if field_contains(term, bottle.company):
        fields.append("company")
    if array_contains(term, bottle.tags):
        fields.append("tags")
    return fields


def beer_wine_matched_fields(term: str, item: BeerWineItem) -> list[str]:
    """맥주/와인 필드 매칭 (name → type)."""
    fields = []
    if field_contains(term, item.name):
        fields.append("name")
    if field_contains(term, item.subtype):
        fields.append("type")
    return fields


class OmniSearchWorker(BaseSearchWorker):
    """통합 검색 Worker

    소스별 검색 함수는 후보 목록을 조회하고, 필드를 정해진 순서로 매칭하고,
    매칭된 필드가 없는 후보를 제외한 뒤 점수와 표시 정보를 계산합니다.

    Examples:
        >>> worker = OmniSearchWorker("sample", tenant_config, data_source, inventory)
        >>> results = await worker.search_local_drinks("gin")
        >>> results[0].match_info.fields
        ['name', 'ingredients']
    """

    async def _search_drinks(
        self,
        term: str,
        drinks: list[Drink],
        *,
        result_type: str,
        base: int,
        badge: str | None = None,
    ) -> list[SearchResult]:
        results = []

        for drink in drinks:
            fields = drink_matched_fields(term, drink)
            if not fields:
                continue

            await self.ensure_inventory()
            availability = self.availability(drink)

            details = [drink.category or "Cocktail", f"{availability}% available"]
            if badge:
                details.append(badge)
            details.extend(drink.tags)

            results.append(
                SearchResult(
                    type=result_type,
                    data=drink,
                    match_info=MatchInfo(
                        fields=fields, score=field_count_score(base, fields, term, drink.name)
                    ),
                    display_name=drink.name,
                    display_details=details,
                    link=self.drink_link(drink),
                    availability=availability,
                    total_availability=self.total_availability(drink),
                )
            )

        return results

    async def search_local_drinks(self, term: str) -> list[SearchResult]:
        """로컬 음료 검색 (기본 가중치 3)."""
        drinks = await self.local_drinks()
        return await self._search_drinks(
            term, drinks, result_type="local-drink", base=BASE_FIRST_PARTY
        )

    async def search_common_drinks(self, term: str) -> list[SearchResult]:
        """공용 음료 검색 (기본 가중치 2).

        테넌트가 공용 음료를 포함하지 않으면 빈 목록을 반환합니다.
        """
        if not self.include_common:
            return []

        drinks = await self.common_drinks()
        return await self._search_drinks(
            term,
            drinks,
            result_type="common-drink",
            base=BASE_SHARED,
            badge="Common Recipe",
        )

    async def search_local_bottles(self, term: str) -> list[SearchResult]:
        """보틀 검색 (기본 가중치 3)."""
        results = []

        for bottle in await self.bottles():
            fields = bottle_matched_fields(term, bottle)
            if not fields:
                continue

            details = [d for d in (bottle.category, bottle.base_spirit) if d]
            if bottle.origin:
                details.append(bottle.origin)
            if bottle.abv:
                details.append(f"{_format_number(bottle.abv)}% ABV")
            if bottle.bottle_state:
                details.append(BOTTLE_STATE_LABELS[bottle.bottle_state])

            results.append(
                SearchResult(
                    type="local-bottle",
                    data=bottle,
                    match_info=MatchInfo(
                        fields=fields,
                        score=field_count_score(BASE_FIRST_PARTY, fields, term, bottle.name),
                    ),
                    display_name=bottle.name,
                    display_details=details,
                    link=f"/{self.tenant_slug}/bottles/{bottle.id}",
                )
            )

        return results

    async def _search_beer_wine(self, term: str, kind: str) -> list[SearchResult]:
        results = []
        items = [i for i in await self.beer_wine() if i.type == kind]

        for item in items:
            fields = beer_wine_matched_fields(term, item)
            if not fields:
                continue

            results.append(
                SearchResult(
                    type=kind,
                    data=item,
                    match_info=MatchInfo(
                        fields=fields, score=field_count_score(BASE_SHARED, fields, term, item.name)
                    ),
                    display_name=item.name,
                    display_details=[item.subtype or kind.capitalize()],
                    link=f"/{self.tenant_slug}/beer-wine#{kind}-{item.id}",
                )
            )

        return results

    async def search_beers(self, term: str) -> list[SearchResult]:
        """맥주 검색 (기본 가중치 2)."""
        return await self._search_beer_wine(term, "beer")

    async def search_wines(self, term: str) -> list[SearchResult]:
        """와인 검색 (기본 가중치 2)."""
        return await self._search_beer_wine(term, "wine")

    async def search_cocktaildb_drinks(self, term: str) -> list[SearchResult]:
        """CocktailDB 음료 이름 검색 (기본 가중치 1).

        외부 음료는 재료 정보가 없으면 가용률을 0%로 표시합니다.
        """
        api_drinks = await search_drinks_by_name(term, self.client)
        if not api_drinks:
            return []

        await self.ensure_inventory()
        results = []

        for api_drink in api_drinks:
            drink = to_drink(api_drink, keep_category=True)
            fields = ["name"]
            availability = self.availability(drink, empty_default=0)

            results.append(
                SearchResult(
                    type="cocktaildb-drink",
                    data=drink,
                    match_info=MatchInfo(
                        fields=fields,
                        score=field_count_score(BASE_EXTERNAL, fields, term, drink.name),
                    ),
                    display_name=drink.name,
                    display_details=[
                        drink.category or "Cocktail",
                        f"{availability}% available",
                        "External",
                        *drink.tags,
                    ],
                    link=self.drink_link(drink),
                    availability=availability,
                    total_availability=self.total_availability(drink, empty_default=0),
                )
            )

        return results

    async def search_cocktaildb_ingredients(self, term: str) -> list[SearchResult]:
        """CocktailDB 재료 검색 (기본 가중치 1)."""
        results = []

        for api_ingredient in await search_ingredients(term, self.client):
            ingredient = to_external_ingredient(api_ingredient)

            details = []
            if ingredient.type:
                details.append(ingredient.type)
            if ingredient.alcohol:
                details.append("Alcoholic" if ingredient.alcohol == "Yes" else "Non-Alcoholic")
            if ingredient.abv:
                details.append(f"{ingredient.abv}% ABV")
            details.append("External Ingredient")

            fields = ["name"]
            results.append(
                SearchResult(
                    type="cocktaildb-ingredient",
                    data=ingredient,
                    match_info=MatchInfo(
                        fields=fields,
                        score=field_count_score(BASE_EXTERNAL, fields, term, ingredient.name),
                    ),
                    display_name=ingredient.name,
                    display_details=details,
                    link=ingredient.external_link,
                )
            )

        return results

    async def search_cocktaildb_drink_lists(self, term: str) -> list[SearchResult]:
        """재료가 들어가는 CocktailDB 음료 목록 (결과 최대 1개).

        검색어 자체를 이름으로 비교하므로 정확 일치 보너스가 항상 적용됩니다.
        """
        items = await filter_drinks_by_ingredient(term, self.client)
        if not items or not items[0].strDrink:
            return []

        drink_list = to_drink_list(term, items)
        count = len(items)
        fields = ["ingredient"]
        encoded_term = quote(term, safe=URI_COMPONENT_SAFE)

        logger.debug(f"CocktailDB 음료 목록: term='{term}', drinks={count}")
        return [
            SearchResult(
                type="cocktaildb-drink-list",
                data=drink_list,
                match_info=MatchInfo(
                    fields=fields, score=field_count_score(BASE_EXTERNAL, fields, term, term)
                ),
                display_name=f'{count} external drinks with "{term}"',
                display_details=[f"including {items[0].strDrink} and {count - 1} more"],
                link=(
                    f"/{self.tenant_slug}/drinks?search={encoded_term}"
                    "&filters=externalByIngredient"
                ),
            )
        ]
