"""CocktailDB 연동 Tool 함수들

CocktailDB API를 호출하여 음료/재료를 조회하는 도구 함수와
API 응답을 도메인 레코드로 변환하는 함수를 제공합니다.

모든 조회 함수는 네트워크/파싱 오류를 내부에서 처리합니다.
오류는 로그로 남기고 빈 목록(또는 None)을 반환하므로 호출자에게 예외가 전파되지 않습니다.
"""

from __future__ import annotations

import asyncio
from typing import Any

from pydantic import ValidationError

from .cocktaildb_client import CocktailDBClient, get_cocktaildb_client
from .models import MAX_INGREDIENT_POSITIONS, ApiDrink, ApiDrinkListItem, ApiIngredient
from ...sources.models import (
    Drink,
    ExternalDrinkList,
    ExternalDrinkSummary,
    ExternalIngredient,
    Ingredient,
)
from ...utils.errors import ExternalAPIError
from ...utils.logger import get_logger

logger = get_logger(__name__)

COCKTAILDB_SITE_URL = "https://www.thecocktaildb.com"
GENERIC_CATEGORIES = frozenset({"Other / Unknown", "Ordinary Drink"})


def _items(data: dict[str, Any], key: str) -> list[dict[str, Any]]:
    # 결과가 없으면 null 또는 문자열("no data found")이 옵니다
    items = data.get(key)
    if not isinstance(items, list):
        return []
    return [item for item in items if isinstance(item, dict)]


async def search_drinks_by_name(
    term: str,
    client: CocktailDBClient | None = None,
) -> list[ApiDrink]:
    """이름으로 CocktailDB 음료를 검색합니다. (search.php?s=)

    Args:
        term: 검색어
        client: CocktailDB 클라이언트 (None이면 전역 클라이언트)

    Returns:
        음료 목록 (결과가 없거나 오류 시 빈 목록)

    Examples:
        >>> drinks = await search_drinks_by_name("margarita")
        >>> drinks[0].strDrink
        'Margarita'
    """
    client = client or get_cocktaildb_client()

    try:
        data = await client.get_json("search.php", {"s": term})
        drinks = [ApiDrink.model_validate(item) for item in _items(data, "drinks")]
    except (ExternalAPIError, ValidationError) as e:
        logger.error(f"CocktailDB 이름 검색 중 오류 발생: {e}", exc_info=True)
        return []

    logger.info(f"CocktailDB 이름 검색 완료: term='{term}', results={len(drinks)}")
    return drinks


async def search_ingredients(
    term: str,
    client: CocktailDBClient | None = None,
) -> list[ApiIngredient]:
    """이름으로 CocktailDB 재료를 검색합니다. (search.php?i=)"""
    client = client or get_cocktaildb_client()

    try:
        data = await client.get_json("search.php", {"i": term})
        ingredients = [ApiIngredient.model_validate(item) for item in _items(data, "ingredients")]
    except (ExternalAPIError, ValidationError) as e:
        logger.error(f"CocktailDB 재료 검색 중 오류 발생: {e}", exc_info=True)
        return []

    logger.info(f"CocktailDB 재료 검색 완료: term='{term}', results={len(ingredients)}")
    return ingredients


async def filter_drinks_by_ingredient(
    term: str,
    client: CocktailDBClient | None = None,
) -> list[ApiDrinkListItem]:
    """재료로 CocktailDB 음료를 필터링합니다. (filter.php?i=)

    응답에는 음료 요약(id, 이름, 썸네일)만 포함됩니다.
    """
    client = client or get_cocktaildb_client()

    try:
        data = await client.get_json("filter.php", {"i": term})
        drinks = [ApiDrinkListItem.model_validate(item) for item in _items(data, "drinks")]
    except (ExternalAPIError, ValidationError) as e:
        logger.error(f"CocktailDB 재료 필터 중 오류 발생: {e}", exc_info=True)
        return []

    logger.info(f"CocktailDB 재료 필터 완료: term='{term}', results={len(drinks)}")
    return drinks


async def lookup_drink(
    drink_id: str,
    client: CocktailDBClient | None = None,
) -> ApiDrink | None:
    """id로 CocktailDB 음료 상세 정보를 조회합니다. (lookup.php?i=)

    Returns:
        음료 상세 정보 (없거나 오류 시 None)
    """
    client = client or get_cocktaildb_client()

    try:
        data = await client.get_json("lookup.php", {"i": drink_id})
        items = _items(data, "drinks")
        if not items:
            return None
        return ApiDrink.model_validate(items[0])
    except (ExternalAPIError, ValidationError) as e:
        logger.error(f"CocktailDB 상세 조회 중 오류 발생: id={drink_id}, {e}", exc_info=True)
        return None


async def lookup_drinks_batched(
    drink_ids: list[str],
    batch_size: int = 10,
    client: CocktailDBClient | None = None,
) -> list[ApiDrink]:
    """여러 음료 상세 정보를 배치 단위로 동시에 조회합니다.

    한 배치(batch_size개)의 요청을 동시에 보내고, 배치가 모두 끝난 뒤 다음 배치를 시작합니다.
    결과는 drink_ids 순서를 유지하며 조회되지 않은 음료는 제외합니다.

    Args:
        drink_ids: 조회할 음료 id 목록
        batch_size: 동시 요청 수 (1 이상)
        client: CocktailDB 클라이언트

    Returns:
        조회된 음료 목록
    """
    if batch_size < 1:
        raise ValueError(f"batch_size는 1 이상이어야 합니다: {batch_size}")

    client = client or get_cocktaildb_client()
    drinks: list[ApiDrink] = []

    for start in range(0, len(drink_ids), batch_size):
        batch = drink_ids[start : start + batch_size]
        batch_results = await asyncio.gather(*(lookup_drink(i, client) for i in batch))
        drinks.extend(d for d in batch_results if d is not None)

    logger.info(f"CocktailDB 배치 조회 완료: requested={len(drink_ids)}, found={len(drinks)}")
    return drinks


def split_tags(raw_tags: str | None) -> list[str]:
    """쉼표로 구분된 태그 문자열을 목록으로 변환합니다."""
    if not raw_tags:
        return []
    return [tag.strip() for tag in raw_tags.split(",") if tag.strip()]


def parse_ingredients(api_drink: ApiDrink) -> list[Ingredient]:
    """1..15 위치의 재료/계량 필드를 재료 목록으로 변환합니다.

    빈 위치는 건너뛰며, 중간에 빈 위치가 있어도 15번까지 모두 확인합니다.
    """
    ingredients = []
    for position in range(1, MAX_INGREDIENT_POSITIONS + 1):
        name, measure = api_drink.ingredient_at(position)
        if not name or not name.strip():
            continue
        ingredients.append(
            Ingredient(name=name.strip(), qty=(measure or "").strip(), optional=False)
        )
    return ingredients


def external_display_category(api_drink: ApiDrink) -> str:
    """외부 음료의 표시용 카테고리.

    "Other / Unknown", "Ordinary Drink" 같은 포괄 카테고리 대신 첫 번째 태그를 쓰고,
    태그도 없으면 "Cocktail"을 사용합니다.
    """
    category = api_drink.strCategory
    if category and category not in GENERIC_CATEGORIES:
        return category

    tags = split_tags(api_drink.strTags)
    return tags[0] if tags else "Cocktail"


def to_drink(api_drink: ApiDrink, keep_category: bool = False) -> Drink:
    """CocktailDB 음료를 Drink 레코드로 변환합니다.

    keep_category가 True이면 strCategory를 그대로 사용하고,
    아니면 표시용 카테고리(external_display_category)로 바꿉니다.

    Examples:
        >>> drink = to_drink(ApiDrink(idDrink="11007", strDrink="Margarita"))
        >>> drink.id, drink.external
        ('cocktaildb-11007', True)
    """
    return Drink(
        id=f"cocktaildb-{api_drink.idDrink}",
        name=api_drink.strDrink,
        ingredients=parse_ingredients(api_drink),
        instructions=[api_drink.strInstructions] if api_drink.strInstructions else [],
        image_url=api_drink.strDrinkThumb,
        prep="",
        category=api_drink.strCategory if keep_category else external_display_category(api_drink),
        tags=split_tags(api_drink.strTags),
        external=True,
    )


def ingredient_url_name(name: str) -> str:
    """재료 URL에 사용하는 이름 (소문자, 공백은 %20)."""
    return name.lower().replace(" ", "%20")


def ingredient_image_url(name: str) -> str:
    return f"{COCKTAILDB_SITE_URL}/images/ingredients/{ingredient_url_name(name)}.png"


def ingredient_page_url(name: str) -> str:
    return f"{COCKTAILDB_SITE_URL}/ingredient.php?ingredient={ingredient_url_name(name)}"


def to_external_ingredient(api_ingredient: ApiIngredient) -> ExternalIngredient:
    """CocktailDB 재료를 ExternalIngredient 레코드로 변환합니다."""
    name = api_ingredient.strIngredient
    return ExternalIngredient(
        id=f"cocktaildb-ingredient-{api_ingredient.idIngredient or ingredient_url_name(name)}",
        name=name,
        description=api_ingredient.strDescription,
        type=api_ingredient.strType,
        alcohol=api_ingredient.strAlcohol,
        abv=api_ingredient.strABV,
        image_url=ingredient_image_url(name),
        external_link=ingredient_page_url(name),
    )


def to_drink_list(term: str, items: list[ApiDrinkListItem]) -> ExternalDrinkList:
    """재료 필터 결과를 ExternalDrinkList 레코드로 변환합니다."""
    return ExternalDrinkList(
        ingredient=term,
        drinks=[
            ExternalDrinkSummary(id=item.idDrink, name=item.strDrink or "", thumbnail=item.strDrinkThumb)
            for item in items
        ],
    )
