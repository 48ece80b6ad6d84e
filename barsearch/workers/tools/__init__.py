"""Worker Tool 모듈.

CocktailDB 등 외부 데이터 소스 연동 도구를 제공합니다.
"""

from .cocktaildb_client import (
    CocktailDBClient,
    get_cocktaildb_client,
    reset_cocktaildb_client,
    set_cocktaildb_client,
)
from .cocktaildb_tools import (
    external_display_category,
    filter_drinks_by_ingredient,
    ingredient_image_url,
    ingredient_page_url,
    lookup_drink,
    lookup_drinks_batched,
    parse_ingredients,
    search_drinks_by_name,
    search_ingredients,
    to_drink,
    to_drink_list,
    to_external_ingredient,
)
from .models import ApiDrink, ApiDrinkListItem, ApiIngredient

__all__ = [
    "CocktailDBClient",
    "get_cocktaildb_client",
    "set_cocktaildb_client",
    "reset_cocktaildb_client",
    "search_drinks_by_name",
    "search_ingredients",
    "filter_drinks_by_ingredient",
    "lookup_drink",
    "lookup_drinks_batched",
    "parse_ingredients",
    "external_display_category",
    "to_drink",
    "to_drink_list",
    "to_external_ingredient",
    "ingredient_image_url",
    "ingredient_page_url",
    "ApiDrink",
    "ApiDrinkListItem",
    "ApiIngredient",
]
