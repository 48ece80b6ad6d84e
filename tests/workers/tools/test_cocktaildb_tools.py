"""CocktailDB Tool 함수 테스트

사용법:
    pytest tests/workers/tools/test_cocktaildb_tools.py -v
"""

import pytest

from barsearch.utils.errors import ExternalAPIError
from barsearch.workers.tools.cocktaildb_client import (
    CocktailDBClient,
    get_cocktaildb_client,
    reset_cocktaildb_client,
    set_cocktaildb_client,
)
from barsearch.workers.tools.cocktaildb_tools import (
    external_display_category,
    filter_drinks_by_ingredient,
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
from barsearch.workers.tools.models import ApiDrink, ApiDrinkListItem, ApiIngredient
from tests.mocks import GIN_FIZZ, MOCK_BASE_URL, FakeCocktailDB, api_drink


@pytest.fixture(autouse=True)
def clean_client():
    """전역 클라이언트 초기화"""
    reset_cocktaildb_client()
    yield
    reset_cocktaildb_client()


@pytest.fixture
def fake():
    return FakeCocktailDB.with_gin_data()


@pytest.mark.asyncio
class TestCocktailDBClient:
    """HTTP 클라이언트 테스트"""

    async def test_get_json(self, fake):
        client = fake.client()

        data = await client.get_json("search.php", {"s": "gin"})

        assert data["drinks"][0]["strDrink"] == "Gin Fizz"
        request = fake.requests[0]
        assert str(request.url).startswith(MOCK_BASE_URL + "search.php")
        assert request.url.params["s"] == "gin"

    async def test_empty_body(self, fake):
        fake.add("search.php", "s", "blank", "   ")

        data = await fake.client().get_json("search.php", {"s": "blank"})

        assert data == {}

    async def test_http_error_status(self, fake):
        fake.status_overrides["search.php"] = 500

        with pytest.raises(ExternalAPIError) as exc_info:
            await fake.client().get_json("search.php", {"s": "gin"})

        assert exc_info.value.status_code == 500

    async def test_network_error(self, fake):
        fake.failing_endpoints.add("search.php")

        with pytest.raises(ExternalAPIError) as exc_info:
            await fake.client().get_json("search.php", {"s": "gin"})

        assert exc_info.value.status_code is None

    async def test_invalid_json(self, fake):
        fake.add("search.php", "s", "broken", "<html>oops</html>")

        with pytest.raises(ExternalAPIError):
            await fake.client().get_json("search.php", {"s": "broken"})

    async def test_non_object_json(self, fake):
        fake.add("search.php", "s", "list", "[1, 2]")

        with pytest.raises(ExternalAPIError):
            await fake.client().get_json("search.php", {"s": "list"})


class TestClientSetup:
    """클라이언트 생성 및 전역 클라이언트 관리 테스트"""

    def test_base_url_trailing_slash(self):
        client = CocktailDBClient("https://example.test/api")

        assert client.base_url == "https://example.test/api/"

    def test_singleton(self):
        assert get_cocktaildb_client() is get_cocktaildb_client()

    def test_set_client(self, fake):
        client = fake.client()

        set_cocktaildb_client(client)

        assert get_cocktaildb_client() is client


@pytest.mark.asyncio
class TestSearchTools:
    """조회 Tool 함수 테스트"""

    async def test_search_drinks_by_name(self, fake):
        drinks = await search_drinks_by_name("gin", fake.client())

        assert [d.strDrink for d in drinks] == ["Gin Fizz", "Gin And Tonic"]

    async def test_search_drinks_null_result(self, fake):
        """결과 없음({"drinks": null})은 빈 목록"""
        drinks = await search_drinks_by_name("zzz", fake.client())

        assert drinks == []

    async def test_search_drinks_error_absorbed(self, fake):
        """네트워크 오류는 예외 대신 빈 목록"""
        fake.failing_endpoints.add("search.php")

        drinks = await search_drinks_by_name("gin", fake.client())

        assert drinks == []

    async def test_search_ingredients(self, fake):
        ingredients = await search_ingredients("gin", fake.client())

        assert len(ingredients) == 1
        assert ingredients[0].strAlcohol == "Yes"

    async def test_search_ingredients_string_result(self, fake):
        fake.add("search.php", "i", "nothing", {"ingredients": "no data found"})

        assert await search_ingredients("nothing", fake.client()) == []

    async def test_filter_by_ingredient(self, fake):
        items = await filter_drinks_by_ingredient("gin", fake.client())

        assert [i.idDrink for i in items] == ["11410", "11403"]

    async def test_filter_error_status_absorbed(self, fake):
        fake.status_overrides["filter.php"] = 503

        assert await filter_drinks_by_ingredient("gin", fake.client()) == []

    async def test_lookup_drink(self, fake):
        drink = await lookup_drink("11410", fake.client())

        assert drink is not None
        assert drink.strDrink == "Gin Fizz"

    async def test_lookup_missing(self, fake):
        assert await lookup_drink("99999", fake.client()) is None


@pytest.mark.asyncio
class TestLookupDrinksBatched:
    """배치 상세 조회 테스트"""

    async def test_batches_of_ten(self):
        """동시 요청은 배치 크기(10)를 넘지 않음"""
        # Arrange
        fake = FakeCocktailDB(latency=0.01)
        ids = [str(20000 + i) for i in range(25)]
        for drink_id in ids:
            fake.add("lookup.php", "i", drink_id, {"drinks": [api_drink(drink_id, f"Drink {drink_id}", ["Gin"])]})

        # Act
        drinks = await lookup_drinks_batched(ids, 10, fake.client())

        # Assert
        assert [d.idDrink for d in drinks] == ids
        assert len(fake.requested("lookup.php")) == 25
        assert fake.max_in_flight <= 10

    async def test_missing_drinks_skipped(self, fake):
        drinks = await lookup_drinks_batched(["11410", "99999", "11403"], 2, fake.client())

        assert [d.idDrink for d in drinks] == ["11410", "11403"]

    async def test_invalid_batch_size(self, fake):
        with pytest.raises(ValueError):
            await lookup_drinks_batched(["11410"], 0, fake.client())


class TestConversions:
    """응답 변환 테스트"""

    def test_to_drink(self):
        drink = to_drink(ApiDrink.model_validate(GIN_FIZZ))

        assert drink.id == "cocktaildb-11410"
        assert drink.external is True
        assert drink.prep == ""
        assert drink.instructions == ["Shake and strain."]
        assert drink.tags == ["IBA", "Classic"]
        assert [i.name for i in drink.ingredients] == [
            "Gin",
            "Lemon",
            "Powdered sugar",
            "Carbonated water",
        ]
        assert all(not i.optional for i in drink.ingredients)

    def test_to_drink_category(self):
        """기본은 표시용 카테고리, keep_category=True이면 원래 카테고리"""
        api = ApiDrink.model_validate(GIN_FIZZ)

        assert to_drink(api).category == "IBA"
        assert to_drink(api, keep_category=True).category == "Ordinary Drink"

    def test_parse_ingredients_skips_gaps(self):
        """중간 빈 위치가 있어도 15번까지 확인"""
        raw = api_drink("1", "Gappy", [])
        raw["strIngredient1"] = " Rum "
        raw["strIngredient3"] = "   "
        raw["strIngredient15"] = "Nutmeg"
        raw["strMeasure15"] = None

        ingredients = parse_ingredients(ApiDrink.model_validate(raw))

        assert [(i.name, i.qty) for i in ingredients] == [("Rum", ""), ("Nutmeg", "")]

    def test_display_category(self):
        assert external_display_category(ApiDrink(idDrink="1", strDrink="A", strCategory="Shot")) == "Shot"
        assert (
            external_display_category(
                ApiDrink(idDrink="1", strDrink="A", strCategory="Ordinary Drink", strTags="Sour,IBA")
            )
            == "Sour"
        )
        assert (
            external_display_category(ApiDrink(idDrink="1", strDrink="A", strCategory="Other / Unknown"))
            == "Cocktail"
        )

    def test_to_external_ingredient(self):
        ingredient = to_external_ingredient(
            ApiIngredient(idIngredient="1", strIngredient="Dark Rum", strAlcohol="Yes", strABV="40")
        )

        assert ingredient.id == "cocktaildb-ingredient-1"
        assert ingredient.external_link == ingredient_page_url("Dark Rum")
        assert ingredient.external_link.endswith("ingredient=dark%20rum")
        assert ingredient.image_url.endswith("/images/ingredients/dark%20rum.png")

    def test_to_external_ingredient_without_id(self):
        ingredient = to_external_ingredient(ApiIngredient(strIngredient="Lime Juice"))

        assert ingredient.id == "cocktaildb-ingredient-lime%20juice"

    def test_to_drink_list(self):
        drink_list = to_drink_list(
            "gin", [ApiDrinkListItem(idDrink="11410", strDrink="Gin Fizz")]
        )

        assert drink_list.ingredient == "gin"
        assert drink_list.drinks[0].id == "11410"
