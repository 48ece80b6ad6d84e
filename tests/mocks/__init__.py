"""테스트용 Mock 데이터와 Mock CocktailDB

테스트에서 실제 데이터 파일이나 CocktailDB API 없이 동작할 수 있도록
인메모리 바 데이터와 httpx.MockTransport 기반 Mock API를 제공합니다.
"""

from __future__ import annotations

import asyncio
from typing import Any

import httpx

from barsearch.ranking.models import MatchDetails, MatchInfo, SearchResult
from barsearch.sources.models import (
    BarData,
    BeerWineItem,
    Bottle,
    Drink,
    Ingredient,
    TenantConfig,
)
from barsearch.utils.errors import DataSourceError
from barsearch.workers.tools.cocktaildb_client import CocktailDBClient

MOCK_BASE_URL = "https://cocktaildb.test/api/json/v1/1/"


def build_bar_data() -> BarData:
    """테스트용 바 데이터를 생성합니다.

    재고: Tanqueray(Gin), Campari 보틀 + Soda Water, Lime 기본 재료
    """
    return BarData(
        name="Test Bar",
        essentials=["Soda Water", "Lime"],
        bottles=[
            Bottle(
                id="b-1",
                name="Tanqueray London Dry",
                category="Gin",
                base_spirit="Gin",
                tags=["juniper"],
                in_stock=True,
                bottle_state="opened",
                abv=43.1,
                origin="England",
                company="Diageo",
                aka=["London Dry Gin"],
            ),
            Bottle(
                id="b-2",
                name="Campari",
                category="Amaro",
                base_spirit="Bitter",
                in_stock=True,
                abv=24,
                origin="Italy",
            ),
            Bottle(
                id="b-3",
                name="Buffalo Trace",
                category="Whiskey",
                base_spirit="Bourbon",
                in_stock=False,
                bottle_state="empty",
            ),
        ],
        drinks=[
            Drink(
                id="d-1",
                name="Gin Fizz",
                category="Sour",
                tags=["refreshing"],
                ingredients=[
                    Ingredient(name="Gin", qty="2 oz"),
                    Ingredient(name="Soda Water", qty="top"),
                    Ingredient(name="Lime", qty="0.75 oz"),
                ],
            ),
            Drink(
                id="d-2",
                name="Negroni",
                category="Stirred",
                tags=["bitter", "classic"],
                ingredients=[
                    Ingredient(name="Gin", qty="1 oz"),
                    Ingredient(name="Campari", qty="1 oz"),
                    Ingredient(name="Sweet Vermouth", qty="1 oz"),
                    Ingredient(name="Orange Peel", optional=True),
                ],
            ),
            Drink(
                id="d-3",
                name="Virgin Mojito",
                category="Highball",
                tags=["Non-Alcoholic"],
                ingredients=[
                    Ingredient(name="Mint"),
                    Ingredient(name="Lime"),
                    Ingredient(name="Soda Water"),
                ],
            ),
            Drink(
                id="d-4",
                name="Ginger Shot",
                category="Shot",
                ingredients=[Ingredient(name="Ginger", optional=True)],
            ),
        ],
        common_drinks=[
            Drink(
                id="c-1",
                name="Tom Collins",
                category="Highball",
                tags=["refreshing"],
                ingredients=[
                    Ingredient(name="Gin"),
                    Ingredient(name="Lemon"),
                    Ingredient(name="Simple Syrup"),
                    Ingredient(name="Soda Water"),
                ],
            ),
            Drink(
                id="c-2",
                name="Moscow Mule",
                category="Highball",
                tags=["spicy"],
                ingredients=[
                    Ingredient(name="Vodka"),
                    Ingredient(name="Ginger Beer"),
                    Ingredient(name="Lime"),
                ],
            ),
        ],
        beer_wine=[
            BeerWineItem(id="bw-1", name="Sierra Nevada Pale Ale", type="beer", subtype="Pale Ale"),
            BeerWineItem(id="bw-2", name="Guinness Draught", type="beer", subtype="Stout"),
            BeerWineItem(id="bw-3", name="Cloudy Bay", type="wine", subtype="Sauvignon Blanc"),
            BeerWineItem(id="bw-4", name="Ginger Lager", type="beer"),
        ],
    )


def build_tenants() -> list[TenantConfig]:
    """공용 음료 포함 테넌트(sample)와 미포함 테넌트(solo)."""
    return [
        TenantConfig(
            slug="sample", bar_name="Sample Bar", bar_data="sampleBar", include_common_drinks=True
        ),
        TenantConfig(
            slug="solo", bar_name="Solo Bar", bar_data="soloBar", include_common_drinks=False
        ),
    ]


class FailingDataSource:
    """모든 조회에서 DataSourceError를 발생시키는 데이터 소스."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    async def _fail(self, name: str) -> list[Any]:
        self.calls.append(name)
        raise DataSourceError(f"{name} unavailable")

    async def fetch_drinks(self) -> list[Drink]:
        return await self._fail("fetch_drinks")

    async def fetch_drinks_common(self) -> list[Drink]:
        return await self._fail("fetch_drinks_common")

    async def fetch_bottles(self) -> list[Bottle]:
        return await self._fail("fetch_bottles")

    async def fetch_beer_wine(self) -> list[BeerWineItem]:
        return await self._fail("fetch_beer_wine")


def make_result(
    drink_id: str,
    name: str,
    score: int,
    *,
    result_type: str = "local-drink",
    fields: list[str] | None = None,
    match_type: str | None = None,
    details: MatchDetails | None = None,
    availability: int | None = None,
    total_availability: int | None = None,
) -> SearchResult:
    """음료 검색 결과를 간단히 생성합니다."""
    return SearchResult(
        type=result_type,
        data=Drink(id=drink_id, name=name),
        match_info=MatchInfo(fields=fields or ["name"], score=score),
        display_name=name,
        match_type=match_type,
        match_details=details,
        availability=availability,
        total_availability=total_availability,
    )


def api_drink(drink_id: str, name: str, ingredients: list[str], **fields: Any) -> dict[str, Any]:
    """CocktailDB 음료 응답 항목을 생성합니다. (재료 위치 1..15, 빈 위치는 None)"""
    item: dict[str, Any] = {
        "idDrink": drink_id,
        "strDrink": name,
        "strCategory": fields.get("category", "Ordinary Drink"),
        "strInstructions": fields.get("instructions", "Shake and strain."),
        "strDrinkThumb": f"https://cocktaildb.test/images/{drink_id}.jpg",
        "strTags": fields.get("tags"),
    }
    for position in range(1, 16):
        item[f"strIngredient{position}"] = None
        item[f"strMeasure{position}"] = None
    for position, ingredient in enumerate(ingredients, 1):
        item[f"strIngredient{position}"] = ingredient
        item[f"strMeasure{position}"] = "1 oz"
    return item


GIN_FIZZ = api_drink(
    "11410", "Gin Fizz", ["Gin", "Lemon", "Powdered sugar", "Carbonated water"], tags="IBA, Classic"
)
GIN_AND_TONIC = api_drink("11403", "Gin And Tonic", ["Gin", "Tonic water", "Lime"])


class FakeCocktailDB:
    """httpx.MockTransport 기반 Mock CocktailDB API

    (엔드포인트, 파라미터 값) 조합별 응답을 등록하고 요청 기록을 남깁니다.
    등록되지 않은 조합은 결과 없음({"drinks": null} 등)을 반환합니다.

    Examples:
        >>> fake = FakeCocktailDB.with_gin_data()
        >>> client = fake.client()
        >>> data = await client.get_json("search.php", {"s": "gin"})
    """

    def __init__(self, latency: float = 0.0) -> None:
        self.responses: dict[tuple[str, str], Any] = {}
        self.status_overrides: dict[str, int] = {}
        self.failing_endpoints: set[str] = set()
        self.requests: list[httpx.Request] = []
        self.latency = latency
        self.in_flight = 0
        self.max_in_flight = 0

    @classmethod
    def with_gin_data(cls, latency: float = 0.0) -> FakeCocktailDB:
        fake = cls(latency=latency)
        fake.add("search.php", "s", "gin", {"drinks": [GIN_FIZZ, GIN_AND_TONIC]})
        fake.add(
            "search.php",
            "i",
            "gin",
            {
                "ingredients": [
                    {
                        "idIngredient": "1",
                        "strIngredient": "Gin",
                        "strDescription": "Gin is a distilled alcoholic drink.",
                        "strType": "Gin",
                        "strAlcohol": "Yes",
                        "strABV": "40",
                    }
                ]
            },
        )
        fake.add(
            "filter.php",
            "i",
            "gin",
            {
                "drinks": [
                    {"idDrink": "11410", "strDrink": "Gin Fizz", "strDrinkThumb": None},
                    {"idDrink": "11403", "strDrink": "Gin And Tonic", "strDrinkThumb": None},
                ]
            },
        )
        fake.add("lookup.php", "i", "11410", {"drinks": [GIN_FIZZ]})
        fake.add("lookup.php", "i", "11403", {"drinks": [GIN_AND_TONIC]})
        return fake

    def add(self, endpoint: str, param: str, value: str, payload: Any) -> None:
        self.responses[(endpoint, f"{param}={value}")] = payload

    def requested(self, endpoint: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path.endswith(endpoint)]

    async def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        endpoint = request.url.path.rsplit("/", 1)[-1]

        if endpoint in self.failing_endpoints:
            raise httpx.ConnectError("connection refused", request=request)
        if endpoint in self.status_overrides:
            return httpx.Response(self.status_overrides[endpoint], text="error")

        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.latency:
                await asyncio.sleep(self.latency)
        finally:
            self.in_flight -= 1

        for key, value in request.url.params.items():
            payload = self.responses.get((endpoint, f"{key}={value}"))
            if payload is not None:
                if isinstance(payload, str):
                    return httpx.Response(200, text=payload)
                return httpx.Response(200, json=payload)

        empty_key = "ingredients" if "i" in request.url.params and endpoint == "search.php" else "drinks"
        return httpx.Response(200, json={empty_key: None})

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)

    def client(self, timeout_seconds: float = 5.0) -> CocktailDBClient:
        return CocktailDBClient(MOCK_BASE_URL, timeout_seconds=timeout_seconds, transport=self.transport())


__all__ = [
    "MOCK_BASE_URL",
    "GIN_FIZZ",
    "GIN_AND_TONIC",
    "FailingDataSource",
    "FakeCocktailDB",
    "api_drink",
    "build_bar_data",
    "build_tenants",
    "make_result",
]
