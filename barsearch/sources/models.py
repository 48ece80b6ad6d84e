"""바 인벤토리 도메인 모델.

로컬 콘텐츠 API와 공용 음료 컬렉션에서 받은 레코드 구조를 정의합니다.
원본 JSON의 camelCase 필드명(baseSpirit, includeCommonDrinks 등)도 그대로 받습니다.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

BottleState = Literal["unopened", "opened", "empty"]
BeerWineType = Literal["beer", "wine"]


class _Record(BaseModel):
    """camelCase 별칭을 허용하는 공통 베이스."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Ingredient(_Record):
    """음료 재료."""

    name: str
    qty: str | None = None
    optional: bool = False


class Drink(_Record):
    """음료 레시피.

    로컬 음료, 공용 음료, CocktailDB에서 변환된 외부 음료가 모두 이 모델을 사용합니다.
    """

    id: str
    name: str
    ingredients: list[Ingredient] = Field(default_factory=list)
    instructions: str | list[str] = ""
    image: str | None = None
    image_url: str | None = None
    prep: str | None = None
    category: str | None = None
    tags: list[str] = Field(default_factory=list)
    starred: bool = False
    external: bool = False

    @property
    def required_ingredients(self) -> list[Ingredient]:
        """optional 표시가 없는 재료 목록."""
        return [i for i in self.ingredients if not i.optional]


class Bottle(_Record):
    """보틀 인벤토리 항목."""

    id: str
    name: str
    category: str = ""
    base_spirit: str = ""
    tags: list[str] = Field(default_factory=list)
    in_stock: bool = True
    is_fingers: bool = False
    bottle_size: str | None = None
    bottle_state: BottleState | None = None
    image: str | None = None
    abv: float | None = None
    origin: str | None = None
    company: str | None = None
    aka: list[str] = Field(default_factory=list)


class BeerWineItem(_Record):
    """맥주/와인 항목 (레거시 통합 형식)."""

    id: str
    name: str
    type: BeerWineType
    subtype: str | None = None
    in_stock: bool = True
    image: str | None = None


class TenantConfig(_Record):
    """테넌트(바)별 설정."""

    slug: str
    bar_name: str
    bar_data: str = ""
    description: str | None = None
    og_image: str | None = None
    include_common_drinks: bool = False
    include_random_cocktails: bool = False
    is_sample_data: bool = False


class BarData(_Record):
    """한 바의 전체 인벤토리 데이터."""

    name: str = ""
    bottles: list[Bottle] = Field(default_factory=list)
    drinks: list[Drink] = Field(default_factory=list)
    common_drinks: list[Drink] = Field(default_factory=list)
    beer_wine: list[BeerWineItem] = Field(default_factory=list)
    essentials: list[str] = Field(default_factory=list)


class ExternalIngredient(_Record):
    """CocktailDB 재료 정보."""

    id: str
    name: str
    description: str | None = None
    type: str | None = None
    alcohol: str | None = None
    abv: str | None = None
    image_url: str | None = None
    external_link: str | None = None


class ExternalDrinkSummary(_Record):
    """CocktailDB 재료 필터 결과의 음료 요약."""

    id: str
    name: str
    thumbnail: str | None = None


class ExternalDrinkList(_Record):
    """특정 재료가 들어가는 CocktailDB 음료 목록."""

    ingredient: str
    drinks: list[ExternalDrinkSummary] = Field(default_factory=list)
