"""CocktailDB API 응답 모델"""

from pydantic import BaseModel, ConfigDict

MAX_INGREDIENT_POSITIONS = 15


class ApiDrink(BaseModel):
    """search.php?s= / lookup.php?i= 응답의 음료 항목

    strIngredient1..15, strMeasure1..15는 추가 필드(extra)로 보관합니다.
    """

    model_config = ConfigDict(extra="allow")

    idDrink: str
    strDrink: str
    strCategory: str | None = None
    strInstructions: str | None = None
    strDrinkThumb: str | None = None
    strTags: str | None = None
    strAlcoholic: str | None = None

    def ingredient_at(self, position: int) -> tuple[str | None, str | None]:
        """position 위치(1..15)의 (재료 이름, 계량) 쌍을 반환합니다."""
        extra = self.model_extra or {}
        return extra.get(f"strIngredient{position}"), extra.get(f"strMeasure{position}")


class ApiIngredient(BaseModel):
    """search.php?i= 응답의 재료 항목"""

    model_config = ConfigDict(extra="ignore")

    idIngredient: str | None = None
    strIngredient: str
    strDescription: str | None = None
    strType: str | None = None
    strAlcohol: str | None = None
    strABV: str | None = None


class ApiDrinkListItem(BaseModel):
    """filter.php?i= 응답의 음료 요약 항목"""

    model_config = ConfigDict(extra="ignore")

    idDrink: str
    strDrink: str | None = None
    strDrinkThumb: str | None = None
