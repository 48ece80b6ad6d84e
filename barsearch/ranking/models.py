"""검색 결과 데이터 모델."""

from typing import Literal

from pydantic import BaseModel, Field

from ..sources.models import (
    BeerWineItem,
    Bottle,
    Drink,
    ExternalDrinkList,
    ExternalIngredient,
)

ResultType = Literal[
    "local-drink",
    "common-drink",
    "local-bottle",
    "beer",
    "wine",
    "cocktaildb-drink",
    "cocktaildb-ingredient",
    "cocktaildb-drink-list",
]
MatchType = Literal["name", "ingredient", "both"]
MatchSource = Literal["cockpit", "common", "external"]

RESULT_TYPES: tuple[str, ...] = (
    "local-drink",
    "common-drink",
    "local-bottle",
    "beer",
    "wine",
    "cocktaildb-drink",
    "cocktaildb-ingredient",
    "cocktaildb-drink-list",
)

CandidateRecord = Drink | Bottle | BeerWineItem | ExternalIngredient | ExternalDrinkList


class MatchInfo(BaseModel):
    """레코드 매칭 결과 (매칭된 필드 + 점수)."""

    fields: list[str] = Field(default_factory=list, description="매칭된 필드 (검사 순서)")
    score: int = Field(..., ge=0, description="정수 점수")


class MatchDetails(BaseModel):
    """단계 누적 전략에서 사용하는 매칭 상세 정보."""

    name_match: bool | None = None
    ingredient_matches: list[str] | None = None
    tag_matches: list[str] | None = None
    source: MatchSource


class SearchResult(BaseModel):
    """정규화된 검색 결과.

    소스 레코드와 결과 유형, 매칭 정보, 표시용 문자열을 함께 담습니다.
    """

    type: ResultType
    data: CandidateRecord
    match_info: MatchInfo
    display_name: str
    display_details: list[str] = Field(default_factory=list)
    link: str | None = None
    match_type: MatchType | None = None
    match_details: MatchDetails | None = None
    availability: int | None = Field(default=None, description="필수 재료 가용률 (%)")
    total_availability: int | None = Field(default=None, description="전체 재료 가용률 (%)")

    @property
    def id(self) -> str:
        """중복 제거에 사용하는 레코드 식별자."""
        if isinstance(self.data, ExternalDrinkList):
            return f"drink-list:{self.data.ingredient}"
        return self.data.id

    @property
    def score(self) -> int:
        return self.match_info.score

    @property
    def external(self) -> bool:
        return self.type.startswith("cocktaildb-")
