"""Orchestrator 데이터 모델.

검색 세션, 진행 상황, 소스 필터, 검색 전략 등의 데이터 구조를 정의합니다.
"""

from datetime import datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

from ..ranking.models import SearchResult

ProgressStatus = Literal["searching", "complete", "error"]

EMPTY_TERM_MESSAGE = "Please enter a search term"


class SearchStrategy(str, Enum):
    """검색 전략.

    - OMNI: 필터로 선택한 유형별 검색, 필드 개수 점수, 결과 분리
    - DRINKS: 테넌트 설정 기반 음료 검색, 매칭 유형 점수, 결과 누적
    """

    OMNI = "omni"
    DRINKS = "drinks"

    @property
    def error_message(self) -> str:
        """검색 실행 중 예기치 않은 오류가 발생했을 때 사용자에게 보여줄 메시지."""
        if self is SearchStrategy.DRINKS:
            return "An error occurred while searching. Some results may be missing."
        return "An error occurred while searching. Please try again."


class ProgressLabels(BaseModel):
    """진행 상황 표시 문구. found는 {count} 자리표시자를 사용합니다."""

    searching: str
    found_none: str
    found: str


class ProgressEntry(BaseModel):
    """검색 단계 하나의 진행 상황."""

    step: str = Field(..., description="단계 식별자")
    count: int = Field(default=0, ge=0, description="단계가 찾은 결과 수 (병합 전)")
    status: ProgressStatus = "searching"
    labels: ProgressLabels

    @property
    def message(self) -> str:
        """현재 상태에 맞는 표시 문구."""
        if self.status == "searching":
            return self.labels.searching
        if self.count == 0:
            return self.labels.found_none
        return self.labels.found.replace("{count}", str(self.count))


class SearchSession(BaseModel):
    """테넌트별 검색 세션 상태.

    Orchestrator만 갱신하며 소비자는 snapshot을 읽기 전용으로 사용합니다.
    """

    tenant_slug: str = Field(..., description="테넌트 식별자")
    is_searching: bool = False
    search_term: str = ""
    error: str | None = None
    progress: list[ProgressEntry] = Field(default_factory=list)
    results: list[SearchResult] = Field(default_factory=list)
    updated_at: datetime = Field(default_factory=datetime.now, description="마지막 업데이트 시각")

    @field_serializer("updated_at")
    def serialize_datetime(self, value: datetime) -> str:
        """datetime을 ISO 형식으로 직렬화."""
        return value.isoformat()


class SourceFilters(BaseModel):
    """omni 검색에서 사용할 소스 선택 필터. 기본값은 모두 사용."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    local_drinks: bool = True
    common_drinks: bool = True
    local_bottles: bool = True
    beers: bool = True
    wines: bool = True
    cocktaildb_drinks: bool = True
    cocktaildb_ingredients: bool = True
    cocktaildb_drink_lists: bool = True

    def enabled_keys(self) -> list[str]:
        """활성화된 필터 키 목록 (camelCase, 정의 순서)."""
        return [
            to_camel(name)
            for name in type(self).model_fields
            if getattr(self, name)
        ]
