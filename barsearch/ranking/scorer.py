"""검색 점수 계산.

두 가지 점수 정책을 제공합니다.

- 필드 개수 정책 (omni 전략): 소스별 기본 가중치 + 매칭된 필드 보너스
- 매칭 유형 정책 (drinks 전략): 매칭 종류별 기본 점수 + 단어/정확 일치 보너스,
  같은 레코드에 대한 점수는 단계 간에 누적됩니다.

모든 점수는 정수 연산만 사용합니다.
"""

from ..sources.inventory import availability_percent
from .matcher import is_exact_match, is_full_word_match

# 소스별 기본 가중치
BASE_FIRST_PARTY = 3  # 로컬 음료, 보틀
BASE_SHARED = 2  # 공용 음료, 맥주, 와인
BASE_EXTERNAL = 1  # CocktailDB

# 매칭 유형 정책 기본 점수
NAME_MATCH_BASE = 3
EXTERNAL_NAME_MATCH_BASE = 2
INGREDIENT_MATCH_BASE = 2
EXACT_FILTER_SCORE = 1

__all__ = [
    "BASE_FIRST_PARTY",
    "BASE_SHARED",
    "BASE_EXTERNAL",
    "NAME_MATCH_BASE",
    "EXTERNAL_NAME_MATCH_BASE",
    "INGREDIENT_MATCH_BASE",
    "EXACT_FILTER_SCORE",
    "field_count_score",
    "name_match_score",
    "external_name_match_score",
    "ingredient_match_score",
    "availability_percent",
]


def field_count_score(
    base: int,
    matched_fields: list[str],
    term: str,
    name: str | None,
) -> int:
    """필드 개수 정책으로 점수를 계산합니다.

    score = base
          + 1 ("name" 필드 매칭)
          + 1 (2개 이상 필드 매칭)
          + 1 (이름 정확히 일치)

    Args:
        base: 소스 기본 가중치 (3/2/1)
        matched_fields: 매칭된 필드 이름 목록
        term: 검색어
        name: 레코드 이름 (정확 일치 비교 대상)

    Returns:
        정수 점수

    Examples:
        >>> field_count_score(3, ["name", "ingredients"], "gin", "Gin Fizz")
        5
        >>> field_count_score(3, ["name"], "gin", "Gin")
        5
    """
    score = base

    if "name" in matched_fields:
        score += 1

    if len(matched_fields) > 1:
        score += 1

    if name and is_exact_match(term, name):
        score += 1

    return score


def _common_bonus(include_common: bool, is_common: bool) -> int:
    # 공용 음료를 함께 검색하는 테넌트에서 자체 음료를 우선
    return 1 if include_common and not is_common else 0


def name_match_score(term: str, name: str, *, include_common: bool, is_common: bool) -> int:
    """로컬/공용 음료 이름 부분 일치 점수."""
    score = NAME_MATCH_BASE
    if is_full_word_match(term, name):
        score += 1
    if is_exact_match(term, name):
        score += 1
    return score + _common_bonus(include_common, is_common)


def external_name_match_score(term: str, name: str) -> int:
    """CocktailDB 음료 이름 검색 결과 점수."""
    score = EXTERNAL_NAME_MATCH_BASE
    if is_full_word_match(term, name):
        score += 1
    if is_exact_match(term, name):
        score += 1
    return score


def ingredient_match_score(
    term: str,
    matched_ingredients: list[str],
    *,
    include_common: bool,
    is_common: bool,
) -> int:
    """재료 부분 일치 점수.

    매칭된 재료 중 하나라도 단어 단위로 일치하면 +1입니다.
    """
    score = INGREDIENT_MATCH_BASE
    if any(is_full_word_match(term, name) for name in matched_ingredients):
        score += 1
    return score + _common_bonus(include_common, is_common)
