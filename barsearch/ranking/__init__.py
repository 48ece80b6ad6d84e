"""검색 랭킹 모듈.

필드 매칭, 점수 계산, 결과 통합, 정렬을 담당합니다.
"""

from .matcher import (
    array_contains,
    field_contains,
    is_exact_match,
    is_full_word_match,
    matching_tags,
    normalize,
)
from .models import (
    RESULT_TYPES,
    MatchDetails,
    MatchInfo,
    MatchSource,
    MatchType,
    ResultType,
    SearchResult,
)
from .reconciler import AccumulationReconciler, PartitionReconciler
from .scorer import (
    availability_percent,
    external_name_match_score,
    field_count_score,
    ingredient_match_score,
    name_match_score,
)
from .sorting import SORT_KEYS, collation_key, sort_results

__all__ = [
    "normalize",
    "field_contains",
    "array_contains",
    "is_exact_match",
    "is_full_word_match",
    "matching_tags",
    "RESULT_TYPES",
    "MatchDetails",
    "MatchInfo",
    "MatchSource",
    "MatchType",
    "ResultType",
    "SearchResult",
    "AccumulationReconciler",
    "PartitionReconciler",
    "availability_percent",
    "field_count_score",
    "name_match_score",
    "external_name_match_score",
    "ingredient_match_score",
    "SORT_KEYS",
    "collation_key",
    "sort_results",
]
