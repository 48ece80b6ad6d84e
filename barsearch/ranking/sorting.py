"""검색 결과 정렬."""

import unicodedata
from collections.abc import Callable
from typing import Any

from .models import SearchResult

SORT_KEYS = ("relevance", "name", "type", "availability")


def collation_key(text: str) -> tuple[str, str, str]:
    """로캘 비교에 가까운 문자열 정렬 키.

    악센트를 제거하고 대소문자를 무시한 값을 1차 키로,
    대소문자만 무시한 값을 2차 키로, 원문을 마지막 키로 사용합니다.

    Examples:
        >>> sorted(["b", "Á", "a"], key=collation_key)
        ['a', 'Á', 'b']
    """
    folded = text.casefold()
    stripped = "".join(
        ch for ch in unicodedata.normalize("NFKD", folded) if not unicodedata.combining(ch)
    )
    return (stripped, folded, text)


def _relevance_key(result: SearchResult) -> tuple[Any, ...]:
    return (-result.score, collation_key(result.display_name))


def _name_key(result: SearchResult) -> tuple[Any, ...]:
    return collation_key(result.display_name)


def _type_key(result: SearchResult) -> tuple[Any, ...]:
    return (result.type, collation_key(result.display_name))


def _availability_key(result: SearchResult) -> tuple[Any, ...]:
    # 가용률이 없는 결과(보틀, 맥주 등)는 음료 결과 뒤로
    if result.availability is None:
        return (1, 0, 0, result.external, collation_key(result.display_name))
    return (
        0,
        -result.availability,
        -(result.total_availability or 0),
        result.external,
        collation_key(result.display_name),
    )


_SORT_FUNCS: dict[str, Callable[[SearchResult], tuple[Any, ...]]] = {
    "relevance": _relevance_key,
    "name": _name_key,
    "type": _type_key,
    "availability": _availability_key,
}


def sort_results(results: list[SearchResult], key: str = "relevance") -> list[SearchResult]:
    """결과 목록을 정렬한 새 목록을 반환합니다.

    Args:
        results: 정렬할 결과 목록
        key: 정렬 기준
            - "relevance": 점수 내림차순, 동점이면 이름 오름차순
            - "name": 표시 이름 오름차순
            - "type": 결과 유형, 그다음 이름
            - "availability": 필수 재료 가용률, 전체 가용률 내림차순,
              로컬 결과 우선, 그다음 이름

    Returns:
        정렬된 새 결과 목록

    Raises:
        ValueError: 지원하지 않는 정렬 기준인 경우
    """
    sort_func = _SORT_FUNCS.get(key)
    if sort_func is None:
        raise ValueError(f"지원하지 않는 정렬 기준: {key} (사용 가능: {', '.join(SORT_KEYS)})")
    return sorted(results, key=sort_func)
