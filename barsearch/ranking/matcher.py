"""필드 매칭 함수.

검색어와 레코드 필드를 비교하는 순수 함수들입니다.
비교할 때마다 양쪽 값을 각각 정규화(앞뒤 공백 제거 + 소문자)하며, 원본 값은 바꾸지 않습니다.
"""

import re
from collections.abc import Iterable

NON_ALCOHOLIC_SEARCH_TERMS = frozenset({"non alcoholic", "non-alcoholic", "nonalcoholic", "n/a"})
NON_ALCOHOLIC_TAGS = frozenset({"non alcoholic", "non-alcoholic", "nonalcoholic"})


def normalize(value: str) -> str:
    """비교용 정규화 (앞뒤 공백 제거 + 소문자)."""
    return value.strip().lower()


def field_contains(term: str, value: str | None) -> bool:
    """value가 term을 부분 문자열로 포함하는지 확인합니다.

    value가 비어 있거나 None이면 항상 False입니다.

    Examples:
        >>> field_contains("gin", "Gin Fizz")
        True
        >>> field_contains("gin", None)
        False
    """
    if not value:
        return False
    return normalize(term) in normalize(value)


def array_contains(term: str, values: Iterable[str] | None) -> bool:
    """values 중 하나라도 term을 포함하는지 확인합니다."""
    if not values:
        return False
    return any(field_contains(term, v) for v in values)


def is_exact_match(term: str, value: str | None) -> bool:
    """정규화 후 term과 value가 완전히 같은지 확인합니다."""
    if value is None:
        return False
    return normalize(term) == normalize(value)


def is_full_word_match(term: str, text: str | None) -> bool:
    """term이 text 안에 단어 경계로 구분된 형태로 나타나는지 확인합니다.

    Examples:
        >>> is_full_word_match("gin", "Gin Fizz")
        True
        >>> is_full_word_match("gin", "Ginger Beer")
        False
    """
    if not text:
        return False
    pattern = rf"\b{re.escape(normalize(term))}\b"
    return re.search(pattern, normalize(text), re.IGNORECASE) is not None


def is_non_alcoholic_search(term: str) -> bool:
    return normalize(term) in NON_ALCOHOLIC_SEARCH_TERMS


def is_non_alcoholic_tag(tag: str) -> bool:
    return normalize(tag) in NON_ALCOHOLIC_TAGS


def matching_tags(term: str, tags: Iterable[str] | None) -> list[str]:
    """term과 정확히 일치하는 태그 목록을 반환합니다.

    무알코올 계열 검색어("non alcoholic", "n/a" 등)는 표기가 다른
    모든 무알코올 태그와 일치합니다.
    """
    if not tags:
        return []

    normalized_term = normalize(term)
    non_alcoholic = is_non_alcoholic_search(term)
    matched = []
    for tag in tags:
        if non_alcoholic and is_non_alcoholic_tag(tag):
            matched.append(tag)
        elif normalize(tag) == normalized_term:
            matched.append(tag)
    return matched
