"""검색 단계 테이블.

전략별 검색 단계를 실행 순서대로 정의합니다. 각 단계는 키, 진행 문구,
검색 함수(코루틴 팩토리)로 구성되며 Orchestrator가 순서대로 실행합니다.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from ..ranking.models import SearchResult
from ..workers.drinks import DrinkSearchWorker
from ..workers.omni import OmniSearchWorker
from .models import ProgressLabels, SourceFilters

StepRunner = Callable[[], Awaitable[list[SearchResult]]]


@dataclass(frozen=True)
class SearchStep:
    """검색 단계 하나.

    Attributes:
        key: 단계 식별자 (진행 상황의 step 값)
        labels: 진행 상황 표시 문구
        run: 호출하면 단계 검색을 수행하는 코루틴을 반환하는 함수
        append_ingredient_matches: 결과 누적 시 재료 매칭 목록을 덮어쓰지 않고 추가할지 여부
    """

    key: str
    labels: ProgressLabels
    run: StepRunner
    append_ingredient_matches: bool = False


def _labels(searching: str, found_none: str, found: str) -> ProgressLabels:
    return ProgressLabels(searching=searching, found_none=found_none, found=found)


# (필터 키, 진행 문구, Worker 메서드 이름)
OMNI_STEP_TABLE: list[tuple[str, ProgressLabels, str]] = [
    (
        "localDrinks",
        _labels("Searching local drinks...", "No local drinks found", "Found {count} local drink(s)"),
        "search_local_drinks",
    ),
    (
        "commonDrinks",
        _labels("Searching common drinks...", "No common drinks found", "Found {count} common drink(s)"),
        "search_common_drinks",
    ),
    (
        "localBottles",
        _labels("Searching bottles...", "No bottles found", "Found {count} bottle(s)"),
        "search_local_bottles",
    ),
    (
        "beers",
        _labels("Searching beers...", "No beers found", "Found {count} beer(s)"),
        "search_beers",
    ),
    (
        "wines",
        _labels("Searching wines...", "No wines found", "Found {count} wine(s)"),
        "search_wines",
    ),
    (
        "cocktaildbDrinks",
        _labels(
            "Searching CocktailDB drinks...",
            "No external drinks found",
            "Found {count} external drink(s)",
        ),
        "search_cocktaildb_drinks",
    ),
    (
        "cocktaildbIngredients",
        _labels(
            "Searching CocktailDB ingredients...",
            "No external ingredients found",
            "Found {count} external ingredient(s)",
        ),
        "search_cocktaildb_ingredients",
    ),
    (
        "cocktaildbDrinkLists",
        _labels(
            "Searching CocktailDB drink lists...",
            "No external drink lists found",
            "Found {count} external drink list(s)",
        ),
        "search_cocktaildb_drink_lists",
    ),
]


def build_omni_steps(
    worker: OmniSearchWorker,
    term: str,
    filters: SourceFilters,
) -> list[SearchStep]:
    """omni 검색 단계 목록을 만듭니다.

    고정된 우선순위 순서에서 필터로 활성화된 단계만 포함합니다.

    Args:
        worker: omni 검색 Worker
        term: 검색어
        filters: 소스 선택 필터

    Returns:
        실행 순서대로 정렬된 단계 목록

    Example:
        >>> steps = build_omni_steps(worker, "gin", SourceFilters(beers=False))
        >>> [s.key for s in steps][:4]
        ['localDrinks', 'commonDrinks', 'localBottles', 'wines']
    """
    enabled = set(filters.enabled_keys())
    steps = []

    for key, labels, method_name in OMNI_STEP_TABLE:
        if key not in enabled:
            continue
        method = getattr(worker, method_name)
        steps.append(SearchStep(key=key, labels=labels, run=lambda m=method: m(term)))

    return steps


def build_drink_steps(
    worker: DrinkSearchWorker,
    term: str,
    include_common: bool,
) -> list[SearchStep]:
    """음료 검색 단계 목록을 만듭니다.

    순서: local-name, common-name*, category, tags, local-ingredient,
    common-ingredient*, cocktaildb-name, cocktaildb-ingredient
    (* 테넌트가 공용 음료를 포함할 때만)
    """
    steps = [
        SearchStep(
            key="local-name",
            labels=_labels(
                "Searching local drinks by name",
                "No local drinks found by name",
                "Found {count} local drinks by name",
            ),
            run=lambda: worker.run_name_step(term, common=False),
        ),
    ]

    if include_common:
        steps.append(
            SearchStep(
                key="common-name",
                labels=_labels(
                    "Searching common drinks by name",
                    "No common drinks found by name",
                    "Found {count} common drinks by name",
                ),
                run=lambda: worker.run_name_step(term, common=True),
            )
        )

    steps += [
        SearchStep(
            key="category",
            labels=_labels(
                "Searching by category",
                "No drinks found by category",
                "Found {count} drinks by category",
            ),
            run=lambda: worker.run_category_step(term),
        ),
        SearchStep(
            key="tags",
            labels=_labels(
                "Searching by tags",
                "No drinks found by tags",
                "Found {count} drinks by tags",
            ),
            run=lambda: worker.run_tags_step(term),
        ),
        SearchStep(
            key="local-ingredient",
            labels=_labels(
                "Searching local drinks by ingredient",
                "No local drinks found by ingredient",
                "Found {count} local drinks by ingredient",
            ),
            run=lambda: worker.run_ingredient_step(term, common=False),
        ),
    ]

    if include_common:
        steps.append(
            SearchStep(
                key="common-ingredient",
                labels=_labels(
                    "Searching common drinks by ingredient",
                    "No common drinks found by ingredient",
                    "Found {count} common drinks by ingredient",
                ),
                run=lambda: worker.run_ingredient_step(term, common=True),
            )
        )

    steps += [
        SearchStep(
            key="cocktaildb-name",
            labels=_labels(
                "Searching CocktailDB by name",
                "No CocktailDB drinks found by name",
                "Found {count} CocktailDB drinks by name",
            ),
            run=lambda: worker.search_cocktaildb_by_name(term),
        ),
        SearchStep(
            key="cocktaildb-ingredient",
            labels=_labels(
                "Searching CocktailDB by ingredient",
                "No CocktailDB drinks found by ingredient",
                "Found {count} CocktailDB drinks by ingredient",
            ),
            run=lambda: worker.search_cocktaildb_by_ingredient(term),
            append_ingredient_matches=True,
        ),
    ]

    return steps
