"""검색 단계 결과 통합.

단계별 검색 결과를 하나의 결과 목록으로 합칩니다.

- PartitionReconciler: 단계 결과를 그대로 이어 붙입니다. (중복 제거 없음)
- AccumulationReconciler: 레코드 식별자 기준으로 병합하고 점수를 누적합니다.
"""

from .models import MatchDetails, SearchResult
from ..utils.logger import get_logger

logger = get_logger(__name__)


class PartitionReconciler:
    """유형별로 분리된 결과를 이어 붙이는 Reconciler.

    결과 유형(local-drink, beer 등)이 서로 겹치지 않으므로
    단계 간 중복 제거를 하지 않습니다.
    """

    def __init__(self) -> None:
        self._results: list[SearchResult] = []

    def merge(
        self,
        results: list[SearchResult],
        append_ingredient_matches: bool = False,
    ) -> int:
        """단계 결과를 추가하고 추가된 개수를 반환합니다.

        append_ingredient_matches는 누적 Reconciler와 인터페이스를 맞추기 위한 인자이며 무시됩니다.
        """
        self._results.extend(results)
        return len(results)

    @property
    def results(self) -> list[SearchResult]:
        return list(self._results)

    def __len__(self) -> int:
        return len(self._results)


class AccumulationReconciler:
    """레코드 식별자 기준으로 결과를 누적하는 Reconciler.

    같은 식별자가 다시 나오면:
        - 점수를 더합니다
        - 매칭 필드를 합칩니다 (순서 유지, 중복 제거)
        - 이름 매칭과 재료 매칭이 모두 있으면 match_type을 "both"로 바꿉니다
        - 태그/재료 매칭 상세는 뒤 단계 값으로 덮어씁니다
          (append_ingredient_matches=True인 단계는 재료 매칭을 뒤에 추가)

    Examples:
        >>> reconciler = AccumulationReconciler()
        >>> reconciler.merge(name_results)
        >>> reconciler.merge(ingredient_results)
        >>> reconciler.results[0].match_type
        'both'
    """

    def __init__(self) -> None:
        self._by_id: dict[str, SearchResult] = {}

    def merge(
        self,
        results: list[SearchResult],
        append_ingredient_matches: bool = False,
    ) -> int:
        """단계 결과를 병합합니다.

        Args:
            results: 한 단계에서 찾은 결과 목록
            append_ingredient_matches: 재료 매칭 목록을 덮어쓰지 않고 뒤에 추가할지 여부

        Returns:
            단계가 찾은 결과 수 (병합 전 기준)
        """
        merged = 0
        for result in results:
            existing = self._by_id.get(result.id)
            if existing is None:
                self._by_id[result.id] = result.model_copy(deep=True)
                continue

            self._accumulate(existing, result, append_ingredient_matches)
            merged += 1

        if merged:
            logger.debug(f"결과 병합: incoming={len(results)}, merged={merged}")
        return len(results)

    def _accumulate(
        self,
        existing: SearchResult,
        incoming: SearchResult,
        append_ingredient_matches: bool,
    ) -> None:
        existing.match_info.score += incoming.match_info.score
        for field in incoming.match_info.fields:
            if field not in existing.match_info.fields:
                existing.match_info.fields.append(field)

        if (
            existing.match_type
            and incoming.match_type
            and existing.match_type != incoming.match_type
        ):
            existing.match_type = "both"

        if incoming.match_details is None:
            return
        if existing.match_details is None:
            existing.match_details = incoming.match_details.model_copy(deep=True)
            return

        details: MatchDetails = existing.match_details
        incoming_details = incoming.match_details

        if incoming_details.name_match:
            details.name_match = True

        if incoming_details.tag_matches is not None:
            details.tag_matches = list(incoming_details.tag_matches)

        if incoming_details.ingredient_matches is not None:
            if append_ingredient_matches:
                details.ingredient_matches = [
                    *(details.ingredient_matches or []),
                    *incoming_details.ingredient_matches,
                ]
            else:
                details.ingredient_matches = list(incoming_details.ingredient_matches)

    @property
    def results(self) -> list[SearchResult]:
        """삽입 순서대로 병합된 결과 목록."""
        return list(self._by_id.values())

    def __len__(self) -> int:
        return len(self._by_id)
