"""바 인벤토리 통합 검색 엔진.

로컬 인벤토리, 공용 음료, CocktailDB를 단계별로 검색하고 결과를 점수순으로 정렬합니다.
"""

from .orchestrator import (
    SearchOrchestrator,
    SearchSession,
    SearchStrategy,
    SessionManager,
    SourceFilters,
)

__version__ = "0.1.0"

__all__ = [
    "SearchOrchestrator",
    "SearchSession",
    "SearchStrategy",
    "SessionManager",
    "SourceFilters",
]
