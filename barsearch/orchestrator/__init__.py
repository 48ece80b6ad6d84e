"""Orchestrator 모듈.

검색 세션 관리와 단계별 검색 실행을 담당합니다.
"""

from .models import (
    ProgressEntry,
    ProgressLabels,
    SearchSession,
    SearchStrategy,
    SourceFilters,
)
from .orchestrator import SearchOrchestrator
from .session_manager import SessionManager
from .steps import SearchStep, build_drink_steps, build_omni_steps

__all__ = [
    "SearchOrchestrator",
    "SessionManager",
    "SearchSession",
    "SearchStrategy",
    "SourceFilters",
    "ProgressEntry",
    "ProgressLabels",
    "SearchStep",
    "build_omni_steps",
    "build_drink_steps",
]
