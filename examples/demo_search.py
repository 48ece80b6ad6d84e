#!/usr/bin/env python3
"""SearchOrchestrator 데모 스크립트

샘플 바 데이터로 두 가지 검색 전략(omni, drinks)을 시연합니다.
몇 가지 검색어를 처리하고 진행 상황과 상위 결과를 출력합니다.

실행 방법:
    python examples/demo_search.py

환경 변수 (선택):
    - DATA_FILE (기본값: data/sample_bar.json)
    - SEARCH_STEP_DELAY_MS (단계 사이 표시용 지연)
    - COCKTAILDB_BASE_URL
"""

import asyncio
import os
import sys
from datetime import datetime
from pathlib import Path

# 프로젝트 루트를 Python 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# .env 파일 명시적으로 로드
from dotenv import load_dotenv

env_path = project_root / ".env"
load_dotenv(env_path)

os.environ.setdefault("DATA_FILE", str(project_root / "data" / "sample_bar.json"))

from barsearch.orchestrator import SearchOrchestrator, SearchSession, SearchStrategy
from barsearch.utils.logger import get_logger

logger = get_logger(__name__)


# 데모용 검색어
DEMO_QUERIES = [
    {"term": "gin", "strategy": SearchStrategy.OMNI, "description": "이름/재료/보틀 통합 검색"},
    {"term": "campari", "strategy": SearchStrategy.DRINKS, "description": "재료 기반 음료 검색"},
    {"term": "non alcoholic", "strategy": SearchStrategy.DRINKS, "description": "무알코올 태그 검색"},
    {"term": "stout", "strategy": SearchStrategy.OMNI, "description": "맥주 스타일 검색"},
]

TOP_RESULTS = 5


def print_separator(char: str = "=", length: int = 80) -> None:
    """구분선을 출력합니다."""
    print(char * length)


def print_header(title: str) -> None:
    """헤더를 출력합니다."""
    print_separator()
    print(f"  {title}")
    print_separator()
    print()


def print_session(session: SearchSession) -> None:
    """진행 상황과 상위 결과를 출력합니다."""
    print("🔎 진행 상황:")
    for entry in session.progress:
        mark = {"complete": "✓", "error": "✗"}.get(entry.status, "…")
        print(f"   {mark} {entry.message}")
    print()

    if session.error:
        print(f"⚠️  오류: {session.error}")

    print(f"📋 결과: {len(session.results)}개")
    for i, result in enumerate(session.results[:TOP_RESULTS], 1):
        details = ", ".join(result.display_details)
        print(f"   {i}. [{result.score}] {result.display_name} ({result.type}) - {details}")
    print()


async def run_demo() -> None:
    """데모를 실행합니다."""
    print_header("🍸 바 통합 검색 데모")

    try:
        orchestrator = SearchOrchestrator.create_default()
        print("   ✓ SearchOrchestrator 생성 완료")
        print()
    except Exception as e:
        print(f"❌ 초기화 실패: {e}")
        logger.exception("초기화 중 에러 발생")
        sys.exit(1)

    start_time = datetime.now()

    for i, query in enumerate(DEMO_QUERIES, 1):
        print(f"\n📝 검색 {i}/{len(DEMO_QUERIES)}: '{query['term']}' ({query['strategy'].value})")
        print(f"   설명: {query['description']}")
        print()

        session = await orchestrator.perform_search(
            "sample", query["term"], strategy=query["strategy"]
        )
        print_session(session)
        print_separator("-")

    total_time = (datetime.now() - start_time).total_seconds()
    print(f"⏱️  전체 소요 시간: {total_time:.2f}초")


def main() -> None:
    """메인 함수."""
    try:
        asyncio.run(run_demo())
    except KeyboardInterrupt:
        print("\n\n⚠️  사용자가 중단했습니다.")
        sys.exit(0)


if __name__ == "__main__":
    main()
