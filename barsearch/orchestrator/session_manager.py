"""검색 세션 관리.

테넌트별 검색 세션 상태를 보관합니다.
"""

from datetime import datetime

from ..utils.logger import get_logger
from .models import SearchSession

logger = get_logger(__name__)


class SessionManager:
    """테넌트별 검색 세션 저장소.

    세션은 테넌트 slug를 키로 하며 처음 조회할 때 생성됩니다.
    Orchestrator가 유일한 쓰기 주체이고, 소비자는 snapshot()으로 복사본을 읽습니다.
    """

    def __init__(self) -> None:
        self.sessions: dict[str, SearchSession] = {}  # {tenant_slug: SearchSession}

        logger.info("SessionManager 초기화 완료")

    def get_session(self, tenant_slug: str) -> SearchSession:
        """세션을 반환합니다. 없으면 새로 생성합니다.

        Args:
            tenant_slug: 테넌트 식별자

        Returns:
            검색 세션 (변경 가능한 원본)

        Example:
            >>> manager = SessionManager()
            >>> session = manager.get_session("sample")
            >>> session.is_searching
            False
        """
        session = self.sessions.get(tenant_slug)
        if session is None:
            session = SearchSession(tenant_slug=tenant_slug)
            self.sessions[tenant_slug] = session
            logger.info(f"세션 생성 완료: tenant={tenant_slug}")
        return session

    def snapshot(self, tenant_slug: str) -> SearchSession:
        """세션의 깊은 복사본을 반환합니다. (읽기 전용 소비자용)"""
        return self.get_session(tenant_slug).model_copy(deep=True)

    def reset_session(self, tenant_slug: str, search_term: str) -> SearchSession:
        """새 검색을 위해 세션을 초기화하고 검색 중 상태로 설정합니다.

        Args:
            tenant_slug: 테넌트 식별자
            search_term: 새 검색어

        Returns:
            초기화된 세션
        """
        session = self.get_session(tenant_slug)
        session.results = []
        session.progress = []
        session.error = None
        session.search_term = search_term
        session.is_searching = True
        session.updated_at = datetime.now()

        logger.debug(f"세션 초기화: tenant={tenant_slug}, term='{search_term}'")
        return session

    def clear_session(self, tenant_slug: str) -> SearchSession:
        """세션의 검색 상태를 모두 비웁니다."""
        session = self.get_session(tenant_slug)
        session.results = []
        session.progress = []
        session.error = None
        session.search_term = ""
        session.is_searching = False
        session.updated_at = datetime.now()

        logger.info(f"세션 초기화 완료: tenant={tenant_slug}")
        return session

    def delete_session(self, tenant_slug: str) -> None:
        """세션을 삭제합니다."""
        if tenant_slug in self.sessions:
            del self.sessions[tenant_slug]

        logger.info(f"세션 삭제: {tenant_slug}")

    def get_all_sessions(self) -> list[SearchSession]:
        """모든 세션을 반환합니다."""
        return list(self.sessions.values())

    def get_session_count(self) -> int:
        return len(self.sessions)
