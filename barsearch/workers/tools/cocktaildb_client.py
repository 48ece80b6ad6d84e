"""CocktailDB HTTP 클라이언트 관리

httpx.AsyncClient를 감싸 CocktailDB JSON API를 호출합니다.
프로세스 전역에서 하나의 클라이언트 인스턴스를 공유합니다.
"""

from __future__ import annotations

from typing import Any

import httpx

from ...utils.config import get_config
from ...utils.errors import ExternalAPIError
from ...utils.logger import get_logger

logger = get_logger(__name__)


class CocktailDBClient:
    """CocktailDB JSON API 클라이언트

    Attributes:
        base_url: API 기본 URL (끝에 "/" 포함)
        timeout_seconds: 요청 타임아웃 (초)

    Examples:
        >>> client = CocktailDBClient("https://www.thecocktaildb.com/api/json/v1/1/")
        >>> data = await client.get_json("search.php", {"s": "margarita"})
        >>> data["drinks"][0]["strDrink"]
        'Margarita'
    """

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """CocktailDB 클라이언트를 초기화합니다.

        Args:
            base_url: API 기본 URL
            timeout_seconds: 요청 타임아웃 (초)
            transport: httpx 전송 계층 (테스트에서 httpx.MockTransport 주입용)
        """
        self.base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    async def get_json(self, endpoint: str, params: dict[str, str] | None = None) -> dict[str, Any]:
        """GET 요청을 보내고 JSON 본문을 반환합니다.

        응답 본문이 비어 있으면 빈 딕셔너리를 반환합니다.

        Args:
            endpoint: 엔드포인트 경로 (예: "search.php")
            params: 쿼리 파라미터

        Returns:
            JSON 객체

        Raises:
            ExternalAPIError: 네트워크 오류, 2xx 외 응답, JSON 파싱 실패 시
        """
        url = f"{self.base_url}{endpoint}"

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_seconds, transport=self._transport
            ) as client:
                response = await client.get(url, params=params)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ExternalAPIError(
                f"CocktailDB 응답 오류: {endpoint} ({e.response.status_code})",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise ExternalAPIError(f"CocktailDB 요청 실패: {endpoint}: {e}") from e

        if not response.content.strip():
            return {}

        try:
            data = response.json()
        except ValueError as e:
            raise ExternalAPIError(f"CocktailDB 응답 파싱 실패: {endpoint}") from e

        if not isinstance(data, dict):
            raise ExternalAPIError(f"CocktailDB 응답 형식 오류: {endpoint}")

        logger.debug(f"CocktailDB 호출 완료: endpoint={endpoint}, params={params}")
        return data


# 전역 클라이언트 인스턴스
_client: CocktailDBClient | None = None


def get_cocktaildb_client() -> CocktailDBClient:
    """CocktailDB 클라이언트 싱글톤을 반환합니다.

    설정(COCKTAILDB_*)으로 최초 1회 생성합니다.

    Returns:
        CocktailDBClient 인스턴스
    """
    global _client

    if _client is None:
        settings = get_config().cocktaildb
        _client = CocktailDBClient(
            base_url=settings.base_url,
            timeout_seconds=settings.timeout_seconds,
        )
        logger.info(f"CocktailDB 클라이언트 초기화 완료: {settings.base_url}")

    return _client


def set_cocktaildb_client(client: CocktailDBClient) -> None:
    """전역 클라이언트를 교체합니다. (테스트/주입용)"""
    global _client
    _client = client


def reset_cocktaildb_client() -> None:
    """전역 클라이언트를 제거합니다. (테스트용)"""
    global _client
    _client = None
