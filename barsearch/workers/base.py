"""검색 Worker 베이스 클래스

모든 검색 Worker의 공통 기능(후보 목록 캐시, 재고 로드, 가용률 계산)을 제공합니다.
"""

from collections.abc import Awaitable, Callable
from datetime import datetime
from typing import Any

from ..sources.base import DataSource, Inventory
from ..sources.models import BeerWineItem, Bottle, Drink, TenantConfig
from ..utils.errors import DataSourceError
from ..utils.logger import get_logger
from .tools.cocktaildb_client import CocktailDBClient, get_cocktaildb_client

logger = get_logger(__name__)


class BaseSearchWorker:
    """검색 Worker 베이스 클래스

    한 번의 검색 실행 동안 사용하는 Worker입니다. 데이터 소스의 각 목록은
    검색 1회당 최대 한 번만 조회하고 캐시합니다.

    데이터 소스가 DataSourceError를 발생시키면 로그를 남기고 빈 목록으로 처리합니다.

    Attributes:
        tenant_slug: 테넌트 식별자 (링크 생성에 사용)
        tenant_config: 검색 시작 시점에 읽은 테넌트 설정
        data_source: 로컬 인벤토리 데이터 소스
        inventory: 재료 재고

    Examples:
        >>> class MyWorker(BaseSearchWorker):
        ...     async def search_everything(self, term: str) -> list[SearchResult]:
        ...         drinks = await self.local_drinks()
        ...         ...
    """

    def __init__(
        self,
        tenant_slug: str,
        tenant_config: TenantConfig,
        data_source: DataSource,
        inventory: Inventory,
        client: CocktailDBClient | None = None,
        lookup_batch_size: int = 10,
    ):
        """Worker를 초기화합니다.

        Args:
            tenant_slug: 테넌트 식별자
            tenant_config: 테넌트 설정
            data_source: 데이터 소스
            inventory: 재고
            client: CocktailDB 클라이언트 (None이면 전역 클라이언트 사용)
            lookup_batch_size: CocktailDB 상세 조회 배치 크기
        """
        self.tenant_slug = tenant_slug
        self.tenant_config = tenant_config
        self.data_source = data_source
        self.inventory = inventory
        self.lookup_batch_size = lookup_batch_size
        self._client = client
        self._cache: dict[str, list[Any]] = {}
        self._inventory_ready = False

        logger.debug(f"{self.__class__.__name__} 초기화 완료 (tenant={tenant_slug})")

    @property
    def client(self) -> CocktailDBClient:
        if self._client is None:
            self._client = get_cocktaildb_client()
        return self._client

    @property
    def include_common(self) -> bool:
        return self.tenant_config.include_common_drinks

    async def _fetch_cached(
        self, key: str, fetch: Callable[[], Awaitable[list[Any]]]
    ) -> list[Any]:
        if key in self._cache:
            return self._cache[key]

        try:
            items = await fetch()
        except DataSourceError as e:
            logger.error(f"데이터 소스 조회 실패: source={key}, {e}", exc_info=True)
            items = []

        self._cache[key] = items
        return items

    async def local_drinks(self) -> list[Drink]:
        return await self._fetch_cached("drinks", self.data_source.fetch_drinks)

    async def common_drinks(self) -> list[Drink]:
        return await self._fetch_cached("drinks_common", self.data_source.fetch_drinks_common)

    async def bottles(self) -> list[Bottle]:
        return await self._fetch_cached("bottles", self.data_source.fetch_bottles)

    async def beer_wine(self) -> list[BeerWineItem]:
        return await self._fetch_cached("beer_wine", self.data_source.fetch_beer_wine)

    async def ensure_inventory(self) -> None:
        """재고를 로드합니다. 실패하면 모든 재료를 재고 없음으로 취급합니다."""
        if self._inventory_ready:
            return

        try:
            await self.inventory.load_inventory()
        except DataSourceError as e:
            logger.error(f"재고 로드 실패: {e}", exc_info=True)
        self._inventory_ready = True

    def availability(self, drink: Drink, empty_default: int = 100) -> int:
        """필수 재료 가용률 (%). 필수 재료가 없으면 empty_default."""
        return self.inventory.availability_percentage(drink, empty_default)

    def total_availability(self, drink: Drink, empty_default: int = 100) -> int:
        """전체 재료 가용률 (%). 재료가 없으면 empty_default."""
        return self.inventory.total_availability_percentage(drink, empty_default)

    def drink_link(self, drink: Drink) -> str:
        return f"/{self.tenant_slug}/drinks/{drink.id}"

    def get_status(self) -> dict[str, Any]:
        """Worker의 현재 상태를 반환합니다.

        디버깅 및 모니터링을 위한 상태 정보입니다.

        Returns:
            상태 정보
            {
                "worker_type": str,
                "tenant": str,
                "include_common": bool,
                "cached_sources": list[str],
                "timestamp": str
            }
        """
        return {
            "worker_type": self.__class__.__name__,
            "tenant": self.tenant_slug,
            "include_common": self.include_common,
            "cached_sources": sorted(self._cache.keys()),
            "timestamp": datetime.now().isoformat(),
        }
