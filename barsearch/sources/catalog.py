"""테넌트별 데이터 소스 카탈로그.

테넌트의 bar_data 키마다 데이터 소스와 재고를 하나씩 만들어 관리합니다.
같은 bar_data를 쓰는 테넌트는 같은 데이터 소스와 재고를 공유합니다.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from .base import DataSource, Inventory
from .inventory import StockInventory
from .models import BarData, TenantConfig
from .static import StaticDataSource
from ..utils.errors import DataSourceError
from ..utils.logger import get_logger

logger = get_logger(__name__)

# 테넌트 설정으로 (데이터 소스, 재고)를 돌려주는 함수
TenantSources = Callable[[TenantConfig], tuple[DataSource, Inventory]]


def bar_data_key(tenant_config: TenantConfig) -> str:
    """테넌트의 바 데이터 키. bar_data가 비어 있으면 slug."""
    return tenant_config.bar_data or tenant_config.slug


class BarDataCatalog:
    """bar_data 키별 데이터 소스/재고 저장소.

    TenantSources로 사용할 수 있도록 호출 가능합니다.

    Examples:
        >>> catalog = BarDataCatalog({"sampleBar": bar_data})
        >>> data_source, inventory = catalog(tenant_config)
    """

    def __init__(self, bar_data: dict[str, BarData]):
        self._bar_data: dict[str, BarData] = dict(bar_data)
        self._sources: dict[str, tuple[StaticDataSource, StockInventory]] = {}

        logger.info(f"BarDataCatalog 초기화 완료: {list(self._bar_data.keys())}")

    @classmethod
    def from_json_files(cls, files: dict[str, str | Path]) -> BarDataCatalog:
        """bar_data 키별 JSON 파일로 카탈로그를 생성합니다.

        Raises:
            DataSourceError: 파일을 읽을 수 없거나 형식이 잘못된 경우
        """
        return cls(
            {key: StaticDataSource.from_json(path).bar_data for key, path in files.items()}
        )

    def __call__(self, tenant_config: TenantConfig) -> tuple[StaticDataSource, StockInventory]:
        return self.get_sources(tenant_config)

    def get_sources(
        self, tenant_config: TenantConfig
    ) -> tuple[StaticDataSource, StockInventory]:
        """테넌트의 데이터 소스와 재고를 반환합니다.

        Raises:
            DataSourceError: 테넌트의 바 데이터가 등록되어 있지 않은 경우
        """
        key = bar_data_key(tenant_config)

        if key not in self._sources:
            bar_data = self._bar_data.get(key)
            if bar_data is None:
                raise DataSourceError(
                    f"바 데이터가 등록되어 있지 않습니다: tenant={tenant_config.slug}, bar_data={key}"
                )
            data_source = StaticDataSource(bar_data)
            self._sources[key] = (
                data_source,
                StockInventory(data_source, essentials=bar_data.essentials),
            )
            logger.debug(f"테넌트 데이터 소스 생성: tenant={tenant_config.slug}, bar_data={key}")

        return self._sources[key]

    def has_bar_data(self, key: str) -> bool:
        return key in self._bar_data
