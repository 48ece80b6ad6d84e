"""데이터 소스 모듈.

도메인 레코드, 외부 협력자 인터페이스, 기본 구현(정적 데이터 소스, 재고, 테넌트)을 제공합니다.
"""

from .base import DataSource, Inventory
from .catalog import BarDataCatalog, TenantSources, bar_data_key
from .inventory import StockInventory, availability_percent
from .models import (
    BarData,
    BeerWineItem,
    Bottle,
    Drink,
    ExternalDrinkList,
    ExternalDrinkSummary,
    ExternalIngredient,
    Ingredient,
    TenantConfig,
)
from .static import StaticDataSource
from .tenants import DEFAULT_TENANTS, TenantRegistry

__all__ = [
    "DataSource",
    "Inventory",
    "BarDataCatalog",
    "TenantSources",
    "bar_data_key",
    "StockInventory",
    "availability_percent",
    "StaticDataSource",
    "TenantRegistry",
    "DEFAULT_TENANTS",
    "BarData",
    "BeerWineItem",
    "Bottle",
    "Drink",
    "ExternalDrinkList",
    "ExternalDrinkSummary",
    "ExternalIngredient",
    "Ingredient",
    "TenantConfig",
]
