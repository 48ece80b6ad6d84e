"""외부 협력자 인터페이스.

검색 엔진이 소비하는 데이터 접근/재고 조회 인터페이스를 Protocol로 정의합니다.
"""

from typing import Protocol

from .models import BeerWineItem, Bottle, Drink


class DataSource(Protocol):
    """로컬 인벤토리 데이터 접근 인터페이스.

    모든 메서드는 DataSourceError를 발생시킬 수 있으며,
    소스별 검색 함수가 이를 흡수하여 빈 결과로 처리합니다.
    """

    async def fetch_drinks(self) -> list[Drink]:
        ...

    async def fetch_drinks_common(self) -> list[Drink]:
        ...

    async def fetch_bottles(self) -> list[Bottle]:
        ...

    async def fetch_beer_wine(self) -> list[BeerWineItem]:
        ...


class Inventory(Protocol):
    """재료 재고 조회 인터페이스."""

    async def load_inventory(self) -> None:
        ...

    def is_ingredient_in_stock(self, name: str) -> bool:
        ...

    def availability_percentage(self, drink: Drink, empty_default: int = 100) -> int:
        ...

    def total_availability_percentage(self, drink: Drink, empty_default: int = 100) -> int:
        ...
