"""재료 재고 관리.

재고가 있는 보틀과 기본 재료(essentials)를 기준으로 재료 보유 여부를 판단합니다.
"""

from .base import DataSource
from .models import Drink
from ..utils.logger import get_logger

logger = get_logger(__name__)


def _normalize(value: str) -> str:
    return value.strip().lower()


def availability_percent(available: int, total: int, empty_default: int = 100) -> int:
    """보유 재료 비율을 정수 백분율로 반환합니다. (0.5는 올림)

    total이 0이면 empty_default를 반환합니다.

    Examples:
        >>> availability_percent(1, 3)
        33
        >>> availability_percent(1, 8)
        13
    """
    if total <= 0:
        return empty_default
    return (200 * available + total) // (2 * total)


class StockInventory:
    """보틀/기본 재료 기반 재고.

    재료 이름(정규화 후)이 다음 중 하나와 일치하면 재고가 있는 것으로 판단합니다:
        - 재고가 있는 보틀의 이름
        - 해당 보틀의 별칭(aka)
        - 해당 보틀의 기주(base spirit)
        - 기본 재료(essentials)

    load_inventory()는 여러 번 호출해도 최초 1회만 데이터 소스를 조회합니다.
    """

    def __init__(self, data_source: DataSource, essentials: list[str] | None = None):
        """StockInventory를 초기화합니다.

        Args:
            data_source: 보틀 목록을 제공하는 데이터 소스
            essentials: 항상 보유 중인 기본 재료 이름 목록
        """
        self.data_source = data_source
        self.essentials = list(essentials or [])
        self._stock: set[str] = set()
        self._loaded = False

    async def load_inventory(self) -> None:
        """재고 목록을 로드합니다. (멱등)"""
        if self._loaded:
            return

        bottles = await self.data_source.fetch_bottles()
        stock: set[str] = {_normalize(e) for e in self.essentials if e.strip()}
        for bottle in bottles:
            if not bottle.in_stock:
                continue
            names = [bottle.name, bottle.base_spirit, *bottle.aka]
            stock.update(_normalize(n) for n in names if n and n.strip())

        self._stock = stock
        self._loaded = True
        logger.info(f"재고 로드 완료: {len(self._stock)}개 재료")

    def is_ingredient_in_stock(self, name: str) -> bool:
        """재료 재고 여부를 반환합니다."""
        if not name:
            return False
        return _normalize(name) in self._stock

    def availability_percentage(self, drink: Drink, empty_default: int = 100) -> int:
        """필수 재료(optional 제외) 기준 가용률. 필수 재료가 없으면 empty_default."""
        required = drink.required_ingredients
        available = sum(1 for i in required if self.is_ingredient_in_stock(i.name))
        return availability_percent(available, len(required), empty_default)

    def total_availability_percentage(self, drink: Drink, empty_default: int = 100) -> int:
        """전체 재료 기준 가용률. 재료가 없으면 empty_default."""
        available = sum(1 for i in drink.ingredients if self.is_ingredient_in_stock(i.name))
        return availability_percent(available, len(drink.ingredients), empty_default)
