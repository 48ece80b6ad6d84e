"""인메모리 데이터 소스

BarData 하나를 감싸서 DataSource 인터페이스를 제공합니다.
JSON 파일(data/sample_bar.json 형식)에서 로드할 수도 있습니다.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from .models import BarData, BeerWineItem, Bottle, Drink
from ..utils.errors import DataSourceError
from ..utils.logger import get_logger

logger = get_logger(__name__)


class StaticDataSource:
    """BarData 기반 데이터 소스

    목록을 반환할 때마다 복사본을 돌려주므로 호출자가 결과를 수정해도
    원본 데이터에는 영향이 없습니다.

    Examples:
        >>> source = StaticDataSource.from_json("data/sample_bar.json")
        >>> drinks = await source.fetch_drinks()
    """

    def __init__(self, bar_data: BarData):
        self.bar_data = bar_data

    @classmethod
    def from_json(cls, path: str | Path) -> StaticDataSource:
        """JSON 파일에서 데이터 소스를 생성합니다.

        Args:
            path: BarData 형식의 JSON 파일 경로

        Returns:
            StaticDataSource 인스턴스

        Raises:
            DataSourceError: 파일이 없거나 읽을 수 없거나 형식이 잘못된 경우
        """
        json_path = Path(path)
        if not json_path.exists():
            raise DataSourceError(f"바 데이터 파일을 찾을 수 없습니다: {json_path}")

        try:
            with open(json_path, encoding="utf-8") as f:
                raw = json.load(f)
            bar_data = BarData.model_validate(raw)
        except OSError as e:
            raise DataSourceError(f"바 데이터 파일을 읽을 수 없습니다: {json_path}: {e}") from e
        except (UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
            raise DataSourceError(f"바 데이터 파일 형식 오류: {json_path}: {e}") from e

        logger.info(
            f"바 데이터 로드 완료: file={json_path.name}, drinks={len(bar_data.drinks)}, "
            f"common={len(bar_data.common_drinks)}, bottles={len(bar_data.bottles)}, "
            f"beer_wine={len(bar_data.beer_wine)}"
        )
        return cls(bar_data)

    async def fetch_drinks(self) -> list[Drink]:
        return [d.model_copy(deep=True) for d in self.bar_data.drinks]

    async def fetch_drinks_common(self) -> list[Drink]:
        return [d.model_copy(deep=True) for d in self.bar_data.common_drinks]

    async def fetch_bottles(self) -> list[Bottle]:
        return [b.model_copy(deep=True) for b in self.bar_data.bottles]

    async def fetch_beer_wine(self) -> list[BeerWineItem]:
        return [i.model_copy(deep=True) for i in self.bar_data.beer_wine]
