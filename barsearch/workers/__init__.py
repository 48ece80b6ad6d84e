"""검색 Worker 모듈.

소스별 검색 함수(로컬 음료, 공용 음료, 보틀, 맥주/와인, CocktailDB)를 제공합니다.
"""

from .base import BaseSearchWorker
from .drinks import DrinkSearchWorker
from .omni import OmniSearchWorker

__all__ = ["BaseSearchWorker", "DrinkSearchWorker", "OmniSearchWorker"]
