"""커스텀 예외 클래스 정의.

바 검색 엔진 전반에서 사용되는 예외 계층 구조를 제공합니다.
"""


class BarSearchError(Exception):
    """barsearch 관련 모든 예외의 베이스 클래스."""

    pass


class ConfigError(BarSearchError):
    """설정 관련 예외.

    환경 변수 값이 잘못되었거나 설정 로드에 실패한 경우 발생합니다.
    """

    pass


class DataSourceError(BarSearchError):
    """로컬 데이터 소스 관련 예외.

    음료/보틀/맥주·와인 목록 조회에 실패한 경우 발생합니다.
    소스별 검색 함수에서 흡수되어 빈 결과로 처리됩니다.
    """

    pass


class ExternalAPIError(BarSearchError):
    """외부 CocktailDB API 관련 예외.

    네트워크 오류, HTTP 오류 상태, JSON 파싱 실패 등의 경우 발생합니다.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class TenantError(BarSearchError):
    """테넌트 관련 예외.

    등록되지 않은 테넌트 slug를 요구한 경우 발생합니다.
    """

    pass


class StepError(BarSearchError):
    """검색 단계 실행 관련 예외.

    단계 실행 실패, 타임아웃 등의 경우 발생합니다.
    Orchestrator 내부에서만 사용되며 perform_search 밖으로 전파되지 않습니다.
    """

    def __init__(self, step: str, message: str):
        super().__init__(f"[{step}] {message}")
        self.step = step
