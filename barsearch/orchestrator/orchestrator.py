"""검색 Orchestrator - 전체 검색 진입점."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from datetime import datetime

from ..ranking.models import SearchResult
from ..ranking.reconciler import AccumulationReconciler, PartitionReconciler
from ..ranking.sorting import sort_results
from ..sources.catalog import TenantSources
from ..sources.models import TenantConfig
from ..sources.tenants import TenantRegistry
from ..utils.errors import StepError
from ..utils.logger import get_logger, log_with_context
from ..workers.drinks import DrinkSearchWorker
from ..workers.omni import OmniSearchWorker
from ..workers.tools.cocktaildb_client import CocktailDBClient
from .models import (
    EMPTY_TERM_MESSAGE,
    ProgressEntry,
    SearchSession,
    SearchStrategy,
    SourceFilters,
)
from .session_manager import SessionManager
from .steps import SearchStep, build_drink_steps, build_omni_steps

logger = get_logger(__name__)

Pacer = Callable[[], Awaitable[None]]
Reconciler = PartitionReconciler | AccumulationReconciler


class SearchOrchestrator:
    """전체 검색 진입점.

    검색어와 전략을 받아 단계 목록을 만들고, 단계를 하나씩 순서대로 실행하면서
    진행 상황과 결과를 테넌트별 검색 세션에 기록합니다.

    플로우:
        1. 빈 검색어 거부 (세션 오류 메시지만 설정)
        2. 세션 초기화 (검색 중 상태)
        3. 전략별 단계 목록 생성
        4. 단계별 실행 (진행 상황 기록, 실패한 단계만 error 처리 후 계속)
        5. 결과 정렬 및 세션 반영

    단계는 동시에 실행하지 않습니다. 각 단계는 step_timeout_seconds 안에 끝나야 하며,
    초과하면 해당 단계만 error로 표시됩니다.

    같은 테넌트에서 검색 두 개가 겹치면 나중에 시작한 검색이 세션을 다시 초기화합니다.
    이후 진행 상황은 같은 목록에 섞이고 결과는 마지막에 끝난 검색의 것이 남습니다.
    """

    def __init__(
        self,
        session_manager: SessionManager,
        tenant_registry: TenantRegistry,
        tenant_sources: TenantSources,
        client: CocktailDBClient | None = None,
        step_delay_ms: int = 0,
        step_timeout_seconds: float = 15.0,
        lookup_batch_size: int = 10,
        pacer: Pacer | None = None,
        default_strategy: SearchStrategy | str = SearchStrategy.OMNI,
    ):
        """SearchOrchestrator를 초기화합니다.

        Args:
            session_manager: SessionManager 인스턴스
            tenant_registry: 테넌트 설정 저장소
            tenant_sources: 테넌트 설정으로 (데이터 소스, 재고)를 돌려주는 함수
            client: CocktailDB 클라이언트 (None이면 전역 클라이언트)
            step_delay_ms: 단계 사이 표시용 지연 (밀리초)
            step_timeout_seconds: 단계별 최대 실행 시간 (초)
            lookup_batch_size: CocktailDB 상세 조회 배치 크기
            pacer: 단계 사이에 호출할 지연 함수 (지정하면 step_delay_ms 무시)
            default_strategy: perform_search에 전략을 지정하지 않았을 때 사용할 전략
        """
        self.session_manager = session_manager
        self.tenant_registry = tenant_registry
        self.tenant_sources = tenant_sources
        self.client = client
        self.step_delay_ms = step_delay_ms
        self.step_timeout_seconds = step_timeout_seconds
        self.lookup_batch_size = lookup_batch_size
        self.pacer = pacer or self._default_pacer
        self.default_strategy = SearchStrategy(default_strategy)

        logger.info(
            f"SearchOrchestrator 초기화 완료 (delay={step_delay_ms}ms, "
            f"timeout={step_timeout_seconds}s)"
        )

    async def _default_pacer(self) -> None:
        if self.step_delay_ms > 0:
            await asyncio.sleep(self.step_delay_ms / 1000)

    async def perform_search(
        self,
        tenant_slug: str,
        term: str,
        filters: SourceFilters | None = None,
        strategy: SearchStrategy | str | None = None,
    ) -> SearchSession:
        """검색을 실행합니다.

        단계 실패는 해당 진행 상황만 error로 표시하고 나머지 단계를 계속 실행합니다.
        그 밖의 예기치 않은 오류는 세션 오류 메시지로 기록하고 그때까지의 결과를 유지합니다.

        Args:
            tenant_slug: 테넌트 식별자
            term: 검색어
            filters: omni 전략의 소스 선택 필터 (None이면 모두 사용)
            strategy: 검색 전략 (SearchStrategy 또는 "omni"/"drinks", None이면 default_strategy)

        Returns:
            검색이 끝난 세션의 복사본

        Example:
            >>> orchestrator = SearchOrchestrator.create_default()
            >>> session = await orchestrator.perform_search("sample", "gin")
            >>> session.is_searching
            False
        """
        strategy = SearchStrategy(strategy or self.default_strategy)

        if not term or not term.strip():
            session = self.session_manager.get_session(tenant_slug)
            session.error = EMPTY_TERM_MESSAGE
            logger.warning(f"빈 검색어 거부: tenant={tenant_slug}")
            return self.session_manager.snapshot(tenant_slug)

        session = self.session_manager.reset_session(tenant_slug, term)
        reconciler: Reconciler | None = None

        log_with_context(
            logger,
            logging.INFO,
            "검색 시작",
            tenant=tenant_slug,
            term=term,
            strategy=strategy.value,
        )

        try:
            # 테넌트 설정은 검색 시작 시 한 번만 읽음
            tenant_config = self.tenant_registry.resolve(tenant_slug)
            steps, reconciler = self._plan(tenant_slug, tenant_config, term, filters, strategy)

            for index, step in enumerate(steps):
                # 표시용 지연은 단계 사이에만
                if index:
                    await self.pacer()
                await self._run_step(tenant_slug, session, step, reconciler, strategy)

            session.results = sort_results(reconciler.results)

            log_with_context(
                logger,
                logging.INFO,
                "검색 완료",
                tenant=tenant_slug,
                steps=len(steps),
                results=len(session.results),
            )

        except Exception as e:
            logger.error(f"검색 처리 실패: {e}", exc_info=True)
            session.error = strategy.error_message
            if reconciler is not None:
                session.results = sort_results(reconciler.results)

        finally:
            session.is_searching = False
            session.updated_at = datetime.now()

        return self.session_manager.snapshot(tenant_slug)

    def _plan(
        self,
        tenant_slug: str,
        tenant_config: TenantConfig,
        term: str,
        filters: SourceFilters | None,
        strategy: SearchStrategy,
    ) -> tuple[list[SearchStep], Reconciler]:
        """전략에 맞는 Worker, 단계 목록, Reconciler를 만듭니다.

        데이터 소스와 재고는 테넌트 설정(bar_data)으로 찾습니다.
        """
        data_source, inventory = self.tenant_sources(tenant_config)
        worker_kwargs = dict(
            tenant_slug=tenant_slug,
            tenant_config=tenant_config,
            data_source=data_source,
            inventory=inventory,
            client=self.client,
            lookup_batch_size=self.lookup_batch_size,
        )

        if strategy is SearchStrategy.DRINKS:
            drink_worker = DrinkSearchWorker(**worker_kwargs)
            steps = build_drink_steps(drink_worker, term, tenant_config.include_common_drinks)
            return steps, AccumulationReconciler()

        omni_worker = OmniSearchWorker(**worker_kwargs)
        steps = build_omni_steps(omni_worker, term, filters or SourceFilters())
        return steps, PartitionReconciler()

    async def _run_step(
        self,
        tenant_slug: str,
        session: SearchSession,
        step: SearchStep,
        reconciler: Reconciler,
        strategy: SearchStrategy,
    ) -> None:
        """단계 하나를 실행하고 진행 상황과 결과를 세션에 반영합니다."""
        entry = ProgressEntry(step=step.key, labels=step.labels)
        session.progress.append(entry)
        session.updated_at = datetime.now()

        try:
            results = await self._execute_step(step)
        except StepError as e:
            entry.status = "error"
            timed_out = isinstance(e.__cause__, asyncio.TimeoutError)
            log_with_context(
                logger,
                logging.WARNING if timed_out else logging.ERROR,
                f"검색 단계 실패: {e}",
                tenant=tenant_slug,
                step=step.key,
                status=entry.status,
            )
            return

        entry.count = reconciler.merge(
            results, append_ingredient_matches=step.append_ingredient_matches
        )
        entry.status = "complete"

        # 음료 검색은 단계마다 누적 결과를 갱신
        if strategy is SearchStrategy.DRINKS:
            session.results = sort_results(reconciler.results)

        log_with_context(
            logger,
            logging.INFO,
            "검색 단계 완료",
            tenant=tenant_slug,
            step=step.key,
            count=entry.count,
            status=entry.status,
        )

    async def _execute_step(self, step: SearchStep) -> list[SearchResult]:
        """타임아웃을 적용하여 단계 검색 함수를 실행합니다.

        Raises:
            StepError: 단계 실행 실패 또는 시간 초과
        """
        try:
            return await asyncio.wait_for(step.run(), timeout=self.step_timeout_seconds)
        except asyncio.TimeoutError as e:
            raise StepError(step.key, f"시간 초과 ({self.step_timeout_seconds}초)") from e
        except Exception as e:
            logger.error(f"검색 단계 실행 중 오류: step={step.key}, {e}", exc_info=True)
            raise StepError(step.key, str(e)) from e

    def clear_search(self, tenant_slug: str) -> SearchSession:
        """검색 결과, 진행 상황, 오류, 검색어를 모두 지웁니다."""
        self.session_manager.clear_session(tenant_slug)
        return self.session_manager.snapshot(tenant_slug)

    def sort_results(self, tenant_slug: str, key: str = "relevance") -> list[SearchResult]:
        """세션 결과를 다른 기준으로 다시 정렬합니다.

        Args:
            tenant_slug: 테넌트 식별자
            key: "relevance", "name", "type", "availability"

        Returns:
            정렬된 결과 목록 (복사본)

        Raises:
            ValueError: 지원하지 않는 정렬 기준인 경우
        """
        session = self.session_manager.get_session(tenant_slug)
        session.results = sort_results(session.results, key)
        return [r.model_copy(deep=True) for r in session.results]

    def filter_results_by_type(
        self, tenant_slug: str, result_type: str | None = None
    ) -> list[SearchResult]:
        """결과 유형으로 세션 결과를 필터링합니다. None 또는 "all"이면 전체."""
        results = self.session_manager.get_session(tenant_slug).results
        if not result_type or result_type == "all":
            selected = results
        else:
            selected = [r for r in results if r.type == result_type]
        return [r.model_copy(deep=True) for r in selected]

    @classmethod
    def create_default(cls) -> SearchOrchestrator:
        """설정(get_config)으로 기본 Orchestrator를 생성합니다.

        data_file이 설정되어 있으면 기본 테넌트의 바 데이터로 사용하고,
        없으면 빈 바 데이터를 사용합니다. 로그 레벨(log_level, debug)과
        기본 검색 전략(search.default_strategy)도 설정을 따릅니다.

        Returns:
            SearchOrchestrator 인스턴스

        Example:
            >>> orchestrator = SearchOrchestrator.create_default()
        """
        from ..sources.catalog import BarDataCatalog, bar_data_key
        from ..sources.models import BarData
        from ..sources.static import StaticDataSource
        from ..sources.tenants import DEFAULT_TENANTS
        from ..utils.config import get_config
        from ..utils.logger import set_log_level
        from ..workers.tools.cocktaildb_client import get_cocktaildb_client

        config = get_config()
        set_log_level(config.effective_log_level)

        tenant_registry = TenantRegistry(DEFAULT_TENANTS, default_slug=config.tenant.default_slug)
        default_key = bar_data_key(tenant_registry.get_default_tenant_config())

        if config.data_file:
            bar_data = StaticDataSource.from_json(config.data_file).bar_data
        else:
            logger.warning("data_file이 설정되지 않아 빈 바 데이터를 사용합니다.")
            bar_data = BarData()

        catalog = BarDataCatalog({default_key: bar_data})

        logger.info("기본 SearchOrchestrator 생성 완료")

        return cls(
            session_manager=SessionManager(),
            tenant_registry=tenant_registry,
            tenant_sources=catalog,
            client=get_cocktaildb_client(),
            step_delay_ms=config.search.step_delay_ms,
            step_timeout_seconds=config.search.step_timeout_seconds,
            lookup_batch_size=config.cocktaildb.lookup_batch_size,
            default_strategy=config.search.default_strategy,
        )
