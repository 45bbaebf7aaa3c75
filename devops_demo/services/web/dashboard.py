"""Dashboard 컨트롤러 — API 조회 → 뷰 상태 전이.

상태 전이:
    loading → success   (메시지 + 헬스 모두 성공)
    loading → error     (둘 중 하나라도 실패)
    error   → loading   (수동 retry)

메시지와 헬스는 하나의 원자적 단위로 취급한다 (부분 성공 없음).
"""

import asyncio
import logging

from devops_demo.infra.api import DemoApiClient

from .state import ViewState

logger = logging.getLogger(__name__)

CONNECTION_ERROR_MESSAGE = (
    "Failed to connect to backend. Make sure the backend server is running on port 5000."
)


class Dashboard:
    """마운트된 대시보드 한 개의 상태 보유자.

    Usage:
        dashboard = Dashboard(DemoApiClient())
        await dashboard.mount()
        html = render_page(dashboard.state)
    """

    def __init__(self, client: DemoApiClient):
        self._client = client
        self._state = ViewState()
        self._mounted = False
        # 한 번에 하나의 조회 사이클만
        self._lock = asyncio.Lock()

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def mounted(self) -> bool:
        return self._mounted

    async def mount(self) -> None:
        """최초 1회 조회. 이후 호출은 무시."""
        if self._mounted:
            return
        self._mounted = True
        await self.fetch_data()

    async def retry(self) -> None:
        """error 상태에서만 동일한 조회 사이클 재실행."""
        if self._state.phase != "error":
            logger.debug("Retry ignored in %s state", self._state.phase)
            return
        await self.fetch_data()

    async def fetch_data(self) -> None:
        """메시지 → 헬스 순차 조회. 첫 요청 실패 시 두 번째는 보내지 않는다."""
        async with self._lock:
            self._state = self._state.model_copy(update={"loading": True, "error": None})
            try:
                messages = await self._client.get_messages()
                health = await self._client.get_health()
            except Exception:
                # 연결 실패, 비정상 응답, 파싱 실패 모두 같은 메시지로
                logger.exception("Error fetching data from %s", self._client.base_url)
                self._state = self._state.model_copy(update={"error": CONNECTION_ERROR_MESSAGE})
            else:
                self._state = ViewState(loading=False, messages=messages, health=health, error=None)
                logger.info("Fetched %d messages, health=%s", len(messages), health.status)
            finally:
                self._state = self._state.model_copy(update={"loading": False})
