"""DevOps Demo API HTTP Client — 도메인 모델 기반 조회 인터페이스.

API 서비스(기본 http://localhost:5000)와 통신.
모든 호출은 코루틴이며, 실패는 그대로 전파된다:
    httpx.TransportError   — 연결 실패 (서버 미기동, DNS, 연결 거부)
    httpx.HTTPStatusError  — 2xx 이외 응답
    ValueError             — JSON 파싱 실패 / 응답 형식 불일치 (ValidationError 포함)
"""

import httpx

from devops_demo.domain import HealthStatus, Message, MessageListResponse
from devops_demo.domain.config import get_config


class DemoApiClient:
    """API 서비스 비동기 HTTP 클라이언트.

    Usage:
        async with DemoApiClient() as client:
            messages = await client.get_messages()
            health = await client.get_health()
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        config = get_config()
        self._base_url = (base_url or config.web.api_url).rstrip("/")
        self._timeout = timeout if timeout is not None else config.web.timeout
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            headers={"Accept": "application/json"},
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    async def get_messages(self) -> list[Message]:
        """메시지 목록 조회 (응답 순서 그대로)."""
        resp = await self._client.get("/api/messages")
        resp.raise_for_status()
        return MessageListResponse.model_validate(resp.json()).data

    async def get_health(self) -> HealthStatus:
        """API 서비스 헬스 상태 조회."""
        resp = await self._client.get("/api/health")
        resp.raise_for_status()
        return HealthStatus.model_validate(resp.json())

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "DemoApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
