"""DevOps Demo API Service — 정적 메시지 + 헬스 체크.

Endpoints:
    GET /               → RootResponse
    GET /api/messages   → MessageListResponse (고정 3건, 삽입 순서)
    GET /api/health     → HealthStatus (요청마다 계산)

메시지 목록은 앱 생성 시 불변 tuple로 주입되며 이후 변경 경로가 없다.
"""

import logging
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from datetime import UTC, datetime

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from devops_demo.domain import (
    HealthStatus,
    Message,
    MessageListResponse,
    RootResponse,
    build_default_messages,
)
from devops_demo.domain.config import get_config
from devops_demo.infra.observability import setup_logging
from devops_demo.services.base import create_app, uptime_seconds

logger = logging.getLogger(__name__)

ROOT_MESSAGE = "DevOps Demo API is running!"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    port = get_config().api.port
    logger.info("🚀 Backend server running on port %d", port)
    logger.info("📡 Health check: http://localhost:%d/api/health", port)
    logger.info("📨 Messages API: http://localhost:%d/api/messages", port)
    yield


def create_api_app(messages: Sequence[Message] | None = None) -> FastAPI:
    """API 앱 생성.

    Args:
        messages: 서빙할 메시지 목록. None이면 기본 메시지 3건.
    """
    # uptime은 앱 생성 시점부터. 프로세스당 모듈 레벨 app 하나만 생성되므로 프로세스 시작 시각과 같다.
    app = create_app("api", version="1.0.0", lifespan=lifespan)
    app.state.messages = tuple(messages) if messages is not None else build_default_messages()

    # 모든 Origin 허용
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    async def root() -> RootResponse:
        return RootResponse(message=ROOT_MESSAGE)

    @app.get("/api/messages")
    async def list_messages(request: Request) -> MessageListResponse:
        return MessageListResponse(success=True, data=list(request.app.state.messages))

    @app.get("/api/health")
    async def health(request: Request) -> HealthStatus:
        return HealthStatus(
            status="healthy",
            timestamp=datetime.now(UTC),
            uptime=uptime_seconds(request.app),
        )

    return app


app = create_api_app()


def main() -> None:
    config = get_config()
    setup_logging("api", log_level=config.log_level, json_output=config.json_logs)
    uvicorn.run(app, host=config.api.host, port=config.api.port, log_config=None)


if __name__ == "__main__":
    main()
