"""FastAPI 앱 팩토리 — API 서비스와 웹 클라이언트의 공통 패턴.

Usage:
    from devops_demo.services.base import create_app

    app = create_app("api", version="1.0.0")
"""

import logging
import time
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """요청/응답 로깅 + X-Process-Time 헤더."""

    async def dispatch(self, request: Request, call_next):
        start = time.monotonic()
        response = await call_next(request)
        elapsed = time.monotonic() - start

        logger.info(
            "%s %s -> %d (%.3fs)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed,
        )
        response.headers["X-Process-Time"] = f"{elapsed:.6f}"
        return response


def create_app(
    service_name: str,
    *,
    version: str = "1.0.0",
    lifespan: Callable | None = None,
) -> FastAPI:
    """FastAPI 앱 팩토리 — 시작/종료 로깅 + 요청 로깅.

    Args:
        service_name: 서비스 식별자 (예: "api", "web")
        version: 서비스 버전
        lifespan: 커스텀 lifespan context manager (startup/shutdown)
    """

    @asynccontextmanager
    async def wrapped_lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("[%s] Starting v%s", service_name, version)
        if lifespan:
            async with lifespan(app):
                yield
        else:
            yield
        logger.info("[%s] Shutting down", service_name)

    app = FastAPI(
        title=f"devops-demo {service_name}",
        version=version,
        lifespan=wrapped_lifespan,
    )
    # uptime 기준 시각 (lifespan 없이 구동되는 TestClient에서도 유효)
    app.state.started_at = time.monotonic()

    app.add_middleware(RequestLoggingMiddleware)
    return app


def uptime_seconds(app: FastAPI) -> float:
    """앱 생성 후 경과 초 (monotonic, 음수 불가)."""
    return max(0.0, time.monotonic() - app.state.started_at)
