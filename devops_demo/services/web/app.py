"""Dashboard Web App — API 서비스 데이터를 조회해 단일 HTML 페이지로 렌더링.

Endpoints:
    GET  /        → 최초 방문 시 조회(mount) 후 HTML 페이지
    POST /retry   → error 상태에서 재조회 후 / 로 리다이렉트
    GET  /state   → 현재 ViewState (JSON)
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from devops_demo.domain.config import get_config
from devops_demo.infra.api import DemoApiClient
from devops_demo.infra.observability import setup_logging
from devops_demo.services.base import create_app

from .dashboard import Dashboard
from .render import render_page
from .state import ViewState

logger = logging.getLogger(__name__)


def create_web_app(client: DemoApiClient | None = None) -> FastAPI:
    """대시보드 앱 생성.

    Args:
        client: API 클라이언트. None이면 lifespan 시작 시 설정의 api_url로 생성
            (이 경우 대시보드도 lifespan 안에서 만들어진다).
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        api_client = client or DemoApiClient()
        if client is None:
            app.state.dashboard = Dashboard(api_client)
        logger.info("API base URL: %s", api_client.base_url)
        try:
            yield
        finally:
            await api_client.aclose()

    app = create_app("web", version="1.0.0", lifespan=lifespan)
    if client is not None:
        app.state.dashboard = Dashboard(client)

    @app.get("/", response_class=HTMLResponse)
    async def index(request: Request) -> HTMLResponse:
        dashboard: Dashboard = request.app.state.dashboard
        await dashboard.mount()
        return HTMLResponse(render_page(dashboard.state))

    @app.post("/retry")
    async def retry(request: Request) -> RedirectResponse:
        dashboard: Dashboard = request.app.state.dashboard
        await dashboard.retry()
        return RedirectResponse("/", status_code=303)

    @app.get("/state")
    async def state(request: Request) -> ViewState:
        return request.app.state.dashboard.state

    return app


def main() -> None:
    config = get_config()
    setup_logging("web", log_level=config.log_level, json_output=config.json_logs)
    uvicorn.run(create_web_app(), host=config.web.host, port=config.web.port, log_config=None)


if __name__ == "__main__":
    main()
