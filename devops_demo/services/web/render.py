"""대시보드 HTML 렌더링 — ViewState의 순수 함수.

템플릿: templates/index.html (jinja2, autoescape)
"""

import math
from datetime import datetime

from jinja2 import Environment, PackageLoader, select_autoescape

from .state import ViewState

# 정적 아키텍처 정보 (label, value)
ARCHITECTURE: tuple[tuple[str, str], ...] = (
    ("Frontend", "FastAPI + Jinja2"),
    ("Backend", "FastAPI"),
    ("Communication", "REST API"),
    ("Containerization", "Docker (Coming Soon)"),
    ("Deployment", "AWS (S3 + EC2)"),
)


def format_uptime(uptime: float | None) -> str:
    """업타임 초 → 정수 초 문자열 (예: "42s")."""
    return f"{math.floor(uptime or 0)}s"


def format_time(value: datetime | None) -> str:
    """로컬 시각 (HH:MM:SS). 없으면 N/A."""
    if value is None:
        return "N/A"
    return value.astimezone().strftime("%H:%M:%S")


def format_datetime(value: datetime) -> str:
    """로컬 일시 (YYYY-MM-DD HH:MM:SS)."""
    return value.astimezone().strftime("%Y-%m-%d %H:%M:%S")


_env = Environment(
    loader=PackageLoader("devops_demo.services.web", "templates"),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)
_env.filters["uptime"] = format_uptime
_env.filters["time"] = format_time
_env.filters["datetime"] = format_datetime


def render_page(state: ViewState) -> str:
    """상태 → 전체 HTML 페이지."""
    template = _env.get_template("index.html")
    return template.render(state=state, architecture=ARCHITECTURE)
