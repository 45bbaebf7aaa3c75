"""DevOps Demo 대시보드 웹 클라이언트."""

from .app import create_web_app
from .dashboard import CONNECTION_ERROR_MESSAGE, Dashboard
from .render import render_page
from .state import ViewState

__all__ = ["CONNECTION_ERROR_MESSAGE", "Dashboard", "ViewState", "create_web_app", "render_page"]
