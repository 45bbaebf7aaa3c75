"""devops-demo 도메인 모델 — API 서비스와 클라이언트 간 데이터 계약.

Usage:
    from devops_demo.domain import Message, HealthStatus
    from devops_demo.domain.config import AppConfig
"""

# --- Health ---
from .health import HealthStatus

# --- Messages ---
from .message import (
    DEFAULT_MESSAGE_TEXTS,
    Message,
    MessageListResponse,
    RootResponse,
    build_default_messages,
)

__all__ = [
    "DEFAULT_MESSAGE_TEXTS",
    "HealthStatus",
    "Message",
    "MessageListResponse",
    "RootResponse",
    "build_default_messages",
]
