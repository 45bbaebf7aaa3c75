"""메시지 모델 + 기본 메시지 목록."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict

DEFAULT_MESSAGE_TEXTS: tuple[str, ...] = (
    "Welcome to the DevOps Demo!",
    "This is a microservices architecture",
    "Backend powered by FastAPI",
)


class Message(BaseModel):
    """정적 메시지 — 프로세스 시작 시 한 번 생성, 이후 불변."""

    model_config = ConfigDict(frozen=True)

    id: int
    text: str
    timestamp: datetime


class MessageListResponse(BaseModel):
    """GET /api/messages 응답."""

    success: bool = True
    data: list[Message] = []


class RootResponse(BaseModel):
    """GET / 응답."""

    message: str


def build_default_messages(now: datetime | None = None) -> tuple[Message, ...]:
    """기본 메시지 3건 생성 (id 1부터, 동일 생성 시각)."""
    created_at = now or datetime.now(UTC)
    return tuple(
        Message(id=i, text=text, timestamp=created_at)
        for i, text in enumerate(DEFAULT_MESSAGE_TEXTS, start=1)
    )
