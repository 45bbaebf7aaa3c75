"""대시보드 뷰 상태 — loading / error / success."""

from typing import Literal

from pydantic import BaseModel, computed_field

from devops_demo.domain import HealthStatus, Message

Phase = Literal["loading", "error", "success"]


class ViewState(BaseModel):
    """대시보드 단일 상태 구조.

    표시 화면은 loading > error > success 우선순위로 하나만 결정된다.
    """

    loading: bool = True
    messages: list[Message] = []
    health: HealthStatus | None = None
    error: str | None = None

    @computed_field
    @property
    def phase(self) -> Phase:
        if self.loading:
            return "loading"
        if self.error:
            return "error"
        return "success"
