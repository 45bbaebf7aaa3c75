"""헬스 체크 모델."""

from datetime import datetime

from pydantic import BaseModel


class HealthStatus(BaseModel):
    """API 서비스 헬스 상태 (요청마다 새로 계산)."""

    status: str  # API 서비스는 항상 "healthy"
    timestamp: datetime
    uptime: float  # 프로세스 시작 후 경과 초

    @property
    def is_healthy(self) -> bool:
        return self.status == "healthy"
