"""통합 설정 모델 — Pydantic Settings 기반.

모든 설정값은 환경 변수로 주입. 우선순위:
  1. 환경 변수 (docker-compose env, 셸)
  2. .env 파일
  3. Pydantic Settings 기본값
"""

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ApiConfig(BaseSettings):
    """API 서비스 설정."""

    host: str = "0.0.0.0"
    # API_PORT 우선, 없으면 PORT
    port: int = Field(default=5000, validation_alias=AliasChoices("API_PORT", "PORT"))

    model_config = SettingsConfigDict(
        env_prefix="API_", env_file=".env", extra="ignore", populate_by_name=True
    )


class WebConfig(BaseSettings):
    """대시보드 웹 클라이언트 설정."""

    host: str = "0.0.0.0"
    port: int = 3000
    api_url: str = "http://localhost:5000"
    timeout: float = 5.0

    model_config = SettingsConfigDict(env_prefix="WEB_", env_file=".env", extra="ignore")


class AppConfig(BaseSettings):
    """최상위 설정 — 서브 설정 객체를 조합.

    Usage:
        from devops_demo.domain.config import get_config
        config = get_config()
        print(config.api.port)
        print(config.web.api_url)
    """

    env: str = Field(default="production", description="development | staging | production")
    debug: bool = False
    log_level: str = "INFO"
    json_logs: bool = True

    api: ApiConfig = Field(default_factory=ApiConfig)
    web: WebConfig = Field(default_factory=WebConfig)

    model_config = SettingsConfigDict(env_prefix="APP_", env_file=".env", extra="ignore")


@lru_cache
def get_config() -> AppConfig:
    """싱글턴 설정 인스턴스.

    프로세스 내에서 한 번만 환경 변수를 읽고 캐싱.
    테스트에서는 get_config.cache_clear()로 초기화.
    """
    return AppConfig()
