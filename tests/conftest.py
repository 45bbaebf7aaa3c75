"""공용 Fixtures."""

import pytest

from devops_demo.domain.config import get_config


@pytest.fixture(autouse=True)
def _clear_config_cache():
    """테스트마다 설정 캐시 초기화 (환경 변수 변경 반영)."""
    get_config.cache_clear()
    yield
    get_config.cache_clear()
