"""Structured logging — structlog 기반 설정.

Usage:
    from devops_demo.infra.observability.logging import setup_logging

    setup_logging(service_name="api")
    logger = logging.getLogger(__name__)
    logger.info("Listening on port %d", 5000)
"""

import logging
import sys

import structlog


def setup_logging(
    service_name: str = "devops-demo",
    *,
    log_level: str = "INFO",
    json_output: bool = True,
) -> None:
    """전역 structlog + stdlib 로깅 설정.

    Args:
        service_name: 로그에 포함할 서비스 이름
        log_level: 로그 레벨 (DEBUG, INFO, WARNING, ERROR)
        json_output: True면 JSON 형식, False면 사람이 읽기 쉬운 형식
    """
    log_level_int = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level_int,
        force=True,
    )

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_output:
        # 예외 traceback을 문자열 필드로
        shared_processors.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer(ensure_ascii=False)
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=shared_processors,
    )

    # uvicorn 로거도 같은 포매터로 출력
    root = logging.getLogger()
    for handler in root.handlers:
        handler.setFormatter(formatter)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uv_logger = logging.getLogger(name)
        uv_logger.handlers.clear()
        uv_logger.propagate = True

    structlog.contextvars.bind_contextvars(service=service_name)
