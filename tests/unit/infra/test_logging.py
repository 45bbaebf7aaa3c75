"""setup_logging 단위 테스트."""

import json
import logging

import structlog

from devops_demo.infra.observability import setup_logging


def _reset_logging():
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


class TestSetupLogging:
    def setup_method(self):
        _reset_logging()

    def teardown_method(self):
        _reset_logging()

    def test_json_output(self, capsys):
        setup_logging("api", log_level="INFO", json_output=True)
        logging.getLogger("devops_demo.test").info("hello %s", "world")

        line = capsys.readouterr().out.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "hello world"
        assert record["service"] == "api"
        assert record["level"] == "info"

    def test_log_level(self, capsys):
        setup_logging("api", log_level="WARNING", json_output=True)
        logging.getLogger("devops_demo.test").info("hidden")
        assert "hidden" not in capsys.readouterr().out

    def test_console_output(self, capsys):
        setup_logging("web", log_level="INFO", json_output=False)
        logging.getLogger("devops_demo.test").info("plain message")
        assert "plain message" in capsys.readouterr().out
