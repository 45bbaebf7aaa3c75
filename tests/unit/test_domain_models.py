"""Domain model unit tests."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from devops_demo.domain import (
    DEFAULT_MESSAGE_TEXTS,
    HealthStatus,
    Message,
    MessageListResponse,
    build_default_messages,
)

NOW = datetime(2026, 10, 18, 9, 30, tzinfo=UTC)


class TestMessage:
    def test_frozen(self):
        msg = Message(id=1, text="hello", timestamp=NOW)
        with pytest.raises(ValidationError):
            msg.text = "changed"

    def test_iso_timestamp_roundtrip(self):
        msg = Message.model_validate({"id": 1, "text": "hi", "timestamp": "2026-10-18T09:30:00Z"})
        assert msg.timestamp == NOW

    def test_missing_field(self):
        with pytest.raises(ValidationError):
            Message.model_validate({"id": 1, "timestamp": "2026-10-18T09:30:00Z"})


class TestDefaultMessages:
    def test_three_messages_in_order(self):
        messages = build_default_messages(NOW)
        assert [m.id for m in messages] == [1, 2, 3]
        assert [m.text for m in messages] == list(DEFAULT_MESSAGE_TEXTS)
        assert messages[0].text == "Welcome to the DevOps Demo!"

    def test_same_creation_time(self):
        messages = build_default_messages(NOW)
        assert {m.timestamp for m in messages} == {NOW}

    def test_immutable_container(self):
        assert isinstance(build_default_messages(), tuple)


class TestMessageListResponse:
    def test_defaults(self):
        resp = MessageListResponse()
        assert resp.success is True
        assert resp.data == []

    def test_missing_data_is_empty(self):
        assert MessageListResponse.model_validate({"success": True}).data == []


class TestHealthStatus:
    def test_healthy(self):
        health = HealthStatus(status="healthy", timestamp=NOW, uptime=1.5)
        assert health.is_healthy is True

    def test_degraded_is_accepted(self):
        health = HealthStatus(status="degraded", timestamp=NOW, uptime=1.5)
        assert health.is_healthy is False

    def test_wire_format(self):
        data = HealthStatus(status="healthy", timestamp=NOW, uptime=2.0).model_dump(mode="json")
        assert data["status"] == "healthy"
        assert data["timestamp"].startswith("2026-10-18T09:30:00")
        assert data["uptime"] == 2.0
