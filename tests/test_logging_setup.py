from __future__ import annotations

import logging

import pytest


def test_registry_logs_overwrites_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    from rollbook.core import StudentRecord, StudentRegistry

    reg = StudentRegistry()
    with caplog.at_level(logging.DEBUG, logger="rollbook.core.registry"):
        reg.register(StudentRecord(roll_no=7, fields={"name": "Asha"}))
        reg.register(StudentRecord(roll_no=7, fields={"name": "Bala"}))

    messages = [r.getMessage() for r in caplog.records]
    assert "Registered student rollNo=7" in messages
    assert "Overwrote student rollNo=7" in messages


def test_setup_logging_falls_back_to_info_for_unknown_level(monkeypatch: pytest.MonkeyPatch) -> None:
    from rollbook import logging_setup

    seen: dict = {}
    monkeypatch.setattr(logging_setup.logging, "basicConfig", lambda **kw: seen.update(kw))
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    logging_setup.setup_logging("not-a-level")
    assert seen["level"] == logging.INFO

    monkeypatch.setenv("LOG_LEVEL", "debug")
    logging_setup.setup_logging()
    assert seen["level"] == logging.DEBUG
