"""Tests for logging setup and the debug events wirectl emits."""

from __future__ import annotations

import io
import json
import logging

import pytest

from wirectl.config.logging import LOGGER_NAME, configure_logging
from wirectl.infrastructure.persistence import store_from_xml
from wirectl.infrastructure.workspace import Workspace
from wirectl.services.link import LinkService


def _events(stream: io.StringIO) -> list[dict]:
    return [json.loads(line) for line in stream.getvalue().splitlines() if line]


@pytest.fixture
def json_log() -> io.StringIO:
    stream = io.StringIO()
    configure_logging(verbose=True, log_json=True, stream=stream)
    return stream


class TestConfigureLogging:
    def test_levels(self) -> None:
        configure_logging(verbose=True, stream=io.StringIO())
        assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING
        configure_logging(verbose=False, stream=io.StringIO())
        assert logging.getLogger(LOGGER_NAME).level == logging.WARNING

    def test_single_handler(self) -> None:
        first = configure_logging(stream=io.StringIO())
        second = configure_logging(log_json=True, stream=io.StringIO())
        assert logging.getLogger().handlers == [second]
        assert first is not second

    def test_console_mode_is_plain_on_non_tty(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=True, stream=stream)
        logging.getLogger("wirectl.test").warning("plain %s", "text")
        assert "plain text" in stream.getvalue()
        assert "\x1b[" not in stream.getvalue()

    def test_third_party_debug_suppressed(self, json_log: io.StringIO) -> None:
        logging.getLogger("networkx").debug("noise")
        assert json_log.getvalue() == ""

    def test_quiet_without_verbose(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=False, log_json=True, stream=stream)
        logging.getLogger("wirectl.infrastructure.persistence").debug("hidden")
        assert stream.getvalue() == ""


class TestWireEvents:
    def test_link_and_save_are_logged(self, workspace: Workspace, json_log: io.StringIO) -> None:
        LinkService(workspace).add("A::p:int", "B::q")
        workspace.save()

        events = _events(json_log)
        by_logger = {e["logger"]: e for e in events}
        link = by_logger["wirectl.services.link"]
        assert link["event"] == "Linked A::p:int -> B::q:int"
        assert link["level"] == "debug"
        assert "timestamp" in link
        saved = by_logger["wirectl.infrastructure.persistence"]
        assert saved["event"].startswith("Saved 2 modules")

    def test_load_of_missing_file_is_logged(
        self, workspace: Workspace, json_log: io.StringIO
    ) -> None:
        workspace.store  # noqa: B018
        assert any(e["event"].startswith("No diagram file at") for e in _events(json_log))

    def test_skipped_element_warns_without_verbose(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=False, log_json=True, stream=stream)
        store_from_xml('<root><module name=""/></root>')
        events = _events(stream)
        assert [e["level"] for e in events] == ["warning"]
        assert events[0]["event"] == "Skipping unnamed module element"
