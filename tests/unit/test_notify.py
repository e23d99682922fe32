"""Unit tests for notifiers."""

from __future__ import annotations

import logging

import pytest

from hrsync.transport.notify import (
    CollectingNotifier,
    LoggingNotifier,
    NoticeLevel,
    notify_safely,
)


class TestCollectingNotifier:
    def test_records_levels_in_order(self) -> None:
        notifier = CollectingNotifier()
        notifier.success("saved")
        notifier.error("failed")
        notifier.info("fyi")

        assert [(n.level, n.message) for n in notifier.notices] == [
            (NoticeLevel.SUCCESS, "saved"),
            (NoticeLevel.ERROR, "failed"),
            (NoticeLevel.INFO, "fyi"),
        ]

    def test_history_is_bounded(self) -> None:
        notifier = CollectingNotifier(max_items=3)
        for i in range(5):
            notifier.info(f"n{i}")

        assert [n.message for n in notifier.notices] == ["n2", "n3", "n4"]

    def test_drain_clears(self) -> None:
        notifier = CollectingNotifier()
        notifier.error("failed")

        assert len(notifier.drain()) == 1
        assert notifier.drain() == []


class TestLoggingNotifier:
    def test_error_logged_as_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="hrsync.notify"):
            LoggingNotifier().error("Failed to clock in")

        assert any(
            r.levelno == logging.WARNING and r.getMessage() == "Failed to clock in"
            for r in caplog.records
        )


class TestNotifySafely:
    def test_none_notifier_is_noop(self) -> None:
        notify_safely(None, NoticeLevel.ERROR, "ignored")  # Should not raise

    def test_exception_is_logged_not_raised(self, caplog: pytest.LogCaptureFixture) -> None:
        class Broken:
            def error(self, message: str) -> None:
                raise RuntimeError("display detached")

        with caplog.at_level(logging.ERROR):
            notify_safely(Broken(), NoticeLevel.ERROR, "boom")  # type: ignore[arg-type]

        assert "Notifier failed" in caplog.text
