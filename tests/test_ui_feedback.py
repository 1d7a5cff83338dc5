import subprocess

from lexilens.adapters import ui_feedback


def test_summary_sent_to_notify_send(monkeypatch):
    calls = []
    monkeypatch.setattr(ui_feedback.subprocess, "run", lambda args, **kw: calls.append(args))

    ui_feedback.NotifySummarySurface(title="Summary", timeout=3).show("short text")

    assert calls == [["notify-send", "-t", "3000", "Summary", "short text"]]


def test_long_summary_truncated(monkeypatch):
    calls = []
    monkeypatch.setattr(ui_feedback.subprocess, "run", lambda args, **kw: calls.append(args))

    ui_feedback.NotifySummarySurface().show("x" * 1000)

    body = calls[0][-1]
    assert len(body) == ui_feedback.MAX_SUMMARY_CHARS
    assert body.endswith("…")


def test_missing_notify_send_is_tolerated(monkeypatch):
    def _missing(args, **kwargs):
        raise FileNotFoundError("notify-send")

    monkeypatch.setattr(ui_feedback.subprocess, "run", _missing)

    ui_feedback.NotifySummarySurface().show("text")


def test_timeout_is_tolerated(monkeypatch):
    def _slow(args, **kwargs):
        raise subprocess.TimeoutExpired(args, 2)

    monkeypatch.setattr(ui_feedback.subprocess, "run", _slow)

    ui_feedback.NotifySummarySurface().show("text")
