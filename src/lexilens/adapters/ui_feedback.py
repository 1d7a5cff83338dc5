"""Summary surface backed by desktop notifications."""

from __future__ import annotations

import logging
import subprocess

logger = logging.getLogger(__name__)

MAX_SUMMARY_CHARS = 300


class NotifySummarySurface:
    def __init__(self, title: str = "LexiLens summary", timeout: int = 10):
        self._title = title
        self._timeout = timeout

    def show(self, text: str) -> None:
        body = text if len(text) <= MAX_SUMMARY_CHARS else text[: MAX_SUMMARY_CHARS - 1] + "…"
        try:
            subprocess.run(
                ["notify-send", "-t", str(self._timeout * 1000), self._title, body],
                timeout=2,
                capture_output=True,
            )
        except (OSError, subprocess.SubprocessError) as e:
            # Notifications are optional
            logger.debug("notify-send unavailable: %s", e)
