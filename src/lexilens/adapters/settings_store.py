"""JSON-file settings store."""

from __future__ import annotations

import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Callable

from ..core.events import ListenerEntry, ListenerHandle
from ..core.settings_model import (
    Settings,
    SettingsError,
    default_settings,
    settings_from_dict,
    settings_to_dict,
)

logger = logging.getLogger(__name__)


class JsonSettingsStore:
    """Settings store persisted as a JSON document.

    Until :meth:`initialize` has run the store reports ``is_loading`` and
    holds the defaults. With ``path=None`` nothing is read or written.
    """

    def __init__(self, path: Path | str | None = None):
        self._path = Path(path).expanduser() if path else None
        self._settings = default_settings()
        self._loading = True
        self._listeners: list[ListenerEntry] = []

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def is_loading(self) -> bool:
        return self._loading

    @property
    def path(self) -> Path | None:
        return self._path

    def initialize(self) -> None:
        if not self._loading:
            return
        self._settings = self._load()
        self._loading = False
        self._notify()

    def subscribe(self, listener: Callable[[Settings], None]) -> ListenerHandle:
        entry = ListenerEntry(listener)
        self._listeners.append(entry)
        return ListenerHandle(lambda: self._remove(entry))

    def update(self, settings: Settings) -> None:
        """Replace the current snapshot, persist it and notify subscribers."""
        if settings == self._settings:
            return
        self._settings = settings
        self._save()
        self._notify()

    def set_enabled(self, enabled: bool) -> None:
        self.update(replace(self._settings, enabled=enabled))

    def toggle_enabled(self) -> bool:
        self.set_enabled(not self._settings.enabled)
        return self._settings.enabled

    def _load(self) -> Settings:
        if self._path is None or not self._path.exists():
            return default_settings()
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
            return settings_from_dict(data)
        except (OSError, json.JSONDecodeError, SettingsError) as e:
            logger.warning("Could not load settings from %s, using defaults: %s", self._path, e)
            return default_settings()

    def _save(self) -> None:
        if self._path is None:
            return
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(
                json.dumps(settings_to_dict(self._settings), indent=2, ensure_ascii=False),
                encoding="utf-8",
            )
        except OSError:
            logger.exception("Could not save settings to %s", self._path)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._settings)

    def _remove(self, entry) -> None:
        self._listeners[:] = [l for l in self._listeners if l is not entry]

