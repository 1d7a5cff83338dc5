"""Core configuration model (structured view)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class AppConfig:
    debug: bool
    log_level: str
    settings_path: Path | None
    scroll_multiplier: float = 2.0
    scroll_step_pixels: int = 40
    summary_surface: str = "notify"
