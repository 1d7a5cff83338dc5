"""Env configuration adapter producing a structured AppConfig."""

from __future__ import annotations

from ..config import config as env_config
from ..core.config_model import AppConfig


def load_app_config() -> AppConfig:
    return AppConfig(
        debug=env_config.DEBUG,
        log_level=env_config.LOG_LEVEL,
        settings_path=env_config.SETTINGS_PATH,
        scroll_multiplier=env_config.SCROLL_MULTIPLIER,
        scroll_step_pixels=env_config.SCROLL_STEP_PIXELS,
        summary_surface=env_config.SUMMARY_SURFACE,
    )
