"""Configuration for LexiLens"""
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


class Config:
    """Environment configuration"""

    # Paths
    CONFIG_DIR = Path(os.getenv("LEXILENS_CONFIG_DIR", "~/.config/lexilens")).expanduser()
    SETTINGS_PATH = Path(
        os.getenv("LEXILENS_SETTINGS_PATH", str(CONFIG_DIR / "settings.json"))
    ).expanduser()

    # Hand conductor: pixels scrolled per pixel of hand movement
    SCROLL_MULTIPLIER = float(os.getenv("LEXILENS_SCROLL_MULTIPLIER", "2"))
    # Pixels covered by one mouse wheel step
    SCROLL_STEP_PIXELS = int(os.getenv("LEXILENS_SCROLL_STEP_PIXELS", "40"))

    # Hotkeys: modifier+key toggles the reading aids or the panel
    HOTKEY_MODIFIER = os.getenv("LEXILENS_HOTKEY_MODIFIER", "alt")
    HOTKEY_TOGGLE_KEY = os.getenv("LEXILENS_HOTKEY_TOGGLE_KEY", "l")
    HOTKEY_PANEL_KEY = os.getenv("LEXILENS_HOTKEY_PANEL_KEY", "p")

    # Summaries: "notify" shows a desktop notification, "none" only updates state
    SUMMARY_SURFACE = os.getenv("LEXILENS_SUMMARY_SURFACE", "notify").lower()

    DEBUG = os.getenv("LEXILENS_DEBUG", "false").lower() == "true"
    LOG_LEVEL = os.getenv("LEXILENS_LOG_LEVEL", "DEBUG" if DEBUG else "INFO").upper()

    @classmethod
    def create_dirs(cls):
        cls.SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)


config = Config()
