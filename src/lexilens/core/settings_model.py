"""Settings snapshot for the overlay.

A ``Settings`` value describes the desired state of every modifier plus the
master ``enabled`` flag. Snapshots are frozen: every change produces a new
value, so the orchestrator can keep the previous one around for diffing
without defensive copies.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields, is_dataclass, replace
from typing import Any, Mapping

TINT_PRESET_NONE = "none"


class SettingsError(ValueError):
    """Raised when a settings mapping holds a value of the wrong type."""


@dataclass(frozen=True)
class TypographySettings:
    font_family: str = "default"
    font_size: int = 16
    line_height: float = 1.5
    letter_spacing: float = 0.0
    word_spacing: float = 0.0


@dataclass(frozen=True)
class ReadingRulerSettings:
    enabled: bool = False
    height: int = 40
    color: str = "#ffeb3b"
    opacity: float = 0.3


@dataclass(frozen=True)
class ScreenTintSettings:
    enabled: bool = False
    preset: str = TINT_PRESET_NONE
    color: str = "#fdf6e3"
    opacity: float = 0.2


@dataclass(frozen=True)
class FocusModeSettings:
    enabled: bool = False
    dim_opacity: float = 0.6
    window_height: int = 120


@dataclass(frozen=True)
class HandConductorSettings:
    enabled: bool = False
    sensitivity: float = 1.0
    show_camera: bool = False


@dataclass(frozen=True)
class HandFocusSettings:
    enabled: bool = False
    radius: int = 150
    smoothing: float = 0.5


@dataclass(frozen=True)
class BionicReadingSettings:
    enabled: bool = False
    intensity: float = 0.5


@dataclass(frozen=True)
class SyllableSplitterSettings:
    enabled: bool = False
    separator: str = "·"


@dataclass(frozen=True)
class AudioSettings:
    click_to_read: bool = False
    rate: float = 1.0
    pitch: float = 1.0
    voice: str | None = None


@dataclass(frozen=True)
class VisualAids:
    reading_ruler: ReadingRulerSettings = field(default_factory=ReadingRulerSettings)
    screen_tint: ScreenTintSettings = field(default_factory=ScreenTintSettings)
    focus_mode: FocusModeSettings = field(default_factory=FocusModeSettings)
    hand_conductor: HandConductorSettings = field(default_factory=HandConductorSettings)
    hand_focus: HandFocusSettings = field(default_factory=HandFocusSettings)


@dataclass(frozen=True)
class Cognitive:
    bionic_reading: BionicReadingSettings = field(default_factory=BionicReadingSettings)
    syllable_splitter: SyllableSplitterSettings = field(
        default_factory=SyllableSplitterSettings
    )


@dataclass(frozen=True)
class Settings:
    enabled: bool = True
    typography: TypographySettings = field(default_factory=TypographySettings)
    visual_aids: VisualAids = field(default_factory=VisualAids)
    cognitive: Cognitive = field(default_factory=Cognitive)
    audio: AudioSettings = field(default_factory=AudioSettings)

    def with_changes(self, path: str, **changes) -> Settings:
        """Return a copy with ``changes`` applied to the section at ``path``.

        ``path`` is dotted, e.g. ``"visual_aids.reading_ruler"``; an empty
        path applies the changes to the top level.
        """
        if not path:
            return replace(self, **changes)
        head, _, rest = path.partition(".")
        section = getattr(self, head)
        if rest:
            updated = _replace_path(section, rest, changes)
        else:
            updated = replace(section, **changes)
        return replace(self, **{head: updated})


def _replace_path(node, path: str, changes: dict):
    head, _, rest = path.partition(".")
    child = getattr(node, head)
    if rest:
        return replace(node, **{head: _replace_path(child, rest, changes)})
    return replace(node, **{head: replace(child, **changes)})


def default_settings() -> Settings:
    return Settings()


def settings_to_dict(settings: Settings) -> dict[str, Any]:
    return asdict(settings)


def settings_from_dict(data: Mapping[str, Any] | None) -> Settings:
    """Build a Settings snapshot from a nested mapping.

    Unknown keys are ignored and missing keys keep their defaults, so files
    written by older versions still load.

    Raises:
        SettingsError: if a value does not match the type of its default.
    """
    if data is None:
        return default_settings()
    if not isinstance(data, Mapping):
        raise SettingsError(f"settings must be a mapping, got {type(data).__name__}")
    return _build(Settings, data, "")


def _build(cls, data: Mapping[str, Any], prefix: str):
    defaults = cls()
    values = {}
    for f in fields(cls):
        if f.name not in data:
            continue
        raw = data[f.name]
        default = getattr(defaults, f.name)
        key = f"{prefix}{f.name}"
        if is_dataclass(default):
            if not isinstance(raw, Mapping):
                raise SettingsError(f"{key} must be a mapping")
            values[f.name] = _build(type(default), raw, f"{key}.")
        else:
            values[f.name] = _coerce(raw, default, key)
    return cls(**values)


def _coerce(raw: Any, default: Any, key: str) -> Any:
    if default is None:
        if raw is None or isinstance(raw, str):
            return raw
        raise SettingsError(f"{key} must be a string or null")
    if isinstance(default, bool):
        if isinstance(raw, bool):
            return raw
        raise SettingsError(f"{key} must be a boolean")
    if isinstance(default, int):
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise SettingsError(f"{key} must be an integer")
        return raw
    if isinstance(default, float):
        if isinstance(raw, bool) or not isinstance(raw, (int, float)):
            raise SettingsError(f"{key} must be a number")
        return float(raw)
    if isinstance(default, str):
        if isinstance(raw, str):
            return raw
        raise SettingsError(f"{key} must be a string")
    return raw
