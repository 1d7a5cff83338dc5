import dataclasses

import pytest

from lexilens.core.settings_model import (
    Settings,
    SettingsError,
    default_settings,
    settings_from_dict,
    settings_to_dict,
)


def test_defaults_have_master_on_and_every_modifier_off():
    settings = default_settings()

    assert settings.enabled is True
    assert settings.visual_aids.reading_ruler.enabled is False
    assert settings.visual_aids.screen_tint.preset == "none"
    assert settings.audio.click_to_read is False


def test_snapshots_are_immutable():
    settings = Settings()

    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.enabled = False
    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.visual_aids.reading_ruler.height = 3


def test_with_changes_returns_new_snapshot():
    original = Settings()

    changed = original.with_changes("visual_aids.reading_ruler", enabled=True, height=80)

    assert changed.visual_aids.reading_ruler.height == 80
    assert original.visual_aids.reading_ruler.height == 40
    assert changed.visual_aids.screen_tint is original.visual_aids.screen_tint
    assert original.with_changes("", enabled=False).enabled is False
    assert original.with_changes("typography", font_size=20).typography.font_size == 20


def test_from_dict_merges_with_defaults_and_ignores_unknown_keys():
    settings = settings_from_dict(
        {
            "enabled": False,
            "visual_aids": {"screen_tint": {"enabled": True, "preset": "cream"}},
            "audio": {"rate": 2},
            "theme": "dark",
        }
    )

    assert settings.enabled is False
    assert settings.visual_aids.screen_tint.preset == "cream"
    assert settings.visual_aids.screen_tint.opacity == 0.2
    assert settings.audio.rate == 2.0
    assert isinstance(settings.audio.rate, float)
    assert settings.typography == default_settings().typography


def test_from_dict_none_is_defaults():
    assert settings_from_dict(None) == default_settings()


def test_to_dict_feeds_back_into_from_dict():
    settings = Settings().with_changes("audio", click_to_read=True, voice="en-GB")

    assert settings_from_dict(settings_to_dict(settings)) == settings


@pytest.mark.parametrize(
    "data",
    [
        ["not", "a", "mapping"],
        {"enabled": "yes"},
        {"visual_aids": True},
        {"typography": {"font_size": "big"}},
        {"typography": {"font_size": True}},
        {"typography": {"font_size": 16.9}},
        {"visual_aids": {"reading_ruler": {"opacity": False}}},
        {"audio": {"voice": 3}},
    ],
)
def test_from_dict_rejects_wrong_types(data):
    with pytest.raises(SettingsError):
        settings_from_dict(data)


def test_integer_fields_keep_integers_and_float_fields_widen():
    settings = settings_from_dict({"typography": {"font_size": 18, "line_height": 2}})

    assert settings.typography.font_size == 18
    assert settings.typography.line_height == 2.0
    assert isinstance(settings.typography.line_height, float)
