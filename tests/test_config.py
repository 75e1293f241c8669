import logging
from pathlib import Path

import pytest

from sentence_rhythm.config import (
    ColorSettings,
    ConfigError,
    SentenceRhythmConfig,
    config_from_dict,
    config_from_yaml,
    load_config,
    save_config,
    snapshot,
    toggle_enabled,
)


def test_defaults_match_documented_values():
    config = SentenceRhythmConfig()

    assert config.enabled is False
    assert config.thresholds == (2, 5, 10, 20)
    assert config.treat_line_break_as_sentence_end is False
    assert config.colors.xs == "#fff2c8"
    assert config.colors.xl == "#d1f6f4"


def test_config_from_dict_ignores_unknown_keys_and_builds_colors():
    config = config_from_dict(
        {"enabled": True, "mySetting": "default", "colors": {"md": "red", "bogus": 1}}
    )

    assert config.enabled is True
    assert config.colors == ColorSettings(md="red")


@pytest.mark.parametrize(
    "data",
    [
        {"enabled": "yes"},
        {"xs_threshold": "2"},
        {"sm_threshold": True},
        {"colors": "red"},
        {"excluded_kinds": "code"},
    ],
)
def test_config_from_dict_rejects_bad_shapes(data):
    with pytest.raises(ConfigError):
        config_from_dict(data)


def test_non_ascending_thresholds_warn_but_load(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.WARNING, logger="sentence_rhythm.config"):
        config = config_from_dict({"xs_threshold": 10, "sm_threshold": 5})

    assert config.xs_threshold == 10
    assert "not strictly ascending" in caplog.text


def test_yaml_round_trip(tmp_path: Path):
    path = tmp_path / "settings.yaml"
    original = SentenceRhythmConfig(
        enabled=True,
        lg_threshold=30,
        extra_sentence_endings=";",
        colors=ColorSettings(xl="#000"),
    )
    save_config(original, path)

    assert config_from_yaml(path) == original


def test_yaml_must_be_mapping(tmp_path: Path):
    path = tmp_path / "bad.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        config_from_yaml(path)


def test_load_config_missing_file_returns_defaults(tmp_path: Path):
    assert load_config(tmp_path / "absent.yaml") == SentenceRhythmConfig()
    assert load_config(None) == SentenceRhythmConfig()


def test_snapshot_is_immutable_and_includes_line_break():
    config = SentenceRhythmConfig(treat_line_break_as_sentence_end=True)
    frozen = snapshot(config)
    config.xs_threshold = 99

    assert frozen.xs_threshold == 2
    assert frozen.sentence_endings.endswith("\n")
    with pytest.raises(AttributeError):
        frozen.xs_threshold = 3  # type: ignore[misc]


def test_toggle_enabled_returns_copy():
    config = SentenceRhythmConfig()
    flipped = toggle_enabled(config)

    assert flipped.enabled is True
    assert config.enabled is False
