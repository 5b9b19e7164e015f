"""Tests for settings loading and validation."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from flagpreview.config import PreviewConfig, Settings


def test_defaults_match_preview_config():
    assert Settings(_env_file=None).to_config() == PreviewConfig()


def test_default_geometry():
    cfg = PreviewConfig()
    assert (cfg.flags_per_row, cfg.thumbnail_size, cfg.spacing, cfg.edge_spacing) == (10, 100, 10, 20)
    assert (cfg.font_size, cfg.dark_text_color, cfg.light_text_color) == (25, "white", "black")
    assert cfg.output_dark == Path("./output/flagPreviewDark.png")


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("FLAGPREVIEW_FLAGS_PER_ROW", "6")
    monkeypatch.setenv("FLAGPREVIEW_IMAGES_FOLDER", "/tmp/flags")
    monkeypatch.setenv("FLAGPREVIEW_DARK_TEXT_COLOR", "#eeeeee")
    cfg = Settings(_env_file=None).to_config()
    assert cfg.flags_per_row == 6
    assert cfg.images_folder == Path("/tmp/flags")
    assert cfg.dark_text_color == "#eeeeee"


def test_init_arguments_beat_environment(monkeypatch):
    monkeypatch.setenv("FLAGPREVIEW_FONT_SIZE", "30")
    assert Settings(_env_file=None, font_size=18).font_size == 18


def test_extensions_normalized():
    settings = Settings(_env_file=None, extensions=["SVG", " .Svgz "])
    assert settings.to_config().extensions == (".svg", ".svgz")


@pytest.mark.parametrize(
    "field, value",
    [
        ("flags_per_row", 0),
        ("thumbnail_size", 0),
        ("font_size", 0),
        ("spacing", -1),
        ("edge_spacing", -5),
        ("workers", 0),
        ("light_text_color", "not-a-color"),
        ("extensions", []),
        ("log_level", "basic_format"),
        ("log_level", "verbose"),
    ],
)
def test_invalid_values(field, value):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **{field: value})


def test_log_level_case_insensitive(monkeypatch):
    monkeypatch.setenv("FLAGPREVIEW_LOG_LEVEL", "WARNING")
    assert Settings(_env_file=None).log_level == "warning"
