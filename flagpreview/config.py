"""Configuration: environment-driven settings and the frozen config components receive."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from PIL import ImageColor
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


@dataclass(frozen=True)
class PreviewConfig:
    """Paths, grid geometry and theme colors for one run."""

    # Paths
    images_folder: Path = Path("./src/exported")
    font_path: Path = Path("./src/font.ttf")
    output_dark: Path = Path("./output/flagPreviewDark.png")
    output_light: Path = Path("./output/flagPreviewLight.png")

    # Grid geometry (pixels)
    flags_per_row: int = 10
    thumbnail_size: int = 100
    spacing: int = 10
    edge_spacing: int = 20

    # Labels
    font_size: int = 25
    dark_text_color: str = "white"
    light_text_color: str = "black"

    # Only files with these extensions are listed (case-insensitive)
    extensions: tuple[str, ...] = (".svg",)
    # Thumbnail render threads; None lets the executor pick
    workers: int | None = None


class Settings(BaseSettings):
    images_folder: Path = Path("./src/exported")
    font_path: Path = Path("./src/font.ttf")
    output_dark: Path = Path("./output/flagPreviewDark.png")
    output_light: Path = Path("./output/flagPreviewLight.png")

    flags_per_row: int = Field(default=10, ge=1)
    thumbnail_size: int = Field(default=100, ge=1)
    spacing: int = Field(default=10, ge=0)
    edge_spacing: int = Field(default=20, ge=0)

    font_size: int = Field(default=25, ge=1)
    dark_text_color: str = "white"
    light_text_color: str = "black"

    extensions: list[str] = [".svg"]
    workers: int | None = Field(default=None, ge=1)

    log_level: Literal["debug", "info", "warning", "error", "critical"] = "info"

    model_config = {
        "env_prefix": "FLAGPREVIEW_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("dark_text_color", "light_text_color")
    @classmethod
    def _known_color(cls, value: str) -> str:
        # Raises ValueError for anything Pillow cannot draw with
        ImageColor.getrgb(value)
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _lowercase_level(cls, value: object) -> object:
        return value.strip().lower() if isinstance(value, str) else value

    @field_validator("extensions")
    @classmethod
    def _normalize_extensions(cls, value: list[str]) -> list[str]:
        normalized = []
        for ext in value:
            ext = ext.strip().lower()
            if not ext:
                continue
            normalized.append(ext if ext.startswith(".") else f".{ext}")
        if not normalized:
            raise ValueError("at least one file extension is required")
        return normalized

    def to_config(self) -> PreviewConfig:
        return PreviewConfig(
            images_folder=self.images_folder,
            font_path=self.font_path,
            output_dark=self.output_dark,
            output_light=self.output_light,
            flags_per_row=self.flags_per_row,
            thumbnail_size=self.thumbnail_size,
            spacing=self.spacing,
            edge_spacing=self.edge_spacing,
            font_size=self.font_size,
            dark_text_color=self.dark_text_color,
            light_text_color=self.light_text_color,
            extensions=tuple(self.extensions),
            workers=self.workers,
        )
