"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from flagpreview.config import PreviewConfig

FONT_PATH = Path(__file__).parent / "data" / "Lato-Regular.ttf"

# Square flag with a viewBox
SQUARE_FLAG_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24">
  <rect x="0" y="0" width="24" height="24" fill="#4ECDC4"/>
  <circle cx="12" cy="12" r="6" fill="#FF6B6B"/>
</svg>'''

# 2:1 flag without a viewBox
WIDE_FLAG_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="200" height="100">
  <rect x="0" y="0" width="200" height="100" fill="#45B7D1"/>
</svg>'''

# 1:2 flag
TALL_FLAG_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="50" height="100" viewBox="0 0 50 100">
  <rect x="0" y="0" width="50" height="100" fill="#FFEAA7"/>
</svg>'''

# 2:1 flag far larger than any thumbnail
HUGE_FLAG_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="20000" height="10000">
  <rect x="0" y="0" width="20000" height="10000" fill="#45B7D1"/>
</svg>'''

NOT_AN_SVG = "this is not an svg document"


def write_svgs(folder: Path, names: list[str], svg: str = SQUARE_FLAG_SVG) -> list[Path]:
    folder.mkdir(parents=True, exist_ok=True)
    paths = []
    for name in names:
        path = folder / name
        path.write_text(svg, encoding="utf-8")
        paths.append(path)
    return paths


@pytest.fixture
def font_path() -> Path:
    return FONT_PATH


@pytest.fixture
def flag_folder(tmp_path: Path) -> Path:
    folder = tmp_path / "exported"
    write_svgs(folder, ["Norway.svg", "austria.svg", "Chile.svg"])
    (folder / "wide.svg").write_text(WIDE_FLAG_SVG, encoding="utf-8")
    (folder / "README.md").write_text("not a flag", encoding="utf-8")
    return folder


@pytest.fixture
def config(tmp_path: Path, flag_folder: Path, font_path: Path) -> PreviewConfig:
    return PreviewConfig(
        images_folder=flag_folder,
        font_path=font_path,
        output_dark=tmp_path / "output" / "dark.png",
        output_light=tmp_path / "output" / "light.png",
        flags_per_row=3,
        thumbnail_size=40,
        spacing=4,
        edge_spacing=6,
        font_size=12,
        workers=2,
    )
