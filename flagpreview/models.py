"""Value types passed between the lister, renderer, composer and driver."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ImagePath:
    """One input vector image."""

    path: Path
    # File base name without extension; drawn under the thumbnail
    label: str

    @classmethod
    def from_path(cls, path: Path) -> ImagePath:
        return cls(path=path, label=path.stem)


@dataclass(frozen=True)
class Theme:
    """A label-color variant of the grid."""

    name: str
    text_color: str
    output_path: Path


@dataclass(frozen=True)
class GridResult:
    theme: Theme
    output_path: Path
    count: int
    width: int
    height: int
