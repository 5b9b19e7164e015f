"""Grid composer: paste thumbnails onto one transparent canvas and save it."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from PIL import Image

from flagpreview.errors import EmptyInputError, WriteError
from flagpreview.layout import GridLayout

logger = logging.getLogger(__name__)


def compose_grid(thumbnails: Sequence[Image.Image], layout: GridLayout) -> Image.Image:
    """Composite ``thumbnails`` in index order at their layout cells.

    Later thumbnails are painted over earlier ones; cells never overlap.
    """
    if not thumbnails:
        raise EmptyInputError("No images found in the specified folder.")
    if len(thumbnails) != layout.count:
        raise ValueError(f"layout is for {layout.count} thumbnail(s), got {len(thumbnails)}")

    canvas = Image.new("RGBA", layout.size, (0, 0, 0, 0))
    logger.debug(
        "Canvas: %dx%d, %d thumbnail(s) in %d row(s)",
        layout.width, layout.height, layout.count, layout.rows,
    )

    for i, (thumb, (top, left)) in enumerate(zip(thumbnails, layout.placements())):
        if thumb.size != layout.cell_size:
            raise ValueError(
                f"thumbnail {i} is {thumb.width}x{thumb.height}, "
                f"expected {layout.cell_size[0]}x{layout.cell_size[1]}"
            )
        canvas.alpha_composite(thumb.convert("RGBA"), dest=(left, top))

    return canvas


def write_grid(image: Image.Image, path: Path | str) -> Path:
    """Save ``image`` as PNG at ``path``, creating the directory if needed."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        image.save(path, "PNG")
    except OSError as e:
        raise WriteError(f"Cannot write {path}: {e}") from e
    logger.info("Grid image created: %s", path)
    return path
