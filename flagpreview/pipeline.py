"""Pipeline orchestrator: list once, then render and compose one grid per theme."""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from PIL import Image

from flagpreview.composer import compose_grid, write_grid
from flagpreview.config import PreviewConfig
from flagpreview.errors import EmptyInputError
from flagpreview.layout import GridLayout
from flagpreview.lister import list_images
from flagpreview.models import GridResult, ImagePath, Theme
from flagpreview.renderer import FontResource, load_font, render_thumbnail

logger = logging.getLogger(__name__)


class PreviewPipeline:
    """Builds the dark and light preview grids for one image folder."""

    def __init__(self, config: PreviewConfig | None = None) -> None:
        self.config = config or PreviewConfig()

    def themes(self) -> list[Theme]:
        cfg = self.config
        return [
            Theme(name="dark", text_color=cfg.dark_text_color, output_path=cfg.output_dark),
            Theme(name="light", text_color=cfg.light_text_color, output_path=cfg.output_light),
        ]

    def render_thumbnails(
        self,
        images: Sequence[ImagePath],
        theme: Theme,
        font: FontResource,
    ) -> list[Image.Image]:
        """Render every thumbnail concurrently; results keep input order.

        The first render error propagates once all workers have been joined.
        """
        cfg = self.config

        def render(image: ImagePath) -> Image.Image:
            return render_thumbnail(image, cfg.thumbnail_size, font, cfg.font_size, theme.text_color)

        with ThreadPoolExecutor(max_workers=cfg.workers) as executor:
            return list(executor.map(render, images))

    def create_grid(
        self,
        images: Sequence[ImagePath],
        theme: Theme,
        font: FontResource,
    ) -> GridResult:
        if not images:
            raise EmptyInputError("No images found in the specified folder.")

        t0 = time.perf_counter()
        thumbs = self.render_thumbnails(images, theme, font)
        layout = GridLayout.for_config(len(thumbs), self.config)
        grid = compose_grid(thumbs, layout)
        path = write_grid(grid, theme.output_path)

        elapsed = (time.perf_counter() - t0) * 1000
        logger.info(
            "%s grid: %d image(s), %dx%d in %.0fms",
            theme.name, layout.count, layout.width, layout.height, elapsed,
        )
        return GridResult(
            theme=theme,
            output_path=path,
            count=layout.count,
            width=layout.width,
            height=layout.height,
        )

    def run(self) -> list[GridResult]:
        """Build every theme's grid. Any error aborts the remaining themes."""
        start = time.perf_counter()

        images = list_images(self.config.images_folder, self.config.extensions)
        logger.info("Found %d image(s) in %s", len(images), self.config.images_folder)
        if not images:
            raise EmptyInputError("No images found in the specified folder.")

        font = load_font(self.config.font_path)
        results = [self.create_grid(images, theme, font) for theme in self.themes()]

        total = (time.perf_counter() - start) * 1000
        logger.info("Pipeline complete: %d grid(s) in %.0fms", len(results), total)
        return results
