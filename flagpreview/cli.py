"""
Build the dark and light flag preview grids.

Usage:
  flagpreview                                   # defaults / FLAGPREVIEW_* env / .env
  flagpreview -i src/exported -f src/font.ttf   # explicit inputs
  flagpreview --per-row 8 --size 120 -v         # different grid, debug logging
"""

from __future__ import annotations

import argparse
import logging
import time

from dotenv import load_dotenv
from pydantic import ValidationError

from flagpreview.config import Settings
from flagpreview.errors import PreviewError
from flagpreview.pipeline import PreviewPipeline

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

# argparse dest -> Settings field
_OVERRIDES = {
    "images": "images_folder",
    "font": "font_path",
    "output_dark": "output_dark",
    "output_light": "output_light",
    "per_row": "flags_per_row",
    "size": "thumbnail_size",
    "spacing": "spacing",
    "edge_spacing": "edge_spacing",
    "font_size": "font_size",
    "workers": "workers",
}


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="flagpreview",
        description="Render a folder of SVGs into labeled dark/light preview grids",
    )
    parser.add_argument("-i", "--images", help="Folder of SVG images")
    parser.add_argument("-f", "--font", help="TrueType/OpenType font for labels")
    parser.add_argument("--output-dark", help="Output PNG for the dark-mode grid")
    parser.add_argument("--output-light", help="Output PNG for the light-mode grid")
    parser.add_argument("--per-row", type=int, help="Thumbnails per row")
    parser.add_argument("--size", type=int, help="Thumbnail edge length in pixels")
    parser.add_argument("--spacing", type=int, help="Gap between cells in pixels")
    parser.add_argument("--edge-spacing", type=int, help="Margin around the grid in pixels")
    parser.add_argument("--font-size", type=int, help="Label font size in pixels")
    parser.add_argument("-w", "--workers", type=int, help="Render threads")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def _configure_logging(level_name: str, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, level_name.upper())
    logging.basicConfig(level=level, format=_LOG_FORMAT)


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = _parse_args(argv)

    overrides = {
        field: getattr(args, dest)
        for dest, field in _OVERRIDES.items()
        if getattr(args, dest) is not None
    }
    try:
        settings = Settings(**overrides)
    except ValidationError as e:
        _configure_logging("error", args.verbose)
        logger.error("Invalid configuration: %s", e)
        return 2

    _configure_logging(settings.log_level, args.verbose)

    start = time.perf_counter()
    try:
        results = PreviewPipeline(settings.to_config()).run()
    except PreviewError as e:
        logger.error("Error creating grid images: %s", e)
        return 1

    for result in results:
        logger.info("%s: %s (%dx%d)", result.theme.name, result.output_path, result.width, result.height)
    logger.info("Done in %.2fs", time.perf_counter() - start)
    return 0
