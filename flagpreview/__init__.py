"""Labeled thumbnail grids for a folder of SVG images."""

from flagpreview.pipeline import PreviewPipeline

__all__ = ["PreviewPipeline"]
