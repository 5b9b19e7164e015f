"""Error kinds raised by the preview pipeline.

Every component wraps the library error it hit (cairosvg, Pillow, OSError)
into one of these so the CLI can report a single message and stop.
"""

from __future__ import annotations


class PreviewError(Exception):
    """Base class for all preview failures."""


class NotFoundError(PreviewError):
    """The input image folder does not exist."""


class EmptyInputError(PreviewError):
    """No images to lay out."""


class DecodeError(PreviewError):
    """A source file is not a readable vector image."""


class FontLoadError(PreviewError):
    """The label font could not be read or parsed."""


class WriteError(PreviewError):
    """The output image could not be written."""
