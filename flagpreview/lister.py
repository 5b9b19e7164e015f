"""Enumerate the vector images of a folder in label order."""

from __future__ import annotations

import functools
import logging
from collections.abc import Iterable
from pathlib import Path

from pyuca import Collator

from flagpreview.errors import NotFoundError
from flagpreview.models import ImagePath

logger = logging.getLogger(__name__)


@functools.lru_cache(maxsize=1)
def _collator() -> Collator:
    # Loads the default Unicode collation table once
    return Collator()


def collation_key(label: str) -> tuple[int, ...]:
    """Case-insensitive Unicode collation key, so "Åland" sorts before "Cuba"."""
    return _collator().sort_key(label.lower())


def list_images(folder: Path | str, extensions: Iterable[str] = (".svg",)) -> list[ImagePath]:
    """Return the images in ``folder`` sorted by case-insensitive base name.

    Names are compared with the Unicode Collation Algorithm, independent of
    the process locale. The sort is stable, so names that compare equal keep
    directory listing order. Files with other extensions are skipped; an
    empty result is not an error here.
    """
    folder = Path(folder)
    wanted = {ext.lower() for ext in extensions}

    try:
        entries = list(folder.iterdir())
    except (FileNotFoundError, NotADirectoryError) as e:
        raise NotFoundError(f"Image folder not found: {folder}") from e

    images = [
        ImagePath.from_path(entry)
        for entry in entries
        if entry.suffix.lower() in wanted and entry.is_file()
    ]
    images.sort(key=lambda img: collation_key(img.label))

    logger.debug("Listed %d of %d entries in %s", len(images), len(entries), folder)
    return images
