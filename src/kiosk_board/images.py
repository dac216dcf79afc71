"""Slideshow photo listing.

Photos are named ``{order}_{durationMs}.{ext}`` (e.g. ``1_1500.png``). The
listing is sorted by ``order``; files that don't follow the convention are
skipped.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from kiosk_board.schemas import ImageEntry

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

PHOTOS_URL_PREFIX = "/photos"

_PHOTO_NAME = re.compile(r"^(\d+)_(\d+)\.(?:png|jpe?g)$", re.IGNORECASE)


def list_images(photos_dir: Path) -> list[ImageEntry]:
    """
    List slideshow photos in display order.

    Args:
        photos_dir: Directory holding the photo files.

    Returns:
        ImageEntry per matching file, sorted by ``order``.

    Raises:
        OSError: If the directory can't be read.
    """
    images = []
    for path in photos_dir.iterdir():
        match = _PHOTO_NAME.match(path.name)
        if match is None:
            logger.debug("Skipping %s: not an {order}_{duration} image", path.name)
            continue
        images.append(
            ImageEntry(
                order=int(match.group(1)),
                duration=int(match.group(2)),
                url=f"{PHOTOS_URL_PREFIX}/{path.name}",
            )
        )

    images.sort(key=lambda img: img.order)
    return images
