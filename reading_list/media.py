# reading_list/media.py
"""
Attachment library and image resolver.

Attachments are registered with the dimensions of the uploaded
original. Size variants (``thumbnail``, ``medium``, ``large``) are
derived the way the content platform names its intermediate images:
``<stem>-<width>x<height><ext>``, scaled to fit the size's bounding
box. When the original is not larger than the box the original file is
served. No image files are produced here.
"""

from __future__ import annotations

import logging
import threading
from pathlib import PurePosixPath
from typing import Dict, NamedTuple, Optional, Tuple

from .models import Attachment, ImageSource


logger = logging.getLogger(__name__)


class ImageSize(NamedTuple):
    width: int
    height: int
    crop: bool = False


IMAGE_SIZES: Dict[str, ImageSize] = {
    "thumbnail": ImageSize(150, 150, crop=True),
    "medium": ImageSize(300, 300),
    "large": ImageSize(1024, 1024),
}


def _fit(width: int, height: int, size: ImageSize) -> Optional[Tuple[int, int]]:
    """Return the variant dimensions, or ``None`` when the original is used as-is."""
    if size.crop:
        if width <= size.width and height <= size.height:
            return None
        return min(width, size.width), min(height, size.height)
    if width <= size.width and height <= size.height:
        return None
    ratio = min(size.width / width, size.height / height)
    return max(1, round(width * ratio)), max(1, round(height * ratio))


class MediaLibrary:
    def __init__(self, uploads_url: str = "/wp-content/uploads") -> None:
        self.uploads_url = uploads_url.rstrip("/")
        self._lock = threading.Lock()
        self._attachments: Dict[int, Attachment] = {}
        self._next_id = 1

    def add_attachment(
        self,
        file: str,
        width: int,
        height: int,
        alt: str = "",
        attachment_id: Optional[int] = None,
    ) -> Attachment:
        with self._lock:
            aid = attachment_id if attachment_id is not None else self._next_id
            attachment = Attachment(id=aid, file=file, width=width, height=height, alt=alt)
            self._attachments[aid] = attachment
            self._next_id = max(self._next_id, aid + 1)
        return attachment

    def get_attachment(self, ref: Optional[int]) -> Optional[Attachment]:
        if not ref:
            return None
        return self._attachments.get(ref)

    def get_attachment_image_src(self, ref: Optional[int], size: str = "medium") -> Optional[ImageSource]:
        """Resolve an attachment to the URL and dimensions of one size variant.

        Returns ``None`` for unknown attachments and unknown size labels.
        """
        attachment = self.get_attachment(ref)
        if attachment is None:
            return None

        if size == "full":
            return ImageSource(
                url=self._url(attachment.file),
                width=attachment.width,
                height=attachment.height,
            )

        bounds = IMAGE_SIZES.get(size)
        if bounds is None:
            logger.debug("Unknown image size %r requested for attachment %s", size, ref)
            return None

        dims = _fit(attachment.width, attachment.height, bounds)
        if dims is None:
            return ImageSource(
                url=self._url(attachment.file),
                width=attachment.width,
                height=attachment.height,
            )

        path = PurePosixPath(attachment.file)
        variant = path.with_name(f"{path.stem}-{dims[0]}x{dims[1]}{path.suffix}")
        return ImageSource(url=self._url(str(variant)), width=dims[0], height=dims[1])

    def resolve(self, ref: Optional[int], size: str = "medium") -> Optional[str]:
        src = self.get_attachment_image_src(ref, size)
        return src.url if src is not None else None

    def _url(self, file: str) -> str:
        return f"{self.uploads_url}/{file.lstrip('/')}"
