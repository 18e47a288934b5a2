# reading_list/blocks/templates/my_reading_list.py
"""
Render template for the ``my-reading-list`` block.

Every ``book`` entry is listed, in store order, with its title. The
``medium`` featured image follows when ``showImage`` is set and the
image resolves; the entry body follows when ``showContent`` is set.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Mapping, Optional

from ...media import MediaLibrary
from ...models import BookEntry, DisplayConfig
from ..markup import MarkupBuilder, block_wrapper_attributes


logger = logging.getLogger(__name__)

IMAGE_SIZE = "medium"


def _image_attributes(entry: BookEntry, resolver: MediaLibrary) -> Optional[Dict[str, str]]:
    if not entry.image_ref:
        return None
    try:
        src = resolver.get_attachment_image_src(entry.image_ref, IMAGE_SIZE)
    except Exception as exc:
        logger.warning("Could not resolve image %s for book %s: %s", entry.image_ref, entry.id, exc)
        return None
    if src is None:
        return None
    attachment = resolver.get_attachment(entry.image_ref)
    return {
        "width": str(src.width),
        "height": str(src.height),
        "src": src.url,
        "class": f"attachment-{IMAGE_SIZE} size-{IMAGE_SIZE} wp-post-image",
        "alt": attachment.alt if attachment is not None else "",
        "decoding": "async",
    }


def render(
    config: DisplayConfig,
    entries: Iterable[BookEntry],
    resolver: MediaLibrary,
    wrapper_attributes: Optional[Mapping[str, str]] = None,
) -> str:
    out = MarkupBuilder()
    out.open("div", wrapper_attributes)

    for entry in entries:
        out.open("div")
        out.element("h2", entry.title)
        if config.show_image:
            img = _image_attributes(entry, resolver)
            if img is not None:
                out.void("img", img)
        if config.show_content:
            out.raw(entry.body)
        out.close()

    out.close()
    return out.build()


def render_block(attributes: Dict[str, Any], content: str, block) -> str:
    config = DisplayConfig.model_validate(attributes)
    books = block.store.get_posts("book")
    wrapper = block_wrapper_attributes(block.name, block.wrapper_attributes)
    return render(config, books, block.media, wrapper)
