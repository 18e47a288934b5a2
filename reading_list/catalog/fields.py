"""
Derived fields on the public read representation of entries.

A field is registered for one content type with a ``get_callback``
that receives the serialized entry (a plain ``dict``) and returns the
field value. ``RestFieldRegistry.apply`` runs every callback for the
entry's type and adds the results to the payload.

The only field registered by this package is ``featured_image_src`` on
``book``: the URL of the ``medium`` variant of the entry's featured
image, or ``False`` when there is none.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, NamedTuple, Optional

from ..media import MediaLibrary
from .schemas import FeaturedImageSrc


logger = logging.getLogger(__name__)

GetCallback = Callable[[Dict[str, Any]], Any]


class RestField(NamedTuple):
    attribute: str
    get_callback: GetCallback
    schema: Optional[Dict[str, Any]] = None


class RestFieldRegistry:
    def __init__(self) -> None:
        self._fields: Dict[str, Dict[str, RestField]] = {}

    def register_rest_field(
        self,
        object_type: str,
        attribute: str,
        get_callback: GetCallback,
        schema: Optional[Dict[str, Any]] = None,
    ) -> None:
        self._fields.setdefault(object_type, {})[attribute] = RestField(
            attribute, get_callback, schema
        )

    def fields_for(self, object_type: str) -> List[RestField]:
        return list(self._fields.get(object_type, {}).values())

    def apply(self, object_type: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """Return a copy of ``data`` with every registered field added."""
        out = dict(data)
        for field in self.fields_for(object_type):
            out[field.attribute] = field.get_callback(data)
        return out


def get_book_featured_image_src(obj: Dict[str, Any], resolver: MediaLibrary) -> FeaturedImageSrc:
    """Get the featured image URL for a serialized book.

    Parameters
    ----------
    obj : Dict[str, Any]
        The serialized book; ``featured_media`` holds the attachment id.
    resolver : MediaLibrary
        Resolves the attachment to the ``medium`` size URL.

    Returns
    -------
    str or bool
        The URL, or ``False`` if the book has no image or the image
        cannot be resolved.
    """
    ref = obj.get("featured_media")
    if not ref:
        return False
    try:
        url = resolver.resolve(ref, "medium")
    except Exception as exc:
        logger.warning("Could not resolve featured image %s: %s", ref, exc)
        return False
    return url or False


def register_book_featured_image(registry: RestFieldRegistry, resolver: MediaLibrary) -> None:
    registry.register_rest_field(
        "book",
        "featured_image_src",
        lambda obj: get_book_featured_image_src(obj, resolver),
        schema=None,
    )
