"""
Pydantic schema definitions for the catalog module.

``EntryRead`` is the public read representation of a content entry.
Derived fields registered through ``RestFieldRegistry`` (for example
``featured_image_src`` on books) are not declared here; the model
accepts extra keys so that every registered field reaches the client.
"""

from typing import Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field

from ..models import BookEntry


class Rendered(BaseModel):
    rendered: str = ""


class EntryRead(BaseModel):
    """A single serialized entry as returned by list and detail endpoints."""

    model_config = ConfigDict(extra="allow")

    id: int
    type: str
    title: Rendered
    content: Rendered
    # ``0`` when the entry has no featured image.
    featured_media: int = 0

    @classmethod
    def from_entry(cls, entry: BookEntry) -> "EntryRead":
        return cls(
            id=entry.id,
            type=entry.post_type,
            title=Rendered(rendered=entry.title),
            content=Rendered(rendered=entry.body),
            featured_media=entry.image_ref or 0,
        )


class ContentTypeRead(BaseModel):
    name: str
    labels: Dict[str, str] = Field(default_factory=dict)
    rest_base: str
    supports: List[str] = Field(default_factory=list)
    has_archive: bool = False


FeaturedImageSrc = Union[str, bool]
