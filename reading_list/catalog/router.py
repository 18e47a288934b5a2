"""
Route definitions for the public read API.

Endpoints under /api/catalog:
- GET  /types                     : content types exposed in the API
- GET  /{rest_base}               : list every entry of a type
- GET  /{rest_base}/{entry_id}    : get one entry
"""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException

from ..deps import get_platform
from ..models import BookEntry, ContentType
from .schemas import ContentTypeRead, EntryRead


router = APIRouter(prefix="/api/catalog", tags=["catalog"])


def _rest_type(platform, rest_base: str) -> ContentType:
    for content_type in platform.store.post_types():
        if content_type.show_in_rest and content_type.rest_path == rest_base:
            return content_type
    raise HTTPException(status_code=404, detail="Unknown content type")


def _serialize(platform, entry: BookEntry) -> Dict[str, Any]:
    data = EntryRead.from_entry(entry).model_dump()
    return platform.rest_fields.apply(entry.post_type, data)


@router.get("/types", response_model=List[ContentTypeRead])
def list_types(platform=Depends(get_platform)) -> List[ContentTypeRead]:
    return [
        ContentTypeRead(
            name=t.name,
            labels=t.labels,
            rest_base=t.rest_path,
            supports=list(t.supports),
            has_archive=t.has_archive,
        )
        for t in platform.store.post_types()
        if t.show_in_rest
    ]


@router.get("/{rest_base}", response_model=List[EntryRead])
def list_entries(rest_base: str, platform=Depends(get_platform)) -> List[Dict[str, Any]]:
    """Return every entry of the type, in store order, without pagination."""
    content_type = _rest_type(platform, rest_base)
    return [_serialize(platform, e) for e in platform.store.get_posts(content_type.name)]


@router.get("/{rest_base}/{entry_id}", response_model=EntryRead)
def get_entry(rest_base: str, entry_id: int, platform=Depends(get_platform)) -> Dict[str, Any]:
    content_type = _rest_type(platform, rest_base)
    entry = platform.store.get_post(entry_id)
    if entry is None or entry.post_type != content_type.name:
        raise HTTPException(status_code=404, detail="Entry not found")
    return _serialize(platform, entry)
