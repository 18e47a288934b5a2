# reading_list/storage.py
"""
In-memory entry store.

Stands in for the content platform's post storage: content types are
registered here, entries are inserted against a registered type and
queried back by type. Listing returns every matching entry in insertion
order; there is no pagination and no filtering beyond the type.
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import ValidationError

from .media import MediaLibrary
from .models import BookEntry, ContentType, CreateBookRequest, SeedFile


logger = logging.getLogger(__name__)


class StoreUnavailable(RuntimeError):
    """The store cannot answer queries."""


class UnknownContentType(LookupError):
    """An entry was inserted for a content type nobody registered."""


class EntryStore:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._types: Dict[str, ContentType] = {}
        self._entries: List[BookEntry] = []
        self._next_id = 1
        self.available = True

    # -- content types --------------------------------------------------

    def register_post_type(self, content_type: ContentType) -> ContentType:
        with self._lock:
            existing = self._types.get(content_type.name)
            if existing == content_type:
                logger.debug("Content type %r already registered", content_type.name)
                return existing
            if existing is not None:
                logger.warning(
                    "Content type %r re-registered with a different shape", content_type.name
                )
            self._types[content_type.name] = content_type
            return content_type

    def get_post_type(self, name: str) -> Optional[ContentType]:
        return self._types.get(name)

    def post_types(self) -> List[ContentType]:
        return list(self._types.values())

    # -- entries ----------------------------------------------------------

    def insert_post(self, req: CreateBookRequest, post_type: str = "book") -> BookEntry:
        with self._lock:
            if post_type not in self._types:
                raise UnknownContentType(post_type)
            entry = BookEntry(
                id=self._next_id,
                post_type=post_type,
                title=req.title,
                body=req.body,
                image_ref=req.image_ref,
            )
            self._entries.append(entry)
            self._next_id += 1
        return entry

    def get_posts(self, post_type: str = "book") -> List[BookEntry]:
        if not self.available:
            raise StoreUnavailable("entry store is not available")
        with self._lock:
            return [e for e in self._entries if e.post_type == post_type]

    def get_post(self, entry_id: int) -> Optional[BookEntry]:
        if not self.available:
            raise StoreUnavailable("entry store is not available")
        with self._lock:
            return next((e for e in self._entries if e.id == entry_id), None)


def load_seed_file(path: Path, store: EntryStore, media: MediaLibrary) -> int:
    """Load attachments and books from a JSON seed file.

    The file holds an object with ``attachments`` and ``books`` lists.
    The whole file is validated before anything is inserted; attachments
    are registered first so that books can point at them through
    ``image_ref``. A missing or malformed file is logged and nothing is
    loaded.

    Returns
    -------
    int
        The number of books inserted.
    """
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, ValueError) as exc:
        logger.error("Could not read seed file %s: %s", path, exc)
        return 0

    try:
        seed = SeedFile.model_validate(raw)
    except ValidationError as exc:
        logger.error("Malformed seed file %s: %s", path, exc)
        return 0

    for item in seed.attachments:
        media.add_attachment(
            file=item.file,
            width=item.width,
            height=item.height,
            alt=item.alt,
            attachment_id=item.id,
        )
    for req in seed.books:
        store.insert_post(req)

    logger.info("Loaded %d books from %s", len(seed.books), path)
    return len(seed.books)
