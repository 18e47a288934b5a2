# reading_list/content_types.py
from __future__ import annotations

from .models import ContentType
from .storage import EntryStore


BOOK_POST_TYPE = ContentType(
    name="book",
    labels={"name": "Books", "singular_name": "Book"},
    public=True,
    has_archive=True,
    supports=("title", "editor", "thumbnail"),
    show_in_rest=True,
)


def register_book_post_type(store: EntryStore) -> ContentType:
    """Declare the ``book`` content type. Safe to call more than once."""
    return store.register_post_type(BOOK_POST_TYPE)
