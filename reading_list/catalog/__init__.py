"""
Catalog package: the public read API for content entries.

Entries are listed and fetched per content type. Types only appear
here when registered with ``show_in_rest``; derived fields such as a
book's ``featured_image_src`` are added through ``RestFieldRegistry``.
"""

from .router import router as catalog_router  # noqa: F401
