# reading_list/blocks/manifest.py
"""Block metadata, one entry per block type shipped by this package."""

from typing import Any, Dict

BLOCKS_MANIFEST: Dict[str, Dict[str, Any]] = {
    "my-reading-list": {
        "name": "my-reading-list/my-reading-list",
        "title": "My Reading List",
        "category": "widgets",
        "description": "Create a list of books to be rendered in a dynamic block.",
        "attributes": {
            "showImage": {"type": "boolean", "default": False},
            "showContent": {"type": "boolean", "default": False},
        },
        "supports": {"html": False},
    },
}
