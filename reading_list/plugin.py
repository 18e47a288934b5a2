# reading_list/plugin.py
"""
Wires the reading list into the platform's lifecycle hooks.

``init`` registers the block types from the manifest and the ``book``
content type; ``rest_api_init`` adds ``featured_image_src`` to the
public representation of books.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .blocks.manifest import BLOCKS_MANIFEST
from .blocks.registry import BlockRegistry
from .catalog.fields import RestFieldRegistry, register_book_featured_image
from .config import Settings
from .content_types import register_book_post_type
from .hooks import HookDispatcher
from .media import MediaLibrary
from .storage import EntryStore, load_seed_file


logger = logging.getLogger(__name__)


@dataclass
class Platform:
    """The collaborators a running site provides."""

    store: EntryStore = field(default_factory=EntryStore)
    media: MediaLibrary = field(default_factory=MediaLibrary)
    hooks: HookDispatcher = field(default_factory=HookDispatcher)
    rest_fields: RestFieldRegistry = field(default_factory=RestFieldRegistry)
    blocks: Optional[BlockRegistry] = None

    def __post_init__(self) -> None:
        if self.blocks is None:
            self.blocks = BlockRegistry(self.store, self.media)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Platform":
        return cls(media=MediaLibrary(uploads_url=settings.uploads_url))

    def boot(self) -> None:
        self.hooks.do_action("init", self)
        self.hooks.do_action("rest_api_init", self)


def reading_list_block_init(platform: Platform) -> None:
    registered = platform.blocks.register_block_types_from_manifest(BLOCKS_MANIFEST)
    logger.info("Registered %d block type(s)", len(registered))


def register_book_post_type_action(platform: Platform) -> None:
    register_book_post_type(platform.store)


def register_book_featured_image_action(platform: Platform) -> None:
    register_book_featured_image(platform.rest_fields, platform.media)


def run(platform: Platform) -> None:
    platform.hooks.add_action("init", reading_list_block_init)
    platform.hooks.add_action("init", register_book_post_type_action)
    platform.hooks.add_action("rest_api_init", register_book_featured_image_action)


def create_platform(settings: Settings) -> Platform:
    platform = Platform.from_settings(settings)
    run(platform)
    platform.boot()
    if settings.seed_file:
        load_seed_file(Path(settings.seed_file), platform.store, platform.media)
    return platform
