# reading_list/blocks/registry.py
"""
Dynamic block registration and render dispatch.

Block types are registered from metadata (see ``manifest.py``). When a
placement is rendered, ``render_callback`` locates the render template
from the block's namespaced name: the namespace, with ``-`` turned into
``_``, names a module under ``reading_list.blocks.templates`` that
exposes ``render_block(attributes, content, block)``. A block with no
matching template renders as an empty string.
"""

from __future__ import annotations

import importlib
import importlib.util
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from ..media import MediaLibrary
from ..storage import EntryStore


logger = logging.getLogger(__name__)

TEMPLATES_PACKAGE = "reading_list.blocks.templates"


@dataclass(frozen=True)
class BlockType:
    name: str
    title: str = ""
    category: str = "widgets"
    description: str = ""
    attributes: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    supports: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_metadata(cls, metadata: Mapping[str, Any]) -> "BlockType":
        return cls(
            name=metadata["name"],
            title=metadata.get("title", ""),
            category=metadata.get("category", "widgets"),
            description=metadata.get("description", ""),
            attributes=dict(metadata.get("attributes") or {}),
            supports=dict(metadata.get("supports") or {}),
        )

    @property
    def namespace(self) -> str:
        return self.name.split("/", 1)[0]

    def prepare_attributes(self, attributes: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """Fill in declared defaults for attributes the placement did not set."""
        prepared = {
            key: schema["default"]
            for key, schema in self.attributes.items()
            if "default" in schema
        }
        prepared.update(attributes or {})
        return prepared


@dataclass
class Block:
    """One placement being rendered."""

    block_type: BlockType
    attributes: Dict[str, Any]
    store: EntryStore
    media: MediaLibrary
    wrapper_attributes: Dict[str, str] = field(default_factory=dict)

    @property
    def name(self) -> str:
        return self.block_type.name


class BlockRegistry:
    def __init__(self, store: EntryStore, media: MediaLibrary) -> None:
        self.store = store
        self.media = media
        self._types: Dict[str, BlockType] = {}

    def register_block_type(self, metadata: Mapping[str, Any]) -> BlockType:
        block_type = BlockType.from_metadata(metadata)
        self._types[block_type.name] = block_type
        logger.debug("Registered block type %s", block_type.name)
        return block_type

    def register_block_types_from_manifest(self, manifest: Mapping[str, Mapping[str, Any]]) -> List[BlockType]:
        return [self.register_block_type(metadata) for metadata in manifest.values()]

    def get(self, name: str) -> Optional[BlockType]:
        return self._types.get(name)

    def all(self) -> List[BlockType]:
        return list(self._types.values())

    def render(
        self,
        name: str,
        attributes: Optional[Mapping[str, Any]] = None,
        content: str = "",
        wrapper_attributes: Optional[Mapping[str, str]] = None,
    ) -> str:
        block_type = self.get(name)
        if block_type is None:
            logger.info("No block type registered as %s", name)
            return ""
        block = Block(
            block_type=block_type,
            attributes=block_type.prepare_attributes(attributes),
            store=self.store,
            media=self.media,
            wrapper_attributes=dict(wrapper_attributes or {}),
        )
        return self.render_callback(block.attributes, content, block)

    def render_callback(self, attributes: Dict[str, Any], content: str, block: Block) -> str:
        slug = block.block_type.namespace.replace("-", "_")
        module_name = f"{TEMPLATES_PACKAGE}.{slug}"
        logger.debug("Rendering block from template: %s", module_name)

        if not slug.isidentifier():
            return ""
        try:
            spec = importlib.util.find_spec(module_name)
        except ModuleNotFoundError:
            spec = None
        if spec is None:
            return ""
        template = importlib.import_module(module_name)
        render_block = getattr(template, "render_block", None)
        if render_block is None:
            return ""
        return render_block(attributes, content, block)
