"""
Route definitions for server-side block rendering.

Endpoints under /api/blocks:
- GET  /                              : registered block types
- POST /{namespace}/{name}/render     : render one placement
"""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field, ValidationError

from ..deps import get_platform


router = APIRouter(prefix="/api/blocks", tags=["blocks"])


class BlockTypeRead(BaseModel):
    name: str
    title: str = ""
    category: str = ""
    description: str = ""
    attributes: Dict[str, Dict[str, Any]] = Field(default_factory=dict)
    supports: Dict[str, Any] = Field(default_factory=dict)


class RenderRequest(BaseModel):
    attributes: Dict[str, Any] = Field(default_factory=dict)
    # Opaque attributes from the page layout, merged onto the block wrapper.
    wrapper_attributes: Dict[str, str] = Field(default_factory=dict)


class RenderResponse(BaseModel):
    rendered: str


@router.get("", response_model=List[BlockTypeRead])
def list_block_types(platform=Depends(get_platform)) -> List[BlockTypeRead]:
    return [
        BlockTypeRead(
            name=b.name,
            title=b.title,
            category=b.category,
            description=b.description,
            attributes=b.attributes,
            supports=b.supports,
        )
        for b in platform.blocks.all()
    ]


@router.post("/{namespace}/{name}/render", response_model=RenderResponse)
def render_block(
    namespace: str,
    name: str,
    req: RenderRequest,
    platform=Depends(get_platform),
) -> RenderResponse:
    """Render a placement; unknown blocks and blocks without a template render as ``""``."""
    try:
        rendered = platform.blocks.render(
            f"{namespace}/{name}",
            attributes=req.attributes,
            wrapper_attributes=req.wrapper_attributes,
        )
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False))
    return RenderResponse(rendered=rendered)
