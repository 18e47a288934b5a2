# reading_list/models.py
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class CreateBookRequest(BaseModel):
    title: str
    body: str = ""
    image_ref: Optional[int] = Field(
        default=None,
        description="Attachment id used as the featured image.",
    )


class BookEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    post_type: str = "book"
    title: str
    body: str = ""
    image_ref: Optional[int] = None


class Attachment(BaseModel):
    id: int
    file: str
    width: int
    height: int
    alt: str = ""


class ImageSource(BaseModel):
    url: str
    width: int
    height: int


class ContentType(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    labels: Dict[str, str] = Field(default_factory=dict)
    public: bool = False
    has_archive: bool = False
    supports: Tuple[str, ...] = ("title", "editor")
    show_in_rest: bool = False
    rest_base: Optional[str] = None

    @property
    def rest_path(self) -> str:
        return self.rest_base or self.name


class DisplayConfig(BaseModel):
    """Per-placement flags set in the block settings panel."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    show_image: bool = Field(default=False, alias="showImage")
    show_content: bool = Field(default=False, alias="showContent")


class SeedAttachment(BaseModel):
    id: Optional[int] = None
    file: str
    width: int
    height: int
    alt: str = ""


class SeedFile(BaseModel):
    """Shape of the JSON file loaded at startup."""

    attachments: List[SeedAttachment] = Field(default_factory=list)
    books: List[CreateBookRequest] = Field(default_factory=list)
