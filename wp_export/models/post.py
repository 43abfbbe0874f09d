from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..extractors.document import ExportNode
from ..utils.urls import get_filename_from_url


class ImageRecord(BaseModel):
    """An image discovered in the export, waiting to be merged into posts.

    ``id`` is ``None`` for images scraped from markup (they have no record of
    their own) and ``post_id`` is ``None`` for attachments without a parent.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: Optional[str] = None
    post_id: Optional[str] = Field(None, alias="postId")
    url: str
    description: str = ""

    @property
    def filename(self) -> str:
        return get_filename_from_url(self.url)


class PostRecord(BaseModel):
    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        populate_by_name=True,
    )

    # full raw item, read by the frontmatter getters
    data: ExportNode = Field(..., exclude=True, repr=False)

    type: str
    id: str
    is_draft: bool = Field(False, alias="isDraft")
    slug: str
    date: Optional[datetime] = None
    cover_image_id: Optional[str] = Field(None, alias="coverImageId")
    content: str = ""

    # set by merge_images_into_posts()
    cover_image: Optional[str] = Field(None, alias="coverImage")
    cover_image_description: Optional[str] = Field(None, alias="coverImageDescription")
    image_urls: List[str] = Field(default_factory=list, alias="imageUrls")
    image_descriptions: Dict[str, str] = Field(default_factory=dict, alias="imageDescriptions")

    # set by populate_frontmatter()
    frontmatter: Dict[str, Any] = Field(default_factory=dict)

    def add_image_url(self, url: str) -> bool:
        """Append ``url`` unless already attached; return whether it was appended."""
        if url in self.image_urls:
            return False
        self.image_urls.append(url)
        return True
