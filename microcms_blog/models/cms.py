from __future__ import annotations

from datetime import datetime
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field


class MicroCMSImage(BaseModel):
    url: str
    height: Optional[int] = None
    width: Optional[int] = None

    model_config = ConfigDict(extra="allow")


class _ContentBase(BaseModel):
    """Fields microCMS attaches to every content item."""

    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
        frozen=True,
    )

    id: str
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")
    # Unpublished content has no publish/revise timestamps
    published_at: Optional[datetime] = Field(None, alias="publishedAt")
    revised_at: Optional[datetime] = Field(None, alias="revisedAt")


class Category(_ContentBase):
    name: str
    slug: str = ""


class Tag(_ContentBase):
    name: str
    slug: str = ""


class BlogPost(_ContentBase):
    title: str
    content: str = ""
    description: Optional[str] = None
    image: Optional[MicroCMSImage] = None
    tags: Optional[List[Tag]] = None
    category: Optional[Category] = None
    draft: Optional[bool] = None


T = TypeVar("T")


class ListResponse(BaseModel, Generic[T]):
    model_config = ConfigDict(populate_by_name=True)

    contents: List[T] = Field(default_factory=list)
    total_count: int = Field(0, alias="totalCount")
    offset: int = 0
    limit: int = 0
