from __future__ import annotations

import math
from datetime import datetime
from typing import Any, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


WORDS_PER_MINUTE = 200


class PostData(BaseModel):
    """Frontmatter-like ``data`` block of a post content entry.

    Neighbour fields stay empty until the sort pass in
    :func:`microcms_blog.adapters.collection.link_neighbours` fills them.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    title: str
    published: datetime
    updated: datetime
    description: str = ""
    image: str = ""
    tags: Tuple[str, ...] = ()
    category: Optional[str] = None
    draft: bool = False
    lang: str = ""
    prev_title: str = Field("", alias="prevTitle")
    prev_slug: str = Field("", alias="prevSlug")
    next_title: str = Field("", alias="nextTitle")
    next_slug: str = Field("", alias="nextSlug")


class RenderFrontmatter(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    excerpt: str = ""
    words: int = 0
    minutes: int = 1


class RenderResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    headings: List[Any] = Field(default_factory=list)
    remark_plugin_frontmatter: RenderFrontmatter = Field(
        default_factory=RenderFrontmatter, alias="remarkPluginFrontmatter"
    )


class CollectionEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    slug: str
    body: str = ""
    collection: Literal["posts"] = "posts"
    data: PostData

    def render(self) -> RenderResult:
        """Return reading statistics for the entry body.

        The body is not rendered here; ``words`` is the length of the raw
        body in UTF-16 code units (characters outside the BMP, such as
        emoji, count twice) and ``minutes`` never drops below one.
        """
        length = len(self.body.encode("utf-16-le")) // 2
        return RenderResult(
            headings=[],
            remark_plugin_frontmatter=RenderFrontmatter(
                excerpt=self.data.description,
                words=length,
                minutes=max(1, math.floor(length / WORDS_PER_MINUTE + 0.5)),
            ),
        )


class PostForList(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    slug: str
    data: PostData


class TagCount(BaseModel):
    name: str
    count: int


class CategoryCount(BaseModel):
    name: str
    count: int
    url: str
