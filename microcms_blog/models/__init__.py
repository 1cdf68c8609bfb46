"""
Pydantic models for microCMS payloads and the content entries built from them.
"""

from .cms import BlogPost, Category, ListResponse, MicroCMSImage, Tag
from .entry import (
    CategoryCount,
    CollectionEntry,
    PostData,
    PostForList,
    RenderFrontmatter,
    RenderResult,
    TagCount,
)

__all__ = [
    "BlogPost",
    "Category",
    "CategoryCount",
    "CollectionEntry",
    "ListResponse",
    "MicroCMSImage",
    "PostData",
    "PostForList",
    "RenderFrontmatter",
    "RenderResult",
    "Tag",
    "TagCount",
]
