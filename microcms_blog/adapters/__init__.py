"""
Adapters from microCMS payloads to content-collection records.

* :mod:`microcms_blog.adapters.collection` – post entries and neighbour links
* :mod:`microcms_blog.adapters.taxonomy` – tag and category counts
"""

from .collection import (
    convert_blog_post_to_entry,
    get_post_by_slug,
    get_sorted_posts,
    get_sorted_posts_list,
    link_neighbours,
)
from .taxonomy import get_category_list, get_tag_list

__all__ = [
    "convert_blog_post_to_entry",
    "get_category_list",
    "get_post_by_slug",
    "get_sorted_posts",
    "get_sorted_posts_list",
    "get_tag_list",
    "link_neighbours",
]
