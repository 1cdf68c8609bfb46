from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from microcms_blog.models.cms import BlogPost
from microcms_blog.utils.categories import sort_counts


def post_tag_names(post: BlogPost) -> List[str]:
    """Tag names of ``post`` in CMS order, empty when the post has none."""
    return [tag.name for tag in post.tags or []]


def count_tags(posts: Iterable[BlogPost]) -> List[Tuple[str, int]]:
    """
    Count how many times each tag name is referenced across ``posts``.

    Names are kept exactly as the CMS returns them; only the ordering is
    case- and accent-insensitive.

    Returns a list of ``(name, count)`` pairs sorted by name.
    """
    counts: Dict[str, int] = {}
    for post in posts:
        for name in post_tag_names(post):
            counts[name] = counts.get(name, 0) + 1
    return sort_counts(counts)
