"""
Tag and category frequency views.

Both views fetch the taxonomy list and a large page of posts at the same
time, wait for both, and then count how many posts reference each name.
The counts come from the posts alone, so taxonomy terms that no post uses
do not appear in the output.
"""

from __future__ import annotations

import concurrent.futures
from typing import Any, Callable, Dict, List, Tuple

from microcms_blog.clients.microcms_client import get_blog_posts, get_categories, get_tags
from microcms_blog.models.cms import BlogPost, ListResponse
from microcms_blog.models.entry import CategoryCount, TagCount
from microcms_blog.utils.categories import count_categories
from microcms_blog.utils.tags import count_tags
from microcms_blog.utils.urls import get_category_url

AGGREGATE_POST_LIMIT = 1000


def _fetch_with_posts(
    cfg: Dict[str, Any],
    taxonomy_fn: Callable[[Dict[str, Any]], ListResponse],
) -> Tuple[ListResponse, ListResponse[BlogPost]]:
    """Run ``taxonomy_fn`` and the aggregate post query concurrently.

    Exceptions from either request propagate once both have finished.
    """
    with concurrent.futures.ThreadPoolExecutor(max_workers=2) as pool:
        taxonomy_future = pool.submit(taxonomy_fn, cfg)
        posts_future = pool.submit(get_blog_posts, cfg, limit=AGGREGATE_POST_LIMIT)
        return taxonomy_future.result(), posts_future.result()


def get_tag_list(config: Dict[str, Any]) -> List[TagCount]:
    _, posts = _fetch_with_posts(config["microcms"], get_tags)
    return [TagCount(name=name, count=count) for name, count in count_tags(posts.contents)]


def get_category_list(config: Dict[str, Any]) -> List[CategoryCount]:
    """
    Count posts per category, including an uncategorized bucket.

    Each result links to its archive page via
    :func:`~microcms_blog.utils.urls.get_category_url`.
    """
    _, posts = _fetch_with_posts(config["microcms"], get_categories)
    label = config.get("site", {}).get("uncategorized_label")
    return [
        CategoryCount(name=name, count=count, url=get_category_url(name, config))
        for name, count in count_categories(posts.contents, label)
    ]
