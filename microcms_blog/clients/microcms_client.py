"""
microCMS API helper functions for the blog content pipeline.

This module implements the low-level reads against the microCMS REST
API.  Every function issues a single ``GET`` request for the ``blogs``,
``categories`` or ``tags`` endpoint, validates the JSON body into the
models of :mod:`microcms_blog.models.cms` and returns it.  Nothing here
retries or swallows errors: HTTP failures surface as
``requests.HTTPError`` and malformed payloads as
``pydantic.ValidationError``.

Usage example::

    from microcms_blog.clients.microcms_client import get_blog_posts, get_tags

    cfg = {"service_domain": "my-blog", "api_key": "..."}
    posts = get_blog_posts(cfg, limit=10)
    for post in posts.contents:
        print(post.title)
    print([t.name for t in get_tags(cfg).contents])

"""

from __future__ import annotations

from typing import Any, Dict, Optional

import requests

from microcms_blog.models.cms import BlogPost, Category, ListResponse, Tag

DEFAULT_LIMIT = 100
DEFAULT_ORDERS = "-publishedAt"
DEFAULT_TIMEOUT = 30

BLOGS_ENDPOINT = "blogs"
CATEGORIES_ENDPOINT = "categories"
TAGS_ENDPOINT = "tags"


###############################################################################
# Request helpers
###############################################################################

def microcms_base_url(cfg: Dict[str, Any]) -> str:
    """
    Resolve the API root for the configured service.

    An explicit ``base_url`` wins; otherwise the URL is derived from
    ``service_domain``.

    :param cfg: The ``microcms`` configuration section.
    :return: The API root without a trailing slash.
    """
    base_url = cfg.get("base_url")
    if base_url:
        return base_url.rstrip("/")
    return f"https://{cfg['service_domain']}.microcms.io/api/v1"


def microcms_headers(cfg: Dict[str, Any]) -> Dict[str, str]:
    """
    Construct the default headers required for microCMS API requests.

    :param cfg: A configuration dictionary with the ``api_key``.
    :return: A dictionary of headers including the API key.
    """
    return {
        "X-MICROCMS-API-KEY": cfg["api_key"],
    }


def _get(cfg: Dict[str, Any], endpoint: str, content_id: Optional[str] = None,
         queries: Optional[Dict[str, Any]] = None) -> Any:
    url = f"{microcms_base_url(cfg)}/{endpoint}"
    if content_id:
        url = f"{url}/{content_id}"
    # requests drops parameters whose value is None
    resp = requests.get(
        url,
        headers=microcms_headers(cfg),
        params=queries,
        timeout=cfg.get("timeout", DEFAULT_TIMEOUT),
    )
    resp.raise_for_status()
    return resp.json()


###############################################################################
# Blog posts
###############################################################################

def get_blog_posts(
    cfg: Dict[str, Any],
    *,
    limit: Optional[int] = None,
    offset: Optional[int] = None,
    filters: Optional[str] = None,
    orders: Optional[str] = None,
) -> ListResponse[BlogPost]:
    """
    List blog posts.

    Falsy ``limit``, ``offset`` and ``orders`` fall back to 100, 0 and
    ``-publishedAt`` respectively; ``filters`` is only sent when given.

    :param cfg: The ``microcms`` configuration section.
    :return: The list response with validated posts.
    :raises requests.HTTPError: on a non-2xx response.
    """
    data = _get(cfg, BLOGS_ENDPOINT, queries={
        "limit": limit or DEFAULT_LIMIT,
        "offset": offset or 0,
        "filters": filters,
        "orders": orders or DEFAULT_ORDERS,
    })
    return ListResponse[BlogPost].model_validate(data)


def get_blog_post(cfg: Dict[str, Any], content_id: str) -> BlogPost:
    """
    Fetch a single blog post by its content ID.

    :raises requests.HTTPError: on a non-2xx response, including 404 for
        unknown IDs.
    """
    data = _get(cfg, BLOGS_ENDPOINT, content_id=content_id)
    return BlogPost.model_validate(data)


def get_blog_posts_by_category(cfg: Dict[str, Any], category_id: str) -> ListResponse[BlogPost]:
    """List the newest posts filed under ``category_id``."""
    data = _get(cfg, BLOGS_ENDPOINT, queries={
        "filters": f"category[equals]{category_id}",
        "orders": DEFAULT_ORDERS,
        "limit": DEFAULT_LIMIT,
    })
    return ListResponse[BlogPost].model_validate(data)


def get_blog_posts_by_tag(cfg: Dict[str, Any], tag_id: str) -> ListResponse[BlogPost]:
    """List the newest posts carrying ``tag_id``."""
    data = _get(cfg, BLOGS_ENDPOINT, queries={
        "filters": f"tags[contains]{tag_id}",
        "orders": DEFAULT_ORDERS,
        "limit": DEFAULT_LIMIT,
    })
    return ListResponse[BlogPost].model_validate(data)


###############################################################################
# Taxonomy
###############################################################################

def get_categories(cfg: Dict[str, Any]) -> ListResponse[Category]:
    data = _get(cfg, CATEGORIES_ENDPOINT, queries={"limit": DEFAULT_LIMIT})
    return ListResponse[Category].model_validate(data)


def get_tags(cfg: Dict[str, Any]) -> ListResponse[Tag]:
    data = _get(cfg, TAGS_ENDPOINT, queries={"limit": DEFAULT_LIMIT})
    return ListResponse[Tag].model_validate(data)
