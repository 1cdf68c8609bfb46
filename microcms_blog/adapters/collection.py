"""
Conversion of microCMS blog posts into content-collection entries.

A :class:`~microcms_blog.models.entry.CollectionEntry` is the record the
static site consumes for one post: ``id``/``slug`` are the microCMS content
ID, ``body`` is the raw post content and ``data`` carries the frontmatter
fields.  The list operations additionally link every entry to its
chronological neighbours so post pages can render "previous" and "next"
links without another lookup.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from microcms_blog.clients.microcms_client import get_blog_posts
from microcms_blog.models.cms import BlogPost
from microcms_blog.models.entry import CollectionEntry, PostData, PostForList
from microcms_blog.utils.errors import report_error

PUBLISHED_ONLY_FILTER = "draft[equals]false"


def convert_blog_post_to_entry(post: BlogPost) -> CollectionEntry:
    """
    Reshape a microCMS post into a content entry.

    Missing optionals get the entry defaults: empty description and image,
    no tags, ``None`` category and ``draft=False``.  Posts that were never
    published fall back to their creation time for ``published``.
    """
    return CollectionEntry(
        id=post.id,
        slug=post.id,
        body=post.content,
        data=PostData(
            title=post.title,
            published=post.published_at or post.created_at,
            updated=post.updated_at,
            description=post.description or "",
            image=post.image.url if post.image else "",
            tags=tuple(tag.name for tag in post.tags or []),
            category=post.category.name if post.category else None,
            draft=bool(post.draft),
        ),
    )


def link_neighbours(entries: List[CollectionEntry]) -> List[CollectionEntry]:
    """
    Fill the previous/next fields of entries ordered newest first.

    ``next`` points at the newer post (the preceding element) and ``prev``
    at the older one (the following element).  The input is not modified;
    linked copies are returned in the same order.
    """
    linked: List[CollectionEntry] = []
    for i, entry in enumerate(entries):
        update: Dict[str, str] = {}
        if i > 0:
            newer = entries[i - 1]
            update["next_slug"] = newer.slug
            update["next_title"] = newer.data.title
        if i < len(entries) - 1:
            older = entries[i + 1]
            update["prev_slug"] = older.slug
            update["prev_title"] = older.data.title
        linked.append(entry.model_copy(update={"data": entry.data.model_copy(update=update)}))
    return linked


def get_sorted_posts(config: Dict[str, Any]) -> List[CollectionEntry]:
    """
    Fetch posts newest first and link each one to its neighbours.

    When ``site.production`` is set drafts are filtered out server-side.

    :raises requests.HTTPError: when the list request fails.
    """
    production = config.get("site", {}).get("production", False)
    response = get_blog_posts(
        config["microcms"],
        orders="-publishedAt",
        filters=PUBLISHED_ONLY_FILTER if production else None,
    )
    entries = [convert_blog_post_to_entry(post) for post in response.contents]
    # sorted() is stable, so posts sharing a timestamp keep the API order
    entries = sorted(entries, key=lambda e: e.data.published, reverse=True)
    return link_neighbours(entries)


def get_sorted_posts_list(config: Dict[str, Any]) -> List[PostForList]:
    """Slug and data of :func:`get_sorted_posts`, without the post bodies."""
    return [PostForList(slug=entry.slug, data=entry.data) for entry in get_sorted_posts(config)]


def get_post_by_slug(config: Dict[str, Any], slug: str) -> Optional[CollectionEntry]:
    """
    Look up a single post by its slug (the microCMS content ID).

    Returns ``None`` when no post matches.  Any failure while fetching or
    validating the post is reported and also yields ``None``.
    """
    try:
        response = get_blog_posts(
            config["microcms"],
            filters=f"id[equals]{slug}",
            limit=1,
        )
        if not response.contents:
            return None
        return convert_blog_post_to_entry(response.contents[0])
    except Exception as e:
        report_error("POST_FETCH", {"id": slug}, e)
        return None
