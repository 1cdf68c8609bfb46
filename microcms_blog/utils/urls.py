"""
Site URL builders for posts and archive pages.

The helpers here produce the relative links the static site uses for the
archive filters (by category or tag) and for single posts.  All links are
joined onto ``site.base_path`` from the configuration so the site can be
served from a sub-directory.
"""

from __future__ import annotations

from typing import Any, Dict, Optional
from urllib.parse import quote

from microcms_blog.utils.categories import DEFAULT_UNCATEGORIZED_LABEL

# Characters encodeURIComponent leaves untouched
_COMPONENT_SAFE = "-_.!~*'()"


def _site(config: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    return (config or {}).get("site", {})


def url(path: str, base_path: str = "/") -> str:
    """Join ``base_path`` and ``path`` with exactly one slash between them."""
    base = "/" + base_path.strip("/") if base_path.strip("/") else ""
    return f"{base}/{path.lstrip('/')}"


def get_category_url(category: Optional[str], config: Optional[Dict[str, Any]] = None) -> str:
    """
    Archive URL filtered on ``category``.

    Empty names and the uncategorized label (compared case-insensitively)
    link to the uncategorized archive instead.
    """
    site = _site(config)
    base_path = site.get("base_path", "/")
    label = site.get("uncategorized_label") or DEFAULT_UNCATEGORIZED_LABEL
    name = (category or "").strip()
    if not name or name.lower() == label.lower():
        return url("/archive/?uncategorized=true", base_path)
    return url(f"/archive/?category={quote(name, safe=_COMPONENT_SAFE)}", base_path)


def get_tag_url(tag: Optional[str], config: Optional[Dict[str, Any]] = None) -> str:
    base_path = _site(config).get("base_path", "/")
    name = (tag or "").strip()
    if not name:
        return url("/archive/", base_path)
    return url(f"/archive/?tag={quote(name, safe=_COMPONENT_SAFE)}", base_path)


def get_post_url_by_slug(slug: str, config: Optional[Dict[str, Any]] = None) -> str:
    return url(f"/posts/{slug}/", _site(config).get("base_path", "/"))
