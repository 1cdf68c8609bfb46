from __future__ import annotations

import unicodedata
from typing import Dict, Iterable, List, Optional, Tuple

from microcms_blog.models.cms import BlogPost


DEFAULT_UNCATEGORIZED_LABEL = "Uncategorized"


def _strip_accents(text: str) -> str:
    return "".join(
        c for c in unicodedata.normalize("NFD", text) if unicodedata.category(c) != "Mn"
    )


def _katakana_to_hiragana(text: str) -> str:
    # Katakana ァ..ヶ and the iteration marks ヽヾ sit 0x60 above their hiragana forms
    return "".join(
        chr(ord(c) - 0x60) if "ァ" <= c <= "ヶ" or c in "ヽヾ" else c
        for c in text
    )


def name_sort_key(name: str) -> Tuple[str, str]:
    """
    Sort key approximating a locale-aware, case-insensitive comparison.

    Names compare first on a folded form: width variants unified (NFKC),
    lowercased, accents and kana voicing marks dropped ("Éte" with "ete",
    "が" with "か") and katakana mapped onto hiragana, so both kana scripts
    interleave in gojūon order ("アニメ" before "かめ").  Ties fall back to
    the lowercased original, which puts hiragana before katakana and
    unaccented before accented names.
    """
    lowered = unicodedata.normalize("NFKC", name).lower()
    return (_katakana_to_hiragana(_strip_accents(lowered)), lowered)


def sort_counts(counts: Dict[str, int]) -> List[Tuple[str, int]]:
    return [(name, counts[name]) for name in sorted(counts, key=name_sort_key)]


def post_category_name(post: BlogPost, uncategorized_label: str = DEFAULT_UNCATEGORIZED_LABEL) -> str:
    """Return the trimmed category name of ``post`` or the uncategorized label."""
    if post.category is None:
        return uncategorized_label
    return post.category.name.strip()


def count_categories(
    posts: Iterable[BlogPost],
    uncategorized_label: Optional[str] = None,
) -> List[Tuple[str, int]]:
    """
    Count posts per category name.

    - Category names are trimmed before counting
    - Posts without a category are counted under ``uncategorized_label``
    - The result is sorted by :func:`name_sort_key`

    Returns a list of ``(name, count)`` pairs.
    """
    label = uncategorized_label or DEFAULT_UNCATEGORIZED_LABEL
    counts: Dict[str, int] = {}
    for post in posts:
        name = post_category_name(post, label)
        counts[name] = counts.get(name, 0) + 1
    return sort_counts(counts)
