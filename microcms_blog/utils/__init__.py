"""
Utility helpers used by the content pipeline.

This subpackage exposes convenience functions for structured logging,
taxonomy counting and site URL generation.
"""

from .errors import ERRORS, report_error, report_ok
from .urls import get_category_url, get_post_url_by_slug, get_tag_url

__all__ = [
    "ERRORS",
    "report_error",
    "report_ok",
    "get_category_url",
    "get_post_url_by_slug",
    "get_tag_url",
]
