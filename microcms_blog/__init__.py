"""
Top-level package for the microCMS blog content adapter.

This package reads blog posts, categories and tags from the microCMS
content API and reshapes them into the content entries and taxonomy
views a static site consumes.  Modules are split into subpackages:

* :mod:`microcms_blog.clients` – microCMS REST reads
* :mod:`microcms_blog.models` – pydantic models for payloads and entries
* :mod:`microcms_blog.adapters` – entry conversion, neighbour links and counts
* :mod:`microcms_blog.utils` – error logging, taxonomy counting and URLs

Orchestration of a full export is handled in :mod:`microcms_blog.content_tool`.
"""

__version__ = "0.1.0"
