"""
High-level orchestration of the microCMS content export.

This module defines a :class:`BlogContentTool` class that ties together the
client, adapters and utilities into a complete run: it loads the
configuration, checks that microCMS is reachable, builds the sorted post
entries and the tag and category views, and writes each of them as a JSON
file that the static-site build reads.

Configuration is supplied via a JSON file path or directly as a
dictionary; see :func:`microcms_blog.config.load_config` for the keys.
"""

from __future__ import annotations

import json
import os
from typing import Any, Dict, List, Optional

from microcms_blog.adapters.collection import get_sorted_posts
from microcms_blog.adapters.taxonomy import get_category_list, get_tag_list
from microcms_blog.config import load_config
from microcms_blog.utils.errors import report_dir, report_error, report_ok
from microcms_blog.utils.pre_flight_checks import run_microcms_pre_flight_checks
from microcms_blog.utils.urls import get_tag_url


class BlogContentTool:
    """
    Encapsulates the state required to export microCMS blog content.
    Detailed success and failure information is recorded using the
    :mod:`microcms_blog.utils.errors` module.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None, *, config_file: Optional[str] = None) -> None:
        self.config = load_config(config, config_file=config_file)
        self.output_dir: str = self.config["export"]["output_dir"]

    def log_message(self, message: str, level: str = "INFO") -> None:
        print(f"[{level}] {message}")
        os.makedirs(report_dir(), exist_ok=True)
        with open(os.path.join(report_dir(), "content.log"), "a", encoding="utf-8") as f:
            f.write(f"{level}: {message}\n")

    def pre_flight(self) -> None:
        run_microcms_pre_flight_checks(self.config)

    def _write_json(self, name: str, payload: List[Dict[str, Any]]) -> str:
        os.makedirs(self.output_dir, exist_ok=True)
        path = os.path.join(self.output_dir, name)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=2)
        return path

    def export_posts(self) -> str:
        entries = get_sorted_posts(self.config)
        self.log_message(f"Fetched {len(entries)} posts")
        payload = []
        for entry in entries:
            item = entry.model_dump(mode="json", by_alias=True)
            item["render"] = entry.render().model_dump(mode="json", by_alias=True)
            payload.append(item)
        return self._write_json("posts.json", payload)

    def export_tags(self) -> str:
        tags = get_tag_list(self.config)
        self.log_message(f"Counted {len(tags)} tags")
        payload = [
            {**tag.model_dump(), "url": get_tag_url(tag.name, self.config)}
            for tag in tags
        ]
        return self._write_json("tags.json", payload)

    def export_categories(self) -> str:
        categories = get_category_list(self.config)
        self.log_message(f"Counted {len(categories)} categories")
        return self._write_json("categories.json", [c.model_dump() for c in categories])

    def export_all(self) -> Dict[str, str]:
        """
        Export posts, tags and categories into :attr:`output_dir`.

        A failing view is reported and skipped so the remaining views are
        still written.

        :return: Mapping of view name to written file path.
        """
        written: Dict[str, str] = {}
        steps = {
            "posts": self.export_posts,
            "tags": self.export_tags,
            "categories": self.export_categories,
        }
        for name, step in steps.items():
            try:
                path = step()
            except Exception as e:
                error_details = e.response.text if getattr(e, "response", None) is not None else str(e)
                report_error("EXPORT", {"id": name}, e)
                self.log_message(f"Failed to export {name}: {error_details}", "ERROR")
                continue
            written[name] = path
            report_ok("EXPORTED", {"id": name}, {"path": path})
        return written
