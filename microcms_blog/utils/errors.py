"""
Structured logging helpers for content fetch errors and successes.

The :mod:`microcms_blog.utils.errors` module centralizes the writing of log
entries for both failed and successful operations while content is pulled
from microCMS.  Each entry is appended to a JSON Lines file under
``reports/content`` (or the directory named by ``MICROCMS_REPORT_DIR``) so
that the information can be reviewed or parsed after a run.

Two public functions are provided:

``report_error``
    Record an error that occurred for a content item.  An optional
    exception can be supplied and will be serialized to the log.

``report_ok``
    Record a successful step for a content item.  Additional key/value
    information can be attached to the entry via the ``extra`` parameter.

The ``ERRORS`` dictionary maps error or event codes to human readable
messages.  Codes not present in the dictionary fall back to the code itself.
"""

from __future__ import annotations

import json
import os
from typing import Any, Dict, Optional

ERRORS: Dict[str, str] = {
    "POST_FETCH": "Failed to fetch post from microCMS",
    "EXPORT": "Failed to export content",
    "EXPORTED": "Content exported successfully",
}

DEFAULT_REPORT_DIR = os.path.join("reports", "content")


def report_dir() -> str:
    """Directory for report files, re-read from ``MICROCMS_REPORT_DIR`` on every call."""
    return os.getenv("MICROCMS_REPORT_DIR") or DEFAULT_REPORT_DIR


def _write_jsonl(filename: str, data: Dict[str, Any]) -> None:
    """Append ``data`` as a JSON object followed by a newline to ``filename``."""
    os.makedirs(report_dir(), exist_ok=True)
    with open(os.path.join(report_dir(), filename), "a", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, default=str)
        f.write("\n")


def report_error(code: str, item: Dict[str, Any], exc: Optional[BaseException] = None) -> None:
    """Log an error event for ``item``.

    Parameters
    ----------
    code:
        A key identifying the type of error.  If ``code`` is present in
        :data:`ERRORS` its value will be used as the message.
    item:
        Dictionary describing the content item.  Only the ``id`` and
        ``title`` keys are referenced if present.
    exc:
        Optional exception instance that triggered the error.  The string
        representation of the exception will be included in the log entry.
    """
    message = ERRORS.get(code, code)
    entry: Dict[str, Any] = {
        "code": code,
        "message": message,
        "id": item.get("id"),
        "title": item.get("title"),
    }
    if exc is not None:
        entry["error"] = str(exc)
    print(f"[ERROR] {message} - {item.get('id', '')}")
    _write_jsonl("errors.jsonl", entry)


def report_ok(code: str, item: Dict[str, Any], extra: Optional[Dict[str, Any]] = None) -> None:
    """Log a successful event for ``item``.

    ``extra`` is merged into the log entry when given.
    """
    message = ERRORS.get(code, code)
    entry: Dict[str, Any] = {
        "code": code,
        "message": message,
        "id": item.get("id"),
        "title": item.get("title"),
    }
    if extra:
        entry.update(extra)
    print(f"[OK] {message} - {item.get('id', '')}")
    _write_jsonl("success.jsonl", entry)
