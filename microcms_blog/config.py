from __future__ import annotations

import json
import os
from typing import Any, Dict, Optional

DEFAULT_CONFIG_FILE = os.path.join("config", "content_config.json")


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes", "on")


def load_config(config: Optional[Dict[str, Any]] = None, *, config_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Build the configuration dictionary used throughout the package.

    ``config_file`` (JSON) takes precedence over ``config``.  Missing keys
    are filled from environment variables and then from defaults, so
    callers can index any documented key without guarding against
    ``KeyError``.
    """
    if config_file and os.path.exists(config_file):
        with open(config_file, "r", encoding="utf-8") as f:
            config = json.load(f)
    elif config is None:
        config = {}

    config.setdefault("microcms", {})
    config["microcms"].setdefault("service_domain", os.getenv("MICROCMS_SERVICE_DOMAIN", ""))
    config["microcms"].setdefault("api_key", os.getenv("MICROCMS_API_KEY", ""))
    config["microcms"].setdefault("base_url", os.getenv("MICROCMS_BASE_URL", ""))
    config["microcms"].setdefault("timeout", 30)

    config.setdefault("site", {})
    config["site"].setdefault("production", _env_flag("MICROCMS_PRODUCTION"))
    config["site"].setdefault("base_path", os.getenv("SITE_BASE_PATH", "/"))
    config["site"].setdefault("uncategorized_label", "Uncategorized")

    config.setdefault("export", {})
    config["export"].setdefault("output_dir", os.path.join("data", "content"))
    return config
