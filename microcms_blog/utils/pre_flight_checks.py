import requests

from microcms_blog.clients.microcms_client import (
    BLOGS_ENDPOINT,
    microcms_base_url,
    microcms_headers,
)


class PreFlightCheckError(Exception):
    """Custom exception for pre-flight check failures."""
    pass


def run_microcms_pre_flight_checks(config: dict):
    """
    Verifies that the microCMS service is reachable with the configured key.

    Args:
        config: The application configuration dictionary.

    Raises:
        PreFlightCheckError: If any check fails.
    """
    print("[INFO] Running pre-flight checks...")

    cfg = config.get("microcms", {})
    if not cfg.get("service_domain") and not cfg.get("base_url"):
        raise PreFlightCheckError("microCMS service domain not found in configuration.")
    if not cfg.get("api_key"):
        raise PreFlightCheckError("microCMS API key not found in configuration.")

    blogs_url = f"{microcms_base_url(cfg)}/{BLOGS_ENDPOINT}"
    try:
        response = requests.get(
            blogs_url,
            headers=microcms_headers(cfg),
            params={"limit": 1, "fields": "id"},
            timeout=10,
        )
        response.raise_for_status()
    except requests.HTTPError as e:
        status = e.response.status_code if e.response is not None else None
        if status in (401, 403):
            raise PreFlightCheckError("The configured microCMS API key is invalid or lacks GET permission.")
        if status == 404:
            raise PreFlightCheckError(f"The '{BLOGS_ENDPOINT}' API does not exist on this microCMS service.")
        raise PreFlightCheckError(f"Unexpected error while checking the blogs API: {e}")
    except requests.RequestException as e:
        raise PreFlightCheckError(f"Network error while connecting to microCMS: {e}")

    print("[INFO] Pre-flight checks passed successfully.")
