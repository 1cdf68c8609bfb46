import os
import sys

import pytest

# Ensure project root is on sys.path for imports when running tests directly
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from microcms_blog.config import load_config
from microcms_blog.models.cms import BlogPost, ListResponse


def make_taxonomy(name, slug=None, id_=None):
    return {
        "id": id_ or (slug or name.lower()),
        "createdAt": "2024-01-01T00:00:00.000Z",
        "updatedAt": "2024-01-01T00:00:00.000Z",
        "publishedAt": "2024-01-01T00:00:00.000Z",
        "revisedAt": "2024-01-01T00:00:00.000Z",
        "name": name,
        "slug": slug or name.lower(),
    }


def make_post(id_, title, day=1, **extra):
    data = {
        "id": id_,
        "createdAt": f"2024-03-{day:02d}T09:00:00.000Z",
        "updatedAt": f"2024-03-{day:02d}T12:00:00.000Z",
        "publishedAt": f"2024-03-{day:02d}T10:00:00.000Z",
        "revisedAt": f"2024-03-{day:02d}T12:00:00.000Z",
        "title": title,
        "content": f"<p>{title} body</p>",
    }
    data.update(extra)
    return data


def list_payload(contents, limit=100, offset=0):
    return {"contents": contents, "totalCount": len(contents), "offset": offset, "limit": limit}


def post_list(*posts):
    return ListResponse[BlogPost].model_validate(list_payload(list(posts)))


@pytest.fixture
def config():
    return load_config({
        "microcms": {"service_domain": "example", "api_key": "secret-key"},
        "site": {"production": False, "base_path": "/"},
    })


@pytest.fixture(autouse=True)
def report_dir(tmp_path, monkeypatch):
    path = tmp_path / "reports"
    monkeypatch.setenv("MICROCMS_REPORT_DIR", str(path))
    return path
