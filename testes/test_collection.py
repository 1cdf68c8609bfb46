from datetime import datetime, timezone

import pytest
import requests

from conftest import make_post, make_taxonomy, post_list
from microcms_blog.adapters import collection
from microcms_blog.adapters.collection import (
    convert_blog_post_to_entry,
    get_post_by_slug,
    get_sorted_posts,
    get_sorted_posts_list,
    link_neighbours,
)
from microcms_blog.models.cms import BlogPost


def _fake_get_blog_posts(response, calls):
    def fake(cfg, **kwargs):
        calls.append(kwargs)
        return response
    return fake


def test_convert_full_post():
    post = BlogPost.model_validate(make_post(
        "p1", "Hello", day=5,
        description="Short intro",
        image={"url": "https://images.microcms-assets.io/a.png", "width": 800, "height": 600},
        tags=[make_taxonomy("Python"), make_taxonomy("Web")],
        category=make_taxonomy("Tech"),
        draft=True,
    ))

    entry = convert_blog_post_to_entry(post)

    assert entry.id == entry.slug == "p1"
    assert entry.body == "<p>Hello body</p>"
    assert entry.collection == "posts"
    assert entry.data.published == datetime(2024, 3, 5, 10, 0, tzinfo=timezone.utc)
    assert entry.data.updated == datetime(2024, 3, 5, 12, 0, tzinfo=timezone.utc)
    assert entry.data.description == "Short intro"
    assert entry.data.image == "https://images.microcms-assets.io/a.png"
    assert entry.data.tags == ("Python", "Web")
    assert entry.data.category == "Tech"
    assert entry.data.draft is True
    assert entry.data.lang == ""
    assert (entry.data.prev_slug, entry.data.next_slug) == ("", "")


def test_convert_defaults_optionals():
    entry = convert_blog_post_to_entry(BlogPost.model_validate(make_post("p2", "Bare")))

    assert entry.data.description == ""
    assert entry.data.image == ""
    assert entry.data.tags == ()
    assert entry.data.category is None
    assert entry.data.draft is False


def test_entry_dump_uses_content_entry_names():
    entry = convert_blog_post_to_entry(BlogPost.model_validate(make_post("p3", "Dump")))
    data = entry.model_dump(mode="json", by_alias=True)["data"]
    assert {"prevTitle", "prevSlug", "nextTitle", "nextSlug"} <= set(data)


def test_render_reading_stats():
    entry = convert_blog_post_to_entry(BlogPost.model_validate(
        make_post("p4", "Long", content="x" * 500, description="about")
    ))
    frontmatter = entry.render().remark_plugin_frontmatter
    assert frontmatter.excerpt == "about"
    assert frontmatter.words == 500
    # 2.5 rounds half up
    assert frontmatter.minutes == 3

    short = convert_blog_post_to_entry(BlogPost.model_validate(make_post("p5", "S", content="")))
    assert short.render().remark_plugin_frontmatter.minutes == 1


def test_render_counts_utf16_code_units():
    entry = convert_blog_post_to_entry(BlogPost.model_validate(
        make_post("p6", "Emoji", content="ブログ🎉")
    ))
    # three BMP characters plus one surrogate pair
    assert entry.render().remark_plugin_frontmatter.words == 5


def test_sorted_posts_link_neighbours(monkeypatch, config):
    calls = []
    # API returns them out of order; the sort pass still orders newest first
    response = post_list(make_post("b", "B", day=2), make_post("a", "A", day=3), make_post("c", "C", day=1))
    monkeypatch.setattr(collection, "get_blog_posts", _fake_get_blog_posts(response, calls))

    posts = get_sorted_posts(config)

    assert [p.data.title for p in posts] == ["A", "B", "C"]
    a, b, c = (p.data for p in posts)
    assert (a.next_slug, a.next_title) == ("", "")
    assert (a.prev_slug, a.prev_title) == ("b", "B")
    assert (b.next_slug, b.next_title) == ("a", "A")
    assert (b.prev_slug, b.prev_title) == ("c", "C")
    assert (c.next_slug, c.next_title) == ("b", "B")
    assert (c.prev_slug, c.prev_title) == ("", "")
    assert calls == [{"orders": "-publishedAt", "filters": None}]


def test_link_neighbours_single_and_empty():
    assert link_neighbours([]) == []
    only = convert_blog_post_to_entry(BlogPost.model_validate(make_post("solo", "Solo")))
    [linked] = link_neighbours([only])
    assert linked.data.prev_slug == linked.data.next_slug == ""


def test_link_neighbours_does_not_modify_input():
    entries = [
        convert_blog_post_to_entry(BlogPost.model_validate(make_post(str(i), f"T{i}", day=10 - i)))
        for i in range(4)
    ]
    linked = link_neighbours(entries)
    assert all(e.data.next_slug == "" and e.data.prev_slug == "" for e in entries)
    for i in range(1, len(linked)):
        assert linked[i].data.next_slug == linked[i - 1].slug
        assert linked[i - 1].data.prev_slug == linked[i].slug


def test_linked_entries_cannot_alter_input_tags():
    post = BlogPost.model_validate(make_post("t", "Tagged", tags=[make_taxonomy("python")]))
    entry = convert_blog_post_to_entry(post)
    [linked] = link_neighbours([entry])

    assert isinstance(linked.data.tags, tuple)
    with pytest.raises(AttributeError):
        linked.data.tags.append("web")
    assert entry.data.tags == ("python",)


def test_production_filters_drafts(monkeypatch, config):
    calls = []
    monkeypatch.setattr(collection, "get_blog_posts", _fake_get_blog_posts(post_list(), calls))
    config["site"]["production"] = True

    assert get_sorted_posts(config) == []
    assert calls[0]["filters"] == "draft[equals]false"


def test_sorted_posts_list_projection(monkeypatch, config):
    response = post_list(make_post("x", "X", day=2), make_post("y", "Y", day=1))
    monkeypatch.setattr(collection, "get_blog_posts", _fake_get_blog_posts(response, []))

    items = get_sorted_posts_list(config)

    assert [i.slug for i in items] == ["x", "y"]
    assert items[0].data.prev_slug == "y"


def test_get_post_by_slug_found(monkeypatch, config):
    calls = []
    monkeypatch.setattr(collection, "get_blog_posts", _fake_get_blog_posts(post_list(make_post("abc", "Found")), calls))

    entry = get_post_by_slug(config, "abc")

    assert entry.slug == "abc"
    assert calls == [{"filters": "id[equals]abc", "limit": 1}]


def test_get_post_by_slug_missing_returns_none(monkeypatch, config):
    monkeypatch.setattr(collection, "get_blog_posts", _fake_get_blog_posts(post_list(), []))
    assert get_post_by_slug(config, "nope") is None


def test_get_post_by_slug_error_is_reported(monkeypatch, config, report_dir):
    def boom(cfg, **kwargs):
        raise requests.ConnectionError("connection refused")
    monkeypatch.setattr(collection, "get_blog_posts", boom)

    assert get_post_by_slug(config, "abc") is None

    log = (report_dir / "errors.jsonl").read_text(encoding="utf-8")
    assert '"code": "POST_FETCH"' in log
    assert "connection refused" in log


def test_sorted_posts_propagates_errors(monkeypatch, config):
    def boom(cfg, **kwargs):
        raise requests.HTTPError("503")
    monkeypatch.setattr(collection, "get_blog_posts", boom)

    with pytest.raises(requests.HTTPError):
        get_sorted_posts(config)
