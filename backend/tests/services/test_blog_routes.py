"""Blog Routes: slug derivation, duplicate slugs, reading time, visibility.

Tests:
    - Slug derived from title unless supplied; a colliding slug fails with DUPLICATE_SLUG
      and leaves the first blog untouched
    - readingTime derived on create and recomputed only when content changes;
      client-sent readingTime/views are ignored
    - Anonymous list/slug reads see published blogs only, whatever the query says
    - Pagination envelope, tag/search/featured filters, distinct tags
"""

from uuid import uuid4

import pytest
from sqlalchemy import func, select

from folio.models.blog import Blog


def _blog(title: str, **extra) -> dict:
    return {
        "title": title,
        "content": "word " * 10,
        "excerpt": f"About {title}",
        "coverImage": "/covers/default.png",
        "author": {"name": "Ada"},
        **extra,
    }


async def _create(admin_client, title: str, **extra) -> dict:
    res = await admin_client.post("/api/v1/blogs", json=_blog(title, **extra))
    assert res.status_code == 201, res.text
    return res.json()


async def test_create_derives_slug_and_reading_time(admin_client):
    body = await _create(
        admin_client, "Hello, World! Part 2", content=" ".join(["w"] * 400),
    )
    assert body["slug"] == "hello-world-part-2"
    assert body["readingTime"] == 2
    assert body["views"] == 0
    assert body["isPublished"] is False
    assert body["author"] == {"name": "Ada", "image": None}


async def test_explicit_slug_wins_over_title(admin_client):
    body = await _create(admin_client, "Some Title", slug="custom-slug")
    assert body["slug"] == "custom-slug"


async def test_malformed_explicit_slug_returns_400(admin_client):
    res = await admin_client.post(
        "/api/v1/blogs", json=_blog("T", slug="Not A Slug"),
    )
    assert res.status_code == 400


async def test_client_cannot_set_reading_time_or_views(admin_client):
    body = await _create(admin_client, "Sneaky", readingTime=99, views=1000)
    assert body["readingTime"] == 1
    assert body["views"] == 0


async def test_duplicate_derived_slug_fails_and_first_blog_survives(admin_client, test_db):
    first = await _create(admin_client, "Hello World")
    res = await admin_client.post("/api/v1/blogs", json=_blog("hello, world!"))
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "DUPLICATE_SLUG"
    assert "hello-world" in error["message"]

    count = (await test_db.execute(select(func.count(Blog.id)))).scalar_one()
    assert count == 1
    still = await admin_client.get(f"/api/v1/blogs/manage/{first['id']}")
    assert still.json()["title"] == "Hello World"


async def test_title_without_word_characters_needs_explicit_slug(admin_client):
    res = await admin_client.post("/api/v1/blogs", json=_blog("?!"))
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.parametrize("missing", ["title", "content", "excerpt", "coverImage", "author"])
async def test_create_missing_required_field_returns_400(admin_client, missing):
    payload = _blog("Incomplete")
    payload.pop(missing)
    res = await admin_client.post("/api/v1/blogs", json=payload)
    assert res.status_code == 400


async def test_create_missing_author_name_returns_400(admin_client):
    res = await admin_client.post(
        "/api/v1/blogs", json=_blog("No author", author={"image": "/a.png"}),
    )
    assert res.status_code == 400


async def test_update_recomputes_reading_time_only_with_content(admin_client):
    blog = await _create(admin_client, "Long read")
    assert blog["readingTime"] == 1

    res = await admin_client.put(
        f"/api/v1/blogs/manage/{blog['id']}",
        json={"content": " ".join(["w"] * 601)},
    )
    assert res.json()["readingTime"] == 4

    res = await admin_client.put(
        f"/api/v1/blogs/manage/{blog['id']}", json={"excerpt": "new excerpt"},
    )
    body = res.json()
    assert body["readingTime"] == 4
    assert body["excerpt"] == "new excerpt"
    assert body["title"] == "Long read"


async def test_update_title_keeps_slug(admin_client):
    blog = await _create(admin_client, "Original")
    res = await admin_client.put(
        f"/api/v1/blogs/manage/{blog['id']}", json={"title": "Renamed"},
    )
    assert res.json()["slug"] == "original"


async def test_update_to_taken_slug_is_duplicate(admin_client):
    await _create(admin_client, "First")
    second = await _create(admin_client, "Second")
    res = await admin_client.put(
        f"/api/v1/blogs/manage/{second['id']}", json={"slug": "first"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "DUPLICATE_SLUG"


async def test_update_missing_blog_returns_404(admin_client):
    res = await admin_client.put(f"/api/v1/blogs/manage/{uuid4()}", json={"title": "x"})
    assert res.status_code == 404


async def test_delete_is_hard(admin_client):
    blog = await _create(admin_client, "Temp")
    res = await admin_client.delete(f"/api/v1/blogs/manage/{blog['id']}")
    assert res.status_code == 200
    res = await admin_client.get(f"/api/v1/blogs/manage/{blog['id']}")
    assert res.status_code == 404


# ─── Visibility ──────────────────────────────────────────────────


async def test_anonymous_list_only_shows_published(admin_client, client):
    await _create(admin_client, "Draft")
    await _create(admin_client, "Live", isPublished=True)

    res = await client.get("/api/v1/blogs", params={"status": "draft"})
    assert [b["title"] for b in res.json()["blogs"]] == ["Live"]

    res = await admin_client.get("/api/v1/blogs", params={"status": "draft"})
    assert [b["title"] for b in res.json()["blogs"]] == ["Draft"]

    res = await admin_client.get("/api/v1/blogs")
    assert res.json()["pagination"]["total"] == 2


async def test_by_slug_returns_published_only(admin_client, client):
    await _create(admin_client, "Hidden")
    await _create(admin_client, "Shown", isPublished=True)
    assert (await client.get("/api/v1/blogs/by-slug/hidden")).status_code == 404
    res = await client.get("/api/v1/blogs/by-slug/shown")
    assert res.status_code == 200
    assert res.json()["title"] == "Shown"


async def test_manage_routes_require_admin(admin_client, client):
    blog = await _create(admin_client, "Private draft")
    assert (await client.get(f"/api/v1/blogs/manage/{blog['id']}")).status_code == 401
    assert (await client.post("/api/v1/blogs", json=_blog("New"))).status_code == 401
    res = await client.put(
        f"/api/v1/blogs/manage/{blog['id']}", json={"title": "Hacked"},
    )
    assert res.status_code == 401
    assert (await client.delete(f"/api/v1/blogs/manage/{blog['id']}")).status_code == 401

    still = await admin_client.get(f"/api/v1/blogs/manage/{blog['id']}")
    assert still.json()["title"] == "Private draft"


async def test_publish_toggle_controls_public_visibility(admin_client, client):
    blog = await _create(admin_client, "Soon")
    res = await admin_client.post(f"/api/v1/blogs/manage/{blog['id']}/publish")
    assert res.json()["isPublished"] is True
    assert (await client.get("/api/v1/blogs/by-slug/soon")).status_code == 200

    await admin_client.post(f"/api/v1/blogs/manage/{blog['id']}/publish")
    assert (await client.get("/api/v1/blogs/by-slug/soon")).status_code == 404


async def test_feature_toggle_and_featured_listing(admin_client, client):
    blog = await _create(admin_client, "Star", isPublished=True)
    await _create(admin_client, "Plain", isPublished=True)
    await _create(admin_client, "Draft star", featured=True)

    res = await admin_client.post(f"/api/v1/blogs/manage/{blog['id']}/feature")
    assert res.json()["featured"] is True

    res = await client.get("/api/v1/blogs/featured")
    assert [b["title"] for b in res.json()] == ["Star"]

    res = await client.get("/api/v1/blogs", params={"featured": "true"})
    assert [b["title"] for b in res.json()["blogs"]] == ["Star"]


# ─── Listing ─────────────────────────────────────────────────────


async def test_pagination_envelope(admin_client, client):
    for i in range(5):
        await _create(admin_client, f"Post {i}", isPublished=True)

    res = await client.get("/api/v1/blogs", params={"page": 2, "limit": 2})
    body = res.json()
    assert body["pagination"] == {"total": 5, "pages": 3, "page": 2, "limit": 2}
    assert len(body["blogs"]) == 2


async def test_list_newest_first(admin_client, client):
    await _create(admin_client, "Older", isPublished=True)
    await _create(admin_client, "Newer", isPublished=True)
    res = await client.get("/api/v1/blogs")
    assert [b["title"] for b in res.json()["blogs"]] == ["Newer", "Older"]


async def test_tag_and_search_filters(admin_client, client):
    await _create(admin_client, "FastAPI tips", tags=["python", "web"], isPublished=True)
    await _create(admin_client, "Rust notes", tags=["rust"], isPublished=True)
    await _create(admin_client, "Pythonic idioms", tags=["python"], isPublished=True)

    res = await client.get("/api/v1/blogs", params={"tag": "python"})
    assert {b["title"] for b in res.json()["blogs"]} == {"FastAPI tips", "Pythonic idioms"}

    res = await client.get("/api/v1/blogs", params={"tag": "py"})
    assert res.json()["blogs"] == []

    res = await client.get("/api/v1/blogs", params={"search": "rust"})
    assert [b["title"] for b in res.json()["blogs"]] == ["Rust notes"]


async def test_tag_filter_takes_underscore_literally(admin_client, client):
    await _create(admin_client, "One", tags=["a_b"], isPublished=True)
    await _create(admin_client, "Two", tags=["axb"], isPublished=True)

    res = await client.get("/api/v1/blogs", params={"tag": "a_b"})
    assert [b["title"] for b in res.json()["blogs"]] == ["One"]


@pytest.mark.parametrize("tag", ["café", "日本語", "say \"hi\"", "back\\slash", "100%"])
async def test_tag_filter_matches_escaped_json_text(admin_client, client, tag):
    await _create(admin_client, "Tagged", tags=[tag, "other"], isPublished=True)
    await _create(admin_client, "Untagged", tags=["other"], isPublished=True)

    res = await client.get("/api/v1/blogs", params={"tag": tag})
    assert [b["title"] for b in res.json()["blogs"]] == ["Tagged"]


async def test_search_takes_wildcards_literally(admin_client, client):
    await _create(admin_client, "100% coverage", isPublished=True)
    await _create(admin_client, "100 ways", isPublished=True)
    await _create(admin_client, "snake_case names", isPublished=True)
    await _create(admin_client, "snakeXcase names", isPublished=True)

    res = await client.get("/api/v1/blogs", params={"search": "100%"})
    assert [b["title"] for b in res.json()["blogs"]] == ["100% coverage"]

    res = await client.get("/api/v1/blogs", params={"search": "snake_case"})
    assert [b["title"] for b in res.json()["blogs"]] == ["snake_case names"]


async def test_tags_are_distinct_across_published(admin_client, client):
    await _create(admin_client, "One", tags=["web", "python"], isPublished=True)
    await _create(admin_client, "Two", tags=["python", "ai"], isPublished=True)
    await _create(admin_client, "Draft", tags=["secret"])

    res = await client.get("/api/v1/blogs/tags")
    assert res.json() == ["ai", "python", "web"]
