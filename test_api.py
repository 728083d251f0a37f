"""HTTP-level tests for the blog API: status codes and response shapes."""

import pytest

API = "/api/v1/blog"


@pytest.fixture
def tech(client):
    response = client.post(f"{API}/categories", json={"name": "Tech", "description": "Gadgets"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def python_tag(client):
    response = client.post(f"{API}/tags", json={"name": "Python"})
    assert response.status_code == 201
    return response.json()


def _create_post(client, author, **fields):
    payload = {"title": "Hello World!", "content": "First post", "author_id": author.id}
    payload.update(fields)
    return client.post(f"{API}/posts", json=payload)


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


# ----- Posts -----

def test_create_post_returns_enriched_post(client, author, tech, python_tag):
    response = _create_post(client, author, category_id=tech["id"], tag_ids=[python_tag["id"]])

    assert response.status_code == 201
    body = response.json()
    assert body["slug"] == "hello-world"
    assert body["status"] == "draft"
    assert body["published_at"] is None
    assert body["view_count"] == 0
    assert body["category"]["slug"] == "tech"
    assert body["author"] == {
        "id": author.id, "name": "Ada Lovelace", "email": "ada@example.com",
        "image": "https://example.com/ada.png",
    }
    assert [tag["name"] for tag in body["tags"]] == ["Python"]
    assert body["comments_count"] == 0


@pytest.mark.parametrize(
    "fields",
    [
        {"title": ""},
        {"title": "!!!"},
        {"title": "x" * 201},
        {"content": ""},
        {"status": "deleted"},
        {"featured_image": "not a url"},
    ],
)
def test_create_post_validation_errors(client, author, fields):
    assert _create_post(client, author, **fields).status_code == 422


def test_create_post_with_unknown_tag_is_conflict(client, author):
    response = _create_post(client, author, tag_ids=["no-such-tag"])
    assert response.status_code == 409
    assert "no-such-tag" in response.json()["detail"]
    assert client.get(f"{API}/posts").json()["total_count"] == 0


def test_duplicate_slug_is_conflict(client, author):
    assert _create_post(client, author).status_code == 201
    assert _create_post(client, author, title="hello   world").status_code == 409


def test_get_missing_post(client):
    response = client.get(f"{API}/posts/missing")
    assert response.status_code == 404
    assert response.json()["detail"] == "Blog post not found"


def test_update_post(client, author, python_tag):
    post = _create_post(client, author, tag_ids=[python_tag["id"]]).json()

    response = client.put(
        f"{API}/posts/{post['id']}",
        json={"title": "Renamed Post", "status": "published", "tag_ids": []},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["slug"] == "renamed-post"
    assert body["status"] == "published"
    assert body["published_at"] is not None
    assert body["tags"] == []


def test_update_rejects_null_title(client, author):
    post = _create_post(client, author).json()
    assert client.put(f"{API}/posts/{post['id']}", json={"title": None}).status_code == 422


def test_update_missing_post(client):
    assert client.put(f"{API}/posts/missing", json={"content": "x"}).status_code == 404


def test_update_published_at_rules(client, author):
    draft = _create_post(client, author).json()
    dated = client.put(f"{API}/posts/{draft['id']}", json={"published_at": "2020-01-01T00:00:00"})
    assert dated.status_code == 200
    assert dated.json()["published_at"] is None

    published = client.post(f"{API}/posts/{draft['id']}/publish").json()
    client.post(f"{API}/posts/{draft['id']}/unpublish")

    republished = client.put(
        f"{API}/posts/{draft['id']}", json={"status": "published", "published_at": None}
    ).json()
    assert republished["status"] == "published"
    assert republished["published_at"] == published["published_at"]

    cleared = client.put(f"{API}/posts/{draft['id']}", json={"published_at": None}).json()
    assert cleared["published_at"] == published["published_at"]


def test_publish_unpublish_archive(client, author):
    post = _create_post(client, author).json()

    published = client.post(f"{API}/posts/{post['id']}/publish").json()
    assert published["status"] == "published"
    assert published["published_at"] is not None

    unpublished = client.post(f"{API}/posts/{post['id']}/unpublish").json()
    assert unpublished["status"] == "draft"
    assert unpublished["published_at"] == published["published_at"]

    archived = client.post(f"{API}/posts/{post['id']}/archive").json()
    assert archived["status"] == "archived"

    assert client.post(f"{API}/posts/missing/publish").status_code == 404


def test_record_view(client, author):
    post = _create_post(client, author).json()
    client.post(f"{API}/posts/{post['id']}/view")
    response = client.post(f"{API}/posts/{post['id']}/view")
    assert response.json() == {"post_id": post["id"], "view_count": 2}
    assert client.post(f"{API}/posts/missing/view").status_code == 404


def test_list_posts_filters_and_pagination(client, author, tech):
    for i in range(3):
        _create_post(client, author, title=f"Tech post {i}", category_id=tech["id"], status="published")
    _create_post(client, author, title="Unfiled draft")

    response = client.get(
        f"{API}/posts",
        params={"category_id": tech["id"], "status": "published", "limit": 2, "page": 2},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["total_count"] == 3
    assert body["total_pages"] == 2
    assert body["current_page"] == 2
    assert len(body["posts"]) == 1


def test_list_posts_sort_and_search(client, author):
    _create_post(client, author, title="Banana bread")
    _create_post(client, author, title="Apple pie")
    _create_post(client, author, title="Cherry tart", content="with BANANA topping")

    titles = [
        p["title"]
        for p in client.get(
            f"{API}/posts", params={"sort_field": "title", "sort_direction": "asc"}
        ).json()["posts"]
    ]
    assert titles == ["Apple pie", "Banana bread", "Cherry tart"]

    found = client.get(f"{API}/posts", params={"search": "banana"}).json()
    assert found["total_count"] == 2


@pytest.mark.parametrize(
    "params",
    [{"page": 0}, {"limit": 0}, {"limit": 51}, {"sort_field": "slug"}, {"sort_direction": "up"}],
)
def test_list_posts_rejects_bad_query(client, params):
    assert client.get(f"{API}/posts", params=params).status_code == 422


def test_delete_post(client, author):
    post = _create_post(client, author).json()

    response = client.delete(f"{API}/posts/{post['id']}")
    assert response.json() == {"message": "Blog post deleted successfully", "success": True}
    assert client.get(f"{API}/posts/{post['id']}").status_code == 404
    assert client.delete(f"{API}/posts/{post['id']}").status_code == 404


# ----- Categories and tags -----

def test_category_crud(client, author, tech):
    _create_post(client, author, category_id=tech["id"])

    listing = client.get(f"{API}/categories").json()
    assert listing["total_count"] == 1
    assert listing["categories"][0]["posts_count"] == 1

    renamed = client.put(f"{API}/categories/{tech['id']}", json={"name": "Technology"}).json()
    assert renamed["slug"] == "technology"
    assert renamed["description"] == "Gadgets"

    posts = client.get(f"{API}/categories/{tech['id']}/posts").json()
    assert posts["total_count"] == 1

    assert client.delete(f"{API}/categories/{tech['id']}").json()["success"] is True
    assert client.get(f"{API}/categories/{tech['id']}").status_code == 404

    remaining = client.get(f"{API}/posts").json()["posts"]
    assert len(remaining) == 1
    assert remaining[0]["category"] is None


def test_duplicate_category_is_conflict(client, tech):
    assert client.post(f"{API}/categories", json={"name": "Tech"}).status_code == 409


def test_tag_crud(client, author, python_tag):
    _create_post(client, author, tag_ids=[python_tag["id"]])

    assert client.get(f"{API}/tags/{python_tag['id']}").json()["posts_count"] == 1
    assert client.get(f"{API}/tags/{python_tag['id']}/posts").json()["total_count"] == 1

    renamed = client.put(f"{API}/tags/{python_tag['id']}", json={"name": "Python 3"}).json()
    assert renamed["slug"] == "python-3"

    assert client.delete(f"{API}/tags/{python_tag['id']}").status_code == 200
    assert client.get(f"{API}/tags").json() == {"tags": [], "total_count": 0}
    assert client.get(f"{API}/tags/missing").status_code == 404


# ----- Comments -----

def test_comment_moderation_flow(client, author):
    post = _create_post(client, author).json()

    created = client.post(
        f"{API}/comments",
        json={"content": "Great read", "post_id": post["id"], "author_id": author.id},
    )
    assert created.status_code == 201
    comment = created.json()
    assert comment["is_approved"] is False
    assert comment["post"]["slug"] == "hello-world"

    assert client.get(f"{API}/posts/{post['id']}/comments", params={"approved_only": True}).json() == {
        "comments": [], "total_count": 0,
    }

    approved = client.post(f"{API}/comments/{comment['id']}/approve").json()
    assert approved["is_approved"] is True
    assert client.get(f"{API}/posts/{post['id']}").json()["comments_count"] == 1

    rejected = client.post(f"{API}/comments/{comment['id']}/reject").json()
    assert rejected["is_approved"] is False

    edited = client.put(f"{API}/comments/{comment['id']}", json={"content": "Edited"}).json()
    assert edited["content"] == "Edited"


def test_comment_errors(client, author):
    post = _create_post(client, author).json()
    other = _create_post(client, author, title="Other").json()
    parent = client.post(
        f"{API}/comments", json={"content": "Parent", "post_id": other["id"], "author_id": author.id}
    ).json()

    missing_post = client.post(
        f"{API}/comments", json={"content": "Hi", "post_id": "missing", "author_id": author.id}
    )
    assert missing_post.status_code == 404

    wrong_parent = client.post(
        f"{API}/comments",
        json={"content": "Hi", "post_id": post["id"], "author_id": author.id, "parent_id": parent["id"]},
    )
    assert wrong_parent.status_code == 400

    too_long = client.post(
        f"{API}/comments", json={"content": "x" * 1001, "post_id": post["id"], "author_id": author.id}
    )
    assert too_long.status_code == 422

    assert client.get(f"{API}/comments/missing").status_code == 404
    assert client.get(f"{API}/posts/missing/comments").status_code == 404


def test_deleting_comment_removes_replies(client, author):
    post = _create_post(client, author).json()
    parent = client.post(
        f"{API}/comments", json={"content": "Parent", "post_id": post["id"], "author_id": author.id}
    ).json()
    reply = client.post(
        f"{API}/comments",
        json={"content": "Reply", "post_id": post["id"], "author_id": author.id, "parent_id": parent["id"]},
    ).json()

    assert client.delete(f"{API}/comments/{parent['id']}").status_code == 200
    assert client.get(f"{API}/comments/{reply['id']}").status_code == 404


# ----- Statistics -----

def test_dashboard_statistics(client, author):
    empty = client.get(f"{API}/statistics/dashboard")
    assert empty.status_code == 200
    assert empty.json()["total_posts"] == 0
    assert empty.json()["recent_posts"] == []

    _create_post(client, author, status="published")
    _create_post(client, author, title="Second")

    body = client.get(f"{API}/statistics/dashboard").json()
    assert body["total_posts"] == 2
    assert body["published_posts"] == 1
    assert body["draft_posts"] == 1
    assert body["total_authors"] == 1
    assert len(body["recent_posts"]) == 2
    assert [p["slug"] for p in body["popular_posts"]] == ["hello-world"]


@pytest.mark.parametrize("path", ["categories", "tags"])
def test_name_without_slug_characters_is_rejected(client, path):
    assert client.post(f"{API}/{path}", json={"name": "!!!"}).status_code == 422
    assert client.post(f"{API}/{path}", json={"name": "Fine name"}).status_code == 201
