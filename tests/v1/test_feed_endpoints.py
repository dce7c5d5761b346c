"""Tests for feed, tag and profile endpoints."""

from fastapi import status


def test_anonymous_feed(client, make_post, test_user) -> None:
    for i in range(7):
        make_post(test_user, f"<Daily> note {i}")

    response = client.get("/api/v1/feed/")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["is_authenticated"] is False
    assert len(data["posts"]) == 5
    assert data["posts"][0]["content"] == "<Daily> note 6"
    assert data["trending"] == [{"name": "Daily", "count": 7}]


def test_authenticated_feed(client, make_post, test_user, other_auth_token) -> None:
    posts = [make_post(test_user, f"note {i}") for i in range(12)]
    client.post(f"/api/v1/posts/{posts[-1].id}/like", headers=other_auth_token)

    data = client.get("/api/v1/feed/", headers=other_auth_token).json()

    assert data["is_authenticated"] is True
    assert len(data["posts"]) == 10
    assert data["posts"][0]["liked_by_viewer"] is True
    assert data["posts"][0]["like_count"] == 1


def test_trending_endpoint(client, make_post, test_user) -> None:
    make_post(test_user, "<Hot> <Hot> <Warm>")
    make_post(test_user, "<Hot>")

    response = client.get("/api/v1/feed/trending")

    assert response.json() == [{"name": "Hot", "count": 2}, {"name": "Warm", "count": 1}]


def test_tag_feed_case_insensitive(client, test_post) -> None:
    exact = client.get("/api/v1/tags/World")
    folded = client.get("/api/v1/tags/wORLD")

    assert exact.status_code == status.HTTP_200_OK
    assert [p["id"] for p in exact.json()["posts"]] == [test_post.id]
    assert folded.json()["posts"] == exact.json()["posts"]
    assert folded.json()["name"] == "wORLD"


def test_tag_feed_blank_name(client) -> None:
    response = client.get("/api/v1/tags/%20%20")

    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_profile(client, test_post, other_auth_token) -> None:
    client.post(f"/api/v1/posts/{test_post.id}/like", headers=other_auth_token)

    response = client.get("/api/v1/users/ALICE", headers=other_auth_token)

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["username"] == "Alice"
    assert data["post_count"] == 1
    assert data["likes_received"] == 1
    assert data["likes_given"] == 0
    assert data["posts"][0]["liked_by_viewer"] is True


def test_profile_unknown_user(client) -> None:
    response = client.get("/api/v1/users/nobody")

    assert response.status_code == status.HTTP_404_NOT_FOUND
