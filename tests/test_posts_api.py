"""Tests for the post API endpoints."""

import io
import os

import pytest


def _thumb(name: str = "cover.jpg", size: int = 32):
    return (name, io.BytesIO(b"\xff\xd8" + b"1" * size), "image/jpeg")


@pytest.fixture
def create_post(client):
    def _create(headers, category="Art", title="Hello", description="<p>Some long body</p>", thumb=None):
        return client.post(
            "/api/posts/create-post",
            headers=headers,
            data={"title": title, "category": category, "description": description},
            files={"thumbnail": thumb or _thumb()},
        )

    return _create


class TestCreatePost:
    def test_create_sets_creator_and_counts(self, client, register_and_login, create_post, media, user_repo):
        user_id, headers = register_and_login()
        response = create_post(headers)
        assert response.status_code == 200
        post = response.json()
        assert post["creator"] == user_id
        assert post["category"] == "Art"
        assert media.exists(post["thumbnail"])
        assert user_repo.get_by_id(user_id).posts == 1

        create_post(headers, category="Business")
        assert user_repo.get_by_id(user_id).posts == 2

    def test_unknown_category_rejected(self, client, register_and_login, create_post, media):
        _, headers = register_and_login()
        response = create_post(headers, category="Unknown")
        assert response.status_code == 422
        assert response.json()["error"]["message"] == "Invalid category."

    def test_missing_thumbnail_rejected(self, client, register_and_login):
        _, headers = register_and_login()
        response = client.post(
            "/api/posts/create-post",
            headers=headers,
            data={"title": "Hello", "category": "Art", "description": "body"},
        )
        assert response.status_code == 422
        assert response.json()["error"]["message"] == "Fill in all fields and choose thumbnail."

    def test_thumbnail_too_big_rejected(self, client, register_and_login, create_post, media, user_repo):
        user_id, headers = register_and_login()
        response = create_post(headers, thumb=_thumb(size=2_000_000))
        assert response.status_code == 422
        assert os.listdir(media.upload_dir) == []
        assert user_repo.get_by_id(user_id).posts == 0

    def test_requires_authentication(self, client):
        response = client.post(
            "/api/posts/create-post",
            data={"title": "Hello", "category": "Art", "description": "body"},
            files={"thumbnail": _thumb()},
        )
        assert response.status_code == 401


class TestListPosts:
    def test_empty_database_is_not_found(self, client):
        assert client.get("/api/posts").status_code == 404

    def test_newest_first_with_author_stats(self, client, register_and_login, create_post):
        user_id, headers = register_and_login()
        first = create_post(headers, title="first").json()
        second = create_post(headers, title="second").json()

        posts = client.get("/api/posts").json()
        assert [p["id"] for p in posts] == [second["id"], first["id"]]
        assert posts[0]["creator"] == {
            "id": user_id,
            "name": "Ada Lovelace",
            "avatar": None,
            "posts": 2,
        }

    def test_edit_moves_post_to_front(self, client, register_and_login, create_post):
        _, headers = register_and_login()
        first = create_post(headers, title="first").json()
        second = create_post(headers, title="second").json()

        response = client.patch(
            f"/api/posts/{first['id']}",
            headers=headers,
            data={"title": "first, revised", "category": "Art", "description": "<p>Revised body</p>"},
        )
        assert response.status_code == 200

        posts = client.get("/api/posts").json()
        assert [p["id"] for p in posts] == [first["id"], second["id"]]

    def test_category_match_is_case_insensitive(self, client, register_and_login, create_post):
        _, headers = register_and_login()
        create_post(headers, category="Art")
        create_post(headers, category="Weather")

        lower = client.get("/api/posts/categories/art")
        upper = client.get("/api/posts/categories/Art")
        assert lower.status_code == 200
        assert lower.json() == upper.json()
        assert [p["category"] for p in lower.json()] == ["Art"]

    def test_category_is_exact_match(self, client, register_and_login, create_post):
        _, headers = register_and_login()
        create_post(headers, category="Art")
        assert client.get("/api/posts/categories/ar").status_code == 404

    def test_posts_by_author(self, client, register_and_login, create_post):
        ada_id, ada = register_and_login()
        grace_id, grace = register_and_login("Grace", "grace@example.com")
        create_post(ada)
        create_post(grace)

        posts = client.get(f"/api/posts/users/{grace_id}").json()
        assert len(posts) == 1
        assert posts[0]["creator"]["name"] == "Grace"
        assert client.get("/api/posts/users/9999").status_code == 404


class TestEditPost:
    def test_owner_can_edit_and_replace_thumbnail(self, client, register_and_login, create_post, media):
        _, headers = register_and_login()
        post = create_post(headers).json()

        response = client.patch(
            f"/api/posts/{post['id']}",
            headers=headers,
            data={"title": "Edited", "category": "Business", "description": "<p>Edited body</p>"},
            files={"thumbnail": _thumb("sunset.png")},
        )
        assert response.status_code == 200
        edited = response.json()
        assert edited["title"] == "Edited"
        assert edited["category"] == "Business"
        assert edited["thumbnail"].startswith("sunset")
        assert media.exists(edited["thumbnail"])
        assert not media.exists(post["thumbnail"])

    def test_edit_without_file_keeps_thumbnail(self, client, register_and_login, create_post, media):
        _, headers = register_and_login()
        post = create_post(headers).json()
        response = client.patch(
            f"/api/posts/{post['id']}",
            headers=headers,
            data={"title": "Edited", "category": "Art", "description": "<p>Edited body</p>"},
        )
        assert response.status_code == 200
        assert response.json()["thumbnail"] == post["thumbnail"]
        assert media.exists(post["thumbnail"])

    def test_non_owner_is_unauthorized(self, client, register_and_login, create_post, media):
        _, ada = register_and_login()
        _, grace = register_and_login("Grace", "grace@example.com")
        post = create_post(ada).json()

        response = client.patch(
            f"/api/posts/{post['id']}",
            headers=grace,
            data={"title": "Hijack", "category": "Art", "description": "<p>Hijacked body</p>"},
            files={"thumbnail": _thumb()},
        )
        assert response.status_code == 401
        assert client.get(f"/api/posts/{post['id']}").json()["title"] == "Hello"
        assert media.exists(post["thumbnail"])
        assert len(os.listdir(media.upload_dir)) == 1

    def test_short_description_rejected(self, client, register_and_login, create_post):
        _, headers = register_and_login()
        post = create_post(headers).json()
        response = client.patch(
            f"/api/posts/{post['id']}",
            headers=headers,
            data={"title": "Edited", "category": "Art", "description": "<p><br></p>"},
        )
        assert response.status_code == 422

    def test_missing_post_is_not_found(self, client, register_and_login):
        _, headers = register_and_login()
        response = client.patch(
            "/api/posts/9999",
            headers=headers,
            data={"title": "Edited", "category": "Art", "description": "<p>Edited body</p>"},
        )
        assert response.status_code == 404


class TestDeletePost:
    def test_non_owner_cannot_delete(self, client, register_and_login, create_post, media, user_repo):
        ada_id, ada = register_and_login()
        _, grace = register_and_login("Grace", "grace@example.com")
        post = create_post(ada).json()

        response = client.delete(f"/api/posts/{post['id']}", headers=grace)
        assert response.status_code == 401
        assert client.get(f"/api/posts/{post['id']}").status_code == 200
        assert media.exists(post["thumbnail"])
        assert user_repo.get_by_id(ada_id).posts == 1

    def test_owner_delete_removes_post_file_and_count(self, client, register_and_login, create_post, media, user_repo):
        user_id, headers = register_and_login()
        post = create_post(headers).json()
        create_post(headers)

        response = client.delete(f"/api/posts/{post['id']}", headers=headers)
        assert response.status_code == 200
        assert response.json() == {"message": f"Post {post['id']} deleted successfully"}
        assert not media.exists(post["thumbnail"])
        assert user_repo.get_by_id(user_id).posts == 1

    def test_missing_post_is_not_found(self, client, register_and_login):
        _, headers = register_and_login()
        assert client.delete("/api/posts/9999", headers=headers).status_code == 404


def test_post_lifecycle(client, register_and_login, create_post):
    _, headers = register_and_login()
    post = create_post(headers).json()

    fetched = client.get(f"/api/posts/{post['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["creator"]["name"] == "Ada Lovelace"

    assert client.delete(f"/api/posts/{post['id']}", headers=headers).status_code == 200
    missing = client.get(f"/api/posts/{post['id']}")
    assert missing.status_code == 404
    assert missing.json()["error"]["code"] == "EntityNotFoundException"
