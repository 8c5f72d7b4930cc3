"""Bookmark API tests."""

from src.models.bookmark import Bookmark


def test_create_bookmark(client, auth_user):
    """Test creating a bookmark with defaults for the scene fields."""
    response = client.post(
        "/api/v1/bookmarks",
        json={"title": "FastAPI", "url": "https://fastapi.tiangolo.com", "category": "Development"},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["title"] == "FastAPI"
    assert data["user_id"] == auth_user["id"]
    assert data["x"] is None and data["y"] is None and data["z"] is None
    assert data["scale"] == 1.0
    assert data["pinned"] is False


def test_create_bookmark_with_position(client, auth_user):
    """Test creating a bookmark that already has a scene position."""
    response = client.post(
        "/api/v1/bookmarks",
        json={
            "title": "Figma",
            "url": "https://www.figma.com",
            "category": "Design",
            "x": 1.5,
            "y": 0.2,
            "z": -3.0,
            "scale": 2.0,
            "pinned": True,
        },
    )
    assert response.status_code == 201
    data = response.json()
    assert (data["x"], data["y"], data["z"]) == (1.5, 0.2, -3.0)
    assert data["scale"] == 2.0
    assert data["pinned"] is True


def test_create_bookmark_rejects_bad_url(client, auth_user):
    """Test that non-http URLs are rejected."""
    response = client.post(
        "/api/v1/bookmarks",
        json={"title": "Bad", "url": "javascript:alert(1)", "category": "General"},
    )
    assert response.status_code == 400


def test_create_bookmark_rejects_long_category(client, auth_user):
    """Test that the category length is limited."""
    response = client.post(
        "/api/v1/bookmarks",
        json={"title": "Long", "url": "https://example.com", "category": "c" * 51},
    )
    assert response.status_code == 400


def test_create_bookmark_rejects_blank_title(client, auth_user):
    """Test that whitespace-only titles are rejected."""
    response = client.post(
        "/api/v1/bookmarks",
        json={"title": "   ", "url": "https://example.com", "category": "General"},
    )
    assert response.status_code == 400


def test_list_bookmarks(client, auth_user, make_bookmark):
    """Test listing returns bookmarks in creation order."""
    first = make_bookmark(title="One")
    second = make_bookmark(title="Two", category="News")

    response = client.get("/api/v1/bookmarks")
    assert response.status_code == 200
    assert [b["id"] for b in response.json()] == [first["id"], second["id"]]


def test_get_bookmark(client, auth_user, make_bookmark):
    """Test getting a single bookmark."""
    bookmark = make_bookmark(title="Single")
    response = client.get(f"/api/v1/bookmarks/{bookmark['id']}")
    assert response.status_code == 200
    assert response.json()["title"] == "Single"


def test_get_bookmark_invalid_id(client, auth_user):
    """Test a non-numeric id is a validation failure."""
    response = client.get("/api/v1/bookmarks/abc")
    assert response.status_code == 400


def test_update_bookmark_partial(client, auth_user, make_bookmark):
    """Test that only provided fields change."""
    bookmark = make_bookmark(title="Old", category="General")

    response = client.put(f"/api/v1/bookmarks/{bookmark['id']}", json={"title": "New"})
    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "New"
    assert data["category"] == "General"
    assert data["url"] == bookmark["url"]


def test_update_bookmark_rejects_bad_scale(client, auth_user, make_bookmark):
    """Test that update validates scale range."""
    bookmark = make_bookmark()
    response = client.put(f"/api/v1/bookmarks/{bookmark['id']}", json={"scale": 0.1})
    assert response.status_code == 400


def test_update_missing_bookmark(client, auth_user):
    """Test updating a bookmark that does not exist."""
    response = client.put("/api/v1/bookmarks/99999", json={"title": "Nope"})
    assert response.status_code == 404


def test_delete_bookmark(client, auth_user, make_bookmark, db):
    """Test deleting a bookmark."""
    bookmark = make_bookmark()

    response = client.delete(f"/api/v1/bookmarks/{bookmark['id']}")
    assert response.status_code == 204
    assert db.query(Bookmark).filter(Bookmark.id == bookmark["id"]).first() is None

    response = client.get("/api/v1/bookmarks")
    assert response.json() == []


def test_delete_nonexistent_bookmark(client, auth_user):
    """Test deleting an unknown id returns not-found."""
    response = client.delete("/api/v1/bookmarks/99999")
    assert response.status_code == 404
    assert response.json()["detail"] == "Bookmark not found"


def test_delete_twice(client, auth_user, make_bookmark):
    """Test that a second delete of the same bookmark is not-found."""
    bookmark = make_bookmark()
    assert client.delete(f"/api/v1/bookmarks/{bookmark['id']}").status_code == 204
    assert client.delete(f"/api/v1/bookmarks/{bookmark['id']}").status_code == 404


class TestOwnership:
    """Bookmarks are only ever visible to their owner."""

    def test_other_user_cannot_list(self, client, signup, make_bookmark):
        signup("alice@example.com", "Alice")
        make_bookmark(title="Alice secret")

        signup("bob@example.com", "Bob")
        response = client.get("/api/v1/bookmarks")
        assert response.status_code == 200
        assert response.json() == []

    def test_other_user_cannot_get(self, client, signup, make_bookmark):
        signup("alice@example.com", "Alice")
        bookmark = make_bookmark()

        signup("bob@example.com", "Bob")
        response = client.get(f"/api/v1/bookmarks/{bookmark['id']}")
        assert response.status_code == 404

    def test_other_user_cannot_update(self, client, signup, make_bookmark, db):
        signup("alice@example.com", "Alice")
        bookmark = make_bookmark(title="Original")

        signup("bob@example.com", "Bob")
        response = client.put(f"/api/v1/bookmarks/{bookmark['id']}", json={"title": "Hijacked"})
        assert response.status_code == 404

        db.expire_all()
        assert db.query(Bookmark).filter(Bookmark.id == bookmark["id"]).one().title == "Original"

    def test_other_user_cannot_delete(self, client, signup, make_bookmark, db):
        signup("alice@example.com", "Alice")
        bookmark = make_bookmark()

        signup("bob@example.com", "Bob")
        response = client.delete(f"/api/v1/bookmarks/{bookmark['id']}")
        assert response.status_code == 404
        assert db.query(Bookmark).filter(Bookmark.id == bookmark["id"]).first() is not None


class TestLayout:
    """Tests for the batched layout endpoint."""

    def test_layout_updates_positions(self, client, auth_user, make_bookmark, db):
        first = make_bookmark(title="First")
        second = make_bookmark(title="Second")

        response = client.put(
            "/api/v1/bookmarks/layout",
            json=[
                {"id": first["id"], "x": 1.0, "y": 2.0, "z": 3.0, "scale": 1.5, "pinned": True},
                {"id": second["id"], "x": -4.0, "y": 0.2, "z": 0.5, "scale": 0.5},
            ],
        )
        assert response.status_code == 204

        bookmarks = {b["id"]: b for b in client.get("/api/v1/bookmarks").json()}
        assert (bookmarks[first["id"]]["x"], bookmarks[first["id"]]["z"]) == (1.0, 3.0)
        assert bookmarks[first["id"]]["scale"] == 1.5
        assert bookmarks[first["id"]]["pinned"] is True
        assert bookmarks[second["id"]]["x"] == -4.0
        assert bookmarks[second["id"]]["pinned"] is False

    def test_layout_scale_out_of_range_rejects_whole_batch(
        self, client, auth_user, make_bookmark
    ):
        first = make_bookmark(title="First")
        second = make_bookmark(title="Second")

        response = client.put(
            "/api/v1/bookmarks/layout",
            json=[
                {"id": first["id"], "x": 9.0, "y": 9.0, "z": 9.0, "scale": 1.0},
                {"id": second["id"], "x": 1.0, "y": 1.0, "z": 1.0, "scale": 5.0},
            ],
        )
        assert response.status_code == 400

        for bookmark in client.get("/api/v1/bookmarks").json():
            assert bookmark["x"] is None
            assert bookmark["scale"] == 1.0

    def test_layout_skips_foreign_bookmarks(self, client, signup, make_bookmark, db):
        signup("alice@example.com", "Alice")
        alice_bookmark = make_bookmark(title="Alice")

        signup("bob@example.com", "Bob")
        bob_bookmark = make_bookmark(title="Bob")

        response = client.put(
            "/api/v1/bookmarks/layout",
            json=[
                {"id": alice_bookmark["id"], "x": 7.0, "y": 7.0, "z": 7.0, "scale": 2.0},
                {"id": bob_bookmark["id"], "x": 2.0, "y": 0.0, "z": 2.0, "scale": 1.0},
            ],
        )
        assert response.status_code == 204

        db.expire_all()
        alice_row = db.query(Bookmark).filter(Bookmark.id == alice_bookmark["id"]).one()
        bob_row = db.query(Bookmark).filter(Bookmark.id == bob_bookmark["id"]).one()
        assert alice_row.x is None
        assert alice_row.scale == 1.0
        assert bob_row.x == 2.0

    def test_layout_unknown_id_is_skipped(self, client, auth_user):
        response = client.put(
            "/api/v1/bookmarks/layout",
            json=[{"id": 424242, "x": 0.0, "y": 0.0, "z": 0.0, "scale": 1.0}],
        )
        assert response.status_code == 204

    def test_empty_layout_batch(self, client, auth_user):
        response = client.put("/api/v1/bookmarks/layout", json=[])
        assert response.status_code == 204

    def test_layout_requires_list_body(self, client, auth_user):
        response = client.put(
            "/api/v1/bookmarks/layout", json={"id": 1, "x": 0, "y": 0, "z": 0, "scale": 1}
        )
        assert response.status_code == 400

    def test_layout_requires_scale(self, client, auth_user, make_bookmark):
        bookmark = make_bookmark()
        response = client.put(
            "/api/v1/bookmarks/layout",
            json=[{"id": bookmark["id"], "x": 0.0, "y": 0.0, "z": 0.0}],
        )
        assert response.status_code == 400
