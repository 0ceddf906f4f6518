def test_create_and_fetch_user(client):
    response = client.post("/api/users", json={"name": "Alice", "email": "Alice@Example.com"})

    assert response.status_code == 201
    user = response.json()
    assert user["email"] == "alice@example.com"
    assert user["image"] is None

    assert client.get(f"/api/users/{user['id']}").json()["name"] == "Alice"
    assert client.get("/api/users", params={"email": "alice@example.com"}).json()["id"] == user["id"]


def test_duplicate_email_conflicts(client):
    client.post("/api/users", json={"name": "Alice", "email": "alice@example.com"})

    response = client.post("/api/users", json={"name": "Other", "email": "ALICE@example.com"})

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "CONFLICT"


def test_missing_user(client):
    assert client.get("/api/users/nope").status_code == 404
    assert client.get("/api/users", params={"email": "ghost@example.com"}).status_code == 404


def test_blank_name_rejected(client):
    response = client.post("/api/users", json={"name": "   ", "email": "blank@example.com"})

    assert response.status_code == 422
    assert response.json()["error"]["details"] == {"field": "name"}
    assert client.get("/api/users", params={"email": "blank@example.com"}).status_code == 404


def test_name_is_trimmed(client):
    response = client.post("/api/users", json={"name": "  Dana ", "email": "dana@example.com"})

    assert response.json()["name"] == "Dana"


def test_invalid_email_rejected(client):
    assert client.post("/api/users", json={"name": "Bob", "email": "not-an-email"}).status_code == 422
