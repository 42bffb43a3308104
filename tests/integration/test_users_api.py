"""
Integration tests for user registration routes.
"""
import json

import pytest


@pytest.mark.integration
class TestRegisterAPI:

    @pytest.mark.parametrize("url", ["/register", "/users", "/api/register"])
    def test_register_user(self, client, valid_user, url):
        response = client.post(url, json=valid_user)

        assert response.status_code == 201
        data = response.get_json()
        assert data["message"] == "User registered successfully!"
        assert data["user"]["username"] == "alice"
        assert "password" not in data["user"]

    def test_register_writes_users_file(self, client, valid_user, temp_data_dir):
        client.post("/register", json=valid_user)

        with open(temp_data_dir / "users.json") as f:
            stored = json.load(f)
        assert stored == [valid_user]

    def test_short_username(self, client, valid_user):
        response = client.post("/register", json={**valid_user, "username": "ab"})

        assert response.status_code == 400
        assert response.get_json() == {"error": "Username must be at least 3 characters long."}

    def test_duplicate_username(self, client, valid_user):
        client.post("/register", json=valid_user)

        response = client.post("/users", json={**valid_user, "email": "alice2@example.com", "age": 30})

        assert response.status_code == 400
        assert response.get_json() == {"error": "Username already exists."}

    def test_invalid_json(self, client):
        response = client.post("/register", data="username=alice", content_type="application/json")

        assert response.status_code == 400
        assert response.get_json() == {"error": "Invalid JSON data"}

    def test_empty_body(self, client):
        response = client.post("/register")

        assert response.status_code == 400
        assert response.get_json() == {"error": "Invalid JSON data"}

    @pytest.mark.parametrize("age", ["NaN", "Infinity", "-Infinity"])
    def test_non_finite_age(self, client, temp_data_dir, age):
        body = (
            '{"username": "alice", "password": "secret1", '
            f'"age": {age}, "email": "alice@example.com"}}'
        )

        response = client.post("/register", data=body, content_type="application/json")

        assert response.status_code == 400
        assert response.get_json() == {"error": "Age must be at least 10."}
        assert not (temp_data_dir / "users.json").exists()

    def test_no_user_listing_route(self, client):
        assert client.get("/users").status_code == 405
