"""Tests for the user directory endpoints."""

import pytest


def get_users(test_client, params=None, headers=None):
    return test_client.get("/api/1.0/users", params=params, headers=headers)


class TestListingUsers:
    """Tests for GET /api/1.0/users."""

    def test_returns_200_when_there_are_no_users(self, client):
        test_client, _ = client
        response = get_users(test_client)
        assert response.status_code == 200

    def test_returns_page_object_as_response_body(self, client):
        test_client, _ = client
        response = get_users(test_client)
        assert response.json() == {
            "content": [],
            "page": 0,
            "size": 10,
            "totalPages": 0,
        }

    def test_returns_10_users_when_there_are_11_users(self, client, add_users):
        test_client, _ = client
        add_users(11)
        response = get_users(test_client)
        assert len(response.json()["content"]) == 10

    def test_returns_only_active_users(self, client, add_users):
        test_client, _ = client
        add_users(6, 5)
        response = get_users(test_client)
        assert len(response.json()["content"]) == 6

    def test_returns_only_id_username_and_email(self, client, add_users):
        test_client, _ = client
        add_users(11)
        response = get_users(test_client)
        user = response.json()["content"][0]
        assert list(user.keys()) == ["id", "username", "email"]

    def test_returns_2_as_total_pages_for_15_active_and_7_inactive(self, client, add_users):
        test_client, _ = client
        add_users(15, 7)
        response = get_users(test_client)
        assert response.json()["totalPages"] == 2

    def test_returns_second_page_with_page_indicator(self, client, add_users):
        test_client, _ = client
        add_users(11)

        response = get_users(test_client, {"page": 1, "size": 10})

        body = response.json()
        assert len(body["content"]) == 1
        assert body["content"][0]["username"] == "user11"
        assert body["page"] == 1
        assert body["totalPages"] == 2

    def test_returns_5_users_and_size_when_size_is_5(self, client, add_users):
        test_client, _ = client
        add_users(11)

        response = get_users(test_client, {"size": 5})

        body = response.json()
        assert len(body["content"]) == 5
        assert body["size"] == 5

    @pytest.mark.parametrize("size", ["0", "1000", "-3", "abc", "2.5"])
    def test_uses_default_size_for_invalid_size(self, client, add_users, size):
        test_client, _ = client
        add_users(11)

        response = get_users(test_client, {"size": size})

        body = response.json()
        assert response.status_code == 200
        assert body["size"] == 10
        assert len(body["content"]) == 10

    @pytest.mark.parametrize("page", ["-5", "abc"])
    def test_uses_first_page_for_invalid_page(self, client, add_users, page):
        test_client, _ = client
        add_users(11)

        response = get_users(test_client, {"page": page})

        assert response.json()["page"] == 0

    def test_page_past_the_end_is_empty(self, client, add_users):
        test_client, _ = client
        add_users(3)

        body = get_users(test_client, {"page": 4}).json()

        assert body["content"] == []
        assert body["page"] == 4
        assert body["totalPages"] == 1

    def test_huge_page_number_returns_empty_page(self, client, add_users):
        test_client, _ = client
        add_users(3)

        response = get_users(test_client, {"page": "99999999999999999999"})

        assert response.status_code == 200
        body = response.json()
        assert body["content"] == []
        assert body["page"] == 99999999999999999999
        assert body["totalPages"] == 1

    def test_excludes_caller_when_authenticated_with_bearer_token(self, client, add_user, add_users):
        test_client, _ = client
        add_users(11)
        add_user(username="caller", email="caller@mail.com")
        token = test_client.post(
            "/api/1.0/auth", json={"email": "caller@mail.com", "password": "P4ssword"}
        ).json()["token"]

        body = get_users(
            test_client, {"size": 10, "page": 1}, {"Authorization": f"Bearer {token}"}
        ).json()

        assert body["totalPages"] == 2
        assert [u["username"] for u in body["content"]] == ["user11"]

    def test_excludes_caller_when_authenticated_with_basic(
        self, client, add_user, basic_auth
    ):
        test_client, _ = client
        add_user()
        add_user(username="user2", email="user2@mail.com")

        body = get_users(
            test_client, headers=basic_auth("user1@mail.com", "P4ssword")
        ).json()

        assert [u["username"] for u in body["content"]] == ["user2"]

    def test_invalid_token_is_treated_as_anonymous(self, client, add_users):
        test_client, _ = client
        add_users(3)

        response = get_users(test_client, headers={"Authorization": "Bearer not-a-token"})

        assert response.status_code == 200
        assert len(response.json()["content"]) == 3


class TestGetUser:
    """Tests for GET /api/1.0/users/{id}."""

    def test_returns_user_when_active(self, client, add_user):
        test_client, _ = client
        user = add_user()

        response = test_client.get(f"/api/1.0/users/{user.id}")

        assert response.status_code == 200
        assert response.json() == {"id": user.id, "username": "user1", "email": "user1@mail.com"}

    def test_returns_404_when_user_not_found(self, client):
        test_client, _ = client

        response = test_client.get("/api/1.0/users/5")

        assert response.status_code == 404
        body = response.json()
        assert body["message"] == "User not found"
        assert body["path"] == "/api/1.0/users/5"
        assert isinstance(body["timestamp"], int)

    def test_pending_user_looks_like_missing_user(self, client, add_user):
        test_client, _ = client
        pending = add_user(active=False, activation_token="abcdefghijklmnop")

        pending_response = test_client.get(f"/api/1.0/users/{pending.id}")
        missing_response = test_client.get("/api/1.0/users/9999")

        assert pending_response.status_code == missing_response.status_code == 404
        assert pending_response.json()["message"] == missing_response.json()["message"]
