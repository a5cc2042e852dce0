import pytest

from mflix_api.core.errors import UnauthorizedError
from mflix_api.core.security import REFRESH_TOKEN_TYPE, decode_token


def _cookies(response):
    return {header.split("=", 1)[0]: header for header in response.headers.get_list("set-cookie")}

def test_login_with_seeded_account(client):
    response = client.post("/api/auth/login", json={"username": "admin", "password": "password"})

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Authenticated"
    assert decode_token(body["data"]["jwt"])["sub"] == "admin"

    cookies = _cookies(response)
    assert set(cookies) == {"token", "refreshToken"}
    for header in cookies.values():
        assert "HttpOnly" in header
        assert "Secure" in header
        assert "Path=/" in header

def test_refresh_cookie_uses_refresh_secret(client):
    response = client.post("/api/auth/login", json={"username": "admin", "password": "password"})

    refresh_token = _cookies(response)["refreshToken"].split(";", 1)[0].split("=", 1)[1]
    assert decode_token(refresh_token, REFRESH_TOKEN_TYPE)["sub"] == "admin"
    with pytest.raises(UnauthorizedError):
        decode_token(refresh_token)

def test_login_wrong_password(client):
    response = client.post("/api/auth/login", json={"username": "admin", "password": "nope"})
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid credentials"
    assert response.headers.get_list("set-cookie") == []

def test_login_unknown_user(client):
    response = client.post("/api/auth/login", json={"username": "ghost", "password": "password"})
    assert response.status_code == 401

def test_login_missing_field(client):
    response = client.post("/api/auth/login", json={"username": "admin"})
    assert response.status_code == 400

def test_signup_then_duplicate(client, user_store):
    credentials = {"username": "ripley", "password": "nostromo"}

    first = client.post("/api/auth/signup", json=credentials)
    assert first.status_code == 201
    assert first.json()["data"] == {"username": "ripley"}
    assert set(_cookies(first)) == {"token", "refreshToken"}

    second = client.post("/api/auth/signup", json=credentials)
    assert second.status_code == 400
    assert second.json()["message"] == "User already exists"
    assert len(user_store) == 2     # admin + ripley

def test_signup_then_login(client):
    client.post("/api/auth/signup", json={"username": "ripley", "password": "nostromo"})

    response = client.post("/api/auth/login", json={"username": "ripley", "password": "nostromo"})

    assert response.status_code == 200
    assert decode_token(response.json()["data"]["jwt"])["sub"] == "ripley"

def test_password_is_not_stored_in_clear(client, user_store):
    import asyncio

    client.post("/api/auth/signup", json={"username": "ripley", "password": "nostromo"})

    record = asyncio.run(user_store.find_user("ripley"))
    assert record.password_hash != "nostromo"
    assert record.password_hash.startswith("$2")

def test_signup_password_over_bcrypt_limit_is_rejected(client, user_store):
    response = client.post("/api/auth/signup", json={"username": "u", "password": "x" * 80})

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid request body"
    assert "password" in response.json()["error"]
    assert len(user_store) == 1     # only the seeded admin

def test_login_password_over_bcrypt_limit_is_rejected(client):
    # 22 four-byte characters: 88 bytes
    response = client.post("/api/auth/login", json={"username": "admin", "password": "\U0001F600" * 22})

    assert response.status_code == 400
    assert response.headers.get_list("set-cookie") == []

def test_password_at_bcrypt_limit_is_accepted(client):
    credentials = {"username": "long", "password": "x" * 72}

    assert client.post("/api/auth/signup", json=credentials).status_code == 201
    assert client.post("/api/auth/login", json=credentials).status_code == 200
