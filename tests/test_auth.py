"""
Login / logout flow against the fake portfolio API.
"""

from conftest import flashed


def test_login_page_renders(client):
    response = client.get("/login")

    assert response.status_code == 200
    assert b"Admin Login" in response.data


def test_successful_login_stores_token_and_goes_to_dashboard(client, backend):
    backend.add("POST", "/auth/login", {"token": "jwt-123"})

    response = client.post("/login", data={"username": "admin", "password": "secret"})

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/")
    with client.session_transaction() as sess:
        assert sess["token"] == "jwt-123"
        assert sess["username"] == "admin"
    assert ("success", "Welcome back!") in flashed(client)
    assert backend.calls[0]["json"] == {"username": "admin", "password": "secret"}


def test_login_accepts_wrapped_token(client, backend):
    backend.add("POST", "/auth/login", {"success": True, "data": {"token": "wrapped"}})

    client.post("/login", data={"username": "admin", "password": "secret"})

    with client.session_transaction() as sess:
        assert sess["token"] == "wrapped"


def test_login_redirects_to_safe_next(client, backend):
    backend.add("POST", "/auth/login", {"token": "t"})

    response = client.post("/login?next=/messages", data={"username": "a", "password": "b"})
    assert response.headers["Location"].endswith("/messages")


def test_login_ignores_external_next(client, backend):
    backend.add("POST", "/auth/login", {"token": "t"})

    response = client.post("/login?next=https://evil.test/", data={"username": "a", "password": "b"})
    assert "evil.test" not in response.headers["Location"]


def test_login_without_token_in_response(client, backend):
    backend.add("POST", "/auth/login", {"success": True})

    response = client.post("/login", data={"username": "admin", "password": "secret"})

    assert response.status_code == 502
    assert b"Login failed: Invalid response from server" in response.data
    with client.session_transaction() as sess:
        assert "token" not in sess


def test_bad_credentials_show_server_message(client, backend):
    backend.add("POST", "/auth/login", {"message": "Invalid credentials"}, status=401)

    response = client.post("/login", data={"username": "admin", "password": "wrong"})

    assert response.status_code == 401
    assert b"Invalid credentials" in response.data


def test_missing_fields_do_not_call_api(client, backend):
    response = client.post("/login", data={"username": "admin", "password": ""})

    assert response.status_code == 400
    assert b"Please enter both username and password" in response.data
    assert backend.calls == []


def test_logged_in_user_skips_login_page(auth_client):
    response = auth_client.get("/login")

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/")


def test_logout_clears_token(auth_client):
    response = auth_client.get("/logout")

    assert response.status_code == 302
    assert "/login" in response.headers["Location"]
    with auth_client.session_transaction() as sess:
        assert "token" not in sess
    assert ("success", "Logged out") in flashed(auth_client)


def test_401_from_any_page_clears_session_and_redirects(auth_client, backend):
    backend.add("GET", "/messages", {"message": "Session expired"}, status=401)

    response = auth_client.get("/messages")

    assert response.status_code == 302
    assert "/login" in response.headers["Location"]
    with auth_client.session_transaction() as sess:
        assert "token" not in sess
    assert ("error", "Session expired") in flashed(auth_client)
