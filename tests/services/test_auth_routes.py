"""Auth Routes — signup, login, and bearer token resolution.

Invariants:
    - Signup returns 201 with the public user view and a token
    - Signup validation failures return 422 "Bad Request" with a body report
    - Duplicate email returns 409; bad credentials return 401
    - /user/me requires a valid bearer token
"""


async def test_signup_creates_user(client, signup_payload):
    res = await client.post("/api/v1/auth/signup", json=signup_payload)
    assert res.status_code == 201
    body = res.json()
    assert body["statusCode"] == 201
    user = body["data"]["user"]
    assert user["email"] == "ada@example.org"
    assert user["nationality"] == "GB"
    assert "password_hash" not in user
    assert body["data"]["token"]


async def test_signup_password_mismatch_is_422(client, signup_payload):
    signup_payload["passwordConfirm"] = "different1"
    res = await client.post("/api/v1/auth/signup", json=signup_payload)
    assert res.status_code == 422
    body = res.json()
    assert body["message"] == "Bad Request"
    report = body["description"][0]
    assert report["source"] == "body"
    assert report["fieldErrors"] == {"passwordConfirm": ["Passwords do not match"]}


async def test_signup_invalid_json_is_422(client):
    res = await client.post(
        "/api/v1/auth/signup", content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 422
    assert res.json()["description"][0]["issues"][0]["kind"] == "json_invalid"


async def test_signup_duplicate_email_is_409(client, signup_payload, auth_headers):
    res = await client.post("/api/v1/auth/signup", json=signup_payload)
    assert res.status_code == 409
    assert res.json()["message"] == "Conflict"


async def test_login_with_correct_password(client, signup_payload, auth_headers):
    res = await client.post("/api/v1/auth/login", json={
        "email": signup_payload["email"], "password": signup_payload["password"],
    })
    assert res.status_code == 200
    assert res.json()["data"]["user"]["firstname"] == "Ada"


async def test_login_with_wrong_password_is_401(client, signup_payload, auth_headers):
    res = await client.post("/api/v1/auth/login", json={
        "email": signup_payload["email"], "password": "wrong-password",
    })
    assert res.status_code == 401
    assert res.json()["message"] == "Unauthorized"


async def test_login_unknown_email_is_401(client):
    res = await client.post("/api/v1/auth/login", json={
        "email": "nobody@example.org", "password": "whatever1",
    })
    assert res.status_code == 401


async def test_me_returns_current_user(client, auth_headers):
    res = await client.get("/api/v1/user/me", headers=auth_headers)
    assert res.status_code == 200
    assert res.json()["data"]["email"] == "ada@example.org"


async def test_me_without_token_is_401(client):
    res = await client.get("/api/v1/user/me")
    assert res.status_code == 401
    assert res.json()["description"] == "You are not logged in"


async def test_me_with_garbage_token_is_401(client):
    res = await client.get(
        "/api/v1/user/me", headers={"Authorization": "Bearer not-a-jwt"},
    )
    assert res.status_code == 401
