from app.core.security import create_access_token, decode_token

from conftest import PASSWORD, register



def test_register_and_login_flow(client):
    payload = {
        "name": "Test Student",
        "email": "student@example.com",
        "password": PASSWORD,
        "role": "client",
    }
    register_response = client.post("/auth/register", json=payload)
    assert register_response.status_code == 201
    body = register_response.json()
    assert body["success"] is True
    assert body["accessToken"]
    assert body["user"]["email"] == payload["email"]
    assert "password" not in body["user"]
    assert "passwordHash" not in body["user"]

    login_response = client.post(
        "/auth/login",
        json={"email": payload["email"], "password": payload["password"]},
    )
    assert login_response.status_code == 200
    login_body = login_response.json()
    assert login_body["user"]["id"] == body["user"]["id"]

    me = client.get(
        "/auth/me", headers={"Authorization": f"Bearer {login_body['accessToken']}"}
    )
    assert me.status_code == 200
    assert me.json()["user"]["name"] == "Test Student"


def test_register_duplicate_email_conflicts(client, store):
    original, _ = register(client, "Ana Torres", "ana@example.com")

    response = client.post(
        "/auth/register",
        json={"name": "Other", "email": "ana@example.com", "password": PASSWORD, "role": "trainer"},
    )

    assert response.status_code == 409
    assert response.json() == {"success": False, "error": "Email already registered"}
    users = store.users.load_all()
    assert len(users) == 1
    assert users[0].name == original["name"]
    assert users[0].role.value == "client"


def test_login_with_wrong_password(client):
    register(client, "Ana Torres", "ana@example.com")

    response = client.post(
        "/auth/login", json={"email": "ana@example.com", "password": "Wrongpass1"}
    )

    assert response.status_code == 401
    assert response.json()["success"] is False


def test_register_validation_errors_are_400(client):
    weak = client.post(
        "/auth/register",
        json={"name": "Ana", "email": "ana@example.com", "password": "alllowercase", "role": "client"},
    )
    bad_role = client.post(
        "/auth/register",
        json={"name": "Ana", "email": "ana@example.com", "password": PASSWORD, "role": "admin"},
    )
    bad_name = client.post(
        "/auth/register",
        json={"name": "R2D2", "email": "r2@example.com", "password": PASSWORD, "role": "client"},
    )

    for response in (weak, bad_role, bad_name):
        assert response.status_code == 400
        assert response.json()["success"] is False
        assert response.json()["error"]


def test_trainer_registration_creates_profile(client):
    user, _ = register(client, "Pablo Ruiz", "pablo@example.com", role="trainer")

    response = client.get(f"/trainers/{user['id']}")

    assert response.status_code == 200
    assert response.json()["trainer"]["name"] == "Pablo Ruiz"


def test_protected_route_requires_token(client):
    assert client.get("/auth/me").status_code == 401
    response = client.get("/auth/me", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401
    assert response.json()["success"] is False


def test_register_name_is_trimmed_before_length_check(client):
    short = client.post(
        "/auth/register",
        json={"name": " a ", "email": "a@example.com", "password": PASSWORD, "role": "client"},
    )
    user, _ = register(client, "  Ana Torres  ", "ana@example.com")

    assert short.status_code == 400
    assert short.json()["success"] is False
    assert user["name"] == "Ana Torres"


def test_access_token_claims():
    claims = decode_token(create_access_token("u1"))

    assert claims["sub"] == "u1"
    assert claims["type"] == "access"
    assert "exp" in claims
    assert "role" not in claims
