from __future__ import annotations

from datetime import timedelta

from jose import jwt

from app.core.config import settings
from app.core.security import create_access_token
from conftest import JACK, ANN, HANK, bearer


def test_token_requires_credentials(client):
    r = client.post("/token")
    assert r.status_code == 401


def test_token_rejects_bad_credentials(client):
    assert client.post("/token", auth=("jack", "nope")).status_code == 401


def test_token_with_basic_credentials(client):
    r = client.post("/token", auth=JACK)
    assert r.status_code == 200
    body = r.json()
    assert body["token_type"] == "bearer"
    assert body["expires_in"] == settings.access_token_expire_minutes * 60

    claims = jwt.decode(
        body["access_token"],
        settings.jwt_secret,
        algorithms=[settings.jwt_algorithm],
        issuer=settings.jwt_issuer,
    )
    assert claims["sub"] == "jack"
    assert claims["scope"] == "USER"
    assert claims["exp"] > claims["iat"]


def test_bearer_token_authorizes_message_routes(seeded, token_for):
    token = token_for(JACK)
    r = seeded.get("/messages/5", headers=bearer(token))
    assert r.status_code == 200
    assert r.json()["owner"] == "jack"

    r = seeded.post("/messages", json={"title": "via token"}, headers=bearer(token))
    assert r.status_code == 201


def test_bearer_token_keeps_ownership_rules(seeded, token_for):
    r = seeded.get("/messages/1", headers=bearer(token_for(ANN)))
    assert r.status_code == 404


def test_token_without_message_role_is_403(seeded, token_for):
    r = seeded.get("/messages/13", headers=bearer(token_for(HANK)))
    assert r.status_code == 403


def test_tampered_token_is_401(seeded, token_for):
    token = token_for(JACK)
    head, payload, signature = token.split(".")
    tampered = ".".join([head, payload, signature[::-1]])
    assert seeded.get("/messages/1", headers=bearer(tampered)).status_code == 401


def test_token_signed_with_other_key_is_401(seeded):
    forged = jwt.encode(
        {"sub": "jack", "scope": "USER", "iss": settings.jwt_issuer},
        "other-secret",
        algorithm="HS256",
    )
    assert seeded.get("/messages/1", headers=bearer(forged)).status_code == 401


def test_expired_token_is_401(seeded):
    expired = create_access_token({"sub": "jack", "scope": "USER"}, expires_delta=timedelta(minutes=-5))
    assert seeded.get("/messages/1", headers=bearer(expired)).status_code == 401


def test_garbage_bearer_is_401(seeded):
    assert seeded.get("/messages/1", headers=bearer("not-a-jwt")).status_code == 401


def test_unknown_scheme_is_401(seeded):
    r = seeded.get("/messages/1", headers={"Authorization": "Digest abc"})
    assert r.status_code == 401


def test_form_login_issues_token(seeded):
    r = seeded.post("/auth/login", data={"username": "ann", "password": "zxc"})
    assert r.status_code == 200
    token = r.json()["access_token"]

    r = seeded.get("/messages/7", headers=bearer(token))
    assert r.status_code == 200
    assert r.json()["title"] == "testData7"


def test_form_login_rejects_bad_password(client):
    r = client.post("/auth/login", data={"username": "ann", "password": "bad"})
    assert r.status_code == 401


def test_home_greets_any_authenticated_user(client):
    r = client.get("/", auth=HANK)
    assert r.status_code == 200
    assert r.text == "Hello, hank"


def test_home_requires_authentication(client):
    assert client.get("/").status_code == 401


def test_me_lists_roles_from_token(client, token_for):
    r = client.get("/me", headers=bearer(token_for(HANK)))
    assert r.json() == {"username": "hank", "roles": ["NON-USER"]}
