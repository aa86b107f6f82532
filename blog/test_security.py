"""
Tests for token/password helpers and the bearer-token gate.
"""

import jwt
import pytest

from blog.security import check_password, create_token, hash_password, verify_token


# --------------- Bcrypt ---------------

def test_bcrypt_hashing():
    hashed = hash_password("mypassword")
    assert hashed != "mypassword"
    assert check_password("mypassword", hashed) is True
    assert check_password("wrong", hashed) is False


# --------------- JWT ---------------

def test_token_claims():
    claims = verify_token(create_token(1, "ssar"))
    assert claims["sub"] == "blog"
    assert claims["id"] == 1
    assert claims["username"] == "ssar"
    assert claims["exp"] > claims["iat"]


def test_token_uses_hs512():
    assert jwt.get_unverified_header(create_token(1, "ssar"))["alg"] == "HS512"


def test_tampered_token_rejected():
    token = create_token(1, "ssar")
    with pytest.raises(jwt.InvalidTokenError):
        verify_token(token[:-4] + "abcd")


def test_foreign_key_token_rejected():
    token = jwt.encode({"id": 1, "username": "ssar", "exp": 9999999999}, "another-key", algorithm="HS512")
    with pytest.raises(jwt.InvalidTokenError):
        verify_token(token)


def test_expired_token_rejected():
    with pytest.raises(jwt.ExpiredSignatureError):
        verify_token(create_token(1, "ssar", expires_in=-10))


def test_check_password_over_72_bytes_is_false():
    hashed = hash_password("1234")
    assert check_password("x" * 100, hashed) is False


# --------------- Bearer gate ---------------

def test_gate_missing_header(client):
    resp = client.get("/api/user")
    assert resp.status_code == 401
    assert resp.json()["msg"] == "토큰을 찾을 수 없습니다"


def test_gate_garbage_token(client):
    resp = client.get("/api/user", headers={"Authorization": "Bearer garbage.token.here"})
    assert resp.status_code == 401
    assert resp.json()["msg"] == "토큰 검증에 실패했습니다"


def test_gate_requires_bearer_prefix(client, access_token):
    resp = client.get("/api/user", headers={"Authorization": access_token})
    assert resp.status_code == 401


def test_gate_expired_token(client):
    token = create_token(1, "ssar", expires_in=-10)
    resp = client.delete("/api/board/2", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401
    assert resp.json() == {"status": 401, "msg": "토큰이 만료되었습니다", "body": None}


# --------------- Envelope on framework errors ---------------

def test_unknown_route_is_enveloped(client):
    resp = client.get("/nope")
    assert resp.status_code == 404
    assert resp.json()["status"] == 404
    assert resp.json()["body"] is None


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["service"] == "blog"
