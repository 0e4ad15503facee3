from __future__ import annotations

import pytest

from common.auth import TokenError, create_access_token, decode_access_token, identity_from_claims
from product_service.core.security import caller_id_from_token, parse_user_id
from user_service.core.security import hash_password, issue_access_token, read_access_token, verify_password

KEY = "unit-test-signing-key-0123456789abcdef"


def test_password_hash_roundtrip():
    hashed = hash_password("s3cret")

    assert hashed.startswith("argon2$")
    assert verify_password("s3cret", hashed) is True
    assert verify_password("wrong", hashed) is False


def test_verify_rejects_unknown_hash_formats():
    assert verify_password("s3cret", None) is False
    assert verify_password("s3cret", "plaintext") is False


def test_token_carries_identity_claims():
    token = create_access_token(
        "ana@example.com", "user-1", key=KEY, issuer="issuer", audience="aud", expires_minutes=5
    )
    claims = decode_access_token(token, key=KEY, issuer="issuer", audience="aud")

    assert claims["sub"] == "ana@example.com"
    assert claims["nameid"] == "user-1"
    assert claims["jti"]
    assert claims["exp"] > claims["iat"]
    assert identity_from_claims(claims) == "user-1"


def test_token_with_wrong_audience_is_rejected():
    token = create_access_token("a@b.c", "u", key=KEY, issuer="issuer", audience="aud", expires_minutes=5)

    with pytest.raises(TokenError):
        decode_access_token(token, key=KEY, issuer="issuer", audience="other")


def test_expired_token_is_rejected():
    token = create_access_token("a@b.c", "u", key=KEY, issuer="issuer", audience="aud", expires_minutes=-1)

    with pytest.raises(TokenError):
        decode_access_token(token, key=KEY, issuer="issuer", audience="aud")


def test_token_signed_with_other_key_is_rejected():
    token = create_access_token("a@b.c", "u", key="another-key-0123456789abcdef", issuer="issuer", audience="aud", expires_minutes=5)

    with pytest.raises(TokenError):
        decode_access_token(token, key=KEY, issuer="issuer", audience="aud")


def test_identity_from_claims_ignores_blank_values():
    assert identity_from_claims(None) is None
    assert identity_from_claims({"nameid": "  "}) is None
    assert identity_from_claims({"sub": "a@b.c"}) is None


def test_user_service_tokens_are_accepted_by_product_service():
    user_id = "6f1c1f52-4a5e-4f0e-9a57-3c7f6bd0e111"
    token = issue_access_token("ana@example.com", user_id)

    assert read_access_token(token)["nameid"] == user_id
    assert str(caller_id_from_token(token)) == user_id


def test_caller_id_requires_uuid_identity():
    assert caller_id_from_token(None) is None
    assert caller_id_from_token("garbage") is None
    assert caller_id_from_token(issue_access_token("a@b.c", "not-a-uuid")) is None
    assert parse_user_id("not-a-uuid") is None
