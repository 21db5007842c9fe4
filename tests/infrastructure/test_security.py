"""Security Primitives — password hashing and JWT access tokens.

Tests:
    - Hashes verify only against the original password and never equal it
    - Unrecognised stored hashes fail closed
    - Tokens round-trip their claims; tampered and expired tokens decode to None
"""

from datetime import timedelta

from sh_pizza.infrastructure.security import (
    create_access_token, decode_access_token, generate_reset_token,
    hash_password, verify_password,
)


def test_hash_and_verify():
    hashed = hash_password("correct horse")
    assert hashed != "correct horse"
    assert verify_password("correct horse", hashed)
    assert not verify_password("wrong horse", hashed)


def test_unrecognised_hash_fails_closed():
    assert not verify_password("anything", "plain-text-not-a-hash")


def test_token_claims_round_trip():
    token = create_access_token("user-1", "MANAGER", "branch-9")
    claims = decode_access_token(token)
    assert claims["sub"] == "user-1"
    assert claims["role"] == "MANAGER"
    assert claims["branch_id"] == "branch-9"


def test_tampered_token_rejected():
    token = create_access_token("user-1", "ADMIN")
    assert decode_access_token(token[:-2] + "xx") is None


def test_expired_token_rejected():
    token = create_access_token("user-1", "ADMIN", expires_delta=timedelta(seconds=-5))
    assert decode_access_token(token) is None


def test_reset_tokens_are_unique_and_url_safe():
    tokens = {generate_reset_token() for _ in range(20)}
    assert len(tokens) == 20
    assert all("/" not in t and "+" not in t for t in tokens)
