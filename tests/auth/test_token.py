from __future__ import annotations

import base64
import json
from datetime import datetime, timedelta, timezone

import pytest

from src.attendance_portal.attendance_portal.auth.token import decode_token, is_expired
from src.attendance_portal.attendance_portal.core.enums import Role
from tests.helpers import make_token


def _b64(obj) -> str:
    return base64.urlsafe_b64encode(json.dumps(obj).encode()).rstrip(b"=").decode()


def test_decode_reads_identity_claims(fixed_now):
    token = make_token(sub="42", full_name="Asha Menon", role="admin", email="asha@college.edu", exp=fixed_now + timedelta(hours=1))

    claims = decode_token(token)

    assert claims is not None
    assert claims.subject == "42"
    assert claims.full_name == "Asha Menon"
    assert claims.role == Role.ADMIN
    assert claims.email == "asha@college.edu"
    assert claims.expires_at == fixed_now + timedelta(hours=1)


def test_decode_accepts_legacy_id_claim(fixed_now):
    token = make_token(id="9", full_name="B", role="faculty", exp=fixed_now)

    assert decode_token(token).subject == "9"


def test_unknown_role_is_kept_as_none(fixed_now):
    claims = decode_token(make_token(sub="1", role="student", exp=fixed_now))

    assert claims.role is None
    assert claims.role_label == "unknown"


@pytest.mark.parametrize(
    "token",
    [
        None,
        "",
        "not-a-token",
        "a.b.c",
        "e30.e30",
        f"{_b64({'alg': 'HS256', 'typ': 'JWT'})}.{_b64([1, 2, 3])}.c2ln",
        f"{_b64({'alg': 'HS256', 'typ': 'JWT'})}.bm90IGpzb24.c2ln",
        12345,
    ],
)
def test_malformed_tokens_decode_to_none(token):
    assert decode_token(token) is None


@pytest.mark.parametrize("exp", [None, "tomorrow", True, 10**20])
def test_missing_or_invalid_expiry_decodes_to_none(exp):
    claims = {"sub": "1", "role": "faculty"}
    if exp is not None:
        claims["exp"] = exp
    token = make_token(**claims)

    assert decode_token(token) is None


def test_expiry_must_be_strictly_in_the_future(fixed_now):
    claims = decode_token(make_token(sub="1", role="faculty", exp=fixed_now))

    assert is_expired(claims, now=fixed_now)
    assert is_expired(claims, now=fixed_now + timedelta(seconds=1))
    assert not is_expired(claims, now=fixed_now - timedelta(seconds=1))


def test_signature_is_not_checked_locally(fixed_now):
    token = make_token(sub="1", role="faculty", exp=fixed_now + timedelta(hours=1), secret="some-other-secret-0123456789abcdefgh")

    assert decode_token(token) is not None
