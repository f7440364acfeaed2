"""Tests for modules/auth/credentials.py."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from modules.auth.credentials import CredentialService
from shared.config import Settings

from tests.conftest import TEST_JWT_SECRET, create_test_token


@pytest.fixture
def credentials(test_settings):
    return CredentialService(test_settings)


class TestPasswords:
    def test_hash_is_not_plaintext(self, credentials):
        hashed = credentials.hash("pass1")
        assert hashed != "pass1"
        assert credentials.verify("pass1", hashed)

    def test_wrong_password(self, credentials):
        hashed = credentials.hash("pass1")
        assert credentials.verify("pass2", hashed) is False

    def test_hashes_are_salted(self, credentials):
        assert credentials.hash("pass1") != credentials.hash("pass1")

    def test_corrupt_hash_does_not_verify(self, credentials):
        assert credentials.verify("pass1", "not-a-hash") is False


class TestTokens:
    def test_issue_then_validate(self, credentials):
        token, issued = credentials.issue_token("user-1", "a@x.com")
        claims = credentials.validate_token(token)

        assert claims == issued
        assert claims.user_id == "user-1"
        assert claims.email == "a@x.com"

    def test_token_lifetime_is_one_hour(self, credentials):
        _, claims = credentials.issue_token("user-1", "a@x.com")
        assert claims.exp - claims.iat == 3600

    def test_wire_claims(self, credentials):
        token, _ = credentials.issue_token("user-1", "a@x.com")
        payload = jwt.decode(token, TEST_JWT_SECRET, algorithms=["HS256"])
        assert set(payload) == {"userId", "email", "iat", "exp"}

    def test_expired_token_is_invalid(self, test_settings):
        issued_at = datetime.now(timezone.utc) - timedelta(seconds=3601)
        issuer = CredentialService(test_settings, clock=lambda: issued_at)
        token, _ = issuer.issue_token("user-1", "a@x.com")

        assert CredentialService(test_settings).validate_token(token) is None

    def test_wrong_secret_is_invalid(self, credentials):
        token = create_test_token(secret="another-secret")
        assert credentials.validate_token(token) is None

    @pytest.mark.parametrize("token", [None, "", "garbage", "a.b.c"])
    def test_malformed_is_invalid(self, credentials, token):
        assert credentials.validate_token(token) is None

    def test_missing_claims_is_invalid(self, credentials):
        now = int(datetime.now(timezone.utc).timestamp())
        token = jwt.encode({"email": "a@x.com", "iat": now, "exp": now + 60}, TEST_JWT_SECRET)
        assert credentials.validate_token(token) is None

    def test_missing_expiry_is_invalid(self, credentials):
        token = jwt.encode({"userId": "u1", "email": "a@x.com"}, TEST_JWT_SECRET)
        assert credentials.validate_token(token) is None

    def test_unconfigured_secret(self):
        service = CredentialService(Settings(jwt_secret_key="", password_hash_rounds=4))

        assert service.validate_token(create_test_token()) is None
        with pytest.raises(RuntimeError, match="not configured"):
            service.issue_token("user-1", "a@x.com")
