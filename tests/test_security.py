"""
Tests for password hashing and token issuance/validation.
"""

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

from jose import jwt

from agroscan.modules.user_management.domain.models.user import UserRole
from agroscan.shared.config.settings import TokenSettings
from agroscan.shared.core.security import MS_ROLE_CLAIM, PasswordHasher, TokenService

SECRET = "unit-test-secret-key-0123456789-abcdefghij"


def make_user(user_id=7, role=UserRole.FARMER):
    return SimpleNamespace(
        id=user_id,
        email="ana@example.com",
        first_name="Ana",
        last_name="Lee",
        role=role,
    )


class TestPasswordHasher:
    hasher = PasswordHasher(rounds=4)

    def test_hash_then_verify(self):
        hashed = self.hasher.hash("Secret123")
        assert hashed != "Secret123"
        assert self.hasher.verify("Secret123", hashed)

    def test_wrong_password_does_not_verify(self):
        hashed = self.hasher.hash("Secret123")
        assert not self.hasher.verify("Secret124", hashed)

    def test_same_password_hashes_differently(self):
        assert self.hasher.hash("Secret123") != self.hasher.hash("Secret123")

    def test_long_passwords_sharing_a_prefix_stay_distinct(self):
        prefix = "A" * 72
        hashed = self.hasher.hash(prefix + "first-secret")

        assert self.hasher.verify(prefix + "first-secret", hashed)
        assert not self.hasher.verify(prefix + "totally-different", hashed)
        assert not self.hasher.verify(prefix, hashed)

    def test_malformed_hash_is_rejected_without_raising(self):
        assert self.hasher.verify("Secret123", "not-a-bcrypt-hash") is False
        assert self.hasher.verify("Secret123", "") is False


class TestTokenService:
    def test_issued_token_validates_to_user_id(self):
        service = TokenService(TokenSettings(secret_key=SECRET))
        issued = service.issue(make_user(user_id=42))

        assert service.validate(issued.token) == 42

    def test_expiry_comes_from_exp_claim(self):
        service = TokenService(TokenSettings(secret_key=SECRET, expiration_minutes=30))
        issued = service.issue(make_user())

        claims = jwt.get_unverified_claims(issued.token)
        assert int(issued.expires_at.timestamp()) == claims["exp"]
        assert issued.expires_at > datetime.now(timezone.utc) + timedelta(minutes=29)

    def test_claims_carry_identity_and_role(self):
        service = TokenService(TokenSettings(secret_key=SECRET))
        issued = service.issue(make_user(role=UserRole.ADMIN))

        claims = jwt.get_unverified_claims(issued.token)
        assert claims["sub"] == "7"
        assert claims["email"] == "ana@example.com"
        assert claims["name"] == "Ana Lee"
        assert claims["role"] == "Admin"
        assert claims[MS_ROLE_CLAIM] == "Admin"
        assert claims["iss"] == "AgroScanAPI"
        assert claims["aud"] == "AgroScanUsers"

        decoded = service.decode(issued.token)
        assert decoded.user_id == 7
        assert decoded.role == "Admin"

    def test_expired_token_is_invalid(self):
        settings = TokenSettings(secret_key=SECRET, expiration_minutes=60)
        two_hours_ago = datetime.now(timezone.utc) - timedelta(hours=2)
        issuer = TokenService(settings, clock=lambda: two_hours_ago)
        token = issuer.issue(make_user()).token

        assert TokenService(settings).validate(token) is None

    def test_token_expired_one_second_ago_is_invalid(self):
        settings = TokenSettings(secret_key=SECRET, expiration_minutes=60)
        issued_at = datetime.now(timezone.utc) - timedelta(minutes=60, seconds=1)
        token = TokenService(settings, clock=lambda: issued_at).issue(make_user()).token

        assert TokenService(settings).validate(token) is None

    def test_wrong_secret_is_invalid(self):
        token = TokenService(TokenSettings(secret_key=SECRET)).issue(make_user()).token
        other = TokenService(TokenSettings(secret_key=SECRET + "-rotated"))

        assert other.validate(token) is None

    def test_wrong_audience_is_invalid(self):
        token = TokenService(TokenSettings(secret_key=SECRET, audience="SomeoneElse")).issue(make_user()).token

        assert TokenService(TokenSettings(secret_key=SECRET)).validate(token) is None

    def test_wrong_issuer_is_invalid(self):
        token = TokenService(TokenSettings(secret_key=SECRET, issuer="Elsewhere")).issue(make_user()).token

        assert TokenService(TokenSettings(secret_key=SECRET)).validate(token) is None

    def test_non_integer_subject_is_invalid(self):
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {
                "sub": "not-a-number",
                "iss": "AgroScanAPI",
                "aud": "AgroScanUsers",
                "iat": int(now.timestamp()),
                "exp": int((now + timedelta(minutes=5)).timestamp()),
            },
            SECRET,
            algorithm="HS256",
        )

        assert TokenService(TokenSettings(secret_key=SECRET)).validate(token) is None

    def test_garbage_and_empty_tokens_are_invalid(self):
        service = TokenService(TokenSettings(secret_key=SECRET))
        assert service.validate("abc.def.ghi") is None
        assert service.validate("") is None
        assert service.validate(None) is None
