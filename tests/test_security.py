"""
Unit tests for security utilities.
"""
from datetime import datetime, timedelta, timezone

from sqlalchemy.orm import Session

from canteen.core.security import (
    blacklist_token,
    create_access_token,
    create_refresh_token,
    decode_token,
    hash_password,
    hash_token,
    is_token_blacklisted,
    verify_password,
)


class TestPasswordHashing:
    """Tests for password hashing functions."""

    def test_hash_password(self):
        """Test that password hashing produces a hash."""
        password = "mysecretpassword"
        hashed = hash_password(password)

        assert hashed != password
        assert len(hashed) > 20  # bcrypt hashes are long

    def test_hash_password_different_each_time(self):
        """Test that hashing same password produces different hashes."""
        password = "mysecretpassword"

        assert hash_password(password) != hash_password(password)  # Different salts

    def test_verify_password_correct(self):
        hashed = hash_password("mysecretpassword")

        assert verify_password("mysecretpassword", hashed) is True

    def test_verify_password_incorrect(self):
        hashed = hash_password("mysecretpassword")

        assert verify_password("wrongpassword", hashed) is False


class TestJWTTokens:
    """Tests for JWT token functions."""

    def test_decode_access_token(self):
        token = create_access_token(subject="user-123")

        payload = decode_token(token)

        assert payload is not None
        assert payload["sub"] == "user-123"
        assert payload["type"] == "access"

    def test_decode_refresh_token(self):
        token = create_refresh_token(subject="user-456")

        payload = decode_token(token)

        assert payload is not None
        assert payload["sub"] == "user-456"
        assert payload["type"] == "refresh"

    def test_tokens_for_same_subject_differ(self):
        """Two tokens issued back to back are distinct."""
        assert create_refresh_token(subject="user-1") != create_refresh_token(subject="user-1")

    def test_decode_invalid_token(self):
        """Test decoding an invalid token returns None."""
        assert decode_token("invalid.token.here") is None

    def test_decode_expired_token(self):
        token = create_access_token(subject="user-789", expires_delta=timedelta(seconds=-1))

        assert decode_token(token) is None

    def test_access_token_with_custom_expiry(self):
        token = create_access_token(subject="user-789", expires_delta=timedelta(minutes=5))

        payload = decode_token(token)

        assert payload is not None
        assert payload["sub"] == "user-789"


class TestTokenBlacklist:
    """Tests for refresh token revocation."""

    def test_hash_token_is_stable(self):
        assert hash_token("abc") == hash_token("abc")
        assert hash_token("abc") != "abc"

    def test_blacklist_token(self, db: Session):
        token = create_refresh_token(subject="user-1")
        expires_at = datetime.now(timezone.utc) + timedelta(days=1)

        assert is_token_blacklisted(token, db) is False

        blacklist_token(token, expires_at, db)
        # second call is a no-op
        blacklist_token(token, expires_at, db)

        assert is_token_blacklisted(token, db) is True
