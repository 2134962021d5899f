"""Tests for the access token codec."""

from base64 import urlsafe_b64encode
from datetime import UTC, datetime, timedelta

import pytest
from jose import jwt

from learng.errors import (
    ConfigurationError,
    InvalidTokenError,
    TokenExpiredError,
    TokenMalformedError,
    TokenSignatureError,
)
from learng.managers import TokenCodec

SECRET = "unit-test-secret"
ISSUED_AT = datetime(2025, 1, 1, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def codec() -> TokenCodec:
    return TokenCodec(SECRET, ttl=timedelta(hours=24))


def tamper_payload(token: str) -> str:
    """Flip one character in the middle of the payload segment."""
    header, payload, signature = token.split(".")
    middle = len(payload) // 2
    replacement = "A" if payload[middle] != "A" else "B"
    payload = payload[:middle] + replacement + payload[middle + 1 :]
    return f"{header}.{payload}.{signature}"


def replace_header(token: str, header_json: bytes) -> str:
    """Swap the header segment for ``header_json``, keeping payload and signature."""
    _, payload, signature = token.split(".")
    header = urlsafe_b64encode(header_json).rstrip(b"=").decode()
    return f"{header}.{payload}.{signature}"


class TestIssue:
    """Test cases for token issuing."""

    def test_round_trip_preserves_identity(self, codec: TokenCodec) -> None:
        token = codec.issue("user-1", "admin", now=ISSUED_AT)

        claims = codec.decode(token, now=ISSUED_AT)

        assert claims.sub == "user-1"
        assert claims.role == "admin"
        assert claims.iat == int(ISSUED_AT.timestamp())
        assert claims.exp == int((ISSUED_AT + timedelta(hours=24)).timestamp())

    def test_token_is_three_segment_hs256(self, codec: TokenCodec) -> None:
        token = codec.issue("user-1", "learner", now=ISSUED_AT)

        assert token.count(".") == 2
        assert jwt.get_unverified_header(token)["alg"] == "HS256"

    def test_empty_secret_is_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            TokenCodec("")

    def test_clock_is_used_when_now_is_omitted(self) -> None:
        codec = TokenCodec(SECRET, ttl=timedelta(hours=1), clock=lambda: ISSUED_AT)

        claims = codec.decode(codec.issue("user-1", "admin"))

        assert claims.iat == int(ISSUED_AT.timestamp())


class TestExpiry:
    """Expiry is judged against the supplied instant, never wall time."""

    def test_valid_one_second_before_expiry(self, codec: TokenCodec) -> None:
        token = codec.issue("user-1", "admin", now=ISSUED_AT)
        just_before = ISSUED_AT + timedelta(hours=24) - timedelta(seconds=1)

        assert codec.decode(token, now=just_before).sub == "user-1"

    def test_expired_one_second_after_expiry(self, codec: TokenCodec) -> None:
        token = codec.issue("user-1", "admin", now=ISSUED_AT)
        just_after = ISSUED_AT + timedelta(hours=24) + timedelta(seconds=1)

        with pytest.raises(TokenExpiredError) as exc_info:
            codec.decode(token, now=just_after)

        assert exc_info.value.reason == "expired"
        assert exc_info.value.status_code == 401


class TestRejection:
    """Test cases for tokens that must not authenticate."""

    def test_tampered_payload_fails_signature(self, codec: TokenCodec) -> None:
        token = codec.issue("user-1", "learner", now=ISSUED_AT)

        with pytest.raises(TokenSignatureError) as exc_info:
            codec.decode(tamper_payload(token), now=ISSUED_AT)

        assert exc_info.value.reason == "signature-invalid"

    def test_tampered_but_parseable_header_fails_signature(self, codec: TokenCodec) -> None:
        token = codec.issue("user-1", "learner", now=ISSUED_AT)
        forged = replace_header(token, b'{"alg":"HS256","typ":"JWT","kid":"x"}')

        with pytest.raises(TokenSignatureError):
            codec.decode(forged, now=ISSUED_AT)

    def test_unparseable_header_is_malformed_before_signature(self, codec: TokenCodec) -> None:
        token = codec.issue("user-1", "learner", now=ISSUED_AT)
        broken = replace_header(token, b'{"alg":')

        with pytest.raises(TokenMalformedError) as exc_info:
            codec.decode(broken, now=ISSUED_AT)

        assert exc_info.value.reason == "malformed"

    def test_foreign_secret_fails_signature(self, codec: TokenCodec) -> None:
        other = TokenCodec("another-secret")
        token = other.issue("user-1", "admin", now=ISSUED_AT)

        with pytest.raises(TokenSignatureError):
            codec.decode(token, now=ISSUED_AT)

    @pytest.mark.parametrize("token", ["", "not-a-token", "a.b", "###.###.###"])
    def test_garbage_is_malformed(self, codec: TokenCodec, token: str) -> None:
        with pytest.raises(TokenMalformedError) as exc_info:
            codec.decode(token, now=ISSUED_AT)

        assert exc_info.value.reason == "malformed"

    def test_missing_subject_is_malformed(self, codec: TokenCodec) -> None:
        exp = int((ISSUED_AT + timedelta(hours=1)).timestamp())
        token = jwt.encode({"role": "admin", "iat": 0, "exp": exp}, SECRET, algorithm="HS256")

        with pytest.raises(TokenMalformedError):
            codec.decode(token, now=ISSUED_AT)

    def test_ill_typed_expiry_is_malformed(self, codec: TokenCodec) -> None:
        token = jwt.encode(
            {"sub": "user-1", "role": "admin", "iat": 0, "exp": "tomorrow"},
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(TokenMalformedError):
            codec.decode(token, now=ISSUED_AT)

    def test_non_access_token_is_malformed(self, codec: TokenCodec) -> None:
        exp = int((ISSUED_AT + timedelta(hours=1)).timestamp())
        token = jwt.encode(
            {"sub": "user-1", "role": "admin", "iat": 0, "exp": exp, "type": "refresh"},
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(TokenMalformedError):
            codec.decode(token, now=ISSUED_AT)

    def test_every_failure_shares_the_client_message(self, codec: TokenCodec) -> None:
        errors = [TokenMalformedError(), TokenSignatureError(), TokenExpiredError()]

        assert all(isinstance(error, InvalidTokenError) for error in errors)
        assert {error.detail for error in errors} == {"Invalid or expired token"}
