"""Tests for password hashing."""

import pytest

from learng.managers import (
    PasswordHasher,
    dummy_verify_password,
    hash_password,
    verify_password,
)


@pytest.fixture(scope="module")
def hasher() -> PasswordHasher:
    return PasswordHasher("low")


class TestPasswordHasher:
    """Test cases for the synchronous hasher."""

    def test_hash_is_argon2id_and_salted(self, hasher: PasswordHasher) -> None:
        first = hasher.hash("Passw0rd")
        second = hasher.hash("Passw0rd")

        assert first.startswith("$argon2id$")
        assert first != second
        assert "Passw0rd" not in first

    def test_verify_accepts_only_the_hashed_password(self, hasher: PasswordHasher) -> None:
        hashed = hasher.hash("Passw0rd")

        assert hasher.verify("Passw0rd", hashed) is True
        assert hasher.verify("passw0rd", hashed) is False

    def test_empty_password_is_rejected(self, hasher: PasswordHasher) -> None:
        with pytest.raises(ValueError, match="empty"):
            hasher.hash("")

    @pytest.mark.parametrize("stored", ["", "   ", "not-a-hash", "$argon2id$broken"])
    def test_unusable_stored_hash_fails_closed(
        self,
        hasher: PasswordHasher,
        stored: str,
    ) -> None:
        assert hasher.verify("Passw0rd", stored) is False

    def test_dummy_verify_never_succeeds(self, hasher: PasswordHasher) -> None:
        assert hasher.dummy_verify() is False


class TestAsyncHelpers:
    """The coroutine helpers run on the worker pool with the default hasher."""

    async def test_hash_then_verify(self) -> None:
        hashed = await hash_password("Passw0rd")

        assert await verify_password("Passw0rd", hashed) is True
        assert await verify_password("wrong-1", hashed) is False

    async def test_dummy_verify(self) -> None:
        assert await dummy_verify_password() is False
