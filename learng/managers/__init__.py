from learng.managers.password_manager import (
    PasswordHasher,
    dummy_verify_password,
    get_password_hasher,
    hash_password,
    verify_password,
)
from learng.managers.token_manager import ACCESS_TOKEN_TYPE, TokenCodec

__all__ = [
    "ACCESS_TOKEN_TYPE",
    "PasswordHasher",
    "TokenCodec",
    "dummy_verify_password",
    "get_password_hasher",
    "hash_password",
    "verify_password",
]
