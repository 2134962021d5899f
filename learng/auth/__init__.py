from learng.auth.guard import (
    IdentityDep,
    extract_bearer_token,
    get_identity,
    get_token_codec,
    require_role,
)
from learng.auth.ownership import (
    OwnershipResolver,
    ResourceKind,
    ResourceRef,
    lookup_or_raise,
)

__all__ = [
    "IdentityDep",
    "OwnershipResolver",
    "ResourceKind",
    "ResourceRef",
    "extract_bearer_token",
    "get_identity",
    "get_token_codec",
    "lookup_or_raise",
    "require_role",
]
