"""Identity provider proxy routes.

The browser never talks to the identity provider directly: these endpoints
forward the user listing using the server-side secret key.
"""

from typing import List, Optional

from fastapi import APIRouter

from core.dependencies import IdentityProviderDep
from core.exceptions import NotFoundError
from schemas.identity import IdentityPrefill, IdentityRecord
from utils.identity_reconciler import prefill_from_identity, search_identities

router = APIRouter(prefix="/api/clerk", tags=["Identity"])


@router.get("/users", response_model=List[IdentityRecord], summary="List identity users")
def list_identity_users(
    identity_provider: IdentityProviderDep, search: Optional[str] = None
) -> List[IdentityRecord]:
    """List every identity provider user.

    Args:
        identity_provider: Injected ClerkClient instance.
        search: Optional picker filter on name, email or id.

    Raises:
        IdentityProviderError: 500 with the provider's error message.
    """
    records = identity_provider.list_identity_users()
    if search:
        return search_identities(records, search)
    return records


@router.get(
    "/users/{clerk_id}/prefill",
    response_model=IdentityPrefill,
    summary="Form values for linking a user to an identity record",
)
def identity_prefill(clerk_id: str, identity_provider: IdentityProviderDep) -> IdentityPrefill:
    for record in identity_provider.list_identity_users():
        if record.id == clerk_id:
            return prefill_from_identity(record)
    raise NotFoundError("Identity user", clerk_id)
