"""Reconciliation of local users with identity provider records.

A user's clerk_id is a weak reference: nothing guarantees the identity
record still exists. Resolution happens at read time against one index
built from the full identity listing, and a missing record degrades to
placeholders instead of an error.
"""

from typing import Dict, Iterable, List, Optional

from config import EMPTY_PLACEHOLDER, LINKED_IDENTITY_LABEL, NO_IDENTITY_LABEL
from schemas.identity import IdentityPrefill, IdentityRecord
from schemas.user import UserDirectoryEntry


def build_identity_index(records: Iterable[IdentityRecord]) -> Dict[str, IdentityRecord]:
    """Index identity records by id. Later duplicates win."""
    return {record.id: record for record in records}


def resolve_identity(
    clerk_id: Optional[str], index: Dict[str, IdentityRecord]
) -> Optional[IdentityRecord]:
    if not clerk_id:
        return None
    return index.get(clerk_id)


def _role_names(user) -> List[str]:
    return [_get(role, "name") for role in (_get(user, "roles") or []) if _get(role, "name")]


def _get(obj, key):
    # Users arrive either as ORM models or as JSON dicts from the API
    if isinstance(obj, dict):
        return obj.get(key)
    return getattr(obj, key, None)


def reconcile_user(user, index: Dict[str, IdentityRecord]) -> UserDirectoryEntry:
    """Decorate one user with its identity record, if it still exists.

    Local name and email take precedence over identity values; the
    placeholder is used when neither is present. The avatar prefers the
    identity image over the local avatar_url.
    """
    clerk_id = _get(user, "clerk_id")
    identity = resolve_identity(clerk_id, index)

    name = _get(user, "name") or (identity.full_name if identity else None)
    email = _get(user, "email") or (identity.primary_email if identity else None)
    avatar_url = (identity.image_url if identity else None) or _get(user, "avatar_url")

    return UserDirectoryEntry(
        user_id=_get(user, "id"),
        clerk_id=clerk_id,
        name=name or EMPTY_PLACEHOLDER,
        email=email or EMPTY_PLACEHOLDER,
        avatar_url=avatar_url,
        linked=identity is not None,
        identity_label=LINKED_IDENTITY_LABEL if identity else NO_IDENTITY_LABEL,
        roles=_role_names(user),
    )


def reconcile_users(users: Iterable, records: Iterable[IdentityRecord]) -> List[UserDirectoryEntry]:
    """Reconcile a batch of users against one identity listing."""
    index = build_identity_index(records)
    return [reconcile_user(user, index) for user in users]


def search_identities(records: Iterable[IdentityRecord], term: str) -> List[IdentityRecord]:
    """Filter identity records for the picker by name, email or id.

    An empty term returns every record.
    """
    needle = (term or "").strip().lower()
    if not needle:
        return list(records)
    matches = []
    for record in records:
        haystack = [record.id, record.full_name or ""]
        haystack.extend(address.email_address for address in record.email_addresses)
        if any(needle in value.lower() for value in haystack):
            matches.append(record)
    return matches


def prefill_from_identity(record: IdentityRecord) -> IdentityPrefill:
    """Form values set when an identity record is picked for a user."""
    return IdentityPrefill(
        clerk_id=record.id,
        name=record.full_name,
        email=record.primary_email,
        avatar_url=record.image_url,
    )
