"""Identity provider record schemas.

These mirror the subset of the Clerk user object the application reads.
Records are never persisted; local users point at them through clerk_id.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class IdentityEmail(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    email_address: str


class IdentityRecord(BaseModel):
    """One user as returned by the identity provider."""

    model_config = ConfigDict(extra="ignore")

    id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email_addresses: List[IdentityEmail] = Field(default_factory=list)
    primary_email_address_id: Optional[str] = None
    image_url: Optional[str] = None

    @property
    def full_name(self) -> Optional[str]:
        parts = [part for part in (self.first_name, self.last_name) if part]
        return " ".join(parts) if parts else None

    @property
    def primary_email(self) -> Optional[str]:
        """The primary address if flagged, otherwise the first one listed."""
        for address in self.email_addresses:
            if address.id and address.id == self.primary_email_address_id:
                return address.email_address
        if self.email_addresses:
            return self.email_addresses[0].email_address
        return None


class IdentityPrefill(BaseModel):
    """Form values filled in when an identity record is picked for a user."""

    clerk_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    avatar_url: Optional[str] = None


class UploadResponse(BaseModel):
    fileUrl: str
