"""Custom exception classes for the School Administration API.

This module defines application-specific exceptions following Google Python
Style Guide. Each exception carries the HTTP status code the API layer maps
it to.
"""

from typing import Any, Optional


class SchoolAdminError(Exception):
    """Base exception for all School Administration API errors."""

    status_code: int = 500

    def __init__(self, message: str):
        """Initialize the exception.

        Args:
            message: Human readable description returned to the caller.
        """
        self.message = message
        super().__init__(message)


class ValidationError(SchoolAdminError):
    """Raised when required input is missing or malformed."""

    status_code = 400


class NotFoundError(SchoolAdminError):
    """Raised when the target of an operation does not exist."""

    status_code = 404

    def __init__(self, entity: str, entity_id: Any):
        """Initialize the exception.

        Args:
            entity: Display name of the entity type, e.g. "Student".
            entity_id: The ID that was looked up.
        """
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} '{entity_id}' not found")


class ConflictError(SchoolAdminError):
    """Raised when a write would violate a uniqueness or reference constraint."""

    status_code = 409


class PersistenceError(SchoolAdminError):
    """Raised for database failures that are not constraint violations."""

    pass


class ConfigurationError(SchoolAdminError):
    """Raised when there is a configuration error."""

    pass


class UpstreamError(SchoolAdminError):
    """Raised when an external service call fails."""

    def __init__(self, message: str, upstream_status: Optional[int] = None):
        """Initialize the exception.

        Args:
            message: Description of the failure.
            upstream_status: HTTP status returned by the upstream, if any.
        """
        self.upstream_status = upstream_status
        super().__init__(message)


class IdentityProviderError(UpstreamError):
    """Raised when the identity provider cannot be reached or rejects a call."""

    pass


class FileUploadError(UpstreamError):
    """Raised when the file server upload fails."""

    pass
