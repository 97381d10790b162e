"""HTTP client for the School Administration API.

Wraps every collection route with cached queries and invalidating
mutations. Each mutation drops an explicit list of cached queries on
success, so a user deletion also refreshes the student, teacher and parent
listings it cascaded into.
"""

import logging
from typing import Any, BinaryIO, Dict, List, Optional, Tuple

import requests

from client.query_cache import CacheKey, QueryCache
from config import HTTP_TIMEOUT
from schemas.identity import IdentityRecord
from schemas.user import UserDirectoryEntry
from utils.identity_reconciler import reconcile_users

logger = logging.getLogger(__name__)


class ApiClientError(Exception):
    """Raised when the API answers with an error status."""

    def __init__(self, status_code: int, message: str):
        """Initialize the exception.

        Args:
            status_code: HTTP status of the response.
            message: The server's ``detail`` text.
        """
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


class Resource:
    """Route description of one collection."""

    def __init__(
        self,
        path: str,
        invalidates: Tuple[str, ...],
        nested_update: bool = False,
    ):
        """Initialize Resource.

        Args:
            path: Collection path, e.g. "/api/students".
            invalidates: Cache namespaces dropped after a successful write.
            nested_update: True when PUT takes ``{id, data}`` instead of a
                flat body.
        """
        self.path = path
        self.invalidates = invalidates
        self.nested_update = nested_update


RESOURCES: Dict[str, Resource] = {
    "users": Resource(
        "/api/users",
        ("users", "students", "teachers", "parents"),
        nested_update=True,
    ),
    "roles": Resource("/api/role", ("roles", "users")),
    "students": Resource(
        "/api/students",
        ("students", "parents", "violations", "points"),
        nested_update=True,
    ),
    "teachers": Resource(
        "/api/teachers", ("teachers", "schedules"), nested_update=True
    ),
    "parents": Resource("/api/parents", ("parents",), nested_update=True),
    "schedules": Resource("/api/schedules", ("schedules",)),
    "majors": Resource("/api/majors", ("majors", "classes", "subjects")),
    "academic-years": Resource("/api/academic-years", ("academic-years", "classes")),
    "classes": Resource("/api/classes", ("classes", "students", "schedules")),
    "subjects": Resource("/api/subjects", ("subjects", "schedules")),
    "violation-types": Resource(
        "/api/violation-types", ("violation-types", "violations", "points")
    ),
    "violations": Resource("/api/violations", ("violations", "points")),
}


class SchoolAdminClient:
    """Client for the School Administration API.

    The cache belongs to the caller; pass the same QueryCache to several
    clients to share results between them.
    """

    def __init__(
        self,
        base_url: str,
        cache: Optional[QueryCache] = None,
        session: Optional[requests.Session] = None,
        timeout: float = HTTP_TIMEOUT,
    ):
        """Initialize SchoolAdminClient.

        Args:
            base_url: API root, e.g. "http://localhost:8000".
            cache: Query cache. A private one is created if omitted.
            session: HTTP session exposing ``request(method, url, ...)``.
            timeout: Request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.cache = cache if cache is not None else QueryCache()
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(self, method: str, path: str, **kwargs) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error("Error calling %s %s: %s", method, path, e)
            raise ApiClientError(0, f"Request failed: {e}") from e

        if response.status_code >= 400:
            raise ApiClientError(response.status_code, _error_detail(response))
        return response.json()

    def _resource(self, name: str) -> Resource:
        try:
            return RESOURCES[name]
        except KeyError:
            raise ValueError(f"Unknown resource: {name}") from None

    def _invalidate(self, resource: Resource) -> None:
        for namespace in resource.invalidates:
            self.cache.invalidate((namespace,))

    # --- Queries ---

    def list(self, name: str, **filters) -> List[Dict[str, Any]]:
        """List a collection, e.g. ``list("violations", student_id="s1")``.

        Results are cached per resource and filter values.
        """
        resource = self._resource(name)
        params = {key: value for key, value in filters.items() if value is not None}
        key: CacheKey = (name,) + tuple(f"{k}={v}" for k, v in sorted(params.items()))
        return self.cache.fetch(
            key, lambda: self._request("GET", resource.path, params=params)
        )

    def get_user(self, user_id: str) -> Dict[str, Any]:
        return self.cache.fetch(
            ("users", user_id), lambda: self._request("GET", f"/api/users/{user_id}")
        )

    def get_student_points(self, student_id: str) -> int:
        data = self.cache.fetch(
            ("points", student_id),
            lambda: self._request("GET", f"/api/students/{student_id}/points"),
        )
        return data["points"]

    def get_identity_users(
        self, search: Optional[str] = None, refresh: bool = False
    ) -> List[IdentityRecord]:
        """Identity provider users, optionally filtered for the picker.

        Args:
            search: Optional filter on name, email or id.
            refresh: Drop every cached listing and ask the provider again.
        """
        if refresh:
            self.cache.invalidate(("clerk-users",))
        params = {"search": search} if search else {}
        key: CacheKey = ("clerk-users", search) if search else ("clerk-users",)
        rows = self.cache.fetch(
            key, lambda: self._request("GET", "/api/clerk/users", params=params)
        )
        return [IdentityRecord.model_validate(row) for row in rows]

    def get_user_rows(self) -> List[UserDirectoryEntry]:
        """Users decorated with their identity records, ready for display.

        The identity listing is fetched again on every call, so accounts
        removed from the provider show up as unlinked.
        """
        return reconcile_users(self.list("users"), self.get_identity_users(refresh=True))

    # --- Mutations ---

    def create(self, name: str, data: Dict[str, Any]) -> Dict[str, Any]:
        resource = self._resource(name)
        created = self._request("POST", resource.path, json=data)
        self._invalidate(resource)
        return created

    def update(self, name: str, record_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """Send only the changed fields of a record.

        Args:
            name: Resource name, e.g. "students".
            record_id: ID of the record to change.
            data: Fields to change.
        """
        resource = self._resource(name)
        if resource.nested_update:
            body = {"id": record_id, "data": data}
        else:
            body = {"id": record_id, **data}
        updated = self._request("PUT", resource.path, json=body)
        self._invalidate(resource)
        return updated

    def delete(self, name: str, record_id: str) -> Dict[str, Any]:
        resource = self._resource(name)
        result = self._request("DELETE", resource.path, json={"id": record_id})
        self._invalidate(resource)
        return result

    def assign_role(self, user_id: str, role_id: str) -> Dict[str, Any]:
        user = self._request(
            "POST", f"/api/users/{user_id}/roles", json={"role_id": role_id}
        )
        self._invalidate(RESOURCES["users"])
        return user

    def revoke_role(self, user_id: str, role_id: str) -> Dict[str, Any]:
        result = self._request("DELETE", f"/api/users/{user_id}/roles/{role_id}")
        self._invalidate(RESOURCES["users"])
        return result

    def upload(
        self, filename: str, content: BinaryIO, content_type: str = "application/octet-stream"
    ) -> str:
        """Upload a file through the API and return its public URL."""
        data = self._request(
            "POST", "/api/upload", files={"file": (filename, content, content_type)}
        )
        return data["fileUrl"]


def _error_detail(response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    if isinstance(body, dict) and "detail" in body:
        return str(body["detail"])
    return str(body)
