"""File server client used for avatar uploads."""

import logging
from typing import BinaryIO, Optional

import requests

from config import FILESERVER_URL, HTTP_TIMEOUT
from core.exceptions import ConfigurationError, FileUploadError

logger = logging.getLogger(__name__)


class FileUploadClient:
    """Posts files to the external file server's ``/api/upload`` endpoint."""

    def __init__(
        self,
        base_url: Optional[str] = FILESERVER_URL,
        timeout: float = HTTP_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/") if base_url else None
        self.timeout = timeout
        self.session = session or requests.Session()

    def upload(self, filename: str, content: BinaryIO, content_type: Optional[str] = None) -> str:
        """Upload one file.

        Args:
            filename: Original file name.
            content: Readable binary stream.
            content_type: MIME type forwarded to the file server.

        Returns:
            Public URL of the stored file.

        Raises:
            ConfigurationError: If FILESERVER_URL is not set.
            FileUploadError: If the upload fails or the reply has no URL.
        """
        if not self.base_url:
            raise ConfigurationError("FILESERVER_URL is not set")

        files = {"file": (filename, content, content_type or "application/octet-stream")}
        try:
            response = self.session.post(
                f"{self.base_url}/api/upload", files=files, timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error("Error uploading %s: %s", filename, e)
            raise FileUploadError(f"Failed to upload file: {e}") from e

        if response.status_code >= 400:
            logger.error("File server returned %s for %s", response.status_code, filename)
            raise FileUploadError(
                "Failed to upload file", upstream_status=response.status_code
            )

        try:
            data = response.json()
        except ValueError as e:
            raise FileUploadError("File server returned an invalid response") from e

        # Older file server builds answer with photoUrl
        file_url = data.get("fileUrl") or data.get("photoUrl")
        if not file_url:
            raise FileUploadError("File server response has no file URL")
        logger.info("Uploaded %s to %s", filename, file_url)
        return file_url
