"""File upload proxy route."""

from fastapi import APIRouter, File, UploadFile

from core.dependencies import FileUploadClientDep
from schemas.identity import UploadResponse

router = APIRouter(prefix="/api/upload", tags=["Upload"])


@router.post("", response_model=UploadResponse, summary="Upload a file to the file server")
def upload_file(
    upload_client: FileUploadClientDep,
    file: UploadFile = File(...),
) -> UploadResponse:
    """Forward a multipart upload (usually an avatar) to the file server.

    Raises:
        FileUploadError: 500 if the file server rejects the upload.
    """
    file_url = upload_client.upload(file.filename, file.file, file.content_type)
    return UploadResponse(fileUrl=file_url)
