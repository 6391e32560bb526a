import base64
import logging
from typing import List, Optional, Sequence
from urllib.parse import unquote, urlparse

from pydantic import ValidationError

from uploadthing.config import Settings, get_settings
from uploadthing.core.exceptions import (
    InvalidAPIKeyError,
    InvalidFileKeyError,
    InvalidInputError,
    UploadFailedError,
)
from uploadthing.models.api import (
    DeleteFilesRequest,
    FileToUpload,
    PresignedPost,
    UploadedFile,
    UploadFilesRequest,
    UploadFilesResponse,
)
from uploadthing.models.file import ACL, ContentDisposition, PresignedURL, Region, UploadFile
from uploadthing.services.uploader.interfaces import HttpTransport, TransportResponse
from uploadthing.services.uploader.presigner import Presigner, _at
from uploadthing.services.uploader.requests_transport import RequestsTransport

logger = logging.getLogger(__name__)


def _mask(api_key: str) -> str:
    return f"{api_key[:15]}..."


class UploadThingClient:
    """Orchestrates uploads, presigned URLs and deletions against the UploadThing API"""

    def __init__(self,
                 api_key: str,
                 app_id: str,
                 region: Region = Region.US_WEST_2,
                 transport: Optional[HttpTransport] = None,
                 api_url: str = "https://api.uploadthing.com",
                 ingest_host: str = "ingest.uploadthing.com",
                 public_host: str = "utfs.io",
                 timeout: float = 30.0,
                 presign_expires_in: float = 3600):
        if not api_key:
            raise InvalidAPIKeyError()
        if not app_id:
            raise InvalidInputError("App id must be a non-empty string")

        self.api_key = api_key
        self.app_id = app_id
        self.region = Region(region)
        self.api_url = api_url.rstrip("/")
        self.presign_expires_in = presign_expires_in
        self.transport = transport or RequestsTransport(timeout=timeout)
        self.presigner = Presigner(api_key, app_id, self.region, ingest_host, public_host)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None,
                      transport: Optional[HttpTransport] = None) -> "UploadThingClient":
        settings = settings or get_settings()
        if not settings.API_KEY:
            raise InvalidAPIKeyError("Invalid API key: UPLOADTHING_API_KEY is not set")
        if not settings.APP_ID:
            raise InvalidInputError("UPLOADTHING_APP_ID is not set")
        return cls(
            api_key=settings.API_KEY,
            app_id=settings.APP_ID,
            region=settings.REGION,
            transport=transport,
            api_url=settings.API_URL,
            ingest_host=settings.INGEST_HOST,
            public_host=settings.PUBLIC_HOST,
            timeout=settings.TIMEOUT,
            presign_expires_in=settings.PRESIGN_EXPIRES_IN,
        )

    # Server-side upload

    def upload_files(self,
                     files: Sequence[UploadFile],
                     custom_ids: Optional[Sequence[str]] = None,
                     content_disposition: ContentDisposition = ContentDisposition.INLINE,
                     acl: ACL = ACL.PUBLIC_READ) -> List[UploadedFile]:
        """
        Upload files one at a time through the REST API.

        Each file first requests a presigned storage POST, then sends the
        bytes to it. The first failure stops the batch.
        """
        uploaded = []
        for index, file in enumerate(files):
            uploaded.append(self._upload_file_via_api(
                file, _at(custom_ids, index), content_disposition, acl))
        return uploaded

    def _upload_file_via_api(self,
                             file: UploadFile,
                             custom_id: Optional[str],
                             content_disposition: ContentDisposition,
                             acl: ACL) -> UploadedFile:
        request = UploadFilesRequest(
            files=[FileToUpload(
                name=file.name,
                type=file.mime_type,
                size=file.size,
                custom_id=custom_id,
                data=base64.b64encode(file.data).decode("ascii"),
            )],
            acl=ACL(acl).value,
            content_disposition=ContentDisposition(content_disposition).value,
        )

        logger.info(f"REST API upload: {file.name} (api key {_mask(self.api_key)}, app id {self.app_id})")
        response = self.transport.post_json(
            f"{self.api_url}/v6/uploadFiles",
            request.model_dump(by_alias=True, exclude_none=True),
            headers=self._api_headers(),
        )
        self._raise_for_status(response, "Upload")

        try:
            upload_response = UploadFilesResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise UploadFailedError(f"Invalid API response: {e}", response.status_code, response.text) from e

        if not upload_response.data:
            raise UploadFailedError("No upload data in response", response.status_code, response.text)
        presigned_post = upload_response.data[0]

        logger.info(f"Uploading to storage: {presigned_post.url}")
        self._upload_to_storage(presigned_post, file)
        logger.info(f"Upload complete: {presigned_post.file_url}")

        return UploadedFile(
            key=presigned_post.key,
            name=file.name,
            size=file.size,
            url=presigned_post.file_url,
            custom_id=custom_id,
            type=file.mime_type,
        )

    def _upload_to_storage(self, presigned_post: PresignedPost, file: UploadFile) -> None:
        # Storage requires the form fields before the file part
        fields = sorted(presigned_post.fields.items())
        response = self.transport.post_multipart(
            presigned_post.url,
            fields,
            [("file", (file.name, file.data, file.mime_type))],
        )
        if not response.ok:
            raise UploadFailedError("Storage upload failed", response.status_code, response.text)

    # Client-side upload

    def generate_presigned_urls(self,
                                files: Sequence[UploadFile],
                                custom_ids: Optional[Sequence[str]] = None,
                                content_disposition: ContentDisposition = ContentDisposition.INLINE,
                                acl: ACL = ACL.PUBLIC_READ,
                                expires_in: Optional[float] = None) -> List[PresignedURL]:
        if expires_in is None:
            expires_in = self.presign_expires_in
        return self.presigner.presign_files(files, custom_ids, content_disposition, acl, expires_in)

    def upload_to_presigned_url(self, file: UploadFile, presigned: PresignedURL) -> None:
        """PUT the file as multipart form data to a signed ingest URL"""
        response = self.transport.put_multipart(
            presigned.url,
            [("file", (file.name, file.data, file.mime_type))],
        )
        self._raise_for_status(response, "Upload")
        logger.info(f"Uploaded {file.name} to {presigned.public_url}")

    # Deletion

    def delete_file(self, file_key: str) -> None:
        if not file_key:
            raise InvalidFileKeyError()

        logger.info(f"Deleting file: {file_key} (api key {_mask(self.api_key)})")
        request = DeleteFilesRequest(file_keys=[file_key])
        response = self.transport.post_json(
            f"{self.api_url}/v6/deleteFile",
            request.model_dump(by_alias=True, exclude_none=True),
            headers=self._api_headers(),
        )
        self._raise_for_status(response, "Delete")
        logger.info(f"File deleted: {file_key}")

    def delete_file_by_url(self, url: str) -> None:
        """Delete by public URL, e.g. https://utfs.io/f/<file key>"""
        path = urlparse(url).path
        file_key = unquote(path.rstrip("/").rsplit("/", 1)[-1]) if path else ""
        if not file_key:
            raise InvalidFileKeyError(f"Invalid file key: none found in {url!r}")
        self.delete_file(file_key)

    def _api_headers(self):
        return {
            "Content-Type": "application/json",
            "x-uploadthing-api-key": self.api_key,
            "x-uploadthing-app-id": self.app_id,
        }

    @staticmethod
    def _raise_for_status(response: TransportResponse, action: str) -> None:
        if response.ok:
            return
        message = response.text or "Unknown error"
        logger.error(f"{action} failed ({response.status_code}): {message}")
        if response.status_code in (401, 403):
            raise InvalidAPIKeyError(f"Invalid API key: {action.lower()} rejected ({response.status_code})")
        raise UploadFailedError(f"{action} failed ({response.status_code}): {message}",
                                response.status_code, response.text)
