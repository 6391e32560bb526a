import logging
import time
from typing import List, Optional, Sequence
from urllib.parse import quote, urlencode

from uploadthing.core.exceptions import InvalidURLError
from uploadthing.core.file_key import generate_file_key, generate_file_seed
from uploadthing.core.signing import sign_url
from uploadthing.models.file import ACL, ContentDisposition, PresignedURL, Region, UploadFile

logger = logging.getLogger(__name__)


class Presigner:
    """Builds signed ingest URLs for client-side uploads"""

    def __init__(self,
                 api_key: str,
                 app_id: str,
                 region: Region = Region.US_WEST_2,
                 ingest_host: str = "ingest.uploadthing.com",
                 public_host: str = "utfs.io"):
        self.api_key = api_key
        self.app_id = app_id
        self.region = Region(region)
        self.ingest_host = ingest_host
        self.public_host = public_host

    def presign(self,
                file_name: str,
                file_size: int,
                file_type: Optional[str] = None,
                custom_id: Optional[str] = None,
                content_disposition: ContentDisposition = ContentDisposition.INLINE,
                acl: ACL = ACL.PUBLIC_READ,
                expires_in: float = 3600,
                file_seed: Optional[str] = None) -> PresignedURL:
        """
        Build a signed ingest URL for one file.

        The query string is encoded once and signed as-is; the signature
        parameter is appended last.

        Args:
            file_name: Original file name
            file_size: Size in bytes
            file_type: MIME type, omitted from the URL when None
            custom_id: Optional caller-defined id
            content_disposition: inline or attachment
            acl: public-read or private
            expires_in: Seconds until the URL expires
            file_seed: Seed for the file key; random when None

        Raises:
            InvalidURLError: the ingest host produces an unusable URL
        """
        seed = file_seed if file_seed is not None else generate_file_seed(file_name)
        file_key = generate_file_key(self.app_id, seed)
        expires_at = int((time.time() + expires_in) * 1000)

        params = [
            ("expires", str(expires_at)),
            ("x-ut-identifier", self.app_id),
            ("x-ut-file-name", file_name),
            ("x-ut-file-size", str(file_size)),
            ("x-ut-content-disposition", ContentDisposition(content_disposition).value),
            ("x-ut-acl", ACL(acl).value),
        ]
        if file_type is not None:
            params.append(("x-ut-file-type", file_type))
        if custom_id is not None:
            params.append(("x-ut-custom-id", custom_id))

        if not self.ingest_host or "/" in self.ingest_host:
            raise InvalidURLError(f"Invalid URL: bad ingest host {self.ingest_host!r}")

        base_url = f"https://{self.region.alias}.{self.ingest_host}/{file_key}"
        url = f"{base_url}?{urlencode(params, quote_via=quote)}"
        signed_url = sign_url(url, self.api_key)

        logger.info(f"Presigned upload for {file_name} as {file_key}")
        return PresignedURL(
            url=signed_url,
            file_key=file_key,
            public_url=f"https://{self.public_host}/f/{file_key}",
            expires_at=expires_at,
        )

    def presign_files(self,
                      files: Sequence[UploadFile],
                      custom_ids: Optional[Sequence[str]] = None,
                      content_disposition: ContentDisposition = ContentDisposition.INLINE,
                      acl: ACL = ACL.PUBLIC_READ,
                      expires_in: float = 3600) -> List[PresignedURL]:
        presigned = []
        for index, file in enumerate(files):
            presigned.append(self.presign(
                file_name=file.name,
                file_size=file.size,
                file_type=file.mime_type,
                custom_id=_at(custom_ids, index),
                content_disposition=content_disposition,
                acl=acl,
                expires_in=expires_in,
            ))
        return presigned


def _at(items: Optional[Sequence[str]], index: int) -> Optional[str]:
    if items is None or index >= len(items):
        return None
    return items[index]
