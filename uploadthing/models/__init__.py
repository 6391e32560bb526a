from .file import (
    ACL,
    ContentDisposition,
    DEFAULT_MIME_TYPE,
    PresignedURL,
    Region,
    UploadFile,
    guess_mime_type,
)
from .api import (
    DeleteFilesRequest,
    FileToUpload,
    PresignedPost,
    UploadedFile,
    UploadFilesRequest,
    UploadFilesResponse,
)

__all__ = [
    'ACL',
    'ContentDisposition',
    'DEFAULT_MIME_TYPE',
    'PresignedURL',
    'Region',
    'UploadFile',
    'guess_mime_type',
    'DeleteFilesRequest',
    'FileToUpload',
    'PresignedPost',
    'UploadedFile',
    'UploadFilesRequest',
    'UploadFilesResponse',
]
