"""
UploadThing client

File key derivation, URL signing and upload orchestration for the
UploadThing file-upload service.
"""

from uploadthing.core import (
    ErrorKind,
    UploadThingError,
    InvalidInputError,
    SigningError,
    InvalidURLError,
    InvalidFileKeyError,
    InvalidAPIKeyError,
    UploadFailedError,
    encode_app_id,
    generate_file_key,
    sign,
    verify,
    sign_url,
    verify_url,
)
from uploadthing.models import (
    ACL,
    ContentDisposition,
    PresignedURL,
    Region,
    UploadFile,
    UploadedFile,
)
from uploadthing.services.uploader import UploadThingClient

__version__ = "0.1.0"

__all__ = [
    'UploadThingClient',
    'encode_app_id',
    'generate_file_key',
    'sign',
    'verify',
    'sign_url',
    'verify_url',
    'ACL',
    'ContentDisposition',
    'PresignedURL',
    'Region',
    'UploadFile',
    'UploadedFile',
    'ErrorKind',
    'UploadThingError',
    'InvalidInputError',
    'SigningError',
    'InvalidURLError',
    'InvalidFileKeyError',
    'InvalidAPIKeyError',
    'UploadFailedError',
]
