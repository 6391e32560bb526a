"""
Error types raised by the UploadThing client
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    INVALID_INPUT = "invalid_input"
    SIGNING = "signing"
    INVALID_URL = "invalid_url"
    INVALID_FILE_KEY = "invalid_file_key"
    INVALID_API_KEY = "invalid_api_key"
    UPLOAD_FAILED = "upload_failed"


class UploadThingError(Exception):
    """Base error; every subclass carries its ErrorKind"""
    kind: ErrorKind = ErrorKind.UPLOAD_FAILED

    def __init__(self, message: str, kind: Optional[ErrorKind] = None):
        super().__init__(message)
        self.message = message
        if kind is not None:
            self.kind = kind

    def __str__(self) -> str:
        return self.message


class InvalidInputError(UploadThingError, ValueError):
    kind = ErrorKind.INVALID_INPUT


class SigningError(UploadThingError):
    kind = ErrorKind.SIGNING

    def __init__(self, message: str = "Failed to generate signature"):
        super().__init__(message)


class InvalidURLError(UploadThingError):
    kind = ErrorKind.INVALID_URL

    def __init__(self, message: str = "Invalid URL"):
        super().__init__(message)


class InvalidFileKeyError(UploadThingError):
    kind = ErrorKind.INVALID_FILE_KEY

    def __init__(self, message: str = "Invalid file key"):
        super().__init__(message)


class InvalidAPIKeyError(UploadThingError):
    kind = ErrorKind.INVALID_API_KEY

    def __init__(self, message: str = "Invalid API key"):
        super().__init__(message)


class UploadFailedError(UploadThingError):
    kind = ErrorKind.UPLOAD_FAILED

    def __init__(self, message: str, status_code: Optional[int] = None, response_text: Optional[str] = None):
        super().__init__(f"Upload failed: {message}")
        self.status_code = status_code
        self.response_text = response_text
