from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Union

_MIME_TYPES = {
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "gif": "image/gif",
    "svg": "image/svg+xml",
    "webp": "image/webp",
    "pdf": "application/pdf",
    "mp4": "video/mp4",
    "mp3": "audio/mp3",
    "wav": "audio/wav",
    "json": "application/json",
    "txt": "text/plain",
}
DEFAULT_MIME_TYPE = "application/octet-stream"


class Region(str, Enum):
    US_WEST_2 = "us-west-2"
    EU_WEST_1 = "eu-west-1"
    AP_SOUTHEAST_1 = "ap-southeast-1"

    @property
    def alias(self) -> str:
        """Ingest host alias; every region currently routes through fra1"""
        return "fra1"


class ContentDisposition(str, Enum):
    INLINE = "inline"
    ATTACHMENT = "attachment"


class ACL(str, Enum):
    PUBLIC_READ = "public-read"
    PRIVATE = "private"


def guess_mime_type(file_name: str) -> str:
    """Map a file extension to its MIME type, case-insensitively"""
    ext = Path(file_name).suffix.lstrip(".").lower()
    return _MIME_TYPES.get(ext, DEFAULT_MIME_TYPE)


@dataclass
class UploadFile:
    """A file held in memory, ready for upload"""
    name: str
    data: bytes
    mime_type: Optional[str] = None

    def __post_init__(self):
        if self.mime_type is None:
            self.mime_type = guess_mime_type(self.name)

    @property
    def size(self) -> int:
        return len(self.data)

    @classmethod
    def from_path(cls, path: Union[str, Path], mime_type: Optional[str] = None) -> "UploadFile":
        path = Path(path)
        return cls(name=path.name, data=path.read_bytes(), mime_type=mime_type)


@dataclass(frozen=True)
class PresignedURL:
    """Signed ingest URL for a client-side upload"""
    url: str
    file_key: str
    public_url: str
    expires_at: int = field(default=0)  # epoch milliseconds
