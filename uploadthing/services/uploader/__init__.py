"""
Uploader Service Package

Talks to the UploadThing API on top of the pure helpers in uploadthing.core.

Key Components:
- HttpTransport: Abstract base class for HTTP transports
- RequestsTransport: requests implementation
- Presigner: Signed ingest URL builder for client-side uploads
- UploadThingClient: Main orchestration service
"""

from .interfaces import HttpTransport, TransportResponse
from .requests_transport import RequestsTransport
from .presigner import Presigner
from .upload_service import UploadThingClient

__all__ = [
    # Interfaces
    'HttpTransport',
    'TransportResponse',

    # Implementations
    'RequestsTransport',
    'Presigner',

    # Services
    'UploadThingClient',
]
