import logging
from typing import Any, Dict, List, Optional, Tuple

import requests

from uploadthing.core.exceptions import UploadFailedError
from uploadthing.services.uploader.interfaces import HttpTransport, MultipartFile, TransportResponse

logger = logging.getLogger(__name__)


class RequestsTransport(HttpTransport):
    """requests-based transport; network errors surface as UploadFailedError"""
    def __init__(self, timeout: float = 30.0, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self.session = session or requests.Session()

    def post_json(self, url: str, payload: Dict[str, Any], headers: Optional[Dict[str, str]] = None) -> TransportResponse:
        return self._send("POST", url, json=payload, headers=headers)

    def post_multipart(self, url: str, fields: List[Tuple[str, str]], files: List[MultipartFile]) -> TransportResponse:
        return self._send("POST", url, data=fields, files=files)

    def put_multipart(self, url: str, files: List[MultipartFile]) -> TransportResponse:
        return self._send("PUT", url, files=files)

    def close(self) -> None:
        self.session.close()

    def _send(self, method: str, url: str, **kwargs) -> TransportResponse:
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error(f"{method} {url} failed: {e}")
            raise UploadFailedError(f"Network error: {e}") from e

        return TransportResponse(
            status_code=response.status_code,
            text=response.text,
            headers=dict(response.headers),
        )
