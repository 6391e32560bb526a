from abc import ABC, abstractmethod
from dataclasses import dataclass, field
import json
from typing import Any, Dict, List, Optional, Tuple

# (field name, (file name, content, content type))
MultipartFile = Tuple[str, Tuple[str, bytes, str]]


@dataclass
class TransportResponse:
    """Transport-neutral HTTP response"""
    status_code: int
    text: str = ""
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        return json.loads(self.text)


class HttpTransport(ABC):
    """Abstract HTTP transport used by the upload client"""
    @abstractmethod
    def post_json(self, url: str, payload: Dict[str, Any], headers: Optional[Dict[str, str]] = None) -> TransportResponse:
        pass

    @abstractmethod
    def post_multipart(self, url: str, fields: List[Tuple[str, str]], files: List[MultipartFile]) -> TransportResponse:
        pass

    @abstractmethod
    def put_multipart(self, url: str, files: List[MultipartFile]) -> TransportResponse:
        pass
