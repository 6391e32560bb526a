"""
Request and response bodies for the UploadThing REST API (v6)
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _ApiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class FileToUpload(_ApiModel):
    name: str
    type: str
    size: int
    custom_id: Optional[str] = Field(default=None, alias="customId")
    data: str  # base64 encoded file content


class UploadFilesRequest(_ApiModel):
    files: List[FileToUpload]
    acl: Optional[str] = None
    content_disposition: Optional[str] = Field(default=None, alias="contentDisposition")


class PresignedPost(_ApiModel):
    url: str  # storage upload URL
    fields: Dict[str, str] = Field(default_factory=dict)
    key: str
    file_url: str = Field(alias="fileUrl")
    file_name: str = Field(alias="fileName")


class UploadFilesResponse(_ApiModel):
    data: List[PresignedPost]


class DeleteFilesRequest(_ApiModel):
    file_keys: List[str] = Field(alias="fileKeys")


class UploadedFile(_ApiModel):
    """Information about a completed upload"""
    key: str
    name: str
    size: int
    url: str
    custom_id: Optional[str] = Field(default=None, alias="customId")
    type: str
