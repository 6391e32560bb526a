"""
Tests for upload models and MIME type mapping
"""

import pytest

from uploadthing.models import (
    ACL,
    ContentDisposition,
    PresignedPost,
    Region,
    UploadedFile,
    UploadFile,
    UploadFilesRequest,
    FileToUpload,
    guess_mime_type,
)


class TestUploadFile:
    """Test in-memory upload files"""

    def test_creation(self, text_file):
        assert text_file.name == "hello.txt"
        assert text_file.data == b"Hello, World!"
        assert text_file.mime_type == "text/plain"
        assert text_file.size == 13

    def test_explicit_mime_type_kept(self):
        file = UploadFile(name="data.bin", data=b"", mime_type="application/x-custom")
        assert file.mime_type == "application/x-custom"

    def test_from_path(self, tmp_path):
        path = tmp_path / "report.PDF"
        path.write_bytes(b"%PDF-1.4")
        file = UploadFile.from_path(path)
        assert file.name == "report.PDF"
        assert file.data == b"%PDF-1.4"
        assert file.mime_type == "application/pdf"


class TestGuessMimeType:
    """Test extension to MIME type mapping"""

    @pytest.mark.parametrize("file_name,expected", [
        ("image.jpg", "image/jpeg"),
        ("image.JPEG", "image/jpeg"),
        ("photo.png", "image/png"),
        ("anim.gif", "image/gif"),
        ("logo.svg", "image/svg+xml"),
        ("pic.webp", "image/webp"),
        ("doc.pdf", "application/pdf"),
        ("video.mp4", "video/mp4"),
        ("audio.mp3", "audio/mp3"),
        ("sound.wav", "audio/wav"),
        ("data.json", "application/json"),
        ("notes.txt", "text/plain"),
        ("unknown.xyz", "application/octet-stream"),
        ("no_extension", "application/octet-stream"),
    ])
    def test_mapping(self, file_name, expected):
        assert guess_mime_type(file_name) == expected


class TestEnums:
    """Test region, disposition and ACL values"""

    def test_region_alias(self):
        assert Region.US_WEST_2.alias == "fra1"
        assert Region.EU_WEST_1.alias == "fra1"
        assert Region.AP_SOUTHEAST_1.alias == "fra1"

    def test_region_from_value(self):
        assert Region("eu-west-1") is Region.EU_WEST_1

    def test_wire_values(self):
        assert ContentDisposition.ATTACHMENT.value == "attachment"
        assert ACL.PUBLIC_READ.value == "public-read"
        assert ACL.PRIVATE.value == "private"


class TestApiModels:
    """Test camelCase wire serialization"""

    def test_upload_request_aliases(self):
        request = UploadFilesRequest(
            files=[FileToUpload(name="a.txt", type="text/plain", size=1, custom_id="c1", data="YQ==")],
            acl="private",
            content_disposition="inline",
        )
        body = request.model_dump(by_alias=True, exclude_none=True)
        assert body["contentDisposition"] == "inline"
        assert body["files"][0]["customId"] == "c1"

    def test_presigned_post_parsing(self):
        post = PresignedPost.model_validate({
            "url": "https://bucket.s3.amazonaws.com",
            "fields": {"key": "abc"},
            "key": "abc",
            "fileUrl": "https://utfs.io/f/abc",
            "fileName": "a.txt",
        })
        assert post.file_url == "https://utfs.io/f/abc"
        assert post.fields == {"key": "abc"}

    def test_uploaded_file_optional_custom_id(self):
        uploaded = UploadedFile(key="k", name="n", size=1, url="u", type="text/plain")
        assert uploaded.custom_id is None
