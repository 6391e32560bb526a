"""
Pytest configuration for UploadThing client tests
"""

import pytest

from uploadthing.models import UploadFile
from uploadthing.services.uploader import RequestsTransport, UploadThingClient

TEST_API_KEY = "sk_live_test_api_key_0123456789"
TEST_APP_ID = "test-app-id"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep real UPLOADTHING_* variables out of the tests"""
    for name in ("API_KEY", "APP_ID", "REGION", "API_URL", "INGEST_HOST",
                 "PUBLIC_HOST", "TIMEOUT", "PRESIGN_EXPIRES_IN"):
        monkeypatch.delenv(f"UPLOADTHING_{name}", raising=False)


@pytest.fixture
def text_file():
    return UploadFile(name="hello.txt", data=b"Hello, World!")


@pytest.fixture
def client():
    return UploadThingClient(
        api_key=TEST_API_KEY,
        app_id=TEST_APP_ID,
        transport=RequestsTransport(timeout=5),
    )
