#!/usr/bin/env python3
"""
Example usage of the UploadThing client

Requires UPLOADTHING_API_KEY and UPLOADTHING_APP_ID in the environment or .env.
"""

import logging
import sys
from pathlib import Path

from uploadthing import UploadFile, UploadThingClient, UploadThingError


def upload_and_clean_up(file_path: str):
    """
    Upload a file server-side, print its public URL, then delete it

    Args:
        file_path: Path to the file to upload
    """
    client = UploadThingClient.from_settings()

    print(f"📤 Uploading: {file_path}")
    file = UploadFile.from_path(file_path)
    uploaded = client.upload_files([file], custom_ids=[f"example-{Path(file_path).stem}"])[0]

    print(f"✅ Upload successful!")
    print(f"   Key: {uploaded.key}")
    print(f"   URL: {uploaded.url}")
    print(f"   Type: {uploaded.type} ({uploaded.size} bytes)")

    print(f"\n🗑️  Deleting {uploaded.key}...")
    client.delete_file_by_url(uploaded.url)
    print("✅ Deleted")


def presign_for_browser(file_path: str):
    """Create a signed ingest URL a browser or mobile client can PUT to"""
    client = UploadThingClient.from_settings()
    file = UploadFile.from_path(file_path)

    presigned = client.generate_presigned_urls([file], expires_in=600)[0]
    print(f"\n🔑 Presigned URL (10 minutes):")
    print(f"   {presigned.url}")
    print(f"   Public URL once uploaded: {presigned.public_url}")
    return presigned


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

    if len(sys.argv) != 2:
        print("Usage: python upload_example.py <file>")
        sys.exit(1)

    try:
        upload_and_clean_up(sys.argv[1])
        presign_for_browser(sys.argv[1])
    except UploadThingError as e:
        print(f"❌ {e.kind.value}: {e}")
        sys.exit(1)
