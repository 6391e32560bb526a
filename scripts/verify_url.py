#!/usr/bin/env python3
"""
Check the hmac-sha256 signature on an UploadThing ingest URL.

Usage:
    python scripts/verify_url.py "https://fra1.ingest.uploadthing.com/...&signature=hmac-sha256=..."
"""

import argparse
import sys

from uploadthing.config import get_settings
from uploadthing.core.signing import verify_url


def main():
    parser = argparse.ArgumentParser(description="Verify a signed UploadThing ingest URL")
    parser.add_argument("url", help="Signed URL, quoted")
    parser.add_argument("--api-key", help="API key (default: UPLOADTHING_API_KEY)")
    args = parser.parse_args()

    api_key = args.api_key or get_settings().API_KEY
    if not api_key:
        print("❌ No API key: pass --api-key or set UPLOADTHING_API_KEY")
        return 2

    if verify_url(args.url, api_key):
        print("✅ Signature valid")
        return 0
    print("❌ Signature invalid")
    return 1


if __name__ == "__main__":
    sys.exit(main())
