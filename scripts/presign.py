#!/usr/bin/env python3
"""
UploadThing presigned URL CLI

Print a signed ingest URL for a local file, or just its file key.
Credentials come from UPLOADTHING_API_KEY / UPLOADTHING_APP_ID (or .env)
unless passed explicitly.

Usage:
    python scripts/presign.py photo.png
    python scripts/presign.py photo.png --custom-id avatar-42 --acl private
    python scripts/presign.py --key-only --app-id my-app --seed "fixed-seed"
"""

import argparse
import json
import os
import sys

from uploadthing.config import get_settings
from uploadthing.core.exceptions import UploadThingError
from uploadthing.core.file_key import generate_file_key
from uploadthing.models import ACL, ContentDisposition, Region, UploadFile
from uploadthing.services.uploader import Presigner


def main():
    parser = argparse.ArgumentParser(
        description="Generate signed UploadThing ingest URLs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Signed URL for a file, settings from the environment
  python scripts/presign.py report.pdf

  # Deterministic file key only
  python scripts/presign.py --key-only --app-id my-app --seed "abc-report.pdf"
        """
    )

    parser.add_argument("file", nargs='?', help="Local file to presign")
    parser.add_argument("--api-key", help="API key (default: UPLOADTHING_API_KEY)")
    parser.add_argument("--app-id", help="App id (default: UPLOADTHING_APP_ID)")
    parser.add_argument("--region", choices=[r.value for r in Region], help="App region")
    parser.add_argument("--custom-id", help="Custom id attached to the upload")
    parser.add_argument("--acl", choices=[a.value for a in ACL], default=ACL.PUBLIC_READ.value)
    parser.add_argument("--disposition", choices=[d.value for d in ContentDisposition],
                        default=ContentDisposition.INLINE.value)
    parser.add_argument("--expires-in", type=int, help="Seconds until the URL expires")
    parser.add_argument("--seed", help="Fixed file seed (default: random)")
    parser.add_argument("--key-only", action="store_true",
                        help="Print only the derived file key")

    args = parser.parse_args()
    settings = get_settings()
    app_id = args.app_id or settings.APP_ID

    try:
        if args.key_only:
            if not args.seed:
                print("❌ --key-only needs --seed")
                return 1
            print(generate_file_key(app_id or "", args.seed))
            return 0

        if not args.file:
            parser.print_help()
            return 1
        if not os.path.exists(args.file):
            print(f"❌ File not found: {args.file}")
            return 1

        api_key = args.api_key or settings.API_KEY
        if not api_key:
            print("❌ No API key: pass --api-key or set UPLOADTHING_API_KEY")
            return 1

        presigner = Presigner(
            api_key=api_key,
            app_id=app_id or "",
            region=args.region or settings.REGION,
            ingest_host=settings.INGEST_HOST,
            public_host=settings.PUBLIC_HOST,
        )
        file = UploadFile.from_path(args.file)
        presigned = presigner.presign(
            file_name=file.name,
            file_size=file.size,
            file_type=file.mime_type,
            custom_id=args.custom_id,
            content_disposition=ContentDisposition(args.disposition),
            acl=ACL(args.acl),
            expires_in=args.expires_in or settings.PRESIGN_EXPIRES_IN,
            file_seed=args.seed,
        )
        print(json.dumps({
            "url": presigned.url,
            "file_key": presigned.file_key,
            "public_url": presigned.public_url,
            "expires_at": presigned.expires_at,
        }, indent=2))
        return 0

    except UploadThingError as e:
        print(f"❌ {e.kind.value}: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
