"""
Pure key-derivation and request-signing helpers
"""

from .exceptions import (
    ErrorKind,
    UploadThingError,
    InvalidInputError,
    SigningError,
    InvalidURLError,
    InvalidFileKeyError,
    InvalidAPIKeyError,
    UploadFailedError,
)
from .file_key import (
    DEFAULT_ALPHABET,
    DEFAULT_MIN_LENGTH,
    encode_app_id,
    encode_file_seed,
    decode_file_seed,
    generate_file_key,
    generate_file_seed,
    split_file_key,
)
from .signing import SIGNATURE_SCHEME, sign, verify, sign_url, verify_url

__all__ = [
    # Errors
    'ErrorKind',
    'UploadThingError',
    'InvalidInputError',
    'SigningError',
    'InvalidURLError',
    'InvalidFileKeyError',
    'InvalidAPIKeyError',
    'UploadFailedError',

    # File keys
    'DEFAULT_ALPHABET',
    'DEFAULT_MIN_LENGTH',
    'encode_app_id',
    'encode_file_seed',
    'decode_file_seed',
    'generate_file_key',
    'generate_file_seed',
    'split_file_key',

    # Signing
    'SIGNATURE_SCHEME',
    'sign',
    'verify',
    'sign_url',
    'verify_url',
]
