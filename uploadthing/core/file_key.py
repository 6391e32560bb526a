"""
File key derivation for UploadThing uploads

A file key is the app id encoded into a fixed-length, alphabet-shuffled
base-62 string, followed by the URL-safe base64 of a per-file seed.
The shuffle is deterministic obfuscation, not a secret: anyone holding
the app id can reproduce the prefix.
"""

import base64
import binascii
import uuid
from typing import Tuple

from uploadthing.core.exceptions import InvalidFileKeyError, InvalidInputError

DEFAULT_ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
DEFAULT_MIN_LENGTH = 12

_UINT32_MASK = 0xFFFFFFFF


def djb2(value: str) -> int:
    """
    XOR variant of djb2 over the UTF-8 bytes of value.

    Returns the 32-bit accumulator reinterpreted as a signed integer.
    """
    h = 5381
    for byte in value.encode("utf-8"):
        h = (((h << 5) + h) ^ byte) & _UINT32_MASK
    # Convert to signed 32-bit integer
    if h >= 0x80000000:
        h -= 0x100000000
    return h


def _truncated_mod(a: int, b: int) -> int:
    # Remainder takes the sign of the dividend
    r = abs(a) % b
    return -r if a < 0 else r


def shuffle_alphabet(alphabet: str, seed: str) -> str:
    chars = list(alphabet)
    seed_num = djb2(seed)
    for i in range(len(chars)):
        j = (_truncated_mod(seed_num, i + 1) + i) % len(chars)
        chars[i], chars[j] = chars[j], chars[i]
    return "".join(chars)


def encode_number(value: int, alphabet: str, min_length: int = DEFAULT_MIN_LENGTH) -> str:
    """Base-N encode value most significant digit first, left-padded to min_length"""
    if value < 0:
        raise InvalidInputError(f"Cannot encode negative value {value}")
    base = len(alphabet)
    if base < 2:
        return ""

    if value == 0:
        digits = [alphabet[0]]
    else:
        digits = []
        while value > 0:
            value, index = divmod(value, base)
            digits.append(alphabet[index])
        digits.reverse()

    encoded = "".join(digits)
    if len(encoded) < min_length:
        encoded = alphabet[0] * (min_length - len(encoded)) + encoded
    return encoded


def encode_app_id(app_id: str,
                  alphabet: str = DEFAULT_ALPHABET,
                  min_length: int = DEFAULT_MIN_LENGTH) -> str:
    """
    Encode an app id into its fixed-length file key prefix.

    The signed hash is widened before taking the absolute value, so an app id
    hashing to -2**31 encodes 2**31 rather than wrapping.

    Raises:
        InvalidInputError: app_id is empty or not a string
    """
    if not isinstance(app_id, str) or not app_id:
        raise InvalidInputError("App id must be a non-empty string")

    shuffled = shuffle_alphabet(alphabet, app_id)
    return encode_number(abs(djb2(app_id)), shuffled, min_length)


def encode_file_seed(seed: str) -> str:
    """URL-safe base64 of the seed's UTF-8 bytes, without padding"""
    return base64.urlsafe_b64encode(seed.encode("utf-8")).decode("ascii").rstrip("=")


def decode_file_seed(encoded: str) -> str:
    pad = "=" * (-len(encoded) % 4)
    try:
        return base64.urlsafe_b64decode(encoded + pad).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError, ValueError) as e:
        raise InvalidFileKeyError(f"Invalid file key: undecodable seed ({e})") from e


def generate_file_key(app_id: str,
                      seed: str,
                      alphabet: str = DEFAULT_ALPHABET,
                      min_length: int = DEFAULT_MIN_LENGTH) -> str:
    return encode_app_id(app_id, alphabet, min_length) + encode_file_seed(seed)


def generate_file_seed(file_name: str) -> str:
    """Random per-upload seed: a UUID4 joined to the file name"""
    return f"{uuid.uuid4()}-{file_name}"


def split_file_key(file_key: str, min_length: int = DEFAULT_MIN_LENGTH) -> Tuple[str, str]:
    """Split a file key into (encoded app id, encoded seed)"""
    if not file_key or len(file_key) < min_length:
        raise InvalidFileKeyError(f"Invalid file key: shorter than {min_length} characters")
    return file_key[:min_length], file_key[min_length:]
