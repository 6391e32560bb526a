"""
Tests for HMAC-SHA256 URL signing
"""

import pytest

from uploadthing.core.exceptions import ErrorKind, SigningError
from uploadthing.core.signing import sign, sign_url, verify, verify_url

URL = "https://example.com/upload?file=test.txt"
API_KEY = "test-api-key"
EXPECTED_SIGNATURE = "63ed12014185fdd8e9001860eacb2cfab3857d96db2a06eae98b0ff2448c829e"


class TestSign:
    """Test signature generation"""

    def test_known_vector(self):
        assert sign(URL, API_KEY) == EXPECTED_SIGNATURE

    def test_lowercase_hex(self):
        signature = sign(URL, API_KEY)
        assert len(signature) == 64
        assert signature == signature.lower()
        int(signature, 16)

    def test_payload_change_changes_signature(self):
        assert sign("https://example.com/upload?file=test.txT", API_KEY) == \
            "d7893b06a03a4ae069a5b6b2d8e1c48d113a389da7af47a71c7bf779295c854c"

    def test_secret_change_changes_signature(self):
        assert sign(URL, "test-api-kez") == \
            "429a57ab2e0deaa03beb4dc5e724b3760ec7a003f3a02e8f65dd0bd5ed38050f"

    def test_unencodable_payload(self):
        with pytest.raises(SigningError) as exc_info:
            sign("\ud800", API_KEY)
        assert exc_info.value.kind == ErrorKind.SIGNING

    def test_non_string_secret(self):
        with pytest.raises(SigningError):
            sign(URL, None)


class TestVerify:
    """Test signature verification"""

    def test_valid_signature(self):
        assert verify(sign(URL, API_KEY), URL, API_KEY) is True

    def test_all_zero_signature(self):
        assert verify("0" * 64, URL, API_KEY) is False

    def test_malformed_signature(self):
        assert verify("invalid-signature", URL, API_KEY) is False

    def test_uppercase_accepted(self):
        assert verify(EXPECTED_SIGNATURE.upper(), URL, API_KEY) is True

    def test_modified_payload_rejected(self):
        assert verify(EXPECTED_SIGNATURE, URL + " ", API_KEY) is False

    def test_modified_secret_rejected(self):
        assert verify(EXPECTED_SIGNATURE, URL, "test-api-kez") is False

    @pytest.mark.parametrize("signature,payload,secret", [
        (None, URL, API_KEY),
        (EXPECTED_SIGNATURE, "\ud800", API_KEY),
        (EXPECTED_SIGNATURE, URL, None),
        ("ünïcode", URL, API_KEY),
    ])
    def test_never_raises(self, signature, payload, secret):
        assert verify(signature, payload, secret) is False


class TestSignUrl:
    """Test signed URL helpers"""

    def test_appends_scheme_and_signature(self):
        signed = sign_url(URL, API_KEY)
        assert signed == f"{URL}&signature=hmac-sha256={EXPECTED_SIGNATURE}"

    def test_url_without_query(self):
        signed = sign_url("https://example.com/upload", API_KEY)
        assert signed.startswith("https://example.com/upload?signature=hmac-sha256=")
        assert verify_url(signed, API_KEY)

    def test_round_trip(self):
        assert verify_url(sign_url(URL, API_KEY), API_KEY)

    def test_reordered_query_rejected(self):
        signed = sign_url("https://example.com/upload?a=1&b=2", API_KEY)
        tampered = signed.replace("a=1&b=2", "b=2&a=1")
        assert verify_url(tampered, API_KEY) is False

    def test_wrong_scheme_rejected(self):
        assert verify_url(f"{URL}&signature=hmac-md5={EXPECTED_SIGNATURE}", API_KEY) is False

    def test_missing_signature_rejected(self):
        assert verify_url(URL, API_KEY) is False
