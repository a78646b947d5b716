"""Tests for secret decoding and hex helpers."""

import pytest

from totp_core.config import Encoding
from totp_core.encoding import (
    InvalidSecretCharacter,
    ascii_to_bytes,
    base32_to_bytes,
    decode_secret,
    hex_to_bytes,
    hex_to_int,
    int_to_hex,
)


def test_base32_decoding():
    """Test decoding a full-length Base32 secret."""
    assert base32_to_bytes("JBSWY3DPEHPK3PXP") == b"Hello!\xde\xad\xbe\xef"
    assert base32_to_bytes("GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ") == b"12345678901234567890"


def test_base32_drops_trailing_bits():
    """Test that bits short of a whole byte are discarded."""
    assert base32_to_bytes("MZXW6") == b"foo"
    assert base32_to_bytes("MY") == b"f"
    assert base32_to_bytes("MZ") == b"f"
    assert base32_to_bytes("A") == b""
    assert base32_to_bytes("") == b""


def test_base32_rejects_lowercase():
    """Test that the alphabet is upper-case only."""
    with pytest.raises(InvalidSecretCharacter, match="cannot decode secret"):
        base32_to_bytes("jbswy3dp")


@pytest.mark.parametrize("char", ["0", "1", "8", "9", "=", " ", "a", "-"])
def test_base32_rejects_invalid_characters(char):
    """Test that characters outside A-Z and 2-7 are rejected."""
    with pytest.raises(InvalidSecretCharacter) as excinfo:
        base32_to_bytes("JBSW" + char + "Y3DP")
    assert excinfo.value.char == char
    assert excinfo.value.position == 4


def test_invalid_secret_character_is_value_error():
    """Test that callers can catch decoding failures as ValueError."""
    with pytest.raises(ValueError):
        decode_secret("JBSWY3DP=", "base32")


def test_ascii_decoding():
    """Test that ASCII text maps byte for byte."""
    assert ascii_to_bytes("12345678901234567890") == b"12345678901234567890"
    assert ascii_to_bytes("é") == b"\xe9"
    assert ascii_to_bytes("€") == b"?"


def test_decode_secret_dispatch():
    """Test that decode_secret follows the encoding name."""
    assert decode_secret("MZXW6", "base32") == b"foo"
    assert decode_secret("MZXW6", Encoding.BASE32) == b"foo"
    assert decode_secret("MZXW6", "hex") == b"foo"
    assert decode_secret("MZXW6", "ascii") == b"MZXW6"
    assert decode_secret("MZXW6") == b"foo"


def test_decode_secret_other_encodings_use_ascii():
    """Test that encoding names other than base32 decode byte for byte."""
    assert decode_secret("MZXW6", "utf8") == b"MZXW6"
    assert decode_secret("jbswy3dp", "base64") == b"jbswy3dp"


def test_hex_helpers():
    """Test hex/byte conversions."""
    assert hex_to_bytes("0000000002e94d7c") == b"\x00\x00\x00\x00\x02\xe9\x4d\x7c"
    assert hex_to_int("0c") == 12
    assert int_to_hex(12) == "0c"
    assert int_to_hex(48844156, 16) == "0000000002e94d7c"
