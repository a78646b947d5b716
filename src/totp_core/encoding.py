"""Secret decoding and hex/byte helpers."""

from typing import Dict

from totp_core.config import Encoding


BASE32_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
BASE32_VALUES: Dict[str, int] = {char: i for i, char in enumerate(BASE32_ALPHABET)}

# Name the original implementation used for Base32 secrets
LEGACY_BASE32_NAME = "hex"


class InvalidSecretCharacter(ValueError):
    """Raised when a Base32 secret contains a character outside A-Z and 2-7."""

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(
            f"Invalid base32 character {char!r} at position {position}; "
            "cannot decode secret"
        )


def base32_to_bytes(secret: str) -> bytes:
    """
    Decode an unpadded, upper-case Base32 string.

    Bits left over after the last whole byte are dropped, so the result is
    always floor(len(secret) * 5 / 8) bytes long.

    Args:
        secret: Base32 text using the RFC 4648 alphabet.

    Returns:
        Decoded bytes.

    Raises:
        InvalidSecretCharacter: If a character is not in the alphabet.
    """
    out = bytearray()
    buffer = 0
    bits = 0
    for position, char in enumerate(secret):
        value = BASE32_VALUES.get(char)
        if value is None:
            raise InvalidSecretCharacter(char, position)
        buffer = (buffer << 5) | value
        bits += 5
        if bits >= 8:
            bits -= 8
            out.append((buffer >> bits) & 0xFF)
            buffer &= (1 << bits) - 1
    return bytes(out)


def ascii_to_bytes(secret: str) -> bytes:
    """Convert text to bytes one character per byte."""
    return secret.encode("latin-1", errors="replace")


def decode_secret(secret: str, encoding: str = Encoding.BASE32.value) -> bytes:
    """
    Turn the textual secret into HMAC key bytes.

    Args:
        secret: The shared secret as text.
        encoding: "base32" (or its legacy name "hex"). Any other name,
            "ascii" included, maps characters to bytes one to one.

    Returns:
        Raw key bytes.

    Raises:
        InvalidSecretCharacter: If a Base32 secret has an invalid character.
    """
    if encoding in (Encoding.BASE32.value, LEGACY_BASE32_NAME):
        return base32_to_bytes(secret)
    return ascii_to_bytes(secret)


def hex_to_bytes(hex_str: str) -> bytes:
    """Convert a hex string such as '0000000002e94d7c' to bytes."""
    return bytes.fromhex(hex_str)


def hex_to_int(hex_str: str) -> int:
    return int(hex_str, 16)


def int_to_hex(value: int, width: int = 2) -> str:
    """Render a non-negative integer as lower-case hex, zero-padded to width."""
    return format(value, "x").zfill(width)
