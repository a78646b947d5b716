"""RFC 4226 HOTP signature and dynamic truncation."""

import logging
from typing import Dict, Type

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, hmac

from totp_core.config import DEFAULT_ALGORITHM, DEFAULT_DIGITS, Algorithm
from totp_core.encoding import hex_to_int


logger = logging.getLogger(__name__)

# Counters occupy an 8-byte field
COUNTER_MASK = 0xFFFFFFFFFFFFFFFF


HASHES: Dict[str, Type[hashes.HashAlgorithm]] = {
    Algorithm.SHA1.value: hashes.SHA1,
    Algorithm.SHA256.value: hashes.SHA256,
    Algorithm.SHA384.value: hashes.SHA384,
    Algorithm.SHA512.value: hashes.SHA512,
}


def _hash_for(algorithm: str) -> hashes.HashAlgorithm:
    """Map 'SHA1', 'SHA-1', 'sha1' and friends to a hash instance."""
    name = str(getattr(algorithm, "value", algorithm)).replace("-", "").upper()
    try:
        return HASHES[name]()
    except KeyError:
        raise UnsupportedAlgorithm(
            f"{algorithm!r} is not a supported hash algorithm"
        ) from None


def sign(algorithm: str, key: bytes, message: bytes) -> str:
    """
    Compute HMAC(key, message) and return it as lower-case hex.

    Raises:
        cryptography.exceptions.UnsupportedAlgorithm: If the algorithm name
            does not name a supported hash.
    """
    h = hmac.HMAC(key, _hash_for(algorithm))
    h.update(message)
    return h.finalize().hex()


def truncate(signature_hex: str, digits: int = DEFAULT_DIGITS) -> str:
    """
    Dynamic truncation (RFC 4226, Section 5.3) over a hex signature.

    The last hex character selects a byte offset; the four bytes found there,
    with the top bit cleared, give a 31-bit number whose last ``digits``
    decimal characters are the code.

    Args:
        signature_hex: HMAC digest as hex.
        digits: Length of the returned code.

    Returns:
        A zero-padded code of exactly ``digits`` characters (empty when
        ``digits`` is not positive).
    """
    if digits <= 0:
        return ""

    offset = hex_to_int(signature_hex[-1]) * 2
    masked = hex_to_int(signature_hex[offset : offset + 8]) & 0x7FFFFFFF
    logger.debug("Truncation offset=%d", offset // 2)

    return str(masked)[-digits:].zfill(digits)


def hotp(
    key: bytes,
    counter: int,
    digits: int = DEFAULT_DIGITS,
    algorithm: str = DEFAULT_ALGORITHM,
) -> str:
    """
    Generate an HOTP code for a moving counter.

    Args:
        key: Raw secret bytes.
        counter: Counter value, encoded as an 8-byte big-endian integer.
            Bits above the 64th are discarded.
        digits: Number of digits in the output code (default: 6).
        algorithm: HMAC hash name (default: SHA1).

    Returns:
        A zero-padded HOTP code string.
    """
    counter_bytes = (counter & COUNTER_MASK).to_bytes(8, byteorder="big")
    return truncate(sign(algorithm, key, counter_bytes), digits)
