"""RFC 6238 TOTP (Time-based One-Time Password) generation."""

import logging
from typing import Any, Mapping, NamedTuple, Optional, Tuple

from totp_core.config import Clock, now_ms, resolve_config
from totp_core.encoding import decode_secret, int_to_hex
from totp_core.hotp import COUNTER_MASK, hotp


logger = logging.getLogger(__name__)


class TotpResult(NamedTuple):
    """A generated code and when it stops being current."""

    otp: str
    expires: int
    remaining: int


def time_counter(timestamp_ms: int, period: int) -> int:
    """Number of whole periods elapsed since the epoch."""
    return (timestamp_ms // 1000) // period


def time_step_hex(timestamp_ms: int, period: int) -> str:
    """
    Encode the time counter as 16 hex characters (8 bytes, big-endian).

    Example:
        time_step_hex(1465324707000, 30) == "0000000002e94d7c"
    """
    return int_to_hex(time_counter(timestamp_ms, period) & COUNTER_MASK, 16)


def expiry(timestamp_ms: int, period: int) -> Tuple[int, int]:
    """
    Compute when the current time step ends.

    Args:
        timestamp_ms: Moment the code is generated for, in milliseconds.
        period: Time-step width in seconds.

    Returns:
        (expires, remaining): the epoch millisecond at which the step ends,
        and the whole seconds left until then, rounded up. On an exact step
        boundary a full period remains.
    """
    step = period * 1000
    expires = timestamp_ms + step - (timestamp_ms % step)
    remaining = -(-(expires - timestamp_ms) // 1000)
    return expires, remaining


def generate(
    secret: str,
    options: Optional[Mapping[str, Any]] = None,
    clock: Clock = now_ms,
) -> TotpResult:
    """
    Generate a TOTP code using RFC 6238.

    Args:
        secret: The shared secret, Base32 text by default.
        options: Optional overrides for digits, algorithm, encoding, period
            and timestamp (milliseconds since the epoch).
        clock: Callable returning the current time in milliseconds, used
            when no timestamp is given.

    Returns:
        TotpResult with the code, its expiry timestamp and remaining seconds.

    Raises:
        InvalidSecretCharacter: If a Base32 secret has an invalid character.
        cryptography.exceptions.UnsupportedAlgorithm: If the algorithm is
            not a supported hash.
    """
    config = resolve_config(options, clock)

    key = decode_secret(secret, config.encoding)
    counter = time_counter(config.timestamp, config.period)
    logger.debug("TOTP time step %s", time_step_hex(config.timestamp, config.period))

    otp = hotp(key, counter, config.digits, config.algorithm)
    expires, remaining = expiry(config.timestamp, config.period)

    return TotpResult(otp=otp, expires=expires, remaining=remaining)
