"""Per-call TOTP configuration and its defaults."""

import logging
import time
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Callable, Mapping, Optional


logger = logging.getLogger(__name__)


class Algorithm(str, Enum):
    """Hash functions accepted for the HMAC."""

    SHA1 = "SHA1"
    SHA256 = "SHA256"
    SHA384 = "SHA384"
    SHA512 = "SHA512"


class Encoding(str, Enum):
    """How the textual secret is turned into key bytes."""

    BASE32 = "base32"
    ASCII = "ascii"


DEFAULT_DIGITS = 6
DEFAULT_PERIOD = 30
DEFAULT_ALGORITHM = Algorithm.SHA1.value
DEFAULT_ENCODING = Encoding.BASE32.value

Clock = Callable[[], int]


def now_ms() -> int:
    """Return the current wall-clock time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


@dataclass(frozen=True)
class Configuration:
    """Fully resolved options for a single code generation."""

    timestamp: int
    digits: int = DEFAULT_DIGITS
    algorithm: str = DEFAULT_ALGORITHM
    encoding: str = DEFAULT_ENCODING
    period: int = DEFAULT_PERIOD


OPTION_KEYS = frozenset(f.name for f in fields(Configuration))


def resolve_config(
    options: Optional[Mapping[str, Any]] = None, clock: Clock = now_ms
) -> Configuration:
    """
    Merge caller options over the defaults.

    Args:
        options: Mapping of option name to value. Missing keys, and keys
            mapped to None, keep their default.
        clock: Callable returning the current time in milliseconds. Only
            called when no timestamp is supplied.

    Returns:
        A populated Configuration. Values are not validated.
    """
    supplied = {}
    for key, value in (options or {}).items():
        if key not in OPTION_KEYS:
            logger.warning("Ignoring unknown TOTP option %r", key)
            continue
        if value is not None:
            supplied[key] = value

    if "timestamp" not in supplied:
        supplied["timestamp"] = clock()

    config = Configuration(**supplied)
    logger.debug(
        "Resolved TOTP config: digits=%s algorithm=%s encoding=%s period=%s timestamp=%s",
        config.digits,
        config.algorithm,
        config.encoding,
        config.period,
        config.timestamp,
    )
    return config
