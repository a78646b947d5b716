"""Command-line interface for totp-core."""

import argparse
import json
import logging
import sys
from typing import List, Optional

from cryptography.exceptions import UnsupportedAlgorithm

from totp_core.config import Algorithm, Encoding
from totp_core.totp import generate


logger = logging.getLogger(__name__)


def code_command(args: argparse.Namespace) -> int:
    """Handle the code command."""
    options = {
        "digits": args.digits,
        "algorithm": args.algorithm,
        "encoding": args.encoding,
        "period": args.period,
        "timestamp": args.timestamp,
    }
    try:
        result = generate(args.secret, options)
    except UnsupportedAlgorithm as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"✗ Failed to generate code: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(result._asdict()))
    else:
        print(result.otp)
    return 0


def algorithms_command(args: argparse.Namespace) -> int:
    """Handle the algorithms command."""
    print("Supported algorithms:")
    for algorithm in Algorithm:
        print(f"  {algorithm.value}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Time-based one-time password generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Code command
    code_parser = subparsers.add_parser(
        "code",
        aliases=["generate", "gen"],
        help="Generate the current TOTP code",
    )
    code_parser.add_argument("secret", help="Shared secret")
    code_parser.add_argument(
        "--digits",
        "-d",
        type=int,
        default=None,
        help="Number of digits in the code (default: 6)",
    )
    code_parser.add_argument(
        "--algorithm",
        "-a",
        default=None,
        help="HMAC hash: SHA1, SHA256, SHA384 or SHA512 (default: SHA1)",
    )
    code_parser.add_argument(
        "--encoding",
        "-e",
        default=None,
        choices=[e.value for e in Encoding],
        help="Secret encoding (default: base32)",
    )
    code_parser.add_argument(
        "--period",
        "-p",
        type=int,
        default=None,
        help="Time step in seconds (default: 30)",
    )
    code_parser.add_argument(
        "--timestamp",
        "-t",
        type=int,
        default=None,
        help="Milliseconds since the epoch (default: now)",
    )
    code_parser.add_argument(
        "--json",
        action="store_true",
        help="Print otp, expires and remaining as JSON",
    )

    # Algorithms command
    subparsers.add_parser(
        "algorithms",
        aliases=["algs"],
        help="List supported hash algorithms",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )

    if not args.command:
        parser.print_help()
        return 1

    logger.debug("Running command %s", args.command)
    if args.command in ("code", "generate", "gen"):
        return code_command(args)
    elif args.command in ("algorithms", "algs"):
        return algorithms_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
