"""
Keypair command line tool.

Usage::

    python -m stellar_keys generate
    python -m stellar_keys address SBXXX...
    python -m stellar_keys master --network public
    python -m stellar_keys master --config network.yaml
    python -m stellar_keys migrate s3Xxx...
    python -m stellar_keys sign SBXXX... "hello"
    python -m stellar_keys verify GBXXX... "hello" 5b3ad6...

Commands:
    generate   Create a random keypair and print its address and seed
    address    Print the address belonging to a seed
    master     Print the master address of a network
    migrate    Convert a deprecated base58 seed to StrKey
    sign       Sign a UTF-8 message, printing the signature and hint in hex
    verify     Check a hex signature; exit status 0 if valid, 1 otherwise
"""

from __future__ import annotations

import argparse
import logging
import sys
import warnings
from pathlib import Path
from typing import Sequence

import yaml
from pydantic import ValidationError

from stellar_keys.errors import KeypairError, NetworkConfigError
from stellar_keys.keypair import Keypair
from stellar_keys.network import Network, NetworkConfig

logger = logging.getLogger(__name__)

EXIT_INVALID_SIGNATURE = 1
"""Exit status of `verify` for a signature that does not match."""

EXIT_ERROR = 2
"""Exit status for malformed input."""


class ColoredFormatter(logging.Formatter):
    """Logging formatter with ANSI colors for better readability."""

    # ANSI color codes
    GREY = "\x1b[38;5;244m"
    BLUE = "\x1b[38;5;39m"
    GREEN = "\x1b[38;5;40m"
    YELLOW = "\x1b[38;5;220m"
    RED = "\x1b[38;5;196m"
    BOLD_RED = "\x1b[38;5;196;1m"
    RESET = "\x1b[0m"

    LEVEL_COLORS = {
        logging.DEBUG: GREY,
        logging.INFO: GREEN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: BOLD_RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors."""
        color = self.LEVEL_COLORS.get(record.levelno, self.RESET)
        levelname = f"{color}{record.levelname:8}{self.RESET}"
        name = f"{self.BLUE}{record.name}{self.RESET}"
        return f"{levelname} {name}: {record.getMessage()}"


def setup_logging(verbose: bool = False, no_color: bool = False) -> None:
    """Configure stderr logging with optional colors."""
    level = logging.DEBUG if verbose else logging.WARNING

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    if no_color:
        formatter = logging.Formatter("%(levelname)-8s %(name)s: %(message)s")
    else:
        formatter = ColoredFormatter()
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)


def resolve_network(args: argparse.Namespace) -> Network:
    """
    Pick the network named on the command line.

    Precedence: --config, then --passphrase, then --network, then the
    process-wide current network.

    Raises:
        KeypairError: If the --passphrase is empty.
        NetworkConfigError: If the --config file cannot be loaded.
    """
    if args.config is not None:
        return load_network_config(args.config)
    if args.passphrase is not None:
        try:
            return Network(passphrase=args.passphrase)
        except ValidationError as e:
            raise KeypairError("network passphrase must not be empty") from e
    if args.network == "public":
        return Network.public()
    if args.network == "testnet":
        return Network.testnet()
    return Network.current()


def load_network_config(path: Path) -> Network:
    """Load a network from a YAML file, reporting every failure as `NetworkConfigError`."""
    try:
        return NetworkConfig.from_yaml_file(path).to_network()
    except OSError as e:
        raise NetworkConfigError(str(path), e.strerror or str(e)) from e
    except yaml.YAMLError as e:
        raise NetworkConfigError(str(path), "not valid YAML") from e
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'document'}: {err['msg']}"
            for err in e.errors()
        )
        raise NetworkConfigError(str(path), problems) from e


def cmd_generate(args: argparse.Namespace) -> int:
    keypair = Keypair.random()
    print(f"address: {keypair.address()}")
    print(f"seed:    {keypair.seed()}")
    return 0


def cmd_address(args: argparse.Namespace) -> int:
    print(Keypair.from_encoded_seed(args.seed).address())
    return 0


def cmd_master(args: argparse.Namespace) -> int:
    network = resolve_network(args)
    logger.debug("Master key for network %r", network.passphrase)
    print(Keypair.master_key(network.network_id()).address())
    return 0


def cmd_migrate(args: argparse.Namespace) -> int:
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", DeprecationWarning)
        keypair = Keypair.from_legacy_encoded_seed(args.legacy_seed)
    print(f"address: {keypair.address()}")
    print(f"seed:    {keypair.seed()}")
    return 0


def cmd_sign(args: argparse.Namespace) -> int:
    keypair = Keypair.from_encoded_seed(args.seed)
    decorated = keypair.sign_decorated(args.message)
    print(f"signature: {decorated.signature.hex()}")
    print(f"hint:      {decorated.hint.hex()}")
    return 0


def cmd_verify(args: argparse.Namespace) -> int:
    keypair = Keypair.from_address(args.address)
    try:
        signature = bytes.fromhex(args.signature)
    except ValueError:
        print("error: signature is not valid hex", file=sys.stderr)
        return EXIT_ERROR

    if keypair.verify(args.message, signature):
        print("valid")
        return 0
    print("invalid")
    return EXIT_INVALID_SIGNATURE


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per operation."""
    parser = argparse.ArgumentParser(
        prog="stellar_keys",
        description="Stellar keypair tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored logging output",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    generate = sub.add_parser("generate", help="Create a random keypair")
    generate.set_defaults(func=cmd_generate)

    address = sub.add_parser("address", help="Print the address of a seed")
    address.add_argument("seed", help="StrKey seed (S...)")
    address.set_defaults(func=cmd_address)

    master = sub.add_parser("master", help="Print a network's master address")
    master.add_argument(
        "--network",
        choices=["public", "testnet"],
        default=None,
        help="Well-known network (default: the configured one)",
    )
    master.add_argument("--passphrase", default=None, help="Passphrase of a private network")
    master.add_argument("--config", type=Path, default=None, help="Network YAML file")
    master.set_defaults(func=cmd_master)

    migrate = sub.add_parser("migrate", help="Convert a base58 seed to StrKey")
    migrate.add_argument("legacy_seed", help="Deprecated base58 seed")
    migrate.set_defaults(func=cmd_migrate)

    sign = sub.add_parser("sign", help="Sign a message")
    sign.add_argument("seed", help="StrKey seed (S...)")
    sign.add_argument("message", help="Message, signed as UTF-8")
    sign.set_defaults(func=cmd_sign)

    verify = sub.add_parser("verify", help="Verify a signature")
    verify.add_argument("address", help="StrKey account id (G...)")
    verify.add_argument("message", help="Message, as UTF-8")
    verify.add_argument("signature", help="Signature in hex")
    verify.set_defaults(func=cmd_verify)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose, args.no_color)

    try:
        return args.func(args)
    except KeypairError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
