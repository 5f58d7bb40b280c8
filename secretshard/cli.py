"""Command line interface: shard a secret file, combine share files."""

import argparse
import logging
import sys

from secretshard import __version__
from secretshard.errors import (
    ConfigurationError,
    DomainError,
    EmptyInputError,
    FormatError,
    ReconstructionError,
)
from secretshard.files import combine_dir, shard_file
from secretshard.sharding import DEFAULT_PARTS, DEFAULT_THRESHOLD

logger = logging.getLogger("secretshard")

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

EXIT_OK = 0
# argparse exits with 2 on usage errors too, matching ConfigurationError
EXIT_CODES = [
    (ConfigurationError, 2),
    (EmptyInputError, 3),
    (FormatError, 4),
    (ReconstructionError, 5),
    (DomainError, 6),
    (OSError, 7),
]


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Send package logs to stderr. WARNING by default, DEBUG when verbose."""
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="secretshard",
        description="Split a secret file into shares with Shamir's Secret Sharing, and combine them back.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output.")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_shard = sub.add_parser("shard", help="Shard a secret into shares")
    p_shard.add_argument("secret_path", help="Path to the secret file.")
    p_shard.add_argument("shards_path", help="Directory to store the shares in.")
    p_shard.add_argument(
        "-p", "--parts",
        type=int,
        default=DEFAULT_PARTS,
        help="Number of parts to split the secret into.",
    )
    p_shard.add_argument(
        "-t", "--threshold",
        type=int,
        default=DEFAULT_THRESHOLD,
        help="Number of parts required to recombine the secret.",
    )

    p_combine = sub.add_parser("combine", help="Combine shares into the secret")
    p_combine.add_argument("shards_dir", help="Directory containing the shares.")
    p_combine.add_argument("recovered_secret_path", help="Path to store the recovered secret.")
    return parser


def exit_code_for(error: Exception) -> int:
    """Map an exception to the CLI exit code for its kind."""
    for kind, code in EXIT_CODES:
        if isinstance(error, kind):
            return code
    return 1


def run(args: argparse.Namespace) -> None:
    if args.cmd == "shard":
        shard_file(args.secret_path, args.shards_path, args.parts, args.threshold)
        print("Sharding complete!")
        print(
            f"Secret at {args.secret_path} was split into {args.parts} parts "
            f"with a threshold of {args.threshold}, stored in {args.shards_path}."
        )
    else:
        combine_dir(args.shards_dir, args.recovered_secret_path)
        print("Combine complete!")
        print(f"Recovered secret saved to {args.recovered_secret_path}")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        run(args)
    except tuple(kind for kind, _ in EXIT_CODES) as e:
        logger.debug("%s failed", args.cmd, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return exit_code_for(e)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
