"""
Command-line interface for inspecting payment method catalogs.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Iterable, List, Sequence, TextIO, Tuple

import requests

from .api import create_catalog_client, load_catalog
from .core.client import CatalogError
from .core.config import ConfigError, load_catalog_config
from .core.descriptors import PaymentMethodDescriptor, encode_payment_method
from .core.errors import CodecError


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )


def _env_override(value: str) -> Tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError("Overrides must look like KEY=VALUE")
    key, val = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Override key must not be empty")
    return key, val


def _collect_overrides(pairs: Iterable[Tuple[str, str]]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for key, value in pairs:
        overrides[key] = value
    return overrides


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="payment-methods",
        description="Decode a payment method catalog and print its descriptors",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    decode_parser = subparsers.add_parser(
        "decode",
        help="Decode a catalog stored in a JSON file",
    )
    decode_parser.add_argument("path", help="JSON file holding the catalog")

    fetch_parser = subparsers.add_parser(
        "fetch",
        help="Fetch the catalog from PAYMENT_METHODS_CATALOG_URL and decode it",
    )
    fetch_parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing PAYMENT_METHODS_* settings (default: .env)",
    )
    fetch_parser.add_argument(
        "--set",
        action="append",
        type=_env_override,
        metavar="KEY=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    return parser


def _print_methods(methods: List[PaymentMethodDescriptor], out: TextIO) -> None:
    for method in methods:
        out.write(f"{method.name}\t{json.dumps(encode_payment_method(method))}\n")


def run_cli(argv: Sequence[str] | None = None, *, out: TextIO | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    out = out or sys.stdout

    _configure_logging(args.log_level)

    if args.command == "decode":
        try:
            methods = load_catalog(args.path)
        except (OSError, ValueError, CodecError) as exc:
            logging.error("Could not decode catalog %s: %s", args.path, exc)
            return 1
        _print_methods(methods, out)
        return 0

    overrides = _collect_overrides(args.set or ())
    try:
        config = load_catalog_config(env_file=args.env_file, overrides=overrides)
    except ConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    client = create_catalog_client(config=config, session=requests.Session())
    try:
        methods = client.fetch_methods()
    except (CatalogError, requests.RequestException, CodecError) as exc:
        logging.error("Fetching catalog failed: %s", exc)
        return 1

    _print_methods(methods, out)
    return 0


def main() -> None:
    sys.exit(run_cli())
