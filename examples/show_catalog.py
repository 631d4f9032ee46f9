"""
Minimal script that decodes a catalog file with the public API and shows
which native methods and stored cards it offers.
"""

from __future__ import annotations

import argparse
import logging
import sys

from payment_methods import CodecError, CreditCard, first_method, load_catalog


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Summarize a payment method catalog")
    parser.add_argument("path", help="JSON file holding the catalog")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    try:
        methods = load_catalog(args.path)
    except (OSError, ValueError, CodecError) as exc:
        logging.error("Could not decode catalog: %s", exc)
        return 1

    logging.info("Catalog offers: %s", ", ".join(method.name for method in methods))

    card = first_method(methods, CreditCard.name)
    if isinstance(card, CreditCard) and card.prefills:
        for prefill in card.prefills:
            logging.info(
                "Stored %s card %s expires %s",
                prefill.card_brand,
                prefill.masked_pan,
                prefill.expiry_string,
            )
    return 0


if __name__ == "__main__":
    sys.exit(main())
