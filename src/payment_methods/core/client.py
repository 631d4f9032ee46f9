"""
HTTP transport for fetching payment method catalogs.

The codec itself performs no I/O; this adapter only fetches the JSON body and
hands it to :func:`payment_methods.core.descriptors.decode_payment_methods`.
"""

from __future__ import annotations

import json
import logging
from typing import Any, List, Optional

import requests

from .config import CatalogConfig
from .descriptors import PaymentMethodDescriptor, decode_payment_methods

__all__ = [
    "CatalogClient",
    "CatalogError",
    "extract_methods",
    "fetch_methods",
]


class CatalogError(RuntimeError):
    """Raised when the catalog cannot be fetched or is not JSON."""


def _get_json(session: requests.Session, config: CatalogConfig) -> Any:
    response = session.get(
        config.catalog_url,
        headers=config.headers(),
        timeout=config.timeout_seconds,
    )
    if response.status_code >= 400:
        raise CatalogError(
            f"Catalog endpoint responded with {response.status_code}: {response.text}"
        )
    try:
        return response.json()
    except json.JSONDecodeError as exc:
        raise CatalogError(
            f"Failed to parse JSON from catalog at {config.catalog_url}: {response.text}"
        ) from exc


def extract_methods(payload: Any) -> Any:
    """Return the method list from a bare list or a ``{"methods": [...]}`` body."""
    if isinstance(payload, dict) and "methods" in payload:
        return payload["methods"]
    return payload


class CatalogClient:
    """
    Thin wrapper around the catalog endpoint.
    """

    def __init__(
        self,
        config: CatalogConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self.session = session or requests.Session()

    def fetch_payload(self) -> Any:
        logging.info("Fetching payment method catalog from %s", self.config.catalog_url)
        return _get_json(self.session, self.config)

    def fetch_methods(self) -> List[PaymentMethodDescriptor]:
        methods = decode_payment_methods(extract_methods(self.fetch_payload()))
        logging.info("Decoded %d payment methods", len(methods))
        return methods


def fetch_methods(
    config: CatalogConfig,
    *,
    session: Optional[requests.Session] = None,
) -> List[PaymentMethodDescriptor]:
    """
    Fetch and decode the catalog for the given configuration.
    """
    return CatalogClient(config, session=session).fetch_methods()
