"""
Public, high-level helpers for loading payment method catalogs.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Mapping, Optional

import requests

from .core.client import CatalogClient, extract_methods
from .core.config import CatalogConfig, load_catalog_config
from .core.descriptors import PaymentMethodDescriptor, decode_payment_methods

__all__ = [
    "create_catalog_client",
    "load_catalog",
]


def create_catalog_client(
    *,
    config: Optional[CatalogConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    catalog_url: Optional[str] = None,
    api_token: Optional[str] = None,
    timeout_seconds: Optional[int | str] = None,
) -> CatalogClient:
    """
    Construct a :class:`CatalogClient`.

    Callers can either supply a ready-made :class:`CatalogConfig` or let the
    helper assemble one from environment data.
    """
    if config is not None:
        extras = (overrides, base, catalog_url, api_token, timeout_seconds)
        if any(item is not None and item != {} for item in extras):
            raise ValueError(
                "Provide either a pre-built CatalogConfig or individual parameters, not both."
            )
        cfg = config
    else:
        cfg = load_catalog_config(
            env_file=env_file,
            overrides=overrides,
            base=base,
            catalog_url=catalog_url,
            api_token=api_token,
            timeout_seconds=timeout_seconds,
        )
    return CatalogClient(cfg, session=session)


def load_catalog(path: str | Path) -> List[PaymentMethodDescriptor]:
    """
    Decode a catalog stored on disk as a JSON list or ``{"methods": [...]}``.
    """
    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    return decode_payment_methods(extract_methods(payload))
