"""
Configuration for loading payment method catalogs from the remote API.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlparse

from dotenv import dotenv_values

__all__ = [
    "ConfigError",
    "CatalogConfig",
    "load_catalog_config",
    "read_settings",
]

_PARAMETER_TO_ENV_KEY = {
    "catalog_url": "PAYMENT_METHODS_CATALOG_URL",
    "api_token": "PAYMENT_METHODS_API_TOKEN",
    "timeout_seconds": "PAYMENT_METHODS_TIMEOUT_SECONDS",
}


class ConfigError(Exception):
    """Raised when the supplied configuration is invalid."""


def _collect_parameter_overrides(explicit: Mapping[str, Any]) -> Dict[str, str]:
    overrides: Dict[str, str] = {}
    for key, value in explicit.items():
        if value is None:
            continue
        overrides[_PARAMETER_TO_ENV_KEY[key]] = str(value)
    return overrides


def read_settings(
    *,
    env_file: Optional[str] = ".env",
    base: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, str]] = None,
) -> Dict[str, str]:
    """
    Merge settings: ``base`` (the process environment by default) first, then
    keys from ``env_file`` that ``base`` lacks, then ``overrides``.
    """
    settings: Dict[str, str] = dict(os.environ if base is None else base)
    if env_file is not None:
        for key, value in dotenv_values(env_file).items():
            if value is not None:
                settings.setdefault(key, value)
    settings.update(overrides or {})
    return settings


def _normalize_url(raw_url: str) -> str:
    url = raw_url.strip()
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigError(
            f"PAYMENT_METHODS_CATALOG_URL must be an http(s) URL, got '{raw_url}'"
        )
    return url


def _positive_int(raw_value: str, field_name: str) -> int:
    try:
        value = int(raw_value)
    except ValueError as exc:
        raise ConfigError(f"{field_name} must be an integer, got '{raw_value}'") from exc
    if value <= 0:
        raise ConfigError(f"{field_name} must be greater than zero")
    return value


@dataclass(frozen=True)
class CatalogConfig:
    catalog_url: str
    api_token: Optional[str] = None
    timeout_seconds: int = 30

    def headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_token:
            headers["Authorization"] = f"Bearer {self.api_token}"
        return headers

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "CatalogConfig":
        url_raw = values.get("PAYMENT_METHODS_CATALOG_URL")
        if url_raw is None:
            raise ConfigError("PAYMENT_METHODS_CATALOG_URL must be provided")

        api_token = values.get("PAYMENT_METHODS_API_TOKEN") or None
        timeout_seconds = _positive_int(
            values.get("PAYMENT_METHODS_TIMEOUT_SECONDS", "30"),
            "PAYMENT_METHODS_TIMEOUT_SECONDS",
        )

        return cls(
            catalog_url=_normalize_url(url_raw),
            api_token=api_token,
            timeout_seconds=timeout_seconds,
        )

    @classmethod
    def from_env(
        cls,
        *,
        env_file: Optional[str] = ".env",
        overrides: Optional[Mapping[str, str]] = None,
        base: Optional[Mapping[str, str]] = None,
        catalog_url: Optional[str] = None,
        api_token: Optional[str] = None,
        timeout_seconds: Optional[int | str] = None,
    ) -> "CatalogConfig":
        merged_overrides = dict(overrides or {})
        merged_overrides.update(
            _collect_parameter_overrides(
                {
                    "catalog_url": catalog_url,
                    "api_token": api_token,
                    "timeout_seconds": timeout_seconds,
                }
            )
        )

        return cls.from_mapping(
            read_settings(env_file=env_file, base=base, overrides=merged_overrides)
        )


def load_catalog_config(
    *,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    catalog_url: Optional[str] = None,
    api_token: Optional[str] = None,
    timeout_seconds: Optional[int | str] = None,
) -> CatalogConfig:
    """
    Convenience wrapper that mirrors :meth:`CatalogConfig.from_env`.

    Settings can come from environment variables, a ``.env`` file, keyword
    arguments, or any combination of the three.
    """
    return CatalogConfig.from_env(
        env_file=env_file,
        overrides=overrides,
        base=base,
        catalog_url=catalog_url,
        api_token=api_token,
        timeout_seconds=timeout_seconds,
    )
