"""
Public facade for the payment method catalog codec.

The most useful pieces are re-exported so integrators can
``from payment_methods import ...`` without navigating the package.
"""

from .api import create_catalog_client, load_catalog
from .core import (
    NATIVE_INSTRUMENT_NAMES,
    NATIVE_METHOD_NAMES,
    ApplePay,
    ApplePayInstrument,
    AvailableInstrument,
    CatalogClient,
    CatalogConfig,
    CatalogError,
    CodecError,
    ConfigError,
    CreditCard,
    CreditCardInstrument,
    CreditCardPrefill,
    FieldDecodeError,
    MissingOrInvalidDiscriminator,
    Operation,
    PaymentMethodDescriptor,
    Swish,
    SwishInstrument,
    SwishPrefill,
    WebBased,
    WebBasedInstrument,
    decode_payment_method,
    decode_payment_methods,
    encode_payment_method,
    fetch_methods,
    first_method,
    load_catalog_config,
)

__all__ = (
    "ApplePay",
    "ApplePayInstrument",
    "AvailableInstrument",
    "CatalogClient",
    "CatalogConfig",
    "CatalogError",
    "CodecError",
    "ConfigError",
    "CreditCard",
    "CreditCardInstrument",
    "CreditCardPrefill",
    "FieldDecodeError",
    "MissingOrInvalidDiscriminator",
    "NATIVE_INSTRUMENT_NAMES",
    "NATIVE_METHOD_NAMES",
    "Operation",
    "PaymentMethodDescriptor",
    "Swish",
    "SwishInstrument",
    "SwishPrefill",
    "WebBased",
    "WebBasedInstrument",
    "create_catalog_client",
    "decode_payment_method",
    "decode_payment_methods",
    "encode_payment_method",
    "fetch_methods",
    "first_method",
    "load_catalog",
    "load_catalog_config",
)
