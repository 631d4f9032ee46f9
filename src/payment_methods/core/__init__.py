"""
Core primitives: the payment method codec, its records, and catalog loading.
"""

from .client import CatalogClient, CatalogError, extract_methods, fetch_methods
from .config import CatalogConfig, ConfigError, load_catalog_config, read_settings
from .descriptors import (
    NATIVE_METHOD_NAMES,
    ApplePay,
    CreditCard,
    PaymentMethodDescriptor,
    Swish,
    WebBased,
    decode_optional_or_absent,
    decode_payment_method,
    decode_payment_methods,
    encode_payment_method,
    first_method,
)
from .errors import CodecError, FieldDecodeError, MissingOrInvalidDiscriminator
from .instruments import (
    NATIVE_INSTRUMENT_NAMES,
    ApplePayInstrument,
    AvailableInstrument,
    CreditCardInstrument,
    SwishInstrument,
    WebBasedInstrument,
)
from .operations import Operation
from .prefills import CreditCardPrefill, SwishPrefill, decode_string

__all__ = [
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
    "decode_optional_or_absent",
    "decode_payment_method",
    "decode_payment_methods",
    "decode_string",
    "encode_payment_method",
    "extract_methods",
    "fetch_methods",
    "first_method",
    "load_catalog_config",
    "read_settings",
]
