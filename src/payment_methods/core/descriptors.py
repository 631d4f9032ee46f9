"""
Payment method descriptors and the codec for the ``paymentMethod`` tagged
wire format.

A catalog entry is a JSON object whose ``paymentMethod`` field selects which
of the remaining fields are meaningful. Unknown tags become :class:`WebBased`.
Every field other than the tag is decoded on its own: a malformed field is
dropped to ``None`` instead of failing the entry.

Encoding is deliberately not the inverse of decoding. The tag is not written
back, and :class:`WebBased` encodes to its bare tag string. Integrators that
need to re-read encoded descriptors must add the tag themselves.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    Dict,
    Iterable,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
    Union,
)

from .errors import CodecError, MissingOrInvalidDiscriminator
from .operations import Operation
from .prefills import CreditCardPrefill, SwishPrefill, decode_string

__all__ = [
    "ApplePay",
    "CreditCard",
    "NATIVE_METHOD_NAMES",
    "PaymentMethodDescriptor",
    "Swish",
    "WebBased",
    "decode_optional_or_absent",
    "decode_payment_method",
    "decode_payment_methods",
    "encode_payment_method",
    "first_method",
]

T = TypeVar("T")

DISCRIMINATOR_KEY = "paymentMethod"


def decode_optional_or_absent(
    payload: Mapping[str, Any],
    key: str,
    element_decoder: Callable[[Any], T],
) -> Optional[Tuple[T, ...]]:
    """
    Decode ``payload[key]`` as a sequence of elements, or return ``None``.

    A missing key, an explicit ``null``, a value that is not a list, and any
    element the decoder rejects all give ``None``. Errors never propagate.
    """
    if key not in payload:
        return None
    value = payload[key]
    if value is None:
        return None
    if not isinstance(value, list):
        logging.debug(
            "Dropping field '%s': expected a list, got %s", key, type(value).__name__
        )
        return None
    try:
        return tuple(element_decoder(item) for item in value)
    except CodecError as exc:
        logging.debug("Dropping field '%s': %s", key, exc)
        return None


def _encode_sequence(values: Optional[Sequence[Any]]) -> Optional[List[Any]]:
    if values is None:
        return None
    return [item.to_wire() if hasattr(item, "to_wire") else item for item in values]


@dataclass(frozen=True)
class Swish:
    prefills: Optional[Tuple[SwishPrefill, ...]] = None
    operations: Optional[Tuple[Operation, ...]] = None

    name = "Swish"

    @classmethod
    def from_wire(cls, payload: Mapping[str, Any]) -> "Swish":
        return cls(
            prefills=decode_optional_or_absent(payload, "prefills", SwishPrefill.from_wire),
            operations=decode_optional_or_absent(payload, "operations", Operation.from_wire),
        )

    def to_wire(self) -> Dict[str, Any]:
        return {
            "prefills": _encode_sequence(self.prefills),
            "operations": _encode_sequence(self.operations),
        }


@dataclass(frozen=True)
class CreditCard:
    prefills: Optional[Tuple[CreditCardPrefill, ...]] = None
    operations: Optional[Tuple[Operation, ...]] = None
    card_brands: Optional[Tuple[str, ...]] = None

    name = "CreditCard"

    @classmethod
    def from_wire(cls, payload: Mapping[str, Any]) -> "CreditCard":
        return cls(
            prefills=decode_optional_or_absent(payload, "prefills", CreditCardPrefill.from_wire),
            operations=decode_optional_or_absent(payload, "operations", Operation.from_wire),
            card_brands=decode_optional_or_absent(payload, "cardBrands", decode_string),
        )

    def to_wire(self) -> Dict[str, Any]:
        return {
            "prefills": _encode_sequence(self.prefills),
            "operations": _encode_sequence(self.operations),
            "cardBrands": _encode_sequence(self.card_brands),
        }


@dataclass(frozen=True)
class ApplePay:
    operations: Optional[Tuple[Operation, ...]] = None
    card_brands: Optional[Tuple[str, ...]] = None
    merchant_capabilities: Optional[Tuple[str, ...]] = None

    name = "ApplePay"

    @classmethod
    def from_wire(cls, payload: Mapping[str, Any]) -> "ApplePay":
        return cls(
            operations=decode_optional_or_absent(payload, "operations", Operation.from_wire),
            card_brands=decode_optional_or_absent(payload, "cardBrands", decode_string),
            merchant_capabilities=decode_optional_or_absent(
                payload, "merchantCapabilities", decode_string
            ),
        )

    def to_wire(self) -> Dict[str, Any]:
        return {
            "operations": _encode_sequence(self.operations),
            "cardBrands": _encode_sequence(self.card_brands),
            "merchantCapabilities": _encode_sequence(self.merchant_capabilities),
        }


@dataclass(frozen=True)
class WebBased:
    """Any method without native support; keeps the raw tag."""

    payment_method: str

    @property
    def name(self) -> str:
        return self.payment_method

    @property
    def operations(self) -> None:
        return None

    def to_wire(self) -> str:
        return self.payment_method


PaymentMethodDescriptor = Union[Swish, CreditCard, ApplePay, WebBased]

_NATIVE_VARIANTS: Dict[str, Callable[[Mapping[str, Any]], PaymentMethodDescriptor]] = {
    Swish.name: Swish.from_wire,
    CreditCard.name: CreditCard.from_wire,
    ApplePay.name: ApplePay.from_wire,
}

NATIVE_METHOD_NAMES = frozenset(_NATIVE_VARIANTS)


def decode_payment_method(payload: Any) -> PaymentMethodDescriptor:
    """
    Decode one catalog entry.

    Raises :class:`MissingOrInvalidDiscriminator` when ``payload`` is not an
    object with a string ``paymentMethod``. No other error escapes.
    """
    if not isinstance(payload, Mapping):
        raise MissingOrInvalidDiscriminator(payload)
    tag = payload.get(DISCRIMINATOR_KEY)
    if not isinstance(tag, str):
        raise MissingOrInvalidDiscriminator(dict(payload))

    decoder = _NATIVE_VARIANTS.get(tag)
    if decoder is None:
        logging.debug("Treating payment method '%s' as web based", tag)
        return WebBased(payment_method=tag)
    return decoder(payload)


def decode_payment_methods(items: Any) -> List[PaymentMethodDescriptor]:
    """Decode a catalog (a JSON list of entries), keeping its order."""
    if not isinstance(items, list):
        raise CodecError(
            f"Payment method catalog must be a JSON list, got {type(items).__name__}"
        )
    return [decode_payment_method(item) for item in items]


def encode_payment_method(descriptor: PaymentMethodDescriptor) -> Union[Dict[str, Any], str]:
    """
    Encode a descriptor to its wire value.

    The ``paymentMethod`` tag is not emitted and absent fields are written as
    ``None``. :class:`WebBased` produces a bare string.
    """
    return descriptor.to_wire()


def first_method(
    methods: Iterable[PaymentMethodDescriptor],
    name: str,
) -> Optional[PaymentMethodDescriptor]:
    return next((method for method in methods if method.name == name), None)
