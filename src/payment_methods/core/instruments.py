"""
Instruments that are actually usable for native payment on this device.

These answer a different question from the catalog descriptors in
:mod:`payment_methods.core.descriptors` (what the API offers) and are built
by capability probing elsewhere. Only the prefill records are shared. When a
native method is added to one set it has to be added to the other by hand.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .prefills import CreditCardPrefill, SwishPrefill

__all__ = [
    "ApplePayInstrument",
    "AvailableInstrument",
    "CreditCardInstrument",
    "NATIVE_INSTRUMENT_NAMES",
    "SwishInstrument",
    "WebBasedInstrument",
]


@dataclass(frozen=True)
class SwishInstrument:
    """Swish native payment with a list of prefills."""

    prefills: Optional[Tuple[SwishPrefill, ...]] = None

    payment_method = "Swish"


@dataclass(frozen=True)
class CreditCardInstrument:
    prefills: Optional[Tuple[CreditCardPrefill, ...]] = None

    payment_method = "CreditCard"


@dataclass(frozen=True)
class ApplePayInstrument:
    can_make_payments: bool
    can_make_payments_using_networks_and_capabilities: bool

    payment_method = "ApplePay"


@dataclass(frozen=True)
class WebBasedInstrument:
    payment_method: str


AvailableInstrument = Union[
    SwishInstrument,
    CreditCardInstrument,
    ApplePayInstrument,
    WebBasedInstrument,
]

NATIVE_INSTRUMENT_NAMES = frozenset(
    {
        SwishInstrument.payment_method,
        CreditCardInstrument.payment_method,
        ApplePayInstrument.payment_method,
    }
)
