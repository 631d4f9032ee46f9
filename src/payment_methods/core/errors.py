"""
Exception types raised by the payment method codec.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "CodecError",
    "FieldDecodeError",
    "MissingOrInvalidDiscriminator",
]


class CodecError(Exception):
    """Base class for errors raised while converting wire values."""


class MissingOrInvalidDiscriminator(CodecError):
    """
    Raised when a wire object has no string ``paymentMethod`` field.

    Callers should treat the offending value as "not a payment method object"
    rather than as a payment method with missing details.
    """

    def __init__(self, payload: Any) -> None:
        self.payload = payload
        if isinstance(payload, dict) and "paymentMethod" in payload:
            found = type(payload["paymentMethod"]).__name__
            detail = f"'paymentMethod' must be a string, got {found}"
        elif isinstance(payload, dict):
            detail = "'paymentMethod' is missing"
        else:
            detail = f"expected a JSON object, got {type(payload).__name__}"
        super().__init__(f"Not a payment method object: {detail}")


class FieldDecodeError(CodecError):
    """Raised when a single field or sequence element has the wrong shape."""
