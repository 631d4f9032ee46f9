"""
Prefill records: previously known user data offered alongside a payment method.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Mapping

from .errors import FieldDecodeError

__all__ = [
    "CreditCardPrefill",
    "SwishPrefill",
    "decode_string",
]

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _require_mapping(payload: Any, record: str) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise FieldDecodeError(
            f"{record} must be a JSON object, got {type(payload).__name__}"
        )
    return payload


def _require_key(payload: Mapping[str, Any], key: str, record: str) -> Any:
    try:
        return payload[key]
    except KeyError as exc:
        raise FieldDecodeError(f"{record} is missing '{key}'") from exc


def decode_string(value: Any) -> str:
    """Element decoder for plain string sequences such as ``cardBrands``."""
    if not isinstance(value, str):
        raise FieldDecodeError(f"Expected a string, got {type(value).__name__}")
    return value


def _string_field(payload: Mapping[str, Any], key: str, record: str) -> str:
    value = _require_key(payload, key, record)
    if not isinstance(value, str):
        raise FieldDecodeError(f"{record}.{key} must be a string")
    return value


def _rank_field(payload: Mapping[str, Any], record: str) -> int:
    value = _require_key(payload, "rank", record)
    # bool is an int subclass and must not pass as a rank
    if isinstance(value, bool) or not isinstance(value, int):
        raise FieldDecodeError(f"{record}.rank must be an integer")
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise FieldDecodeError(f"{record}.rank {value} does not fit in 32 bits")
    return value


# ISO-8601 as sent by the API; the fraction may exceed microsecond precision
_TIMESTAMP = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})"
    r"(?:[Tt ](\d{2}):(\d{2})(?::(\d{2})(?:[.,](\d+))?)?)?"
    r"(?:([Zz])|([+-])(\d{2}):?(\d{2}))?"
)


def _parse_timestamp(raw: str, record: str) -> datetime:
    match = _TIMESTAMP.fullmatch(raw.strip())
    if match is None:
        raise FieldDecodeError(f"{record}.expiryDate is not a timestamp: {raw!r}")
    year, month, day, hour, minute, second, fraction, _, sign, off_h, off_m = match.groups()
    try:
        tz = timezone.utc
        if sign is not None:
            offset = timedelta(hours=int(off_h), minutes=int(off_m))
            tz = timezone(-offset if sign == "-" else offset)
        return datetime(
            int(year),
            int(month),
            int(day),
            int(hour or 0),
            int(minute or 0),
            int(second or 0),
            int((fraction or "0")[:6].ljust(6, "0")),
            tzinfo=tz,
        )
    except ValueError as exc:
        raise FieldDecodeError(f"{record}.expiryDate is not a timestamp: {raw!r}") from exc


def _format_timestamp(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).replace(tzinfo=None).isoformat() + "Z"


@dataclass(frozen=True)
class SwishPrefill:
    """Prefill information for Swish: a ranked phone number."""

    rank: int
    msisdn: str

    @classmethod
    def from_wire(cls, payload: Any) -> "SwishPrefill":
        record = _require_mapping(payload, "SwishPrefill")
        return cls(
            rank=_rank_field(record, "SwishPrefill"),
            msisdn=_string_field(record, "msisdn", "SwishPrefill"),
        )

    def to_wire(self) -> Dict[str, Any]:
        return {"rank": self.rank, "msisdn": self.msisdn}


@dataclass(frozen=True)
class CreditCardPrefill:
    """
    Prefill information for a stored card.

    ``expiry_date`` is an instant; a naive value is taken to be UTC. The
    ``expiry_*`` properties are always computed in UTC so they do not shift
    with the local time zone of the process.
    """

    rank: int
    payment_token: str
    card_brand: str
    masked_pan: str
    expiry_date: datetime

    @classmethod
    def from_wire(cls, payload: Any) -> "CreditCardPrefill":
        record = _require_mapping(payload, "CreditCardPrefill")
        expiry_raw = _string_field(record, "expiryDate", "CreditCardPrefill")
        return cls(
            rank=_rank_field(record, "CreditCardPrefill"),
            payment_token=_string_field(record, "paymentToken", "CreditCardPrefill"),
            card_brand=_string_field(record, "cardBrand", "CreditCardPrefill"),
            masked_pan=_string_field(record, "maskedPan", "CreditCardPrefill"),
            expiry_date=_parse_timestamp(expiry_raw, "CreditCardPrefill"),
        )

    def to_wire(self) -> Dict[str, Any]:
        return {
            "rank": self.rank,
            "paymentToken": self.payment_token,
            "cardBrand": self.card_brand,
            "maskedPan": self.masked_pan,
            "expiryDate": _format_timestamp(self.expiry_date),
        }

    @property
    def _expiry_utc(self) -> datetime:
        if self.expiry_date.tzinfo is None:
            return self.expiry_date.replace(tzinfo=timezone.utc)
        return self.expiry_date.astimezone(timezone.utc)

    @property
    def expiry_month(self) -> str:
        return f"{self._expiry_utc.month:02d}"

    @property
    def expiry_year(self) -> str:
        return f"{self._expiry_utc.year % 100:02d}"

    @property
    def expiry_string(self) -> str:
        return f"{self.expiry_month}/{self.expiry_year}"
