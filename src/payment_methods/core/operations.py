"""
The operation record attached to payment method descriptors.

Operations describe follow-up network actions offered by the payment API. The
codec does not interpret them: any JSON object is accepted and re-emitted as
it was received. The object is held as canonical JSON text, so the record
stays immutable and compares by its whole content.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .errors import FieldDecodeError

__all__ = ["Operation"]


@dataclass(frozen=True)
class Operation:
    document: str

    @classmethod
    def from_wire(cls, payload: Any) -> "Operation":
        if not isinstance(payload, Mapping):
            raise FieldDecodeError(
                f"Operation must be a JSON object, got {type(payload).__name__}"
            )
        try:
            document = json.dumps(dict(payload), sort_keys=True, separators=(",", ":"))
        except (TypeError, ValueError) as exc:
            raise FieldDecodeError(f"Operation is not plain JSON: {exc}") from exc
        return cls(document=document)

    def to_wire(self) -> Dict[str, Any]:
        return json.loads(self.document)

    def _string(self, key: str) -> Optional[str]:
        value = self.to_wire().get(key)
        return value if isinstance(value, str) else None

    @property
    def rel(self) -> Optional[str]:
        return self._string("rel")

    @property
    def href(self) -> Optional[str]:
        return self._string("href")

    @property
    def method(self) -> Optional[str]:
        return self._string("method")

    @property
    def content_type(self) -> Optional[str]:
        return self._string("contentType")
