"""contract_registry.addresses.records

Address registry record schema + validation.

Record schema (one JSONL line):
- name: str              # contract name, non-empty, format not checked
- index: int             # zero-based position within the name's sequence
- address: str           # opaque deployed address, format not checked
- recorded_at_utc: str   # ISO 8601 UTC timestamp (Z)
"""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass
from typing import Any, Dict, Optional


def utc_now_iso_z() -> str:
    now = _dt.datetime.now(tz=_dt.timezone.utc)
    return now.replace(microsecond=0).isoformat().replace("+00:00", "Z")


def require_name(name: Any) -> str:
    if not isinstance(name, str):
        raise TypeError("name must be str")
    if name.strip() == "":
        raise ValueError("name must be non-empty")
    return name


def require_index(index: Any) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError("index must be int")
    if index < 0:
        raise ValueError("index must be >= 0")
    return index


def require_utf8(field: str, value: str) -> None:
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        raise ValueError(f"{field} must be UTF-8 encodable") from None


def normalize_recorded_at(recorded_at_utc: Optional[str]) -> str:
    if recorded_at_utc is None:
        return utc_now_iso_z()
    if not isinstance(recorded_at_utc, str) or not recorded_at_utc.endswith("Z"):
        raise ValueError("recorded_at_utc must be UTC ISO string ending with 'Z'")
    try:
        _dt.datetime.fromisoformat(recorded_at_utc.replace("Z", "+00:00"))
    except ValueError:
        raise ValueError("recorded_at_utc must be valid ISO 8601 UTC timestamp") from None
    return recorded_at_utc


@dataclass(frozen=True)
class AddressRecord:
    name: str
    index: int
    address: str
    recorded_at_utc: str

    def validate(self) -> None:
        require_name(self.name)
        require_index(self.index)
        if not isinstance(self.address, str):
            raise TypeError("address must be str")
        if not isinstance(self.recorded_at_utc, str) or not self.recorded_at_utc:
            raise ValueError("recorded_at_utc must be a non-empty string")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "index": self.index,
            "address": self.address,
            "recorded_at_utc": self.recorded_at_utc,
        }

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "AddressRecord":
        rec = AddressRecord(
            name=d["name"],
            index=d["index"],
            address=d["address"],
            recorded_at_utc=d["recorded_at_utc"],
        )
        rec.validate()
        return rec


__all__ = [
    "AddressRecord",
    "normalize_recorded_at",
    "require_index",
    "require_name",
    "require_utf8",
    "utc_now_iso_z",
]
