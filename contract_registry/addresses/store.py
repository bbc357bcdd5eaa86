"""contract_registry.addresses.store

Append-only address store bound to a single storage root.

Registry file location:
- <root>/address_registry.jsonl

Contracts:
- One record per line (canonical JSON) with a trailing newline.
- Writes are append-only (no in-place edits, no deletes).
- Read preserves file order; a name's index is its position among that name's lines.
- get_all() of an unknown name is an empty list; get() of one raises AddressNotFoundError.
- Index assignment + append are serialized per instance. Nothing is promised
  across processes sharing a root.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from contract_registry.addresses.canonical import canonical_dumps
from contract_registry.addresses.records import (
    AddressRecord,
    normalize_recorded_at,
    require_index,
    require_name,
    require_utf8,
)
from contract_registry.errors import (
    AddressNotFoundError,
    AddressStoreError,
    StorageUnavailableError,
)

logger = logging.getLogger(__name__)

REGISTRY_FILENAME = "address_registry.jsonl"


class AddressStore:
    def __init__(self, root: Union[str, Path]) -> None:
        self._root = Path(root)
        self._registry_path = self._root / REGISTRY_FILENAME
        self._lock = threading.Lock()

    @property
    def root(self) -> Path:
        return self._root

    @property
    def registry_path(self) -> Path:
        return self._registry_path

    def ensure_dirs(self) -> None:
        try:
            self._root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning("address store root unavailable: %s (%s)", self._root, e)
            raise StorageUnavailableError(f"cannot create store root {self._root}: {e}") from e

    def set(self, name: str, address: str, *, recorded_at_utc: Optional[str] = None) -> int:
        """Append address to name's sequence and return its index."""
        name = require_name(name)
        if not isinstance(address, str):
            raise TypeError("address must be str")
        recorded = normalize_recorded_at(recorded_at_utc)
        require_utf8("name", name)
        require_utf8("address", address)

        with self._lock:
            self.ensure_dirs()
            index = len(self.records(name))
            rec = AddressRecord(name=name, index=index, address=address, recorded_at_utc=recorded)
            rec.validate()
            line = (canonical_dumps(rec.to_dict()) + "\n").encode("utf-8")
            _append_line(self._registry_path, line)

        logger.debug("recorded address name=%s index=%d path=%s", name, index, self._registry_path)
        return index

    def get(self, name: str, index: int) -> str:
        name = require_name(name)
        index = require_index(index)
        recs = self.records(name)
        if not recs:
            raise AddressNotFoundError(f"no addresses recorded for contract: {name}")
        if index >= len(recs):
            raise AddressNotFoundError(
                f"index {index} out of range for contract {name} ({len(recs)} recorded)"
            )
        return recs[index].address

    def get_all(self, name: str) -> List[str]:
        name = require_name(name)
        return [r.address for r in self.records(name)]

    def names(self) -> List[str]:
        out: List[str] = []
        seen = set()
        for r in self.records():
            if r.name not in seen:
                seen.add(r.name)
                out.append(r.name)
        return out

    def records(self, name: Optional[str] = None) -> List[AddressRecord]:
        """Read records in file order, optionally filtered by name.

        Each stored index must match the record's position within its name.
        """
        counts: Dict[str, int] = {}
        out: List[AddressRecord] = []
        for line_no, obj in _read_lines(self._registry_path):
            try:
                rec = AddressRecord.from_dict(obj)
            except (KeyError, TypeError, ValueError) as e:
                raise AddressStoreError(
                    f"invalid record on line {line_no} in {self._registry_path}: {e}"
                ) from None
            expected = counts.get(rec.name, 0)
            if rec.index != expected:
                raise AddressStoreError(
                    f"index mismatch on line {line_no} in {self._registry_path}: "
                    f"expected {expected}, got {rec.index}"
                )
            counts[rec.name] = expected + 1
            if name is None or rec.name == name:
                out.append(rec)
        return out


def _read_lines(path: Path) -> List[Tuple[int, Dict[str, Any]]]:
    if not path.exists():
        return []

    out: List[Tuple[int, Dict[str, Any]]] = []
    try:
        with path.open("rb") as f:
            for idx, raw in enumerate(f, start=1):
                try:
                    s = raw.decode("utf-8").rstrip("\n")
                except UnicodeDecodeError as e:
                    raise AddressStoreError(f"invalid UTF-8 on line {idx} in {path}: {e}") from None
                if s.strip() == "":
                    continue
                try:
                    obj: Any = json.loads(s)
                except json.JSONDecodeError as e:
                    raise AddressStoreError(f"invalid JSON on line {idx} in {path}: {e}") from None
                if not isinstance(obj, dict):
                    raise AddressStoreError(f"non-object JSON on line {idx} in {path}")
                out.append((idx, obj))
    except OSError as e:
        logger.warning("address store unreadable: %s (%s)", path, e)
        raise StorageUnavailableError(f"cannot read {path}: {e}") from e
    return out


def _append_line(path: Path, data: bytes) -> None:
    """O_APPEND write + fsync."""
    try:
        fd = os.open(str(path), os.O_WRONLY | os.O_CREAT | os.O_APPEND, 0o644)
        try:
            os.write(fd, data)
            os.fsync(fd)
        finally:
            os.close(fd)
    except OSError as e:
        logger.warning("address store unwritable: %s (%s)", path, e)
        raise StorageUnavailableError(f"cannot write {path}: {e}") from e


__all__ = ["AddressStore", "REGISTRY_FILENAME"]
