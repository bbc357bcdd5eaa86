"""contract_registry.addresses.canonical

Deterministic JSON serialization for address registry lines.

Canonical form: sorted keys, compact separators, UTF-8, no NaN/Infinity.
"""

from __future__ import annotations

import json
from typing import Any


class CanonicalizationError(ValueError):
    """Raised when a registry line cannot be serialized canonically."""


def canonical_dumps(obj: Any) -> str:
    """Return the single-line canonical JSON form of obj."""
    try:
        return json.dumps(
            obj,
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError) as e:
        raise CanonicalizationError(f"canonical_dumps: non-serializable input: {e}") from None


__all__ = ["CanonicalizationError", "canonical_dumps"]
