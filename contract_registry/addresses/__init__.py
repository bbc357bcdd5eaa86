"""
Address records + append-only store.

One AddressStore per storage root; no shared mutable path.
"""
from .records import AddressRecord
from .store import AddressStore

__all__ = ["AddressRecord", "AddressStore"]
