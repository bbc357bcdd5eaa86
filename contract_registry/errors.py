"""
Address Store Errors

Minimal error taxonomy for address record storage.
"""

from __future__ import annotations


class AddressStoreError(Exception):
    """Base class for address store failures (also raised for a corrupt store file)."""


class StorageUnavailableError(AddressStoreError):
    """Raised when the storage path cannot be created, read or written."""


class AddressNotFoundError(AddressStoreError, LookupError):
    """Raised when a contract name is unknown or an index is out of range."""
