"""
contract_registry

Persisted mapping of contract names to deployed addresses.
"""
from .config import ContractPaths, default_paths
from .contracts import AddressRegistry, Contracts
from .errors import (
    AddressStoreError,
    StorageUnavailableError,
    AddressNotFoundError,
)

__all__ = [
    "ContractPaths",
    "default_paths",
    "AddressRegistry",
    "Contracts",
    "AddressStoreError",
    "StorageUnavailableError",
    "AddressNotFoundError",
]
