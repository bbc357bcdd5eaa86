"""
Contracts

Holds the configured contract paths and an address accessor bound to the
address storage root. Store errors propagate unchanged.
"""

from __future__ import annotations

from typing import List

from contract_registry.addresses.store import AddressStore
from contract_registry.config import ContractPaths, default_paths


class AddressRegistry:
    """Contract-name keyed access to a single AddressStore."""

    def __init__(self, store: AddressStore) -> None:
        self.store = store

    def set(self, name: str, address: str) -> int:
        """Set an address for a contract to use for future transactions. Returns its index."""
        return self.store.set(name, address)

    def get(self, name: str, index: int) -> str:
        """Get a deployed contract address by index."""
        return self.store.get(name, index)

    def get_all(self, name: str) -> List[str]:
        """Get all deployed addresses of a contract, oldest first."""
        return self.store.get_all(name)

    def names(self) -> List[str]:
        return self.store.names()


class Contracts:
    def __init__(self, paths: ContractPaths) -> None:
        self.paths = paths
        self.addresses = AddressRegistry(AddressStore(paths.address))

    @classmethod
    def from_env(cls) -> "Contracts":
        return cls(default_paths())


__all__ = ["AddressRegistry", "Contracts"]
