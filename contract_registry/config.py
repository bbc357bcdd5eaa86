"""
Contract path configuration

Three locations, read once from the environment:
- CONTRACT_REGISTRY_CONTRACT_DIR: contract sources
- CONTRACT_REGISTRY_BUILD_DIR:    build artifacts
- CONTRACT_REGISTRY_ADDRESS_DIR:  address records

Defaults are repo-local under ./.contract_registry/
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_BASE = Path(".contract_registry")


@dataclass(frozen=True)
class ContractPaths:
    contract: Path
    built: Path
    address: Path


def _env_path(var: str, default: Path) -> Path:
    raw = os.environ.get(var, "")
    # empty string counts as unset
    return Path(raw) if raw.strip() else default


def default_paths() -> ContractPaths:
    return ContractPaths(
        contract=_env_path("CONTRACT_REGISTRY_CONTRACT_DIR", DEFAULT_BASE / "contracts"),
        built=_env_path("CONTRACT_REGISTRY_BUILD_DIR", DEFAULT_BASE / "build"),
        address=_env_path("CONTRACT_REGISTRY_ADDRESS_DIR", DEFAULT_BASE / "addresses"),
    )


__all__ = ["ContractPaths", "default_paths"]
