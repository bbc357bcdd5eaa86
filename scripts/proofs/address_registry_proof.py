"""scripts.proofs.address_registry_proof

Proof: address registry is append-only and index-stable.

This proof:
- Records two addresses for one contract under a scratch root
- Verifies the registry grows by exactly 2 lines
- Verifies returned indexes match get() and get_all() order
- Verifies a second store instance on the same root reads the same sequence
"""

from __future__ import annotations

import sys
import tempfile
from pathlib import Path

# Ensure repo root is on sys.path so `import contract_registry` works when run as a script.
sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from contract_registry.addresses import AddressStore  # noqa: E402
from contract_registry.config import ContractPaths  # noqa: E402
from contract_registry.contracts import Contracts  # noqa: E402


def main() -> int:
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        contracts = Contracts(
            ContractPaths(contract=root / "contracts", built=root / "build", address=root / "addresses")
        )
        registry_path = contracts.addresses.store.registry_path

        i0 = contracts.addresses.set("ProofToken", "0xAAA")
        i1 = contracts.addresses.set("ProofToken", "0xBBB")

        lines = registry_path.read_text(encoding="utf-8").splitlines()
        if len(lines) != 2:
            print(f"FAIL: registry line count expected 2, got {len(lines)}", file=sys.stderr)
            return 1
        if (i0, i1) != (0, 1):
            print(f"FAIL: indexes expected (0, 1), got {(i0, i1)}", file=sys.stderr)
            return 1

        seq = contracts.addresses.get_all("ProofToken")
        if seq != [contracts.addresses.get("ProofToken", i) for i in range(len(seq))]:
            print("FAIL: get_all order disagrees with get()", file=sys.stderr)
            return 1

        reread = AddressStore(contracts.paths.address).get_all("ProofToken")
        if reread != seq:
            print("FAIL: second instance read a different sequence", file=sys.stderr)
            return 1

        print("OK: address_registry_proof passed")
        print(f"registry_path={registry_path}")
        print(f"addresses={seq}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
