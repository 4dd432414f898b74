"""Miner's work package."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from web3types.primitives import H256, U256


@dataclass(frozen=True)
class Work:
    """Proof-of-work hash, seed hash, target and, when known, the block number."""

    pow_hash: H256
    seed_hash: H256
    target: H256
    number: int | None = None

    @classmethod
    def from_json(cls, value: Any) -> Work:
        """Parse a JSON array of three hashes and an optional integer block number."""
        if not isinstance(value, (list, tuple)) or len(value) not in (3, 4):
            raise ValueError(f"Cannot deserialize Work: expected an array of 3 or 4 items, got {value!r}")
        try:
            pow_hash, seed_hash, target = (H256.from_json(item) for item in value[:3])
        except ValueError as exc:
            raise ValueError(f"Cannot deserialize Work: {exc}") from exc
        number = None
        if len(value) == 4:
            raw = value[3]
            if isinstance(raw, bool) or not isinstance(raw, int) or not 0 <= raw < 1 << 64:
                raise ValueError(f"Cannot deserialize Work: invalid block number {raw!r}")
            number = raw
        return cls(pow_hash, seed_hash, target, number)

    def to_json(self) -> list[str]:
        """Encode as a JSON array; the block number, if any, as a hex quantity."""
        items = [self.pow_hash.to_json(), self.seed_hash.to_json(), self.target.to_json()]
        if self.number is not None:
            items.append(U256(self.number).to_json())
        return items