"""Account and storage proofs returned by ``eth_getProof``."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from web3types.primitives import H256, U256, Bytes


def _object(value: Any, name: str) -> dict:
    if not isinstance(value, dict):
        raise ValueError(f"{name} must be a JSON object, got {value!r}")
    return value


def _require(obj: dict, key: str) -> Any:
    try:
        return obj[key]
    except KeyError:
        raise ValueError(f"missing field `{key}`") from None


def _bytes_list(value: Any, key: str) -> list[Bytes]:
    if not isinstance(value, list):
        raise ValueError(f"`{key}` must be a JSON array, got {value!r}")
    return [Bytes.from_json(item) for item in value]


@dataclass
class StorageProof:
    """A storage key, its value and the proof of it."""

    key: U256 = U256()
    value: U256 = U256()
    proof: list[Bytes] = field(default_factory=list)

    @classmethod
    def from_json(cls, value: Any) -> StorageProof:
        obj = _object(value, "StorageProof")
        return cls(
            key=U256.from_json(_require(obj, "key")),
            value=U256.from_json(_require(obj, "value")),
            proof=_bytes_list(_require(obj, "proof"), "proof"),
        )

    def to_json(self) -> dict:
        return {
            "key": self.key.to_json(),
            "value": self.value.to_json(),
            "proof": [item.to_json() for item in self.proof],
        }


@dataclass
class Proof:
    """Account state with Merkle proofs for the account and requested storage."""

    balance: U256 = U256()
    code_hash: H256 = H256()
    nonce: U256 = U256()
    storage_hash: H256 = H256()
    account_proof: list[Bytes] = field(default_factory=list)
    storage_proof: list[StorageProof] = field(default_factory=list)

    @classmethod
    def from_json(cls, value: Any) -> Proof:
        obj = _object(value, "Proof")
        storage = _require(obj, "storageProof")
        if not isinstance(storage, list):
            raise ValueError(f"`storageProof` must be a JSON array, got {storage!r}")
        return cls(
            balance=U256.from_json(_require(obj, "balance")),
            code_hash=H256.from_json(_require(obj, "codeHash")),
            nonce=U256.from_json(_require(obj, "nonce")),
            storage_hash=H256.from_json(_require(obj, "storageHash")),
            account_proof=_bytes_list(_require(obj, "accountProof"), "accountProof"),
            storage_proof=[StorageProof.from_json(item) for item in storage],
        )

    def to_json(self) -> dict:
        return {
            "balance": self.balance.to_json(),
            "codeHash": self.code_hash.to_json(),
            "nonce": self.nonce.to_json(),
            "storageHash": self.storage_hash.to_json(),
            "accountProof": [item.to_json() for item in self.account_proof],
            "storageProof": [item.to_json() for item in self.storage_proof],
        }