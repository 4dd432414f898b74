"""Transactions, their receipts and access lists."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from web3types.log import Log
from web3types.primitives import H160, H256, H2048, U64, U256, Bytes


def _object(value: Any, name: str) -> dict:
    if not isinstance(value, dict):
        raise ValueError(f"{name} must be a JSON object, got {value!r}")
    return value


def _require(obj: dict, key: str) -> Any:
    try:
        return obj[key]
    except KeyError:
        raise ValueError(f"missing field `{key}`") from None


def _optional(obj: dict, key: str, parse: Callable[[Any], Any]) -> Any:
    raw = obj.get(key)
    return None if raw is None else parse(raw)


def _array(raw: Any, key: str) -> list:
    if not isinstance(raw, list):
        raise ValueError(f"`{key}` must be a JSON array, got {raw!r}")
    return raw


def _dump(value: Any) -> Any:
    return None if value is None else value.to_json()


def _access_list(raw: Any) -> list[AccessListItem]:
    return [AccessListItem.from_json(item) for item in _array(raw, "accessList")]


@dataclass
class AccessListItem:
    """An address and the storage keys a transaction accesses in it."""

    address: H160 = H160()
    storage_keys: list[H256] = field(default_factory=list)

    @classmethod
    def from_json(cls, value: Any) -> AccessListItem:
        obj = _object(value, "AccessListItem")
        return cls(
            address=H160.from_json(_require(obj, "address")),
            storage_keys=[H256.from_json(key) for key in _array(_require(obj, "storageKeys"), "storageKeys")],
        )

    def to_json(self) -> dict:
        return {
            "address": self.address.to_json(),
            "storageKeys": [key.to_json() for key in self.storage_keys],
        }


@dataclass
class Transaction:
    """A transaction, pending or in the chain."""

    hash: H256 = H256()
    nonce: U256 = U256()
    block_hash: H256 | None = None
    block_number: U64 | None = None
    transaction_index: U64 | None = None
    from_: H160 | None = None
    to: H160 | None = None
    value: U256 = U256()
    gas_price: U256 | None = None
    gas: U256 = U256()
    input: Bytes = Bytes()
    v: U64 | None = None
    r: U256 | None = None
    s: U256 | None = None
    raw: Bytes | None = None
    transaction_type: U64 | None = None
    access_list: list[AccessListItem] | None = None
    max_fee_per_gas: U256 | None = None
    max_priority_fee_per_gas: U256 | None = None

    @classmethod
    def from_json(cls, value: Any) -> Transaction:
        obj = _object(value, "Transaction")
        return cls(
            hash=H256.from_json(_require(obj, "hash")),
            nonce=U256.from_json(_require(obj, "nonce")),
            block_hash=_optional(obj, "blockHash", H256.from_json),
            block_number=_optional(obj, "blockNumber", U64.from_json),
            transaction_index=_optional(obj, "transactionIndex", U64.from_json),
            from_=_optional(obj, "from", H160.from_json),
            to=_optional(obj, "to", H160.from_json),
            value=U256.from_json(_require(obj, "value")),
            gas_price=_optional(obj, "gasPrice", U256.from_json),
            gas=U256.from_json(_require(obj, "gas")),
            input=Bytes.from_json(_require(obj, "input")),
            v=_optional(obj, "v", U64.from_json),
            r=_optional(obj, "r", U256.from_json),
            s=_optional(obj, "s", U256.from_json),
            raw=_optional(obj, "raw", Bytes.from_json),
            transaction_type=_optional(obj, "type", U64.from_json),
            access_list=_optional(obj, "accessList", _access_list),
            max_fee_per_gas=_optional(obj, "maxFeePerGas", U256.from_json),
            max_priority_fee_per_gas=_optional(obj, "maxPriorityFeePerGas", U256.from_json),
        )

    def to_json(self) -> dict:
        """Encode; optional signature, type and fee fields are left out when unset."""
        out: dict[str, Any] = {
            "hash": self.hash.to_json(),
            "nonce": self.nonce.to_json(),
            "blockHash": _dump(self.block_hash),
            "blockNumber": _dump(self.block_number),
            "transactionIndex": _dump(self.transaction_index),
        }
        if self.from_ is not None:
            out["from"] = self.from_.to_json()
        out.update(
            {
                "to": _dump(self.to),
                "value": self.value.to_json(),
                "gasPrice": _dump(self.gas_price),
                "gas": self.gas.to_json(),
                "input": self.input.to_json(),
            }
        )
        optional = {
            "v": self.v,
            "r": self.r,
            "s": self.s,
            "raw": self.raw,
            "type": self.transaction_type,
        }
        out.update({key: item.to_json() for key, item in optional.items() if item is not None})
        if self.access_list is not None:
            out["accessList"] = [item.to_json() for item in self.access_list]
        if self.max_fee_per_gas is not None:
            out["maxFeePerGas"] = self.max_fee_per_gas.to_json()
        if self.max_priority_fee_per_gas is not None:
            out["maxPriorityFeePerGas"] = self.max_priority_fee_per_gas.to_json()
        return out


@dataclass
class Receipt:
    """Details of an executed transaction."""

    transaction_hash: H256 = H256()
    transaction_index: U64 = U64(0)
    block_hash: H256 | None = None
    block_number: U64 | None = None
    # The zero address when the node did not report a sender.
    from_: H160 = H160()
    to: H160 | None = None
    cumulative_gas_used: U256 = U256()
    gas_used: U256 | None = None
    contract_address: H160 | None = None
    logs: list[Log] = field(default_factory=list)
    status: U64 | None = None
    root: H256 | None = None
    logs_bloom: H2048 = H2048()
    transaction_type: U64 | None = None
    effective_gas_price: U256 | None = None

    @classmethod
    def from_json(cls, value: Any) -> Receipt:
        obj = _object(value, "Receipt")
        return cls(
            transaction_hash=H256.from_json(_require(obj, "transactionHash")),
            transaction_index=U64.from_json(_require(obj, "transactionIndex")),
            block_hash=_optional(obj, "blockHash", H256.from_json),
            block_number=_optional(obj, "blockNumber", U64.from_json),
            from_=H160.from_json(obj["from"]) if "from" in obj else H160(),
            to=_optional(obj, "to", H160.from_json),
            cumulative_gas_used=U256.from_json(_require(obj, "cumulativeGasUsed")),
            gas_used=_optional(obj, "gasUsed", U256.from_json),
            contract_address=_optional(obj, "contractAddress", H160.from_json),
            logs=[Log.from_json(item) for item in _array(_require(obj, "logs"), "logs")],
            status=_optional(obj, "status", U64.from_json),
            root=_optional(obj, "root", H256.from_json),
            logs_bloom=H2048.from_json(_require(obj, "logsBloom")),
            transaction_type=_optional(obj, "type", U64.from_json),
            effective_gas_price=_optional(obj, "effectiveGasPrice", U256.from_json),
        )

    def to_json(self) -> dict:
        out: dict[str, Any] = {
            "transactionHash": self.transaction_hash.to_json(),
            "transactionIndex": self.transaction_index.to_json(),
            "blockHash": _dump(self.block_hash),
            "blockNumber": _dump(self.block_number),
            "from": self.from_.to_json(),
            "to": _dump(self.to),
            "cumulativeGasUsed": self.cumulative_gas_used.to_json(),
            "gasUsed": _dump(self.gas_used),
            "contractAddress": _dump(self.contract_address),
            "logs": [log.to_json() for log in self.logs],
            "status": _dump(self.status),
            "root": _dump(self.root),
            "logsBloom": self.logs_bloom.to_json(),
        }
        if self.transaction_type is not None:
            out["type"] = self.transaction_type.to_json()
        out["effectiveGasPrice"] = _dump(self.effective_gas_price)
        return out


@dataclass
class RawTransaction:
    """A signed transaction not yet sent: its raw bytes and its details."""

    raw: Bytes = Bytes()
    tx: Transaction = field(default_factory=Transaction)

    @classmethod
    def from_json(cls, value: Any) -> RawTransaction:
        obj = _object(value, "RawTransaction")
        return cls(
            raw=Bytes.from_json(_require(obj, "raw")),
            tx=Transaction.from_json(_require(obj, "tx")),
        )

    def to_json(self) -> dict:
        return {"raw": self.raw.to_json(), "tx": self.tx.to_json()}