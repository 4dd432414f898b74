"""Blocks, block headers and the ways of naming a block in JSON-RPC calls."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

from web3types.primitives import H64, H160, H256, H2048, U64, U256, Bytes

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")


class BlockTag(Enum):
    """Named blocks understood by JSON-RPC nodes."""

    FINALIZED = "finalized"
    SAFE = "safe"
    LATEST = "latest"
    EARLIEST = "earliest"
    PENDING = "pending"


@dataclass(frozen=True)
class BlockNumber:
    """A block given by tag or by its number on the canonical chain."""

    value: BlockTag | U64

    def __post_init__(self) -> None:
        if isinstance(self.value, (BlockTag, U64)):
            return
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"a block number is a tag or an integer, not {self.value!r}")
        object.__setattr__(self, "value", U64(self.value))

    @classmethod
    def of(cls, value: Any) -> BlockNumber:
        """Wrap a tag or an integer; a BlockNumber is returned unchanged."""
        if isinstance(value, BlockNumber):
            return value
        return cls(value)

    @classmethod
    def from_json(cls, value: Any) -> BlockNumber:
        if not isinstance(value, str):
            raise ValueError(f"invalid type: expected a block number string, got {value!r}")
        try:
            return cls(BlockTag(value))
        except ValueError:
            pass
        if not value.startswith("0x"):
            raise ValueError("invalid block number: missing 0x prefix")
        digits = value[2:]
        if not _HEX_DIGITS.fullmatch(digits):
            raise ValueError(f"invalid block number: invalid hex digits {digits!r}")
        try:
            return cls(U64(int(digits, 16)))
        except OverflowError as exc:
            raise ValueError(f"invalid block number: {exc}") from exc

    def to_json(self) -> str:
        if isinstance(self.value, BlockTag):
            return self.value.value
        return f"0x{int(self.value):x}"


@dataclass(frozen=True)
class BlockId:
    """A block identified by hash or by number."""

    value: H256 | BlockNumber

    def __post_init__(self) -> None:
        if isinstance(self.value, (H256, BlockNumber)):
            return
        object.__setattr__(self, "value", BlockNumber(self.value))

    @classmethod
    def of(cls, value: Any) -> BlockId:
        """Wrap a hash, a block number, a tag or an integer."""
        if isinstance(value, BlockId):
            return value
        return cls(value)

    def to_json(self) -> dict | str:
        if isinstance(self.value, H256):
            return {"blockHash": self.value.to_json()}
        return self.value.to_json()


def _object(value: Any, name: str) -> dict:
    if not isinstance(value, dict):
        raise ValueError(f"{name} must be a JSON object, got {value!r}")
    return value


def _field(obj: dict, key: str, parse: Callable[[Any], Any]) -> Any:
    if key not in obj:
        raise ValueError(f"missing field `{key}`")
    return parse(obj[key])


def _optional(obj: dict, key: str, parse: Callable[[Any], Any]) -> Any:
    raw = obj.get(key)
    return None if raw is None else parse(raw)


def _list(obj: dict, key: str, parse: Callable[[Any], Any], *, default: bool = False) -> list:
    if key not in obj:
        if default:
            return []
        raise ValueError(f"missing field `{key}`")
    raw = obj[key]
    if not isinstance(raw, list):
        raise ValueError(f"`{key}` must be a JSON array, got {raw!r}")
    return [parse(item) for item in raw]


def _dump(value: Any) -> Any:
    return None if value is None else value.to_json()


def _common_fields(obj: dict) -> dict:
    """Fields shared by blocks and block headers, parsed from a JSON object."""
    return {
        "hash": _optional(obj, "hash", H256.from_json),
        "parent_hash": _field(obj, "parentHash", H256.from_json),
        "uncles_hash": _field(obj, "sha3Uncles", H256.from_json),
        # A null or absent miner is accepted and means the zero address.
        "author": _optional(obj, "miner", H160.from_json) or H160(),
        "state_root": _field(obj, "stateRoot", H256.from_json),
        "transactions_root": _field(obj, "transactionsRoot", H256.from_json),
        "receipts_root": _field(obj, "receiptsRoot", H256.from_json),
        "number": _optional(obj, "number", U64.from_json),
        "gas_used": _field(obj, "gasUsed", U256.from_json),
        "gas_limit": _field(obj, "gasLimit", U256.from_json),
        "base_fee_per_gas": _optional(obj, "baseFeePerGas", U256.from_json),
        "extra_data": _field(obj, "extraData", Bytes.from_json),
        "timestamp": _field(obj, "timestamp", U256.from_json),
        "difficulty": _field(obj, "difficulty", U256.from_json),
        "mix_hash": _optional(obj, "mixHash", H256.from_json),
        "nonce": _optional(obj, "nonce", H64.from_json),
    }


@dataclass
class BlockHeader:
    """Block header as returned by RPC calls."""

    hash: H256 | None = None
    parent_hash: H256 = H256()
    uncles_hash: H256 = H256()
    author: H160 = H160()
    state_root: H256 = H256()
    transactions_root: H256 = H256()
    receipts_root: H256 = H256()
    number: U64 | None = None
    gas_used: U256 = U256()
    gas_limit: U256 = U256()
    base_fee_per_gas: U256 | None = None
    extra_data: Bytes = Bytes()
    logs_bloom: H2048 = H2048()
    timestamp: U256 = U256()
    difficulty: U256 = U256()
    mix_hash: H256 | None = None
    nonce: H64 | None = None

    @classmethod
    def from_json(cls, value: Any) -> BlockHeader:
        obj = _object(value, "BlockHeader")
        return cls(logs_bloom=_field(obj, "logsBloom", H2048.from_json), **_common_fields(obj))

    def to_json(self) -> dict:
        out: dict[str, Any] = {
            "hash": _dump(self.hash),
            "parentHash": self.parent_hash.to_json(),
            "sha3Uncles": self.uncles_hash.to_json(),
            "miner": self.author.to_json(),
            "stateRoot": self.state_root.to_json(),
            "transactionsRoot": self.transactions_root.to_json(),
            "receiptsRoot": self.receipts_root.to_json(),
            "number": _dump(self.number),
            "gasUsed": self.gas_used.to_json(),
            "gasLimit": self.gas_limit.to_json(),
        }
        if self.base_fee_per_gas is not None:
            out["baseFeePerGas"] = self.base_fee_per_gas.to_json()
        out.update(
            {
                "extraData": self.extra_data.to_json(),
                "logsBloom": self.logs_bloom.to_json(),
                "timestamp": self.timestamp.to_json(),
                "difficulty": self.difficulty.to_json(),
                "mixHash": _dump(self.mix_hash),
                "nonce": _dump(self.nonce),
            }
        )
        return out


@dataclass
class Block:
    """A block as returned by RPC calls; transactions are hashes or full objects."""

    hash: H256 | None = None
    parent_hash: H256 = H256()
    uncles_hash: H256 = H256()
    author: H160 = H160()
    state_root: H256 = H256()
    transactions_root: H256 = H256()
    receipts_root: H256 = H256()
    number: U64 | None = None
    gas_used: U256 = U256()
    gas_limit: U256 = U256()
    base_fee_per_gas: U256 | None = None
    extra_data: Bytes = Bytes()
    logs_bloom: H2048 | None = None
    timestamp: U256 = U256()
    difficulty: U256 = U256()
    total_difficulty: U256 | None = None
    seal_fields: list[Bytes] = field(default_factory=list)
    uncles: list[H256] = field(default_factory=list)
    transactions: list[Any] = field(default_factory=list)
    size: U256 | None = None
    mix_hash: H256 | None = None
    nonce: H64 | None = None

    @classmethod
    def from_json(cls, value: Any, parse_transaction: Callable[[Any], Any] | None = None) -> Block:
        """Parse a block; each transaction goes through ``parse_transaction`` if given."""
        obj = _object(value, "Block")
        parse_tx = parse_transaction if parse_transaction is not None else (lambda item: item)
        return cls(
            logs_bloom=_optional(obj, "logsBloom", H2048.from_json),
            total_difficulty=_optional(obj, "totalDifficulty", U256.from_json),
            seal_fields=_list(obj, "sealFields", Bytes.from_json, default=True),
            uncles=_list(obj, "uncles", H256.from_json),
            transactions=_list(obj, "transactions", parse_tx),
            size=_optional(obj, "size", U256.from_json),
            **_common_fields(obj),
        )

    def to_json(self, dump_transaction: Callable[[Any], Any] | None = None) -> dict:
        """Encode the block; each transaction goes through ``dump_transaction`` if given."""
        dump_tx = dump_transaction if dump_transaction is not None else (lambda item: item)
        out: dict[str, Any] = {
            "hash": _dump(self.hash),
            "parentHash": self.parent_hash.to_json(),
            "sha3Uncles": self.uncles_hash.to_json(),
            "miner": self.author.to_json(),
            "stateRoot": self.state_root.to_json(),
            "transactionsRoot": self.transactions_root.to_json(),
            "receiptsRoot": self.receipts_root.to_json(),
            "number": _dump(self.number),
            "gasUsed": self.gas_used.to_json(),
            "gasLimit": self.gas_limit.to_json(),
        }
        if self.base_fee_per_gas is not None:
            out["baseFeePerGas"] = self.base_fee_per_gas.to_json()
        out.update(
            {
                "extraData": self.extra_data.to_json(),
                "logsBloom": _dump(self.logs_bloom),
                "timestamp": self.timestamp.to_json(),
                "difficulty": self.difficulty.to_json(),
                "totalDifficulty": _dump(self.total_difficulty),
                "sealFields": [item.to_json() for item in self.seal_fields],
                "uncles": [item.to_json() for item in self.uncles],
                "transactions": [dump_tx(item) for item in self.transactions],
                "size": _dump(self.size),
                "mixHash": _dump(self.mix_hash),
                "nonce": _dump(self.nonce),
            }
        )
        return out