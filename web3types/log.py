"""Logs produced by transactions, and filters that select them."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Callable, Iterable

from web3types.block import BlockNumber
from web3types.primitives import H160, H256, U64, U256, Bytes


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


def _dump(value: Any) -> Any:
    return None if value is None else value.to_json()


def _string(raw: Any) -> str:
    if not isinstance(raw, str):
        raise ValueError(f"expected a string, got {raw!r}")
    return raw


def _boolean(raw: Any) -> bool:
    if not isinstance(raw, bool):
        raise ValueError(f"expected a boolean, got {raw!r}")
    return raw


@dataclass
class Log:
    """A log entry emitted by a transaction."""

    address: H160
    topics: list[H256] = field(default_factory=list)
    data: Bytes = Bytes()
    block_hash: H256 | None = None
    block_number: U64 | None = None
    transaction_hash: H256 | None = None
    transaction_index: U64 | None = None
    log_index: U256 | None = None
    transaction_log_index: U256 | None = None
    log_type: str | None = None
    removed: bool | None = None

    def is_removed(self) -> bool:
        """True if the log was removed by a chain reorganisation."""
        if self.removed is not None:
            return self.removed
        return self.log_type == "removed"

    @classmethod
    def from_json(cls, value: Any) -> Log:
        obj = _object(value, "Log")
        topics = _require(obj, "topics")
        if not isinstance(topics, list):
            raise ValueError(f"`topics` must be a JSON array, got {topics!r}")
        return cls(
            address=H160.from_json(_require(obj, "address")),
            topics=[H256.from_json(topic) for topic in topics],
            data=Bytes.from_json(_require(obj, "data")),
            block_hash=_optional(obj, "blockHash", H256.from_json),
            block_number=_optional(obj, "blockNumber", U64.from_json),
            transaction_hash=_optional(obj, "transactionHash", H256.from_json),
            transaction_index=_optional(obj, "transactionIndex", U64.from_json),
            log_index=_optional(obj, "logIndex", U256.from_json),
            transaction_log_index=_optional(obj, "transactionLogIndex", U256.from_json),
            log_type=_optional(obj, "logType", _string),
            removed=_optional(obj, "removed", _boolean),
        )

    def to_json(self) -> dict:
        return {
            "address": self.address.to_json(),
            "topics": [topic.to_json() for topic in self.topics],
            "data": self.data.to_json(),
            "blockHash": _dump(self.block_hash),
            "blockNumber": _dump(self.block_number),
            "transactionHash": _dump(self.transaction_hash),
            "transactionIndex": _dump(self.transaction_index),
            "logIndex": _dump(self.log_index),
            "transactionLogIndex": _dump(self.transaction_log_index),
            "logType": self.log_type,
            "removed": self.removed,
        }


@dataclass(frozen=True)
class Topic:
    """A topic position in a filter: any value, or one of the given values."""

    values: tuple[H256, ...] | None = None

    @classmethod
    def any(cls) -> Topic:
        return cls()

    @classmethod
    def one_of(cls, values: Iterable[H256]) -> Topic:
        return cls(tuple(values))

    @classmethod
    def this(cls, value: H256) -> Topic:
        return cls((value,))

    def to_option(self) -> list[H256] | None:
        """None for any value, else the list of accepted values."""
        return None if self.values is None else list(self.values)


@dataclass(frozen=True)
class TopicFilter:
    """Filters for the four topic positions."""

    topic0: Topic = field(default_factory=Topic.any)
    topic1: Topic = field(default_factory=Topic.any)
    topic2: Topic = field(default_factory=Topic.any)
    topic3: Topic = field(default_factory=Topic.any)


def _value_or_array(items: tuple) -> Any:
    if not items:
        return None
    if len(items) == 1:
        return items[0].to_json()
    return [item.to_json() for item in items]


@dataclass(frozen=True)
class Filter:
    """Selection of logs by block range or hash, addresses and topics."""

    from_block: BlockNumber | None = None
    to_block: BlockNumber | None = None
    block_hash: H256 | None = None
    address: tuple[H160, ...] | None = None
    topics: tuple[tuple[H256, ...] | None, ...] | None = None
    limit: int | None = None

    def to_json(self) -> dict:
        """Encode, leaving out unset fields; one address or topic becomes a plain value."""
        out: dict[str, Any] = {}
        if self.from_block is not None:
            out["fromBlock"] = self.from_block.to_json()
        if self.to_block is not None:
            out["toBlock"] = self.to_block.to_json()
        if self.block_hash is not None:
            out["blockHash"] = self.block_hash.to_json()
        if self.address is not None:
            out["address"] = _value_or_array(self.address)
        if self.topics is not None:
            out["topics"] = [None if topic is None else _value_or_array(topic) for topic in self.topics]
        if self.limit is not None:
            out["limit"] = self.limit
        return out


@dataclass
class FilterBuilder:
    """Builds a Filter one setting at a time."""

    filter: Filter = field(default_factory=Filter)

    def from_block(self, block: Any) -> FilterBuilder:
        """Set the first block; clears a block hash set before."""
        self.filter = replace(self.filter, block_hash=None, from_block=BlockNumber.of(block))
        return self

    def to_block(self, block: Any) -> FilterBuilder:
        """Set the last block; clears a block hash set before."""
        self.filter = replace(self.filter, block_hash=None, to_block=BlockNumber.of(block))
        return self

    def block_hash(self, block_hash: H256) -> FilterBuilder:
        """Select a single block by hash; clears the block range."""
        self.filter = replace(self.filter, from_block=None, to_block=None, block_hash=block_hash)
        return self

    def address(self, addresses: Iterable[H160]) -> FilterBuilder:
        self.filter = replace(self.filter, address=tuple(addresses))
        return self

    def topics(
        self,
        topic1: Iterable[H256] | None,
        topic2: Iterable[H256] | None,
        topic3: Iterable[H256] | None,
        topic4: Iterable[H256] | None,
    ) -> FilterBuilder:
        """Set the four topic positions; trailing positions left as None are dropped."""
        positions = [None if topic is None else tuple(topic) for topic in (topic1, topic2, topic3, topic4)]
        while positions and positions[-1] is None:
            positions.pop()
        self.filter = replace(self.filter, topics=tuple(positions))
        return self

    def topic_filter(self, topic_filter: TopicFilter) -> FilterBuilder:
        return self.topics(
            topic_filter.topic0.to_option(),
            topic_filter.topic1.to_option(),
            topic_filter.topic2.to_option(),
            topic_filter.topic3.to_option(),
        )

    def limit(self, limit: int) -> FilterBuilder:
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
            raise ValueError(f"limit must be a non-negative integer, got {limit!r}")
        self.filter = replace(self.filter, limit=limit)
        return self

    def build(self) -> Filter:
        return self.filter