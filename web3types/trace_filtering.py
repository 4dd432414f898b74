"""Types for the Parity transaction-trace filtering API."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable

from web3types.block import BlockNumber
from web3types.primitives import H160, H256, U256, Bytes

_USIZE_BITS = 64
_U64_BITS = 64
_NO_ACTION = "data did not match any variant of untagged enum Action"
_NO_RESULT = "data did not match any variant of untagged enum Res"


def _object(value: Any, name: str) -> dict:
    if not isinstance(value, dict):
        raise ValueError(f"{name} must be a JSON object, got {value!r}")
    return value


def _require(obj: dict, key: str) -> Any:
    try:
        return obj[key]
    except KeyError:
        raise ValueError(f"missing field `{key}`") from None


def _uint(raw: Any, key: str, bits: int = _USIZE_BITS) -> int:
    if isinstance(raw, bool) or not isinstance(raw, int) or not 0 <= raw < 1 << bits:
        raise ValueError(f"invalid value for `{key}`: {raw!r}")
    return raw


def _enum(enum_cls: type[Enum], raw: Any, key: str) -> Any:
    if not isinstance(raw, str):
        raise ValueError(f"`{key}` must be a string, got {raw!r}")
    try:
        return enum_cls(raw)
    except ValueError:
        raise ValueError(f"unknown variant `{raw}` for `{key}`") from None


def _optional(obj: dict, key: str, parse: Callable[[Any], Any]) -> Any:
    raw = obj.get(key)
    return None if raw is None else parse(raw)


def _dump(value: Any) -> Any:
    return None if value is None else value.to_json()


def _usize_list(raw: Any, key: str) -> list[int]:
    if not isinstance(raw, list):
        raise ValueError(f"`{key}` must be a JSON array, got {raw!r}")
    return [_uint(item, key) for item in raw]


@dataclass(frozen=True)
class TraceFilter:
    """Selection of traces by block range, addresses and paging."""

    from_block: BlockNumber | None = None
    to_block: BlockNumber | None = None
    from_address: tuple[H160, ...] | None = None
    to_address: tuple[H160, ...] | None = None
    after: int | None = None
    count: int | None = None

    def to_json(self) -> dict:
        """Encode, leaving out every field that is not set."""
        out: dict[str, Any] = {}
        if self.from_block is not None:
            out["fromBlock"] = self.from_block.to_json()
        if self.to_block is not None:
            out["toBlock"] = self.to_block.to_json()
        if self.from_address is not None:
            out["fromAddress"] = [address.to_json() for address in self.from_address]
        if self.to_address is not None:
            out["toAddress"] = [address.to_json() for address in self.to_address]
        if self.after is not None:
            out["after"] = self.after
        if self.count is not None:
            out["count"] = self.count
        return out


@dataclass
class TraceFilterBuilder:
    """Builds a TraceFilter one setting at a time."""

    filter: TraceFilter = field(default_factory=TraceFilter)

    def from_block(self, block: Any) -> TraceFilterBuilder:
        self.filter = replace(self.filter, from_block=BlockNumber.of(block))
        return self

    def to_block(self, block: Any) -> TraceFilterBuilder:
        self.filter = replace(self.filter, to_block=BlockNumber.of(block))
        return self

    def to_address(self, addresses: list[H160]) -> TraceFilterBuilder:
        self.filter = replace(self.filter, to_address=tuple(addresses))
        return self

    def from_address(self, addresses: list[H160]) -> TraceFilterBuilder:
        self.filter = replace(self.filter, from_address=tuple(addresses))
        return self

    def after(self, after: int) -> TraceFilterBuilder:
        self.filter = replace(self.filter, after=_uint(after, "after"))
        return self

    def count(self, count: int) -> TraceFilterBuilder:
        self.filter = replace(self.filter, count=_uint(count, "count"))
        return self

    def build(self) -> TraceFilter:
        return self.filter


class ActionType(Enum):
    """Kind of external action."""

    CALL = "call"
    CREATE = "create"
    SUICIDE = "suicide"
    REWARD = "reward"


class CallType(Enum):
    """Kind of call."""

    NONE = "none"
    CALL = "call"
    CALL_CODE = "callcode"
    DELEGATE_CALL = "delegatecall"
    STATIC_CALL = "staticcall"


class RewardType(Enum):
    """Kind of reward."""

    BLOCK = "block"
    UNCLE = "uncle"
    EMPTY_STEP = "emptyStep"
    EXTERNAL = "external"


@dataclass
class CallResult:
    """Outcome of a call."""

    gas_used: U256 = U256()
    output: Bytes = Bytes()

    @classmethod
    def from_json(cls, value: Any) -> CallResult:
        obj = _object(value, "CallResult")
        return cls(
            gas_used=U256.from_json(_require(obj, "gasUsed")),
            output=Bytes.from_json(_require(obj, "output")),
        )

    def to_json(self) -> dict:
        return {"gasUsed": self.gas_used.to_json(), "output": self.output.to_json()}


@dataclass
class CreateResult:
    """Outcome of a contract creation."""

    gas_used: U256 = U256()
    code: Bytes = Bytes()
    address: H160 = H160()

    @classmethod
    def from_json(cls, value: Any) -> CreateResult:
        obj = _object(value, "CreateResult")
        return cls(
            gas_used=U256.from_json(_require(obj, "gasUsed")),
            code=Bytes.from_json(_require(obj, "code")),
            address=H160.from_json(_require(obj, "address")),
        )

    def to_json(self) -> dict:
        return {
            "gasUsed": self.gas_used.to_json(),
            "code": self.code.to_json(),
            "address": self.address.to_json(),
        }


@dataclass
class Call:
    """A call action."""

    from_: H160 = H160()
    to: H160 = H160()
    value: U256 = U256()
    gas: U256 = U256()
    input: Bytes = Bytes()
    call_type: CallType = CallType.NONE

    @classmethod
    def from_json(cls, value: Any) -> Call:
        obj = _object(value, "Call")
        return cls(
            from_=H160.from_json(_require(obj, "from")),
            to=H160.from_json(_require(obj, "to")),
            value=U256.from_json(_require(obj, "value")),
            gas=U256.from_json(_require(obj, "gas")),
            input=Bytes.from_json(_require(obj, "input")),
            call_type=_enum(CallType, _require(obj, "callType"), "callType"),
        )

    def to_json(self) -> dict:
        return {
            "from": self.from_.to_json(),
            "to": self.to.to_json(),
            "value": self.value.to_json(),
            "gas": self.gas.to_json(),
            "input": self.input.to_json(),
            "callType": self.call_type.value,
        }


@dataclass
class Create:
    """A contract creation action."""

    from_: H160 = H160()
    value: U256 = U256()
    gas: U256 = U256()
    init: Bytes = Bytes()

    @classmethod
    def from_json(cls, value: Any) -> Create:
        obj = _object(value, "Create")
        return cls(
            from_=H160.from_json(_require(obj, "from")),
            value=U256.from_json(_require(obj, "value")),
            gas=U256.from_json(_require(obj, "gas")),
            init=Bytes.from_json(_require(obj, "init")),
        )

    def to_json(self) -> dict:
        return {
            "from": self.from_.to_json(),
            "value": self.value.to_json(),
            "gas": self.gas.to_json(),
            "init": self.init.to_json(),
        }


@dataclass
class Suicide:
    """A self-destruct action."""

    address: H160 = H160()
    refund_address: H160 = H160()
    balance: U256 = U256()

    @classmethod
    def from_json(cls, value: Any) -> Suicide:
        obj = _object(value, "Suicide")
        return cls(
            address=H160.from_json(_require(obj, "address")),
            refund_address=H160.from_json(_require(obj, "refundAddress")),
            balance=U256.from_json(_require(obj, "balance")),
        )

    def to_json(self) -> dict:
        return {
            "address": self.address.to_json(),
            "refundAddress": self.refund_address.to_json(),
            "balance": self.balance.to_json(),
        }


@dataclass
class Reward:
    """A reward action."""

    author: H160
    value: U256
    reward_type: RewardType

    @classmethod
    def from_json(cls, value: Any) -> Reward:
        obj = _object(value, "Reward")
        return cls(
            author=H160.from_json(_require(obj, "author")),
            value=U256.from_json(_require(obj, "value")),
            reward_type=_enum(RewardType, _require(obj, "rewardType"), "rewardType"),
        )

    def to_json(self) -> dict:
        return {
            "author": self.author.to_json(),
            "value": self.value.to_json(),
            "rewardType": self.reward_type.value,
        }


def action_from_json(value: Any) -> Call | Create | Suicide | Reward:
    """Parse an action as the first of call, create, suicide or reward that fits."""
    for kind in (Call, Create, Suicide, Reward):
        try:
            return kind.from_json(value)
        except ValueError:
            continue
    raise ValueError(_NO_ACTION)


def result_from_json(value: Any) -> CallResult | CreateResult | None:
    """Parse a result as a call result, else a create result; null gives None."""
    if value is None:
        return None
    for kind in (CallResult, CreateResult):
        try:
            return kind.from_json(value)
        except ValueError:
            continue
    raise ValueError(_NO_RESULT)


@dataclass
class Trace:
    """A trace located in a block and transaction."""

    action: Call | Create | Suicide | Reward
    result: CallResult | CreateResult | None
    trace_address: list[int]
    subtraces: int
    transaction_position: int | None
    transaction_hash: H256 | None
    block_number: int
    block_hash: H256
    action_type: ActionType
    error: str | None = None

    @classmethod
    def from_json(cls, value: Any) -> Trace:
        obj = _object(value, "Trace")
        error = obj.get("error")
        if error is not None and not isinstance(error, str):
            raise ValueError(f"`error` must be a string, got {error!r}")
        return cls(
            action=action_from_json(_require(obj, "action")),
            result=result_from_json(obj.get("result")),
            trace_address=_usize_list(_require(obj, "traceAddress"), "traceAddress"),
            subtraces=_uint(_require(obj, "subtraces"), "subtraces"),
            transaction_position=_optional(
                obj, "transactionPosition", lambda raw: _uint(raw, "transactionPosition")
            ),
            transaction_hash=_optional(obj, "transactionHash", H256.from_json),
            block_number=_uint(_require(obj, "blockNumber"), "blockNumber", _U64_BITS),
            block_hash=H256.from_json(_require(obj, "blockHash")),
            action_type=_enum(ActionType, _require(obj, "type"), "type"),
            error=error,
        )

    def to_json(self) -> dict:
        return {
            "action": self.action.to_json(),
            "result": _dump(self.result),
            "traceAddress": list(self.trace_address),
            "subtraces": self.subtraces,
            "transactionPosition": self.transaction_position,
            "transactionHash": _dump(self.transaction_hash),
            "blockNumber": self.block_number,
            "blockHash": self.block_hash.to_json(),
            "type": self.action_type.value,
            "error": self.error,
        }