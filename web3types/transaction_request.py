"""Requests for ``eth_call``, ``eth_estimateGas`` and ``eth_sendTransaction``."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Callable, Iterable

from web3types.primitives import H160, U64, U256, Bytes
from web3types.transaction import AccessListItem

_U64_LIMIT = 1 << 64


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


def _u64(raw: Any, key: str) -> int:
    if isinstance(raw, bool) or not isinstance(raw, int) or not 0 <= raw < _U64_LIMIT:
        raise ValueError(f"invalid value for `{key}`: {raw!r}")
    return raw


def _access_list(raw: Any) -> list[AccessListItem]:
    if not isinstance(raw, list):
        raise ValueError(f"`accessList` must be a JSON array, got {raw!r}")
    return [AccessListItem.from_json(item) for item in raw]


def _bytes(data: Any) -> Bytes:
    return data if isinstance(data, Bytes) else Bytes(data)


def _put_optional(out: dict, pairs: Iterable[tuple[str, Any]]) -> dict:
    """Add each set value as JSON, leaving out the ones that are None."""
    for key, item in pairs:
        if item is None:
            continue
        if isinstance(item, list):
            out[key] = [entry.to_json() for entry in item]
        else:
            out[key] = item.to_json()
    return out


@dataclass(frozen=True)
class TransactionCondition:
    """A minimum block number or unix time; exactly one of the two is set."""

    block: int | None = None
    time: int | None = None

    def __post_init__(self) -> None:
        if (self.block is None) == (self.time is None):
            raise ValueError("a transaction condition is either a block number or a time")
        if self.block is not None:
            _u64(self.block, "block")
        else:
            _u64(self.time, "time")

    @classmethod
    def from_json(cls, value: Any) -> TransactionCondition:
        obj = _object(value, "TransactionCondition")
        if len(obj) != 1:
            raise ValueError(f"a transaction condition must have exactly one key, got {obj!r}")
        key, raw = next(iter(obj.items()))
        if key == "block":
            return cls(block=_u64(raw, "block"))
        if key == "time":
            return cls(time=_u64(raw, "time"))
        raise ValueError(f"unknown variant `{key}`, expected `block` or `time`")

    def to_json(self) -> dict:
        if self.block is not None:
            return {"block": self.block}
        return {"time": self.time}


@dataclass
class CallRequest:
    """A contract call; for ``eth_call`` the ``to`` field must be set."""

    from_: H160 | None = None
    to: H160 | None = None
    gas: U256 | None = None
    gas_price: U256 | None = None
    value: U256 | None = None
    data: Bytes | None = None
    transaction_type: U64 | None = None
    access_list: list[AccessListItem] | None = None
    max_fee_per_gas: U256 | None = None
    max_priority_fee_per_gas: U256 | None = None

    @classmethod
    def builder(cls) -> CallRequestBuilder:
        return CallRequestBuilder()

    @classmethod
    def from_json(cls, value: Any) -> CallRequest:
        obj = _object(value, "CallRequest")
        return cls(
            from_=_optional(obj, "from", H160.from_json),
            to=_optional(obj, "to", H160.from_json),
            gas=_optional(obj, "gas", U256.from_json),
            gas_price=_optional(obj, "gasPrice", U256.from_json),
            value=_optional(obj, "value", U256.from_json),
            data=_optional(obj, "data", Bytes.from_json),
            transaction_type=_optional(obj, "type", U64.from_json),
            access_list=_optional(obj, "accessList", _access_list),
            max_fee_per_gas=_optional(obj, "maxFeePerGas", U256.from_json),
            max_priority_fee_per_gas=_optional(obj, "maxPriorityFeePerGas", U256.from_json),
        )

    def to_json(self) -> dict:
        """Encode, leaving out every field that is not set."""
        return _put_optional(
            {},
            [
                ("from", self.from_),
                ("to", self.to),
                ("gas", self.gas),
                ("gasPrice", self.gas_price),
                ("value", self.value),
                ("data", self.data),
                ("type", self.transaction_type),
                ("accessList", self.access_list),
                ("maxFeePerGas", self.max_fee_per_gas),
                ("maxPriorityFeePerGas", self.max_priority_fee_per_gas),
            ],
        )


@dataclass
class CallRequestBuilder:
    """Builds a CallRequest one setting at a time."""

    call_request: CallRequest = field(default_factory=CallRequest)

    def from_(self, address: H160) -> CallRequestBuilder:
        self.call_request = replace(self.call_request, from_=H160(address))
        return self

    def to(self, address: H160) -> CallRequestBuilder:
        self.call_request = replace(self.call_request, to=H160(address))
        return self

    def gas(self, gas: Any) -> CallRequestBuilder:
        self.call_request = replace(self.call_request, gas=U256(gas))
        return self

    def gas_price(self, gas_price: Any) -> CallRequestBuilder:
        self.call_request = replace(self.call_request, gas_price=U256(gas_price))
        return self

    def value(self, value: Any) -> CallRequestBuilder:
        self.call_request = replace(self.call_request, value=U256(value))
        return self

    def data(self, data: Any) -> CallRequestBuilder:
        self.call_request = replace(self.call_request, data=_bytes(data))
        return self

    def transaction_type(self, transaction_type: Any) -> CallRequestBuilder:
        self.call_request = replace(self.call_request, transaction_type=U64(transaction_type))
        return self

    def access_list(self, access_list: Iterable[AccessListItem]) -> CallRequestBuilder:
        self.call_request = replace(self.call_request, access_list=list(access_list))
        return self

    def build(self) -> CallRequest:
        return replace(self.call_request)


@dataclass
class TransactionRequest:
    """Parameters for sending a transaction from a node-managed account."""

    from_: H160 = H160()
    to: H160 | None = None
    gas: U256 | None = None
    gas_price: U256 | None = None
    value: U256 | None = None
    data: Bytes | None = None
    nonce: U256 | None = None
    condition: TransactionCondition | None = None
    transaction_type: U64 | None = None
    access_list: list[AccessListItem] | None = None
    max_fee_per_gas: U256 | None = None
    max_priority_fee_per_gas: U256 | None = None

    @classmethod
    def builder(cls) -> TransactionRequestBuilder:
        return TransactionRequestBuilder()

    @classmethod
    def from_json(cls, value: Any) -> TransactionRequest:
        obj = _object(value, "TransactionRequest")
        return cls(
            from_=H160.from_json(_require(obj, "from")),
            to=_optional(obj, "to", H160.from_json),
            gas=_optional(obj, "gas", U256.from_json),
            gas_price=_optional(obj, "gasPrice", U256.from_json),
            value=_optional(obj, "value", U256.from_json),
            data=_optional(obj, "data", Bytes.from_json),
            nonce=_optional(obj, "nonce", U256.from_json),
            condition=_optional(obj, "condition", TransactionCondition.from_json),
            transaction_type=_optional(obj, "type", U64.from_json),
            access_list=_optional(obj, "accessList", _access_list),
            max_fee_per_gas=_optional(obj, "maxFeePerGas", U256.from_json),
            max_priority_fee_per_gas=_optional(obj, "maxPriorityFeePerGas", U256.from_json),
        )

    def to_json(self) -> dict:
        """Encode; the sender is always present, other fields only when set."""
        return _put_optional(
            {"from": self.from_.to_json()},
            [
                ("to", self.to),
                ("gas", self.gas),
                ("gasPrice", self.gas_price),
                ("value", self.value),
                ("data", self.data),
                ("nonce", self.nonce),
                ("condition", self.condition),
                ("type", self.transaction_type),
                ("accessList", self.access_list),
                ("maxFeePerGas", self.max_fee_per_gas),
                ("maxPriorityFeePerGas", self.max_priority_fee_per_gas),
            ],
        )


@dataclass
class TransactionRequestBuilder:
    """Builds a TransactionRequest one setting at a time."""

    transaction_request: TransactionRequest = field(default_factory=TransactionRequest)

    def from_(self, address: H160) -> TransactionRequestBuilder:
        self.transaction_request = replace(self.transaction_request, from_=H160(address))
        return self

    def to(self, address: H160) -> TransactionRequestBuilder:
        self.transaction_request = replace(self.transaction_request, to=H160(address))
        return self

    def gas(self, gas: Any) -> TransactionRequestBuilder:
        self.transaction_request = replace(self.transaction_request, gas=U256(gas))
        return self

    def value(self, value: Any) -> TransactionRequestBuilder:
        self.transaction_request = replace(self.transaction_request, value=U256(value))
        return self

    def data(self, data: Any) -> TransactionRequestBuilder:
        self.transaction_request = replace(self.transaction_request, data=_bytes(data))
        return self

    def nonce(self, nonce: Any) -> TransactionRequestBuilder:
        self.transaction_request = replace(self.transaction_request, nonce=U256(nonce))
        return self

    def condition(self, condition: TransactionCondition) -> TransactionRequestBuilder:
        if not isinstance(condition, TransactionCondition):
            raise TypeError(f"expected a TransactionCondition, got {type(condition).__name__}")
        self.transaction_request = replace(self.transaction_request, condition=condition)
        return self

    def transaction_type(self, transaction_type: Any) -> TransactionRequestBuilder:
        self.transaction_request = replace(self.transaction_request, transaction_type=U64(transaction_type))
        return self

    def access_list(self, access_list: Iterable[AccessListItem]) -> TransactionRequestBuilder:
        self.transaction_request = replace(self.transaction_request, access_list=list(access_list))
        return self

    def build(self) -> TransactionRequest:
        return replace(self.transaction_request)