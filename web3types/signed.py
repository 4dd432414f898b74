"""Signed data, signed transactions and parameters for signing transactions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from web3types.primitives import H160, H256, U64, U256, Bytes
from web3types.transaction import AccessListItem
from web3types.transaction_request import CallRequest

_DEFAULT_GAS = U256(100_000)


def _object(value: Any, name: str) -> dict:
    if not isinstance(value, dict):
        raise ValueError(f"{name} must be a JSON object, got {value!r}")
    return value


def _require(obj: dict, key: str) -> Any:
    try:
        return obj[key]
    except KeyError:
        raise ValueError(f"missing field `{key}`") from None


def _byte(raw: Any, key: str) -> int:
    if isinstance(raw, bool) or not isinstance(raw, int) or not 0 <= raw < 256:
        raise ValueError(f"invalid value for `{key}`: {raw!r}")
    return raw


def _message(raw: Any) -> bytes:
    if not isinstance(raw, list):
        raise ValueError(f"`message` must be a JSON array of bytes, got {raw!r}")
    return bytes(_byte(item, "message") for item in raw)


@dataclass
class SignedData:
    """A signed message with its hash and signature parts."""

    message: bytes
    message_hash: H256
    v: int
    r: H256
    s: H256
    signature: Bytes

    @classmethod
    def from_json(cls, value: Any) -> SignedData:
        obj = _object(value, "SignedData")
        return cls(
            message=_message(_require(obj, "message")),
            message_hash=H256.from_json(_require(obj, "messageHash")),
            v=_byte(_require(obj, "v"), "v"),
            r=H256.from_json(_require(obj, "r")),
            s=H256.from_json(_require(obj, "s")),
            signature=Bytes.from_json(_require(obj, "signature")),
        )

    def to_json(self) -> dict:
        return {
            "message": list(self.message),
            "messageHash": self.message_hash.to_json(),
            "v": self.v,
            "r": self.r.to_json(),
            "s": self.s.to_json(),
            "signature": self.signature.to_json(),
        }


@dataclass
class TransactionParameters:
    """Transaction data for signing.

    Unset nonce, gas price and chain id are left for the signer to fill in.
    Gas defaults to 100 000, enough for plain transfers.
    """

    nonce: U256 | None = None
    to: H160 | None = None
    gas: U256 = _DEFAULT_GAS
    gas_price: U256 | None = None
    value: U256 = U256()
    data: Bytes = Bytes()
    chain_id: int | None = None
    transaction_type: U64 | None = None
    access_list: list[AccessListItem] | None = None
    max_fee_per_gas: U256 | None = None
    max_priority_fee_per_gas: U256 | None = None

    @classmethod
    def from_call_request(cls, call: CallRequest) -> TransactionParameters:
        """Take over a call request; missing gas, value and data get their defaults."""
        return cls(
            nonce=None,
            to=call.to,
            gas=_DEFAULT_GAS if call.gas is None else call.gas,
            gas_price=call.gas_price,
            value=U256() if call.value is None else call.value,
            data=Bytes() if call.data is None else call.data,
            chain_id=None,
            transaction_type=call.transaction_type,
            access_list=call.access_list,
            max_fee_per_gas=call.max_fee_per_gas,
            max_priority_fee_per_gas=call.max_priority_fee_per_gas,
        )

    def to_call_request(self) -> CallRequest:
        """A call request with the same recipient, gas, value, data and fee settings."""
        return CallRequest(
            from_=None,
            to=self.to,
            gas=self.gas,
            gas_price=self.gas_price,
            value=self.value,
            data=self.data,
            transaction_type=self.transaction_type,
            access_list=self.access_list,
            max_fee_per_gas=self.max_fee_per_gas,
            max_priority_fee_per_gas=self.max_priority_fee_per_gas,
        )


@dataclass
class SignedTransaction:
    """An offline-signed transaction ready for ``send_raw_transaction``."""

    message_hash: H256
    v: int
    r: H256
    s: H256
    raw_transaction: Bytes = field(default_factory=Bytes)
    transaction_hash: H256 = H256()