"""Filters for pending transactions, as understood by Parity/OpenEthereum."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from web3types.primitives import H160, U64, U256


class Comparison(Enum):
    """How a field is compared with the filter value."""

    LOWER_THAN = "lt"
    EQUAL = "eq"
    GREATER_THAN = "gt"


@dataclass(frozen=True)
class FilterCondition:
    """A comparison with a value."""

    comparison: Comparison
    value: Any

    @classmethod
    def of(cls, value: Any) -> FilterCondition:
        """A condition unchanged, or equality with a plain value."""
        if isinstance(value, FilterCondition):
            return value
        return cls(Comparison.EQUAL, value)

    def to_json(self) -> dict:
        return {self.comparison.value: self.value.to_json()}


def _condition(value: Any, kind: type) -> FilterCondition:
    condition = FilterCondition.of(value)
    return FilterCondition(condition.comparison, kind(condition.value))


@dataclass(frozen=True)
class ToFilter:
    """Recipient filter: a given address, or contract creation when ``address`` is None."""

    address_value: H160 | None = None

    @classmethod
    def address(cls, address: H160) -> ToFilter:
        return cls(H160(address))

    @classmethod
    def action(cls) -> ToFilter:
        return cls()

    def to_json(self) -> dict:
        if self.address_value is None:
            return {"action": "contract_creation"}
        return {"eq": self.address_value.to_json()}


@dataclass(frozen=True)
class ParityPendingTransactionFilter:
    """Conditions on pending transactions; unset fields match anything."""

    from_: FilterCondition | None = None
    to: ToFilter | None = None
    gas: FilterCondition | None = None
    gas_price: FilterCondition | None = None
    value: FilterCondition | None = None
    nonce: FilterCondition | None = None

    @classmethod
    def builder(cls) -> ParityPendingTransactionFilterBuilder:
        return ParityPendingTransactionFilterBuilder()

    def to_json(self) -> dict:
        """Encode, leaving out every field that is not set."""
        fields = {
            "from": self.from_,
            "to": self.to,
            "gas": self.gas,
            "gas_price": self.gas_price,
            "value": self.value,
            "nonce": self.nonce,
        }
        return {key: item.to_json() for key, item in fields.items() if item is not None}


@dataclass
class ParityPendingTransactionFilterBuilder:
    """Builds a ParityPendingTransactionFilter one setting at a time."""

    filter: ParityPendingTransactionFilter = field(default_factory=ParityPendingTransactionFilter)

    def from_(self, address: H160) -> ParityPendingTransactionFilterBuilder:
        self.filter = replace(self.filter, from_=FilterCondition(Comparison.EQUAL, H160(address)))
        return self

    def to(self, to_or_action: ToFilter) -> ParityPendingTransactionFilterBuilder:
        if not isinstance(to_or_action, ToFilter):
            raise TypeError(f"expected a ToFilter, got {type(to_or_action).__name__}")
        self.filter = replace(self.filter, to=to_or_action)
        return self

    def gas(self, gas: Any) -> ParityPendingTransactionFilterBuilder:
        self.filter = replace(self.filter, gas=_condition(gas, U64))
        return self

    def gas_price(self, gas_price: Any) -> ParityPendingTransactionFilterBuilder:
        self.filter = replace(self.filter, gas_price=_condition(gas_price, U64))
        return self

    def value(self, value: Any) -> ParityPendingTransactionFilterBuilder:
        self.filter = replace(self.filter, value=_condition(value, U256))
        return self

    def nonce(self, nonce: Any) -> ParityPendingTransactionFilterBuilder:
        self.filter = replace(self.filter, nonce=_condition(nonce, U256))
        return self

    def build(self) -> ParityPendingTransactionFilter:
        return self.filter