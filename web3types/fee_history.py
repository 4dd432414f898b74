"""Result of the ``eth_feeHistory`` call."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from web3types.block import BlockNumber
from web3types.primitives import U256


def _require(obj: dict, key: str) -> Any:
    try:
        return obj[key]
    except KeyError:
        raise ValueError(f"missing field `{key}`") from None


def _array(value: Any, key: str) -> list:
    if not isinstance(value, list):
        raise ValueError(f"`{key}` must be a JSON array, got {value!r}")
    return value


def _ratio(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"gas used ratio must be a number, got {value!r}")
    return float(value)


@dataclass
class FeeHistory:
    """Base fees, gas usage ratios and optional priority fee rewards per block."""

    oldest_block: BlockNumber
    base_fee_per_gas: list[U256]
    gas_used_ratio: list[float]
    reward: list[list[U256]] | None = None

    @classmethod
    def from_json(cls, value: Any) -> FeeHistory:
        if not isinstance(value, dict):
            raise ValueError(f"FeeHistory must be a JSON object, got {value!r}")
        raw_reward = value.get("reward")
        reward = None
        if raw_reward is not None:
            reward = [[U256.from_json(fee) for fee in _array(row, "reward")] for row in _array(raw_reward, "reward")]
        return cls(
            oldest_block=BlockNumber.from_json(_require(value, "oldestBlock")),
            base_fee_per_gas=[
                U256.from_json(fee) for fee in _array(_require(value, "baseFeePerGas"), "baseFeePerGas")
            ],
            gas_used_ratio=[_ratio(item) for item in _array(_require(value, "gasUsedRatio"), "gasUsedRatio")],
            reward=reward,
        )

    def to_json(self) -> dict:
        return {
            "oldestBlock": self.oldest_block.to_json(),
            "baseFeePerGas": [fee.to_json() for fee in self.base_fee_per_gas],
            "gasUsedRatio": list(self.gas_used_ratio),
            "reward": None if self.reward is None else [[fee.to_json() for fee in row] for row in self.reward],
        }