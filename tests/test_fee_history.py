import json

import pytest

from web3types.block import BlockNumber
from web3types.fee_history import FeeHistory
from web3types.primitives import U256


def test_fee_history():
    fee_history = FeeHistory(
        oldest_block=BlockNumber.of(123456),
        base_fee_per_gas=[U256(100), U256(110)],
        gas_used_ratio=[1.0, 2.0, 3.0],
        reward=None,
    )
    serialized = fee_history.to_json()
    assert json.dumps(serialized, sort_keys=True, separators=(",", ":")) == (
        '{"baseFeePerGas":["0x64","0x6e"],"gasUsedRatio":[1.0,2.0,3.0],'
        '"oldestBlock":"0x1e240","reward":null}'
    )
    assert FeeHistory.from_json(serialized) == fee_history


def test_missing_reward_is_none():
    history = FeeHistory.from_json({"oldestBlock": "0x1", "baseFeePerGas": [], "gasUsedRatio": [1]})
    assert history.reward is None
    assert history.gas_used_ratio == [1.0]


def test_reward_round_trip():
    source = {
        "oldestBlock": "latest",
        "baseFeePerGas": ["0x64"],
        "gasUsedRatio": [0.5],
        "reward": [["0x1", "0x2"], []],
    }
    history = FeeHistory.from_json(source)
    assert history.reward == [[U256(1), U256(2)], []]
    assert history.to_json() == source


@pytest.mark.parametrize(
    "payload",
    [
        {"baseFeePerGas": [], "gasUsedRatio": []},
        {"oldestBlock": "0x1", "baseFeePerGas": "0x1", "gasUsedRatio": []},
        {"oldestBlock": "0x1", "baseFeePerGas": [], "gasUsedRatio": ["1"]},
        [],
    ],
)
def test_invalid_fee_history(payload):
    with pytest.raises(ValueError):
        FeeHistory.from_json(payload)