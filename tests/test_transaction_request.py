import json

import pytest

from web3types.primitives import H160, U64, U256, Bytes
from web3types.transaction import AccessListItem
from web3types.transaction_request import (
    CallRequest,
    CallRequestBuilder,
    TransactionCondition,
    TransactionRequest,
    TransactionRequestBuilder,
)

CALL_REQUEST_JSON = """{
  "to": "0x0000000000000000000000000000000000000005",
  "gas": "0x5208",
  "value": "0x4c4b40",
  "data": "0x010203"
}"""

TRANSACTION_REQUEST_JSON = """{
  "from": "0x0000000000000000000000000000000000000005",
  "gas": "0x5208",
  "value": "0x4c4b40",
  "data": "0x010203",
  "condition": {
    "block": 5
  }
}"""


def _data():
    return Bytes.from_json("0x010203")


def _call_request():
    return CallRequest(
        to=H160.from_low_u64_be(5),
        gas=U256(21_000),
        value=U256(5_000_000),
        data=_data(),
    )


def _transaction_request():
    return TransactionRequest(
        from_=H160.from_low_u64_be(5),
        gas=U256(21_000),
        value=U256(5_000_000),
        data=_data(),
        condition=TransactionCondition(block=5),
    )


def test_should_serialize_call_request():
    assert json.dumps(_call_request().to_json(), indent=2) == CALL_REQUEST_JSON


def test_should_deserialize_call_request():
    request = CallRequest.from_json(json.loads(CALL_REQUEST_JSON))
    assert request.from_ is None
    assert request.to == H160.from_low_u64_be(5)
    assert request.gas == U256(21_000)
    assert request.gas_price is None
    assert request.value == U256(5_000_000)
    assert request.data == _data()


def test_should_serialize_transaction_request():
    assert json.dumps(_transaction_request().to_json(), indent=2) == TRANSACTION_REQUEST_JSON


def test_should_deserialize_transaction_request():
    request = TransactionRequest.from_json(json.loads(TRANSACTION_REQUEST_JSON))
    assert request.from_ == H160.from_low_u64_be(5)
    assert request.to is None
    assert request.gas == U256(21_000)
    assert request.gas_price is None
    assert request.value == U256(5_000_000)
    assert request.data == _data()
    assert request.nonce is None
    assert request.condition == TransactionCondition(block=5)


def test_should_build_default_call_request():
    assert CallRequestBuilder().build() == CallRequest()
    assert CallRequest.builder().build() == CallRequest()


def test_should_build_call_request():
    built = (
        CallRequestBuilder()
        .to(H160.from_low_u64_be(5))
        .gas(U256(21_000))
        .value(U256(5_000_000))
        .data(_data())
        .build()
    )
    assert built == _call_request()


def test_should_build_default_transaction_request():
    assert TransactionRequestBuilder().build() == TransactionRequest()
    assert TransactionRequest.builder().build() == TransactionRequest()


def test_should_build_transaction_request():
    builder = (
        TransactionRequestBuilder()
        .from_(H160.from_low_u64_be(5))
        .gas(U256(21_000))
        .value(U256(5_000_000))
        .data(_data())
        .condition(TransactionCondition(block=5))
    )
    assert builder.build() == _transaction_request()


def test_empty_call_request_serializes_to_empty_object():
    assert CallRequest().to_json() == {}


def test_transaction_request_requires_from():
    with pytest.raises(ValueError, match="from"):
        TransactionRequest.from_json({"gas": "0x1"})


def test_default_transaction_request_has_zero_sender():
    assert TransactionRequest().to_json() == {"from": "0x0000000000000000000000000000000000000000"}


def test_call_request_round_trip_with_access_list_and_type():
    item = AccessListItem(address=H160.from_low_u64_be(9), storage_keys=[])
    request = CallRequestBuilder().transaction_type(U64(1)).access_list([item]).build()
    encoded = request.to_json()
    assert encoded["type"] == "0x1"
    assert encoded["accessList"] == [
        {"address": "0x0000000000000000000000000000000000000009", "storageKeys": []}
    ]
    assert CallRequest.from_json(encoded) == request


def test_timestamp_condition_serializes_as_time():
    assert TransactionCondition(time=7).to_json() == {"time": 7}
    assert TransactionCondition.from_json({"time": 7}) == TransactionCondition(time=7)


@pytest.mark.parametrize(
    "raw",
    [
        {"block": 5, "time": 6},
        {"height": 5},
        {},
        {"block": -1},
        {"block": "5"},
        "block",
    ],
)
def test_invalid_conditions_are_rejected(raw):
    with pytest.raises(ValueError):
        TransactionCondition.from_json(raw)


def test_condition_needs_exactly_one_value():
    with pytest.raises(ValueError):
        TransactionCondition()
    with pytest.raises(ValueError):
        TransactionCondition(block=1, time=2)


def test_builder_nonce_appears_in_json():
    request = TransactionRequestBuilder().nonce(U256(3)).to(H160.from_low_u64_be(1)).build()
    encoded = request.to_json()
    assert encoded["nonce"] == "0x3"
    assert encoded["to"] == "0x0000000000000000000000000000000000000001"