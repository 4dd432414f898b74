import pytest

from web3types.primitives import H160, H256, U64, U256, Bytes
from web3types.recovery import Recovery
from web3types.signed import SignedData, SignedTransaction, TransactionParameters
from web3types.transaction_request import CallRequest

MESSAGE_HASH = "0x1da44b586eb0729ff70a73c326926f6ed5a25f5b056e7f47fbc6e58d86871655"
R = "0xb91467e570a6466aa9e9876cbcd013baba02900b8979d43fe208a4a4f339f5fd"
S = "0x6007e74cd82e037b800186422fc2da167c747ef045e5d18a5f5d4300f8e1a029"
SIGNATURE = (
    "0xb91467e570a6466aa9e9876cbcd013baba02900b8979d43fe208a4a4f339f5fd"
    "6007e74cd82e037b800186422fc2da167c747ef045e5d18a5f5d4300f8e1a0291c"
)


def _signed_data():
    return SignedData(
        message=b"Some data",
        message_hash=H256.from_json(MESSAGE_HASH),
        v=0x1C,
        r=H256.from_json(R),
        s=H256.from_json(S),
        signature=Bytes.from_json(SIGNATURE),
    )


def test_verify_transaction_default_gas():
    assert TransactionParameters().gas == U256(100_000)


def test_default_parameters_leave_signer_fields_unset():
    params = TransactionParameters()
    assert params.nonce is None
    assert params.gas_price is None
    assert params.chain_id is None
    assert params.value == U256(0)
    assert params.data == Bytes.from_json("0x")


def test_from_empty_call_request_uses_defaults():
    params = TransactionParameters.from_call_request(CallRequest())
    assert params == TransactionParameters()


def test_from_call_request_keeps_given_values():
    call = CallRequest(
        from_=H160.from_low_u64_be(1),
        to=H160.from_low_u64_be(5),
        gas=U256(21_000),
        gas_price=U256(7),
        value=U256(5_000_000),
        data=Bytes.from_json("0x010203"),
        transaction_type=U64(2),
        max_fee_per_gas=U256(10),
        max_priority_fee_per_gas=U256(1),
    )
    params = TransactionParameters.from_call_request(call)
    assert params.to == H160.from_low_u64_be(5)
    assert params.gas == U256(21_000)
    assert params.gas_price == U256(7)
    assert params.value == U256(5_000_000)
    assert params.data == Bytes.from_json("0x010203")
    assert params.transaction_type == U64(2)
    assert params.max_fee_per_gas == U256(10)
    assert params.max_priority_fee_per_gas == U256(1)
    assert params.nonce is None


def test_from_call_request_keeps_zero_gas():
    params = TransactionParameters.from_call_request(CallRequest(gas=U256(0)))
    assert params.gas == U256(0)


def test_to_call_request_fills_gas_value_and_data():
    call = TransactionParameters(to=H160.from_low_u64_be(5)).to_call_request()
    assert call.from_ is None
    assert call.to_json() == {
        "to": "0x0000000000000000000000000000000000000005",
        "gas": "0x186a0",
        "value": "0x0",
        "data": "0x",
    }


def test_call_request_round_trip_through_parameters():
    call = CallRequest(
        to=H160.from_low_u64_be(5),
        gas=U256(21_000),
        value=U256(3),
        data=Bytes.from_json("0xff"),
    )
    assert TransactionParameters.from_call_request(call).to_call_request() == call


def test_signed_data_json_round_trip():
    signed = _signed_data()
    encoded = signed.to_json()
    assert encoded["v"] == 28
    assert encoded["messageHash"] == MESSAGE_HASH
    assert encoded["signature"] == SIGNATURE
    assert encoded["message"] == [83, 111, 109, 101, 32, 100, 97, 116, 97]
    assert SignedData.from_json(encoded) == signed


def test_signed_data_rejects_invalid_message_bytes():
    encoded = _signed_data().to_json()
    encoded["message"] = [256]
    with pytest.raises(ValueError):
        SignedData.from_json(encoded)


def test_signed_data_requires_signature():
    encoded = _signed_data().to_json()
    del encoded["signature"]
    with pytest.raises(ValueError, match="signature"):
        SignedData.from_json(encoded)


def test_signed_data_gives_recovery_signature():
    signature, recovery_id = Recovery.from_signed(_signed_data()).as_signature()
    assert signature == bytes.fromhex(R[2:] + S[2:])
    assert recovery_id == 1


def test_signed_transaction_gives_recovery_values():
    tx = SignedTransaction(
        message_hash=H256.from_json(MESSAGE_HASH),
        v=37,
        r=H256.from_json(R),
        s=H256.from_json(S),
        raw_transaction=Bytes.from_json("0x01"),
        transaction_hash=H256.from_low_u64_be(3),
    )
    recovery = Recovery.from_signed(tx)
    assert recovery.v == 37
    assert recovery.recovery_id() == 0
    assert recovery.message.hash == H256.from_json(MESSAGE_HASH)