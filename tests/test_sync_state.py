import pytest

from web3types.primitives import U256
from web3types.sync_state import SyncInfo, SyncState

SYNCING = SyncState(SyncInfo(starting_block=U256(0x0), current_block=U256(0x42), highest_block=U256(0x9001)))

_PROGRESS = {"current": "0x42", "highest": "0x9001", "known": "0x1337", "pulled": "0x13", "starting": "0x0"}


def _rpc_payload():
    return {f"{key}{'States' if key in ('known', 'pulled') else 'Block'}": value for key, value in _PROGRESS.items()}


def _subscription_status():
    return {key[0].upper() + key[1:]: value for key, value in _rpc_payload().items()}


def test_rpc_object_means_syncing():
    payload = _rpc_payload()
    assert payload["currentBlock"] == "0x42"
    assert SyncState.from_json(payload) == SYNCING


def test_subscription_object_means_syncing():
    payload = {"syncing": True, "status": _subscription_status()}
    assert SyncState.from_json(payload) == SYNCING


def test_false_means_not_syncing():
    state = SyncState.from_json(False)
    assert state == SyncState.not_syncing()
    assert not state.is_syncing()


def test_subscription_without_status_means_not_syncing():
    assert SyncState.from_json({"syncing": False}) == SyncState.not_syncing()


def test_true_is_rejected():
    with pytest.raises(ValueError):
        SyncState.from_json(True)


def test_subscription_syncing_without_status_is_rejected():
    with pytest.raises(ValueError):
        SyncState.from_json({"syncing": True})


def test_subscription_not_syncing_with_status_is_rejected():
    with pytest.raises(ValueError):
        SyncState.from_json({"syncing": False, "status": _subscription_status()})


def test_serialize_round_trip():
    encoded = SYNCING.to_json()
    assert encoded == {"startingBlock": "0x0", "currentBlock": "0x42", "highestBlock": "0x9001"}
    assert SyncState.from_json(encoded) == SYNCING
    assert SYNCING.is_syncing()


def test_not_syncing_serializes_to_false():
    assert SyncState.not_syncing().to_json() is False


def test_sync_info_round_trip():
    info = SYNCING.info
    assert SyncInfo.from_json(info.to_json()) == info


@pytest.mark.parametrize("value", [None, 5, "0x1", []])
def test_other_values_are_rejected(value):
    with pytest.raises(ValueError):
        SyncState.from_json(value)