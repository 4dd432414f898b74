import copy

import pytest

from web3types.parity_peers import (
    EthProtocolInfo,
    ParityPeerInfo,
    ParityPeerType,
    PeerNetworkInfo,
    PeerProtocolsInfo,
    PipProtocolInfo,
)
from web3types.primitives import U256

HEAD = "0x0e670ec64341771606e55d6b4ca35a1a6b75ee3d5145a99d05921026d1527331"

PEERS_JSON = {
    "active": 1,
    "connected": 1,
    "max": 25,
    "peers": [
        {
            "id": "peer-one",
            "name": "node/v1.0.0",
            "caps": ["eth/62", "eth/63"],
            "network": {"remoteAddress": "10.0.0.2:30303", "localAddress": "10.0.0.1:30303"},
            "protocols": {
                "eth": {"version": 63, "difficulty": "0x27f07", "head": HEAD},
                "pip": None,
            },
        }
    ],
}


@pytest.fixture
def peers_json():
    return copy.deepcopy(PEERS_JSON)


def test_parse_peer_type(peers_json):
    peers = ParityPeerType.from_json(peers_json)
    assert peers.max == 25
    assert len(peers.peers) == 1
    peer = peers.peers[0]
    assert peer.network.remote_address == "10.0.0.2:30303"
    assert peer.protocols.eth.difficulty == U256(0x27F07)
    assert peer.protocols.pip is None


def test_round_trip(peers_json):
    peers = ParityPeerType.from_json(peers_json)
    assert peers.to_json() == peers_json
    assert ParityPeerType.from_json(peers.to_json()) == peers


def test_missing_optional_fields_are_none(peers_json):
    peer = peers_json["peers"][0]
    del peer["id"]
    del peer["protocols"]["pip"]
    del peer["protocols"]["eth"]["difficulty"]
    info = ParityPeerInfo.from_json(peer)
    assert info.id is None
    assert info.protocols.pip is None
    assert info.protocols.eth.difficulty is None


def test_pip_protocol_round_trip():
    source = {"version": 1, "difficulty": "0x1", "head": HEAD}
    pip = PipProtocolInfo.from_json(source)
    assert pip.difficulty == U256(1)
    assert pip.to_json() == source


def test_pip_requires_difficulty():
    with pytest.raises(ValueError, match="difficulty"):
        PipProtocolInfo.from_json({"version": 1, "head": HEAD})


def test_network_info_uses_camel_case():
    network = PeerNetworkInfo("10.0.0.2:30303", "10.0.0.1:30303")
    assert PeerNetworkInfo.from_json(network.to_json()) == network
    with pytest.raises(ValueError, match="remoteAddress"):
        PeerNetworkInfo.from_json({"remote_address": "a", "localAddress": "b"})


@pytest.mark.parametrize(
    "key, bad",
    [("active", -1), ("max", 1 << 32), ("connected", "1"), ("max", True)],
)
def test_invalid_counts(peers_json, key, bad):
    peers_json[key] = bad
    with pytest.raises(ValueError):
        ParityPeerType.from_json(peers_json)


def test_eth_version_out_of_range():
    with pytest.raises(ValueError):
        EthProtocolInfo.from_json({"version": 1 << 32, "head": HEAD})


def test_protocols_must_be_object():
    with pytest.raises(ValueError):
        PeerProtocolsInfo.from_json([])


def test_caps_must_be_strings(peers_json):
    peers_json["peers"][0]["caps"] = [62]
    with pytest.raises(ValueError, match="caps"):
        ParityPeerType.from_json(peers_json)