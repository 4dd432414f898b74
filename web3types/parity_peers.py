"""Peer information reported by Parity/OpenEthereum nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from web3types.primitives import U256

_U32 = 32
_USIZE = 64


def _object(value: Any, name: str) -> dict:
    if not isinstance(value, dict):
        raise ValueError(f"{name} must be a JSON object, got {value!r}")
    return value


def _require(obj: dict, key: str) -> Any:
    try:
        return obj[key]
    except KeyError:
        raise ValueError(f"missing field `{key}`") from None


def _uint(obj: dict, key: str, bits: int) -> int:
    raw = _require(obj, key)
    if isinstance(raw, bool) or not isinstance(raw, int) or not 0 <= raw < 1 << bits:
        raise ValueError(f"invalid value for `{key}`: {raw!r}")
    return raw


def _string(obj: dict, key: str) -> str:
    raw = _require(obj, key)
    if not isinstance(raw, str):
        raise ValueError(f"`{key}` must be a string, got {raw!r}")
    return raw


@dataclass
class PeerNetworkInfo:
    """Remote and local socket addresses of a connection."""

    remote_address: str
    local_address: str

    @classmethod
    def from_json(cls, value: Any) -> PeerNetworkInfo:
        obj = _object(value, "PeerNetworkInfo")
        return cls(_string(obj, "remoteAddress"), _string(obj, "localAddress"))

    def to_json(self) -> dict:
        return {"remoteAddress": self.remote_address, "localAddress": self.local_address}


@dataclass
class EthProtocolInfo:
    """Eth protocol version, difficulty and chain head of a peer."""

    version: int
    difficulty: U256 | None
    head: str

    @classmethod
    def from_json(cls, value: Any) -> EthProtocolInfo:
        obj = _object(value, "EthProtocolInfo")
        difficulty = obj.get("difficulty")
        return cls(
            version=_uint(obj, "version", _U32),
            difficulty=None if difficulty is None else U256.from_json(difficulty),
            head=_string(obj, "head"),
        )

    def to_json(self) -> dict:
        return {
            "version": self.version,
            "difficulty": None if self.difficulty is None else self.difficulty.to_json(),
            "head": self.head,
        }


@dataclass
class PipProtocolInfo:
    """PIP protocol version, difficulty and chain head of a peer."""

    version: int
    difficulty: U256
    head: str

    @classmethod
    def from_json(cls, value: Any) -> PipProtocolInfo:
        obj = _object(value, "PipProtocolInfo")
        return cls(
            version=_uint(obj, "version", _U32),
            difficulty=U256.from_json(_require(obj, "difficulty")),
            head=_string(obj, "head"),
        )

    def to_json(self) -> dict:
        return {"version": self.version, "difficulty": self.difficulty.to_json(), "head": self.head}


@dataclass
class PeerProtocolsInfo:
    """The protocols a peer speaks."""

    eth: EthProtocolInfo | None = None
    pip: PipProtocolInfo | None = None

    @classmethod
    def from_json(cls, value: Any) -> PeerProtocolsInfo:
        obj = _object(value, "PeerProtocolsInfo")
        eth = obj.get("eth")
        pip = obj.get("pip")
        return cls(
            eth=None if eth is None else EthProtocolInfo.from_json(eth),
            pip=None if pip is None else PipProtocolInfo.from_json(pip),
        )

    def to_json(self) -> dict:
        return {
            "eth": None if self.eth is None else self.eth.to_json(),
            "pip": None if self.pip is None else self.pip.to_json(),
        }


@dataclass
class ParityPeerInfo:
    """Details of one peer."""

    id: str | None
    name: str
    caps: list[str]
    network: PeerNetworkInfo
    protocols: PeerProtocolsInfo

    @classmethod
    def from_json(cls, value: Any) -> ParityPeerInfo:
        obj = _object(value, "ParityPeerInfo")
        peer_id = obj.get("id")
        if peer_id is not None and not isinstance(peer_id, str):
            raise ValueError(f"`id` must be a string, got {peer_id!r}")
        caps = _require(obj, "caps")
        if not isinstance(caps, list) or not all(isinstance(cap, str) for cap in caps):
            raise ValueError(f"`caps` must be an array of strings, got {caps!r}")
        return cls(
            id=peer_id,
            name=_string(obj, "name"),
            caps=list(caps),
            network=PeerNetworkInfo.from_json(_require(obj, "network")),
            protocols=PeerProtocolsInfo.from_json(_require(obj, "protocols")),
        )

    def to_json(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "caps": list(self.caps),
            "network": self.network.to_json(),
            "protocols": self.protocols.to_json(),
        }


@dataclass
class ParityPeerType:
    """Peer counts and the list of connected peers."""

    active: int
    connected: int
    max: int
    peers: list[ParityPeerInfo] = field(default_factory=list)

    @classmethod
    def from_json(cls, value: Any) -> ParityPeerType:
        obj = _object(value, "ParityPeerType")
        peers = _require(obj, "peers")
        if not isinstance(peers, list):
            raise ValueError(f"`peers` must be a JSON array, got {peers!r}")
        return cls(
            active=_uint(obj, "active", _USIZE),
            connected=_uint(obj, "connected", _USIZE),
            max=_uint(obj, "max", _U32),
            peers=[ParityPeerInfo.from_json(peer) for peer in peers],
        )

    def to_json(self) -> dict:
        return {
            "active": self.active,
            "connected": self.connected,
            "max": self.max,
            "peers": [peer.to_json() for peer in self.peers],
        }