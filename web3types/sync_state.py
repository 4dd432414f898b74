"""Blockchain syncing status as reported by ``eth_syncing`` and its subscription."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from web3types.primitives import U256

_RPC_KEYS = ("startingBlock", "currentBlock", "highestBlock")
_SUBSCRIPTION_KEYS = ("StartingBlock", "CurrentBlock", "HighestBlock")
_NO_MATCH = "data did not match any variant of the sync state"


@dataclass(frozen=True)
class SyncInfo:
    """Progress of a running sync."""

    starting_block: U256
    current_block: U256
    highest_block: U256

    @classmethod
    def _from_keys(cls, value: Any, keys: tuple[str, str, str]) -> SyncInfo:
        if not isinstance(value, dict):
            raise ValueError(f"sync info must be a JSON object, got {value!r}")
        numbers = []
        for key in keys:
            if key not in value:
                raise ValueError(f"missing field `{key}`")
            numbers.append(U256.from_json(value[key]))
        return cls(*numbers)

    @classmethod
    def from_json(cls, value: Any) -> SyncInfo:
        return cls._from_keys(value, _RPC_KEYS)

    def to_json(self) -> dict:
        return {
            "startingBlock": self.starting_block.to_json(),
            "currentBlock": self.current_block.to_json(),
            "highestBlock": self.highest_block.to_json(),
        }


@dataclass(frozen=True)
class SyncState:
    """Syncing with the given progress, or not syncing when ``info`` is None."""

    info: SyncInfo | None = None

    @classmethod
    def not_syncing(cls) -> SyncState:
        return cls()

    def is_syncing(self) -> bool:
        return self.info is not None

    @classmethod
    def from_json(cls, value: Any) -> SyncState:
        """Accept ``false``, an RPC sync object, or a subscription status object."""
        if isinstance(value, bool):
            if value:
                raise ValueError("expected object or `false`, got `true`")
            return cls.not_syncing()
        if not isinstance(value, dict):
            raise ValueError(_NO_MATCH)
        try:
            return cls(SyncInfo.from_json(value))
        except ValueError:
            pass

        syncing = value.get("syncing")
        if not isinstance(syncing, bool):
            raise ValueError(_NO_MATCH)
        status = value.get("status")
        try:
            info = None if status is None else SyncInfo._from_keys(status, _SUBSCRIPTION_KEYS)
        except ValueError as exc:
            raise ValueError(_NO_MATCH) from exc

        if syncing and info is not None:
            return cls(info)
        if not syncing and info is None:
            return cls.not_syncing()
        raise ValueError("expected object or `syncing = false`, got `syncing = true`")

    def to_json(self) -> dict | bool:
        return self.info.to_json() if self.info is not None else False