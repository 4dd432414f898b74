"""Data for recovering the signer's address from a signature."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from web3types.primitives import H256


class ParseSignatureError(ValueError):
    """A raw signature did not have 65 bytes."""

    def __init__(self) -> None:
        super().__init__("error parsing raw signature: wrong number of bytes, expected 65")


@dataclass(frozen=True)
class RecoveryMessage:
    """The signed message: raw data to be hashed per EIP-191, or a precomputed hash."""

    data: bytes | None = None
    hash: H256 | None = None

    def __post_init__(self) -> None:
        if (self.data is None) == (self.hash is None):
            raise ValueError("a recovery message holds either data or a hash")

    @classmethod
    def of(cls, value: Any) -> RecoveryMessage:
        """Wrap a hash, a string (as UTF-8) or raw bytes."""
        if isinstance(value, RecoveryMessage):
            return value
        if isinstance(value, H256):
            return cls(hash=value)
        if isinstance(value, str):
            return cls(data=value.encode("utf-8"))
        if isinstance(value, (bytes, bytearray, memoryview, list, tuple)):
            return cls(data=bytes(value))
        raise TypeError(f"cannot make a recovery message from {type(value).__name__}")


@dataclass(frozen=True)
class Recovery:
    """A message with a signature in 'Electrum' notation.

    ``v`` is expected to be 27, 28, or ``35 + chain_id * 2`` / ``36 + chain_id * 2``.
    """

    message: RecoveryMessage
    v: int
    r: H256
    s: H256

    @classmethod
    def new(cls, message: Any, v: int, r: H256, s: H256) -> Recovery:
        return cls(RecoveryMessage.of(message), int(v), H256(r), H256(s))

    @classmethod
    def from_raw_signature(cls, message: Any, raw_signature: bytes) -> Recovery:
        """Split a 65-byte signature into r (32 bytes), s (32 bytes) and v (1 byte)."""
        raw = bytes(raw_signature)
        if len(raw) != 65:
            raise ParseSignatureError()
        return cls.new(message, raw[64], H256(raw[:32]), H256(raw[32:64]))

    @classmethod
    def from_signed(cls, signed: Any) -> Recovery:
        """Build from signed data or a signed transaction: its message hash, v, r and s."""
        return cls.new(signed.message_hash, signed.v, signed.r, signed.s)

    def recovery_id(self) -> int | None:
        """The standard recovery id, or None if ``v`` is invalid."""
        if self.v == 27:
            return 0
        if self.v == 28:
            return 1
        if self.v >= 35:
            return (self.v - 1) % 2
        return None

    def as_signature(self) -> tuple[bytes, int] | None:
        """The 64-byte compact signature r || s with its recovery id."""
        recovery_id = self.recovery_id()
        if recovery_id is None:
            return None
        return bytes(self.r) + bytes(self.s), recovery_id