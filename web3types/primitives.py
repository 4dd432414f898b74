"""Fixed-size unsigned integers, fixed-size hashes and byte strings.

Each type knows its JSON-RPC encoding: integers travel as ``0x``-prefixed
minimal hex strings, hashes and byte strings as ``0x``-prefixed hex.
"""

from __future__ import annotations

import re
import secrets
from typing import Any

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]*")
_DECIMAL_DIGITS = re.compile(r"[0-9]+")
_LOW_64 = 0xFFFF_FFFF_FFFF_FFFF


def _is_plain_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class _Uint(int):
    """Unsigned integer limited to ``BITS`` bits."""

    BITS = 0

    def __new__(cls, value: int = 0):
        if not _is_plain_int(value):
            raise TypeError(f"{cls.__name__} takes an integer, not {type(value).__name__}")
        if not 0 <= value < 1 << cls.BITS:
            raise OverflowError(f"{value} does not fit in {cls.__name__}")
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"

    __str__ = int.__repr__


def _uint_from_json(cls, value: Any):
    if not isinstance(value, str):
        raise ValueError(f"{cls.__name__} must be encoded as a string, got {value!r}")
    if value.startswith("0x"):
        digits = value[2:]
        if not digits or not _HEX_DIGITS.fullmatch(digits):
            raise ValueError(f"invalid hex number for {cls.__name__}: {value!r}")
        number = int(digits, 16)
    elif _DECIMAL_DIGITS.fullmatch(value):
        number = int(value)
    else:
        raise ValueError(f"invalid number for {cls.__name__}: {value!r}")
    try:
        return cls(number)
    except OverflowError as exc:
        raise ValueError(str(exc)) from exc


def _uint_from_be_bytes(cls, data: bytes):
    raw = bytes(data)
    if len(raw) > cls.BITS // 8:
        raise ValueError(f"{cls.__name__} takes at most {cls.BITS // 8} bytes, got {len(raw)}")
    return cls(int.from_bytes(raw, "big"))


class U64(_Uint):
    """64-bit unsigned integer."""

    BITS = 64

    @classmethod
    def from_json(cls, value: Any) -> U64:
        """Parse a ``0x``-prefixed hex string or a decimal string."""
        return _uint_from_json(cls, value)

    @classmethod
    def from_be_bytes(cls, data: bytes) -> U64:
        """Build the integer from at most eight big-endian bytes."""
        return _uint_from_be_bytes(cls, data)

    def to_json(self) -> str:
        return f"{int(self):#x}"

    def low_u64(self) -> int:
        """The lowest 64 bits of the value."""
        return int(self) & _LOW_64


class U128(_Uint):
    """128-bit unsigned integer."""

    BITS = 128

    @classmethod
    def from_json(cls, value: Any) -> U128:
        """Parse a ``0x``-prefixed hex string or a decimal string."""
        return _uint_from_json(cls, value)

    @classmethod
    def from_be_bytes(cls, data: bytes) -> U128:
        """Build the integer from at most sixteen big-endian bytes."""
        return _uint_from_be_bytes(cls, data)

    def to_json(self) -> str:
        return f"{int(self):#x}"

    def low_u64(self) -> int:
        """The lowest 64 bits of the value."""
        return int(self) & _LOW_64


class U256(_Uint):
    """256-bit unsigned integer."""

    BITS = 256

    @classmethod
    def from_json(cls, value: Any) -> U256:
        """Parse a ``0x``-prefixed hex string or a decimal string."""
        return _uint_from_json(cls, value)

    @classmethod
    def from_be_bytes(cls, data: bytes) -> U256:
        """Build the integer from at most 32 big-endian bytes."""
        return _uint_from_be_bytes(cls, data)

    def to_json(self) -> str:
        return f"{int(self):#x}"

    def low_u64(self) -> int:
        """The lowest 64 bits of the value."""
        return int(self) & _LOW_64


class _Hash(bytes):
    """Byte string of exactly ``SIZE`` bytes; zero-filled by default."""

    SIZE = 0

    def __new__(cls, data: bytes | None = None):
        if data is None:
            raw = bytes(cls.SIZE)
        elif isinstance(data, (int, str)):
            raise TypeError(f"{cls.__name__} takes bytes, not {type(data).__name__}")
        else:
            raw = bytes(data)
        if len(raw) != cls.SIZE:
            raise ValueError(f"{cls.__name__} takes {cls.SIZE} bytes, got {len(raw)}")
        return super().__new__(cls, raw)

    def __repr__(self) -> str:
        return f"{type(self).__name__}('0x{self.hex()}')"

    def __str__(self) -> str:
        return f"0x{self[:2].hex()}\u2026{self[-2:].hex()}"

    def __format__(self, spec: str) -> str:
        if spec == "":
            return str(self)
        if spec == "x":
            return self.hex()
        if spec == "#x":
            return "0x" + self.hex()
        raise ValueError(f"unknown format code {spec!r} for {type(self).__name__}")


def _hash_from_low_u64_be(cls, value: int):
    if not _is_plain_int(value) or not 0 <= value < 1 << 64:
        raise OverflowError(f"{value!r} is not a 64-bit unsigned integer")
    return cls(bytes(cls.SIZE - 8) + value.to_bytes(8, "big"))


def _hash_from_uint(cls, value: int):
    return cls(int(value).to_bytes(cls.SIZE, "big"))


def _hash_random(cls):
    return cls(secrets.token_bytes(cls.SIZE))


def _hash_from_json(cls, value: Any):
    if not isinstance(value, str) or not value.startswith("0x"):
        raise ValueError(f"{cls.__name__} must be a 0x-prefixed hex string, got {value!r}")
    digits = value[2:]
    if len(digits) != 2 * cls.SIZE:
        raise ValueError(
            f"invalid length for {cls.__name__}: expected {2 * cls.SIZE} hex digits, got {len(digits)}"
        )
    if not _HEX_DIGITS.fullmatch(digits):
        raise ValueError(f"invalid hex for {cls.__name__}: {value!r}")
    return cls(bytes.fromhex(digits))


class H64(_Hash):
    """8-byte hash."""

    SIZE = 8

    @classmethod
    def from_low_u64_be(cls, value: int) -> H64:
        """A hash whose last eight bytes hold ``value`` big-endian."""
        return _hash_from_low_u64_be(cls, value)

    @classmethod
    def from_uint(cls, value: int) -> H64:
        """The big-endian encoding of an integer, padded to the hash size."""
        return _hash_from_uint(cls, value)

    @classmethod
    def random(cls) -> H64:
        return _hash_random(cls)

    @classmethod
    def from_json(cls, value: Any) -> H64:
        return _hash_from_json(cls, value)

    def to_json(self) -> str:
        return "0x" + self.hex()

    def to_uint(self) -> int:
        return int.from_bytes(self, "big")


class H128(_Hash):
    """16-byte hash."""

    SIZE = 16

    @classmethod
    def from_low_u64_be(cls, value: int) -> H128:
        """A hash whose last eight bytes hold ``value`` big-endian."""
        return _hash_from_low_u64_be(cls, value)

    @classmethod
    def from_uint(cls, value: int) -> H128:
        """The big-endian encoding of an integer, padded to the hash size."""
        return _hash_from_uint(cls, value)

    @classmethod
    def random(cls) -> H128:
        return _hash_random(cls)

    @classmethod
    def from_json(cls, value: Any) -> H128:
        return _hash_from_json(cls, value)

    def to_json(self) -> str:
        return "0x" + self.hex()

    def to_uint(self) -> int:
        return int.from_bytes(self, "big")


class H160(_Hash):
    """20-byte hash, used for addresses."""

    SIZE = 20

    @classmethod
    def from_low_u64_be(cls, value: int) -> H160:
        """A hash whose last eight bytes hold ``value`` big-endian."""
        return _hash_from_low_u64_be(cls, value)

    @classmethod
    def from_uint(cls, value: int) -> H160:
        """The big-endian encoding of an integer, padded to the hash size."""
        return _hash_from_uint(cls, value)

    @classmethod
    def random(cls) -> H160:
        return _hash_random(cls)

    @classmethod
    def from_json(cls, value: Any) -> H160:
        return _hash_from_json(cls, value)

    def to_json(self) -> str:
        return "0x" + self.hex()

    def to_uint(self) -> int:
        return int.from_bytes(self, "big")


class H256(_Hash):
    """32-byte hash."""

    SIZE = 32

    @classmethod
    def from_low_u64_be(cls, value: int) -> H256:
        """A hash whose last eight bytes hold ``value`` big-endian."""
        return _hash_from_low_u64_be(cls, value)

    @classmethod
    def from_uint(cls, value: int) -> H256:
        """The big-endian encoding of an integer, padded to the hash size."""
        return _hash_from_uint(cls, value)

    @classmethod
    def random(cls) -> H256:
        return _hash_random(cls)

    @classmethod
    def from_json(cls, value: Any) -> H256:
        return _hash_from_json(cls, value)

    def to_json(self) -> str:
        return "0x" + self.hex()

    def to_uint(self) -> int:
        return int.from_bytes(self, "big")


class H512(_Hash):
    """64-byte hash."""

    SIZE = 64

    @classmethod
    def from_low_u64_be(cls, value: int) -> H512:
        """A hash whose last eight bytes hold ``value`` big-endian."""
        return _hash_from_low_u64_be(cls, value)

    @classmethod
    def from_uint(cls, value: int) -> H512:
        """The big-endian encoding of an integer, padded to the hash size."""
        return _hash_from_uint(cls, value)

    @classmethod
    def random(cls) -> H512:
        return _hash_random(cls)

    @classmethod
    def from_json(cls, value: Any) -> H512:
        return _hash_from_json(cls, value)

    def to_json(self) -> str:
        return "0x" + self.hex()

    def to_uint(self) -> int:
        return int.from_bytes(self, "big")


class H520(_Hash):
    """65-byte hash."""

    SIZE = 65

    @classmethod
    def from_low_u64_be(cls, value: int) -> H520:
        """A hash whose last eight bytes hold ``value`` big-endian."""
        return _hash_from_low_u64_be(cls, value)

    @classmethod
    def from_uint(cls, value: int) -> H520:
        """The big-endian encoding of an integer, padded to the hash size."""
        return _hash_from_uint(cls, value)

    @classmethod
    def random(cls) -> H520:
        return _hash_random(cls)

    @classmethod
    def from_json(cls, value: Any) -> H520:
        return _hash_from_json(cls, value)

    def to_json(self) -> str:
        return "0x" + self.hex()

    def to_uint(self) -> int:
        return int.from_bytes(self, "big")


class H2048(_Hash):
    """256-byte logs bloom."""

    SIZE = 256

    @classmethod
    def from_low_u64_be(cls, value: int) -> H2048:
        """A hash whose last eight bytes hold ``value`` big-endian."""
        return _hash_from_low_u64_be(cls, value)

    @classmethod
    def from_uint(cls, value: int) -> H2048:
        """The big-endian encoding of an integer, padded to the hash size."""
        return _hash_from_uint(cls, value)

    @classmethod
    def random(cls) -> H2048:
        return _hash_random(cls)

    @classmethod
    def from_json(cls, value: Any) -> H2048:
        return _hash_from_json(cls, value)

    def to_json(self) -> str:
        return "0x" + self.hex()

    def to_uint(self) -> int:
        return int.from_bytes(self, "big")


Address = H160
Index = U64


class Bytes(bytes):
    """Raw bytes, encoded in JSON as a 0x-prefixed hex string."""

    def __new__(cls, data: bytes = b""):
        if isinstance(data, (int, str)):
            raise TypeError(f"Bytes takes bytes, not {type(data).__name__}")
        return super().__new__(cls, data)

    def __repr__(self) -> str:
        return f"Bytes('{self.to_json()}')"

    def __str__(self) -> str:
        return self.to_json()

    @classmethod
    def from_json(cls, value: Any) -> Bytes:
        if not isinstance(value, str):
            raise ValueError(f"expected a 0x-prefixed hex-encoded vector of bytes, got {value!r}")
        if not value.startswith("0x"):
            raise ValueError(f'invalid value: string "{value}", expected 0x prefix')
        digits = value[2:]
        if not _HEX_DIGITS.fullmatch(digits):
            raise ValueError(f"Invalid hex: invalid character in {digits!r}")
        if len(digits) % 2:
            raise ValueError("Invalid hex: odd number of digits")
        return cls(bytes.fromhex(digits))

    def to_json(self) -> str:
        return "0x" + self.hex()


class BytesArray(bytes):
    """Bytes encoded in JSON as an array of numbers."""

    @classmethod
    def from_json(cls, value: Any) -> BytesArray:
        if not isinstance(value, list):
            raise ValueError(f"expected an array of bytes, got {value!r}")
        for item in value:
            if not _is_plain_int(item) or not 0 <= item <= 255:
                raise ValueError(f"invalid byte value {item!r}")
        return cls(value)

    def to_json(self) -> list[int]:
        return list(self)