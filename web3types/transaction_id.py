"""Ways to identify a transaction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from web3types.block import BlockId
from web3types.primitives import H256, U64


@dataclass(frozen=True)
class TransactionId:
    """A transaction named by its hash, or by its block and index in that block."""

    tx_hash: H256 | None = None
    block: BlockId | None = None
    index: U64 | None = None

    def __post_init__(self) -> None:
        by_hash = self.tx_hash is not None
        by_block = self.block is not None or self.index is not None
        if by_hash == by_block:
            raise ValueError("a transaction is identified either by hash or by block and index")
        if by_hash:
            if not isinstance(self.tx_hash, H256):
                raise TypeError(f"transaction hash must be H256, not {type(self.tx_hash).__name__}")
            return
        if self.block is None or self.index is None:
            raise ValueError("identifying a transaction by block needs both the block and the index")
        object.__setattr__(self, "block", BlockId.of(self.block))
        object.__setattr__(self, "index", U64(self.index))

    @classmethod
    def by_hash(cls, tx_hash: H256) -> TransactionId:
        return cls(tx_hash=tx_hash)

    @classmethod
    def by_block(cls, block: Any, index: int) -> TransactionId:
        """Identify by block (hash, number, tag or BlockId) and position in it."""
        return cls(block=BlockId.of(block), index=U64(index))