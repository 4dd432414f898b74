"""Typed models for Ethereum JSON-RPC data: blocks, transactions, logs, trace filters and signatures."""

__version__ = "0.1.0"

__all__ = [
    "block",
    "fee_history",
    "log",
    "parity_peers",
    "parity_pending_transaction",
    "primitives",
    "proof",
    "recovery",
    "signed",
    "sync_state",
    "trace_filtering",
    "transaction",
    "transaction_id",
    "transaction_request",
    "work",
]