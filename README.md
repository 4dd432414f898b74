# web3types

Plain Python models for the data exchanged with an Ethereum node over
JSON-RPC. Most models read the node's JSON shape with a `from_json`
class method and write it back with `to_json`, so values can go straight
into `json.dumps` or come straight out of `json.loads`. Filters and
requests that are only ever sent to a node are put together with builders
and have `to_json` only.

## What is inside

- `web3types.primitives`: fixed-size unsigned integers (`U64`, `U128`,
  `U256`, subclasses of `int`) that serialise as `0x`-prefixed minimal hex
  quantities and also parse decimal strings; fixed-size hashes (`H64`,
  `H128`, `H160`, `H256`, `H512`, `H520`, `H2048`, subclasses of `bytes`)
  with `from_low_u64_be`, `from_uint`, `to_uint` and `random`; raw `Bytes`
  (JSON `0x`-prefixed hex) and `BytesArray` (JSON array of numbers). The
  aliases `Address` (`H160`) and `Index` (`U64`) live here too.
- `web3types.block`: `BlockTag`, `BlockNumber`, `BlockId`, `BlockHeader`
  and `Block`. `Block.from_json` takes an optional `parse_transaction`
  callable for the entries of `transactions`, and `Block.to_json` an
  optional `dump_transaction`; without them the entries are kept as they
  are. A `null` or missing `miner` reads as the zero address.
- `web3types.transaction`: `Transaction`, `Receipt`, `RawTransaction` and
  `AccessListItem`.
- `web3types.transaction_request`: `CallRequest`, `TransactionRequest`,
  their builders (`CallRequestBuilder`, `TransactionRequestBuilder`) and
  `TransactionCondition`.
- `web3types.log`: `Log` (with `is_removed`), `Filter`, `FilterBuilder`,
  `Topic` and `TopicFilter`.
- `web3types.trace_filtering`: `TraceFilter` and `TraceFilterBuilder` for
  trace-filter requests, and the results: `Trace`, the actions `Call`,
  `Create`, `Suicide` and `Reward`, the results `CallResult` and
  `CreateResult`, the enums `ActionType`, `CallType` and `RewardType`, and
  the helpers `action_from_json` and `result_from_json`.
- `web3types.sync_state`: `SyncInfo` and `SyncState`, reading `false`, the
  RPC sync object or the subscription status object.
- `web3types.fee_history`: `FeeHistory`.
- `web3types.proof`: `Proof` and `StorageProof`.
- `web3types.work`: the miner's `Work` package.
- `web3types.parity_peers`: `ParityPeerType`, `ParityPeerInfo`,
  `PeerNetworkInfo`, `PeerProtocolsInfo`, `EthProtocolInfo` and
  `PipProtocolInfo`.
- `web3types.parity_pending_transaction`: `ParityPendingTransactionFilter`,
  its builder, `FilterCondition`, `Comparison` and `ToFilter`.
- `web3types.transaction_id`: `TransactionId`, by hash or by block and
  index.
- `web3types.recovery`: `Recovery`, `RecoveryMessage` and
  `ParseSignatureError`.
- `web3types.signed`: `SignedData`, `SignedTransaction` and
  `TransactionParameters` (gas defaults to 100 000), with conversion to and
  from `CallRequest`.

## Installing

```
pip install .
```

There are no runtime dependencies. To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Block numbers:

```python
from web3types.block import BlockNumber

BlockNumber.of(100).to_json()              # "0x64"
BlockNumber.from_json("latest").to_json()  # "latest"
BlockNumber.from_json("64")                # raises ValueError: invalid block number: missing 0x prefix
```

Building a log filter:

```python
from web3types.block import BlockNumber
from web3types.log import FilterBuilder
from web3types.primitives import H160

flt = (
    FilterBuilder()
    .from_block(BlockNumber.of(1))
    .address([H160.from_low_u64_be(5)])
    .limit(10)
    .build()
)
flt.to_json()
# {"fromBlock": "0x1", "address": "0x0000000000000000000000000000000000000005", "limit": 10}
```

Reading the syncing state:

```python
from web3types.sync_state import SyncState

SyncState.from_json(False).is_syncing()  # False
```

Recovering the compact signature from a raw 65-byte signature:

```python
from web3types.recovery import Recovery

recovery = Recovery.from_raw_signature("Some data", raw_signature)
signature, recovery_id = recovery.as_signature()
```

Parsing errors, such as a missing `0x` prefix, bad hex or a missing
field, are raised as `ValueError`; a raw signature of the wrong length
raises `ParseSignatureError`, itself a `ValueError`. Building an integer
that does not fit its width raises `OverflowError`.

## What it does not do

The package only models data; it does not talk to a node, sign anything
or recover addresses from signatures. `Recovery` prepares the compact
signature and recovery id, and the actual elliptic-curve work is left to
a cryptography library of your choice.

Results of the ad-hoc tracing calls (state differences, VM execution
traces and the per-transaction traces that come with them) are not
modelled. Trace-filter results are covered by
`web3types.trace_filtering.Trace`.