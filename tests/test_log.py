import pytest

from web3types.block import BlockNumber, BlockTag
from web3types.log import Filter, FilterBuilder, Log, Topic, TopicFilter
from web3types.primitives import H160, H256, U64, U256, Bytes


def make_log(log_type=None, removed=None):
    return Log(
        address=H160.from_low_u64_be(1),
        topics=[],
        data=Bytes(b""),
        block_hash=H256.from_low_u64_be(2),
        block_number=U64(1),
        transaction_hash=H256.from_low_u64_be(3),
        transaction_index=U64(0),
        log_index=U256(0),
        transaction_log_index=U256(0),
        log_type=log_type,
        removed=removed,
    )


def test_is_removed_removed_true():
    assert make_log(removed=True).is_removed() is True


def test_is_removed_removed_false():
    assert make_log(removed=False).is_removed() is False


def test_is_removed_log_type_removed():
    assert make_log(log_type="removed").is_removed() is True


def test_is_removed_log_type_mined():
    assert make_log(log_type="mined").is_removed() is False


def test_is_removed_log_type_and_removed_none():
    assert make_log().is_removed() is False


def test_topic_filter_sets_topics_correctly():
    topic_filter = TopicFilter(
        topic0=Topic.this(H256.from_low_u64_be(3)),
        topic1=Topic.one_of(H256.from_low_u64_be(n) for n in (5, 8)),
        topic2=Topic.this(H256.from_low_u64_be(13)),
        topic3=Topic.any(),
    )
    filter0 = FilterBuilder().topic_filter(topic_filter).build()
    filter1 = (
        FilterBuilder()
        .topics(
            [H256.from_low_u64_be(3)],
            [H256.from_low_u64_be(5), H256.from_low_u64_be(8)],
            [H256.from_low_u64_be(13)],
            None,
        )
        .build()
    )
    assert filter0 == filter1


def test_trailing_empty_topics_are_dropped_but_inner_kept():
    h = H256.from_low_u64_be(7)
    built = FilterBuilder().topics(None, [h], None, None).build()
    assert built.topics == (None, (h,))


def test_topic_to_option():
    h = H256.from_low_u64_be(4)
    assert Topic.any().to_option() is None
    assert Topic.this(h).to_option() == [h]


def test_block_hash_and_range_are_exclusive():
    h = H256.from_low_u64_be(9)
    built = FilterBuilder().from_block(5).to_block(BlockTag.LATEST).block_hash(h).build()
    assert built.from_block is None and built.to_block is None
    assert built.block_hash == h
    built = FilterBuilder().block_hash(h).from_block(5).build()
    assert built.block_hash is None
    assert built.from_block == BlockNumber(U64(5))


def test_filter_to_json_value_or_array():
    a = H160.from_low_u64_be(1)
    b = H160.from_low_u64_be(2)
    t = H256.from_low_u64_be(3)
    single = FilterBuilder().address([a]).topics([t], None, [], None).limit(10).build().to_json()
    assert single == {"address": a.to_json(), "topics": [t.to_json(), None, None], "limit": 10}
    many = FilterBuilder().address([a, b]).build().to_json()
    assert many == {"address": [a.to_json(), b.to_json()]}
    assert FilterBuilder().address([]).build().to_json() == {"address": None}


def test_filter_to_json_block_range():
    built = FilterBuilder().from_block(BlockTag.EARLIEST).to_block(BlockTag.LATEST).build()
    assert built.to_json() == {"fromBlock": "earliest", "toBlock": "latest"}
    assert Filter().to_json() == {}


def test_build_is_a_snapshot():
    builder = FilterBuilder().limit(1)
    first = builder.build()
    builder.limit(2)
    assert first.limit == 1
    assert builder.build().limit == 2


def test_negative_limit_rejected():
    with pytest.raises(ValueError):
        FilterBuilder().limit(-1)


LOG_JSON = {
    "address": "0x03d8c4566478a6e1bf75650248accce16a98509f",
    "topics": [],
    "data": "0x03d8c4566478a6e1bf75650248accce16a98509f",
    "blockNumber": "0x38",
    "transactionHash": "0x422fb0d5953c0c48cbb42fb58e1c30f5e150441c68374d70ca7d4f191fd56f26",
    "transactionIndex": "0x0",
    "blockHash": "0x83eaba432089a0bfe99e9fc9022d1cfcb78f95f407821be81737c84ae0b439c5",
    "logIndex": "0x0",
    "removed": False,
}


def test_log_from_json():
    log = Log.from_json(LOG_JSON)
    assert log.block_number == 0x38
    assert log.removed is False
    assert log.log_type is None
    assert log.is_removed() is False
    assert log.data == bytes.fromhex("03d8c4566478a6e1bf75650248accce16a98509f")


def test_log_round_trip():
    log = Log.from_json(LOG_JSON)
    assert Log.from_json(log.to_json()) == log


def test_log_missing_field():
    data = dict(LOG_JSON)
    del data["topics"]
    with pytest.raises(ValueError, match="topics"):
        Log.from_json(data)