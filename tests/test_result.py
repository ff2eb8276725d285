import logging

import pytest

from ethevent.core.errors import MalformedLogError, SignatureMismatchError, TruncatedError
from ethevent.schema.event import Event, arg, event
from ethevent.schema.result import build_result, decode_header, decode_log

from ._events import TRANSFER_SIG, Transfer

BAD_SIG = TRANSFER_SIG[:-1] + "e"


def test_decode_header(make_raw_log) -> None:
    header = decode_header(make_raw_log(logIndex="0x64"))
    assert header == {
        "address": "0x8ca88e083ec89a8110b722ec46aace1c1d1b260e",
        "block_hash": "0x" + "0" * 64,
        "block_number": 39,
        "log_index": 100,
        "status": "mined",
    }


def test_decode_header_pending(make_raw_log) -> None:
    header = decode_header(make_raw_log(blockNumber="pending", logIndex=None))
    assert header["status"] == "pending"
    assert header["block_number"] is None
    assert header["log_index"] is None


def test_decode_log(make_raw_log) -> None:
    record = decode_log(Transfer, make_raw_log(logIndex="0x64"))
    assert record == Transfer(
        address="0x8ca88e083ec89a8110b722ec46aace1c1d1b260e",
        block_hash="0x" + "0" * 64,
        block_number=39,
        log_index=100,
        status="mined",
        sender="0x8ca88e083ec89a8110b722ec46aace1c1d1b260e",
        receiver="0x06560813995c81ef86cf850b365bc6817a6cb5bd",
        value=100,
    )


def test_decode_log_signature_mismatch(make_raw_log) -> None:
    raw = make_raw_log()
    raw["topics"] = [BAD_SIG, *raw["topics"][1:]]
    with pytest.raises(SignatureMismatchError):
        decode_log(Transfer, raw)


def test_decode_log_signature_is_case_insensitive(make_raw_log) -> None:
    raw = make_raw_log()
    raw["topics"] = [TRANSFER_SIG.upper().replace("0X", "0x"), *raw["topics"][1:]]
    assert decode_log(Transfer, raw).value == 100


@pytest.mark.parametrize("missing", ["address", "blockHash", "blockNumber", "data", "logIndex", "topics"])
def test_decode_log_missing_fields(make_raw_log, missing: str) -> None:
    raw = make_raw_log()
    del raw[missing]
    with pytest.raises(MalformedLogError):
        decode_log(Transfer, raw)


def test_decode_log_topic_count_mismatch(make_raw_log) -> None:
    raw = make_raw_log()
    raw["topics"] = raw["topics"][:2]
    with pytest.raises(MalformedLogError):
        decode_log(Transfer, raw)


def test_decode_log_data_errors(make_raw_log) -> None:
    with pytest.raises(TruncatedError):
        decode_log(Transfer, make_raw_log(data="0x64"))
    with pytest.raises(MalformedLogError, match="Unconsumed"):
        decode_log(Transfer, make_raw_log(data="0x" + "0" * 62 + "6401"))


def test_decode_log_packed_data() -> None:
    @event("Swap")
    class Swap(Event):
        pool: str | None = arg("address", indexed=True)
        up: bool | None = arg("bool")
        delta: int | None = arg("int8")
        tag: str | None = arg("bytes2")

    raw = {
        "address": "0x8ca88e083ec89a8110b722ec46aace1c1d1b260e",
        "blockHash": "0x" + "1" * 64,
        "blockNumber": "0x1",
        "data": "0x0181beef",
        "logIndex": "0x2",
        "topics": [Swap.__event__.signature, "0x" + "0" * 24 + "ab" * 20],
    }
    record = decode_log(Swap, raw)
    assert record.pool == "0x" + "ab" * 20
    assert record.up is True
    assert record.delta == -1
    assert record.tag == "0xbeef"


def test_build_result_ignores_invalid_entries(make_raw_log) -> None:
    raw_logs = [
        make_raw_log(),
        make_raw_log(topics=[BAD_SIG, "0x" + "0" * 64, "0x" + "0" * 64]),
        make_raw_log(logIndex="0x1"),
    ]
    records = build_result(Transfer(), raw_logs)
    assert [r.log_index for r in records] == [0, 1]
    assert all(r.value == 100 for r in records)


def test_build_result_drops_malformed_entries(make_raw_log, caplog: pytest.LogCaptureFixture) -> None:
    raw_logs = [make_raw_log(data="0x"), {"topics": []}, "garbage", make_raw_log(logIndex="0x5")]
    with caplog.at_level(logging.WARNING, logger="ethevent.schema.result"):
        records = build_result(Transfer(), raw_logs)
    assert [r.log_index for r in records] == [5]
    assert len(caplog.records) == 3


def test_build_result_via_record_method(make_raw_log) -> None:
    assert len(Transfer().build_result([make_raw_log()])) == 1
    assert Transfer().build_result([]) == []


def test_build_result_requires_list() -> None:
    with pytest.raises(MalformedLogError):
        build_result(Transfer(), {"not": "a list"})
