import pytest

from ethevent.codec import decode, encode
from ethevent.core.errors import CodecOverflowError, InvalidValueError, TooLongError, UnrecognizedTypeError
from ethevent.core.types import ADDRESS, BOOL, QUANTITY, UINT256, Array, Bytes, Int, Topic, Uint, hex_width

HEX_DIGITS = "0123456789abcdef"


def test_encode_quantity_tag() -> None:
    assert encode(QUANTITY, "latest") == "latest"
    assert encode(QUANTITY, "pending") == "pending"
    assert encode(QUANTITY, "earliest") == "earliest"


def test_encode_quantity_already_encoded() -> None:
    assert encode(QUANTITY, "0x000") == "0x0"
    assert encode(QUANTITY, "0x00") == "0x0"
    assert encode(QUANTITY, "0x00001") == "0x1"
    assert encode(QUANTITY, "0x00064") == "0x64"
    assert encode(QUANTITY, "0xAB") == "0xab"


def test_encode_quantity_integer() -> None:
    assert encode(QUANTITY, 100) == "0x64"
    assert encode(QUANTITY, 0) == "0x0"
    assert encode(QUANTITY, 39) == "0x27"


def test_encode_quantity_invalid() -> None:
    with pytest.raises(InvalidValueError):
        encode(QUANTITY, "soon")
    with pytest.raises(CodecOverflowError):
        encode(QUANTITY, -1)


def test_encode_array() -> None:
    assert encode(Array(Uint(8)), [1, 2, 3]) == ["0x01", "0x02", "0x03"]


def test_encode_array_propagates_first_error() -> None:
    with pytest.raises(CodecOverflowError):
        encode(Array(Uint(8)), [1, 256, 3])
    with pytest.raises(InvalidValueError):
        encode(Array(Uint(8)), "0x01")


def test_encode_topic() -> None:
    assert encode(Topic(Int(16)), -1) == "0x" + "0" * 60 + "8001"
    assert encode(Topic(ADDRESS), "0x8ca88e083ec89a8110b722ec46aace1c1d1b260e") == (
        "0x0000000000000000000000008ca88e083ec89a8110b722ec46aace1c1d1b260e"
    )


def test_encode_bool() -> None:
    assert encode(BOOL, True) == "0x01"
    assert encode(BOOL, False) == "0x00"
    with pytest.raises(InvalidValueError):
        encode(BOOL, 1)


@pytest.mark.parametrize(
    ("bits", "value", "expected"),
    [
        (256, 100, "0x" + "0" * 62 + "64"),
        (8, 100, "0x64"),
        (128, 100, "0x" + "0" * 30 + "64"),
    ],
)
def test_encode_uint(bits: int, value: int, expected: str) -> None:
    assert encode(Uint(bits), value) == expected


def test_encode_uint_overflow() -> None:
    with pytest.raises(CodecOverflowError):
        encode(Uint(8), 256)
    with pytest.raises(CodecOverflowError):
        encode(Uint(8), -1)
    with pytest.raises(InvalidValueError):
        encode(Uint(8), "1")


@pytest.mark.parametrize(
    ("bits", "value", "expected"),
    [
        (256, 100, "0x" + "0" * 62 + "64"),
        (256, -100, "0x8" + "0" * 61 + "64"),
        (8, 1, "0x01"),
        (8, -1, "0x81"),
        (128, 100, "0x" + "0" * 30 + "64"),
        (128, -100, "0x8" + "0" * 29 + "64"),
    ],
)
def test_encode_int(bits: int, value: int, expected: str) -> None:
    assert encode(Int(bits), value) == expected


def test_encode_int_overflow() -> None:
    with pytest.raises(CodecOverflowError):
        encode(Int(8), 128)
    with pytest.raises(CodecOverflowError):
        encode(Int(8), -128)


def test_twos_complement_limits() -> None:
    for i in HEX_DIGITS:
        for j in HEX_DIGITS:
            encoded = f"0x{i}{j}"
            if encoded == "0x80":
                continue
            [value], leftover = decode([Int(8)], encoded)
            assert leftover is None
            assert -127 <= value <= 127
            assert encode(Int(8), value) == encoded


@pytest.mark.parametrize("bits", [8, 16, 64, 256])
def test_int_round_trip_at_bounds(bits: int) -> None:
    for value in (-(2 ** (bits - 1) - 1), -1, 0, 1, 2 ** (bits - 1) - 1):
        assert decode([Int(bits)], encode(Int(bits), value))[0] == [value]
    for value in (0, 1, 2**bits - 1):
        assert decode([Uint(bits)], encode(Uint(bits), value))[0] == [value]


def test_encode_address() -> None:
    address = "0x97205dcb8ab93d4a8456731e8fb1bc015cd41194"
    assert encode(ADDRESS, address) == address
    assert encode(ADDRESS, address[2:]) == address


def test_encode_address_with_zero_left_padding() -> None:
    assert encode(ADDRESS, "0x205dcb8ab93d4a8456731e8fb1bc015cd41194") == "0x00205dcb8ab93d4a8456731e8fb1bc015cd41194"
    assert encode(ADDRESS, "0x5A5F22694352C15B00323844aD545ABb2B11028") == "0x05A5F22694352C15B00323844aD545ABb2B11028"


def test_encode_address_too_long() -> None:
    with pytest.raises(TooLongError):
        encode(ADDRESS, "0x" + "1" * 41)


def test_encode_bytes() -> None:
    assert encode(Bytes(1), "0x42") == "0x42"
    assert encode(Bytes(2), "0x42") == "0x4200"
    assert encode(Bytes(4), "foo") == "0x666f6f00"
    assert encode(Bytes(4), b"foo") == "0x666f6f00"
    assert encode(Bytes(2), "0xABCD") == "0xabcd"


def test_encode_bytes_too_long() -> None:
    with pytest.raises(TooLongError):
        encode(Bytes(2), "0x424242")


def test_encode_topic_of_array_is_unrecognized() -> None:
    with pytest.raises(UnrecognizedTypeError):
        encode(Topic(Array(Uint(8))), [1])


def test_encode_topic_rejects_block_tags() -> None:
    assert encode(Topic(QUANTITY), 100) == "0x" + "0" * 62 + "64"
    with pytest.raises(InvalidValueError):
        encode(Topic(QUANTITY), "latest")


def test_module_level_types() -> None:
    assert UINT256 == Uint(256)
    assert hex_width(UINT256) == 64
    assert hex_width(BOOL) == 2
    assert hex_width(ADDRESS) == 40
