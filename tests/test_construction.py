import pytest

from hexvalue import FormatError, HexValue, RangeError


def test_empty(Hex):
    value = Hex.empty()
    assert value.is_empty
    assert value.size == 0
    assert len(value) == 0
    assert value.last_index == -1
    assert value.to_bytes() == b""
    assert value.to_hex() == ""
    assert str(value) == ""


def test_empty_hex_string_is_empty_value(Hex):
    assert Hex.from_hex("") == Hex.empty()
    assert Hex.from_hex(" \n ").size == 0


@pytest.mark.parametrize(
    "text",
    ["0102AABB", "0102aabb", "01 02 AA BB", "01:02:AA:BB", "01_02_AA_BB", "01-02-AA-BB", "01:02-\nAA_ BB"],
)
def test_from_hex_accepts_separators_and_case(Hex, text):
    value = Hex.from_hex(text)
    assert value.to_hex() == "0102AABB"
    assert value.size == 4


def test_from_hex_mac_address(Hex):
    value = Hex.from_hex("C8-58-B3-B2-99-DB")
    assert value.to_hex() == "C858B3B299DB"
    assert value.size == 6
    assert value.last_index == 5


@pytest.mark.parametrize("bad", ["0102030", "0102030G", "0x0102"])
def test_from_hex_rejects_malformed(Hex, bad):
    with pytest.raises(FormatError):
        Hex.from_hex(bad)


def test_from_bytes_full(Hex):
    raw = bytes([0x01, 0x02, 0x03, 0xA0])
    value = Hex.from_bytes(raw)
    assert value.size == 4
    assert value.to_hex() == "010203A0"
    assert value.to_bytes() == raw
    assert [value[i] for i in range(4)] == [0x01, 0x02, 0x03, 0xA0]


@pytest.mark.parametrize(
    "offset,length,expected",
    [
        (2, None, "AABB"),
        (1, 2, "02AA"),
        (0, 0, ""),
        (4, None, ""),
        (4, 0, ""),
    ],
)
def test_from_bytes_offset_length(Hex, offset, length, expected):
    raw = bytes([0x01, 0x02, 0xAA, 0xBB])
    if length is None:
        value = Hex.from_bytes(raw, offset)
    else:
        value = Hex.from_bytes(raw, offset, length)
    assert value.to_hex() == expected


@pytest.mark.parametrize(
    "offset,length",
    [(-1, None), (0, -1), (6, None), (3, 3), (-1, 2)],
)
def test_from_bytes_rejects_bad_range(Hex, offset, length):
    raw = bytes([0x01, 0x02, 0x03, 0x04, 0x05])
    with pytest.raises(RangeError):
        Hex.from_bytes(raw, offset, length)


def test_from_bytes_copies_mutable_buffer(Hex):
    buf = bytearray(b"\x01\x02\x03")
    value = Hex.from_bytes(buf)
    buf[0] = 0xFF
    assert value.to_hex() == "010203"

    out = value.to_bytes()
    assert isinstance(out, bytes)
    assert out == b"\x01\x02\x03"


def test_from_bytes_accepts_int_iterables(Hex):
    assert Hex.from_bytes([0, 127, 255]).to_hex() == "007FFF"
    assert Hex.from_bytes(memoryview(b"\xde\xad")).to_hex() == "DEAD"


def test_from_bytes_rejects_out_of_range_ints(Hex):
    with pytest.raises(RangeError):
        Hex.from_bytes([0, 256])


@pytest.mark.parametrize("bad", [5, "0102"])
def test_from_bytes_rejects_non_buffers(Hex, bad):
    with pytest.raises(TypeError):
        Hex.from_bytes(bad)


def test_from_ascii(Hex):
    value = Hex.from_ascii("Hello")
    assert value.size == 5
    assert value.to_hex() == "48656C6C6F"
    assert value.to_bytes() == bytes([0x48, 0x65, 0x6C, 0x6C, 0x6F])
    assert value.to_ascii() == "Hello"


@pytest.mark.parametrize("bad", ["café", "€", "ok\x80"])
def test_from_ascii_rejects_non_ascii(Hex, bad):
    with pytest.raises(FormatError):
        Hex.from_ascii(bad)


def test_to_ascii_is_best_effort(Hex):
    assert Hex.from_hex("41FF42").to_ascii() == "A\ufffdB"


@pytest.mark.parametrize(
    "value,expected",
    [
        ("C858", "C858"),
        (b"\xc8\x58", "C858"),
        (bytearray(b"\x01"), "01"),
        ([1, 2], "0102"),
    ],
)
def test_of_dispatches_on_type(value, expected):
    assert HexValue.of(value).to_hex() == expected


def test_of_returns_existing_value():
    value = HexValue.of("01")
    assert HexValue.of(value) is value


def test_constructor_copies():
    assert HexValue(b"\x0a\x0b").to_hex() == "0A0B"
    assert HexValue().is_empty


def test_repr_and_bytes():
    value = HexValue.of("0A0B")
    assert repr(value) == "HexValue('0A0B')"
    assert bytes(value) == b"\x0a\x0b"
    assert list(value) == [0x0A, 0x0B]


@pytest.mark.parametrize("offset", [3, 4, 100])
def test_from_bytes_offset_past_end_names_offset(Hex, offset):
    with pytest.raises(RangeError, match="Offset past end of buffer"):
        Hex.from_bytes(b"\x01\x02", offset)


def test_from_bytes_offset_at_end_is_empty(Hex):
    assert Hex.from_bytes(b"\x01\x02", 2).is_empty
