import pytest

@pytest.mark.parametrize(
    "text,expected",
    [("16", 16), ("0x10", 16), ("0b101", 5), ("0o17", 15), (" 1_000 ", 1000), ("-3", -3), ("0xFF", 255)],
)
def test_parse_int_maybe(logic, text, expected):
    assert logic.parse_int_maybe(text) == expected

@pytest.mark.parametrize("bad", ["", "   ", "x10", "1.5"])
def test_parse_int_maybe_errors(logic, bad):
    with pytest.raises(ValueError):
        logic.parse_int_maybe(bad)
