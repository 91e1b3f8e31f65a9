import pytest

from gen3save.core.charset import PLACEHOLDER, decode_char, decode_string


def test_decode_char_is_total():
    for code in range(256):
        ch = decode_char(code)
        assert isinstance(ch, str)
        assert ch != ""
        assert decode_char(code) == ch


@pytest.mark.parametrize("code,expected", [
    (0xBB, "A"),
    (0xD4, "Z"),
    (0xD5, "a"),
    (0xEE, "z"),
    (0xA1, "0"),
    (0xAA, "9"),
    (0x00, " "),
    (0xB5, "♂"),
    (0xB6, "♀"),
])
def test_known_glyphs(code, expected):
    assert decode_char(code) == expected


@pytest.mark.parametrize("code", [0x0A, 0x40, 0x80, 0xF7, 0xFC, 0xFF])
def test_unmapped_bytes_use_placeholder(code):
    assert decode_char(code) == PLACEHOLDER


def test_decode_string_stops_at_terminator():
    assert decode_string(bytes([0xCC, 0xBF, 0xBE, 0xFF, 0xBB, 0xBB, 0xBB])) == "RED"


def test_decode_string_respects_max_len():
    data = bytes([0xC7, 0xBB, 0xDE, 0xDD, 0xBE, 0xDD, 0xD9, 0xBB])
    assert decode_string(data, max_len=7) == "MAjiDie"


def test_decode_string_keeps_padding_and_unknown_bytes():
    assert decode_string(bytes([0xBB, 0x00, 0x40, 0xBC])) == "A ?B"
