import pytest

from mcukit.printing import BUFFER_SIZE, PrintCharArray, PrintSize, PrintString


def test_char_array_captures_text():
    p = PrintCharArray()
    assert p.write("abc") == 3
    assert p.write(b"de") == 2
    assert p.buffer() == b"abcde"
    assert len(p) == 5
    assert p.free() == BUFFER_SIZE - 5


def test_char_array_single_byte():
    p = PrintCharArray()
    assert p.write(ord("x")) == 1
    assert p.buffer() == b"x"


def test_char_array_is_bounded():
    p = PrintCharArray()
    stored = p.write(b"z" * 300)
    assert stored == BUFFER_SIZE - 1
    assert len(p) == BUFFER_SIZE - 1
    assert p.write("more") == 0
    assert p.free() == 1


def test_char_array_clear():
    p = PrintCharArray()
    p.write("hello")
    p.clear()
    assert len(p) == 0
    assert p.buffer() == b""
    assert p.free() == BUFFER_SIZE


@pytest.mark.parametrize("value", [-1, 256])
def test_invalid_byte_rejected(value):
    with pytest.raises(ValueError):
        PrintCharArray().write(value)


def test_print_size_accumulates():
    p = PrintSize()
    assert p.write("hello") == 5
    assert p.write(b"\x00\x01") == 2
    assert p.write(65) == 1
    assert p.total() == 5 + 2 + 1


def test_print_string_round_trip():
    p = PrintString()
    p.write("temp=")
    p.write(b"21")
    p.write(ord("C"))
    assert p.text() == "temp=21C"


def test_print_string_unicode_and_clear():
    p = PrintString()
    text = "graden \u00b0"
    assert p.write(text) == len(text.encode("utf-8"))
    assert p.text() == text
    p.clear()
    assert p.text() == ""