"""A streaming XML writer with indentation and an open-tag stack."""

from __future__ import annotations

import math
from typing import Protocol

DEC = 10
HEX = 16
OCT = 8
BIN = 2

XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>'

_ESCAPES = str.maketrans(
    {'"': "&quot;", "'": "&apos;", "<": "&lt;", ">": "&gt;", "&": "&amp;"}
)
_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


class TextSink(Protocol):
    def write(self, text: str) -> object: ...


def _format_int(value: int, base: int) -> str:
    if base < 2:
        base = DEC
    if base > len(_DIGITS):
        raise ValueError(f"base must be at most {len(_DIGITS)}")
    if value < 0:
        if base == DEC:
            return "-" + _format_int(-value, DEC)
        value &= 0xFFFFFFFF
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rest = divmod(value, base)
        digits.append(_DIGITS[rest])
    return "".join(reversed(digits))


def _format_float(value: float, decimals: int) -> str:
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf"
    return f"{value:.{decimals}f}"


def _escaped(text: str) -> str:
    return text.translate(_ESCAPES)


def _format_value(value: object, base: int, decimals: int) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return _format_int(value, base)
    if isinstance(value, float):
        return _format_float(value, decimals)
    return _escaped(str(value))


class XMLWriter:
    """Writes XML to a text stream, closing tags in the order they were opened."""

    def __init__(self, stream: TextSink) -> None:
        self._stream = stream
        self.reset()

    def reset(self) -> None:
        """Reset indentation to 0 with a step of 2 and forget open tags."""
        self._indent = 0
        self._indent_step = 2
        self._tags: list[str] = []

    def _write(self, text: str) -> None:
        self._stream.write(text)

    def header(self) -> None:
        self._write(XML_HEADER + "\n")

    def comment(self, text: str, multiline: bool = False) -> None:
        """Write ``<!-- text -->``; multi-line comments are not indented."""
        self._write("\n")
        if not multiline:
            self.indent()
        self._write("<!-- ")
        if multiline:
            self._write("\n")
        self._write(text)
        if multiline:
            self._write("\n")
        self._write(" -->\n")

    def tag_open(self, tag: str, name: str | bool = "", newline: bool = True) -> None:
        """Write ``<tag>`` or ``<tag name="...">`` and push it on the tag stack."""
        if isinstance(name, bool):
            name, newline = "", name
        self._tags.append(tag)
        self.tag_start(tag)
        if name:
            self.tag_field("name", name)
        self.tag_end(newline, False)
        self._indent += self._indent_step

    def tag_close(self, indent: bool = True) -> None:
        """Write the closing tag of the most recently opened tag."""
        if not self._tags:
            raise IndexError("no open tag to close")
        self._indent -= self._indent_step
        if indent:
            self.indent()
        self._write(f"</{self._tags.pop()}>\n")

    def tag_start(self, tag: str) -> None:
        self.indent()
        self._write(f"<{tag}")

    def tag_field(
        self, field: str, value: object, base: int = DEC, decimals: int = 2
    ) -> None:
        """Write `` field="value"``; ints use ``base``, floats ``decimals``."""
        self._write(f' {field}="{_format_value(value, base, decimals)}"')

    def tag_end(self, newline: bool = True, add_slash: bool = True) -> None:
        if add_slash:
            self._write("/")
        self._write(">")
        if newline:
            self._write("\n")

    def write_node(
        self, tag: str, value: object, base: int = DEC, decimals: int = 2
    ) -> None:
        """Write ``<tag>value</tag>`` on one line."""
        self.tag_open(tag, "", False)
        self._write(_format_value(value, base, decimals))
        self.tag_close(False)

    def set_indent_size(self, size: int = 2) -> None:
        self._indent_step = size

    def incr_indent(self) -> None:
        self._indent += self._indent_step

    def decr_indent(self) -> None:
        self._indent -= self._indent_step

    def indent(self) -> None:
        self._write(" " * max(self._indent, 0))

    def raw(self, text: str) -> None:
        self._write(text)

    def escape(self, text: str) -> None:
        """Write ``text`` with the five XML special characters replaced."""
        self._write(_escaped(text))