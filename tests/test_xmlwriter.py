import io
import xml.etree.ElementTree as ET

import pytest

from mcukit.xmlwriter import HEX, XML_HEADER, XMLWriter


def make():
    out = io.StringIO()
    return XMLWriter(out), out


def test_header():
    w, out = make()
    w.header()
    assert out.getvalue() == XML_HEADER + "\n"


def test_nested_document_parses():
    w, out = make()
    w.tag_open("root")
    w.tag_open("item", "first")
    w.write_node("value", "hello")
    w.tag_close()
    w.tag_close()
    root = ET.fromstring(out.getvalue())
    assert root.tag == "root"
    item = root.find("item")
    assert item.get("name") == "first"
    assert item.find("value").text == "hello"


def test_indentation_follows_depth():
    w, out = make()
    w.tag_open("a")
    w.tag_open("b")
    w.tag_close()
    w.tag_close()
    lines = out.getvalue().splitlines()
    assert lines[0] == "<a>"
    assert lines[1] == " " * 2 + "<b>"
    assert lines[2] == " " * 2 + "</b>"
    assert lines[3] == "</a>"


def test_indent_size():
    w, out = make()
    w.set_indent_size(4)
    w.tag_open("a")
    w.tag_open("b")
    lines = out.getvalue().splitlines()
    assert lines[1] == " " * 4 + "<b>"


def test_escaping_round_trip():
    w, out = make()
    text = "a<b & \"c\" 'd'>"
    w.write_node("t", text)
    assert "&lt;" in out.getvalue()
    assert ET.fromstring(out.getvalue()).text == text


def test_escape_writes_entities():
    w, out = make()
    w.escape("<&>")
    assert out.getvalue() == "&lt;&amp;&gt;"


def test_self_closing_tag_with_fields():
    w, out = make()
    w.tag_start("point")
    w.tag_field("x", 12)
    w.tag_field("visible", True)
    w.tag_field("label", "a&b")
    w.tag_end()
    node = ET.fromstring(out.getvalue())
    assert node.get("x") == "12"
    assert node.get("visible") == "true"
    assert node.get("label") == "a&b"
    assert out.getvalue().endswith("/>\n")


def test_numeric_formats():
    w, out = make()
    w.tag_open("r")
    w.write_node("h", 255, base=HEX)
    w.write_node("f", 3.14159, decimals=2)
    w.write_node("n", -12)
    w.write_node("b", False)
    w.tag_close()
    root = ET.fromstring(out.getvalue())
    assert root.find("h").text == "FF"
    assert root.find("f").text == "3.14"
    assert root.find("n").text == "-12"
    assert root.find("b").text == "false"


def test_comment_single_line():
    w, out = make()
    w.comment("note")
    assert out.getvalue() == "\n<!-- note -->\n"


def test_comment_multiline_keeps_text_on_own_line():
    w, out = make()
    w.comment("note", multiline=True)
    assert out.getvalue().splitlines() == ["", "<!-- ", "note", " -->"]


def test_close_without_open_raises():
    w, _ = make()
    with pytest.raises(IndexError):
        w.tag_close()


def test_reset_forgets_open_tags():
    w, _ = make()
    w.tag_open("a")
    w.reset()
    with pytest.raises(IndexError):
        w.tag_close()


def test_raw_and_manual_indent():
    w, out = make()
    w.incr_indent()
    w.indent()
    w.raw("x")
    w.decr_indent()
    w.indent()
    w.raw("y")
    assert out.getvalue() == " " * 2 + "x" + "y"


def test_tag_open_with_newline_flag_only():
    w, out = make()
    w.tag_open("a", False)
    w.raw("v")
    w.tag_close(False)
    assert ET.fromstring(out.getvalue()).text == "v"
    assert "\n" not in out.getvalue().rstrip("\n")