"""Tests for the text, JSON and XML writers."""

import json

import pytest
from lxml import etree

from number_parser.config_models import NumberParserConfig
from number_parser.errors import PersistError
from number_parser.writers import JSONWriter, TextWriter, XMLWriter


NUMBERS = [9, 5, 3, 1]
XML_NUMBERS = "<Numbers><Number>9</Number><Number>5</Number><Number>3</Number><Number>1</Number></Numbers>"


def test_text_writer_persist(temp_output_dir):
    """Test text output is comma joined with no trailing newline."""
    path = temp_output_dir / "output.text"
    written = TextWriter().persist(NUMBERS, path)

    assert path.read_text() == "9,5,3,1"
    assert written == len("9,5,3,1")


def test_text_writer_custom_delimiter():
    writer = TextWriter(NumberParserConfig(text_delimiter=";"))
    assert writer.serialize([3, -1]) == b"3;-1"


def test_json_writer_persist(temp_output_dir):
    """Test JSON output is a compact array."""
    path = temp_output_dir / "output.json"
    JSONWriter().persist(NUMBERS, path)

    assert path.read_text() == "[9,5,3,1]"
    assert json.loads(path.read_text()) == NUMBERS


def test_json_writer_pretty_print():
    payload = JSONWriter(NumberParserConfig(pretty_print=True)).serialize([2, 1])
    assert payload == b"[\n  2,\n  1\n]"


def test_xml_writer_persist(temp_output_dir):
    """Test XML output structure and ordering."""
    path = temp_output_dir / "output.xml"
    XMLWriter().persist(NUMBERS, path)

    assert path.read_text() == XML_NUMBERS
    root = etree.fromstring(path.read_bytes())
    assert root.tag == "Numbers"
    assert [child.tag for child in root] == ["Number"] * 4
    assert [int(child.text) for child in root] == NUMBERS


def test_xml_writer_negative_numbers():
    payload = XMLWriter().serialize([0, -12])
    assert payload == b"<Numbers><Number>0</Number><Number>-12</Number></Numbers>"


def test_xml_writer_declaration():
    """Test the optional XML declaration."""
    payload = XMLWriter(NumberParserConfig(xml_declaration=True)).serialize([1])
    assert payload.startswith(b"<?xml version=")
    assert payload.endswith(b"<Numbers><Number>1</Number></Numbers>")


def test_xml_writer_pretty_print():
    payload = XMLWriter(NumberParserConfig(pretty_print=True)).serialize([2, 1])
    root = etree.fromstring(payload)
    assert [int(child.text) for child in root] == [2, 1]
    assert b"\n  <Number>2</Number>" in payload


def test_xml_writer_empty_sequence():
    assert XMLWriter().serialize([]) == b"<Numbers/>"


@pytest.mark.parametrize("writer_cls", [TextWriter, JSONWriter, XMLWriter])
def test_persist_overwrites_existing_file(writer_cls, temp_output_dir):
    """Test an existing file is replaced, not appended to."""
    path = temp_output_dir / "output.any"
    path.write_text("stale content that is much longer than the new output")

    writer = writer_cls()
    writer.persist([1], path)

    assert path.read_bytes() == writer.serialize([1])


def test_persist_creates_missing_directory(tmp_path):
    path = tmp_path / "nested" / "dir" / "output.json"
    JSONWriter().persist([1, 0], path)
    assert path.read_text() == "[1,0]"


def test_persist_wraps_os_errors(tmp_path):
    """Test that an unwritable path raises PersistError."""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    with pytest.raises(PersistError) as exc_info:
        TextWriter().persist([1], blocker / "output.text")
    assert isinstance(exc_info.value.__cause__, OSError)


@pytest.mark.parametrize("writer_cls", [TextWriter, JSONWriter, XMLWriter])
def test_decoded_output_matches_input_order(writer_cls):
    """Decoding any writer's output gives back the sequence it was given."""
    numbers = [12, 7, 7, 0, -3]
    payload = writer_cls().serialize(numbers).decode("utf-8")

    if writer_cls is TextWriter:
        decoded = [int(piece) for piece in payload.split(",")]
    elif writer_cls is JSONWriter:
        decoded = json.loads(payload)
    else:
        decoded = [int(child.text) for child in etree.fromstring(payload.encode("utf-8"))]

    assert decoded == numbers
    assert sorted(decoded, reverse=True) == decoded


def test_xml_writer_encoding_alias(temp_output_dir):
    """Test an encoding alias is usable for XML output."""
    config = NumberParserConfig(encoding="u8", xml_declaration=True)
    path = temp_output_dir / "output.xml"
    XMLWriter(config).persist([2, 1], path)

    payload = path.read_bytes()
    assert b"utf-8" in payload.splitlines()[0]
    assert [int(child.text) for child in etree.fromstring(payload)] == [2, 1]


@pytest.mark.parametrize("writer_cls,encoding", [
    (TextWriter, "hex"),
    (JSONWriter, "rot13"),
    (XMLWriter, "u8"),
])
def test_persist_wraps_encoding_errors(writer_cls, encoding, temp_output_dir):
    """Test an unusable encoding raises PersistError and writes nothing."""
    config = NumberParserConfig.model_construct(encoding=encoding)
    path = temp_output_dir / "output.out"

    with pytest.raises(PersistError, match="Failed to encode") as exc_info:
        writer_cls(config).persist([1], path)

    assert isinstance(exc_info.value.__cause__, LookupError)
    assert not path.exists()
