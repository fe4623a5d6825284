"""
XML document writer.

Produces a <Numbers> root with one <Number> child per value:

    <Numbers><Number>9</Number><Number>5</Number></Numbers>
"""

from typing import Sequence

from lxml import etree

from number_parser.config_models import FormatType
from number_parser.writers.base_writer import BaseWriter

ROOT_TAG = "Numbers"
ITEM_TAG = "Number"


def build_numbers_element(numbers: Sequence[int]) -> etree._Element:
    """Build the <Numbers> element tree for a sequence of integers."""
    root = etree.Element(ROOT_TAG)
    for number in numbers:
        etree.SubElement(root, ITEM_TAG).text = str(number)
    return root


class XMLWriter(BaseWriter):
    """Writes numbers as an XML document."""

    format_type = FormatType.XML

    def serialize(self, numbers: Sequence[int]) -> bytes:
        return etree.tostring(
            build_numbers_element(numbers),
            xml_declaration=self.config.xml_declaration,
            encoding=self.config.encoding,
            pretty_print=self.config.pretty_print,
        )
